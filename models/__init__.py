from .schemas import (
    Severity,
    Client,
    AuditMeta,
    Finding,
    Recommendation,
    AuditRecord,
    ProjectedDocument,
    RenderResult,
    ProbeStatus,
    ProbeResult,
    GenerateRequest,
    GeneratedDocument,
)

__all__ = [
    "Severity",
    "Client",
    "AuditMeta",
    "Finding",
    "Recommendation",
    "AuditRecord",
    "ProjectedDocument",
    "RenderResult",
    "ProbeStatus",
    "ProbeResult",
    "GenerateRequest",
    "GeneratedDocument",
]
