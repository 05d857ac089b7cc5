# services/projector.py
from datetime import datetime
from typing import Optional

from config import (
    DEFAULT_CLIENT_NAME,
    DEFAULT_AUDIT_ID,
    DEFAULT_AUDITOR,
    DEFAULT_FACILITY_TYPE,
    SUMMARY_FALLBACK_SUBJECT,
)
from models.schemas import AuditRecord, ProjectedDocument
from utils.text_utils import format_es_date, format_es_time, epoch_millis


def document_number(document_type: str, now: datetime) -> str:
    return f"{document_type.upper()}-{epoch_millis(now)}"


def generate_summary(record: AuditRecord) -> str:
    subject = (record.client.name if record.client else None) or SUMMARY_FALLBACK_SUBJECT
    count = len(record.findings)
    return (
        f"Se realizó una auditoría energética en {subject}. "
        f"Se identificaron {count} hallazgos que requieren atención. "
        f"Se han formulado recomendaciones específicas para mejorar la eficiencia energética."
    )


def project(record: AuditRecord, document_type: str, now: Optional[datetime] = None) -> ProjectedDocument:
    """
    Flatten an audit record into the template fields of one document.
    Missing client/audit values fall back to placeholders; only the
    timestamp-derived fields depend on the clock.
    """
    now = now or datetime.now()
    today = format_es_date(now)
    client = record.client
    audit = record.audit

    return ProjectedDocument(
        document_number=document_number(document_type, now),
        document_type=document_type,
        generation_date=today,
        generation_time=format_es_time(now),
        client_name=(client.name if client else None) or DEFAULT_CLIENT_NAME,
        client_email=(client.email if client else None) or "",
        client_phone=(client.phone if client else None) or "",
        audit_id=(audit.id if audit else None) or DEFAULT_AUDIT_ID,
        audit_date=(audit.date if audit else None) or today,
        auditor=(audit.auditor if audit else None) or DEFAULT_AUDITOR,
        facility_type=(audit.facility_type if audit else None) or DEFAULT_FACILITY_TYPE,
        total_findings=len(record.findings),
        total_recommendations=len(record.recommendations),
        summary=generate_summary(record),
        findings=list(record.findings),
        recommendations=list(record.recommendations),
    )
