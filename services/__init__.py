from .errors import (
    DocumentServiceError,
    BackendUnavailable,
    RecordNotFound,
    RenderServiceError,
    ValidationError,
)
from .storage import upload_and_sas, save_local_and_url
from .document_store import DocumentStore, RestDocumentStore, InMemoryDocumentStore, build_store
from .render_client import RenderClient
from .html_report import render_report_html
from .renderer import render, html_fallback, build_template_docx
from .audit_resolver import resolve, synthetic_record
from .projector import project, generate_summary
from .probes import check_backend, check_renderer
from .sink import PresentationSink, StorageSink
from .pipeline import PipelineContext, build_context, generate

__all__ = [
    "DocumentServiceError",
    "BackendUnavailable",
    "RecordNotFound",
    "RenderServiceError",
    "ValidationError",
    "upload_and_sas",
    "save_local_and_url",
    "DocumentStore",
    "RestDocumentStore",
    "InMemoryDocumentStore",
    "build_store",
    "RenderClient",
    "render_report_html",
    "render",
    "html_fallback",
    "build_template_docx",
    "resolve",
    "synthetic_record",
    "project",
    "generate_summary",
    "check_backend",
    "check_renderer",
    "PresentationSink",
    "StorageSink",
    "PipelineContext",
    "build_context",
    "generate",
]
