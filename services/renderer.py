# services/renderer.py
import logging
from typing import Optional

from docx import Document

from config import SEVERITY_LABELS, DOCX_MEDIA_TYPE, HTML_MEDIA_TYPE
from models.schemas import ProjectedDocument, RenderResult
from services.render_client import RenderClient
from services.html_report import render_report_html
from utils.docx_utils import add_labeled_line, tight_paragraph, set_font_size, docx_bytes

logging.basicConfig(level=logging.INFO)


def build_template_docx(doc: ProjectedDocument) -> bytes:
    """Minimal Word template carrying the report text for the rendering API."""
    d = Document()
    d.add_heading("REPORTE DE AUDITORÍA ENERGÉTICA", level=1)

    add_labeled_line(d, "Cliente", doc.client_name)
    add_labeled_line(d, "Fecha", doc.audit_date)
    add_labeled_line(d, "Auditor", doc.auditor)

    d.add_heading("RESUMEN", level=2)
    d.add_paragraph(doc.summary)

    d.add_heading(f"HALLAZGOS ({doc.total_findings})", level=2)
    for i, f in enumerate(doc.findings, start=1):
        tight_paragraph(d.add_paragraph(f"{i}. {f.description} ({SEVERITY_LABELS[f.severity.value]})"))

    d.add_heading(f"RECOMENDACIONES ({doc.total_recommendations})", level=2)
    for i, r in enumerate(doc.recommendations, start=1):
        tight_paragraph(d.add_paragraph(f"{i}. {r.title}: {r.description}"))

    d.add_paragraph(f"Documento generado el {doc.generation_date} a las {doc.generation_time}")
    set_font_size(d, 11)
    return docx_bytes(d)


def html_fallback(doc: ProjectedDocument) -> RenderResult:
    content = render_report_html(doc).encode("utf-8")
    return RenderResult(
        success=True,
        content=content,
        filename=f"{doc.document_number}.html",
        media_type=HTML_MEDIA_TYPE,
        format="html",
        fallback=True,
    )


def render(doc: ProjectedDocument, credential: str, client: Optional[RenderClient] = None) -> RenderResult:
    client = client or RenderClient()
    try:
        logging.info(f"Rendering {doc.document_number} with the rendering API")
        body = client.render(
            build_template_docx(doc),
            doc.model_dump(mode="json"),
            credential,
            fmt="docx",
        )
        return RenderResult(
            success=True,
            content=body,
            filename=f"{doc.document_number}.docx",
            media_type=DOCX_MEDIA_TYPE,
            format="docx",
        )
    except Exception as e:
        logging.warning(f"Rendering API failed for {doc.document_number} ({e}); using HTML fallback")
        return html_fallback(doc)
