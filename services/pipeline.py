# services/pipeline.py
import logging
from dataclasses import dataclass, field
from typing import Optional

from models.schemas import RenderResult
from services.document_store import DocumentStore, build_store
from services.render_client import RenderClient
from services.sink import PresentationSink, StorageSink
from services.audit_resolver import resolve
from services.projector import project
from services.renderer import render
from services.probes import check_renderer, RENDERER
from services.errors import ValidationError
from utils.text_utils import clean_input

logging.basicConfig(level=logging.INFO)


@dataclass
class PipelineContext:
    store: Optional[DocumentStore] = None
    render_client: RenderClient = field(default_factory=RenderClient)
    sink: PresentationSink = field(default_factory=StorageSink)


def build_context() -> PipelineContext:
    return PipelineContext(store=build_store(), render_client=RenderClient(), sink=StorageSink())


def validate_inputs(audit_id: str, document_type: str, credential: str):
    values = {
        "api_key": clean_input(credential),
        "audit_id": clean_input(audit_id),
        "document_type": clean_input(document_type),
    }
    missing = [k for k, v in values.items() if not v]
    if missing:
        raise ValidationError(missing)
    return values["audit_id"], values["document_type"], values["api_key"]


def generate(ctx: PipelineContext, audit_id: str, document_type: str, credential: str) -> RenderResult:
    """
    Resolve, project and render one audit document, then hand it to the sink.
    Only missing input raises; every later failure degrades to a fallback.
    """
    sink = ctx.sink
    try:
        audit_id, document_type, credential = validate_inputs(audit_id, document_type, credential)
    except ValidationError:
        sink.report_status("error", "Por favor completa todos los campos")
        raise

    sink.report_status("info", "Generando documento...")
    probe = check_renderer(ctx.render_client, credential)
    sink.report_system_status(RENDERER, probe.status)

    sink.report_status("info", "Obteniendo datos de auditoría...")
    record = resolve(ctx.store, audit_id)

    sink.report_status("info", "Procesando datos...")
    doc = project(record, document_type)

    sink.report_status("info", "Generando documento final...")
    result = render(doc, credential, ctx.render_client)

    try:
        url = sink.emit_file(result, document_type)
    except Exception as e:
        logging.exception(f"Could not deliver {result.filename}")
        sink.report_status("error", f"Error: {e}")
        return result

    sink.report_status("success", f"Documento generado: {result.filename}")
    logging.info(f"Document {result.filename} generated ({result.format})")
    return result.model_copy(update={"url": url})
