# routes/document_routes.py
import os
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, HTTPException, Header, Request
from fastapi.responses import FileResponse, Response

from config import RENDER_KEY, DOCX_MEDIA_TYPE, HTML_MEDIA_TYPE
from models.schemas import GenerateRequest
from services.errors import ValidationError
from services.pipeline import PipelineContext, generate
from services.probes import check_backend, check_renderer
from services.storage import local_path
from utils.text_utils import sanitize

logging.basicConfig(level=logging.INFO)

router = APIRouter()

MEDIA_TYPES = {".docx": DOCX_MEDIA_TYPE, ".html": HTML_MEDIA_TYPE}


def get_context(request: Request) -> PipelineContext:
    return request.app.state.context


def run_pipeline(ctx: PipelineContext, req: GenerateRequest):
    try:
        return generate(ctx, req.audit_id, req.document_type, req.api_key)
    except ValidationError as e:
        raise HTTPException(400, str(e))


@router.get("/healthz")
def healthz():
    return {"ok": True, "time": datetime.now(timezone.utc).isoformat()}


@router.get("/status")
def status(request: Request, x_render_key: Optional[str] = Header(None)):
    ctx = get_context(request)
    probes = [
        check_backend(ctx.store),
        check_renderer(ctx.render_client, x_render_key or RENDER_KEY),
    ]
    for p in probes:
        ctx.sink.report_system_status(p.system, p.status)
    return {p.system: p.model_dump(mode="json") for p in probes}


@router.post("/generate-document")
def generate_document(req: GenerateRequest, request: Request):
    logging.info(f"Generate request: audit={req.audit_id!r} type={req.document_type!r}")
    ctx = get_context(request)
    result = run_pipeline(ctx, req)
    kind, message = getattr(ctx.sink, "last_status", None) or ("success", "")
    return {
        "ok": result.success,
        "filename": result.filename,
        "url": result.url,
        "format": result.format,
        "fallback": result.fallback,
        "size_bytes": len(result.content),
        "status": {"kind": kind, "message": message},
    }


@router.post("/generate-document/download")
def download_document(req: GenerateRequest, request: Request):
    result = run_pipeline(get_context(request), req)
    return Response(
        content=result.content,
        media_type=result.media_type,
        headers={"Content-Disposition": f'attachment; filename="{sanitize(result.filename)}"'},
    )


@router.get("/documents")
def list_documents(request: Request):
    history = getattr(get_context(request).sink, "history", [])
    return {"documents": [d.model_dump(mode="json") for d in history]}


@router.get("/local/{path:path}")
def get_local_file(path: str):
    try:
        full = local_path(path)
    except ValueError:
        raise HTTPException(404, "Not found")
    if not os.path.isfile(full):
        raise HTTPException(404, "Not found")
    ext = os.path.splitext(full)[1].lower()
    return FileResponse(full, media_type=MEDIA_TYPES.get(ext, "application/octet-stream"),
                        filename=os.path.basename(full))
