# main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from routes.document_routes import router
from services.pipeline import build_context
from services.probes import check_backend

logging.basicConfig(level=logging.INFO)


@asynccontextmanager
async def lifespan(app: FastAPI):
    ctx = app.state.context
    probe = check_backend(ctx.store)
    ctx.sink.report_system_status(probe.system, probe.status)
    ctx.sink.report_status("success", "Sistema inicializado - Listo para generar documentos")
    yield


# ------------------------------------------------------------------------------
# FastAPI app
# ------------------------------------------------------------------------------
app = FastAPI(title="Energy Audit Documents", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.context = build_context()
app.include_router(router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logging.info("== Pydantic Validation Errors ==")
    logging.info(exc.errors())
    return JSONResponse(status_code=422, content={"ok": False, "errors": jsonable_encoder(exc.errors())})
