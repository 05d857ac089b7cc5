# services/sink.py
import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

import config
from models.schemas import RenderResult, GeneratedDocument, ProbeStatus
from services import storage
from utils.text_utils import sanitize

logging.basicConfig(level=logging.INFO)


class PresentationSink:
    """Where the pipeline reports progress and delivers finished files."""

    def report_status(self, kind: str, message: str) -> None:
        raise NotImplementedError

    def report_system_status(self, system: str, status: ProbeStatus) -> None:
        raise NotImplementedError

    def emit_file(self, result: RenderResult, document_type: str) -> Optional[str]:
        raise NotImplementedError


class StorageSink(PresentationSink):
    """
    Logs statuses and delivers documents to Azure Blob Storage when a
    connection string is configured, otherwise to LOCAL_SAVE_DIR.
    """

    def __init__(self, folder: str = "documents", max_history: int = 50):
        self.folder = folder.strip("/")
        self.max_history = max_history
        self.last_status: Optional[Tuple[str, str]] = None
        self.system_status: Dict[str, ProbeStatus] = {}
        self.history: List[GeneratedDocument] = []

    def report_status(self, kind: str, message: str) -> None:
        self.last_status = (kind, message)
        level = logging.ERROR if kind == "error" else logging.INFO
        logging.log(level, f"[{kind}] {message}")

    def report_system_status(self, system: str, status: ProbeStatus) -> None:
        self.system_status[system] = status
        logging.info(f"System {system}: {status.value}")

    def blob_name(self, filename: str) -> str:
        filename = sanitize(filename)
        return f"{self.folder}/{filename}" if self.folder else filename

    def emit_file(self, result: RenderResult, document_type: str) -> Optional[str]:
        name = self.blob_name(result.filename)
        logging.info(f"Emitting {result.filename} ({len(result.content)} bytes)")

        url = None
        if config.AZURE_CONN_STR:
            try:
                url = storage.upload_and_sas(config.AZURE_CONTAINER, name, result.content,
                                             content_type=result.media_type)
            except Exception as e:
                logging.warning(f"Blob upload failed for {name}: {e}")
                self.report_status("info", f"Documento guardado localmente: {result.filename}")
        if url is None:
            url = storage.save_local_and_url(name, result.content)

        self.history.insert(0, GeneratedDocument(
            filename=result.filename,
            document_type=document_type,
            format=result.format,
            url=url,
            size_bytes=len(result.content),
            created_at=datetime.now(timezone.utc),
        ))
        del self.history[self.max_history:]
        return url
