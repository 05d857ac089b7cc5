# services/probes.py
import logging
from typing import Optional

from models.schemas import ProbeResult, ProbeStatus
from services.document_store import DocumentStore
from services.render_client import RenderClient

logging.basicConfig(level=logging.INFO)

BACKEND = "backend"
RENDERER = "renderer"


def check_backend(store: Optional[DocumentStore]) -> ProbeResult:
    if store is None:
        return ProbeResult(system=BACKEND, status=ProbeStatus.unknown, reachable=False,
                           detail="document store not configured")
    try:
        store.ping()
    except Exception as e:
        logging.warning(f"Document store not available: {e}")
        return ProbeResult(system=BACKEND, status=ProbeStatus.unavailable, reachable=False, detail=str(e))
    logging.info("Document store connected")
    return ProbeResult(system=BACKEND, status=ProbeStatus.ok, reachable=True)


def check_renderer(client: RenderClient, credential: Optional[str]) -> ProbeResult:
    """
    A missing /ping endpoint (404) counts as reachable, and so does a probe
    that errors out: the status turns `unknown` but generation proceeds.
    """
    if not credential:
        return ProbeResult(system=RENDERER, status=ProbeStatus.unknown, reachable=False,
                           detail="no API key")
    try:
        r = client.ping(credential)
    except Exception as e:
        logging.warning(f"Error checking rendering API: {e}")
        return ProbeResult(system=RENDERER, status=ProbeStatus.unknown, reachable=True, detail=str(e))

    if r.ok or r.status_code == 404:
        logging.info("Rendering API reachable")
        return ProbeResult(system=RENDERER, status=ProbeStatus.ok, reachable=True)
    return ProbeResult(system=RENDERER, status=ProbeStatus.unavailable, reachable=False,
                       detail=f"HTTP {r.status_code}")
