# services/render_client.py
import json
import logging
from typing import Dict, Any, Optional

import requests

from config import RENDER_BASE, RENDER_TIMEOUT, DOCX_MEDIA_TYPE
from services.errors import RenderServiceError

logging.basicConfig(level=logging.INFO)


class RenderClient:
    """HTTP client for the external document-rendering API."""

    def __init__(self, base_url: str = RENDER_BASE, timeout: float = RENDER_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def auth_headers(self, credential: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {credential}"}

    def render(self, template: bytes, data: Dict[str, Any], credential: str, fmt: str = "docx") -> bytes:
        files = {
            "document": ("template.docx", template, DOCX_MEDIA_TYPE),
            "data": (None, json.dumps(data, ensure_ascii=False), "application/json"),
            "format": (None, fmt),
        }
        try:
            r = self.session.post(f"{self.base_url}/render", headers=self.auth_headers(credential),
                                  files=files, timeout=self.timeout)
        except requests.RequestException as e:
            raise RenderServiceError(f"POST /render failed: {e}") from e

        if not r.ok:
            raise RenderServiceError(f"POST /render returned {r.status_code}", status_code=r.status_code)
        return r.content

    def ping(self, credential: str) -> requests.Response:
        headers = dict(self.auth_headers(credential), **{"Content-Type": "application/json"})
        return self.session.get(f"{self.base_url}/ping", headers=headers, timeout=self.timeout)
