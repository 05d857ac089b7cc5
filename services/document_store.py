# services/document_store.py
import os
import logging
from typing import Dict, List, Any, Optional

import requests

from config import STORE_BASE, STORE_KEY, STORE_TIMEOUT, STORE_ID_FIELD, PROBE_COLLECTION
from services.errors import BackendUnavailable

logging.basicConfig(level=logging.INFO)


class DocumentStore:
    """Read-only view of the audit document database."""

    def get_document(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        raise NotImplementedError

    def query_by_field(self, collection: str, field: str, value: Any) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def ping(self) -> None:
        raise NotImplementedError


def eq(value: Any) -> str:
    return f"eq.{value}"


class RestDocumentStore(DocumentStore):
    """
    PostgREST-style store: each collection is a table served at {base}/{collection},
    filtered with `field=eq.value` query params.
    """

    def __init__(self, base_url: str, api_key: Optional[str] = None, timeout: float = STORE_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def headers(self) -> Dict[str, str]:
        key = self.api_key or os.getenv("STORE_API_KEY") or STORE_KEY
        return {"X-Api-Key": key} if key else {}

    def _get(self, collection: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        url = f"{self.base_url}/{collection.lstrip('/')}"
        try:
            r = self.session.get(url, headers=self.headers(), params=params, timeout=self.timeout)
            r.raise_for_status()
            rows = r.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise BackendUnavailable(f"GET {collection} failed ({status})") from e
        except (requests.RequestException, ValueError) as e:
            raise BackendUnavailable(f"GET {collection} failed: {e}") from e

        if not isinstance(rows, list):
            raise BackendUnavailable(f"GET {collection} returned {type(rows).__name__}, expected a list")
        return rows

    def get_document(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        rows = self._get(collection, {STORE_ID_FIELD: eq(doc_id), "limit": 1})
        return rows[0] if rows else None

    def query_by_field(self, collection: str, field: str, value: Any) -> List[Dict[str, Any]]:
        return self._get(collection, {field: eq(value)})

    def ping(self) -> None:
        self._get(PROBE_COLLECTION, {"limit": 1})


class InMemoryDocumentStore(DocumentStore):
    """Collections held in a dict of {collection: {doc_id: document}}."""

    def __init__(self, collections: Optional[Dict[str, Dict[str, Dict[str, Any]]]] = None):
        self.collections = collections or {}
        self.calls: List[tuple] = []

    def _collection(self, name: str) -> Dict[str, Dict[str, Any]]:
        if name not in self.collections:
            raise BackendUnavailable(f"collection {name} does not exist")
        return self.collections[name]

    def get_document(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        self.calls.append(("get_document", collection, doc_id))
        doc = self._collection(collection).get(doc_id)
        return dict(doc) if doc is not None else None

    def query_by_field(self, collection: str, field: str, value: Any) -> List[Dict[str, Any]]:
        self.calls.append(("query_by_field", collection, field, value))
        return [dict(d) for d in self._collection(collection).values() if d.get(field) == value]

    def ping(self) -> None:
        self.calls.append(("ping",))


def build_store() -> Optional[DocumentStore]:
    base = os.getenv("STORE_API_BASE") or STORE_BASE
    if not base:
        logging.warning("STORE_API_BASE not configured; audit data will be synthetic")
        return None
    logging.info(f"Using document store at {base}")
    return RestDocumentStore(base)
