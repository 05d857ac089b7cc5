# services/storage.py
import os
from typing import Dict, Optional
from datetime import datetime, timedelta, timezone
from urllib.parse import quote

from azure.storage.blob import BlobServiceClient, BlobSasPermissions, ContentSettings, generate_blob_sas

from config import AZURE_CONN_STR, AZURITE_SAS_VERSION, LOCAL_SAVE_DIR, PUBLIC_BASE_URL


def parse_conn_str(conn: str) -> Dict[str, Optional[str]]:
    if not conn:
        return {"AccountName": None, "AccountKey": None, "BlobEndpoint": None}

    if "UseDevelopmentStorage=true" in conn:
        return {
            "AccountName": "devstoreaccount1",
            "AccountKey": (
                "Eby8vdM02xNOcqFlqUwJPLlmEtlCDXJ1OUzFT50uSRZ6IFsu"
                "Fq2UVErCz4I6tq/K1SZFPTOtr/KBHBeksoGMGw=="
            ),
            "BlobEndpoint": "http://127.0.0.1:10000/devstoreaccount1",
        }

    parts = dict(p.split("=", 1) for p in conn.split(";") if "=" in p)
    return {
        "AccountName": parts.get("AccountName"),
        "AccountKey": parts.get("AccountKey"),
        "BlobEndpoint": parts.get("BlobEndpoint"),
    }


def blob_service_client():
    if not AZURE_CONN_STR:
        raise RuntimeError("AZURE_STORAGE_CONNECTION_STRING not set")
    info = parse_conn_str(AZURE_CONN_STR)
    if info.get("BlobEndpoint") and info.get("AccountKey"):
        return BlobServiceClient(account_url=info["BlobEndpoint"], credential=info["AccountKey"])
    return BlobServiceClient.from_connection_string(AZURE_CONN_STR)


def upload_and_sas(container: str, blob_name: str, data: bytes, content_type: Optional[str] = None,
                   ttl_minutes: int = 60) -> str:
    """Upload a generated document and return a read-only SAS download URL."""
    if not AZURE_CONN_STR:
        raise RuntimeError("AZURE_STORAGE_CONNECTION_STRING not set")

    info = parse_conn_str(AZURE_CONN_STR)
    account_name = info["AccountName"]
    blob_endpoint = info.get("BlobEndpoint")

    cc = blob_service_client().get_container_client(container)
    if not cc.exists():
        cc.create_container()

    settings = ContentSettings(
        content_type=content_type,
        content_disposition=f'attachment; filename="{os.path.basename(blob_name)}"',
    )
    cc.upload_blob(name=blob_name, data=data, overwrite=True, content_settings=settings)

    now = datetime.now(timezone.utc)
    sas_kwargs = dict(
        account_name=account_name,
        account_key=info["AccountKey"],
        container_name=container,
        blob_name=blob_name,
        permission=BlobSasPermissions(read=True),
        # allow 5 min clock skew
        start=now - timedelta(minutes=5),
        expiry=now + timedelta(minutes=ttl_minutes),
    )

    # Azurite only speaks http and an older SAS version
    if blob_endpoint and ("127.0.0.1" in blob_endpoint or "localhost" in blob_endpoint):
        sas_kwargs["protocol"] = "http"
        if AZURITE_SAS_VERSION:
            sas_kwargs["version"] = AZURITE_SAS_VERSION

    sas = generate_blob_sas(**sas_kwargs)

    base = blob_endpoint.rstrip("/") if blob_endpoint else f"https://{account_name}.blob.core.windows.net"
    # the SAS is already url-encoded; only the blob path is quoted
    return f"{base}/{container}/{quote(blob_name, safe='/')}?{sas}"


def local_path(blob_name: str) -> str:
    root = os.path.abspath(LOCAL_SAVE_DIR)
    full_path = os.path.abspath(os.path.join(root, blob_name))
    if os.path.commonpath([root, full_path]) != root:
        raise ValueError(f"Path escapes save directory: {blob_name}")
    return full_path


def save_local_and_url(blob_name: str, data: bytes) -> str:
    full_path = local_path(blob_name)
    os.makedirs(os.path.dirname(full_path), exist_ok=True)
    with open(full_path, "wb") as f:
        f.write(data)
    return f"{PUBLIC_BASE_URL}/local/{quote(blob_name, safe='/')}"
