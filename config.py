# config.py
import os

# Document Store Configuration
STORE_BASE = os.getenv("STORE_API_BASE")  # optional; no store means synthetic data
STORE_KEY = os.getenv("STORE_API_KEY")
STORE_TIMEOUT = float(os.getenv("STORE_TIMEOUT", "20"))

# Rendering Service Configuration
RENDER_BASE = os.getenv("RENDER_API_BASE", "https://app.documentero.com/api")
RENDER_KEY = os.getenv("RENDER_API_KEY")
RENDER_TIMEOUT = float(os.getenv("RENDER_TIMEOUT", "60"))

# Azure Storage Configuration
AZURE_CONTAINER = os.getenv("AZURE_BLOB_CONTAINER", "audit-documents")
AZURE_CONN_STR = os.getenv("AZURE_STORAGE_CONNECTION_STRING")  # optional
AZURITE_SAS_VERSION = os.getenv("AZURITE_SAS_VERSION", "2021-08-06")

# Local Storage Configuration
LOCAL_SAVE_DIR = os.getenv("LOCAL_SAVE_DIR", "./_out")
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "http://localhost:8000")

# Collections, tried in order for the audit document
AUDIT_COLLECTIONS = ["auditorias", "audits", "auditoría"]
FINDINGS_COLLECTION = "hallazgos"
RECOMMENDATIONS_COLLECTION = "recomendaciones"
CLIENTS_COLLECTION = "clientes"
AUDIT_REF_FIELD = "auditoria_id"
STORE_ID_FIELD = "id"
PROBE_COLLECTION = "test"

# Placeholders used when the audit record is incomplete
DEFAULT_CLIENT_NAME = "Cliente no especificado"
DEFAULT_AUDIT_ID = "N/A"
DEFAULT_AUDITOR = "Auditor Energético"
DEFAULT_FACILITY_TYPE = "Industrial"
SUMMARY_FALLBACK_SUBJECT = "la instalación"

# Display labels for finding severities
SEVERITY_LABELS = {
    "high": "alta",
    "medium": "media",
    "low": "baja",
}

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
HTML_MEDIA_TYPE = "text/html"
