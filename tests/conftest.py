"""
Pytest configuration and fixtures for the energy audit document test suite.
"""

import os
import sys
import pytest
from datetime import datetime
from unittest.mock import MagicMock, patch

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient


@pytest.fixture
def sample_collections():
    """Store contents for one audit spread across the usual collections."""
    return {
        "auditorias": {
            "A-100": {
                "id": "A-100",
                "fecha": "12/3/2024",
                "auditor": "María López",
                "tipo_instalacion": "Comercial",
                "cliente_id": "C-7",
            },
        },
        "audits": {},
        "hallazgos": {
            "h1": {"auditoria_id": "A-100", "descripcion": "Compresor sin mantenimiento",
                   "criticidad": "alta", "ubicacion": "Sala de máquinas"},
            "h2": {"auditoria_id": "A-100", "descripcion": "Fugas de aire comprimido",
                   "criticidad": "baja", "ubicacion": "Línea 2"},
            "h3": {"auditoria_id": "A-999", "descripcion": "Otro sitio",
                   "criticidad": "media", "ubicacion": "N/A"},
        },
        "recomendaciones": {
            "r1": {"auditoria_id": "A-100", "titulo": "Programa de mantenimiento",
                   "descripcion": "Mantenimiento trimestral del compresor",
                   "ahorro_estimado": "12% del consumo"},
        },
        "clientes": {
            "C-7": {"nombre": "Textiles del Norte", "email": "energia@textiles.mx",
                    "telefono": "+52 81 5555 0101"},
        },
    }


@pytest.fixture
def sample_store(sample_collections):
    from services.document_store import InMemoryDocumentStore
    return InMemoryDocumentStore(sample_collections)


@pytest.fixture
def sample_record():
    """A small resolved audit record."""
    from models.schemas import AuditRecord, AuditMeta, Client, Finding, Recommendation, Severity

    return AuditRecord(
        client=Client(name="Textiles del Norte", email="energia@textiles.mx", phone="+52 81 5555 0101"),
        audit=AuditMeta(id="A-100", date="12/3/2024", auditor="María López", facility_type="Comercial"),
        findings=[
            Finding(description="Compresor sin mantenimiento", severity=Severity.high,
                    location="Sala de máquinas"),
            Finding(description="Fugas de aire comprimido", severity=Severity.low, location="Línea 2"),
        ],
        recommendations=[
            Recommendation(title="Programa de mantenimiento",
                           description="Mantenimiento trimestral del compresor",
                           estimated_savings="12% del consumo"),
        ],
    )


@pytest.fixture
def fixed_now():
    return datetime(2024, 6, 15, 9, 5, 7)


@pytest.fixture
def sample_document(sample_record, fixed_now):
    from services.projector import project
    return project(sample_record, "informe", now=fixed_now)


@pytest.fixture
def mock_render_client():
    """Render client whose API calls are mocks."""
    from services.render_client import RenderClient

    client = MagicMock(spec=RenderClient)
    client.render.return_value = b"PK\x03\x04rendered-docx"
    client.ping.return_value = MagicMock(ok=True, status_code=200)
    return client


@pytest.fixture
def local_output(tmp_path):
    """Send emitted files to a temporary directory instead of Azure."""
    with patch('services.storage.LOCAL_SAVE_DIR', str(tmp_path)), \
            patch('services.storage.PUBLIC_BASE_URL', 'http://localhost:8000'), \
            patch('config.AZURE_CONN_STR', None):
        yield tmp_path


@pytest.fixture
def pipeline_context(mock_render_client, local_output):
    from services.pipeline import PipelineContext
    from services.sink import StorageSink

    return PipelineContext(store=None, render_client=mock_render_client, sink=StorageSink())


@pytest.fixture
def test_client(pipeline_context):
    """Create a FastAPI test client wired to the test pipeline context."""
    from main import app

    original = app.state.context
    app.state.context = pipeline_context
    yield TestClient(app)
    app.state.context = original

