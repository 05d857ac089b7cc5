"""Tests for configuration module."""


class TestConfig:
    """Test configuration values and environment variables."""

    def test_render_base_default(self):
        from config import RENDER_BASE
        assert RENDER_BASE is not None
        assert RENDER_BASE.startswith("https://")

    def test_azure_container_default(self):
        from config import AZURE_CONTAINER
        assert AZURE_CONTAINER == "audit-documents"

    def test_local_save_dir_default(self):
        from config import LOCAL_SAVE_DIR
        assert LOCAL_SAVE_DIR == "./_out"

    def test_audit_collections_order(self):
        from config import AUDIT_COLLECTIONS
        assert AUDIT_COLLECTIONS == ["auditorias", "audits", "auditoría"]

    def test_related_collections(self):
        from config import FINDINGS_COLLECTION, RECOMMENDATIONS_COLLECTION, AUDIT_REF_FIELD
        assert FINDINGS_COLLECTION == "hallazgos"
        assert RECOMMENDATIONS_COLLECTION == "recomendaciones"
        assert AUDIT_REF_FIELD == "auditoria_id"

    def test_placeholders(self):
        from config import DEFAULT_CLIENT_NAME, DEFAULT_AUDIT_ID
        assert DEFAULT_CLIENT_NAME == "Cliente no especificado"
        assert DEFAULT_AUDIT_ID == "N/A"

    def test_severity_labels_cover_every_severity(self):
        from config import SEVERITY_LABELS
        from models.schemas import Severity
        assert set(SEVERITY_LABELS) == {s.value for s in Severity}
