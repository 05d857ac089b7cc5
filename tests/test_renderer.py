"""Tests for document rendering and the HTML fallback."""

import json
import pytest
import requests
from io import BytesIO
from unittest.mock import MagicMock
from bs4 import BeautifulSoup
from docx import Document

from services.renderer import render, html_fallback, build_template_docx
from services.render_client import RenderClient
from services.html_report import render_report_html
from services.errors import RenderServiceError


def session_returning(status_code=200, content=b""):
    session = MagicMock(spec=requests.Session)
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.content = content
    session.post.return_value = response
    session.get.return_value = response
    return session


class TestRender:
    """Tests for render function."""

    def test_render_success_returns_body_unchanged(self, sample_document, mock_render_client):
        result = render(sample_document, "key-123", mock_render_client)

        assert result.success is True
        assert result.content == b"PK\x03\x04rendered-docx"
        assert result.filename == f"{sample_document.document_number}.docx"
        assert result.format == "docx"
        assert result.fallback is False

    def test_render_sends_template_and_fields(self, sample_document, mock_render_client):
        render(sample_document, "key-123", mock_render_client)

        template, data, credential = mock_render_client.render.call_args.args
        assert credential == "key-123"
        assert data["client_name"] == "Textiles del Norte"
        assert data["total_findings"] == 2
        assert template[:2] == b"PK"
        assert mock_render_client.render.call_args.kwargs["fmt"] == "docx"

    def test_render_service_error_falls_back_to_html(self, sample_document, mock_render_client):
        mock_render_client.render.side_effect = RenderServiceError("500", status_code=500)

        result = render(sample_document, "key-123", mock_render_client)

        assert result.success is True
        assert result.filename == f"{sample_document.document_number}.html"
        assert result.media_type == "text/html"
        assert result.fallback is True

    def test_render_any_exception_falls_back(self, sample_document, mock_render_client):
        mock_render_client.render.side_effect = RuntimeError("unexpected")

        assert render(sample_document, "k", mock_render_client).format == "html"

    def test_http_500_yields_html_with_client_and_findings(self, sample_document):
        client = RenderClient("https://render.example.test/api", session=session_returning(500))

        result = render(sample_document, "key-123", client)

        assert result.filename.endswith(".html")
        soup = BeautifulSoup(result.content.decode("utf-8"), "html.parser")
        text = soup.get_text()
        assert soup.find("html") is not None
        assert "Textiles del Norte" in text
        for f in sample_document.findings:
            assert f.description in text

    def test_http_200_yields_docx_exact_body(self, sample_document):
        body = b"PK\x03\x04\x00\x01binary\xff"
        client = RenderClient("https://render.example.test/api", session=session_returning(200, body))

        result = render(sample_document, "key-123", client)

        assert result.filename.endswith(".docx")
        assert result.content == body


class TestRenderClient:
    """Tests for RenderClient."""

    def test_render_posts_multipart_with_bearer(self):
        session = session_returning(200, b"doc")
        client = RenderClient("https://render.example.test/api/", session=session)

        assert client.render(b"tpl", {"a": "ñ"}, "secret") == b"doc"

        args, kwargs = session.post.call_args
        assert args[0] == "https://render.example.test/api/render"
        assert kwargs["headers"]["Authorization"] == "Bearer secret"
        files = kwargs["files"]
        assert files["document"][0] == "template.docx"
        assert files["document"][1] == b"tpl"
        assert json.loads(files["data"][1]) == {"a": "ñ"}
        assert files["format"] == (None, "docx")

    def test_render_non_2xx_raises(self):
        client = RenderClient("https://r.test", session=session_returning(401))
        with pytest.raises(RenderServiceError) as exc_info:
            client.render(b"tpl", {}, "secret")
        assert exc_info.value.status_code == 401

    def test_render_network_error_raises(self):
        session = MagicMock(spec=requests.Session)
        session.post.side_effect = requests.ConnectionError("down")
        client = RenderClient("https://r.test", session=session)
        with pytest.raises(RenderServiceError):
            client.render(b"tpl", {}, "secret")

    def test_ping_uses_ping_endpoint(self):
        session = session_returning(404)
        client = RenderClient("https://r.test", session=session)

        assert client.ping("secret").status_code == 404
        assert session.get.call_args.args[0] == "https://r.test/ping"


class TestBuildTemplateDocx:
    """Tests for build_template_docx function."""

    def test_template_contains_report_text(self, sample_document):
        doc = Document(BytesIO(build_template_docx(sample_document)))
        text = "\n".join(p.text for p in doc.paragraphs)

        assert "REPORTE DE AUDITORÍA ENERGÉTICA" in text
        assert "Textiles del Norte" in text
        assert "1. Compresor sin mantenimiento (alta)" in text
        assert "2. Fugas de aire comprimido (baja)" in text
        assert "1. Programa de mantenimiento: Mantenimiento trimestral del compresor" in text
        assert "HALLAZGOS (2)" in text


class TestHtmlReport:
    """Tests for the HTML fallback document."""

    def test_html_fallback_result(self, sample_document):
        result = html_fallback(sample_document)
        assert result.filename == f"{sample_document.document_number}.html"
        assert result.content.decode("utf-8").startswith("<!DOCTYPE html>")

    def test_html_sections(self, sample_document):
        soup = BeautifulSoup(render_report_html(sample_document), "html.parser")

        assert sample_document.document_number in soup.title.get_text()
        assert len(soup.select("div.hallazgo")) == 2
        assert len(soup.select("div.recomendacion")) == 1
        assert "Criticidad: alta" in soup.select("div.hallazgo")[0].get_text()
        assert "Documento generado el 15/6/2024 a las 9:05:07" in soup.get_text()

    def test_html_escapes_values(self, fixed_now):
        from models.schemas import AuditRecord, Client
        from services.projector import project

        doc = project(AuditRecord(client=Client(name="<script>x</script> & Co")), "informe", now=fixed_now)
        page = render_report_html(doc)

        assert "<script>x</script>" not in page
        assert "&lt;script&gt;" in page
