"""Tests for the FastAPI surface."""

import pytest
from fastapi.testclient import TestClient

from word2md.config.models import ServerConfig, Word2MdConfig
from word2md.converter import UNSUPPORTED_DOC_MESSAGE
from word2md.server import SECURITY_HEADERS, create_app

DOCX_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
PAYLOAD = b"PK\x03\x04 fake docx"


@pytest.fixture
def client(sample_config, mock_mammoth):
    return TestClient(create_app(sample_config))


# ---------------------------------------------------------------------------
# /api/convert
# ---------------------------------------------------------------------------


class TestApiConvert:
    def test_success(self, client):
        resp = client.post("/api/convert", files={"file": ("report.docx", PAYLOAD, DOCX_TYPE)})
        assert resp.status_code == 200
        assert resp.json() == {
            "success": True,
            "markdown": "Hello World",
            "originalFilename": "report.docx",
            "size": len(PAYLOAD),
        }

    def test_document_without_text(self, client, mock_mammoth, mammoth_result):
        mock_mammoth.return_value = mammoth_result("")
        resp = client.post("/api/convert", files={"file": ("blank.docx", PAYLOAD, DOCX_TYPE)})
        assert resp.status_code == 200
        assert resp.json()["markdown"] == ""

    def test_doc_rejected(self, client, mock_mammoth):
        resp = client.post("/api/convert", files={"file": ("legacy.DOC", PAYLOAD)})
        assert resp.status_code == 400
        assert resp.json() == {
            "success": False,
            "error": "Invalid file type",
            "message": UNSUPPORTED_DOC_MESSAGE,
        }
        mock_mammoth.assert_not_called()

    def test_missing_file(self, client):
        resp = client.post("/api/convert", files={"other": ("report.docx", PAYLOAD)})
        assert resp.status_code == 400
        body = resp.json()
        assert body["success"] is False
        assert body["error"] == "You must upload a file to convert."
        assert body["message"]

    def test_conversion_failure(self, client, mock_mammoth):
        mock_mammoth.side_effect = ValueError("File is not a zip file")
        resp = client.post("/api/convert", files={"file": ("broken.docx", b"nope")})
        assert resp.status_code == 500
        assert resp.json() == {
            "success": False,
            "error": "Internal server error",
            "message": "An unexpected error occurred during conversion.",
        }

    def test_uploaded_bytes_reach_extraction(self, client, mock_mammoth):
        client.post("/api/convert", files={"file": ("report.docx", PAYLOAD)})
        stream = mock_mammoth.call_args.args[0]
        assert stream.read() == PAYLOAD


# ---------------------------------------------------------------------------
# /raw
# ---------------------------------------------------------------------------


class TestRaw:
    def test_success(self, client):
        resp = client.post("/raw", files={"doc": ("report.docx", PAYLOAD, DOCX_TYPE)})
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/plain")
        assert resp.text == "Hello World"

    def test_doc_rejected(self, client, mock_mammoth):
        resp = client.post("/raw", files={"doc": ("legacy.doc", PAYLOAD)})
        assert resp.status_code == 400
        assert resp.text == UNSUPPORTED_DOC_MESSAGE
        mock_mammoth.assert_not_called()

    def test_missing_file(self, client):
        resp = client.post("/raw", files={"file": ("report.docx", PAYLOAD)})
        assert resp.status_code == 400
        assert resp.text == "You must upload a document to convert."


# ---------------------------------------------------------------------------
# Misc routes and middleware
# ---------------------------------------------------------------------------


class TestRoutes:
    def test_healthcheck(self, client):
        resp = client.get("/_healthcheck")
        assert resp.status_code == 200
        assert resp.text == "OK"

    def test_unknown_route(self, client):
        resp = client.get("/nope")
        assert resp.status_code == 404
        assert resp.text == "Not Found"

    @pytest.mark.parametrize("path", ["/api/convert", "/raw"])
    def test_wrong_method_is_not_found(self, client, path):
        resp = client.get(path)
        assert resp.status_code == 404
        assert resp.text == "Not Found"

    def test_security_headers(self, client):
        resp = client.get("/_healthcheck")
        for name, value in SECURITY_HEADERS.items():
            assert resp.headers[name] == value

    def test_converter_shared_across_requests(self, sample_config, mock_mammoth):
        app = create_app(sample_config)
        client = TestClient(app)
        client.post("/raw", files={"doc": ("a.docx", PAYLOAD)})
        shared = app.state.converter.renderer.default_converter
        client.post("/raw", files={"doc": ("b.docx", PAYLOAD)})
        assert app.state.converter.renderer.default_converter is shared

    def test_static_dir_mounted(self, tmp_path, mock_mammoth):
        (tmp_path / "index.html").write_text("<h1>word2md</h1>")
        config = Word2MdConfig(server=ServerConfig(static_dir=str(tmp_path)))
        client = TestClient(create_app(config))
        resp = client.get("/")
        assert resp.status_code == 200
        assert "word2md" in resp.text
        assert client.get("/_healthcheck").text == "OK"

    def test_missing_static_dir_ignored(self, tmp_path, mock_mammoth):
        config = Word2MdConfig(server=ServerConfig(static_dir=str(tmp_path / "dist")))
        client = TestClient(create_app(config))
        assert client.get("/").status_code == 404
