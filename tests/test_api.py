"""Tests for the HTTP surface: /, /describe and /process."""

import pytest
from bs4 import BeautifulSoup
from fastapi.testclient import TestClient

from docmeta.main import app

client = TestClient(app)


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Clear the slowapi in-memory counter before every test."""
    app.state.limiter._storage.reset()
    yield


_CONCEPTUAL_HTML = """
<!DOCTYPE html>
<html>
<head><title>Getting Started</title></head>
<body>
  <article id="_content">
    <h1>Getting Started</h1>
    <p>This guide walks through installation. It takes five minutes.</p>
  </article>
</body>
</html>
"""

_REFERENCE_HTML = """
<!DOCTYPE html>
<html>
<head><title>Class Widget</title></head>
<body>
  <article id="_content">
    <h1>Class Widget</h1>
    <div class="markdown level0 summary"><p>Represents a widget on screen.</p></div>
  </article>
</body>
</html>
"""

_PAGE_WITHOUT_SUMMARY = """
<html><head><title>Class Gadget</title></head>
<body><article><h1>Class Gadget</h1></article></body></html>
"""


def _manifest(*names: str, doc_type: str = "Conceptual") -> dict:
    return {
        "source_base_path": "/src",
        "files": [
            {
                "type": doc_type,
                "source_relative_path": f"{name}.md",
                "output": {".html": {"relative_path": f"{name}.html"}},
            }
            for name in names
        ],
    }


class TestHealth:
    def test_root(self):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.json() == {"message": "Hello from docmeta"}


class TestDescribe:
    def test_conceptual_page(self):
        resp = client.post("/describe", json={"html": _CONCEPTUAL_HTML})
        assert resp.status_code == 200
        data = resp.json()
        assert data["excerpt"] == "This guide walks through installation. It takes five minutes."
        assert data["description"] == "This guide walks through installation."
        assert data["meta"] == [
            {"attribute": "name", "value": "description", "content": "This guide walks through installation."}
        ]
        soup = BeautifulSoup(data["html"], "lxml")
        meta = soup.head.find("meta", attrs={"name": "description"})
        assert meta["content"] == "This guide walks through installation."

    def test_reference_page(self):
        resp = client.post(
            "/describe",
            json={"html": _REFERENCE_HTML, "document_type": "ManagedReference"},
        )
        assert resp.status_code == 200
        assert resp.json()["description"] == "Represents a widget on screen."

    def test_settings_are_applied(self):
        resp = client.post(
            "/describe",
            json={
                "html": _CONCEPTUAL_HTML,
                "settings": {"og_title": True, "site_name": "Widget Docs", "description_length": 20},
            },
        )
        data = resp.json()
        assert data["description"] == "This guide walks ..."
        values = [tag["value"] for tag in data["meta"]]
        assert values == ["description", "og:title", "og:site_name"]

    def test_no_summary_yields_no_description(self):
        resp = client.post(
            "/describe",
            json={
                "html": _PAGE_WITHOUT_SUMMARY,
                "document_type": "ManagedReference",
                "settings": {"theme_color": "#123456"},
            },
        )
        data = resp.json()
        assert data["excerpt"] is None
        assert data["description"] is None
        assert data["meta"] == [{"attribute": "name", "value": "theme-color", "content": "#123456"}]

    def test_unsupported_document_type(self):
        resp = client.post("/describe", json={"html": _CONCEPTUAL_HTML, "document_type": "Toc"})
        assert resp.status_code == 400

    def test_page_without_head(self):
        resp = client.post("/describe", json={"html": "<article><p>Lead. More.</p></article>"})
        assert resp.status_code == 400

    def test_page_without_head_and_nothing_to_inject(self):
        html = "<article><h1>Empty page</h1></article>"
        resp = client.post("/describe", json={"html": html})
        assert resp.status_code == 200
        data = resp.json()
        assert data["description"] is None
        assert data["meta"] == []
        assert data["html"] == html

    def test_markup_is_kept_as_written(self):
        html = _CONCEPTUAL_HTML.replace("five minutes.", "five minutes &amp; no more.")
        resp = client.post("/describe", json={"html": html})
        assert "five minutes &amp; no more." in resp.json()["html"]

    def test_invalid_settings_rejected(self):
        resp = client.post(
            "/describe",
            json={"html": _CONCEPTUAL_HTML, "settings": {"description_length": 0}},
        )
        assert resp.status_code == 422


class TestProcess:
    def test_processes_manifest(self, tmp_path):
        (tmp_path / "intro.html").write_text(_CONCEPTUAL_HTML, encoding="utf-8")
        (tmp_path / "widget.html").write_text(_REFERENCE_HTML, encoding="utf-8")
        manifest = _manifest("intro")
        manifest["files"] += _manifest("widget", doc_type="ManagedReference")["files"]

        resp = client.post("/process", json={"manifest": manifest, "output_folder": str(tmp_path)})
        assert resp.status_code == 200
        assert resp.json() == {"processed_files": 2}
        assert 'name="description"' in (tmp_path / "intro.html").read_text(encoding="utf-8")

    def test_missing_page_is_skipped(self, tmp_path):
        (tmp_path / "intro.html").write_text(_CONCEPTUAL_HTML, encoding="utf-8")
        resp = client.post(
            "/process",
            json={"manifest": _manifest("intro", "ghost"), "output_folder": str(tmp_path)},
        )
        assert resp.json() == {"processed_files": 1}

    def test_output_outside_folder_is_not_touched(self, tmp_path):
        site = tmp_path / "site"
        site.mkdir()
        outside = tmp_path / "outside.html"
        outside.write_text(_CONCEPTUAL_HTML, encoding="utf-8")
        manifest = {
            "files": [
                {
                    "type": "Conceptual",
                    "source_relative_path": "outside.md",
                    "output": {".html": {"relative_path": "../outside.html"}},
                }
            ]
        }
        resp = client.post("/process", json={"manifest": manifest, "output_folder": str(site)})
        assert resp.json() == {"processed_files": 0}
        assert outside.read_text(encoding="utf-8") == _CONCEPTUAL_HTML

    def test_missing_output_folder(self, tmp_path):
        resp = client.post(
            "/process",
            json={"manifest": _manifest("intro"), "output_folder": str(tmp_path / "nope")},
        )
        assert resp.status_code == 400

    def test_empty_output_folder_rejected(self):
        resp = client.post("/process", json={"manifest": _manifest("intro"), "output_folder": ""})
        assert resp.status_code == 422

    def test_rate_limit(self, tmp_path):
        payload = {"manifest": {"files": []}, "output_folder": str(tmp_path)}
        statuses = [client.post("/process", json=payload).status_code for _ in range(6)]
        assert statuses[:5] == [200] * 5
        assert statuses[5] == 429
