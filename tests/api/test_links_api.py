"""
Tests for the REST surface of the link engine.

These run against the shared service instances with the default locale
configuration and a real content tree under tmp_path.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from backend.app._version import __version__
from backend.app.main import app


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)


def _page(content_tree: Path) -> Path:
    return content_tree / "ko" / "docs" / "page.md"


def test_validate_then_read_and_clear_diagnostics(client, content_tree) -> None:
    page = _page(content_tree)
    path = page.as_posix()

    response = client.post("/api/links/validate", json={"path": path, "text": page.read_text(encoding="utf-8")})

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 2
    assert [d["link"]["display_text"] for d in body["diagnostics"]] == ["Overview", "Tutorials"]
    assert [d["resource_kind"] for d in body["diagnostics"]] == ["file", "folder"]
    assert all(d["severity"] == "warning" for d in body["diagnostics"])

    stored = client.get("/api/links/diagnostics", params={"path": path}).json()
    assert stored["count"] == 2

    assert client.delete("/api/links/diagnostics", params={"path": path}).status_code == 204
    assert client.get("/api/links/diagnostics", params={"path": path}).json()["count"] == 0


def test_fix_returns_actions_and_fixed_text(client, content_tree) -> None:
    page = _page(content_tree)

    response = client.post("/api/links/fix", json={"path": page.as_posix(), "text": page.read_text(encoding="utf-8")})

    assert response.status_code == 200
    body = response.json()
    assert len(body["actions"]) == 2
    assert "[Overview](/ko/docs/concepts/overview)" in body["fixed_text"]
    assert "[Tutorials](/ko/docs/tutorials/)" in body["fixed_text"]
    assert "[Nope](/docs/concepts/missing)" in body["fixed_text"]


def test_empty_path_is_rejected(client) -> None:
    response = client.post("/api/links/validate", json={"path": "", "text": "x"})

    assert response.status_code == 400


def test_counterpart_endpoint(client, content_tree) -> None:
    page = (content_tree / "ko" / "docs" / "concepts" / "overview.md").as_posix()

    response = client.post("/api/translations/counterpart", json={"path": page})

    assert response.status_code == 200
    body = response.json()
    assert body["paths"]["original_path"].endswith("/content/en/docs/concepts/overview.md")
    assert body["paths"]["is_reverse_translation"] is True
    assert body["line_comparison"]["is_equal"] is True


def test_counterpart_endpoint_reports_error_code(client) -> None:
    response = client.post("/api/translations/counterpart", json={"path": "/not/content.md"})

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "NOT_CONTENT_PATH"


def test_system_endpoints(client) -> None:
    assert client.get("/api/system/version").json()["version"] == __version__

    locales = client.get("/api/system/locales").json()
    assert locales["neutral"] == "en"
    assert any(l["code"] == "ko" for l in locales["supported"])
