"""Document loading tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
import requests
from swagger_typegen import utils
from swagger_typegen.utils import DocumentLoaderError, load_document, parse_document

SWAGGER = {
    "swagger": "2.0",
    "definitions": {"User": {"type": "object", "properties": {"email": {"type": "string"}}}},
}

SWAGGER_YAML = """
swagger: "2.0"
definitions:
  User:
    type: object
    properties:
      email:
        type: string
"""


class _FakeResponse:
    def __init__(self, text: str, content_type: str, status_code: int = 200) -> None:
        self.text = text
        self.headers = {"content-type": content_type}
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(response=self)


def test_load_json_file(tmp_path: Path) -> None:
    path = tmp_path / "swagger.json"
    path.write_text(json.dumps(SWAGGER), encoding="utf-8")

    source, data = load_document(file_path=path)

    assert str(path) in source
    assert data == SWAGGER


def test_load_yaml_file(tmp_path: Path) -> None:
    path = tmp_path / "swagger.yaml"
    path.write_text(SWAGGER_YAML, encoding="utf-8")

    _, data = load_document(file_path=path)

    assert data == SWAGGER


def test_load_file_without_known_suffix(tmp_path: Path) -> None:
    path = tmp_path / "swagger.txt"
    path.write_text(SWAGGER_YAML, encoding="utf-8")

    _, data = load_document(file_path=str(path))

    assert data == SWAGGER


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_document(file_path=tmp_path / "missing.json")


def test_invalid_json_file(tmp_path: Path) -> None:
    path = tmp_path / "swagger.json"
    path.write_text("{broken", encoding="utf-8")

    with pytest.raises(DocumentLoaderError, match="Invalid JSON"):
        load_document(file_path=path)


def test_invalid_yaml_file(tmp_path: Path) -> None:
    path = tmp_path / "swagger.yaml"
    path.write_text("definitions: [unclosed\n", encoding="utf-8")

    with pytest.raises(DocumentLoaderError, match="Invalid JSON/YAML"):
        load_document(file_path=path)


def test_requires_exactly_one_source(tmp_path: Path) -> None:
    with pytest.raises(DocumentLoaderError, match="Either file_path or url"):
        load_document()

    with pytest.raises(DocumentLoaderError, match="Cannot specify both"):
        load_document(file_path=tmp_path / "a.json", url="https://example.com/a.json")


def test_parse_document_accepts_json_and_yaml() -> None:
    assert parse_document(json.dumps(SWAGGER)) == SWAGGER
    assert parse_document(SWAGGER_YAML) == SWAGGER


def test_load_from_url(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, Any] = {}

    def fake_get(url: str, timeout: int) -> _FakeResponse:
        seen.update(url=url, timeout=timeout)
        return _FakeResponse(json.dumps(SWAGGER), "application/json")

    monkeypatch.setattr(utils.requests, "get", fake_get)

    source, data = load_document(url="https://example.com/swagger.json", timeout=5)

    assert data == SWAGGER
    assert "https://example.com/swagger.json" in source
    assert seen == {"url": "https://example.com/swagger.json", "timeout": 5}


def test_load_yaml_from_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        utils.requests,
        "get",
        lambda url, timeout: _FakeResponse(SWAGGER_YAML, "application/x-yaml"),
    )

    _, data = load_document(url="https://example.com/swagger")

    assert data == SWAGGER


def test_invalid_url() -> None:
    with pytest.raises(DocumentLoaderError, match="Invalid URL"):
        load_document(url="not a url")


def test_http_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        utils.requests,
        "get",
        lambda url, timeout: _FakeResponse("", "text/plain", status_code=404),
    )

    with pytest.raises(DocumentLoaderError, match="HTTP error 404"):
        load_document(url="https://example.com/swagger.json")


def test_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_get(url: str, timeout: int) -> _FakeResponse:
        raise requests.exceptions.Timeout()

    monkeypatch.setattr(utils.requests, "get", fake_get)

    with pytest.raises(DocumentLoaderError, match="Request timeout"):
        load_document(url="https://example.com/swagger.json")
