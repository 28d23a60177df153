# tests/test_client.py
"""Tests for loading the compiled dictionary."""

import httpx
import pytest

from offdict.cli.client import default_source, fetch_dictionary


def mock_http(handler):
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_fetch_from_path(artifact, sample_lexicon):
    assert fetch_dictionary(str(artifact)) == sample_lexicon


def test_fetch_missing_path(tmp_path):
    with pytest.raises(OSError):
        fetch_dictionary(str(tmp_path / "missing.json"))


def test_fetch_from_url(sample_lexicon):
    def handler(request):
        assert request.url.path == "/dictionary.json"
        return httpx.Response(200, json=sample_lexicon)

    data = fetch_dictionary("http://localhost:8000/dictionary.json", http=mock_http(handler))
    assert data == sample_lexicon


def test_fetch_bad_status():
    http = mock_http(lambda request: httpx.Response(404, json={"detail": "not built"}))

    with pytest.raises(httpx.HTTPStatusError):
        fetch_dictionary("http://localhost:8000/dictionary.json", http=http)


def test_fetch_bad_json():
    http = mock_http(lambda request: httpx.Response(200, text="<html>"))

    with pytest.raises(ValueError):
        fetch_dictionary("http://localhost:8000/dictionary.json", http=http)


def test_fetch_non_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[]")

    with pytest.raises(ValueError):
        fetch_dictionary(str(path))


def test_default_source(monkeypatch):
    monkeypatch.delenv("OFFDICT_ARTIFACT_URL", raising=False)
    monkeypatch.setenv("OFFDICT_ARTIFACT_PATH", "/srv/dictionary.json")
    assert default_source() == "/srv/dictionary.json"

    monkeypatch.setenv("OFFDICT_ARTIFACT_URL", "http://host/dictionary.json")
    assert default_source() == "http://host/dictionary.json"
