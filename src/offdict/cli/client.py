"""
Loads the compiled dictionary, from the artifact host or from disk.
"""

import json
from pathlib import Path

import httpx

from offdict.core.config import get_settings


def default_source() -> str:
    settings = get_settings()
    return settings.artifact_url or settings.artifact_path


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_dictionary(source: str, http: httpx.Client | None = None) -> dict:
    if is_url(source):
        getter = http.get if http is not None else httpx.get
        r = getter(source, timeout=60)
        r.raise_for_status()
        data = r.json()
    else:
        data = json.loads(Path(source).read_text(encoding="utf-8"))

    if not isinstance(data, dict):
        raise ValueError(f"Dictionary must be a JSON object, got {type(data).__name__}")
    return data
