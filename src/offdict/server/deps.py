"""
Shared dependencies for routes.
"""

from pathlib import Path

from offdict.core.config import get_settings


def get_artifact_path() -> Path:
    return Path(get_settings().artifact_path)
