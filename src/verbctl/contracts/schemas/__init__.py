"""Packaged verbctl output schemas."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

CATALOG_FILE = "catalog.json"


def schemas_root() -> Path:
    """Return the packaged schema directory path."""
    return Path(str(resources.files(__package__)))


def catalog_path() -> Path:
    return schemas_root() / CATALOG_FILE
