"""pyproject.toml parser for Poetry projects."""

from __future__ import annotations

import tomllib
from typing import Any, Dict, Mapping

from .base import ManifestParser, dig
from ..models import ManifestFormat


class PoetryManifestParser(ManifestParser):
    """Reads ``[tool.poetry]`` and ``[tool.auto-tag]`` from pyproject.toml."""

    format = ManifestFormat.POETRY_PYPROJECT

    def decode(self, text: str) -> Dict[str, Any]:
        return tomllib.loads(text)

    def extract_name(self, document: Mapping[str, Any]) -> Any:
        return dig(document, "tool", "poetry", "name")

    def extract_version(self, document: Mapping[str, Any]) -> Any:
        return dig(document, "tool", "poetry", "version")

    def extract_enabled(self, document: Mapping[str, Any]) -> Any:
        return dig(document, "tool", "auto-tag", "enabled")
