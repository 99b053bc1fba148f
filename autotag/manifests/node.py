"""package.json parser."""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping

from .base import ManifestParser, dig
from ..models import ManifestFormat


class NodePackageManifestParser(ManifestParser):
    """Reads top-level ``name``/``version`` and ``autoTag.enabled`` from package.json."""

    format = ManifestFormat.NODE_PACKAGE

    def decode(self, text: str) -> Dict[str, Any]:
        # JSONDecodeError subclasses ValueError.
        return json.loads(text)

    def extract_name(self, document: Mapping[str, Any]) -> Any:
        return document.get("name")

    def extract_version(self, document: Mapping[str, Any]) -> Any:
        return document.get("version")

    def extract_enabled(self, document: Mapping[str, Any]) -> Any:
        return dig(document, "autoTag", "enabled")
