"""Cargo.toml parser."""

from __future__ import annotations

import tomllib
from typing import Any, Dict, Mapping

from .base import ManifestParser, dig
from ..models import ManifestFormat


class CargoManifestParser(ManifestParser):
    """Reads ``[package]`` and ``[package.metadata.auto-tag]`` from Cargo.toml."""

    format = ManifestFormat.CARGO

    def decode(self, text: str) -> Dict[str, Any]:
        return tomllib.loads(text)

    def extract_name(self, document: Mapping[str, Any]) -> Any:
        return dig(document, "package", "name")

    def extract_version(self, document: Mapping[str, Any]) -> Any:
        return dig(document, "package", "version")

    def extract_enabled(self, document: Mapping[str, Any]) -> Any:
        return dig(document, "package", "metadata", "auto-tag", "enabled")
