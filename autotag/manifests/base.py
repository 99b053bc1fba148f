"""Base class for manifest parsers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from ..errors import ManifestMalformed, MissingField
from ..logging import get_logger
from ..models import Manifest, ManifestFormat


class ManifestParser(ABC):
    """Reads package name, version and the auto-tag switch from one manifest format."""

    format: ManifestFormat

    def __init__(self) -> None:
        self.logger = get_logger(f"manifests.{self.format.name.lower()}")

    def parse(self, path: Path) -> Manifest:
        """Decode ``path`` and return the manifest it describes."""
        document = self._load(path)
        enabled = self._coerce_enabled(path, self.extract_enabled(document))
        name = self.extract_name(document)
        version = self.extract_version(document)

        if enabled:
            name = self._require(path, "name", name)
            version = self._require(path, "version", version)
        else:
            name = name if isinstance(name, str) and name else None
            version = version if isinstance(version, str) and version else None

        return Manifest(
            format=self.format,
            path=path,
            name=name,
            version=version,
            tagging_enabled=enabled,
        )

    @abstractmethod
    def decode(self, text: str) -> Dict[str, Any]:
        """Turn raw file text into a mapping, raising ValueError on bad syntax."""

    @abstractmethod
    def extract_name(self, document: Mapping[str, Any]) -> Any:
        """Return the raw package name value, or None when absent."""

    @abstractmethod
    def extract_version(self, document: Mapping[str, Any]) -> Any:
        """Return the raw package version value, or None when absent."""

    @abstractmethod
    def extract_enabled(self, document: Mapping[str, Any]) -> Any:
        """Return the raw auto-tag enabled value, or None when absent."""

    # ------------------------------------------------------------------
    # Helpers

    def _load(self, path: Path) -> Dict[str, Any]:
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ManifestMalformed(path, f"not valid UTF-8 ({exc.reason})") from exc
        except OSError as exc:
            raise ManifestMalformed(path, exc.strerror or str(exc)) from exc

        try:
            document = self.decode(text)
        except ValueError as exc:
            raise ManifestMalformed(path, str(exc)) from exc

        if not isinstance(document, dict):
            raise ManifestMalformed(
                path, f"expected a top-level table, got {type(document).__name__}"
            )
        return document

    def _coerce_enabled(self, path: Path, value: Any) -> bool:
        if value is None:
            return False
        if isinstance(value, bool):
            return value
        self.logger.warning(
            "Ignoring non-boolean auto-tag enabled value %r in %s", value, path
        )
        return False

    @staticmethod
    def _require(path: Path, field: str, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise MissingField(path, field)
        return value


def dig(document: Mapping[str, Any], *keys: str) -> Optional[Any]:
    """Walk nested mappings, returning None as soon as a level is missing."""
    current: Any = document
    for key in keys:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
        if current is None:
            return None
    return current
