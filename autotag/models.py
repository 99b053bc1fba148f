"""Core data models shared across auto-tag components."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class ManifestFormat(Enum):
    """Supported manifest formats, valued by their file name."""

    CARGO = "Cargo.toml"
    NODE_PACKAGE = "package.json"
    POETRY_PYPROJECT = "pyproject.toml"

    @property
    def filename(self) -> str:
        return self.value


# Detection order; the first manifest present in a directory is authoritative.
MANIFEST_PRIORITY: tuple[ManifestFormat, ...] = (
    ManifestFormat.CARGO,
    ManifestFormat.NODE_PACKAGE,
    ManifestFormat.POETRY_PYPROJECT,
)


@dataclass(frozen=True)
class Manifest:
    """Package facts read from a single manifest file."""

    format: ManifestFormat
    path: Path
    name: Optional[str]
    version: Optional[str]
    tagging_enabled: bool


@dataclass(frozen=True)
class TagSpec:
    """Tag to create: its name, the target commit, and the annotation message."""

    name: str
    commit: str
    message: str


@dataclass(frozen=True)
class TagOutcome:
    """Result of processing one package directory."""

    manifest: Manifest
    status: str
    tag: Optional[TagSpec] = None
    detail: str = ""


STATUS_CREATED = "created"
STATUS_DRY_RUN = "dry-run"
STATUS_DISABLED = "disabled"
STATUS_EXISTS = "exists"
