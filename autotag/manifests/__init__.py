"""Manifest detection and format-specific parsers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Dict, List, Tuple

from .base import ManifestParser
from .cargo import CargoManifestParser
from .node import NodePackageManifestParser
from .poetry import PoetryManifestParser
from ..errors import ManifestNotFound
from ..models import MANIFEST_PRIORITY, Manifest, ManifestFormat

_PARSERS: Dict[ManifestFormat, Callable[[], ManifestParser]] = {
    ManifestFormat.CARGO: CargoManifestParser,
    ManifestFormat.NODE_PACKAGE: NodePackageManifestParser,
    ManifestFormat.POETRY_PYPROJECT: PoetryManifestParser,
}

# Directories that never hold packages of the repository itself.
_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".venv",
    "node_modules",
    "target",
    "__pycache__",
}


def _candidates() -> List[str]:
    return [fmt.filename for fmt in MANIFEST_PRIORITY]


def _find_in_directory(root: Path) -> Tuple[ManifestFormat, Path] | None:
    for manifest_format in MANIFEST_PRIORITY:
        candidate = root / manifest_format.filename
        if candidate.is_file():
            return manifest_format, candidate
    return None


def locate_manifest(directory: Path | str = ".") -> Tuple[ManifestFormat, Path]:
    """Return the highest-priority manifest present in ``directory`` itself."""
    root = Path(directory)
    found = _find_in_directory(root)
    if found is None:
        raise ManifestNotFound(root, _candidates())
    return found


def discover_manifests(directory: Path | str = ".") -> List[Tuple[ManifestFormat, Path]]:
    """Walk ``directory`` and return one manifest per package directory.

    Inside each directory the Cargo.toml > package.json > pyproject.toml
    priority applies. Results come in sorted walk order.
    """
    root = Path(directory)
    found: List[Tuple[ManifestFormat, Path]] = []
    for current, dirnames, _ in os.walk(root):
        dirnames[:] = sorted(name for name in dirnames if name not in _EXCLUDED_DIRS)
        match = _find_in_directory(Path(current))
        if match is not None:
            found.append(match)
    if not found:
        raise ManifestNotFound(root, _candidates())
    return found


def parser_for(manifest_format: ManifestFormat) -> ManifestParser:
    """Return the parser that handles ``manifest_format``."""
    return _PARSERS[manifest_format]()


def load_manifest(directory: Path | str = ".") -> Manifest:
    """Locate and parse the authoritative manifest in ``directory``."""
    manifest_format, path = locate_manifest(directory)
    return parser_for(manifest_format).parse(path)


__all__ = [
    "CargoManifestParser",
    "ManifestParser",
    "NodePackageManifestParser",
    "PoetryManifestParser",
    "discover_manifests",
    "load_manifest",
    "locate_manifest",
    "parser_for",
]
