"""Create release tags from project manifests."""

from .errors import (
    AutoTagError,
    ConfigError,
    GitCommandFailed,
    ManifestMalformed,
    ManifestNotFound,
    MissingField,
    NotAGitRepository,
)
from .tagging import derive_tag

__version__ = "0.1.0"

__all__ = [
    "AutoTagError",
    "ConfigError",
    "GitCommandFailed",
    "ManifestMalformed",
    "ManifestNotFound",
    "MissingField",
    "NotAGitRepository",
    "derive_tag",
]
