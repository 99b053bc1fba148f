"""Error types raised by auto-tag."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class AutoTagError(RuntimeError):
    """Base class for every failure that aborts an auto-tag run."""


class ConfigError(AutoTagError):
    """Raised when the configuration file cannot be parsed."""


class ManifestNotFound(AutoTagError):
    """Raised when a directory holds none of the supported manifests."""

    def __init__(self, directory: Path, candidates: Sequence[str]) -> None:
        self.directory = directory
        self.candidates = tuple(candidates)
        super().__init__(
            f"No supported manifest found in {directory} "
            f"(looked for {', '.join(self.candidates)})"
        )


class ManifestMalformed(AutoTagError):
    """Raised when a manifest cannot be decoded for its format."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")


class MissingField(AutoTagError):
    """Raised when tagging is enabled but the package name or version is absent."""

    def __init__(self, path: Path, field: str) -> None:
        self.path = path
        self.field = field
        super().__init__(f"package {field} not found in {path}")


class NotAGitRepository(AutoTagError):
    """Raised when the working directory is not inside a git work tree."""

    def __init__(self, path: Path, detail: str | None = None) -> None:
        self.path = path
        message = f"{path} is not a Git repository"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class GitCommandFailed(AutoTagError):
    """Raised when a git invocation exits with a non-zero status."""

    def __init__(self, args: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr = stderr.strip()
        message = f"`{' '.join(self.args_list)}` exited with status {returncode}"
        if self.stderr:
            message += f": {self.stderr}"
        super().__init__(message)


__all__ = [
    "AutoTagError",
    "ConfigError",
    "GitCommandFailed",
    "ManifestMalformed",
    "ManifestNotFound",
    "MissingField",
    "NotAGitRepository",
]
