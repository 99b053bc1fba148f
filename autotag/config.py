"""Configuration loading for auto-tag (.autotag.yml)."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".autotag.yml"

DEFAULT_TAG_PREFIX = "release"
DEFAULT_TAG_MESSAGE = "automatic release tag of {name} ({version})"

_MESSAGE_FIELDS = {"name", "version", "tag"}


@dataclass
class TagConfig:
    """Tag naming and creation settings."""

    prefix: str = DEFAULT_TAG_PREFIX
    message: str = DEFAULT_TAG_MESSAGE
    skip_existing: bool = False


@dataclass
class GitConfig:
    """How the git binary is invoked."""

    executable: str = "git"


@dataclass
class AutoTagConfig:
    """Represents the settings defined in .autotag.yml."""

    root: Path
    tag: TagConfig = field(default_factory=TagConfig)
    git: GitConfig = field(default_factory=GitConfig)


def load_config(config_path: Path, *, required: bool = False) -> AutoTagConfig:
    """Load configuration from disk.

    A missing file yields the defaults unless ``required`` is set, which is how
    the CLI treats a path passed explicitly with --config.
    """
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.is_file():
        if required:
            raise ConfigError(f"Configuration file {config_file} does not exist")
        return AutoTagConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    tag = TagConfig()
    tag_data = _as_dict(data.get("tag"))
    if tag_data:
        prefix = _as_str(tag_data.get("prefix"))
        if prefix is not None:
            if not prefix.strip():
                raise ConfigError("tag.prefix must not be empty")
            tag.prefix = prefix.strip()
        message = _as_str(tag_data.get("message"))
        if message is not None:
            _validate_message_template(message)
            tag.message = message
        skip_existing = _as_bool(tag_data.get("skip_existing"))
        if skip_existing is not None:
            tag.skip_existing = skip_existing

    git = GitConfig()
    git_data = _as_dict(data.get("git"))
    executable = _as_str(git_data.get("executable")) if git_data else None
    if executable:
        git.executable = executable

    return AutoTagConfig(root=root, tag=tag, git=git)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _validate_message_template(template: str) -> None:
    try:
        parsed = list(string.Formatter().parse(template))
    except ValueError as exc:
        raise ConfigError(f"tag.message is not a valid template: {exc}") from exc
    unknown = sorted(
        {name for _, name, _, _ in parsed if name is not None and name not in _MESSAGE_FIELDS}
    )
    if unknown:
        raise ConfigError(
            "tag.message uses unknown placeholders: " + ", ".join(unknown)
        )


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None
