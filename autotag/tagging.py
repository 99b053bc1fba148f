"""Tag name derivation."""

from __future__ import annotations

from .config import DEFAULT_TAG_MESSAGE, DEFAULT_TAG_PREFIX


def sanitize_name(name: str) -> str:
    """Make a package name safe for a tag: drop the ``@`` scope marker, flatten ``/``.

    >>> sanitize_name("@myOrg/package")
    'myOrg__package'
    """
    if name.startswith("@"):
        name = name[1:]
    return name.replace("/", "__")


def derive_tag(name: str, version: str, prefix: str = DEFAULT_TAG_PREFIX) -> str:
    """Return ``<prefix>-<sanitized-name>-<version>``; the version is used verbatim."""
    if not version:
        raise ValueError("package version must not be empty")
    # A bare scope marker or separators ("@", "@/") leave nothing to name the tag.
    if not name.strip("@/"):
        raise ValueError(f"package name {name!r} is empty after sanitizing")
    return f"{prefix}-{sanitize_name(name)}-{version}"


def build_tag_message(
    name: str, version: str, tag: str, template: str = DEFAULT_TAG_MESSAGE
) -> str:
    return template.format(name=name, version=version, tag=tag)


__all__ = ["build_tag_message", "derive_tag", "sanitize_name"]
