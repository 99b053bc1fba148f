"""Pipeline orchestration: repository check, manifests, tags."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, List, Sequence

from .config import AutoTagConfig, load_config
from .errors import MissingField
from .git.tagger import GitTagger
from .logging import get_logger
from .manifests import discover_manifests, parser_for
from .models import (
    STATUS_CREATED,
    STATUS_DISABLED,
    STATUS_DRY_RUN,
    STATUS_EXISTS,
    Manifest,
    TagOutcome,
    TagSpec,
)
from .tagging import build_tag_message, derive_tag


class Orchestrator:
    """Runs the auto-tag pipeline for every package found under the given paths.

    The repository precondition is always checked before any manifest is read,
    so a run outside git reports NotAGitRepository even when a manifest is
    also missing or broken. All manifests are parsed before the first tag is
    created, so a broken manifest anywhere leaves the repository untouched.
    """

    def __init__(
        self,
        repo_root: Path | str | None = None,
        *,
        config: AutoTagConfig | None = None,
        tagger: GitTagger | None = None,
    ) -> None:
        self.repo_root = Path(repo_root) if repo_root is not None else Path.cwd()
        self.config = config or load_config(self.repo_root)
        self.tagger = tagger or GitTagger(executable=self.config.git.executable)
        self.logger = get_logger("orchestrator")

    def run(
        self,
        paths: Sequence[Path | str] | None = None,
        *,
        commit: str,
        user_name: str,
        user_email: str,
        dry_run: bool = False,
        report: Callable[[TagOutcome], None] | None = None,
    ) -> List[TagOutcome]:
        """Tag every enabled package under ``paths``; stop at the first error."""
        self.tagger.ensure_repository(self.repo_root)
        self.logger.debug("Repository check passed for %s", self.repo_root)

        manifests = self._collect_manifests(paths)
        plans = [
            (manifest, self._build_spec(manifest, commit) if manifest.tagging_enabled else None)
            for manifest in manifests
        ]

        outcomes: List[TagOutcome] = []
        for manifest, spec in plans:
            outcome = self._process(
                manifest,
                spec,
                user_name=user_name,
                user_email=user_email,
                dry_run=dry_run,
            )
            if report is not None:
                report(outcome)
            outcomes.append(outcome)
        return outcomes

    # ------------------------------------------------------------------
    # Internals

    def _collect_manifests(self, paths: Iterable[Path | str] | None) -> List[Manifest]:
        manifests: List[Manifest] = []
        seen: set[Path] = set()
        for directory in self._resolve_paths(paths):
            for manifest_format, path in discover_manifests(directory):
                key = path.resolve()
                if key in seen:
                    continue
                seen.add(key)
                manifest = parser_for(manifest_format).parse(path)
                self.logger.debug("Using %s (%s)", manifest.path, manifest_format.filename)
                manifests.append(manifest)
        return manifests

    def _process(
        self,
        manifest: Manifest,
        spec: TagSpec | None,
        *,
        user_name: str,
        user_email: str,
        dry_run: bool,
    ) -> TagOutcome:
        if spec is None:
            self.logger.info("Tagging disabled in %s; nothing to do", manifest.path)
            return TagOutcome(
                manifest=manifest,
                status=STATUS_DISABLED,
                detail=f"tagging disabled for {manifest.path}",
            )

        if not dry_run and self.config.tag.skip_existing:
            if self.tagger.tag_exists(self.repo_root, spec.name):
                self.logger.info('Tag "%s" already exists, skipping', spec.name)
                return TagOutcome(
                    manifest=manifest,
                    status=STATUS_EXISTS,
                    tag=spec,
                    detail=f'tag "{spec.name}" already exists, skipping...',
                )

        detail = self.tagger.create_tag(
            self.repo_root,
            spec,
            user_name=user_name,
            user_email=user_email,
            dry_run=dry_run,
        )
        if not dry_run:
            self.logger.info("Created tag %s at %s", spec.name, spec.commit)
        return TagOutcome(
            manifest=manifest,
            status=STATUS_DRY_RUN if dry_run else STATUS_CREATED,
            tag=spec,
            detail=detail,
        )

    def _build_spec(self, manifest: Manifest, commit: str) -> TagSpec:
        if not manifest.name:
            raise MissingField(manifest.path, "name")
        if not manifest.version:
            raise MissingField(manifest.path, "version")
        try:
            tag_name = derive_tag(
                manifest.name, manifest.version, prefix=self.config.tag.prefix
            )
        except ValueError as exc:
            raise MissingField(manifest.path, "name") from exc
        message = build_tag_message(
            manifest.name, manifest.version, tag_name, self.config.tag.message
        )
        return TagSpec(name=tag_name, commit=commit, message=message)

    def _resolve_paths(self, paths: Iterable[Path | str] | None) -> List[Path]:
        resolved: List[Path] = []
        for raw in paths or ["."]:
            path = Path(raw).expanduser()
            if not path.is_absolute():
                path = self.repo_root / path
            if path not in resolved:
                resolved.append(path)
        return resolved


__all__ = ["Orchestrator"]
