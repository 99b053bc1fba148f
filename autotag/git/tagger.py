"""Annotated tag creation through the git command line."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Sequence

from ..errors import GitCommandFailed, NotAGitRepository
from ..logging import get_logger
from ..models import TagSpec


@dataclass(frozen=True)
class CommandResult:
    """Exit status and captured output of one git invocation."""

    returncode: int
    stdout: str = ""
    stderr: str = ""


Runner = Callable[..., CommandResult]


class GitTagger:
    """Creates annotated release tags, or describes them in dry-run mode."""

    def __init__(self, runner: Runner | None = None, *, executable: str = "git") -> None:
        self._runner = runner or self._default_runner
        self._executable = executable
        self.logger = get_logger("git")

    def ensure_repository(self, repo_path: Path | str) -> None:
        """Raise NotAGitRepository unless ``repo_path`` is inside a git work tree."""
        repo = Path(repo_path)
        if not repo.is_dir():
            raise NotAGitRepository(repo, "directory does not exist")
        try:
            result = self._run(["rev-parse", "--is-inside-work-tree"], cwd=repo)
        except FileNotFoundError as exc:
            raise NotAGitRepository(repo, f"{self._executable} executable not found") from exc
        if result.returncode != 0:
            raise NotAGitRepository(repo, result.stderr.strip() or None)
        if result.stdout.strip() != "true":
            raise NotAGitRepository(repo, "not inside a work tree")

    def tag_exists(self, repo_path: Path | str, tag_name: str) -> bool:
        args = ["tag", "--list", tag_name]
        result = self._run(args, cwd=Path(repo_path))
        if result.returncode != 0:
            raise GitCommandFailed(self._command(args), result.returncode, result.stderr)
        return any(line.strip() == tag_name for line in result.stdout.splitlines())

    def create_tag(
        self,
        repo_path: Path | str,
        spec: TagSpec,
        *,
        user_name: str,
        user_email: str,
        dry_run: bool = False,
    ) -> str:
        """Create ``spec`` as an annotated tag and return a one-line report.

        In dry-run mode git is never invoked, so this cannot fail.
        """
        if dry_run:
            return (
                f'would create tag "{spec.name}" for "{spec.commit}" '
                f'with message "{spec.message}" as {user_name} ({user_email})'
            )

        env = os.environ.copy()
        # The tagger identity on an annotated tag comes from the committer variables.
        env["GIT_COMMITTER_NAME"] = user_name
        env["GIT_COMMITTER_EMAIL"] = user_email
        env["GIT_AUTHOR_NAME"] = user_name
        env["GIT_AUTHOR_EMAIL"] = user_email

        args = ["tag", "--annotate", spec.name, spec.commit, "--message", spec.message]
        self.logger.debug("Running %s", " ".join(self._command(args)))
        result = self._run(args, cwd=Path(repo_path), env=env)
        if result.returncode != 0:
            raise GitCommandFailed(self._command(args), result.returncode, result.stderr)
        return f'created tag "{spec.name}"'

    # ------------------------------------------------------------------
    # Helpers

    def _command(self, args: Sequence[str]) -> list[str]:
        return [self._executable, *args]

    def _run(
        self,
        args: Sequence[str],
        *,
        cwd: Path,
        env: Mapping[str, str] | None = None,
    ) -> CommandResult:
        return self._runner(self._command(args), cwd=cwd, env=env)

    @staticmethod
    def _default_runner(
        args: Sequence[str],
        *,
        cwd: Path,
        env: Mapping[str, str] | None = None,
    ) -> CommandResult:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            env=dict(env) if env is not None else None,
            check=False,
            text=True,
            capture_output=True,
        )
        return CommandResult(completed.returncode, completed.stdout, completed.stderr)


__all__ = ["CommandResult", "GitTagger", "Runner"]
