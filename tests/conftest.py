from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests._fixtures.fake_git import FakeGit
from tests._fixtures.repo_builder import RepoBuilder


@pytest.fixture
def repo_builder(tmp_path: Path) -> RepoBuilder:
    """Provide a reusable repo builder rooted at the pytest tmp_path."""
    return RepoBuilder(tmp_path)


@pytest.fixture
def fake_git() -> FakeGit:
    """Provide a git runner stand-in that records every invocation."""
    return FakeGit()


@pytest.fixture(autouse=True)
def _reset_autotag_logger():
    """Undo CLI logging setup so caplog sees records in later tests."""
    yield
    logger = logging.getLogger("autotag")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
