"""CLI behaviour tests."""

from __future__ import annotations

import pytest

from autotag.cli import _build_parser, main
from autotag.git.tagger import GitTagger
from tests._fixtures.fake_git import FakeGit

COMMIT = "0123456789abcdef0123456789abcdef01234567"
REQUIRED = [
    "--commit",
    COMMIT,
    "--git-user-email",
    "bot@example.com",
    "--git-user-name",
    "Release Bot",
]

CARGO_ENABLED = """
[package]
name = "my-lib"
version = "0.1.0"

[package.metadata.auto-tag]
enabled = true
"""


@pytest.fixture
def cli_git(monkeypatch) -> FakeGit:
    git = FakeGit()
    monkeypatch.setattr(GitTagger, "_default_runner", staticmethod(git))
    return git


def test_cli_parses_documented_flags() -> None:
    args = _build_parser().parse_args([*REQUIRED, "--dry-run"])

    assert args.commit == COMMIT
    assert args.git_user_email == "bot@example.com"
    assert args.git_user_name == "Release Bot"
    assert args.dry_run is True
    assert args.paths == ["."]


def test_cli_accepts_package_paths() -> None:
    args = _build_parser().parse_args([*REQUIRED, "crates/a", "web"])

    assert args.paths == ["crates/a", "web"]
    assert args.dry_run is False


@pytest.mark.parametrize("missing", ["--commit", "--git-user-email", "--git-user-name"])
def test_cli_requires_identity_and_commit(missing: str) -> None:
    index = REQUIRED.index(missing)
    argv = REQUIRED[:index] + REQUIRED[index + 2 :]

    with pytest.raises(SystemExit) as excinfo:
        _build_parser().parse_args(argv)

    assert excinfo.value.code == 2


def test_main_creates_tag(repo_builder, monkeypatch, capsys, cli_git) -> None:
    repo_builder.write({"Cargo.toml": CARGO_ENABLED})
    monkeypatch.chdir(repo_builder.path())

    main(REQUIRED)

    assert capsys.readouterr().out.strip() == 'created tag "release-my-lib-0.1.0"'
    assert cli_git.existing_tags == {"release-my-lib-0.1.0"}


def test_main_dry_run_prints_intended_tag(repo_builder, monkeypatch, capsys, cli_git) -> None:
    repo_builder.write({"Cargo.toml": CARGO_ENABLED})
    monkeypatch.chdir(repo_builder.path())

    main([*REQUIRED, "--dry-run"])

    out = capsys.readouterr().out
    assert out.startswith('would create tag "release-my-lib-0.1.0"')
    assert COMMIT in out
    assert cli_git.tag_calls() == []


def test_main_disabled_exits_cleanly(repo_builder, monkeypatch, capsys, cli_git) -> None:
    repo_builder.write({"package.json": '{"name": "web", "version": "1.0.0"}'})
    monkeypatch.chdir(repo_builder.path())

    main(REQUIRED)

    assert "tagging disabled" in capsys.readouterr().out
    assert cli_git.tag_calls() == []


def test_main_reports_errors_on_stderr(repo_builder, monkeypatch, capsys, cli_git) -> None:
    monkeypatch.chdir(repo_builder.path())

    with pytest.raises(SystemExit) as excinfo:
        main(REQUIRED)

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "auto-tag failed (ManifestNotFound)" in err


def test_main_outside_repository(repo_builder, monkeypatch, capsys) -> None:
    git = FakeGit(inside_work_tree=False)
    monkeypatch.setattr(GitTagger, "_default_runner", staticmethod(git))
    repo_builder.write({"Cargo.toml": CARGO_ENABLED})
    monkeypatch.chdir(repo_builder.path())

    with pytest.raises(SystemExit) as excinfo:
        main([*REQUIRED, "--dry-run"])

    assert excinfo.value.code == 1
    assert "NotAGitRepository" in capsys.readouterr().err


def test_main_reads_config_file(repo_builder, monkeypatch, capsys, cli_git) -> None:
    repo_builder.write(
        {
            "Cargo.toml": CARGO_ENABLED,
            "ci/autotag.yml": """
            tag:
              prefix: v
            """,
        }
    )
    monkeypatch.chdir(repo_builder.path())

    main([*REQUIRED, "--config", "ci/autotag.yml"])

    assert capsys.readouterr().out.strip() == 'created tag "v-my-lib-0.1.0"'


def test_main_rejects_bad_config(repo_builder, monkeypatch, capsys, cli_git) -> None:
    repo_builder.write({"Cargo.toml": CARGO_ENABLED, ".autotag.yml": "- just\n- a list\n"})
    monkeypatch.chdir(repo_builder.path())

    with pytest.raises(SystemExit) as excinfo:
        main(REQUIRED)

    assert excinfo.value.code == 1
    assert "ConfigError" in capsys.readouterr().err


def test_main_rejects_missing_explicit_config(repo_builder, monkeypatch, capsys, cli_git) -> None:
    repo_builder.write({"Cargo.toml": CARGO_ENABLED})
    monkeypatch.chdir(repo_builder.path())

    with pytest.raises(SystemExit) as excinfo:
        main([*REQUIRED, "--dry-run", "--config", "typo.yml"])

    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert "ConfigError" in captured.err
    assert "typo.yml" in captured.err
    assert captured.out == ""


def test_main_tags_nested_crate_from_root(repo_builder, monkeypatch, capsys, cli_git) -> None:
    repo_builder.write({"crates/a/Cargo.toml": CARGO_ENABLED})
    monkeypatch.chdir(repo_builder.path())

    main([*REQUIRED, "--dry-run"])

    assert capsys.readouterr().out.startswith('would create tag "release-my-lib-0.1.0"')
