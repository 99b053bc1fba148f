"""CLI entrypoint for auto-tag."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import CONFIG_FILENAME, load_config
from .errors import AutoTagError
from .logging import configure_logging
from .models import TagOutcome
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="auto-tag",
        description=(
            "Automatically create git tags for Cargo (Cargo.toml), JavaScript "
            "(package.json), and Python (pyproject.toml) packages."
        ),
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the tags to be created but do not create them.",
    )
    parser.add_argument(
        "--commit",
        required=True,
        help="The commit SHA to create the tag for.",
    )
    parser.add_argument(
        "--git-user-email",
        required=True,
        help="Email recorded as the tagger of the annotated tag.",
    )
    parser.add_argument(
        "--git-user-name",
        required=True,
        help="Name recorded as the tagger of the annotated tag.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to the configuration file (defaults to ./{CONFIG_FILENAME}).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log output to this file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="Package directories to inspect (defaults to the current directory).",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for auto-tag."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    repo_root = Path.cwd()
    try:
        if args.config is not None:
            config = load_config(args.config, required=True)
        else:
            config = load_config(repo_root)
        orchestrator = Orchestrator(repo_root, config=config)
        orchestrator.run(
            args.paths,
            commit=args.commit,
            user_name=args.git_user_name,
            user_email=args.git_user_email,
            dry_run=bool(args.dry_run),
            report=_print_outcome,
        )
    except AutoTagError as exc:
        parser.exit(
            1,
            f"auto-tag failed ({type(exc).__name__}): {exc}\n"
            "Run with --verbose for more details.\n",
        )


def _print_outcome(outcome: TagOutcome) -> None:
    print(outcome.detail)


if __name__ == "__main__":
    main(sys.argv[1:])
