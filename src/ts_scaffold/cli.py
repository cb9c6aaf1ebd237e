"""Command line interface for ts-scaffold."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from pydantic import ValidationError

from . import __version__
from .config import ProjectRequest
from .errors import ScaffoldError
from .prompts import ConsoleOptionResolver, OptionResolver
from .scaffold import ProjectMaterializer
from .template import TemplateStore
from .vcs import GitRepository, VersionControl

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _project_name(value: str) -> str:
    try:
        ProjectRequest.from_name(value)
    except ValidationError as exc:
        message = "; ".join(error["msg"] for error in exc.errors())
        raise argparse.ArgumentTypeError(message) from exc
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ts-scaffold",
        description="A TypeScript project scaffolding tool",
    )
    parser.add_argument(
        "project_name",
        type=_project_name,
        help="Name of the project directory to create in the current directory",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    resolver: OptionResolver | None = None,
    vcs: VersionControl | None = None,
    store: TemplateStore | None = None,
) -> int:
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, stream=sys.stderr)
    parser = build_parser()
    args = parser.parse_args(argv)

    store = store or TemplateStore()
    materializer = ProjectMaterializer(
        store,
        resolver or ConsoleOptionResolver(),
        vcs or GitRepository(),
    )
    try:
        store.verify()
        report = materializer.run(ProjectRequest.from_name(args.project_name))
    except ScaffoldError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Project created at {report.project_dir}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
