"""Git repository initialisation."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from .errors import ExternalToolError

__all__ = ["GitRepository", "VersionControl"]


LOGGER = logging.getLogger(__name__)


class VersionControl(Protocol):
    """Anything able to turn a directory into a repository."""

    def init(self, directory: Path) -> None:
        ...


class GitRepository:
    """Run ``git init`` through the ``git`` executable found on ``PATH``."""

    def __init__(self, executable: str = "git") -> None:
        self.executable = executable

    def init(self, directory: Path) -> None:
        command = [self.executable, "init"]
        LOGGER.info("running %s in %s", " ".join(command), directory)
        try:
            result = subprocess.run(
                command,
                cwd=directory,
                capture_output=True,
                check=True,
                text=True,
            )
        except FileNotFoundError as exc:
            raise ExternalToolError(
                f"could not find '{self.executable}'; is it installed and on PATH?", command
            ) from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
            raise ExternalToolError(f"'{' '.join(command)}' failed: {detail}", command) from exc
        except OSError as exc:
            raise ExternalToolError(f"failed to run '{' '.join(command)}': {exc}", command) from exc

        LOGGER.debug("git init output: %s", result.stdout.strip())
