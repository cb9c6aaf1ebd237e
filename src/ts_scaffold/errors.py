"""Exception types raised while scaffolding a project."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

__all__ = [
    "ExternalToolError",
    "FilesystemError",
    "InteractionError",
    "ScaffoldError",
    "TemplateIntegrityError",
]


class ScaffoldError(RuntimeError):
    """Base class for every fatal scaffolding failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class TemplateIntegrityError(ScaffoldError):
    """Raised when a bundled template is missing or cannot be parsed."""


class FilesystemError(ScaffoldError):
    """Raised when a directory or file inside the project cannot be created."""

    def __init__(self, message: str, path: str | Path) -> None:
        super().__init__(message)
        self.path = Path(path)


class InteractionError(ScaffoldError):
    """Raised when an answer cannot be read from the user."""


class ExternalToolError(ScaffoldError):
    """Raised when an external command fails to launch or exits with an error."""

    def __init__(self, message: str, command: Sequence[str]) -> None:
        super().__init__(message)
        self.command = tuple(command)
