"""Scaffold new TypeScript projects.

The package bundles the templates for ``tsconfig.json``, ``package.json``,
``.gitignore`` and ``src/main.ts`` and exposes the materializer that writes them,
usable both programmatically and through the ``ts-scaffold`` command.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import ProjectRequest
from .errors import (
    ExternalToolError,
    FilesystemError,
    InteractionError,
    ScaffoldError,
    TemplateIntegrityError,
)
from .prompts import ConsoleOptionResolver, OptionResolver, ScriptedOptionResolver
from .scaffold import ProjectMaterializer, ScaffoldReport
from .template import TemplateDocument, TemplateKind, TemplateStore
from .vcs import GitRepository

__all__ = [
    "ConsoleOptionResolver",
    "ExternalToolError",
    "FilesystemError",
    "GitRepository",
    "InteractionError",
    "OptionResolver",
    "ProjectMaterializer",
    "ProjectRequest",
    "ScaffoldError",
    "ScaffoldReport",
    "ScriptedOptionResolver",
    "TemplateDocument",
    "TemplateIntegrityError",
    "TemplateKind",
    "TemplateStore",
]
