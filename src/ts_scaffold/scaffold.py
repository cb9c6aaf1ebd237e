"""Turn a :class:`ProjectRequest` into a TypeScript project on disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import ProjectRequest
from .errors import FilesystemError
from .prompts import GIT_PROMPT, STRICT_PROMPT, OptionResolver
from .template import TemplateKind, TemplateStore, serialize
from .vcs import VersionControl

__all__ = ["ProjectMaterializer", "STRICT_FLAGS", "ScaffoldReport"]


LOGGER = logging.getLogger(__name__)

STRICT_FLAGS = (
    "compilerOptions.strict",
    "compilerOptions.noUncheckedIndexedAccess",
    "compilerOptions.noImplicitOverride",
)


@dataclass(slots=True)
class ScaffoldReport:
    """What a single :meth:`ProjectMaterializer.run` did."""

    project_dir: Path
    created_root: bool = False
    git_initialized: bool = False
    strict: bool = False
    written: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)


def _write_bytes(path: Path, payload: bytes) -> None:
    try:
        path.write_bytes(payload)
    except OSError as exc:
        raise FilesystemError(f"failed to write {path}: {exc}", path) from exc


class ProjectMaterializer:
    """Create the project directory and its files in a fixed order.

    Steps run one after the other and nothing is rolled back when a later step
    fails. Re-running against the same directory is safe: an existing ``.git``
    directory skips version control entirely and an existing ``src`` directory
    is never written into.
    """

    def __init__(
        self,
        store: TemplateStore,
        resolver: OptionResolver,
        vcs: VersionControl,
    ) -> None:
        self.store = store
        self.resolver = resolver
        self.vcs = vcs

    def run(self, request: ProjectRequest) -> ScaffoldReport:
        report = ScaffoldReport(project_dir=request.project_dir)
        report.created_root = self.ensure_root_directory(request)
        self.maybe_init_version_control(request, report)
        self.write_compiler_config(request, report)
        self.write_package_manifest(request, report)
        self.write_entry_source(request, report)
        return report

    def ensure_root_directory(self, request: ProjectRequest) -> bool:
        """Create the project directory, returning ``False`` if it already existed."""

        project_dir = request.project_dir
        if project_dir.is_dir():
            LOGGER.info("using existing directory %s", project_dir)
            return False
        try:
            project_dir.mkdir()
        except OSError as exc:
            raise FilesystemError(
                f"failed to create project directory {project_dir}: {exc}", project_dir
            ) from exc
        LOGGER.info("created project directory %s", project_dir)
        return True

    def maybe_init_version_control(
        self, request: ProjectRequest, report: ScaffoldReport | None = None
    ) -> bool:
        # An existing repository also means the ignore-list is left alone.
        if request.git_dir.exists():
            LOGGER.info("%s already exists, skipping git setup", request.git_dir)
            if report is not None:
                report.skipped.append(request.git_dir)
            return False

        if not self.resolver.confirm(GIT_PROMPT, default=True):
            LOGGER.info("git initialisation declined")
            return False

        self.vcs.init(request.project_dir)
        _write_bytes(request.gitignore_path, self.store.load(TemplateKind.IGNORE_LIST))
        LOGGER.info("wrote %s", request.gitignore_path)
        if report is not None:
            report.git_initialized = True
            report.written.append(request.gitignore_path)
        return True

    def write_compiler_config(
        self, request: ProjectRequest, report: ScaffoldReport | None = None
    ) -> bool:
        """Write ``tsconfig.json``, adding the strict flags when requested.

        Returns whether strict mode was enabled.
        """

        document = self.store.document(TemplateKind.COMPILER_CONFIG)
        strict = self.resolver.confirm(STRICT_PROMPT, default=False)
        if strict:
            for flag in STRICT_FLAGS:
                document.set(flag, True)

        _write_bytes(request.tsconfig_path, serialize(document))
        LOGGER.info("wrote %s (strict=%s)", request.tsconfig_path, strict)
        if report is not None:
            report.strict = strict
            report.written.append(request.tsconfig_path)
        return strict

    def write_package_manifest(
        self, request: ProjectRequest, report: ScaffoldReport | None = None
    ) -> None:
        document = self.store.document(TemplateKind.PACKAGE_MANIFEST)
        document.set("name", request.project_name)

        _write_bytes(request.package_json_path, serialize(document))
        LOGGER.info("wrote %s", request.package_json_path)
        if report is not None:
            report.written.append(request.package_json_path)

    def write_entry_source(
        self, request: ProjectRequest, report: ScaffoldReport | None = None
    ) -> bool:
        """Create ``src/main.ts`` unless the ``src`` directory already exists."""

        source_dir = request.source_dir
        if source_dir.exists():
            LOGGER.info("%s already exists, leaving it untouched", source_dir)
            if report is not None:
                report.skipped.append(source_dir)
            return False

        try:
            source_dir.mkdir()
        except OSError as exc:
            raise FilesystemError(
                f"failed to create source directory {source_dir}: {exc}", source_dir
            ) from exc
        _write_bytes(request.entry_source_path, self.store.load(TemplateKind.ENTRY_SOURCE))
        LOGGER.info("wrote %s", request.entry_source_path)
        if report is not None:
            report.written.append(request.entry_source_path)
        return True
