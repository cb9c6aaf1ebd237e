"""The validated request describing which project to scaffold."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "ENTRY_SOURCE_NAME",
    "GITIGNORE_NAME",
    "GIT_DIR_NAME",
    "PACKAGE_JSON_NAME",
    "ProjectRequest",
    "SOURCE_DIR_NAME",
    "TSCONFIG_NAME",
]


GIT_DIR_NAME = ".git"
GITIGNORE_NAME = ".gitignore"
TSCONFIG_NAME = "tsconfig.json"
PACKAGE_JSON_NAME = "package.json"
SOURCE_DIR_NAME = "src"
ENTRY_SOURCE_NAME = "main.ts"

_FORBIDDEN_CHARACTERS = ("/", "\\", "\x00")


class ProjectRequest(BaseModel):
    """A single request to scaffold ``project_name`` inside ``base_dir``.

    The name is kept verbatim: it is used both as the directory name and as the
    ``name`` field of the generated ``package.json``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    project_name: str = Field(..., description="Name of the project directory and package.")
    base_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory in which the project directory is created.",
    )

    @field_validator("project_name")
    @classmethod
    def _check_path_segment(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("project name must not be empty")
        if value in {".", ".."}:
            raise ValueError(f"'{value}' is not a valid project name")
        for character in _FORBIDDEN_CHARACTERS:
            if character in value:
                raise ValueError(
                    f"project name must be a single path segment, got {value!r}"
                )
        return value

    @classmethod
    def from_name(cls, name: str, *, base_dir: str | Path | None = None) -> "ProjectRequest":
        """Build a request for ``name``, defaulting ``base_dir`` to the CWD."""

        if base_dir is None:
            return cls(project_name=name)
        return cls(project_name=name, base_dir=Path(base_dir))

    @property
    def project_dir(self) -> Path:
        return self.base_dir / self.project_name

    @property
    def git_dir(self) -> Path:
        return self.project_dir / GIT_DIR_NAME

    @property
    def gitignore_path(self) -> Path:
        return self.project_dir / GITIGNORE_NAME

    @property
    def tsconfig_path(self) -> Path:
        return self.project_dir / TSCONFIG_NAME

    @property
    def package_json_path(self) -> Path:
        return self.project_dir / PACKAGE_JSON_NAME

    @property
    def source_dir(self) -> Path:
        return self.project_dir / SOURCE_DIR_NAME

    @property
    def entry_source_path(self) -> Path:
        return self.source_dir / ENTRY_SOURCE_NAME
