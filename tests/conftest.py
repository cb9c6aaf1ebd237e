from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from ts_scaffold.config import ProjectRequest  # noqa: E402
from ts_scaffold.template import TemplateStore  # noqa: E402


class FakeGit:
    """Stand-in for ``git`` that only creates the metadata directory."""

    def __init__(self) -> None:
        self.calls: list[Path] = []

    def init(self, directory: Path) -> None:
        self.calls.append(directory)
        (directory / ".git").mkdir()


@pytest.fixture()
def fake_git() -> FakeGit:
    return FakeGit()


@pytest.fixture()
def store() -> TemplateStore:
    return TemplateStore()


@pytest.fixture()
def request_for(tmp_path: Path):
    def build(name: str = "demo") -> ProjectRequest:
        return ProjectRequest.from_name(name, base_dir=tmp_path)

    return build
