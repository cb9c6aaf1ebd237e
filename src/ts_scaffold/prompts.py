"""Yes/no decisions asked of the user while scaffolding."""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable, Mapping
from typing import Optional, TextIO

from .errors import InteractionError

__all__ = [
    "ConsoleOptionResolver",
    "GIT_PROMPT",
    "OptionResolver",
    "STRICT_PROMPT",
    "ScriptedOptionResolver",
]


LOGGER = logging.getLogger(__name__)

GIT_PROMPT = "Initialize git repository?"
STRICT_PROMPT = "Use strict TypeScript mode?"

_YES = frozenset({"y", "yes"})
_NO = frozenset({"n", "no"})


class OptionResolver(ABC):
    """Source of boolean decisions for optional features."""

    @abstractmethod
    def confirm(self, prompt: str, default: bool = False) -> bool:
        """Ask ``prompt`` and return the answer, or ``default`` when none is given."""


class ConsoleOptionResolver(OptionResolver):
    """Ask questions on a text stream, ``stdin``/``stdout`` by default.

    An empty answer selects the default. Unrecognised answers repeat the
    question. Running out of input is fatal.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def confirm(self, prompt: str, default: bool = False) -> bool:
        suffix = "[Y/n]" if default else "[y/N]"
        while True:
            self.stdout.write(f"{prompt} {suffix}: ")
            self.stdout.flush()
            answer = self._read_line(prompt)
            if not answer:
                return default
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            self.stdout.write("Please answer 'y' or 'n'.\n")

    def _read_line(self, prompt: str) -> str:
        try:
            line = self.stdin.readline()
        except (OSError, KeyboardInterrupt) as exc:
            raise InteractionError(f"could not read an answer to '{prompt}'") from exc
        if not line:
            raise InteractionError(f"input closed before answering '{prompt}'")
        return line.strip().lower()


class ScriptedOptionResolver(OptionResolver):
    """Return canned answers, keyed by prompt text or consumed in order.

    ``None`` answers select the default. Every prompt is recorded in
    :attr:`asked` so callers can check which questions were shown.
    """

    def __init__(self, answers: Mapping[str, Optional[bool]] | Iterable[Optional[bool]]) -> None:
        self._by_prompt: dict[str, Optional[bool]] | None = None
        self._queue: deque[Optional[bool]] = deque()
        if isinstance(answers, Mapping):
            self._by_prompt = dict(answers)
        else:
            self._queue.extend(answers)
        self.asked: list[str] = []

    def confirm(self, prompt: str, default: bool = False) -> bool:
        self.asked.append(prompt)
        if self._by_prompt is not None:
            if prompt not in self._by_prompt:
                raise InteractionError(f"no scripted answer for '{prompt}'")
            answer = self._by_prompt[prompt]
        else:
            if not self._queue:
                raise InteractionError(f"no scripted answer left for '{prompt}'")
            answer = self._queue.popleft()

        decision = default if answer is None else answer
        LOGGER.debug("scripted answer for %r: %s", prompt, decision)
        return decision
