"""Bundled project templates and the JSON documents parsed from them."""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field
from enum import Enum
from importlib import resources
from typing import Any, MutableMapping

from .errors import TemplateIntegrityError

__all__ = [
    "TemplateDocument",
    "TemplateKind",
    "TemplateStore",
    "parse",
    "serialize",
]


_TEMPLATE_PACKAGE = "ts_scaffold"
_TEMPLATE_DIRECTORY = "templates"
_MISSING = object()


class TemplateKind(str, Enum):
    """The four files a new project is generated from."""

    COMPILER_CONFIG = "tsconfig.json"
    PACKAGE_MANIFEST = "package.json"
    IGNORE_LIST = "gitignore"
    ENTRY_SOURCE = "main.ts"

    @property
    def resource_name(self) -> str:
        """File name of the payload inside the bundled ``templates`` directory."""

        return self.value

    @property
    def structured(self) -> bool:
        """Whether the payload is a JSON document rather than an opaque blob."""

        return self in {TemplateKind.COMPILER_CONFIG, TemplateKind.PACKAGE_MANIFEST}


def _split_path(dotted_path: str) -> list[str]:
    segments = dotted_path.split(".")
    if not all(segments):
        raise KeyError(dotted_path)
    return segments


class TemplateDocument:
    """Mutable JSON object addressed with dotted key paths.

    Keys keep the order they had in the template. :meth:`set` only ever adds or
    replaces the final key of a path, so defaults supplied by the template are
    never dropped.
    """

    def __init__(self, data: MutableMapping[str, Any]) -> None:
        if not isinstance(data, dict):
            raise TypeError("template documents must wrap a JSON object")
        self._data: dict[str, Any] = data

    def get(self, dotted_path: str, default: Any = None) -> Any:
        value: Any = self._data
        for segment in _split_path(dotted_path):
            if not isinstance(value, dict) or segment not in value:
                return default
            value = value[segment]
        return value

    def contains(self, dotted_path: str) -> bool:
        return self.get(dotted_path, _MISSING) is not _MISSING

    def set(self, dotted_path: str, value: Any) -> None:
        """Assign ``value`` at ``dotted_path``, creating missing parent objects.

        Raises :class:`KeyError` when an intermediate segment exists but is not
        an object.
        """

        *parents, leaf = _split_path(dotted_path)
        node = self._data
        for segment in parents:
            child = node.setdefault(segment, {})
            if not isinstance(child, dict):
                raise KeyError(f"'{segment}' in '{dotted_path}' is not an object")
            node = child
        node[leaf] = value

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the underlying mapping."""

        return copy.deepcopy(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TemplateDocument):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"TemplateDocument({self._data!r})"


def parse(data: bytes) -> TemplateDocument:
    """Decode ``data`` as a UTF-8 JSON object."""

    try:
        loaded = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise TemplateIntegrityError(f"template is not valid JSON: {exc}") from exc

    if not isinstance(loaded, dict):
        raise TemplateIntegrityError(
            f"template root must be a JSON object, got {type(loaded).__name__}"
        )
    return TemplateDocument(loaded)


def serialize(document: TemplateDocument) -> bytes:
    """Render ``document`` as indented JSON with a trailing newline."""

    text = json.dumps(document.to_dict(), indent=2, ensure_ascii=False)
    return f"{text}\n".encode("utf-8")


@dataclass(slots=True)
class TemplateStore:
    """Read-only access to the template payloads shipped with the package."""

    package: str = _TEMPLATE_PACKAGE
    directory: str = _TEMPLATE_DIRECTORY
    _cache: dict[TemplateKind, bytes] = field(default_factory=dict, init=False, repr=False)

    def load(self, kind: TemplateKind) -> bytes:
        """Return the raw payload for ``kind``."""

        cached = self._cache.get(kind)
        if cached is not None:
            return cached

        resource = (
            resources.files(self.package).joinpath(self.directory).joinpath(kind.resource_name)
        )
        try:
            payload = resource.read_bytes()
        except OSError as exc:
            raise TemplateIntegrityError(
                f"bundled template '{kind.resource_name}' is missing"
            ) from exc

        self._cache[kind] = payload
        return payload

    def document(self, kind: TemplateKind) -> TemplateDocument:
        """Parse a structured template into a fresh, independent document."""

        if not kind.structured:
            raise TemplateIntegrityError(f"template '{kind.resource_name}' is not structured")
        try:
            return parse(self.load(kind))
        except TemplateIntegrityError as exc:
            raise TemplateIntegrityError(f"{kind.resource_name}: {exc}") from exc

    def verify(self) -> None:
        """Load every template and parse the structured ones."""

        for kind in TemplateKind:
            if kind.structured:
                self.document(kind)
            else:
                self.load(kind)
