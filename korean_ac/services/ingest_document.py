from __future__ import annotations

from typing import Any, MutableMapping

from korean_ac.services.errors import FieldNotFound, FieldPathConflict

_MISSING = object()


class IngestDocument:
    """Mutable document addressed by dotted field paths ("title.ko").

    Only nested mappings are traversed; a path that runs into a non-mapping
    value is treated as missing.
    """

    def __init__(self, source: MutableMapping[str, Any] | None = None) -> None:
        self._source: MutableMapping[str, Any] = source if source is not None else {}

    @property
    def source(self) -> MutableMapping[str, Any]:
        return self._source

    def _lookup(self, path: str) -> Any:
        node: Any = self._source
        for part in path.split("."):
            if not isinstance(node, MutableMapping) or part not in node:
                return _MISSING
            node = node[part]
        return node

    def has_field(self, path: str) -> bool:
        return self._lookup(path) is not _MISSING

    def get_field_value(self, path: str, ignore_missing: bool = False) -> Any:
        value = self._lookup(path)
        if value is _MISSING:
            if ignore_missing:
                return None
            raise FieldNotFound(path)
        return value

    def set_field_value(self, path: str, value: Any) -> None:
        """Store `value` at `path`, creating missing intermediate mappings.

        Raises:
            FieldPathConflict: if an existing value along the path is not a
                mapping. The document is left unchanged.
        """
        parts = path.split(".")
        node = self._source
        for part in parts[:-1]:
            if part not in node:
                node[part] = {}
            child = node[part]
            if not isinstance(child, MutableMapping):
                raise FieldPathConflict(path, part, child)
            node = child
        node[parts[-1]] = value

    def __repr__(self) -> str:
        return "IngestDocument({!r})".format(dict(self._source))
