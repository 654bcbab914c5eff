"""RFC 6902 JSON Patch generation from change records.

Turns the output of :func:`pug_client.tracking.changes.diff` into the
operations sent as the ``data`` body of a PATCH request::

    [{"op": "replace", "path": "/metadata/labels/status", "value": "ready"}]

Two key conventions are supported. ``CAMEL`` (the default) camelizes every
path segment and every key inside values, matching the attribute names the
API returns. ``SNAKE`` sends paths and value keys verbatim, for backends
that apply patches against snake_case records.
"""

from enum import Enum
from typing import Any, Iterable, Literal, NotRequired, TypedDict

from pug_client.tracking.changes import Added, ChangeRecord, Removed, Replaced
from pug_client.tracking.tracked import to_plain
from pug_client.tracking.translator import camelize, to_api


class PatchOperation(TypedDict):
    """A single JSON Patch operation."""

    op: Literal["add", "remove", "replace"]
    path: str
    value: NotRequired[Any]


class PatchKeyStyle(str, Enum):
    """Key convention for generated patch paths and values."""

    CAMEL = "camel"
    SNAKE = "snake"


def escape_segment(segment: str) -> str:
    """Escape a JSON Pointer reference token (RFC 6901)."""
    return segment.replace("~", "~0").replace("/", "~1")


class PatchGenerator:
    """Converts change records into JSON Patch operations."""

    def __init__(self, key_style: PatchKeyStyle | str = PatchKeyStyle.CAMEL) -> None:
        self.key_style = PatchKeyStyle(key_style)

    def generate(self, changes: Iterable[ChangeRecord]) -> list[PatchOperation]:
        """Generate operations in the same order as ``changes``."""
        return [self._operation(change) for change in changes]

    def json_pointer(self, path: Iterable[Any]) -> str:
        """Build a JSON Pointer from a key path.

        Examples:
            >>> PatchGenerator().json_pointer(("metadata", "labels", "new_key"))
            '/metadata/labels/newKey'
        """
        segments = []
        for key in path:
            if isinstance(key, int) or self.key_style is PatchKeyStyle.SNAKE:
                segment = str(key)
            else:
                segment = camelize(key)
            segments.append(escape_segment(segment))
        return "/" + "/".join(segments)

    def convert(self, value: Any) -> Any:
        """Unwrap tracked containers and translate keys for the wire."""
        plain = to_plain(value)
        if self.key_style is PatchKeyStyle.SNAKE:
            return plain
        return to_api(plain)

    def _operation(self, change: ChangeRecord) -> PatchOperation:
        if isinstance(change, Added):
            return {
                "op": "add",
                "path": self.json_pointer(change.path),
                "value": self.convert(change.value),
            }
        if isinstance(change, Removed):
            return {"op": "remove", "path": self.json_pointer(change.path)}
        if isinstance(change, Replaced):
            return {
                "op": "replace",
                "path": self.json_pointer(change.path),
                "value": self.convert(change.new_value),
            }
        raise TypeError(f"Unknown change record: {change!r}")


def generate_patch(
    changes: Iterable[ChangeRecord],
    key_style: PatchKeyStyle | str = PatchKeyStyle.CAMEL,
) -> list[PatchOperation]:
    """Generate JSON Patch operations from change records."""
    return PatchGenerator(key_style).generate(changes)
