"""Change detection between two attribute snapshots.

:func:`diff` walks an ``original`` and a ``current`` snapshot and returns
one record per structural difference, each addressed by the path of keys
from the root to the changed field.

Records are emitted depth-first in a fixed order at every level:

1. keys added in ``current``, in ``current`` iteration order;
2. keys removed from ``original``, in ``original`` iteration order;
3. keys present in both with unequal values, in ``original`` order.

A key present in both whose values are both mappings is recursed into.
Lists are atomic: any list difference is a single :class:`Replaced` at the
list's own path.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Union

from pug_client.tracking.tracked import to_plain

Path = tuple[Any, ...]


@dataclass(frozen=True, slots=True)
class Added:
    """Key present in ``current`` but not in ``original``."""

    path: Path
    value: Any


@dataclass(frozen=True, slots=True)
class Removed:
    """Key present in ``original`` but not in ``current``."""

    path: Path


@dataclass(frozen=True, slots=True)
class Replaced:
    """Key present in both snapshots with different values."""

    path: Path
    old_value: Any
    new_value: Any


ChangeRecord = Union[Added, Removed, Replaced]


def same_value(a: Any, b: Any) -> bool:
    """Compare two plain JSON values.

    Unlike ``==``, booleans never equal numbers: ``1`` and ``True`` are
    distinct JSON values.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, Mapping) and isinstance(b, Mapping):
        return a.keys() == b.keys() and all(same_value(a[key], b[key]) for key in a)
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(same_value(x, y) for x, y in zip(a, b))
    return a == b


def diff(
    original: Mapping[Any, Any] | None,
    current: Mapping[Any, Any] | None,
    path: Path = (),
) -> list[ChangeRecord]:
    """Compute the differences between two snapshots.

    Args:
        original: Snapshot captured at load or save time.
        current: Snapshot as mutated by the caller.
        path: Key path of the snapshots within the enclosing document.

    Returns:
        list[ChangeRecord]: Ordered change records; empty if either
        snapshot is None or both are equal.
    """
    if original is None or current is None:
        return []

    path = tuple(path)
    changes: list[ChangeRecord] = []

    for key in current:
        if key not in original:
            changes.append(Added(path + (key,), current[key]))

    for key in original:
        if key not in current:
            changes.append(Removed(path + (key,)))

    for key in original:
        if key not in current:
            continue
        old_value = original[key]
        new_value = current[key]
        if same_value(to_plain(old_value), to_plain(new_value)):
            continue
        if isinstance(old_value, Mapping) and isinstance(new_value, Mapping):
            changes.extend(diff(old_value, new_value, path + (key,)))
        else:
            changes.append(Replaced(path + (key,), old_value, new_value))

    return changes


def apply(document: Mapping[Any, Any], changes: list[ChangeRecord]) -> dict[Any, Any]:
    """Apply change records to a copy of ``document``.

    The inverse of :func:`diff`: ``apply(a, diff(a, b)) == b`` for any two
    snapshots built from scalars, mappings and lists.

    Raises:
        KeyError: If a record's parent path does not exist in the document.
    """
    result = to_plain(document)
    for change in changes:
        *parents, leaf = change.path
        target = result
        for key in parents:
            target = target[key]
        if isinstance(change, Added):
            target[leaf] = to_plain(change.value)
        elif isinstance(change, Replaced):
            target[leaf] = to_plain(change.new_value)
        elif isinstance(change, Removed):
            del target[leaf]
        else:
            raise TypeError(f"Unknown change record: {change!r}")
    return result
