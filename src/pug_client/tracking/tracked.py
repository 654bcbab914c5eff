"""Containers that report mutations to the resource that owns them.

A resource wraps every nested dict and list of its attributes in
:class:`TrackedDict` / :class:`TrackedList`. Any mutating call on one of
these containers, at any depth, notifies the owner before the mutation
happens, so ``video.metadata["labels"]["status"] = "ready"`` marks the
video dirty. Reads never notify.

The owner is any object implementing :class:`Notifiable`. A container
built without an owner behaves like a plain dict or list.
"""

from typing import Any, Iterable, Protocol, SupportsIndex, runtime_checkable

from pug_client.core.exceptions import ResourceFrozenError


@runtime_checkable
class Notifiable(Protocol):
    """Receiver of mutation notifications from tracked containers."""

    def mark_dirty(self) -> None:
        ...

    def is_frozen(self) -> bool:
        ...


def wrap(value: Any, owner: Notifiable | None = None) -> Any:
    """Wrap dicts and lists (recursively) in tracked containers.

    A container already tracked for the same owner is returned as-is;
    anything tracked for another owner is copied so it reports here.
    Scalars are returned unchanged.
    """
    if isinstance(value, (TrackedDict, TrackedList)) and value.owner is owner:
        return value
    if isinstance(value, dict):
        return TrackedDict(value, owner=owner)
    if isinstance(value, list):
        return TrackedList(value, owner=owner)
    return value


def to_plain(value: Any) -> Any:
    """Deep-convert tracked containers back into plain dicts and lists."""
    if isinstance(value, dict):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_plain(item) for item in value]
    return value


class _Tracked:
    """Owner bookkeeping shared by the tracked container types."""

    _owner: Notifiable | None = None

    @property
    def owner(self) -> Notifiable | None:
        return self._owner

    def _notify(self) -> None:
        owner = self._owner
        if owner is None:
            return
        if owner.is_frozen():
            raise ResourceFrozenError()
        owner.mark_dirty()

    def _wrap(self, value: Any) -> Any:
        return wrap(value, self._owner)


class TrackedDict(_Tracked, dict):
    """A dict that notifies its owner whenever it is modified.

    Example:
        labels = TrackedDict({"env": "prod"}, owner=video)
        labels["status"] = "ready"  # video.mark_dirty() is called first
    """

    def __init__(self, initial: Any = None, owner: Notifiable | None = None) -> None:
        super().__init__()
        self._owner = owner
        # Initial population bypasses notification
        for key, value in dict(initial or {}).items():
            dict.__setitem__(self, key, self._wrap(value))

    def __setitem__(self, key: Any, value: Any) -> None:
        self._notify()
        dict.__setitem__(self, key, self._wrap(value))

    def __delitem__(self, key: Any) -> None:
        self._notify()
        dict.__delitem__(self, key)

    def __ior__(self, other: Any) -> "TrackedDict":
        self.update(other)
        return self

    def pop(self, key: Any, *default: Any) -> Any:
        self._notify()
        return dict.pop(self, key, *default)

    def popitem(self) -> tuple[Any, Any]:
        self._notify()
        return dict.popitem(self)

    def setdefault(self, key: Any, default: Any = None) -> Any:
        if key not in self:
            self[key] = default
        return dict.__getitem__(self, key)

    def update(self, *args: Any, **kwargs: Any) -> None:
        self._notify()
        for key, value in dict(*args, **kwargs).items():
            dict.__setitem__(self, key, self._wrap(value))

    def merge(self, other: Any) -> "TrackedDict":
        """Update from ``other`` and return self."""
        self.update(other)
        return self

    def clear(self) -> None:
        self._notify()
        dict.clear(self)

    def replace(self, other: Any) -> "TrackedDict":
        """Replace the entire contents with ``other`` and return self."""
        self._notify()
        dict.clear(self)
        for key, value in dict(other).items():
            dict.__setitem__(self, key, self._wrap(value))
        return self

    def adopt(self, owner: Notifiable | None) -> "TrackedDict":
        """Re-point this container, and everything nested in it, at ``owner``."""
        self._owner = owner
        for value in dict.values(self):
            if isinstance(value, (TrackedDict, TrackedList)):
                value.adopt(owner)
        return self

    def to_plain(self) -> dict[Any, Any]:
        return to_plain(self)


class TrackedList(_Tracked, list):
    """A list that notifies its owner whenever it is modified."""

    def __init__(self, initial: Iterable[Any] | None = None, owner: Notifiable | None = None) -> None:
        super().__init__()
        self._owner = owner
        list.extend(self, (self._wrap(item) for item in (initial or [])))

    def __setitem__(self, index: Any, value: Any) -> None:
        self._notify()
        if isinstance(index, slice):
            list.__setitem__(self, index, [self._wrap(item) for item in value])
        else:
            list.__setitem__(self, index, self._wrap(value))

    def __delitem__(self, index: Any) -> None:
        self._notify()
        list.__delitem__(self, index)

    def __iadd__(self, other: Iterable[Any]) -> "TrackedList":
        self.extend(other)
        return self

    def __imul__(self, count: SupportsIndex) -> "TrackedList":
        self._notify()
        list.__imul__(self, count)
        return self

    def append(self, item: Any) -> None:
        self._notify()
        list.append(self, self._wrap(item))

    def extend(self, items: Iterable[Any]) -> None:
        self._notify()
        list.extend(self, [self._wrap(item) for item in items])

    def insert(self, index: SupportsIndex, item: Any) -> None:
        self._notify()
        list.insert(self, index, self._wrap(item))

    def pop(self, index: SupportsIndex = -1) -> Any:
        self._notify()
        return list.pop(self, index)

    def remove(self, item: Any) -> None:
        self._notify()
        list.remove(self, item)

    def clear(self) -> None:
        self._notify()
        list.clear(self)

    def sort(self, *args: Any, **kwargs: Any) -> None:
        self._notify()
        list.sort(self, *args, **kwargs)

    def reverse(self) -> None:
        self._notify()
        list.reverse(self)

    def adopt(self, owner: Notifiable | None) -> "TrackedList":
        """Re-point this container, and everything nested in it, at ``owner``."""
        self._owner = owner
        for item in list.__iter__(self):
            if isinstance(item, (TrackedDict, TrackedList)):
                item.adopt(owner)
        return self

    def to_plain(self) -> list[Any]:
        return to_plain(self)
