"""Base class for all API resources.

A resource mirrors the attributes of one server-side object. Attributes are
kept twice: ``original`` (a plain snapshot taken at load time) and
``current`` (tracked containers the caller mutates). Saving diffs the two
snapshots and sends the result as a JSON Patch.

Lifecycle:

- loaded: ``original == current``, not dirty;
- dirty: at least one mutation since the last load;
- frozen: after a successful delete; every mutation raises
  :class:`ResourceFrozenError`, reads keep working.

Example:
    video = client.video("video-123")
    video.metadata["labels"]["status"] = "ready"
    video.changed()  # True
    video.save()     # PATCH [{"op": "add", "path": "/metadata/labels/status", ...}]
"""

from datetime import datetime, timezone
from typing import Any, ClassVar, Mapping

from pug_client.core.exceptions import (
    PugClientError,
    ResourceFrozenError,
    ResourceNotFound,
    ValidationError,
)
from pug_client.core.logging import get_logger
from pug_client.tracking.changes import ChangeRecord, diff
from pug_client.tracking.patch import PatchGenerator, PatchKeyStyle, PatchOperation
from pug_client.tracking.tracked import TrackedDict, to_plain
from pug_client.tracking.translator import from_api, to_api

logger = get_logger(__name__)


class Attribute:
    """Declared accessor for a resource attribute.

    ``video.metadata`` reads through :meth:`Resource.get`; assignment goes
    through :meth:`Resource.set`, so read-only and frozen checks apply.
    """

    def __init__(self, read_only: bool = False) -> None:
        self.read_only = read_only
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: "Resource | None", owner: type) -> Any:
        if instance is None:
            return self
        return instance.get(self.name)

    def __set__(self, instance: "Resource", value: Any) -> None:
        instance.set(self.name, value)


def parse_payload(payload: Any) -> dict[str, Any]:
    """Extract snake_case attributes from an API payload.

    Accepted shapes:

    - ``{"data": {"id", "type", "attributes"}}`` (or ``data`` a one-item list)
    - ``{"id", "type", "attributes"}`` (an item from a collection response)
    - a flat attribute mapping

    Any other shape, including a ``data`` list with zero or several items,
    yields an empty attribute set rather than an error.
    """
    if not isinstance(payload, Mapping):
        return {}

    if "data" in payload:
        data = payload["data"]
        if isinstance(data, list) and len(data) == 1:
            data = data[0]
        if not isinstance(data, Mapping):
            return {}
        return _resource_object_attributes(data)

    if "id" in payload and "attributes" in payload:
        return _resource_object_attributes(payload)

    return from_api(payload)


def _resource_object_attributes(data: Mapping[str, Any]) -> dict[str, Any]:
    attributes = from_api(data.get("attributes") or {})
    attributes["id"] = data.get("id")
    attributes["type"] = data.get("type")
    return attributes


def iso8601(value: Any) -> Any:
    """Render datetimes as UTC ISO 8601 strings; other values pass through.

    Naive datetimes are taken to be UTC.
    """
    if not isinstance(value, datetime):
        return value
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def shorten(text: str | None, limit: int = 50) -> str | None:
    """Truncate long strings for display."""
    if text is None or len(text) <= limit:
        return text
    return text[:limit] + "..."


class Resource:
    """Generic resource shell: attribute storage, dirty tracking and patches.

    Subclasses declare their attributes with :class:`Attribute`, name their
    JSON:API ``resource_type`` and implement :meth:`save`, :meth:`reload`
    and :meth:`delete` on top of the ``_send_patch`` / ``_fetch`` /
    ``_destroy`` helpers.
    """

    resource_name: ClassVar[str] = "Resource"
    resource_type: ClassVar[str] = ""
    read_only_attributes: ClassVar[frozenset[str]] = frozenset({"id"})
    not_found_statuses: ClassVar[tuple[int, ...]] = (404,)

    id = Attribute(read_only=True)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # Collect read-only attributes declared anywhere in the class tree
        read_only = set(cls.read_only_attributes)
        for klass in cls.__mro__:
            for name, value in vars(klass).items():
                if isinstance(value, Attribute) and value.read_only:
                    read_only.add(name)
        cls.read_only_attributes = frozenset(read_only)

    def __init__(self, client: Any, attributes: Any = None) -> None:
        """Initialize a resource.

        Args:
            client: API client used by save/reload/delete.
            attributes: Payload from the API or a flat attribute mapping.
        """
        self._client = client
        self._dirty = False
        self._frozen = False
        self._original: dict[str, Any] = {}
        self._current = TrackedDict({}, owner=self)
        self.load_attributes(attributes or {})

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_attributes(self, payload: Any) -> None:
        """Replace all attributes with those parsed from ``payload``.

        Both snapshots are reset and the dirty flag is cleared.

        Raises:
            ResourceFrozenError: If the resource has been deleted.
        """
        if self._frozen:
            raise ResourceFrozenError()
        parsed = parse_payload(payload)
        self._current = TrackedDict(parsed, owner=self)
        self._original = to_plain(self._current)
        self._dirty = False

    @property
    def client(self) -> Any:
        return self._client

    # ------------------------------------------------------------------
    # Attribute access
    # ------------------------------------------------------------------

    def get(self, field: str, default: Any = None) -> Any:
        """Return the current value of ``field`` (tracked containers for dicts/lists)."""
        return self._current.get(field, default)

    def set(self, field: str, value: Any) -> None:
        """Assign ``field``.

        Raises:
            ResourceFrozenError: If the resource has been deleted.
            ValidationError: If ``field`` is read-only.
        """
        if self._frozen:
            raise ResourceFrozenError()
        if field in self.read_only_attributes:
            raise ValidationError(f"Cannot modify read-only attribute: {field}")
        self._current[field] = value

    def __getitem__(self, field: str) -> Any:
        return self._current[field]

    def __setitem__(self, field: str, value: Any) -> None:
        self.set(field, value)

    def __contains__(self, field: object) -> bool:
        return field in self._current

    def attributes(self) -> dict[str, Any]:
        """Return a plain deep copy of the current attributes."""
        return to_plain(self._current)

    def to_api(self) -> dict[str, Any]:
        """Return the current attributes with API (camelCase) keys."""
        return to_api(self._current)

    # ------------------------------------------------------------------
    # Dirty tracking
    # ------------------------------------------------------------------

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    def mark_dirty(self) -> None:
        """Record that attributes were mutated.

        Raises:
            ResourceFrozenError: If the resource has been deleted.
        """
        if self._frozen:
            raise ResourceFrozenError()
        self._dirty = True

    def clear_dirty(self) -> None:
        self._dirty = False

    def is_frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Make the resource permanently read-only."""
        self._frozen = True

    def changes(self) -> list[ChangeRecord]:
        """Differences between the loaded snapshot and the current attributes."""
        return diff(self._original, self._current)

    def changed(self) -> bool:
        """Check if saving would send any operation."""
        return bool(self.changes())

    @property
    def patch_key_style(self) -> PatchKeyStyle:
        return PatchKeyStyle(getattr(self._client, "patch_key_style", PatchKeyStyle.CAMEL))

    def generate_patch_operations(self) -> list[PatchOperation]:
        """Build the JSON Patch for unsaved changes; empty if nothing was mutated."""
        if not self._dirty:
            return []
        return PatchGenerator(self.patch_key_style).generate(self.changes())

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self) -> bool:
        raise NotImplementedError(f"{type(self).__name__} must implement save()")

    def reload(self) -> "Resource":
        raise NotImplementedError(f"{type(self).__name__} must implement reload()")

    def delete(self) -> bool:
        raise NotImplementedError(f"{type(self).__name__} must implement delete()")

    def _send_patch(self, path: str) -> bool:
        if self._frozen:
            raise ResourceFrozenError()
        operations = self.generate_patch_operations()
        if not operations:
            self.clear_dirty()
            return True

        logger.info(
            "Saving resource",
            resource=self.resource_name,
            resource_id=self.id,
            operations=len(operations),
        )
        response = self._client.patch(path, {"data": operations})
        self._rehydrate(response)
        return True

    def _fetch(self, path: str) -> "Resource":
        if self._frozen:
            raise ResourceFrozenError()
        response = self._client.get(path)
        self.load_attributes(response)
        return self

    def _destroy(self, path: str) -> bool:
        logger.info("Deleting resource", resource=self.resource_name, resource_id=self.id)
        self._client.delete(path)
        self._dirty = False
        self.freeze()
        return True

    def _rehydrate(self, response: Any) -> None:
        if response:
            self.load_attributes(response)
        else:
            # 204 No Content: the server accepted the patch as sent
            self._original = to_plain(self._current)
            self._dirty = False

    @classmethod
    def _get_or_not_found(
        cls,
        client: Any,
        path: str,
        resource_id: Any,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        try:
            return client.get(path, params or None)
        except PugClientError as e:
            if e.status_code in cls.not_found_statuses:
                raise ResourceNotFound(cls.resource_name, resource_id, response=e.response) from e
            raise

    @classmethod
    def _create_body(cls, attributes: Mapping[str, Any], **extra: Any) -> dict[str, Any]:
        data: dict[str, Any] = {"type": cls.resource_type}
        data.update(extra)
        data["attributes"] = to_api({key: iso8601(value) for key, value in attributes.items()})
        return {"data": data}

    # ------------------------------------------------------------------

    def _repr_fields(self) -> list[tuple[str, Any]]:
        return []

    def __repr__(self) -> str:
        fields = [("id", self.id), *self._repr_fields(), ("changed", self.changed())]
        rendered = " ".join(f"{name}={value!r}" for name, value in fields)
        return f"<{type(self).__name__} {rendered}>"
