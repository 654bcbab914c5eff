"""Shared behaviour of resources that live inside a namespace.

Every such resource is addressed as ``namespaces/<namespace_id>/<collection>/<key>``
and supports the same find / list / create / save / reload / delete calls.
"""

from typing import TYPE_CHECKING, Any, ClassVar, Mapping

from pug_client.resources.base import Attribute, Resource
from pug_client.resources.enumerator import ResourceEnumerator

if TYPE_CHECKING:
    from pug_client.resources.namespace import Namespace


class NamespacedResource(Resource):
    """Resource scoped to a namespace."""

    collection: ClassVar[str] = ""

    created_at = Attribute(read_only=True)
    updated_at = Attribute(read_only=True)
    metadata = Attribute()

    def __init__(self, client: Any, attributes: Any = None, namespace_id: str | None = None) -> None:
        super().__init__(client, attributes)
        self.namespace_id = namespace_id or self.get("namespace_id") or self._metadata_namespace()
        self._namespace: "Namespace | None" = None

    def _metadata_namespace(self) -> str | None:
        metadata = self.get("metadata")
        if isinstance(metadata, Mapping):
            return metadata.get("namespace")
        return None

    @classmethod
    def collection_path(cls, namespace_id: str) -> str:
        return f"namespaces/{namespace_id}/{cls.collection}"

    @property
    def key(self) -> Any:
        """Identifier used in this resource's URL."""
        return self.id

    @property
    def path(self) -> str:
        return f"{self.collection_path(self.namespace_id)}/{self.key}"

    @classmethod
    def find(cls, client: Any, namespace_id: str, resource_id: str, **params: Any) -> "NamespacedResource":
        """Fetch a resource by identifier.

        Raises:
            ResourceNotFound: If the API reports the resource missing.
        """
        path = f"{cls.collection_path(namespace_id)}/{resource_id}"
        response = cls._get_or_not_found(client, path, resource_id, params)
        return cls(client, response, namespace_id=namespace_id)

    @classmethod
    def all(cls, client: Any, namespace_id: str, **params: Any) -> ResourceEnumerator:
        """Lazily list the namespace's resources of this kind."""
        return ResourceEnumerator(
            client,
            cls,
            cls.collection_path(namespace_id),
            params=params,
            context={"namespace_id": namespace_id},
        )

    @classmethod
    def from_api_data(cls, client: Any, data: Any, namespace_id: str | None = None, **_: Any) -> "NamespacedResource":
        """Build a resource from one item of a collection response."""
        return cls(client, data, namespace_id=namespace_id)

    @classmethod
    def _post_create(cls, client: Any, namespace_id: str, attributes: Mapping[str, Any]) -> "NamespacedResource":
        response = client.post(cls.collection_path(namespace_id), cls._create_body(attributes))
        return cls(client, response, namespace_id=namespace_id)

    def save(self) -> bool:
        """Send unsaved changes as a JSON Patch; True when there was nothing to send."""
        return self._send_patch(self.path)

    def reload(self) -> "NamespacedResource":
        """Discard unsaved changes and refetch from the API."""
        return self._fetch(self.path)

    def delete(self) -> bool:
        """Delete the resource and freeze this object."""
        return self._destroy(self.path)

    def namespace(self) -> "Namespace":
        """The namespace this resource belongs to (fetched once)."""
        from pug_client.resources.namespace import Namespace

        if self._namespace is None:
            self._namespace = Namespace.find(self._client, self.namespace_id)
        return self._namespace
