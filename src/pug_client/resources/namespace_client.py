"""Namespace client credentials.

A namespace client is a client ID and secret scoped to one namespace. The
secret is only ever returned by the creation call; the API offers no way to
read, update or revoke credentials, so every persistence call raises.
"""

from typing import Any, NoReturn

from pug_client.core.exceptions import FeatureNotSupportedError
from pug_client.resources.base import Attribute
from pug_client.resources.namespaced import NamespacedResource


class NamespaceClient(NamespacedResource):
    """Credentials scoped to a namespace."""

    resource_name = "NamespaceClient"
    resource_type = "clients"
    collection = "clients"

    secret = Attribute(read_only=True)

    @classmethod
    def create(cls, client: Any, namespace_id: str, **attributes: Any) -> NoReturn:
        raise FeatureNotSupportedError(
            "Namespace client creation",
            "use the web console to create namespace credentials",
        )

    def save(self) -> NoReturn:
        raise NotImplementedError("NamespaceClients are immutable once created")

    def reload(self) -> NoReturn:
        raise NotImplementedError(
            "NamespaceClients cannot be retrieved after creation; the API has no read endpoint"
        )

    def delete(self) -> NoReturn:
        raise NotImplementedError(
            "NamespaceClients cannot be deleted via the API; revoke them from the web console"
        )

    @property
    def secret_available(self) -> bool:
        return self.secret is not None

    def __repr__(self) -> str:
        secret = "<available>" if self.secret_available else "<unavailable>"
        return f"<NamespaceClient id={self.id!r} secret={secret} namespace_id={self.namespace_id!r}>"
