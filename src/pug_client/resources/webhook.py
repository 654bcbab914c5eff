"""Webhook resource."""

from typing import Any, Sequence

from pug_client.resources.base import Attribute, shorten
from pug_client.resources.namespaced import NamespacedResource


class Webhook(NamespacedResource):
    """Endpoint notified when events such as ``video.ready`` happen in a namespace."""

    resource_name = "Webhook"
    resource_type = "webhooks"
    collection = "webhooks"
    not_found_statuses = (404, 422)

    url = Attribute()
    actions = Attribute()

    @classmethod
    def create(
        cls,
        client: Any,
        namespace_id: str,
        url: str,
        actions: Sequence[str],
        **attributes: Any,
    ) -> "Webhook":
        """Create a webhook.

        Args:
            client: API client.
            namespace_id: Namespace whose events are delivered.
            url: Endpoint receiving the notifications.
            actions: Event actions, e.g. ``["video.ready", "livestream.published"]``.
            **attributes: Optional attributes such as ``metadata``.
        """
        return cls._post_create(
            client, namespace_id, {**attributes, "url": url, "actions": list(actions)}
        )

    def _repr_fields(self) -> list[tuple[str, Any]]:
        return [("url", shorten(self.url)), ("actions", len(self.actions or []))]
