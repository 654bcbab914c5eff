"""Simulcast target resource."""

from typing import Any

from pug_client.resources.base import Attribute, shorten
from pug_client.resources.namespaced import NamespacedResource


class SimulcastTarget(NamespacedResource):
    """RTMP destination that live streams are forwarded to (e.g. YouTube)."""

    resource_name = "SimulcastTarget"
    resource_type = "SimulcastTargets"
    collection = "simulcasttargets"
    not_found_statuses = (404, 422)

    url = Attribute()

    @classmethod
    def create(cls, client: Any, namespace_id: str, url: str, **attributes: Any) -> "SimulcastTarget":
        return cls._post_create(client, namespace_id, {**attributes, "url": url})

    def _repr_fields(self) -> list[tuple[str, Any]]:
        return [("url", shorten(self.url))]
