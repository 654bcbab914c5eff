"""Live stream resource."""

from typing import Any, Mapping

from pug_client.resources.base import Attribute
from pug_client.resources.namespaced import NamespacedResource


class LiveStream(NamespacedResource):
    """A live stream with RTMP ingest and playback URLs.

    Streams are controlled through command endpoints: :meth:`publish`,
    :meth:`unpublish`, :meth:`enable` and :meth:`disable` each reload the
    stream afterwards, discarding unsaved changes.
    """

    resource_name = "LiveStream"
    resource_type = "LiveStreams"
    collection = "livestreams"
    not_found_statuses = (404, 422)

    started_at = Attribute(read_only=True)
    stream_status = Attribute(read_only=True)
    stream_urls = Attribute(read_only=True)
    playback_urls = Attribute(read_only=True)
    thumbnails = Attribute(read_only=True)
    location = Attribute()
    simulcast_targets = Attribute()

    @classmethod
    def create(cls, client: Any, namespace_id: str, **attributes: Any) -> "LiveStream":
        """Create a live stream.

        ``started_at`` may be given as a datetime; it is sent as UTC ISO 8601.
        """
        return cls._post_create(client, namespace_id, attributes)

    def publish(self) -> "LiveStream":
        return self._command("publish")

    def unpublish(self) -> "LiveStream":
        return self._command("unpublish")

    def enable(self) -> "LiveStream":
        return self._command("enable")

    def disable(self) -> "LiveStream":
        return self._command("disable")

    def _command(self, name: str) -> "LiveStream":
        self._client.put(f"{self.path}/{name}", {})
        return self.reload()

    @property
    def status(self) -> str | None:
        return self.stream_status

    @property
    def rtmp_url(self) -> str | None:
        urls = self.stream_urls
        if isinstance(urls, Mapping):
            return urls.get("rtmp")
        return None

    @property
    def stream_key(self) -> str | None:
        # The ingest key is the stream ID
        return self.id

    def _repr_fields(self) -> list[tuple[str, Any]]:
        return [("status", self.status)]
