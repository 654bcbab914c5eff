"""Namespace resource.

Namespaces are the top-level containers of the API; every other resource
lives inside one. Besides the usual find / create / save / delete calls a
namespace offers shortcuts to list and create its child resources.

Example:
    namespace = client.namespace()
    namespace.metadata["labels"]["env"] = "prod"
    namespace.save()

    for video in namespace.videos():
        print(video.id)
"""

from datetime import datetime
from typing import Any, NoReturn, Sequence

from pug_client.resources.base import Attribute, Resource
from pug_client.resources.campaign import Campaign
from pug_client.resources.enumerator import ResourceEnumerator
from pug_client.resources.live_stream import LiveStream
from pug_client.resources.namespace_client import NamespaceClient
from pug_client.resources.playlist import Playlist
from pug_client.resources.simulcast_target import SimulcastTarget
from pug_client.resources.video import Video
from pug_client.resources.webhook import Webhook


class Namespace(Resource):
    """A namespace of the Pug Video API."""

    resource_name = "Namespace"
    resource_type = "namespaces"

    created_at = Attribute(read_only=True)
    updated_at = Attribute(read_only=True)
    metadata = Attribute()

    @property
    def path(self) -> str:
        return f"namespaces/{self.id}"

    @classmethod
    def find(cls, client: Any, namespace_id: str, **params: Any) -> "Namespace":
        """Fetch a namespace.

        Raises:
            ResourceNotFound: If the namespace does not exist.
        """
        response = cls._get_or_not_found(client, f"namespaces/{namespace_id}", namespace_id, params)
        return cls(client, response)

    @classmethod
    def create(cls, client: Any, namespace_id: str, **attributes: Any) -> "Namespace":
        """Create a namespace.

        Args:
            client: API client.
            namespace_id: Identifier of the new namespace (3-64 characters).
            **attributes: Optional attributes such as ``metadata``.
        """
        response = client.post("namespaces", cls._create_body(attributes, id=namespace_id))
        return cls(client, response)

    @classmethod
    def all(cls, client: Any, **params: Any) -> "ResourceEnumerator[Namespace]":
        return ResourceEnumerator(client, cls, "namespaces", params=params)

    @classmethod
    def for_user(cls, client: Any, **params: Any) -> "ResourceEnumerator[Namespace]":
        """Namespaces the authenticated user has access to."""
        return ResourceEnumerator(client, cls, "user/namespaces", params=params)

    @classmethod
    def from_api_data(cls, client: Any, data: Any, **_: Any) -> "Namespace":
        return cls(client, data)

    def save(self) -> bool:
        return self._send_patch(self.path)

    def reload(self) -> "Namespace":
        return self._fetch(self.path)

    def delete(self) -> bool:
        return self._destroy(self.path)

    # Child resources

    def videos(self, **params: Any) -> ResourceEnumerator[Video]:
        return Video.all(self._client, self.id, **params)

    def create_video(self, started_at: str | datetime, **attributes: Any) -> Video:
        return Video.create(self._client, self.id, started_at, **attributes)

    def livestreams(self, **params: Any) -> ResourceEnumerator[LiveStream]:
        return LiveStream.all(self._client, self.id, **params)

    def create_livestream(self, **attributes: Any) -> LiveStream:
        return LiveStream.create(self._client, self.id, **attributes)

    def campaigns(self, **params: Any) -> ResourceEnumerator[Campaign]:
        return Campaign.all(self._client, self.id, **params)

    def create_campaign(self, name: str, slug: str, **attributes: Any) -> Campaign:
        return Campaign.create(self._client, self.id, name, slug, **attributes)

    def simulcast_targets(self, **params: Any) -> ResourceEnumerator[SimulcastTarget]:
        return SimulcastTarget.all(self._client, self.id, **params)

    def create_simulcast_target(self, url: str, **attributes: Any) -> SimulcastTarget:
        return SimulcastTarget.create(self._client, self.id, url, **attributes)

    def webhooks(self, **params: Any) -> ResourceEnumerator[Webhook]:
        return Webhook.all(self._client, self.id, **params)

    def create_webhook(self, url: str, actions: Sequence[str], **attributes: Any) -> Webhook:
        return Webhook.create(self._client, self.id, url, actions, **attributes)

    def playlists(self, **params: Any) -> NoReturn:
        return Playlist.all(self._client, self.id, **params)

    def create_playlist(self, video_ids: Sequence[str], **attributes: Any) -> Playlist:
        return Playlist.create(self._client, self.id, video_ids, **attributes)

    def clients(self, **params: Any) -> NoReturn:
        """Listing namespace clients is not offered by the API."""
        raise NotImplementedError(
            "The API does not support listing namespace clients for security reasons"
        )

    def create_client(self, **attributes: Any) -> NoReturn:
        return NamespaceClient.create(self._client, self.id, **attributes)
