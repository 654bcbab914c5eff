"""Playlist resource.

The API can create and fetch playlists but offers no endpoint to list,
update or delete them.
"""

from typing import Any, NoReturn, Sequence

from pug_client.core.exceptions import FeatureNotSupportedError
from pug_client.resources.base import Attribute
from pug_client.resources.namespaced import NamespacedResource
from pug_client.resources.video import Video


class Playlist(NamespacedResource):
    """An ordered list of videos played back as one stream."""

    resource_name = "Playlist"
    resource_type = "playlists"
    collection = "playlists"

    version = Attribute(read_only=True)
    playback = Attribute(read_only=True)
    videos = Attribute()

    @classmethod
    def all(cls, client: Any, namespace_id: str, **params: Any) -> NoReturn:
        raise FeatureNotSupportedError(
            "Playlist listing",
            "the API has no endpoint for listing playlists; fetch them individually by ID",
        )

    @classmethod
    def create(
        cls,
        client: Any,
        namespace_id: str,
        video_ids: Sequence[str],
        **attributes: Any,
    ) -> "Playlist":
        """Create a playlist from an ordered list of video IDs."""
        attributes.setdefault("metadata", {})
        return cls._post_create(client, namespace_id, {**attributes, "videos": list(video_ids)})

    def save(self) -> NoReturn:
        raise NotImplementedError("Playlist updates are not supported by the API (no PATCH endpoint)")

    def delete(self) -> NoReturn:
        raise NotImplementedError("Playlist deletion is not supported by the API (no DELETE endpoint)")

    def video_resources(self) -> list[Video]:
        """Fetch every video of the playlist, in order."""
        return [Video.find(self._client, self.namespace_id, video_id) for video_id in self.videos or []]

    def _repr_fields(self) -> list[tuple[str, Any]]:
        return [("videos", len(self.videos or []))]
