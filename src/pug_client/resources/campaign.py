"""Campaign resource.

Campaigns attach preroll and postroll videos to playback during a time
window. They are addressed by ``slug`` rather than by ID.
"""

from typing import Any

from pug_client.resources.base import Attribute
from pug_client.resources.namespaced import NamespacedResource
from pug_client.resources.video import Video


class Campaign(NamespacedResource):
    """An ad campaign identified by its slug."""

    resource_name = "Campaign"
    resource_type = "campaigns"
    collection = "campaigns"

    version = Attribute(read_only=True)
    name = Attribute()
    slug = Attribute()
    start_time = Attribute()
    end_time = Attribute()
    preroll_video_id = Attribute()
    postroll_video_id = Attribute()

    def __init__(self, client: Any, attributes: Any = None, namespace_id: str | None = None) -> None:
        super().__init__(client, attributes, namespace_id=namespace_id)
        self._preroll_video: Video | None = None
        self._postroll_video: Video | None = None

    @classmethod
    def create(
        cls,
        client: Any,
        namespace_id: str,
        name: str,
        slug: str,
        **attributes: Any,
    ) -> "Campaign":
        """Create a campaign.

        Args:
            client: API client.
            namespace_id: Namespace to create the campaign in.
            name: Display name (2-256 characters).
            slug: URL identifier (1-32 characters, alphanumeric and dashes).
            **attributes: Optional ``preroll_video_id``, ``postroll_video_id``,
                ``start_time``, ``end_time`` (datetimes are sent as UTC
                ISO 8601) and ``metadata``.
        """
        return cls._post_create(client, namespace_id, {**attributes, "name": name, "slug": slug})

    @property
    def key(self) -> Any:
        # A slug edited locally is only live on the server after save()
        return self._original.get("slug") or self.slug

    def preroll_video(self) -> Video | None:
        if not self.preroll_video_id:
            return None
        if self._preroll_video is None:
            self._preroll_video = Video.find(self._client, self.namespace_id, self.preroll_video_id)
        return self._preroll_video

    def postroll_video(self) -> Video | None:
        if not self.postroll_video_id:
            return None
        if self._postroll_video is None:
            self._postroll_video = Video.find(self._client, self.namespace_id, self.postroll_video_id)
        return self._postroll_video

    def _repr_fields(self) -> list[tuple[str, Any]]:
        return [("slug", self.slug)]
