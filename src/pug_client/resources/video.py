"""Video resource.

Example:
    video = client.create_video(datetime.now(timezone.utc), metadata={"labels": {"game": "final"}})
    with open("match.mp4", "rb") as f:
        video.upload(f, "match.mp4")
    video.wait_until_ready(timeout=600)

    highlight = video.clip(start_time=5000, duration=30000)
"""

import time
from datetime import datetime
from typing import Any, BinaryIO, Mapping

import httpx

from pug_client.core.exceptions import NetworkError, OperationTimeoutError, ValidationError
from pug_client.core.logging import get_logger
from pug_client.resources.base import Attribute
from pug_client.resources.namespaced import NamespacedResource
from pug_client.tracking.translator import from_api, to_api

logger = get_logger(__name__)

SUPPORTED_CONTENT_TYPES = ("video/mp4",)

UPLOAD_TIMEOUT = 300.0


class Video(NamespacedResource):
    """A recorded or uploaded video."""

    resource_name = "Video"
    resource_type = "videos"
    collection = "videos"
    # Malformed IDs are answered with 422
    not_found_statuses = (404, 422)

    started_at = Attribute(read_only=True)
    duration = Attribute(read_only=True)
    renditions = Attribute(read_only=True)
    playback_urls = Attribute(read_only=True)
    thumbnail_url = Attribute(read_only=True)
    playback = Attribute(read_only=True)
    source = Attribute(read_only=True)
    location = Attribute()

    @classmethod
    def create(cls, client: Any, namespace_id: str, started_at: str | datetime, **attributes: Any) -> "Video":
        """Create a video.

        Args:
            client: API client.
            namespace_id: Namespace to create the video in.
            started_at: Recording start, an ISO 8601 string or a datetime.
            **attributes: Optional attributes (``metadata``, ``location``,
                ``source``, ``duration``).
        """
        return cls._post_create(client, namespace_id, {**attributes, "started_at": started_at})

    def clip(self, start_time: int, duration: int, **attributes: Any) -> "Video":
        """Create a new video from a portion of this one.

        Args:
            start_time: Offset into this video in milliseconds.
            duration: Clip length in milliseconds.
            **attributes: Optional attributes for the clip (e.g. ``metadata``).
        """
        body = {
            "data": {
                "attributes": to_api(
                    {**attributes, "command": "clip", "start_time": start_time, "duration": duration}
                )
            }
        }
        response = self._client.post(f"{self.path}/commands", body)
        return Video(self._client, response, namespace_id=self.namespace_id)

    def upload_url(self, filename: str, **params: Any) -> dict[str, Any]:
        """Get a signed URL for uploading the video file.

        Returns:
            dict: Upload information with ``url`` and optionally
            ``expiration`` and ``headers`` keys.
        """
        response = self._client.get(f"{self.path}/upload-urls/{filename}", params or None)
        return from_api(_upload_attributes(response))

    def upload(self, fileobj: BinaryIO, filename: str, content_type: str = "video/mp4") -> bool:
        """Upload the video file straight to storage through a signed URL.

        Raises:
            ValidationError: If ``content_type`` is not supported.
            NetworkError: If the storage upload fails.
        """
        if content_type not in SUPPORTED_CONTENT_TYPES:
            raise ValidationError(
                f"Unsupported content type: {content_type}. "
                f"Currently only {', '.join(SUPPORTED_CONTENT_TYPES)} is supported"
            )

        upload_info = self.upload_url(filename)
        headers = dict(upload_info.get("headers") or {})
        headers["Content-Type"] = content_type

        logger.info("Uploading video", video_id=self.id, filename=filename)
        try:
            with httpx.Client(timeout=UPLOAD_TIMEOUT) as http:
                response = http.put(upload_info["url"], content=fileobj.read(), headers=headers)
        except httpx.HTTPError as e:
            raise NetworkError(f"Upload failed: {e}") from e

        if not response.is_success:
            raise NetworkError(f"Upload failed: {response.status_code}", response=response)
        return True

    def wait_until_ready(self, timeout: float = 300, interval: float = 5) -> bool:
        """Poll until the video has renditions.

        Raises:
            OperationTimeoutError: If the video is not ready within ``timeout`` seconds.
        """
        started = time.monotonic()
        while True:
            self.reload()
            if self.renditions:
                return True
            if time.monotonic() - started > timeout:
                raise OperationTimeoutError(f"Video not ready after {timeout}s")
            logger.debug("Video not ready yet", video_id=self.id, interval=interval)
            time.sleep(interval)

    def _repr_fields(self) -> list[tuple[str, Any]]:
        return [("started_at", self.started_at)]


def _upload_attributes(response: Any) -> Mapping[str, Any]:
    if not isinstance(response, Mapping):
        return {}
    data = response.get("data")
    if isinstance(data, Mapping) and isinstance(data.get("attributes"), Mapping):
        return data["attributes"]
    if isinstance(response.get("attributes"), Mapping):
        return response["attributes"]
    return response
