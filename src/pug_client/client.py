"""Pug Video API client.

Example:
    from pug_client import PugClient

    with PugClient(namespace="my-namespace", client_id="...", client_secret="...") as client:
        video = client.video("video-123")
        video.metadata["labels"]["status"] = "reviewed"
        video.save()

        for stream in client.livestreams():
            print(stream.id, stream.status)
"""

from datetime import datetime
from typing import Any, Mapping, NoReturn, Sequence

import httpx

from pug_client.core.config import Settings, get_settings
from pug_client.core.logging import get_logger
from pug_client.infrastructure.auth.authenticator import Authenticator
from pug_client.infrastructure.http.connection import Connection
from pug_client.resources import (
    Campaign,
    LiveStream,
    Namespace,
    NamespaceClient,
    Playlist,
    ResourceEnumerator,
    SimulcastTarget,
    Video,
    Webhook,
)
from pug_client.tracking.patch import PatchKeyStyle

logger = get_logger(__name__)


class PugClient:
    """Entry point to the Pug Video API.

    Resource helpers default to the configured namespace; each accepts a
    ``namespace_id`` keyword to address another one.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        connection: Connection | None = None,
        transport: httpx.BaseTransport | None = None,
        **overrides: Any,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Base settings; defaults to the environment-loaded
                settings when omitted.
            connection: Pre-built connection, mainly for tests.
            transport: httpx transport shared by authentication and API calls.
            **overrides: Individual settings (``namespace``, ``client_id``,
                ``environment`` ...) taking priority over ``settings``.

        Raises:
            ValueError: If no namespace is configured.
        """
        if settings is None:
            settings = Settings(**overrides) if overrides else get_settings()
        elif overrides:
            settings = settings.merged(**overrides)

        if not settings.namespace:
            raise ValueError("namespace is required")

        self.settings = settings
        if connection is None:
            authenticator = Authenticator(settings, transport=transport)
            connection = Connection(settings, authenticator=authenticator, transport=transport)
        self.connection = connection

        logger.debug(
            "Client initialized",
            environment=settings.environment,
            namespace=settings.namespace,
        )

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    @property
    def default_namespace(self) -> str:
        return self.settings.namespace

    @property
    def per_page(self) -> int:
        return self.settings.per_page

    @property
    def patch_key_style(self) -> PatchKeyStyle:
        return PatchKeyStyle(self.settings.patch_key_style)

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------

    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return self.connection.get(path, params)

    def post(self, path: str, body: Any = None) -> Any:
        return self.connection.post(path, body)

    def put(self, path: str, body: Any = None) -> Any:
        return self.connection.put(path, body)

    def patch(self, path: str, body: Any = None) -> Any:
        return self.connection.patch(path, body)

    def delete(self, path: str) -> bool:
        return self.connection.delete(path)

    @property
    def last_response(self) -> httpx.Response | None:
        return self.connection.last_response

    # ------------------------------------------------------------------
    # Namespaces
    # ------------------------------------------------------------------

    def namespace(self, namespace_id: str | None = None) -> Namespace:
        """Fetch a namespace, the configured one by default."""
        return Namespace.find(self, namespace_id or self.default_namespace)

    def create_namespace(self, namespace_id: str, **attributes: Any) -> Namespace:
        return Namespace.create(self, namespace_id, **attributes)

    def namespaces(self, **params: Any) -> ResourceEnumerator[Namespace]:
        return Namespace.all(self, **params)

    def user_namespaces(self, **params: Any) -> ResourceEnumerator[Namespace]:
        return Namespace.for_user(self, **params)

    # ------------------------------------------------------------------
    # Videos
    # ------------------------------------------------------------------

    def video(self, video_id: str, namespace_id: str | None = None, **params: Any) -> Video:
        return Video.find(self, self._ns(namespace_id), video_id, **params)

    def create_video(
        self,
        started_at: str | datetime,
        namespace_id: str | None = None,
        **attributes: Any,
    ) -> Video:
        return Video.create(self, self._ns(namespace_id), started_at, **attributes)

    def videos(self, namespace_id: str | None = None, **params: Any) -> ResourceEnumerator[Video]:
        return Video.all(self, self._ns(namespace_id), **params)

    # ------------------------------------------------------------------
    # Live streams
    # ------------------------------------------------------------------

    def livestream(self, livestream_id: str, namespace_id: str | None = None, **params: Any) -> LiveStream:
        return LiveStream.find(self, self._ns(namespace_id), livestream_id, **params)

    def create_livestream(self, namespace_id: str | None = None, **attributes: Any) -> LiveStream:
        return LiveStream.create(self, self._ns(namespace_id), **attributes)

    def livestreams(self, namespace_id: str | None = None, **params: Any) -> ResourceEnumerator[LiveStream]:
        return LiveStream.all(self, self._ns(namespace_id), **params)

    # ------------------------------------------------------------------
    # Campaigns
    # ------------------------------------------------------------------

    def campaign(self, slug: str, namespace_id: str | None = None, **params: Any) -> Campaign:
        return Campaign.find(self, self._ns(namespace_id), slug, **params)

    def create_campaign(
        self,
        name: str,
        slug: str,
        namespace_id: str | None = None,
        **attributes: Any,
    ) -> Campaign:
        return Campaign.create(self, self._ns(namespace_id), name, slug, **attributes)

    def campaigns(self, namespace_id: str | None = None, **params: Any) -> ResourceEnumerator[Campaign]:
        return Campaign.all(self, self._ns(namespace_id), **params)

    # ------------------------------------------------------------------
    # Playlists
    # ------------------------------------------------------------------

    def playlist(self, playlist_id: str, namespace_id: str | None = None, **params: Any) -> Playlist:
        return Playlist.find(self, self._ns(namespace_id), playlist_id, **params)

    def create_playlist(
        self,
        video_ids: Sequence[str],
        namespace_id: str | None = None,
        **attributes: Any,
    ) -> Playlist:
        return Playlist.create(self, self._ns(namespace_id), video_ids, **attributes)

    def playlists(self, namespace_id: str | None = None, **params: Any) -> NoReturn:
        return Playlist.all(self, self._ns(namespace_id), **params)

    # ------------------------------------------------------------------
    # Simulcast targets
    # ------------------------------------------------------------------

    def simulcast_target(self, target_id: str, namespace_id: str | None = None, **params: Any) -> SimulcastTarget:
        return SimulcastTarget.find(self, self._ns(namespace_id), target_id, **params)

    def create_simulcast_target(self, url: str, namespace_id: str | None = None, **attributes: Any) -> SimulcastTarget:
        return SimulcastTarget.create(self, self._ns(namespace_id), url, **attributes)

    def simulcast_targets(
        self, namespace_id: str | None = None, **params: Any
    ) -> ResourceEnumerator[SimulcastTarget]:
        return SimulcastTarget.all(self, self._ns(namespace_id), **params)

    # ------------------------------------------------------------------
    # Webhooks
    # ------------------------------------------------------------------

    def webhook(self, webhook_id: str, namespace_id: str | None = None, **params: Any) -> Webhook:
        return Webhook.find(self, self._ns(namespace_id), webhook_id, **params)

    def create_webhook(
        self,
        url: str,
        actions: Sequence[str],
        namespace_id: str | None = None,
        **attributes: Any,
    ) -> Webhook:
        return Webhook.create(self, self._ns(namespace_id), url, actions, **attributes)

    def webhooks(self, namespace_id: str | None = None, **params: Any) -> ResourceEnumerator[Webhook]:
        return Webhook.all(self, self._ns(namespace_id), **params)

    # ------------------------------------------------------------------
    # Namespace clients
    # ------------------------------------------------------------------

    def create_namespace_client(self, namespace_id: str | None = None, **attributes: Any) -> NoReturn:
        return NamespaceClient.create(self, self._ns(namespace_id), **attributes)

    # ------------------------------------------------------------------

    def _ns(self, namespace_id: str | None) -> str:
        return namespace_id or self.default_namespace

    def close(self) -> None:
        """Close the underlying HTTP connections."""
        self.connection.close()
        if self.connection.authenticator is not None:
            self.connection.authenticator.close()

    def __enter__(self) -> "PugClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<PugClient environment={self.settings.environment!r} namespace={self.default_namespace!r}>"
