"""Unit tests for the Namespace resource."""

from unittest.mock import MagicMock, patch

import httpx
import pytest

from pug_client.core.exceptions import (
    FeatureNotSupportedError,
    NetworkError,
    ResourceNotFound,
    ValidationError,
)
from pug_client.resources import Campaign, LiveStream, Namespace, Playlist, SimulcastTarget, Video, Webhook

NAMESPACE_PAYLOAD = {
    "data": {
        "id": "test-ns",
        "type": "namespaces",
        "attributes": {
            "createdAt": "2024-01-01T00:00:00Z",
            "metadata": {"labels": {"env": "prod"}},
        },
    }
}


@pytest.fixture
def namespace(mock_client):
    return Namespace(mock_client, NAMESPACE_PAYLOAD)


class TestNamespace:
    """Test suite for Namespace."""

    def test_find(self, mock_client):
        mock_client.get.return_value = NAMESPACE_PAYLOAD

        namespace = Namespace.find(mock_client, "test-ns")

        mock_client.get.assert_called_once_with("namespaces/test-ns", None)
        assert namespace.id == "test-ns"
        assert namespace.metadata["labels"]["env"] == "prod"

    def test_find_missing(self, mock_client):
        response = MagicMock(spec=httpx.Response)
        response.status_code = 404
        mock_client.get.side_effect = NetworkError("Resource not found (404)", response=response)

        with pytest.raises(ResourceNotFound, match="Namespace not found: nope"):
            Namespace.find(mock_client, "nope")

    def test_create_sends_top_level_id(self, mock_client):
        mock_client.post.return_value = NAMESPACE_PAYLOAD

        Namespace.create(mock_client, "test-ns", metadata={"labels": {"env": "prod"}})

        mock_client.post.assert_called_once_with(
            "namespaces",
            {
                "data": {
                    "type": "namespaces",
                    "id": "test-ns",
                    "attributes": {"metadata": {"labels": {"env": "prod"}}},
                }
            },
        )

    def test_all_and_for_user(self, mock_client):
        assert Namespace.all(mock_client).base_url == "namespaces"
        assert Namespace.for_user(mock_client).base_url == "user/namespaces"

    def test_save(self, namespace, mock_client):
        mock_client.patch.return_value = None
        namespace.metadata["labels"]["status"] = "active"

        assert namespace.save() is True

        mock_client.patch.assert_called_once_with(
            "namespaces/test-ns",
            {"data": [{"op": "add", "path": "/metadata/labels/status", "value": "active"}]},
        )

    def test_created_at_is_read_only(self, namespace):
        with pytest.raises(ValidationError):
            namespace.created_at = "2025-01-01T00:00:00Z"

    def test_delete(self, namespace, mock_client):
        namespace.delete()

        mock_client.delete.assert_called_once_with("namespaces/test-ns")
        assert namespace.is_frozen()

    def test_reload(self, namespace, mock_client):
        mock_client.get.return_value = NAMESPACE_PAYLOAD

        namespace.reload()

        mock_client.get.assert_called_once_with("namespaces/test-ns")


class TestNamespaceChildren:
    """Child collection helpers delegate to the resource classes."""

    @pytest.mark.parametrize(
        "method,resource_class,collection",
        [
            ("videos", Video, "videos"),
            ("livestreams", LiveStream, "livestreams"),
            ("campaigns", Campaign, "campaigns"),
            ("simulcast_targets", SimulcastTarget, "simulcasttargets"),
            ("webhooks", Webhook, "webhooks"),
        ],
    )
    def test_child_collections(self, namespace, method, resource_class, collection):
        enumerator = getattr(namespace, method)()

        assert enumerator.resource_class is resource_class
        assert enumerator.base_url == f"namespaces/test-ns/{collection}"

    def test_playlists_are_not_listable(self, namespace):
        with pytest.raises(FeatureNotSupportedError, match="Playlist listing"):
            namespace.playlists()

    def test_create_video(self, namespace, mock_client):
        with patch.object(Video, "create") as mock_create:
            namespace.create_video("2024-01-01T00:00:00Z", metadata={})

        mock_create.assert_called_once_with(mock_client, "test-ns", "2024-01-01T00:00:00Z", metadata={})

    def test_create_campaign(self, namespace, mock_client):
        with patch.object(Campaign, "create") as mock_create:
            namespace.create_campaign("Summer", "summer-2024")

        mock_create.assert_called_once_with(mock_client, "test-ns", "Summer", "summer-2024")

    def test_create_webhook(self, namespace, mock_client):
        with patch.object(Webhook, "create") as mock_create:
            namespace.create_webhook("https://hook", ["video.ready"])

        mock_create.assert_called_once_with(mock_client, "test-ns", "https://hook", ["video.ready"])

    def test_create_playlist(self, namespace, mock_client):
        with patch.object(Playlist, "create") as mock_create:
            namespace.create_playlist(["v1", "v2"])

        mock_create.assert_called_once_with(mock_client, "test-ns", ["v1", "v2"])

    def test_create_livestream_and_target(self, namespace, mock_client):
        with patch.object(LiveStream, "create") as mock_stream, patch.object(
            SimulcastTarget, "create"
        ) as mock_target:
            namespace.create_livestream(location="arena")
            namespace.create_simulcast_target("rtmp://yt/live")

        mock_stream.assert_called_once_with(mock_client, "test-ns", location="arena")
        mock_target.assert_called_once_with(mock_client, "test-ns", "rtmp://yt/live")

    def test_clients_cannot_be_listed(self, namespace):
        with pytest.raises(NotImplementedError):
            namespace.clients()

    def test_create_client_not_supported(self, namespace, mock_client):
        with pytest.raises(FeatureNotSupportedError, match="Namespace client creation"):
            namespace.create_client()

        mock_client.post.assert_not_called()
