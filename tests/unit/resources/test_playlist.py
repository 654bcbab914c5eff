"""Unit tests for the Playlist resource."""

import pytest

from pug_client.core.exceptions import FeatureNotSupportedError, ValidationError
from pug_client.resources.playlist import Playlist

PLAYLIST_PAYLOAD = {
    "data": {
        "id": "p1",
        "type": "playlists",
        "attributes": {"videos": ["v1", "v2"], "version": 3, "playback": {"hls": "https://cdn/p1"}},
    }
}


@pytest.fixture
def playlist(mock_client):
    return Playlist(mock_client, PLAYLIST_PAYLOAD, namespace_id="test-ns")


class TestPlaylist:
    """Test suite for Playlist."""

    def test_create_defaults_metadata(self, mock_client):
        mock_client.post.return_value = PLAYLIST_PAYLOAD

        Playlist.create(mock_client, "test-ns", ("v1", "v2"))

        mock_client.post.assert_called_once_with(
            "namespaces/test-ns/playlists",
            {"data": {"type": "playlists", "attributes": {"metadata": {}, "videos": ["v1", "v2"]}}},
        )

    def test_create_keeps_given_metadata(self, mock_client):
        Playlist.create(mock_client, "test-ns", ["v1"], metadata={"labels": {"kind": "recap"}})

        body = mock_client.post.call_args.args[1]
        assert body["data"]["attributes"]["metadata"] == {"labels": {"kind": "recap"}}

    def test_listing_not_supported(self, mock_client):
        with pytest.raises(FeatureNotSupportedError) as exc_info:
            Playlist.all(mock_client, "test-ns")

        assert exc_info.value.feature == "Playlist listing"
        mock_client.get.assert_not_called()

    def test_save_and_delete_not_supported(self, playlist):
        with pytest.raises(NotImplementedError, match="no PATCH endpoint"):
            playlist.save()
        with pytest.raises(NotImplementedError, match="no DELETE endpoint"):
            playlist.delete()

    def test_reload(self, playlist, mock_client):
        mock_client.get.return_value = PLAYLIST_PAYLOAD

        playlist.reload()

        mock_client.get.assert_called_once_with("namespaces/test-ns/playlists/p1")

    def test_version_is_read_only(self, playlist):
        with pytest.raises(ValidationError):
            playlist.version = 4

    def test_video_resources(self, playlist, mock_client):
        mock_client.get.side_effect = [
            {"data": {"id": "v1", "attributes": {}}},
            {"data": {"id": "v2", "attributes": {}}},
        ]

        videos = playlist.video_resources()

        assert [v.id for v in videos] == ["v1", "v2"]

    def test_repr(self, playlist):
        assert repr(playlist) == "<Playlist id='p1' videos=2 changed=False>"
