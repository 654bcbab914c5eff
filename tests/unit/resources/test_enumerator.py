"""Unit tests for lazy paginated enumeration."""

import pytest

from pug_client.resources.enumerator import ResourceEnumerator
from pug_client.resources.video import Video


def _page(ids, next_url=None):
    body = {"data": [{"id": i, "type": "videos", "attributes": {"startedAt": "t"}} for i in ids]}
    if next_url:
        body["links"] = {"next": next_url}
    return body


class TestResourceEnumerator:
    """Test suite for ResourceEnumerator."""

    @pytest.fixture
    def enumerator(self, mock_client):
        return ResourceEnumerator(
            mock_client,
            Video,
            "namespaces/test-ns/videos",
            params={"filter": {"state": "ready"}},
            context={"namespace_id": "test-ns"},
        )

    def test_creating_does_not_fetch(self, enumerator, mock_client):
        mock_client.get.assert_not_called()

    def test_iterates_across_pages(self, enumerator, mock_client):
        mock_client.get.side_effect = [
            _page(["v1", "v2"], next_url="https://api/namespaces/test-ns/videos?page[after]=2"),
            _page(["v3"]),
        ]

        videos = list(enumerator)

        assert [v.id for v in videos] == ["v1", "v2", "v3"]
        assert all(v.namespace_id == "test-ns" for v in videos)
        first_call, second_call = mock_client.get.call_args_list
        assert first_call.args == (
            "namespaces/test-ns/videos",
            {"filter": {"state": "ready"}, "page": {"size": 10}},
        )
        assert second_call.args == ("https://api/namespaces/test-ns/videos?page[after]=2", None)

    def test_stops_on_empty_page(self, enumerator, mock_client):
        mock_client.get.side_effect = [_page(["v1"], next_url="https://api/next"), _page([])]

        assert [v.id for v in enumerator] == ["v1"]
        assert mock_client.get.call_count == 2

    def test_first_fetches_only_needed_pages(self, enumerator, mock_client):
        mock_client.get.side_effect = [
            _page(["v1", "v2"], next_url="https://api/next"),
            _page(["v3", "v4"]),
        ]

        videos = enumerator.first(2)

        assert [v.id for v in videos] == ["v1", "v2"]
        assert mock_client.get.call_count == 1

    def test_first_without_count(self, enumerator, mock_client):
        mock_client.get.return_value = _page(["v1", "v2"])

        assert enumerator.first().id == "v1"

    def test_first_on_empty_collection(self, enumerator, mock_client):
        mock_client.get.return_value = {"data": []}

        assert enumerator.first() is None
        assert enumerator.first(3) == []

    def test_to_list(self, enumerator, mock_client):
        mock_client.get.return_value = _page(["v1"])

        assert [v.id for v in enumerator.to_list()] == ["v1"]

    def test_explicit_page_size_wins(self, mock_client):
        mock_client.get.return_value = {"data": []}
        enumerator = ResourceEnumerator(mock_client, Video, "videos", params={"page": {"size": 50}})

        list(enumerator)

        assert mock_client.get.call_args.args[1] == {"page": {"size": 50}}

    def test_params_are_not_mutated(self, mock_client):
        mock_client.get.return_value = {"data": []}
        params = {"page": {"number": 2}}

        list(ResourceEnumerator(mock_client, Video, "videos", params=params))

        assert params == {"page": {"number": 2}}

    def test_single_object_data(self, mock_client):
        mock_client.get.return_value = {"data": {"id": "v1", "attributes": {}}}

        assert [v.id for v in ResourceEnumerator(mock_client, Video, "videos")] == ["v1"]

    def test_each_iteration_refetches(self, enumerator, mock_client):
        mock_client.get.return_value = _page(["v1"])

        list(enumerator)
        list(enumerator)

        assert mock_client.get.call_count == 2

    def test_repr(self, enumerator):
        assert repr(enumerator) == "<ResourceEnumerator Video 'namespaces/test-ns/videos'>"
