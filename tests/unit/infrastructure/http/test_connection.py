"""Unit tests for the JSON:API connection."""

import httpx
import pytest

from pug_client import __version__
from pug_client.core.exceptions import AuthenticationError, NetworkError, ValidationError
from pug_client.infrastructure.auth.authenticator import Authenticator
from pug_client.infrastructure.http.connection import (
    Connection,
    extract_data_array,
    flatten_params,
    next_page_url,
)


@pytest.fixture
def connection(settings, fake_api):
    transport = httpx.MockTransport(fake_api)
    conn = Connection(settings, Authenticator(settings, transport=transport), transport=transport)
    yield conn
    conn.close()


class TestHelpers:
    """Test suite for the module-level helpers."""

    def test_flatten_params(self):
        assert flatten_params({"page": {"size": 10, "after": "x"}, "filter": {"labels": {"env": "prod"}}, "q": 1}) == {
            "page[size]": 10,
            "page[after]": "x",
            "filter[labels][env]": "prod",
            "q": 1,
        }

    def test_extract_data_array(self):
        assert extract_data_array({"data": [1, 2]}) == [1, 2]
        assert extract_data_array([3]) == [3]
        assert extract_data_array({"data": {"id": 1}}) == []
        assert extract_data_array(None) == []

    def test_next_page_url(self):
        assert next_page_url({"links": {"next": "https://next"}}) == "https://next"
        assert next_page_url({"links": {}}) is None
        assert next_page_url({"links": None}) is None
        assert next_page_url("text") is None


class TestRequests:
    """Requests are sent with JSON:API headers and bearer auth."""

    def test_get_sends_headers_and_params(self, connection, fake_api):
        fake_api.add("GET", "/namespaces/test-ns/videos", json={"data": []})

        body = connection.get("namespaces/test-ns/videos", {"page": {"size": 10}})

        assert body == {"data": []}
        request = fake_api.last_request
        assert request.url.host == "api.video.scorevision.com"
        assert request.url.params["page[size]"] == "10"
        assert request.headers["Accept"] == "application/vnd.api+json"
        assert request.headers["Authorization"] == "Bearer test-token"
        assert request.headers["User-Agent"] == f"pug-client-python/{__version__}"

    def test_patch_sends_json_body(self, connection, fake_api):
        fake_api.add("PATCH", "/namespaces/test-ns", json={"data": {"id": "test-ns"}})
        operations = [{"op": "remove", "path": "/metadata/labels/a"}]

        connection.patch("namespaces/test-ns", {"data": operations})

        assert fake_api.last_request.headers["Content-Type"] == "application/vnd.api+json"
        assert fake_api.last_body() == {"data": operations}

    def test_empty_body_returns_none(self, connection, fake_api):
        fake_api.add("PATCH", "/namespaces/test-ns", status_code=204)

        assert connection.patch("namespaces/test-ns", {"data": []}) is None

    def test_non_json_body_returns_text(self, connection, fake_api):
        fake_api.add("GET", "/health", text="ok")

        assert connection.get("health") == "ok"

    def test_delete_returns_true(self, connection, fake_api):
        fake_api.add("DELETE", "/namespaces/test-ns/videos/v1", status_code=204)

        assert connection.delete("namespaces/test-ns/videos/v1") is True
        assert fake_api.last_request.method == "DELETE"

    def test_absolute_urls_are_followed(self, connection, fake_api):
        fake_api.add("GET", "/namespaces/test-ns/videos", json={"data": []})

        connection.get("https://api.video.scorevision.com/namespaces/test-ns/videos?page[after]=5")

        assert fake_api.last_request.url.params["page[after]"] == "5"

    def test_last_response_is_kept(self, connection, fake_api):
        fake_api.add("GET", "/namespaces/test-ns", json={"data": {}})

        connection.get("namespaces/test-ns")

        assert connection.last_response.status_code == 200

    def test_without_authenticator_no_authorization_header(self, settings, fake_api):
        fake_api.add("GET", "/namespaces", json={"data": []})
        conn = Connection(settings, transport=httpx.MockTransport(fake_api))

        conn.get("namespaces")

        assert "Authorization" not in fake_api.last_request.headers


class TestErrorMapping:
    """HTTP error statuses map onto the client's exceptions."""

    @pytest.mark.parametrize(
        "status,error_class,message",
        [
            (404, NetworkError, "Resource not found (404)"),
            (401, AuthenticationError, "Authentication failed (401)"),
            (403, AuthenticationError, "Authentication failed (403)"),
            (422, ValidationError, "Validation error (422)"),
            (409, ValidationError, "Client error (409)"),
            (500, NetworkError, "Server error (500)"),
            (503, NetworkError, "Server error (503)"),
        ],
    )
    def test_status_mapping(self, connection, fake_api, status, error_class, message):
        fake_api.add("GET", "/namespaces/test-ns", status_code=status, text="")

        with pytest.raises(error_class) as exc_info:
            connection.get("namespaces/test-ns")

        assert str(exc_info.value) == message
        assert exc_info.value.status_code == status

    def test_json_api_error_detail_is_appended(self, connection, fake_api):
        fake_api.add(
            "POST",
            "/namespaces",
            status_code=422,
            json={"errors": [{"title": "Invalid", "detail": "id must be 3-64 characters"}]},
        )

        with pytest.raises(ValidationError, match=r"Validation error \(422\): id must be 3-64 characters"):
            connection.post("namespaces", {"data": {"id": "x"}})

    def test_transport_failure(self, settings):
        def refuse(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        conn = Connection(settings, transport=httpx.MockTransport(refuse))

        with pytest.raises(NetworkError, match="HTTP request failed") as exc_info:
            conn.get("namespaces")

        assert exc_info.value.status_code is None
