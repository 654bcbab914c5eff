"""HTTP connection to the Pug Video API.

Wraps :class:`httpx.Client` with the JSON:API content type, bearer
authentication and translation of error responses into the client's
exception hierarchy. Request and response bodies are plain parsed JSON;
attribute key translation is left to the resources.
"""

from typing import Any, Mapping

import httpx

from pug_client import __version__
from pug_client.core.config import Settings
from pug_client.core.exceptions import AuthenticationError, NetworkError, ValidationError
from pug_client.core.logging import get_logger
from pug_client.infrastructure.auth.authenticator import Authenticator

logger = get_logger(__name__)

JSON_API_MEDIA_TYPE = "application/vnd.api+json"


def flatten_params(params: Mapping[str, Any], prefix: str | None = None) -> dict[str, Any]:
    """Flatten nested query parameters into bracket notation.

    Example:
        >>> flatten_params({"page": {"size": 10}, "q": "x"})
        {'page[size]': 10, 'q': 'x'}
    """
    result: dict[str, Any] = {}
    for key, value in params.items():
        full_key = f"{prefix}[{key}]" if prefix else str(key)
        if isinstance(value, Mapping):
            result.update(flatten_params(value, full_key))
        else:
            result[full_key] = value
    return result


def extract_data_array(body: Any) -> list[Any]:
    """Return the list of resource objects from a collection response."""
    if isinstance(body, list):
        return body
    if isinstance(body, Mapping) and isinstance(body.get("data"), list):
        return body["data"]
    return []


def next_page_url(body: Any) -> str | None:
    """Return the ``links.next`` URL of a paginated response, if any."""
    if not isinstance(body, Mapping):
        return None
    links = body.get("links")
    if not isinstance(links, Mapping):
        return None
    return links.get("next")


class Connection:
    """Synchronous JSON:API connection with bearer authentication."""

    def __init__(
        self,
        settings: Settings,
        authenticator: Authenticator | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the connection.

        Args:
            settings: Client settings.
            authenticator: Token source; requests are sent without an
                Authorization header when None.
            transport: Optional httpx transport (e.g. ``httpx.MockTransport``).
        """
        self.settings = settings
        self.authenticator = authenticator
        self.last_response: httpx.Response | None = None
        self._http = httpx.Client(
            base_url=settings.api_endpoint,
            headers={
                "Accept": JSON_API_MEDIA_TYPE,
                "Content-Type": JSON_API_MEDIA_TYPE,
                "User-Agent": f"pug-client-python/{__version__}",
            },
            timeout=httpx.Timeout(settings.timeout, connect=settings.open_timeout),
            transport=transport,
        )

    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, body: Any = None) -> Any:
        return self.request("POST", path, body=body)

    def put(self, path: str, body: Any = None) -> Any:
        return self.request("PUT", path, body=body)

    def patch(self, path: str, body: Any = None) -> Any:
        return self.request("PATCH", path, body=body)

    def delete(self, path: str) -> bool:
        self.request("DELETE", path)
        return True

    def request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        """Send a request and return the parsed response body.

        Args:
            method: HTTP method.
            path: Path relative to the API endpoint, or an absolute URL
                (pagination links).
            params: Query parameters; nested mappings are flattened.
            body: JSON-serializable request body.

        Returns:
            The parsed JSON body, the raw text if it is not JSON, or None
            for an empty body.

        Raises:
            AuthenticationError: On 401/403 or when no token can be obtained.
            ValidationError: On other 4xx responses (except 404).
            NetworkError: On 404, 5xx or transport failures.
        """
        headers = {}
        if self.authenticator is not None:
            headers["Authorization"] = f"Bearer {self.authenticator.ensure_token()}"

        request_kwargs: dict[str, Any] = {"headers": headers}
        if params:
            request_kwargs["params"] = flatten_params(params)
        if body is not None:
            request_kwargs["json"] = body

        logger.debug("API request", method=method, path=path)
        try:
            response = self._http.request(method, path, **request_kwargs)
        except httpx.HTTPError as e:
            raise NetworkError(f"HTTP request failed: {e}") from e

        self.last_response = response
        logger.debug("API response", method=method, path=path, status=response.status_code)

        if response.status_code >= 400:
            self._raise_for_status(response)
        return self._parse_body(response)

    def close(self) -> None:
        self._http.close()

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def _error_detail(response: httpx.Response) -> str | None:
        # JSON:API error documents: {"errors": [{"detail": "..."}]}
        try:
            body = response.json()
        except ValueError:
            return None
        if not isinstance(body, Mapping):
            return None
        errors = body.get("errors")
        if isinstance(errors, list) and errors and isinstance(errors[0], Mapping):
            return errors[0].get("detail") or errors[0].get("title")
        return None

    def _raise_for_status(self, response: httpx.Response) -> None:
        status = response.status_code
        detail = self._error_detail(response)
        suffix = f": {detail}" if detail else ""

        if status == 404:
            raise NetworkError(f"Resource not found (404){suffix}", response=response)
        if status in (401, 403):
            raise AuthenticationError(f"Authentication failed ({status}){suffix}", response=response)
        if status == 422:
            raise ValidationError(f"Validation error (422){suffix}", response=response)
        if 400 <= status < 500:
            raise ValidationError(f"Client error ({status}){suffix}", response=response)
        if 500 <= status < 600:
            raise NetworkError(f"Server error ({status}){suffix}", response=response)
        raise NetworkError(f"HTTP error ({status}){suffix}", response=response)
