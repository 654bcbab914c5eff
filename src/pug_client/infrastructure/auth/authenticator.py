"""OAuth 2.0 client-credentials authentication.

Exchanges the configured client ID and secret for a bearer token at the
authorization server, caches it and fetches a new one once it expires.
A pre-issued ``access_token`` in settings bypasses the exchange.
"""

from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from pug_client.core.config import Settings
from pug_client.core.exceptions import AuthenticationError, NetworkError
from pug_client.core.logging import get_logger
from pug_client.infrastructure.auth.token import AccessToken

logger = get_logger(__name__)


class Authenticator:
    """Obtains and caches bearer tokens for API requests."""

    def __init__(self, settings: Settings, transport: httpx.BaseTransport | None = None) -> None:
        """Initialize the authenticator.

        Args:
            settings: Client settings carrying the auth endpoint and credentials.
            transport: Optional httpx transport for the token endpoint.
        """
        self.settings = settings
        self._http_client = httpx.Client(
            timeout=httpx.Timeout(settings.timeout, connect=settings.open_timeout),
            transport=transport,
        )
        self._token: AccessToken | None = None
        if settings.access_token:
            self._token = AccessToken(access_token=settings.access_token)

    @property
    def token(self) -> AccessToken | None:
        return self._token

    @property
    def authenticated(self) -> bool:
        """Check if a token is held, expired or not."""
        return self._token is not None

    def authenticate(self) -> AccessToken:
        """Exchange client credentials for a new access token.

        Returns:
            AccessToken: The freshly issued token.

        Raises:
            AuthenticationError: If credentials are missing or rejected.
            NetworkError: If the authorization server cannot be reached.
        """
        if not self.settings.has_credentials:
            raise AuthenticationError(
                "client_id and client_secret are required to authenticate"
            )

        payload = {
            "client_id": self.settings.client_id,
            "client_secret": self.settings.client_secret,
            "audience": self.settings.auth_audience,
            "grant_type": self.settings.auth_grant_type,
        }

        logger.debug(
            "Requesting access token",
            auth_endpoint=self.settings.auth_endpoint,
            client_id=self.settings.client_id,
        )
        try:
            response = self._http_client.post(
                self.settings.auth_endpoint,
                json=payload,
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as e:
            raise NetworkError(f"Token request failed: {e}") from e

        if response.status_code != 200:
            raise AuthenticationError(
                f"Authentication failed: {response.status_code} - {self._error_message(response)}",
                response=response,
            )

        try:
            self._token = AccessToken.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            raise AuthenticationError(
                f"Authentication failed: malformed token response ({e})",
                response=response,
            ) from e

        logger.info("Authenticated", expires_in=self._token.expires_in)
        return self._token

    def ensure_token(self) -> str:
        """Return a valid bearer token, authenticating first when needed."""
        if self._token is None or self._token.is_expired():
            self.authenticate()
        return self._token.access_token

    def invalidate(self) -> None:
        """Drop the cached token so the next request re-authenticates."""
        self._token = None

    def close(self) -> None:
        self._http_client.close()

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            data: Any = response.json()
        except ValueError:
            return response.text
        if isinstance(data, dict):
            return str(data.get("error_description", data.get("error", data)))
        return str(data)
