"""OAuth 2.0 client-credentials authentication."""

from pug_client.infrastructure.auth.authenticator import Authenticator
from pug_client.infrastructure.auth.token import AccessToken

__all__ = ["AccessToken", "Authenticator"]
