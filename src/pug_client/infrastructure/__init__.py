"""Infrastructure layer - the HTTP collaborator.

This layer contains everything that talks to the network:
- OAuth 2.0 client-credentials authentication
- The JSON:API connection built on httpx
"""

from pug_client.infrastructure.auth import AccessToken, Authenticator
from pug_client.infrastructure.http import Connection

__all__ = ["AccessToken", "Authenticator", "Connection"]
