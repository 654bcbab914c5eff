"""Access token model for the OAuth 2.0 client-credentials flow."""

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AccessToken(BaseModel):
    """Bearer token issued by the authorization server."""

    model_config = ConfigDict(extra="ignore")

    access_token: str = Field(..., repr=False, description="Bearer token value")
    token_type: str = Field(default="Bearer", description="Token type (usually 'Bearer')")
    expires_in: int | None = Field(default=None, description="Lifetime in seconds")
    scope: str | None = None
    issued_at: datetime = Field(default_factory=_utcnow)

    @property
    def expires_at(self) -> datetime | None:
        """Instant after which the token must be replaced, if it expires."""
        if self.expires_in is None:
            return None
        return self.issued_at + timedelta(seconds=self.expires_in)

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check if the token has expired.

        Tokens issued without ``expires_in`` never expire on the client side.
        """
        expires_at = self.expires_at
        if expires_at is None:
            return False
        return (now or _utcnow()) >= expires_at
