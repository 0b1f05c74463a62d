# authsvc/services/auth/dto.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from authsvc.services._shared.errors import ConfigurationError

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class RegisterIn:
    """
    Input DTO for registration.

    :param email: User email, stored exactly as given.
    :type email: str
    :param password: Raw password (hashed before persistence).
    :type password: str
    """

    email: str
    password: str


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for login.

    :param email: User email (case-sensitive lookup).
    :type email: str
    :param password: Raw password (to be verified).
    :type password: str
    """

    email: str
    password: str


@dataclass(frozen=True, slots=True)
class RefreshIn:
    """
    Input DTO for token refresh.

    :param refresh_token: Encoded refresh JWT.
    :type refresh_token: str
    """

    refresh_token: str


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class TokenPairOut:
    """
    Output DTO with access and refresh tokens.

    :param access_token: Encoded access JWT.
    :type access_token: str
    :param refresh_token: Encoded refresh JWT.
    :type refresh_token: str
    """

    access_token: str
    refresh_token: str


# ------------------------------ Config DTO -------------------------------- #


@dataclass(frozen=True, slots=True)
class AuthTokenConfig:
    """
    Token signing material and lifetimes, fixed for the life of the process.

    :param access_secret: HMAC secret for access tokens.
    :type access_secret: str | None
    :param refresh_secret: HMAC secret for refresh tokens (must differ in practice).
    :type refresh_secret: str | None
    :param access_expires: Access token lifetime.
    :type access_expires: timedelta
    :param refresh_expires: Refresh token lifetime.
    :type refresh_expires: timedelta
    :param algorithm: JWS algorithm used for both kinds.
    :type algorithm: str
    """

    access_secret: str | None
    refresh_secret: str | None
    access_expires: timedelta = timedelta(minutes=15)
    refresh_expires: timedelta = timedelta(days=7)
    algorithm: str = "HS256"

    def require_secrets(self) -> None:
        """
        Fail fast when either signing secret is missing or empty.

        :raises ConfigurationError: If a secret is absent.
        """
        if not self.access_secret or not self.refresh_secret:
            raise ConfigurationError()
