# authsvc/services/auth/service.py
from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from authsvc.services._shared.errors import ConflictError, UnauthorizedError
from authsvc.services._shared.ports import (
    INVALID_TOKEN_MESSAGE,
    CredentialStore,
    PasswordHasher,
    TokenKind,
    TokenProvider,
)
from authsvc.services.auth.dto import (
    AuthTokenConfig,
    LoginIn,
    RefreshIn,
    RegisterIn,
    TokenPairOut,
)

log = logging.getLogger(__name__)

USER_EXISTS_MESSAGE = "User already exists"
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"

# Hashed once per service on the first unknown-email login.
_TIMING_DUMMY_PASSWORD = "authsvc-timing-dummy"


class AuthService:
    """
    Credential lifecycle service (register / login / refresh).

    Passwords go through a pluggable :class:`PasswordHasher`, tokens through a
    :class:`TokenProvider`, and every read or write of persistent state through
    the :class:`CredentialStore`. Refresh tokens are single-use: each refresh
    revokes the presented token before issuing a new pair.

    Only conditions this class checks itself (existing email, bad credentials,
    invalid or non-live refresh token) become :class:`ServiceError`s. Anything
    raised by the store or the hasher propagates unchanged.
    """

    def __init__(
        self,
        *,
        config: AuthTokenConfig,
        store: CredentialStore,
        password_hasher: PasswordHasher | None = None,
        token_provider: TokenProvider | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """
        Initialize the service with its dependencies.

        :param config: Secrets and lifetimes. Validated before anything else.
        :param store: Persistence adapter for users and refresh tokens.
        :param password_hasher: Defaults to bcrypt with the fixed cost factor.
        :param token_provider: Defaults to the PyJWT provider built from ``config``.
        :param clock: Returns an aware UTC "now"; used for refresh record expiry.
        :raises ConfigurationError: If either signing secret is missing.
        """
        config.require_secrets()
        self.cfg = config
        self.store = store
        self._clock = clock or (lambda: datetime.now(UTC))

        if password_hasher is None:
            from authsvc.infra.security.bcrypt_password_hasher import BcryptPasswordHasher

            password_hasher = BcryptPasswordHasher()
        if token_provider is None:
            from authsvc.infra.jwt.pyjwt_token_provider import JWTTokenProvider

            token_provider = JWTTokenProvider(config, clock=self._clock)

        self.passwords = password_hasher
        self.tokens = token_provider
        self._dummy_hash: str | None = None

    # ------------------------------------------------------------------ #
    # Register
    # ------------------------------------------------------------------ #

    def register(self, dto: RegisterIn) -> TokenPairOut:
        """
        Create an account and issue its first token pair.

        :param dto: Registration input.
        :returns: Access/Refresh token pair.
        :raises ConflictError: If the email is already registered.
        """
        if self.store.find_user_by_email(dto.email) is not None:
            raise ConflictError(USER_EXISTS_MESSAGE)

        password_hash = self.passwords.hash(dto.password)
        # A concurrent registration can still win the race here; the store's
        # unique constraint raises its own error in that case.
        user = self.store.create_user(dto.email, password_hash)

        pair = self._issue_pair(user.id)
        log.info("auth.register", extra={"user_id": user.id})
        return pair

    # ------------------------------------------------------------------ #
    # Login
    # ------------------------------------------------------------------ #

    def login(self, dto: LoginIn) -> TokenPairOut:
        """
        Authenticate credentials and issue a fresh token pair.

        Unknown email and wrong password raise the *same* error.

        :param dto: Login input.
        :returns: Access/Refresh token pair.
        :raises UnauthorizedError: If credentials are invalid.
        """
        user = self.store.find_user_by_email(dto.email)
        if user is None:
            # Equalize timing with the wrong-password path.
            self.passwords.verify(dto.password, self._timing_dummy_hash())
            log.info("auth.login.rejected")
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)

        if not self.passwords.verify(dto.password, user.password_hash):
            log.info("auth.login.rejected", extra={"user_id": user.id})
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)

        pair = self._issue_pair(user.id)
        log.info("auth.login", extra={"user_id": user.id})
        return pair

    # ------------------------------------------------------------------ #
    # Refresh with rotation
    # ------------------------------------------------------------------ #

    def refresh(self, dto: RefreshIn) -> TokenPairOut:
        """
        Rotate a refresh token and emit a new token pair.

        Security
        --------
        - The token must verify cryptographically as a refresh token.
        - It must match a live (non-revoked, non-expired) server-side record.
        - The presented token is revoked before the new pair is issued, so
          replaying it fails.
        """
        token = dto.refresh_token
        payload = self.tokens.verify(token, TokenKind.REFRESH)

        record = self.store.find_live_refresh_token(token)
        if record is None or record.user_id != payload.user_id:
            log.info("auth.refresh.rejected", extra={"user_id": payload.user_id})
            raise UnauthorizedError(INVALID_TOKEN_MESSAGE)

        self.store.revoke_refresh_token(token)

        pair = self._issue_pair(payload.user_id)
        log.info("auth.refresh", extra={"user_id": payload.user_id})
        return pair

    # ------------------------------------------------------------------ #
    # Utilities
    # ------------------------------------------------------------------ #

    def _issue_pair(self, user_id: str) -> TokenPairOut:
        """Mint both tokens and persist the refresh one."""
        access = self.tokens.issue(user_id, TokenKind.ACCESS)
        refresh = self.tokens.issue(user_id, TokenKind.REFRESH)
        self.store.create_refresh_token(
            user_id,
            refresh,
            expires_at=self.now_utc() + self.cfg.refresh_expires,
        )
        return TokenPairOut(access_token=access, refresh_token=refresh)

    def _timing_dummy_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self.passwords.hash(_TIMING_DUMMY_PASSWORD)
        return self._dummy_hash

    def now_utc(self) -> datetime:
        return self._clock()
