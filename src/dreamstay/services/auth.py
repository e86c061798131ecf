"""Authorization gate: identity tokens and owner checks.

Tokens are stateless HS256 JWTs binding a caller to an email address:

    {"sub": "<email>", "iat": ..., "exp": ..., "iss": "dreamstay"}

Nothing is stored server-side, so a token stays valid until it expires.
Logging out deletes the client's cookie; there is no revocation list.
"""

import datetime as dt
from typing import Any

import jwt

from dreamstay.models import BookingError, ErrorCode, Identity, IssuedToken
from dreamstay.utils.logging import get_logger

logger = get_logger(__name__)

TOKEN_ISSUER = "dreamstay"


class AuthorizationGate:
    """Issues and verifies identity tokens."""

    ALGORITHM = "HS256"

    def __init__(self, secret: str, ttl_seconds: int = 3600) -> None:
        """Initialize the gate.

        Args:
            secret: HMAC signing secret
            ttl_seconds: Validity window of issued tokens
        """
        self._secret = secret
        self.ttl_seconds = ttl_seconds

    def issue_token(self, email: str) -> IssuedToken:
        """Sign a new token for an email.

        The email is trusted as given; it is expected to have been verified
        by the upstream identity provider.
        """
        now = dt.datetime.now(dt.UTC)
        expires_at = now + dt.timedelta(seconds=self.ttl_seconds)
        payload: dict[str, Any] = {
            "sub": email,
            "iat": now,
            "exp": expires_at,
            "iss": TOKEN_ISSUER,
        }
        token = jwt.encode(payload, self._secret, algorithm=self.ALGORITHM)
        return IssuedToken(token=token, expires_at=expires_at.replace(microsecond=0))

    def verify(self, token: str | None) -> Identity:
        """Validate signature and expiry and return the bound identity.

        Raises:
            BookingError: AUTH_REQUIRED (no token), SESSION_EXPIRED,
                TOKEN_INVALID (bad signature, issuer or claims)
        """
        if not token:
            raise BookingError(code=ErrorCode.AUTH_REQUIRED)

        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self.ALGORITHM],
                issuer=TOKEN_ISSUER,
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise BookingError(code=ErrorCode.SESSION_EXPIRED) from e
        except jwt.PyJWTError as e:
            logger.warning("Rejected identity token: %s", type(e).__name__)
            raise BookingError(code=ErrorCode.TOKEN_INVALID) from e

        try:
            return Identity(
                email=claims["sub"],
                issued_at=dt.datetime.fromtimestamp(claims["iat"], dt.UTC),
                expires_at=dt.datetime.fromtimestamp(claims["exp"], dt.UTC),
            )
        except (TypeError, ValueError) as e:
            logger.warning("Identity token carries malformed claims")
            raise BookingError(code=ErrorCode.TOKEN_INVALID) from e

    def authorize_owner(self, identity: Identity, resource_email: str) -> None:
        """Require the caller to own a resource.

        Raises:
            BookingError: USER_MISMATCH if the emails differ
        """
        if identity.email != resource_email:
            raise BookingError(
                code=ErrorCode.USER_MISMATCH,
                details={"message": "You can only access your own bookings"},
            )

    def revoke(self) -> None:
        """Logical logout.

        Tokens are stateless, so the server has nothing to invalidate; the
        caller must delete the credential cookie.
        """
        logger.debug("Logout requested; token remains valid until expiry")
