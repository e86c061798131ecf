"""Request authentication.

`require_identity` is the interceptor stage for protected routes: it either
yields the caller's Identity or short-circuits the request with a 401
BookingError before the route body runs.

The token is read from the `token` cookie set by POST /jwt. A bearer token in
the Authorization header is accepted as well for non-browser clients.
"""

from fastapi import Depends, Request

from dreamstay.api.dependencies import get_authorization_gate
from dreamstay.models import Identity
from dreamstay.services import AuthorizationGate

TOKEN_COOKIE = "token"


def extract_token(request: Request) -> str | None:
    """Find the identity token on a request, cookie first."""
    token = request.cookies.get(TOKEN_COOKIE)
    if token:
        return token

    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return None


def require_identity(
    request: Request,
    gate: AuthorizationGate = Depends(get_authorization_gate),
) -> Identity:
    """Verify the request's token and return the caller identity."""
    return gate.verify(extract_token(request))
