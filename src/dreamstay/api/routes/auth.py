"""Token endpoints.

- POST /jwt: sign a token for an email and set it as an HTTP-only cookie
- GET /logout: clear the cookie

Cookie flags follow the deployment mode: production cookies are `secure` and
`SameSite=None` (the frontend is served from another site), development
cookies are `SameSite=Strict` over plain HTTP.
"""

from fastapi import APIRouter, Depends, Response

from dreamstay.api.dependencies import get_authorization_gate, get_settings
from dreamstay.api.models.auth import TokenRequest, TokenResponse
from dreamstay.api.security import TOKEN_COOKIE
from dreamstay.config import Settings
from dreamstay.services import AuthorizationGate
from dreamstay.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/jwt", summary="Issue identity token", response_model=TokenResponse)
def issue_token(
    body: TokenRequest,
    response: Response,
    gate: AuthorizationGate = Depends(get_authorization_gate),
    settings: Settings = Depends(get_settings),
) -> TokenResponse:
    issued = gate.issue_token(body.email)
    response.set_cookie(
        key=TOKEN_COOKIE,
        value=issued.token,
        max_age=gate.ttl_seconds,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,  # type: ignore[arg-type]
    )
    logger.info("Issued identity token")
    return TokenResponse(expires_at=issued.expires_at)


@router.get("/logout", summary="Clear identity cookie", response_model=TokenResponse)
def logout(
    response: Response,
    gate: AuthorizationGate = Depends(get_authorization_gate),
    settings: Settings = Depends(get_settings),
) -> TokenResponse:
    gate.revoke()
    response.delete_cookie(
        key=TOKEN_COOKIE,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,  # type: ignore[arg-type]
    )
    return TokenResponse()
