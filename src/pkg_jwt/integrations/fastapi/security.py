from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ...domain.entities import TokenParts
from ...domain.exceptions import StructuralError

bearer_scheme = HTTPBearer(
    auto_error=False,
    bearerFormat="JWT",
    description="Compact JWS: header.payload.signature",
)

_BEARER = "bearer"


def unauthorized(detail: str) -> HTTPException:
    """401 carrying the Bearer challenge, for every auth failure."""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _bearer_value(authorization: Optional[str]) -> Optional[str]:
    scheme, _, value = (authorization or "").partition(" ")
    if scheme.lower() != _BEARER:
        return None
    return value.strip() or None


def find_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
    cookie_name: str,
) -> Optional[str]:
    """
    First non-empty token candidate, in order: resolved bearer credentials,
    the raw Authorization header, the named cookie.
    """
    if credentials is not None and credentials.credentials.strip():
        return credentials.credentials.strip()

    return (
        _bearer_value(request.headers.get("Authorization"))
        or (request.cookies.get(cookie_name) or "").strip()
        or None
    )


def extract_token_from_request(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
    cookie_name: str,
) -> str:
    """
    Return a token shaped like header.payload.signature.

    Raises a 401 "Not authenticated" when there is no candidate at all and a
    401 "Invalid token" when the candidate is not a three-segment token;
    the codec never sees the latter.
    """
    token = find_token(request, credentials, cookie_name)
    if token is None:
        raise unauthorized("Not authenticated")

    try:
        TokenParts.split(token)
    except StructuralError:
        raise unauthorized("Invalid token") from None
    return token
