from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Tuple

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials
from loguru import logger

from .security import bearer_scheme, extract_token_from_request, unauthorized
from ..common.codec_factory import TokenCodec
from ...domain.value_objects import KeyLike
from ...settings import DEFAULT_COOKIE_NAME


@dataclass(slots=True)
class FastAPIJWT:
    """
    FastAPI integration for pkg_jwt.

    Holds the verification key and allowlist for one API and exposes them
    as dependencies. Decode failures are reported as a bare 401; the reason
    is never sent back to the client.
    """

    codec: TokenCodec
    key: KeyLike
    algorithms: Tuple[str, ...] = field(default_factory=tuple)
    cookie_name: str = DEFAULT_COOKIE_NAME

    # ------------------------------------------------------------------ #
    # Dependencies
    # ------------------------------------------------------------------ #

    async def get_claims(
            self,
            request: Request,
            credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    ) -> Any:
        """Dependency: require a valid token, return its claims."""
        token = extract_token_from_request(request, credentials, self.cookie_name)
        claims = self.codec.decode(token, self.key, self.algorithms)
        if claims is None:
            logger.warning(f"Rejected bearer token on {request.url.path}")
            raise unauthorized("Invalid token")
        return claims

    async def get_optional_claims(
            self,
            request: Request,
            credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    ) -> Any | None:
        """Dependency: claims if a valid token is present, else None."""
        try:
            token = extract_token_from_request(request, credentials, self.cookie_name)
        except HTTPException:
            # missing or malformed -> anonymous
            return None

        return self.codec.decode(token, self.key, self.algorithms)
