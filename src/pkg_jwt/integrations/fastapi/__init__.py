from __future__ import annotations

from typing import Iterable

from .deps import FastAPIJWT
from ..common.codec_factory import TokenCodec, create_token_codec
from ...domain.value_objects import KeyLike
from ...settings import JWTSettings


def create_fastapi_jwt(
    *,
    key: KeyLike,
    algorithms: Iterable[str],
    settings: JWTSettings | None = None,
    codec: TokenCodec | None = None,
) -> FastAPIJWT:
    """
    High-level helper for FastAPI apps:

    - Creates a TokenCodec from settings (unless one is given)
    - Reads the token cookie name from settings
    - Wraps it in FastAPIJWT, exposing dependencies like:

        fastapi_jwt.get_claims
        fastapi_jwt.get_optional_claims

    Pass an explicit allowlist; an empty one accepts whatever algorithm a
    token declares.
    """
    settings = settings or JWTSettings()
    return FastAPIJWT(
        codec=codec or create_token_codec(settings),
        key=key,
        algorithms=tuple(algorithms),
        cookie_name=settings.cookie_name,
    )


__all__ = ["FastAPIJWT", "create_fastapi_jwt"]
