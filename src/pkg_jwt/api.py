from __future__ import annotations

from functools import lru_cache
from typing import Any, Iterable, Optional

from .domain.algorithms import Algorithm
from .domain.value_objects import KeyLike
from .env import settings_from_env
from .integrations.common.codec_factory import TokenCodec, create_token_codec


@lru_cache(maxsize=1)
def get_default_codec() -> TokenCodec:
    """Process-wide codec configured from the environment."""
    return create_token_codec(settings_from_env())


def encode(claims: Any, key: KeyLike = "", algorithm: str | Algorithm | None = "") -> str:
    """
    Encode `claims` as a compact token signed with `key`.

    An empty `algorithm` means the configured default (HS256). Returns ""
    on any failure.
    """
    return get_default_codec().encode(claims, key, algorithm)


def decode(
        token: str | bytes,
        key: KeyLike = "",
        algorithms: Iterable[str | Algorithm] | None = (),
) -> Optional[Any]:
    """
    Verify `token` and return its claims, or None on any failure.

    Callers must bound the token length before decoding when the
    configured limit is disabled.
    """
    return get_default_codec().decode(token, key, algorithms)
