from __future__ import annotations

import os

from .domain.algorithms import Algorithm
from .domain.exceptions import AlgorithmError
from .settings import DEFAULT_COOKIE_NAME, DEFAULT_MAX_TOKEN_LENGTH, JWTSettings


def settings_from_env() -> JWTSettings:
    """
    Build JWTSettings from environment variables:

      JWT_DEFAULT_ALGORITHM   algorithm used when encode() gets none (HS256)
      JWT_MAX_TOKEN_LENGTH    maximum accepted token length, 0 = unbounded
      JWT_COOKIE_NAME         cookie checked for a token (access_token)
    """
    def _int(key: str, default: int) -> int:
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError as exc:
            raise RuntimeError(f"{key} must be an integer, got {raw!r}") from exc
        if value < 0:
            raise RuntimeError(f"{key} must not be negative, got {value}")
        return value

    default_algorithm = (os.getenv("JWT_DEFAULT_ALGORITHM") or "").strip()
    if default_algorithm:
        try:
            Algorithm.resolve(default_algorithm)
        except AlgorithmError as exc:
            raise RuntimeError(
                f"JWT_DEFAULT_ALGORITHM must be one of {', '.join(Algorithm.identifiers())}"
            ) from exc
    else:
        default_algorithm = JWTSettings().default_algorithm

    return JWTSettings(
        default_algorithm=default_algorithm,
        max_token_length=_int("JWT_MAX_TOKEN_LENGTH", DEFAULT_MAX_TOKEN_LENGTH),
        cookie_name=(os.getenv("JWT_COOKIE_NAME") or "").strip() or DEFAULT_COOKIE_NAME,
    )
