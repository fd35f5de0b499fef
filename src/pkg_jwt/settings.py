from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .domain.algorithms import DEFAULT_ALGORITHM, Algorithm

DEFAULT_MAX_TOKEN_LENGTH = 64 * 1024
DEFAULT_COOKIE_NAME = "access_token"


@dataclass(slots=True)
class JWTSettings:
    """
    Token codec settings.

    Host code decides how to construct this (env, config file, etc.).
    `max_token_length` bounds decode work per token; None or 0 disables
    the bound and leaves it to the caller. `cookie_name` is where framework
    integrations look for a token when no bearer header is sent.
    """
    default_algorithm: str = DEFAULT_ALGORITHM.identifier
    max_token_length: Optional[int] = DEFAULT_MAX_TOKEN_LENGTH
    cookie_name: str = DEFAULT_COOKIE_NAME

    @property
    def resolved_default_algorithm(self) -> Algorithm:
        return Algorithm.resolve(self.default_algorithm)

    @property
    def token_length_limit(self) -> Optional[int]:
        return self.max_token_length or None
