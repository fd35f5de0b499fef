from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .algorithms import Algorithm
from .exceptions import AlgorithmError, SerializationError, StructuralError

SEPARATOR = "."
TOKEN_TYPE = "JWT"


@dataclass(frozen=True, slots=True)
class Header:
    """
    JOSE header for this core: token type and algorithm.

    Built by the encoder; only `alg` is ever looked at by the decoder.
    """
    alg: str
    typ: str = TOKEN_TYPE

    @classmethod
    def for_algorithm(cls, algorithm: Algorithm) -> "Header":
        return cls(alg=algorithm.identifier)

    @classmethod
    def from_mapping(cls, raw: Any) -> "Header":
        if not isinstance(raw, Mapping):
            raise SerializationError("Token header is not a JSON object")

        alg = raw.get("alg")
        if not isinstance(alg, str):
            raise AlgorithmError("Token header has no algorithm")

        typ = raw.get("typ")
        return cls(alg=alg, typ=typ if isinstance(typ, str) else TOKEN_TYPE)

    def to_dict(self) -> dict[str, str]:
        # typ first, matching the documented wire shape
        return {"typ": self.typ, "alg": self.alg}


@dataclass(frozen=True, slots=True)
class TokenParts:
    """
    The three raw segments of a compact token.
    """
    header: str
    payload: str
    signature: str

    @classmethod
    def split(cls, token: str) -> "TokenParts":
        """
        Split a token on its first two separators.

        Raises:
            StructuralError if the token does not have exactly three segments.
        """
        first = token.find(SEPARATOR)
        if first == -1:
            raise StructuralError("Token has no separators")

        second = token.find(SEPARATOR, first + 1)
        if second == -1:
            raise StructuralError("Token has only one separator")

        signature = token[second + 1:]
        if SEPARATOR in signature:
            raise StructuralError("Token has too many segments")

        return cls(
            header=token[:first],
            payload=token[first + 1:second],
            signature=signature,
        )

    @property
    def signing_input(self) -> str:
        """Everything before the final separator."""
        return f"{self.header}{SEPARATOR}{self.payload}"

    def join(self) -> str:
        return f"{self.signing_input}{SEPARATOR}{self.signature}"
