# src/pkg_jwt/domain/value_objects.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from .algorithms import Algorithm
from .exceptions import KeyMaterialError


KeyLike = Union[str, bytes, bytearray, None]


# --- Key material ----------------------------------------------------------


@dataclass(frozen=True, slots=True)
class KeyMaterial:
    """
    Raw key bytes as supplied by the caller.

    Either empty (for "none"), an HMAC secret, or PEM text for RSA / ECDSA.
    No attempt is made to tell these apart here; a key that does not suit
    the algorithm fails later in the signer or verifier.
    """
    value: bytes = b""

    @classmethod
    def from_raw(cls, key: KeyLike) -> "KeyMaterial":
        if key is None:
            return cls()
        if isinstance(key, str):
            try:
                return cls(key.encode("utf-8"))
            except UnicodeEncodeError as exc:
                raise KeyMaterialError("Key text is not valid UTF-8") from exc
        if isinstance(key, (bytes, bytearray)):
            return cls(bytes(key))
        raise KeyMaterialError(f"Unsupported key type: {type(key).__name__}")

    @property
    def is_empty(self) -> bool:
        return not self.value

    def __bytes__(self) -> bytes:
        return self.value

    def __repr__(self) -> str:
        # never print secrets
        return f"KeyMaterial(<{len(self.value)} bytes>)"


# --- Algorithm allowlist ---------------------------------------------------


def _normalize(values: Iterable[str | Algorithm]) -> Tuple[str, ...]:
    """
    Normalize an iterable of identifiers into a tuple of strings.
    If a plain string is passed, treat it as a single-element collection.
    """
    if isinstance(values, (str, Algorithm)):
        values = (values,)
    return tuple(str(v) for v in values)


@dataclass(frozen=True, slots=True)
class AlgorithmAllowlist:
    """
    Algorithms the caller is willing to accept at decode time.

    An empty allowlist accepts whatever the token declares. Membership is
    checked on the declared identifier only; the key type plays no part.
    """

    algorithms: Tuple[str, ...] = ()

    def __init__(self, algorithms: Iterable[str | Algorithm] | None = None) -> None:
        object.__setattr__(self, "algorithms", _normalize(algorithms or ()))

    @property
    def is_empty(self) -> bool:
        return not self.algorithms

    def permits(self, alg: str) -> bool:
        return self.is_empty or alg in self.algorithms

    def __contains__(self, alg: object) -> bool:
        return str(alg) in self.algorithms
