from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from cryptography.hazmat.primitives import hashes

from .exceptions import AlgorithmError


class AlgorithmFamily(Enum):
    NONE = "none"
    HMAC = "HMAC"
    RSA = "RSA"
    ECDSA = "ECDSA"


_HASHES = {
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
}


class Algorithm(Enum):
    """
    Closed set of signing algorithms a token may declare.

    Each member maps the wire identifier to a signing family and a digest.
    Encode and decode both go through `Algorithm.resolve`, so nothing is
    reachable from one path but not the other.
    """

    NONE = ("none", AlgorithmFamily.NONE, None)
    HS256 = ("HS256", AlgorithmFamily.HMAC, "sha256")
    HS384 = ("HS384", AlgorithmFamily.HMAC, "sha384")
    HS512 = ("HS512", AlgorithmFamily.HMAC, "sha512")
    RS256 = ("RS256", AlgorithmFamily.RSA, "sha256")
    RS384 = ("RS384", AlgorithmFamily.RSA, "sha384")
    RS512 = ("RS512", AlgorithmFamily.RSA, "sha512")
    ES256 = ("ES256", AlgorithmFamily.ECDSA, "sha256")
    ES384 = ("ES384", AlgorithmFamily.ECDSA, "sha384")
    ES512 = ("ES512", AlgorithmFamily.ECDSA, "sha512")

    def __init__(self, identifier: str, family: AlgorithmFamily, digest: Optional[str]) -> None:
        self.identifier = identifier
        self.family = family
        self.digest = digest

    def __str__(self) -> str:
        return self.identifier

    # ---- registry lookup -------------------------------------------------

    @classmethod
    def resolve(cls, name: Any) -> "Algorithm":
        """
        Map a wire identifier (e.g. "HS256") to its registry entry.

        Raises:
            AlgorithmError if `name` is not one of the supported identifiers.
        """
        if isinstance(name, Algorithm):
            return name
        if isinstance(name, str):
            member = _BY_IDENTIFIER.get(name)
            if member is not None:
                return member
        raise AlgorithmError(f"Unsupported algorithm: {name!r}")

    @classmethod
    def identifiers(cls) -> tuple[str, ...]:
        return tuple(member.identifier for member in cls)

    # ---- digest helpers --------------------------------------------------

    @property
    def is_signed(self) -> bool:
        return self.family is not AlgorithmFamily.NONE

    @property
    def digestmod(self) -> str:
        """hashlib name used for HMAC."""
        if self.digest is None:
            raise AlgorithmError(f"{self.identifier} has no digest")
        return self.digest

    def hash_algorithm(self) -> hashes.HashAlgorithm:
        """Fresh `cryptography` hash instance for RSA / ECDSA."""
        if self.digest is None:
            raise AlgorithmError(f"{self.identifier} has no digest")
        return _HASHES[self.digest]()


_BY_IDENTIFIER = {member.identifier: member for member in Algorithm}

DEFAULT_ALGORITHM = Algorithm.HS256
