from __future__ import annotations

from typing import Any, Protocol

from .algorithms import Algorithm
from .value_objects import KeyMaterial


class ClaimsSerializer(Protocol):
    """
    Port for turning a claims value into bytes and back.

    Must preserve object key sets, array order and scalar types.
    """

    def dumps(self, value: Any) -> bytes:
        """
        Raises:
          - SerializationError
        """
        ...

    def loads(self, data: bytes) -> Any:
        """
        Raises:
          - SerializationError
        """
        ...


class Signer(Protocol):
    """
    Port for producing a raw signature over a byte string.

    Implementations live in the adapters layer (e.g. the `cryptography`
    backed signer).
    """

    def sign(self, message: bytes, key: KeyMaterial, algorithm: Algorithm) -> bytes:
        """
        Raises:
          - AlgorithmError
          - KeyMaterialError
          - SignatureError
        """
        ...


class Verifier(Protocol):
    """
    Port for checking an encoded signature segment over a byte string.

    Never raises; every failure path answers False so callers cannot tell
    a malformed signature from a wrong one.
    """

    def verify(
        self,
        message: bytes,
        signature: str,
        key: KeyMaterial,
        algorithm: Algorithm,
    ) -> bool:
        ...
