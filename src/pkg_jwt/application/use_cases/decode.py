from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from ...adapters.base64url import b64url_decode
from ...domain.algorithms import Algorithm
from ...domain.entities import Header, TokenParts
from ...domain.exceptions import AlgorithmError, SignatureError, StructuralError
from ...domain.ports import ClaimsSerializer, Verifier
from ...domain.value_objects import AlgorithmAllowlist, KeyLike, KeyMaterial


@dataclass(slots=True)
class DecodeTokenUseCase:
    """
    Application use case: verify a compact token and release its claims.

    Each step is a hard gate, in this order:
      1. structure (three segments, length bound)
      2. header decode (JSON object with a string "alg")
      3. algorithm gating: "none" with a key, then the caller's allowlist
      4. signature verification over everything before the last separator
      5. payload decode

    Claims are only ever returned after step 4 has passed.
    """

    serializer: ClaimsSerializer
    verifier: Verifier
    max_token_length: Optional[int] = None

    def execute(
            self,
            token: str | bytes,
            key: KeyLike = None,
            algorithms: Iterable[str | Algorithm] | AlgorithmAllowlist | None = None,
    ) -> Any:
        """
        Raises:
            StructuralError
            SerializationError
            AlgorithmError
            KeyMaterialError
            SignatureError
        """
        allowlist = (
            algorithms
            if isinstance(algorithms, AlgorithmAllowlist)
            else AlgorithmAllowlist(algorithms)
        )
        key_material = KeyMaterial.from_raw(key)

        parts = self._split(token)
        header = self._decode_header(parts)
        algorithm = self._gate_algorithm(header, key_material, allowlist)
        self._verify_signature(parts, key_material, algorithm)

        return self.serializer.loads(b64url_decode(parts.payload))

    # ------------------------------------------------------------------ #
    # Internal: decode steps
    # ------------------------------------------------------------------ #

    def _split(self, token: str | bytes) -> TokenParts:
        if isinstance(token, (bytes, bytearray)):
            try:
                token = token.decode("ascii")
            except UnicodeDecodeError as exc:
                raise StructuralError("Token is not ASCII") from exc

        if not isinstance(token, str) or not token:
            raise StructuralError("Token is empty")
        if not token.isascii():
            raise StructuralError("Token is not ASCII")

        if self.max_token_length and len(token) > self.max_token_length:
            raise StructuralError(
                f"Token exceeds maximum length of {self.max_token_length}"
            )

        return TokenParts.split(token)

    def _decode_header(self, parts: TokenParts) -> Header:
        raw = self.serializer.loads(b64url_decode(parts.header))
        return Header.from_mapping(raw)

    @staticmethod
    def _gate_algorithm(
            header: Header,
            key: KeyMaterial,
            allowlist: AlgorithmAllowlist,
    ) -> Algorithm:
        # An unsigned token is never accepted by a caller holding a key.
        if header.alg == Algorithm.NONE.identifier and not key.is_empty:
            raise AlgorithmError("Unsigned token rejected because a key was supplied")

        if not allowlist.permits(header.alg):
            raise AlgorithmError(f"Algorithm {header.alg!r} is not allowed")

        return Algorithm.resolve(header.alg)

    def _verify_signature(
            self,
            parts: TokenParts,
            key: KeyMaterial,
            algorithm: Algorithm,
    ) -> None:
        if not algorithm.is_signed:
            if parts.signature:
                raise SignatureError("Unsigned token carries a signature")
            return

        message = parts.signing_input.encode("ascii")
        if not self.verifier.verify(message, parts.signature, key, algorithm):
            raise SignatureError("Signature verification failed")
