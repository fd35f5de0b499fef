from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ...adapters.base64url import b64url_encode
from ...domain.algorithms import DEFAULT_ALGORITHM, Algorithm
from ...domain.entities import Header, TokenParts
from ...domain.exceptions import SignatureError
from ...domain.ports import ClaimsSerializer, Signer
from ...domain.value_objects import KeyLike, KeyMaterial


@dataclass(slots=True)
class EncodeTokenUseCase:
    """
    Application use case:
    - Build the header for the requested algorithm
    - Serialize header and claims, base64url both
    - Sign the signing input via the Signer port (skipped for "none")

    Raises the domain errors; the public facade turns them into "".
    """

    serializer: ClaimsSerializer
    signer: Signer
    default_algorithm: Algorithm = field(default=DEFAULT_ALGORITHM)

    def execute(self, claims: Any, key: KeyLike = None, algorithm: str | Algorithm | None = None) -> str:
        """
        Encode `claims` into a compact token.

        Raises:
            AlgorithmError
            KeyMaterialError
            SignatureError
            SerializationError
        """
        resolved = Algorithm.resolve(algorithm) if algorithm else self.default_algorithm
        key_material = KeyMaterial.from_raw(key)

        header = Header.for_algorithm(resolved)
        encoded_header = b64url_encode(self.serializer.dumps(header.to_dict()))
        encoded_payload = b64url_encode(self.serializer.dumps(claims))

        parts = TokenParts(header=encoded_header, payload=encoded_payload, signature="")
        if not resolved.is_signed:
            return parts.join()

        signature = self.signer.sign(parts.signing_input.encode("ascii"), key_material, resolved)
        if not signature:
            raise SignatureError(f"{resolved} produced an empty signature")

        return TokenParts(
            header=encoded_header,
            payload=encoded_payload,
            signature=b64url_encode(signature),
        ).join()
