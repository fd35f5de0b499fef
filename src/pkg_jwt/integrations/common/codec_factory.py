from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from loguru import logger

from ...adapters.crypto.signer import CryptographySigner
from ...adapters.crypto.verifier import CryptographyVerifier
from ...adapters.json_serializer import JSONClaimsSerializer
from ...application.use_cases.decode import DecodeTokenUseCase
from ...application.use_cases.encode import EncodeTokenUseCase
from ...domain.algorithms import Algorithm
from ...domain.exceptions import JWTError
from ...domain.value_objects import KeyLike
from ...settings import JWTSettings


@dataclass(slots=True)
class TokenCodec:
    """
    Framework-agnostic encode/decode facade.

    Collapses every failure into a single outcome per direction so callers
    (and attackers) cannot tell why a token was refused:
      - encode() returns "" on failure
      - decode() returns None on failure

    Use the wrapped use cases directly when the failure reason matters.
    """

    encode_use_case: EncodeTokenUseCase
    decode_use_case: DecodeTokenUseCase

    # --- Core operations --------------------------------------------------

    def encode(
            self,
            claims: Any,
            key: KeyLike = "",
            algorithm: str | Algorithm | None = "",
    ) -> str:
        """Claims -> compact token, or "" on any failure."""
        try:
            return self.encode_use_case.execute(claims, key, algorithm)
        except JWTError as exc:
            logger.debug(f"Token encode failed: {type(exc).__name__}")
            return ""

    def decode(
            self,
            token: str | bytes,
            key: KeyLike = "",
            algorithms: Iterable[str | Algorithm] | None = (),
    ) -> Optional[Any]:
        """
        Token -> claims, or None on any failure.

        An empty `algorithms` accepts the algorithm the token declares,
        still refusing unsigned tokens when a key is supplied.
        """
        try:
            return self.decode_use_case.execute(token, key, algorithms)
        except JWTError as exc:
            logger.debug(f"Token decode failed: {type(exc).__name__}")
            return None


def create_token_codec(settings: JWTSettings | None = None) -> TokenCodec:
    """
    High-level factory: settings -> TokenCodec.

    - builds the JSON serializer and the cryptography-backed signer/verifier
    - wires EncodeTokenUseCase + DecodeTokenUseCase
    - returns a TokenCodec facade
    """
    settings = settings or JWTSettings()
    serializer = JSONClaimsSerializer()

    encode_uc = EncodeTokenUseCase(
        serializer=serializer,
        signer=CryptographySigner(),
        default_algorithm=settings.resolved_default_algorithm,
    )
    decode_uc = DecodeTokenUseCase(
        serializer=serializer,
        verifier=CryptographyVerifier(),
        max_token_length=settings.token_length_limit,
    )

    logger.info(
        f"Token codec ready: default_algorithm={settings.default_algorithm}, "
        f"max_token_length={settings.token_length_limit}"
    )
    return TokenCodec(encode_use_case=encode_uc, decode_use_case=decode_uc)
