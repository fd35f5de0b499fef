"""
pkg_jwt

Compact JSON Web Token encoding and verification (HS*, RS*, ES*, none)
with an explicit algorithm allowlist on decode.
"""

__version__ = "0.1.0"

from .domain.algorithms import Algorithm, AlgorithmFamily, DEFAULT_ALGORITHM
from .domain.entities import Header, TokenParts
from .domain.exceptions import (
    JWTError,
    StructuralError,
    AlgorithmError,
    KeyMaterialError,
    SignatureError,
    SerializationError,
)
from .domain.value_objects import AlgorithmAllowlist, KeyMaterial
from .domain.ports import ClaimsSerializer, Signer, Verifier

from .adapters.base64url import b64url_encode, b64url_decode
from .adapters.json_serializer import JSONClaimsSerializer
from .adapters.crypto.signer import CryptographySigner
from .adapters.crypto.verifier import CryptographyVerifier

from .application.use_cases.encode import EncodeTokenUseCase
from .application.use_cases.decode import DecodeTokenUseCase

from .settings import JWTSettings
from .env import settings_from_env
from .integrations.common.codec_factory import TokenCodec, create_token_codec
from .api import encode, decode, get_default_codec

__all__ = [
    "__version__",
    # public api
    "encode",
    "decode",
    "get_default_codec",
    "TokenCodec",
    "create_token_codec",
    "JWTSettings",
    "settings_from_env",
    # domain core
    "Algorithm",
    "AlgorithmFamily",
    "DEFAULT_ALGORITHM",
    "Header",
    "TokenParts",
    "AlgorithmAllowlist",
    "KeyMaterial",
    "ClaimsSerializer",
    "Signer",
    "Verifier",
    # exceptions
    "JWTError",
    "StructuralError",
    "AlgorithmError",
    "KeyMaterialError",
    "SignatureError",
    "SerializationError",
    # adapters
    "b64url_encode",
    "b64url_decode",
    "JSONClaimsSerializer",
    "CryptographySigner",
    "CryptographyVerifier",
    # use cases
    "EncodeTokenUseCase",
    "DecodeTokenUseCase",
]
