from __future__ import annotations

import hmac

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import ec, padding, rsa
from cryptography.hazmat.primitives.serialization import load_pem_private_key
from loguru import logger

from ...domain.algorithms import Algorithm, AlgorithmFamily
from ...domain.exceptions import AlgorithmError, KeyMaterialError, SignatureError
from ...domain.ports import Signer
from ...domain.value_objects import KeyMaterial


def hmac_digest(message: bytes, key: KeyMaterial, algorithm: Algorithm) -> bytes:
    """Keyed digest for the HS* family."""
    if algorithm.family is not AlgorithmFamily.HMAC:
        raise AlgorithmError(f"{algorithm} is not an HMAC algorithm")
    return hmac.new(bytes(key), message, algorithm.digestmod).digest()


def load_private_key(key: KeyMaterial):
    try:
        return load_pem_private_key(bytes(key), password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise KeyMaterialError("Could not parse PEM private key") from exc


class CryptographySigner(Signer):
    """
    Adapter implementing the Signer port using `hmac` and `cryptography`.

    - HS*: HMAC over the message
    - RS*: RSASSA-PKCS1-v1_5
    - ES*: ECDSA, signature left in the DER form `cryptography` emits
    """

    def sign(self, message: bytes, key: KeyMaterial, algorithm: Algorithm) -> bytes:
        family = algorithm.family

        if family is AlgorithmFamily.HMAC:
            return hmac_digest(message, key, algorithm)

        if family is AlgorithmFamily.RSA:
            private_key = load_private_key(key)
            if not isinstance(private_key, rsa.RSAPrivateKey):
                raise SignatureError(f"{algorithm} requires an RSA private key")
            return self._sign_with(
                lambda: private_key.sign(message, padding.PKCS1v15(), algorithm.hash_algorithm()),
                algorithm,
            )

        if family is AlgorithmFamily.ECDSA:
            private_key = load_private_key(key)
            if not isinstance(private_key, ec.EllipticCurvePrivateKey):
                raise SignatureError(f"{algorithm} requires an EC private key")
            return self._sign_with(
                lambda: private_key.sign(message, ec.ECDSA(algorithm.hash_algorithm())),
                algorithm,
            )

        raise AlgorithmError(f"{algorithm} does not produce signatures")

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _sign_with(operation, algorithm: Algorithm) -> bytes:
        try:
            signature = operation()
        except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
            logger.debug(f"{algorithm} signing failed: {type(exc).__name__}")
            raise SignatureError(f"{algorithm} signing failed") from exc

        if not signature:
            raise SignatureError(f"{algorithm} produced an empty signature")
        return signature
