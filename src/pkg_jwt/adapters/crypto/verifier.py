from __future__ import annotations

import hmac

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import ec, padding, rsa
from cryptography.hazmat.primitives.serialization import load_pem_public_key

from ..base64url import b64url_decode, b64url_encode
from .signer import hmac_digest
from ...domain.algorithms import Algorithm, AlgorithmFamily
from ...domain.exceptions import StructuralError
from ...domain.ports import Verifier
from ...domain.value_objects import KeyMaterial


class CryptographyVerifier(Verifier):
    """
    Adapter implementing the Verifier port using `hmac` and `cryptography`.

    Every failure answers False: bad encoding, unparseable key, wrong key
    family, unsupported algorithm or a plain mismatch all look the same.
    """

    def verify(
        self,
        message: bytes,
        signature: str,
        key: KeyMaterial,
        algorithm: Algorithm,
    ) -> bool:
        try:
            raw_signature = b64url_decode(signature)
        except StructuralError:
            return False

        # only the canonical spelling of a signature is accepted
        if not raw_signature or b64url_encode(raw_signature) != signature:
            return False

        family = algorithm.family
        if family is AlgorithmFamily.HMAC:
            return self._verify_hmac(message, signature, key, algorithm)
        if family in (AlgorithmFamily.RSA, AlgorithmFamily.ECDSA):
            return self._verify_pem(message, raw_signature, key, algorithm)
        return False

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _verify_hmac(
        message: bytes,
        signature: str,
        key: KeyMaterial,
        algorithm: Algorithm,
    ) -> bool:
        expected = b64url_encode(hmac_digest(message, key, algorithm))
        if not expected:
            return False
        # constant time; signature is known to be ASCII at this point
        return hmac.compare_digest(expected.encode("ascii"), signature.encode("ascii"))

    @staticmethod
    def _verify_pem(
        message: bytes,
        raw_signature: bytes,
        key: KeyMaterial,
        algorithm: Algorithm,
    ) -> bool:
        try:
            public_key = load_pem_public_key(bytes(key))
        except (ValueError, TypeError, UnsupportedAlgorithm):
            return False

        try:
            if algorithm.family is AlgorithmFamily.RSA:
                if not isinstance(public_key, rsa.RSAPublicKey):
                    return False
                public_key.verify(
                    raw_signature, message, padding.PKCS1v15(), algorithm.hash_algorithm()
                )
            else:
                if not isinstance(public_key, ec.EllipticCurvePublicKey):
                    return False
                public_key.verify(raw_signature, message, ec.ECDSA(algorithm.hash_algorithm()))
        except (InvalidSignature, ValueError, TypeError, UnsupportedAlgorithm):
            return False

        return True
