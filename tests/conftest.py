# tests/conftest.py
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from pkg_jwt import JWTSettings, create_token_codec


HS_SECRET = "secret"

CLAIMS = {
    "sub": "1234567890",
    "name": "John Doe",
    "admin": True,
}


def _pem_pair(private_key):
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")
    public_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("ascii")
    return private_pem, public_pem


@pytest.fixture(scope="session")
def rsa_keys():
    return _pem_pair(rsa.generate_private_key(public_exponent=65537, key_size=2048))


@pytest.fixture(scope="session")
def other_rsa_keys():
    return _pem_pair(rsa.generate_private_key(public_exponent=65537, key_size=2048))


@pytest.fixture(scope="session")
def ec_keys():
    return {
        "ES256": _pem_pair(ec.generate_private_key(ec.SECP256R1())),
        "ES384": _pem_pair(ec.generate_private_key(ec.SECP384R1())),
        "ES512": _pem_pair(ec.generate_private_key(ec.SECP521R1())),
    }


@pytest.fixture(scope="session")
def key_pairs(rsa_keys, ec_keys):
    """algorithm -> (signing key, verifying key)"""
    pairs = {
        "none": ("", ""),
        "HS256": (HS_SECRET, HS_SECRET),
        "HS384": (HS_SECRET, HS_SECRET),
        "HS512": (HS_SECRET, HS_SECRET),
        "RS256": rsa_keys,
        "RS384": rsa_keys,
        "RS512": rsa_keys,
    }
    pairs.update(ec_keys)
    return pairs


@pytest.fixture
def codec():
    return create_token_codec(JWTSettings())
