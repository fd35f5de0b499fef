class JWTError(Exception):
    """Base class for every token encode/decode failure."""
    pass


class StructuralError(JWTError):
    """Raised when a token or one of its segments is malformed."""
    pass


class AlgorithmError(JWTError):
    """Raised when an algorithm is unknown, unsupported or not allowed."""
    pass


class KeyMaterialError(JWTError):
    """Raised when key material cannot be parsed."""
    pass


class SignatureError(JWTError):
    """Raised when signing fails or a signature does not verify."""
    pass


class SerializationError(JWTError):
    """Raised when a header or claims value is not valid structured text."""
    pass
