from __future__ import annotations

import base64
import binascii
import re

from ..domain.exceptions import StructuralError

_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")
_PADDING = {0: "", 2: "==", 3: "="}


def b64url_encode(data: bytes | str) -> str:
    """URL-safe base64 with the trailing `=` padding stripped."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(text: str) -> bytes:
    """
    Decode unpadded URL-safe base64.

    Padding is recomputed from the input length. An empty string decodes to
    empty bytes; callers decide whether that is acceptable.

    Raises:
        StructuralError for characters outside the URL-safe alphabet or an
        impossible length (len % 4 == 1).
    """
    if not isinstance(text, str) or not _ALPHABET.fullmatch(text):
        raise StructuralError("Segment is not base64url")

    padding = _PADDING.get(len(text) % 4)
    if padding is None:
        raise StructuralError("Segment has an invalid base64url length")

    try:
        return base64.urlsafe_b64decode(text + padding)
    except (binascii.Error, ValueError) as exc:
        raise StructuralError("Segment is not base64url") from exc
