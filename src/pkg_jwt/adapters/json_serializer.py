from __future__ import annotations

import json
from typing import Any

from ..domain.exceptions import SerializationError


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


class JSONClaimsSerializer:
    """
    Adapter implementing the ClaimsSerializer port with the stdlib `json`.

    Output is compact UTF-8 JSON; NaN / Infinity are refused both ways.
    """

    def dumps(self, value: Any) -> bytes:
        try:
            return json.dumps(
                value,
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
            ).encode("utf-8")
        except (TypeError, ValueError, UnicodeEncodeError, RecursionError) as exc:
            raise SerializationError(f"Value is not JSON serializable: {exc}") from exc

    def loads(self, data: bytes) -> Any:
        try:
            return json.loads(data.decode("utf-8"), parse_constant=_reject_constant)
        except (UnicodeDecodeError, ValueError, RecursionError) as exc:
            raise SerializationError(f"Invalid JSON: {exc}") from exc
