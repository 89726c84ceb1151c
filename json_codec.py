from __future__ import annotations

import json
from typing import Any, Protocol


class CodecError(ValueError):
    """Raised when a payload cannot be encoded or decoded."""


class JsonCodec(Protocol):
    def marshal(self, value: Any) -> bytes:
        ...

    def unmarshal(self, data: bytes) -> Any:
        ...


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal {name}")


class StdlibJsonCodec(JsonCodec):
    """
    Default codec backed by the standard library `json` module.

    NaN/Infinity are rejected both ways; they are not valid JSON. Nesting
    beyond the interpreter recursion limit is reported as a CodecError.
    """

    def marshal(self, value: Any) -> bytes:
        try:
            return json.dumps(value, ensure_ascii=False, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise CodecError(f"failed to encode JSON: {e}") from e
        except RecursionError as e:
            raise CodecError("failed to encode JSON: document nested too deeply") from e

    def unmarshal(self, data: bytes) -> Any:
        if not data.strip():
            raise CodecError("missing json body in request or invalid")
        try:
            return json.loads(data, parse_constant=_reject_constant)
        except ValueError as e:
            raise CodecError(f"invalid JSON: {e}") from e
        except RecursionError as e:
            raise CodecError("invalid JSON: document nested too deeply") from e


DEFAULT_CODEC = StdlibJsonCodec()
