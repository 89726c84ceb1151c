from __future__ import annotations

import re
import uuid
from typing import Any, Mapping

from .errors import IdentifierGenerationError, InvalidIdentifierError, ResourceNotFoundError

# Collisions on uuid4 are practically impossible; bound the retry loop anyway.
MAX_GENERATION_ATTEMPTS = 8

_HEX_GROUPS = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"

# Canonical, urn:uuid: prefixed, braced, and bare 32-hex forms. ASCII hex only.
UUID_RE = re.compile(
    rf"(?:urn:uuid:)?{_HEX_GROUPS}|\{{{_HEX_GROUPS}\}}|[0-9a-f]{{32}}",
    re.IGNORECASE | re.ASCII,
)


def is_valid_id(resource_id: Any) -> bool:
    if not isinstance(resource_id, str):
        return False
    return UUID_RE.fullmatch(resource_id) is not None


def check_id(resource_id: str, docs: Mapping[str, Any]) -> None:
    """
    Ensure `resource_id` is a well-formed UUID and a key of `docs`.

    Any RFC 4122 variant/version is accepted. Raises InvalidIdentifierError
    for malformed input and ResourceNotFoundError when it is well-formed but
    absent.
    """
    if not is_valid_id(resource_id):
        raise InvalidIdentifierError(resource_id)
    if resource_id not in docs:
        raise ResourceNotFoundError(resource_id)


def new_id(existing: Mapping[str, Any]) -> str:
    for _ in range(MAX_GENERATION_ATTEMPTS):
        try:
            candidate = str(uuid.uuid4())
        except OSError as e:
            # os.urandom can fail when the system has no entropy source.
            raise IdentifierGenerationError(f"failed to generate identifier: {e}") from e
        if candidate not in existing:
            return candidate
    raise IdentifierGenerationError("failed to generate a unique identifier")
