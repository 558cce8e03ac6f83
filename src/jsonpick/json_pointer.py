"""RFC 6901 pointer syntax: validation, tokenization and token escaping."""

from __future__ import annotations

import re
from typing import Any

from .errors import InvalidPointerError

TOKENS_SEPARATOR = "/"

_NON_EMPTY_POINTER = re.compile(r"(?:/[^/]*)+")


def is_valid_pointer(pointer: Any) -> bool:
    """Return ``True`` if *pointer* is a well-formed JSON Pointer string.

    The empty string is valid and refers to the whole document.  Any other
    string must start with ``/``; segments between separators may be empty.
    Non-string input is never valid.
    """
    if not isinstance(pointer, str):
        return False
    if pointer == "":
        return True
    return _NON_EMPTY_POINTER.fullmatch(pointer) is not None


def parse_pointer(pointer: str) -> list[str]:
    """Split an already validated pointer into raw reference tokens.

    Tokens come back root-to-leaf and still carry their escape sequences.
    ``""`` yields ``[]`` and ``"/"`` yields ``[""]``.
    """
    if pointer == "":
        return []
    # The leading separator always produces an empty first element.
    return pointer.split(TOKENS_SEPARATOR)[1:]


def escape_json_pointer_token(token: str) -> str:
    """Escape a single JSON Pointer token (RFC 6901)."""
    return token.replace("~", "~0").replace("/", "~1")


def unescape_json_pointer_token(token: str) -> str:
    """Unescape a single JSON Pointer token (RFC 6901).

    ``~1`` is decoded before ``~0`` so that ``"~01"`` becomes ``"~1"``.
    """
    return token.replace("~1", "/").replace("~0", "~")


def split_json_pointer(pointer: str) -> list[str]:
    """Validate *pointer* and split it into unescaped tokens.

    Raises :class:`InvalidPointerError` if the pointer is malformed.
    """
    if not is_valid_pointer(pointer):
        raise InvalidPointerError(repr(pointer))
    return [unescape_json_pointer_token(tok) for tok in parse_pointer(pointer)]


def build_json_pointer(tokens: list[str]) -> str:
    """Build a JSON Pointer string from unescaped tokens."""
    if not tokens:
        return ""
    return TOKENS_SEPARATOR + TOKENS_SEPARATOR.join(
        escape_json_pointer_token(token) for token in tokens
    )


__all__ = [
    "build_json_pointer",
    "escape_json_pointer_token",
    "is_valid_pointer",
    "parse_pointer",
    "split_json_pointer",
    "unescape_json_pointer_token",
]
