"""Exceptions raised while resolving a JSON Pointer.

Every failure is a caller input error, so nothing here is retried or
recovered internally.  An unresolvable path is *not* an error: it yields
:data:`jsonpick.types.ABSENT`.
"""

from __future__ import annotations

ERROR_MESSAGE_PREFIX = "JSON Pointer: "


class JsonPointerError(ValueError):
    """Base exception for all pointer resolution errors."""

    message = "Pointer resolution failed."

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        text = ERROR_MESSAGE_PREFIX + self.message
        if detail:
            text = f"{text} ({detail})"
        super().__init__(text)


class InvalidDocumentTypeError(JsonPointerError, TypeError):
    """The document argument is not a ``str``."""

    message = "JSON document must be a string."


class InvalidDocumentError(JsonPointerError):
    """The document string could not be decoded as JSON."""

    message = "JSON document is not valid."


class InvalidPointerError(JsonPointerError):
    """The pointer is not a well-formed RFC 6901 string."""

    message = "Pointer is not valid."


class ArrayTokenError(JsonPointerError):
    """A reference token cannot be used to index an array."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"token {token!r}")


class UnsupportedArrayAppendError(ArrayTokenError):
    message = 'Implementation does not support "-" token for arrays.'


class NonNumericArrayTokenError(ArrayTokenError):
    message = "Non-number tokens cannot be used in array context."


class LeadingZeroArrayTokenError(ArrayTokenError):
    message = "Token with leading zero cannot be used in array context."


class PointerNotFoundError(JsonPointerError, LookupError):
    """Raised by :func:`jsonpick.api.get_validated` when nothing is at the pointer."""

    message = "No value at pointer."

    def __init__(self, pointer: str) -> None:
        self.pointer = pointer
        super().__init__(repr(pointer))


__all__ = [
    "ArrayTokenError",
    "ERROR_MESSAGE_PREFIX",
    "InvalidDocumentError",
    "InvalidDocumentTypeError",
    "InvalidPointerError",
    "JsonPointerError",
    "LeadingZeroArrayTokenError",
    "NonNumericArrayTokenError",
    "PointerNotFoundError",
    "UnsupportedArrayAppendError",
]
