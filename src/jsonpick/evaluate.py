"""Token-by-token traversal of a decoded JSON value.

Each step looks at the current evaluation context, classifies it as one of
:class:`ContextKind`, and either moves one level down or reports
:data:`~jsonpick.types.ABSENT`.  Array contexts enforce the RFC 6901 index
rules; object contexts are plain key lookups; anything else stops the walk.
"""

from __future__ import annotations

import math
import re
import warnings
from collections.abc import Iterable, Mapping, Sequence
from enum import Enum
from typing import Any

from .errors import (
    LeadingZeroArrayTokenError,
    NonNumericArrayTokenError,
    UnsupportedArrayAppendError,
)
from .json_pointer import unescape_json_pointer_token
from .types import ABSENT, ResolveOptions

APPEND_TOKEN = "-"

_ARRAY_INDEX = re.compile(r"[0-9]+")
_PREFIXED_INTEGER = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")


class ContextKind(str, Enum):
    ARRAY = "array"
    OBJECT = "object"
    SCALAR = "scalar"
    ABSENT = "absent"


def classify(context: Any) -> ContextKind:
    """Return the variant of *context* the evaluator branches on."""
    if context is ABSENT:
        return ContextKind.ABSENT
    if isinstance(context, Mapping):
        return ContextKind.OBJECT
    if isinstance(context, Sequence) and not isinstance(context, (str, bytes, bytearray)):
        return ContextKind.ARRAY
    return ContextKind.SCALAR


def _is_number_like(token: str) -> bool:
    # Mirrors a loose "convertible to a number" check: blank strings count as
    # zero, surrounding whitespace is ignored and floats/exponents pass.
    text = token.strip()
    if text == "":
        return True
    if _PREFIXED_INTEGER.fullmatch(text):
        return True
    if "_" in text or not text.isascii():
        return False
    try:
        number = float(text)
    except ValueError:
        return False
    if math.isnan(number):
        return False
    if math.isinf(number):
        return text.lstrip("+-") == "Infinity"
    return True


def _array_index(token: str, *, strict: bool) -> int | None:
    """Validate an array reference token and return its index.

    Returns ``None`` when *strict* is off and the token reads as a number
    but cannot name an array slot.
    """
    if token == APPEND_TOKEN:
        raise UnsupportedArrayAppendError(token)
    canonical = _ARRAY_INDEX.fullmatch(token) is not None
    if not canonical and (strict or not _is_number_like(token)):
        raise NonNumericArrayTokenError(token)
    if len(token) > 1 and token[0] == "0":
        raise LeadingZeroArrayTokenError(token)
    if not canonical:
        return None
    return int(token)


def step(
    context: Any,
    token: str,
    *,
    options: ResolveOptions | None = None,
    _stacklevel: int = 1,
) -> Any:
    """Evaluate one raw reference *token* against *context*.

    Returns the next context, or :data:`ABSENT` if the token does not
    resolve.  Raises an :class:`~jsonpick.errors.ArrayTokenError` subclass
    when *token* is unusable as an index into an array context.
    """
    opts = options or ResolveOptions()
    token = unescape_json_pointer_token(token)
    kind = classify(context)

    if kind is ContextKind.ARRAY:
        idx = _array_index(token, strict=opts.strict_array_index)
        if idx is None:
            warnings.warn(
                f"Array token {token!r} is not a non-negative integer; treating as absent",
                stacklevel=_stacklevel + 1,
            )
            return ABSENT
        if idx >= len(context):
            return ABSENT
        return context[idx]
    if kind is ContextKind.OBJECT:
        return context.get(token, ABSENT)
    # Scalars and absent values cannot be traversed further.
    return ABSENT


def evaluate(
    document: Any,
    tokens: Iterable[str],
    *,
    options: ResolveOptions | None = None,
    _stacklevel: int = 1,
) -> Any:
    """Fold :func:`step` over raw *tokens*, root to leaf.

    Stops at the first token that yields :data:`ABSENT`.
    """
    opts = options or ResolveOptions()
    value = document
    for token in tokens:
        value = step(value, token, options=opts, _stacklevel=_stacklevel + 1)
        if value is ABSENT:
            break
    return value


__all__ = ["APPEND_TOKEN", "ContextKind", "classify", "evaluate", "step"]
