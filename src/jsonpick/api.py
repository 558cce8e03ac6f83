from __future__ import annotations

import json
from typing import Any, TypeVar

from pydantic import TypeAdapter

from .errors import (
    InvalidDocumentError,
    InvalidDocumentTypeError,
    InvalidPointerError,
    PointerNotFoundError,
)
from .evaluate import evaluate
from .json_pointer import is_valid_pointer, parse_pointer
from .types import ABSENT, ResolveOptions

T = TypeVar("T")


def _tokens(pointer: Any, options: ResolveOptions) -> list[str]:
    if not is_valid_pointer(pointer):
        raise InvalidPointerError(repr(pointer))
    tokens = parse_pointer(pointer)
    if options.max_depth is not None and len(tokens) > options.max_depth:
        raise InvalidPointerError(
            f"depth {len(tokens)} exceeds max_depth={options.max_depth}"
        )
    return tokens


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a JSON value")


def _decode(document: str) -> Any:
    try:
        return json.loads(document, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise InvalidDocumentError(str(exc)) from exc


def get(
    document: str,
    pointer: str,
    default: Any = ABSENT,
    *,
    options: ResolveOptions | None = None,
) -> Any:
    """
    Return the value *pointer* refers to inside the JSON text *document*.

    Returns :data:`~jsonpick.types.ABSENT` (or *default*, when given) if the
    path does not exist.  Malformed input raises a
    :class:`~jsonpick.errors.JsonPointerError` subclass.

    The document type is checked before the pointer, and the pointer before
    the document is decoded.
    """
    opts = options or ResolveOptions()
    if not isinstance(document, str):
        raise InvalidDocumentTypeError(type(document).__name__)
    tokens = _tokens(pointer, opts)
    value = evaluate(_decode(document), tokens, options=opts, _stacklevel=2)
    return default if value is ABSENT else value


def resolve(
    value: Any,
    pointer: str,
    default: Any = ABSENT,
    *,
    options: ResolveOptions | None = None,
) -> Any:
    """
    Like :func:`get`, but over an already decoded Python value.

    *value* is only read, never modified.
    """
    opts = options or ResolveOptions()
    result = evaluate(value, _tokens(pointer, opts), options=opts, _stacklevel=2)
    return default if result is ABSENT else result


def get_validated(
    document: str,
    pointer: str,
    target: type[T] | TypeAdapter[T],
    *,
    options: ResolveOptions | None = None,
) -> T:
    """
    Resolve *pointer* in *document* and validate the result against *target*.

    Raises
    ------
    PointerNotFoundError
        If nothing exists at *pointer*.
    pydantic.ValidationError
        If the pointed-to value does not conform to *target*.
    """
    value = get(document, pointer, options=options)
    if value is ABSENT:
        raise PointerNotFoundError(pointer)
    adapter: TypeAdapter[T] = target if isinstance(target, TypeAdapter) else TypeAdapter(target)
    return adapter.validate_python(value)
