from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("jsonpick")
except PackageNotFoundError:  # pragma: no cover - local source tree without installed metadata
    __version__ = "0.1.0"

from .api import get, get_validated, resolve
from .errors import (
    ArrayTokenError,
    InvalidDocumentError,
    InvalidDocumentTypeError,
    InvalidPointerError,
    JsonPointerError,
    LeadingZeroArrayTokenError,
    NonNumericArrayTokenError,
    PointerNotFoundError,
    UnsupportedArrayAppendError,
)
from .evaluate import ContextKind, evaluate, step
from .json_pointer import (
    build_json_pointer,
    escape_json_pointer_token,
    is_valid_pointer,
    parse_pointer,
    split_json_pointer,
    unescape_json_pointer_token,
)
from .types import ABSENT, ResolveOptions, is_absent

__all__ = [
    "ABSENT",
    "ArrayTokenError",
    "ContextKind",
    "InvalidDocumentError",
    "InvalidDocumentTypeError",
    "InvalidPointerError",
    "JsonPointerError",
    "LeadingZeroArrayTokenError",
    "NonNumericArrayTokenError",
    "PointerNotFoundError",
    "ResolveOptions",
    "UnsupportedArrayAppendError",
    "build_json_pointer",
    "escape_json_pointer_token",
    "evaluate",
    "get",
    "get_validated",
    "is_absent",
    "is_valid_pointer",
    "parse_pointer",
    "resolve",
    "split_json_pointer",
    "step",
    "unescape_json_pointer_token",
]
