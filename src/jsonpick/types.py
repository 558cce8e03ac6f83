from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Final


class _AbsentType(Enum):
    ABSENT = "absent"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


# Marker for "no value at this path".  Distinct from ``None`` (JSON null).
ABSENT: Final = _AbsentType.ABSENT


@dataclass(slots=True)
class ResolveOptions:
    """Knobs for pointer resolution.

    Attributes
    ----------
    strict_array_index : bool
        Only accept ASCII digit runs as array indices.  When ``False``, any
        token that reads as a number (``"1.5"``, ``" 2"``, ``"1e0"``) passes the
        numeric check and resolves to :data:`ABSENT` with a warning.
    max_depth : int | None
        Reject pointers with more reference tokens than this.
    """

    strict_array_index: bool = True
    max_depth: int | None = None


def is_absent(value: Any) -> bool:
    return value is ABSENT
