"""Marker for planned values that only become known after apply."""

from __future__ import annotations

from enum import Enum
from typing import Final, Literal


class Unknown(Enum):
    UNKNOWN = "unknown"

    def __repr__(self) -> str:
        return "UNKNOWN"


UNKNOWN: Final = Unknown.UNKNOWN

type MaybeUnknown[T] = T | Literal[Unknown.UNKNOWN]


def is_known[T](value: MaybeUnknown[T]) -> bool:
    return value is not UNKNOWN
