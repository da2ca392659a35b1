"""Tagged resolution results for derived plan fields.

Every derived field resolves to exactly one variant. Consumers branch on the
variant instead of re-deriving the decision from flags.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Literal

from assetsync.domain.model import UNKNOWN

if TYPE_CHECKING:
    from assetsync.domain.model import Avatar, MaybeUnknown


class ResolutionKind(StrEnum):
    UNCHANGED = "unchanged"
    FORCE_UNKNOWN = "force_unknown"
    RESOLVED = "resolved"


@dataclass(frozen=True, kw_only=True)
class Unchanged[T]:
    """Keep the prior value as it is."""

    value: T
    kind: Literal[ResolutionKind.UNCHANGED] = ResolutionKind.UNCHANGED


@dataclass(frozen=True, kw_only=True)
class ForceUnknown:
    """The value is only known after apply; the whole field is planned as unknown."""

    reason: str = ""
    kind: Literal[ResolutionKind.FORCE_UNKNOWN] = ResolutionKind.FORCE_UNKNOWN


@dataclass(frozen=True, kw_only=True)
class Resolved[T]:
    """A new value derived from the proposed input."""

    value: T
    kind: Literal[ResolutionKind.RESOLVED] = ResolutionKind.RESOLVED


type Resolution[T] = Unchanged[T] | ForceUnknown | Resolved[T]
type LabelResolution = Resolution[str]
type AvatarResolution = Resolution[Avatar | None]


def planned_value[T](resolution: Resolution[T]) -> MaybeUnknown[T]:
    if isinstance(resolution, ForceUnknown):
        return UNKNOWN
    return resolution.value
