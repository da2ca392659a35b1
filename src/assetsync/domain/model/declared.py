"""User-declared input and the per-instance state derived from it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from assetsync.domain.errors import ValidationError

if TYPE_CHECKING:
    from .objects import AssetObject, Avatar
    from .unknown import MaybeUnknown


@dataclass(frozen=True, slots=True)
class DeclaredAttribute:
    """Flat attribute as written by the user: a type attribute id and raw values."""

    type_attribute_id: str
    values: tuple[str, ...]

    def validate(self) -> None:
        if not self.type_attribute_id.strip():
            raise ValidationError("Declared attribute is missing its object type attribute id")
        if not self.values:
            raise ValidationError(
                f"Attribute {self.type_attribute_id} must declare at least one value"
            )


@dataclass(frozen=True, slots=True, kw_only=True)
class ObjectPlan:
    """Proposed desired state for one object resource instance.

    ``avatar_uuid`` is ``None`` when no avatar is declared and ``UNKNOWN`` when the
    value depends on something that is only known at apply time.
    """

    object_type_id: str
    attributes_in: tuple[DeclaredAttribute, ...]
    has_avatar: bool = False
    avatar_uuid: MaybeUnknown[str | None] = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ObjectState:
    """Last synchronized state: the remote object and the input that produced it."""

    object: AssetObject
    attributes_in: tuple[DeclaredAttribute, ...] = field(
        default_factory=tuple["DeclaredAttribute", ...]
    )

    @property
    def id(self) -> str:
        return self.object.id


@dataclass(frozen=True, slots=True, kw_only=True)
class PlannedObject:
    """Planned values for one instance after label and avatar resolution."""

    object_type_id: str
    attributes_in: tuple[DeclaredAttribute, ...]
    label: MaybeUnknown[str]
    avatar: MaybeUnknown[Avatar | None]
