"""Asset objects as decoded from the catalog service.

All types are immutable value objects. They are rebuilt from every remote read,
so a reconciliation pass can pass them around without copying.

Nested references (``AttributeValue.group``, ``AttributeValue.status`` and
``AssetObject.avatar``) are either fully present or ``None``. A present but
empty reference (e.g. ``Group(avatar_url="", name="")``) is a different value
from an absent one.
"""

from __future__ import annotations

from dataclasses import dataclass, field

AVATAR_FIELDS = (
    "workspace_id",
    "global_id",
    "id",
    "avatar_uuid",
    "url16",
    "url48",
    "url72",
    "url144",
    "url288",
    "object_id",
)


@dataclass(frozen=True, slots=True, kw_only=True)
class Group:
    avatar_url: str
    name: str


@dataclass(frozen=True, slots=True, kw_only=True)
class Status:
    id: str
    name: str
    category: int


@dataclass(frozen=True, slots=True, kw_only=True)
class AttributeValue:
    value: str
    display_value: str = ""
    search_value: str = ""
    additional_value: str = ""
    group: Group | None = None
    status: Status | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Attribute:
    """One attribute of an object, keyed by its object type attribute id."""

    type_attribute_id: str
    values: frozenset[AttributeValue]
    is_label_source: bool = False
    id: str = ""
    workspace_id: str = ""
    global_id: str = ""

    @property
    def raw_values(self) -> tuple[str, ...]:
        return tuple(sorted(value.value for value in self.values))


@dataclass(frozen=True, slots=True, kw_only=True)
class Avatar:
    """Image reference attached to an object; replaced as a whole or not at all."""

    workspace_id: str
    global_id: str
    id: str
    avatar_uuid: str
    url16: str
    url48: str
    url72: str
    url144: str
    url288: str
    object_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ObjectLinks:
    self_url: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class AssetObject:
    workspace_id: str
    global_id: str
    id: str
    label: str
    object_key: str
    object_type_id: str
    created: str = ""
    updated: str = ""
    has_avatar: bool = False
    attributes: frozenset[Attribute] = field(default_factory=frozenset["Attribute"])
    avatar: Avatar | None = None
    links: ObjectLinks = field(default_factory=ObjectLinks)

    def attribute(self, type_attribute_id: str) -> Attribute | None:
        for attribute in self.attributes:
            if attribute.type_attribute_id == type_attribute_id:
                return attribute
        return None

    def label_attributes(self) -> tuple[Attribute, ...]:
        """Attributes flagged as label source, ordered by type attribute id."""

        flagged = (attribute for attribute in self.attributes if attribute.is_label_source)
        return tuple(sorted(flagged, key=_type_attribute_sort_key))


def _type_attribute_sort_key(attribute: Attribute) -> tuple[int, str]:
    type_id = attribute.type_attribute_id
    return (int(type_id), type_id) if type_id.isdigit() else (2**63, type_id)
