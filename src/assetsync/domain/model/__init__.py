"""Public domain model surface."""

from __future__ import annotations

from .catalog import (
    Icon,
    ObjectSchema,
    ObjectSchemaDefinition,
    ObjectType,
    ObjectTypeAttributeDefinition,
    ObjectTypeDefinition,
)
from .declared import DeclaredAttribute, ObjectPlan, ObjectState, PlannedObject
from .objects import (
    AVATAR_FIELDS,
    AssetObject,
    Attribute,
    AttributeValue,
    Avatar,
    Group,
    ObjectLinks,
    Status,
)
from .schema import DefaultType, ObjectTypeAttribute, ReferenceType
from .unknown import UNKNOWN, MaybeUnknown, Unknown, is_known

__all__ = [  # noqa: RUF022
    # objects
    "AVATAR_FIELDS",
    "AssetObject",
    "Attribute",
    "AttributeValue",
    "Avatar",
    "Group",
    "ObjectLinks",
    "Status",
    # declared input and state
    "DeclaredAttribute",
    "ObjectPlan",
    "ObjectState",
    "PlannedObject",
    # schema
    "DefaultType",
    "ObjectTypeAttribute",
    "ReferenceType",
    # catalog
    "Icon",
    "ObjectSchema",
    "ObjectSchemaDefinition",
    "ObjectType",
    "ObjectTypeAttributeDefinition",
    "ObjectTypeDefinition",
    # unknown marker
    "UNKNOWN",
    "MaybeUnknown",
    "Unknown",
    "is_known",
]
