"""Catalog entities around objects: schemas, object types and icons.

The remote records are rebuilt from every read. The ``*Definition`` types are
what a user declares when managing them; ``validate`` rejects input the service
would refuse before any remote call is made.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from assetsync.domain.errors import ValidationError

_SCHEMA_KEY = re.compile(r"^[A-Z0-9]*$")


@dataclass(frozen=True, slots=True, kw_only=True)
class Icon:
    id: str
    name: str = ""
    url16: str = ""
    url48: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class ObjectSchema:
    workspace_id: str
    global_id: str
    id: str
    name: str
    object_schema_key: str
    description: str = ""
    status: str = ""
    created: str = ""
    updated: str = ""
    object_count: int = 0
    object_type_count: int = 0
    can_manage: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class ObjectType:
    workspace_id: str
    global_id: str
    id: str
    name: str
    object_schema_id: str
    description: str = ""
    icon_id: str = ""
    position: int = 0
    created: str = ""
    updated: str = ""
    object_count: int = 0
    parent_object_type_id: str = ""
    inherited: bool = False
    abstract_object_type: bool = False
    parent_object_type_inherited: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class ObjectSchemaDefinition:
    name: str
    object_schema_key: str
    description: str = ""

    def validate(self) -> None:
        if not 2 <= len(self.name) <= 50:
            raise ValidationError("Object schema name must be 2 to 50 characters long")
        if not 2 <= len(self.object_schema_key) <= 10:
            raise ValidationError("Object schema key must be 2 to 10 characters long")
        if not _SCHEMA_KEY.match(self.object_schema_key):
            raise ValidationError(
                f"Object schema key {self.object_schema_key!r} must contain only "
                "uppercase alphanumeric characters"
            )


@dataclass(frozen=True, slots=True, kw_only=True)
class ObjectTypeDefinition:
    name: str
    icon_id: str
    object_schema_id: str
    description: str = ""
    parent_object_type_id: str = ""
    inherited: bool = False
    abstract_object_type: bool = False

    def validate(self) -> None:
        for field_name in ("name", "icon_id", "object_schema_id"):
            if not getattr(self, field_name).strip():
                raise ValidationError(f"Object type {field_name} must not be empty")


@dataclass(frozen=True, slots=True, kw_only=True)
class ObjectTypeAttributeDefinition:
    """Declared field of an object type.

    ``None`` for ``type``, ``default_type_id`` and the cardinalities leaves the
    choice to the service.
    """

    object_type_id: str
    name: str
    label: bool = False
    type: int | None = None
    description: str = ""
    default_type_id: int | None = None
    type_value: str = ""
    type_value_multi: tuple[str, ...] = ()
    additional_value: str = ""
    summable: bool = False
    minimum_cardinality: int | None = None
    maximum_cardinality: int | None = None
    suffix: str = ""
    hidden: bool = False
    include_child_object_types: bool = False
    unique_attribute: bool = False
    regex_validation: str = ""
    ql_query: str = ""
    options: str = ""

    def validate(self) -> None:
        if not self.object_type_id.strip():
            raise ValidationError("Object type attribute is missing its object type id")
        if not self.name.strip():
            raise ValidationError("Object type attribute name must not be empty")
        if (
            self.minimum_cardinality is not None
            and self.maximum_cardinality is not None
            and self.maximum_cardinality >= 0
            and self.minimum_cardinality > self.maximum_cardinality
        ):
            raise ValidationError(
                f"Attribute {self.name}: minimum cardinality exceeds maximum cardinality"
            )
