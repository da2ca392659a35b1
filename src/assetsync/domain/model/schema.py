"""Read-only object type schema definitions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class DefaultType:
    id: int
    name: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ReferenceType:
    """Kind of link a reference attribute points along (e.g. "Depends on")."""

    workspace_id: str = ""
    global_id: str = ""
    name: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class ObjectTypeAttribute:
    """Schema-level field definition of an object type."""

    id: str
    name: str
    object_type_id: str = ""
    workspace_id: str = ""
    global_id: str = ""
    label: bool = False
    type: int = 0
    description: str = ""
    default_type: DefaultType | None = None
    type_value: str = ""
    type_value_multi: tuple[str, ...] = ()
    additional_value: str = ""
    reference_type: ReferenceType | None = None
    reference_object_type_id: str = ""
    editable: bool = True
    system: bool = False
    indexed: bool = False
    sortable: bool = False
    summable: bool = False
    hidden: bool = False
    unique_attribute: bool = False
    minimum_cardinality: int = 0
    maximum_cardinality: int = 1
    suffix: str = ""
    removable: bool = True
    object_attribute_exists: bool = False
    include_child_object_types: bool = False
    regex_validation: str = ""
    ql_query: str = ""
    options: str = ""
    position: int = 0

    @property
    def is_multi_valued(self) -> bool:
        return self.maximum_cardinality < 0 or self.maximum_cardinality > 1
