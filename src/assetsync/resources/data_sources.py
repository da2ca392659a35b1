"""Read-only lookups of objects and the catalog around them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from assetsync.domain.diagnostics import Diagnostics
from assetsync.domain.errors import AssetsError

if TYPE_CHECKING:
    from assetsync.domain.model import (
        AssetObject,
        Icon,
        ObjectSchema,
        ObjectType,
        ObjectTypeAttribute,
    )

    from .gateway import AssetsGateway


@dataclass(slots=True)
class ObjectLookup:
    object: AssetObject | None = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass(slots=True)
class ObjectTypeAttributesLookup:
    object_type_id: str = ""
    object_schema_id: str = ""
    attributes: tuple[ObjectTypeAttribute, ...] = ()
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass(slots=True)
class ObjectSchemaLookup:
    object_schema: ObjectSchema | None = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass(slots=True)
class ObjectTypeLookup:
    object_type: ObjectType | None = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass(slots=True)
class IconLookup:
    icon: Icon | None = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass(slots=True)
class GlobalIconsLookup:
    icons: tuple[Icon, ...] = ()
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


class ObjectDataSource:
    def __init__(self, gateway: AssetsGateway) -> None:
        self._gateway = gateway

    def read(self, object_id: str) -> ObjectLookup:
        lookup = ObjectLookup()
        try:
            lookup.object = self._gateway.get_object(object_id)
        except AssetsError as exc:
            lookup.diagnostics.add_error(
                "Unable to Read Object", f"Could not read object {object_id}: {exc}"
            )
        return lookup


class ObjectTypeAttributesDataSource:
    """List attribute definitions of one object type or of a whole object schema.

    An object type id takes precedence over a schema id. Results are ordered by
    owning object type, then position.
    """

    def __init__(self, gateway: AssetsGateway) -> None:
        self._gateway = gateway

    def read(
        self, object_type_id: str = "", *, object_schema_id: str = ""
    ) -> ObjectTypeAttributesLookup:
        lookup = ObjectTypeAttributesLookup(
            object_type_id=object_type_id, object_schema_id=object_schema_id
        )
        if object_type_id:
            source = f"object type {object_type_id}"
        elif object_schema_id:
            source = f"object schema {object_schema_id}"
        else:
            lookup.diagnostics.add_error(
                "Error Reading attributes", "Neither an object type nor an object schema is given."
            )
            return lookup

        try:
            if object_type_id:
                definitions = self._gateway.list_object_type_attributes(object_type_id)
            else:
                definitions = self._gateway.list_object_schema_attributes(object_schema_id)
        except AssetsError as exc:
            lookup.diagnostics.add_error(
                "Unable to Read Object Type Attributes",
                f"Could not read attributes of {source}: {exc}",
            )
            return lookup
        lookup.attributes = tuple(
            sorted(definitions, key=lambda item: (item.object_type_id, item.position))
        )
        return lookup


class ObjectSchemaDataSource:
    def __init__(self, gateway: AssetsGateway) -> None:
        self._gateway = gateway

    def read(self, object_schema_id: str) -> ObjectSchemaLookup:
        lookup = ObjectSchemaLookup()
        try:
            lookup.object_schema = self._gateway.get_object_schema(object_schema_id)
        except AssetsError as exc:
            lookup.diagnostics.add_error(
                "Error Reading object schema",
                f"Could not read object schema {object_schema_id}: {exc}",
            )
        return lookup


class ObjectTypeDataSource:
    def __init__(self, gateway: AssetsGateway) -> None:
        self._gateway = gateway

    def read(self, object_type_id: str) -> ObjectTypeLookup:
        lookup = ObjectTypeLookup()
        try:
            lookup.object_type = self._gateway.get_object_type(object_type_id)
        except AssetsError as exc:
            lookup.diagnostics.add_error(
                "Error Reading object type",
                f"Could not read object type {object_type_id}: {exc}",
            )
        return lookup


class IconDataSource:
    def __init__(self, gateway: AssetsGateway) -> None:
        self._gateway = gateway

    def read(self, icon_id: str) -> IconLookup:
        lookup = IconLookup()
        try:
            lookup.icon = self._gateway.get_icon(icon_id)
        except AssetsError as exc:
            lookup.diagnostics.add_error(
                "Error Reading icon", f"Could not read icon {icon_id}: {exc}"
            )
        return lookup


class GlobalIconsDataSource:
    """Icons shared by every schema of the workspace, in service order."""

    def __init__(self, gateway: AssetsGateway) -> None:
        self._gateway = gateway

    def read(self) -> GlobalIconsLookup:
        lookup = GlobalIconsLookup()
        try:
            lookup.icons = self._gateway.list_global_icons()
        except AssetsError as exc:
            lookup.diagnostics.add_error(
                "Error Reading Global icons", f"Could not read global icons: {exc}"
            )
        return lookup


__all__ = [
    "GlobalIconsDataSource",
    "GlobalIconsLookup",
    "IconDataSource",
    "IconLookup",
    "ObjectDataSource",
    "ObjectLookup",
    "ObjectSchemaDataSource",
    "ObjectSchemaLookup",
    "ObjectTypeAttributesDataSource",
    "ObjectTypeAttributesLookup",
    "ObjectTypeDataSource",
    "ObjectTypeLookup",
]
