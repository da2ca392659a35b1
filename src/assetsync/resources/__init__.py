"""Resource and data source operations built on the reconciliation core."""

from __future__ import annotations

from .catalog import (
    CatalogResult,
    ObjectSchemaResource,
    ObjectTypeAttributeResource,
    ObjectTypeResource,
)
from .data_sources import (
    GlobalIconsDataSource,
    GlobalIconsLookup,
    IconDataSource,
    IconLookup,
    ObjectDataSource,
    ObjectLookup,
    ObjectSchemaDataSource,
    ObjectSchemaLookup,
    ObjectTypeAttributesDataSource,
    ObjectTypeAttributesLookup,
    ObjectTypeDataSource,
    ObjectTypeLookup,
)
from .gateway import AssetsGateway
from .lifecycle import (
    OBSOLETE_VALUE,
    DeletionPolicy,
    HardDelete,
    SoftDelete,
    select_deletion_policy,
)
from .object_resource import ObjectResource, ResourceResult

__all__ = [
    "OBSOLETE_VALUE",
    "AssetsGateway",
    "CatalogResult",
    "DeletionPolicy",
    "GlobalIconsDataSource",
    "GlobalIconsLookup",
    "HardDelete",
    "IconDataSource",
    "IconLookup",
    "ObjectDataSource",
    "ObjectLookup",
    "ObjectResource",
    "ObjectSchemaDataSource",
    "ObjectSchemaLookup",
    "ObjectSchemaResource",
    "ObjectTypeAttributeResource",
    "ObjectTypeAttributesDataSource",
    "ObjectTypeAttributesLookup",
    "ObjectTypeDataSource",
    "ObjectTypeLookup",
    "ObjectTypeResource",
    "ResourceResult",
    "SoftDelete",
    "select_deletion_policy",
]
