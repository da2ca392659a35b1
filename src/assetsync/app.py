"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from assetsync.adapters.assets import AssetsClient
from assetsync.config import get_assets_config
from assetsync.domain.model import ObjectPlan
from assetsync.resources import (
    GlobalIconsDataSource,
    IconDataSource,
    ObjectDataSource,
    ObjectResource,
    ObjectSchemaDataSource,
    ObjectTypeAttributesDataSource,
    ObjectTypeDataSource,
)

if TYPE_CHECKING:
    from assetsync.config import AssetsConfig
    from assetsync.domain.diagnostics import Diagnostics
    from assetsync.domain.model import DeclaredAttribute, MaybeUnknown
    from assetsync.domain.reconciliation import PlanResolution
    from assetsync.resources import (
        AssetsGateway,
        GlobalIconsLookup,
        IconLookup,
        ObjectLookup,
        ObjectSchemaLookup,
        ObjectTypeAttributesLookup,
        ObjectTypeLookup,
    )

log = getLogger(__name__)


def build_assets_client(config: AssetsConfig | None = None) -> AssetsClient:
    effective_config = config or get_assets_config()
    return AssetsClient(config=effective_config)


def build_object_resource(
    *,
    config: AssetsConfig | None = None,
    gateway: AssetsGateway | None = None,
) -> ObjectResource:
    effective_config = config or get_assets_config()
    effective_gateway = gateway or AssetsClient(config=effective_config)
    return ObjectResource(effective_gateway, effective_config.features)


def read_object(object_id: str, *, gateway: AssetsGateway | None = None) -> ObjectLookup:
    return ObjectDataSource(gateway or build_assets_client()).read(object_id)


def list_object_type_attributes(
    object_type_id: str = "",
    *,
    object_schema_id: str = "",
    gateway: AssetsGateway | None = None,
) -> ObjectTypeAttributesLookup:
    return ObjectTypeAttributesDataSource(gateway or build_assets_client()).read(
        object_type_id, object_schema_id=object_schema_id
    )


def read_object_schema(
    object_schema_id: str, *, gateway: AssetsGateway | None = None
) -> ObjectSchemaLookup:
    return ObjectSchemaDataSource(gateway or build_assets_client()).read(object_schema_id)


def read_object_type(
    object_type_id: str, *, gateway: AssetsGateway | None = None
) -> ObjectTypeLookup:
    return ObjectTypeDataSource(gateway or build_assets_client()).read(object_type_id)


def read_icon(icon_id: str, *, gateway: AssetsGateway | None = None) -> IconLookup:
    return IconDataSource(gateway or build_assets_client()).read(icon_id)


def list_global_icons(*, gateway: AssetsGateway | None = None) -> GlobalIconsLookup:
    return GlobalIconsDataSource(gateway or build_assets_client()).read()


def plan_object(
    object_id: str,
    attributes_in: tuple[DeclaredAttribute, ...],
    *,
    avatar_uuid: MaybeUnknown[str | None] | None = None,
    resource: ObjectResource | None = None,
) -> tuple[PlanResolution | None, Diagnostics]:
    """Resolve a plan for an existing object against its current remote state.

    The imported remote object is the prior state. ``avatar_uuid`` defaults to
    the avatar the object currently has.
    """

    effective_resource = resource or build_object_resource()
    imported = effective_resource.import_state(object_id)
    if imported.state is None:
        return None, imported.diagnostics

    prior = imported.state
    if avatar_uuid is None:
        avatar_uuid = prior.object.avatar.avatar_uuid if prior.object.avatar else None
    proposed = ObjectPlan(
        object_type_id=prior.object.object_type_id,
        attributes_in=attributes_in,
        has_avatar=prior.object.has_avatar,
        avatar_uuid=avatar_uuid,
    )
    resolution = effective_resource.plan(prior, proposed)
    log.info(
        "Planned object %s: label=%s, avatar=%s",
        object_id,
        resolution.label.kind if resolution.label else "error",
        resolution.avatar.kind if resolution.avatar else "error",
    )
    return resolution, imported.diagnostics


def delete_object(object_id: str, *, resource: ObjectResource | None = None) -> Diagnostics:
    """Delete an object with the configured policy, reading it first for its object type."""

    effective_resource = resource or build_object_resource()
    imported = effective_resource.import_state(object_id)
    if imported.state is None:
        return imported.diagnostics
    return effective_resource.delete(imported.state)


__all__ = [
    "build_assets_client",
    "build_object_resource",
    "delete_object",
    "list_global_icons",
    "list_object_type_attributes",
    "plan_object",
    "read_icon",
    "read_object",
    "read_object_schema",
    "read_object_type",
]
