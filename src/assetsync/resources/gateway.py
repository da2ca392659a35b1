"""Port for the remote catalog service used by resources and data sources."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from assetsync.adapters.assets.schema import (
        ObjectPayload,
        ObjectSchemaRequest,
        ObjectTypeAttributeRequest,
        ObjectTypeRequest,
    )
    from assetsync.domain.model import (
        AssetObject,
        Icon,
        ObjectSchema,
        ObjectType,
        ObjectTypeAttribute,
    )


@runtime_checkable
class AssetsGateway(Protocol):
    """Remote calls against one Assets workspace.

    The object calls are the ones a reconciliation pass issues; the rest manage
    and look up the catalog around objects. Implementations raise
    ``RemoteError`` with the service's status and message when a call fails.
    """

    # objects
    def get_object(self, object_id: str) -> AssetObject: ...

    def create_object(self, payload: ObjectPayload) -> AssetObject: ...

    def update_object(self, object_id: str, payload: ObjectPayload) -> AssetObject: ...

    def delete_object(self, object_id: str) -> None: ...

    def list_object_type_attributes(
        self, object_type_id: str
    ) -> tuple[ObjectTypeAttribute, ...]: ...

    # object schemas
    def get_object_schema(self, object_schema_id: str) -> ObjectSchema: ...

    def create_object_schema(self, payload: ObjectSchemaRequest) -> ObjectSchema: ...

    def update_object_schema(
        self, object_schema_id: str, payload: ObjectSchemaRequest
    ) -> ObjectSchema: ...

    def delete_object_schema(self, object_schema_id: str) -> None: ...

    def list_object_schema_attributes(
        self, object_schema_id: str
    ) -> tuple[ObjectTypeAttribute, ...]: ...

    # object types
    def get_object_type(self, object_type_id: str) -> ObjectType: ...

    def create_object_type(self, payload: ObjectTypeRequest) -> ObjectType: ...

    def update_object_type(self, object_type_id: str, payload: ObjectTypeRequest) -> ObjectType: ...

    def delete_object_type(self, object_type_id: str) -> None: ...

    # object type attributes
    def create_object_type_attribute(
        self, object_type_id: str, payload: ObjectTypeAttributeRequest
    ) -> ObjectTypeAttribute: ...

    def update_object_type_attribute(
        self, object_type_id: str, attribute_id: str, payload: ObjectTypeAttributeRequest
    ) -> ObjectTypeAttribute: ...

    def delete_object_type_attribute(self, attribute_id: str) -> None: ...

    # icons
    def get_icon(self, icon_id: str) -> Icon: ...

    def list_global_icons(self) -> tuple[Icon, ...]: ...


__all__ = ["AssetsGateway"]
