"""Lifecycle of the catalog entities objects live in.

Object schemas, object types and object type attributes follow the same rules
as objects: failures become diagnostics and ``update`` returns the previous
state on error. Fields the service cannot change in place are reported by
``requires_replace`` and rejected by ``update``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from assetsync.adapters.assets.translator import (
    object_schema_request,
    object_type_attribute_request,
    object_type_request,
)
from assetsync.domain.diagnostics import Diagnostics
from assetsync.domain.errors import AssetsError, RemoteError

if TYPE_CHECKING:
    from assetsync.domain.model import (
        ObjectSchema,
        ObjectSchemaDefinition,
        ObjectType,
        ObjectTypeAttribute,
        ObjectTypeAttributeDefinition,
        ObjectTypeDefinition,
    )

    from .gateway import AssetsGateway

log = getLogger(__name__)


@dataclass(slots=True)
class CatalogResult[T]:
    """Outcome of one catalog operation.

    ``removed`` is set when a read finds the entity gone; the caller drops it
    from its state instead of failing.
    """

    state: T | None = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    removed: bool = False

    @property
    def ok(self) -> bool:
        return not self.diagnostics.has_error()


def _is_not_found(exc: AssetsError) -> bool:
    return isinstance(exc, RemoteError) and exc.status_code == 404


class ObjectSchemaResource:
    def __init__(self, gateway: AssetsGateway) -> None:
        self._gateway = gateway

    @staticmethod
    def requires_replace(state: ObjectSchema, definition: ObjectSchemaDefinition) -> bool:
        return state.object_schema_key != definition.object_schema_key

    def create(self, definition: ObjectSchemaDefinition) -> CatalogResult[ObjectSchema]:
        result: CatalogResult[ObjectSchema] = CatalogResult()
        try:
            payload = object_schema_request(definition)
        except AssetsError as exc:
            result.diagnostics.add_exception(exc)
            return result
        try:
            result.state = self._gateway.create_object_schema(payload)
        except AssetsError as exc:
            result.diagnostics.add_error(
                "Error creating object schema",
                f"Could not create object schema, unexpected error: {exc}",
            )
            return result
        log.info("Created object schema %s (%s)", result.state.id, result.state.object_schema_key)
        return result

    def read(self, object_schema_id: str) -> CatalogResult[ObjectSchema]:
        result: CatalogResult[ObjectSchema] = CatalogResult()
        try:
            result.state = self._gateway.get_object_schema(object_schema_id)
        except AssetsError as exc:
            result.diagnostics.add_error(
                "Error Reading object schema",
                f"Could not read object schema, unexpected error: {exc}",
            )
        return result

    def update(
        self, state: ObjectSchema, definition: ObjectSchemaDefinition
    ) -> CatalogResult[ObjectSchema]:
        result = CatalogResult(state=state)
        if self.requires_replace(state, definition):
            result.diagnostics.add_error(
                "Error Updating object schema",
                f"The key of object schema {state.id} cannot change from "
                f"{state.object_schema_key} to {definition.object_schema_key} in place",
            )
            return result
        try:
            payload = object_schema_request(definition)
        except AssetsError as exc:
            result.diagnostics.add_exception(exc)
            return result
        try:
            result.state = self._gateway.update_object_schema(state.id, payload)
        except AssetsError as exc:
            result.diagnostics.add_error(
                "Error Updating object schema",
                f"Could not update object schema, unexpected error: {exc}",
            )
        return result

    def delete(self, state: ObjectSchema) -> Diagnostics:
        diagnostics = Diagnostics()
        try:
            self._gateway.delete_object_schema(state.id)
        except AssetsError as exc:
            diagnostics.add_error(
                "Error Deleting object schema",
                f"Could not delete object schema, unexpected error: {exc}",
            )
        else:
            log.info("Deleted object schema %s", state.id)
        return diagnostics

    def import_state(self, object_schema_id: str) -> CatalogResult[ObjectSchema]:
        return self.read(object_schema_id)


class ObjectTypeResource:
    def __init__(self, gateway: AssetsGateway) -> None:
        self._gateway = gateway

    @staticmethod
    def requires_replace(state: ObjectType, definition: ObjectTypeDefinition) -> bool:
        return state.object_schema_id != definition.object_schema_id

    def create(self, definition: ObjectTypeDefinition) -> CatalogResult[ObjectType]:
        result: CatalogResult[ObjectType] = CatalogResult()
        try:
            payload = object_type_request(definition)
        except AssetsError as exc:
            result.diagnostics.add_exception(exc)
            return result
        try:
            result.state = self._gateway.create_object_type(payload)
        except AssetsError as exc:
            result.diagnostics.add_error(
                "Error creating object type",
                f"Could not create object type, unexpected error: {exc}",
            )
            return result
        log.info(
            "Created object type %s in schema %s", result.state.id, definition.object_schema_id
        )
        return result

    def read(self, object_type_id: str) -> CatalogResult[ObjectType]:
        result: CatalogResult[ObjectType] = CatalogResult()
        try:
            result.state = self._gateway.get_object_type(object_type_id)
        except AssetsError as exc:
            if _is_not_found(exc):
                log.info("Object type %s no longer exists", object_type_id)
                result.removed = True
                return result
            result.diagnostics.add_error(
                "Error Reading object type",
                f"Could not read object type, unexpected error: {exc}",
            )
        return result

    def update(
        self, state: ObjectType, definition: ObjectTypeDefinition
    ) -> CatalogResult[ObjectType]:
        result = CatalogResult(state=state)
        if self.requires_replace(state, definition):
            result.diagnostics.add_error(
                "Error Updating object type",
                f"Object type {state.id} cannot move from schema {state.object_schema_id} "
                f"to {definition.object_schema_id} in place",
            )
            return result
        try:
            payload = object_type_request(definition)
        except AssetsError as exc:
            result.diagnostics.add_exception(exc)
            return result
        try:
            result.state = self._gateway.update_object_type(state.id, payload)
        except AssetsError as exc:
            result.diagnostics.add_error(
                "Error Updating object type",
                f"Could not update object type, unexpected error: {exc}",
            )
        return result

    def delete(self, state: ObjectType) -> Diagnostics:
        diagnostics = Diagnostics()
        try:
            self._gateway.delete_object_type(state.id)
        except AssetsError as exc:
            diagnostics.add_error(
                "Error Deleting object type",
                f"Could not delete object type, unexpected error: {exc}",
            )
        else:
            log.info("Deleted object type %s", state.id)
        return diagnostics

    def import_state(self, object_type_id: str) -> CatalogResult[ObjectType]:
        return self.read(object_type_id)


class ObjectTypeAttributeResource:
    """Fields of an object type.

    The service has no single-attribute read, so ``read`` lists the owning
    object type's attributes and picks the one with the requested id.
    """

    def __init__(self, gateway: AssetsGateway) -> None:
        self._gateway = gateway

    @staticmethod
    def requires_replace(
        state: ObjectTypeAttribute, definition: ObjectTypeAttributeDefinition
    ) -> bool:
        return state.object_type_id != definition.object_type_id

    def create(
        self, definition: ObjectTypeAttributeDefinition
    ) -> CatalogResult[ObjectTypeAttribute]:
        result: CatalogResult[ObjectTypeAttribute] = CatalogResult()
        try:
            payload = object_type_attribute_request(definition)
        except AssetsError as exc:
            result.diagnostics.add_exception(exc)
            return result
        try:
            result.state = self._gateway.create_object_type_attribute(
                definition.object_type_id, payload
            )
        except AssetsError as exc:
            result.diagnostics.add_error(
                "Error creating object type attribute",
                f"Could not create object type attribute, unexpected error: {exc}",
            )
            return result
        log.info(
            "Created attribute %s (%s) on object type %s",
            result.state.id,
            result.state.name,
            definition.object_type_id,
        )
        return result

    def read(self, object_type_id: str, attribute_id: str) -> CatalogResult[ObjectTypeAttribute]:
        result: CatalogResult[ObjectTypeAttribute] = CatalogResult()
        try:
            definitions = self._gateway.list_object_type_attributes(object_type_id)
        except AssetsError as exc:
            if _is_not_found(exc):
                log.info("Object type %s no longer exists", object_type_id)
                result.removed = True
                return result
            result.diagnostics.add_error(
                "Error Reading object type",
                f"Could not read object type, unexpected error: {exc}",
            )
            return result

        for definition in definitions:
            if definition.id == attribute_id:
                result.state = definition
                return result
        result.diagnostics.add_error(
            "Error Reading object type attribute",
            f"Could not read object type attribute, unexpected error: attribute {attribute_id} "
            f"not found on object type {object_type_id}.",
        )
        return result

    def update(
        self, state: ObjectTypeAttribute, definition: ObjectTypeAttributeDefinition
    ) -> CatalogResult[ObjectTypeAttribute]:
        result = CatalogResult(state=state)
        if self.requires_replace(state, definition):
            result.diagnostics.add_error(
                "Error Updating object type attribute",
                f"Attribute {state.id} cannot move from object type {state.object_type_id} "
                f"to {definition.object_type_id} in place",
            )
            return result
        try:
            payload = object_type_attribute_request(definition)
        except AssetsError as exc:
            result.diagnostics.add_exception(exc)
            return result
        try:
            result.state = self._gateway.update_object_type_attribute(
                state.object_type_id, state.id, payload
            )
        except AssetsError as exc:
            result.diagnostics.add_error(
                "Error Updating object type attribute",
                f"Could not update object type attribute, unexpected error: {exc}",
            )
        return result

    def delete(self, state: ObjectTypeAttribute) -> Diagnostics:
        diagnostics = Diagnostics()
        try:
            self._gateway.delete_object_type_attribute(state.id)
        except AssetsError as exc:
            diagnostics.add_error(
                "Error Deleting object type attribute",
                f"Could not delete object type attribute, unexpected error: {exc}",
            )
        else:
            log.info("Deleted object type attribute %s", state.id)
        return diagnostics

    def import_state(
        self, object_type_id: str, attribute_id: str
    ) -> CatalogResult[ObjectTypeAttribute]:
        return self.read(object_type_id, attribute_id)


__all__ = [
    "CatalogResult",
    "ObjectSchemaResource",
    "ObjectTypeAttributeResource",
    "ObjectTypeResource",
]
