"""Translate Assets API payloads into domain value objects.

Declared catalog definitions are turned into request bodies here as well.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from assetsync.domain.model import (
    AssetObject,
    Avatar,
    DefaultType,
    Icon,
    ObjectLinks,
    ObjectSchema,
    ObjectType,
    ObjectTypeAttribute,
    ReferenceType,
)

from .codec import decode_attributes
from .schema import (
    IconPayload,
    ObjectPayloadResponse,
    ObjectSchemaPayloadResponse,
    ObjectSchemaRequest,
    ObjectTypeAttributePayload,
    ObjectTypeAttributeRequest,
    ObjectTypePayloadResponse,
    ObjectTypeRequest,
)

if TYPE_CHECKING:
    from assetsync.domain.model import (
        ObjectSchemaDefinition,
        ObjectTypeAttributeDefinition,
        ObjectTypeDefinition,
    )

    from .schema import AvatarPayload

type ObjectPayloadInput = ObjectPayloadResponse | Mapping[str, object]
type ObjectTypeAttributeInput = ObjectTypeAttributePayload | Mapping[str, object]
type ObjectSchemaInput = ObjectSchemaPayloadResponse | Mapping[str, object]
type ObjectTypeInput = ObjectTypePayloadResponse | Mapping[str, object]
type IconInput = IconPayload | Mapping[str, object]


def translate_object(payload: ObjectPayloadInput) -> AssetObject:
    response = (
        payload
        if isinstance(payload, ObjectPayloadResponse)
        else ObjectPayloadResponse.model_validate(payload)
    )
    return AssetObject(
        workspace_id=response.workspace_id,
        global_id=response.global_id,
        id=response.id,
        label=response.label,
        object_key=response.object_key,
        object_type_id=response.object_type.id,
        created=response.created,
        updated=response.updated,
        has_avatar=response.has_avatar,
        attributes=decode_attributes(response.attributes),
        avatar=_translate_avatar(response.avatar),
        links=ObjectLinks(self_url=response.links.self_url),
    )


def translate_object_type_attribute(
    payload: ObjectTypeAttributeInput,
    *,
    object_type_id: str = "",
) -> ObjectTypeAttribute:
    definition = (
        payload
        if isinstance(payload, ObjectTypeAttributePayload)
        else ObjectTypeAttributePayload.model_validate(payload)
    )
    default_type = (
        DefaultType(id=definition.default_type.id, name=definition.default_type.name)
        if definition.default_type is not None
        else None
    )
    reference_type = (
        ReferenceType(
            workspace_id=definition.reference_type.workspace_id,
            global_id=definition.reference_type.global_id,
            name=definition.reference_type.name,
        )
        if definition.reference_type is not None
        else None
    )
    owner = definition.object_type.id if definition.object_type is not None else object_type_id
    return ObjectTypeAttribute(
        id=definition.id,
        name=definition.name,
        object_type_id=owner,
        workspace_id=definition.workspace_id,
        global_id=definition.global_id,
        label=definition.label,
        type=definition.type,
        description=definition.description,
        default_type=default_type,
        type_value=definition.type_value,
        type_value_multi=tuple(definition.type_value_multi),
        additional_value=definition.additional_value,
        reference_type=reference_type,
        reference_object_type_id=definition.reference_object_type_id,
        editable=definition.editable,
        system=definition.system,
        indexed=definition.indexed,
        sortable=definition.sortable,
        summable=definition.summable,
        hidden=definition.hidden,
        unique_attribute=definition.unique_attribute,
        minimum_cardinality=definition.minimum_cardinality,
        maximum_cardinality=definition.maximum_cardinality,
        suffix=definition.suffix,
        removable=definition.removable,
        object_attribute_exists=definition.object_attribute_exists,
        include_child_object_types=definition.include_child_object_types,
        regex_validation=definition.regex_validation,
        ql_query=definition.ql_query,
        options=definition.options,
        position=definition.position,
    )


def translate_object_schema(payload: ObjectSchemaInput) -> ObjectSchema:
    response = (
        payload
        if isinstance(payload, ObjectSchemaPayloadResponse)
        else ObjectSchemaPayloadResponse.model_validate(payload)
    )
    return ObjectSchema(
        workspace_id=response.workspace_id,
        global_id=response.global_id,
        id=response.id,
        name=response.name,
        object_schema_key=response.object_schema_key,
        description=response.description,
        status=response.status,
        created=response.created,
        updated=response.updated,
        object_count=response.object_count,
        object_type_count=response.object_type_count,
        can_manage=response.can_manage,
    )


def translate_object_type(payload: ObjectTypeInput) -> ObjectType:
    response = (
        payload
        if isinstance(payload, ObjectTypePayloadResponse)
        else ObjectTypePayloadResponse.model_validate(payload)
    )
    return ObjectType(
        workspace_id=response.workspace_id,
        global_id=response.global_id,
        id=response.id,
        name=response.name,
        object_schema_id=response.object_schema_id,
        description=response.description,
        icon_id=response.icon.id if response.icon is not None else "",
        position=response.position,
        created=response.created,
        updated=response.updated,
        object_count=response.object_count,
        parent_object_type_id=response.parent_object_type_id,
        inherited=response.inherited,
        abstract_object_type=response.abstract_object_type,
        parent_object_type_inherited=response.parent_object_type_inherited,
    )


def translate_icon(payload: IconInput) -> Icon:
    icon = payload if isinstance(payload, IconPayload) else IconPayload.model_validate(payload)
    return Icon(id=icon.id, name=icon.name, url16=icon.url16, url48=icon.url48)


def object_schema_request(definition: ObjectSchemaDefinition) -> ObjectSchemaRequest:
    definition.validate()
    return ObjectSchemaRequest(
        name=definition.name,
        object_schema_key=definition.object_schema_key,
        description=definition.description,
    )


def object_type_request(definition: ObjectTypeDefinition) -> ObjectTypeRequest:
    definition.validate()
    return ObjectTypeRequest(
        name=definition.name,
        icon_id=definition.icon_id,
        object_schema_id=definition.object_schema_id,
        description=definition.description,
        parent_object_type_id=definition.parent_object_type_id or None,
        inherited=definition.inherited,
        abstract_object_type=definition.abstract_object_type,
    )


def object_type_attribute_request(
    definition: ObjectTypeAttributeDefinition,
) -> ObjectTypeAttributeRequest:
    definition.validate()
    return ObjectTypeAttributeRequest(
        name=definition.name,
        label=definition.label,
        type=definition.type,
        description=definition.description,
        default_type_id=definition.default_type_id,
        type_value=definition.type_value,
        type_value_multi=list(definition.type_value_multi) or None,
        additional_value=definition.additional_value,
        summable=definition.summable,
        minimum_cardinality=definition.minimum_cardinality,
        maximum_cardinality=definition.maximum_cardinality,
        suffix=definition.suffix,
        hidden=definition.hidden,
        include_child_object_types=definition.include_child_object_types,
        unique_attribute=definition.unique_attribute,
        regex_validation=definition.regex_validation,
        ql_query=definition.ql_query,
        options=definition.options,
    )


def _translate_avatar(payload: AvatarPayload | None) -> Avatar | None:
    if payload is None:
        return None
    # the service identifies avatars by their uuid only
    return Avatar(
        workspace_id=payload.workspace_id,
        global_id=payload.global_id,
        id=payload.avatar_uuid,
        avatar_uuid=payload.avatar_uuid,
        url16=payload.url16,
        url48=payload.url48,
        url72=payload.url72,
        url144=payload.url144,
        url288=payload.url288,
        object_id=payload.object_id,
    )
