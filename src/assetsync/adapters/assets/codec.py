"""Bidirectional mapping between declared attributes and the Assets attribute graph.

Encoding keeps only what a user can declare: the object type attribute id and
the literal value strings. Decoding builds the full structured representation,
including server-only fields. ``decode_attributes(encode_attributes(x))``
therefore preserves ids and values but nothing the server adds.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from pydantic import ValidationError as PydanticValidationError

from assetsync.domain.errors import ValidationError
from assetsync.domain.model import (
    Attribute,
    AttributeValue,
    DeclaredAttribute,
    Group,
    Status,
)

from .schema import (
    DeclaredAttributeInput,
    ObjectAttributePayload,
    ObjectAttributeValuePayload,
    ObjectPayload,
    ObjectPayloadAttribute,
    ObjectPayloadAttributeValue,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

type ObjectAttributeInput = (
    ObjectAttributePayload | ObjectPayloadAttribute | Mapping[str, object]
)


def encode_attributes(declared: Iterable[DeclaredAttribute]) -> list[ObjectPayloadAttribute]:
    """Encode declared attributes into request payload entries."""

    encoded: list[ObjectPayloadAttribute] = []
    for attribute in declared:
        attribute.validate()
        encoded.append(
            ObjectPayloadAttribute(
                object_type_attribute_id=attribute.type_attribute_id,
                object_attribute_values=[
                    ObjectPayloadAttributeValue(value=value) for value in attribute.values
                ],
            )
        )
    return encoded


def encode_object_payload(
    object_type_id: str,
    declared: Iterable[DeclaredAttribute],
    *,
    has_avatar: bool | None = None,
    avatar_uuid: str | None = None,
) -> ObjectPayload:
    return ObjectPayload(
        object_type_id=object_type_id,
        attributes=encode_attributes(declared),
        has_avatar=has_avatar,
        avatar_uuid=avatar_uuid or None,
    )


def decode_attributes(wire: Iterable[ObjectAttributeInput]) -> frozenset[Attribute]:
    """Decode response attributes into structured, immutable attributes."""

    return frozenset(_decode_attribute(_validate_wire(item)) for item in wire)


def declare_attributes(attributes: Iterable[Attribute]) -> tuple[DeclaredAttribute, ...]:
    """Project structured attributes back onto the declared shape (ids and values only)."""

    declared = (
        DeclaredAttribute(attribute.type_attribute_id, attribute.raw_values)
        for attribute in attributes
        if attribute.values
    )
    return tuple(sorted(declared, key=lambda item: item.type_attribute_id))


def parse_declared_attributes(raw: object) -> tuple[DeclaredAttribute, ...]:
    """Validate a user document of ``[{typeAttributeId, values: [{value}]}]``."""

    if not isinstance(raw, list):
        raise ValidationError("Declared attributes must be a list of attribute documents")
    try:
        documents = [DeclaredAttributeInput.model_validate(item) for item in raw]
    except PydanticValidationError as exc:
        raise ValidationError(f"Malformed declared attributes: {exc}") from exc
    declared = tuple(
        DeclaredAttribute(
            document.type_attribute_id,
            tuple(value.value for value in document.values),
        )
        for document in documents
    )
    for attribute in declared:
        attribute.validate()
    return declared


def _validate_wire(item: ObjectAttributeInput) -> ObjectAttributePayload:
    if isinstance(item, ObjectAttributePayload):
        return item
    raw = item.model_dump(by_alias=True) if isinstance(item, ObjectPayloadAttribute) else item
    try:
        return ObjectAttributePayload.model_validate(raw)
    except PydanticValidationError as exc:
        raise ValidationError(f"Malformed object attribute: {exc}") from exc


def _decode_attribute(payload: ObjectAttributePayload) -> Attribute:
    return Attribute(
        id=payload.id,
        workspace_id=payload.workspace_id,
        global_id=payload.global_id,
        type_attribute_id=payload.object_type_attribute_id,
        is_label_source=payload.is_label_source,
        values=frozenset(_decode_value(value) for value in payload.object_attribute_values),
    )


def _decode_value(payload: ObjectAttributeValuePayload) -> AttributeValue:
    group = (
        Group(avatar_url=payload.group.avatar_url, name=payload.group.name)
        if payload.group is not None
        else None
    )
    status = (
        Status(id=payload.status.id, name=payload.status.name, category=payload.status.category)
        if payload.status is not None
        else None
    )
    return AttributeValue(
        value=payload.value,
        display_value=payload.display_value,
        search_value=payload.search_value,
        additional_value=payload.additional_value,
        group=group,
        status=status,
    )
