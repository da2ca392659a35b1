"""Atlassian Assets adapter package."""

from __future__ import annotations

from .client import AssetsClient
from .codec import (
    decode_attributes,
    declare_attributes,
    encode_attributes,
    encode_object_payload,
    parse_declared_attributes,
)
from .schema import ObjectAttributePayload, ObjectPayload, ObjectPayloadAttribute
from .translator import (
    object_schema_request,
    object_type_attribute_request,
    object_type_request,
    translate_icon,
    translate_object,
    translate_object_schema,
    translate_object_type,
    translate_object_type_attribute,
)

__all__ = [
    "AssetsClient",
    "ObjectAttributePayload",
    "ObjectPayload",
    "ObjectPayloadAttribute",
    "decode_attributes",
    "declare_attributes",
    "encode_attributes",
    "encode_object_payload",
    "object_schema_request",
    "object_type_attribute_request",
    "object_type_request",
    "parse_declared_attributes",
    "translate_icon",
    "translate_object",
    "translate_object_schema",
    "translate_object_type",
    "translate_object_type_attribute",
]
