from __future__ import annotations

import pytest

from assetsync.adapters.assets import (
    object_type_attribute_request,
    object_type_request,
    translate_icon,
    translate_object,
    translate_object_schema,
    translate_object_type,
    translate_object_type_attribute,
)
from assetsync.adapters.assets.schema import (
    ErrorResponse,
    ObjectPayloadResponse,
    ObjectTypeAttributePayload,
)
from assetsync.domain.errors import ValidationError
from assetsync.domain.model import (
    DefaultType,
    ObjectLinks,
    ObjectTypeAttributeDefinition,
    ObjectTypeDefinition,
    ReferenceType,
)


def test_translate_object_maps_identity_fields(object_payload: dict[str, object]) -> None:
    obj = translate_object(object_payload)

    assert obj.id == "7"
    assert obj.workspace_id == "ws-1"
    assert obj.global_id == "ws-1:7"
    assert obj.label == "Server A"
    assert obj.object_key == "ITSM-7"
    assert obj.object_type_id == "23"
    assert obj.has_avatar is True
    assert obj.links == ObjectLinks(
        self_url="https://example.atlassian.net/jira/servicedesk/assets/object/7"
    )


def test_translate_object_keeps_avatar_atomic(object_payload: dict[str, object]) -> None:
    obj = translate_object(object_payload)

    avatar = obj.avatar
    assert avatar is not None
    assert avatar.id == avatar.avatar_uuid == "avatar-1"
    assert avatar.url288 == "https://assets.example/avatar-1/288"
    assert avatar.object_id == "7"


def test_translate_object_without_avatar(object_payload: dict[str, object]) -> None:
    payload = {**object_payload, "avatar": None, "hasAvatar": False}

    obj = translate_object(payload)

    assert obj.avatar is None
    assert obj.has_avatar is False


def test_translate_object_decodes_attributes(object_payload: dict[str, object]) -> None:
    obj = translate_object(ObjectPayloadResponse.model_validate(object_payload))

    (label_attribute,) = obj.label_attributes()
    assert label_attribute.type_attribute_id == "134"
    assert label_attribute.raw_values == ("Server A",)

    lifecycle = obj.attribute("135")
    assert lifecycle is not None
    (status_value,) = lifecycle.values
    assert status_value.status is not None
    assert status_value.status.name == "Running"
    assert status_value.group is None

    tags = obj.attribute("137")
    assert tags is not None
    assert tags.raw_values == ("eu", "prod")


def test_translate_object_type_attribute(
    object_type_attributes_payload: list[dict[str, object]],
) -> None:
    definitions = [
        translate_object_type_attribute(item, object_type_id="23")
        for item in object_type_attributes_payload
    ]

    by_id = {definition.id: definition for definition in definitions}
    name = by_id["134"]
    assert name.label is True
    assert name.default_type == DefaultType(id=0, name="Text")
    assert name.unique_attribute is True
    assert name.object_type_id == "23"

    assert by_id["135"].description == ""
    assert by_id["135"].default_type is None
    assert by_id["133"].system is True
    assert by_id["133"].object_type_id == "23"
    assert by_id["138"].reference_object_type_id == "24"
    assert by_id["138"].is_multi_valued is True
    assert name.is_multi_valued is False


def test_translate_object_type_attribute_settings(
    object_type_attributes_payload: list[dict[str, object]],
) -> None:
    by_id = {
        definition.id: definition
        for definition in (
            translate_object_type_attribute(item, object_type_id="23")
            for item in object_type_attributes_payload
        )
    }

    lifecycle = by_id["135"]
    assert lifecycle.type_value == ""
    assert lifecycle.type_value_multi == ("1", "2")
    assert lifecycle.additional_value == ""
    assert lifecycle.suffix == ""
    assert (lifecycle.indexed, lifecycle.sortable, lifecycle.summable) == (True, True, False)
    assert lifecycle.object_attribute_exists is True

    name = by_id["134"]
    assert name.additional_value == "CAPITALIZE"
    assert name.removable is False
    assert name.include_child_object_types is True
    assert name.regex_validation == "^[A-Za-z0-9 -]+$"
    assert name.ql_query == ""

    runs_on = by_id["138"]
    assert runs_on.reference_type == ReferenceType(
        workspace_id="ws-1", global_id="ws-1:4", name="Depends on"
    )
    assert runs_on.suffix == "hosts"
    assert runs_on.ql_query == "objectType = Host"
    assert runs_on.regex_validation == ""
    assert runs_on.options == "showReferenceLinks"
    assert runs_on.maximum_cardinality == -1

    key = by_id["133"]
    assert key.type_value_multi == ()
    assert key.reference_type is None
    assert key.removable is True
    assert key.indexed is False


def test_object_type_attribute_payload_requires_id() -> None:
    with pytest.raises(ValueError):  # noqa: PT011
        ObjectTypeAttributePayload.model_validate({"name": "Nameless"})


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ({"errorMessages": ["Object not found"]}, "Object not found"),
        ({"errorMessages": [], "errors": {"name": "required"}}, "name: required"),
        ({"errorMessages": ["Bad"], "errors": {"b": "2", "a": "1"}}, "Bad; a: 1; b: 2"),
        ({}, ""),
    ],
)
def test_error_response_message(payload: dict[str, object], expected: str) -> None:
    assert ErrorResponse.model_validate(payload).message() == expected


def test_translate_object_schema(object_schema_payload: dict[str, object]) -> None:
    schema = translate_object_schema(object_schema_payload)

    assert schema.id == "3"
    assert schema.object_schema_key == "ITSM"
    assert schema.description == ""
    assert schema.status == "Ok"
    assert (schema.object_count, schema.object_type_count) == (120, 8)
    assert schema.can_manage is True


def test_translate_object_type_takes_icon_id(object_type_payload: dict[str, object]) -> None:
    object_type = translate_object_type(object_type_payload)

    assert object_type.id == "23"
    assert object_type.object_schema_id == "3"
    assert object_type.icon_id == "12"
    assert object_type.parent_object_type_id == ""
    assert object_type.object_count == 42


def test_translate_icon_accepts_numeric_id(global_icons_payload: list[dict[str, object]]) -> None:
    icons = [translate_icon(item) for item in global_icons_payload]

    assert [icon.id for icon in icons] == ["1", "12"]
    assert icons[1].url48 == "https://assets.example/icon/12/48"


def test_object_type_attribute_request_keeps_query_and_regex_apart() -> None:
    definition = ObjectTypeAttributeDefinition(
        object_type_id="23",
        name="Runs on",
        type=1,
        type_value="24",
        regex_validation="^h",
        ql_query="objectType = Host",
        maximum_cardinality=-1,
    )

    body = object_type_attribute_request(definition).to_request_body()

    assert body["qlQuery"] == "objectType = Host"
    assert body["regexValidation"] == "^h"
    assert body["typeValue"] == "24"
    assert body["maximumCardinality"] == -1
    assert "minimumCardinality" not in body
    assert "defaultTypeId" not in body
    assert "typeValueMulti" not in body


def test_object_type_request_validates_definition() -> None:
    with pytest.raises(ValidationError):
        object_type_request(ObjectTypeDefinition(name="Server", icon_id="", object_schema_id="3"))
