from __future__ import annotations

import pytest

from assetsync.adapters.assets import (
    decode_attributes,
    declare_attributes,
    encode_attributes,
    encode_object_payload,
    parse_declared_attributes,
)
from assetsync.domain.errors import ValidationError
from assetsync.domain.model import AttributeValue, DeclaredAttribute, Group, Status


def test_encode_attributes_keeps_only_ids_and_values() -> None:
    encoded = encode_attributes(
        [
            DeclaredAttribute("134", ("Server A",)),
            DeclaredAttribute("137", ("prod", "eu")),
        ]
    )

    assert [entry.model_dump(by_alias=True) for entry in encoded] == [
        {"objectTypeAttributeId": "134", "objectAttributeValues": [{"value": "Server A"}]},
        {
            "objectTypeAttributeId": "137",
            "objectAttributeValues": [{"value": "prod"}, {"value": "eu"}],
        },
    ]


def test_encode_attributes_rejects_zero_values() -> None:
    with pytest.raises(ValidationError, match="at least one value"):
        encode_attributes([DeclaredAttribute("134", ())])


def test_encode_attributes_rejects_blank_type_attribute_id() -> None:
    with pytest.raises(ValidationError):
        encode_attributes([DeclaredAttribute(" ", ("x",))])


def test_encode_object_payload_omits_unknown_avatar_fields() -> None:
    payload = encode_object_payload("23", [DeclaredAttribute("134", ("Server A",))])

    assert payload.to_request_body() == {
        "objectTypeId": "23",
        "attributes": [
            {"objectTypeAttributeId": "134", "objectAttributeValues": [{"value": "Server A"}]}
        ],
    }


def test_encode_object_payload_includes_known_avatar() -> None:
    payload = encode_object_payload(
        "23",
        [DeclaredAttribute("134", ("Server A",))],
        has_avatar=True,
        avatar_uuid="avatar-1",
    )

    body = payload.to_request_body()
    assert body["hasAvatar"] is True
    assert body["avatarUUID"] == "avatar-1"


def test_decode_attributes_builds_nested_group_and_status() -> None:
    attributes = decode_attributes(
        [
            {
                "id": "302",
                "objectTypeAttributeId": "135",
                "objectTypeAttribute": {"label": False},
                "objectAttributeValues": [
                    {
                        "value": "1",
                        "displayValue": "Running",
                        "status": {"id": 1, "name": "Running", "category": 2},
                        "group": {"avatarUrl": "https://a.example/g.png", "name": "Ops"},
                    }
                ],
            }
        ]
    )

    (attribute,) = attributes
    (value,) = attribute.values
    assert value.status == Status(id="1", name="Running", category=2)
    assert value.group == Group(avatar_url="https://a.example/g.png", name="Ops")


def test_decode_attributes_without_group_or_status_yields_none() -> None:
    (attribute,) = decode_attributes(
        [{"objectTypeAttributeId": "134", "objectAttributeValues": [{"value": "A"}]}]
    )

    assert attribute.values == frozenset({AttributeValue(value="A")})
    (value,) = attribute.values
    assert value.group is None
    assert value.status is None


def test_decode_attributes_keeps_present_empty_group_distinct() -> None:
    (attribute,) = decode_attributes(
        [
            {
                "objectTypeAttributeId": "136",
                "objectAttributeValues": [{"value": "x", "group": {}}],
            }
        ]
    )

    (value,) = attribute.values
    assert value.group == Group(avatar_url="", name="")
    assert value.group is not None


def test_decode_attributes_reads_label_flag() -> None:
    attributes = decode_attributes(
        [
            {
                "objectTypeAttributeId": "134",
                "objectTypeAttribute": {"label": True},
                "objectAttributeValues": [{"value": "A"}],
            },
            {"objectTypeAttributeId": "135", "objectAttributeValues": [{"value": "B"}]},
        ]
    )

    flags = {attribute.type_attribute_id: attribute.is_label_source for attribute in attributes}
    assert flags == {"134": True, "135": False}


def test_decode_of_encode_preserves_ids_and_values() -> None:
    declared = (
        DeclaredAttribute("134", ("Server A",)),
        DeclaredAttribute("137", ("eu", "prod")),
    )

    decoded = decode_attributes(encode_attributes(declared))

    assert declare_attributes(decoded) == declared
    assert all(attribute.id == "" for attribute in decoded)


def test_declare_attributes_projects_decoded_object(object_payload: dict[str, object]) -> None:
    attributes = decode_attributes(object_payload["attributes"])  # type: ignore[arg-type]

    declared = declare_attributes(attributes)

    assert [attribute.type_attribute_id for attribute in declared] == ["134", "135", "136", "137"]
    assert declared[3].values == ("eu", "prod")


def test_parse_declared_attributes_accepts_user_document() -> None:
    declared = parse_declared_attributes(
        [
            {"typeAttributeId": "134", "values": [{"value": "Server A"}]},
            {"objectTypeAttributeId": 137, "objectAttributeValues": [{"value": "prod"}]},
        ]
    )

    assert declared == (
        DeclaredAttribute("134", ("Server A",)),
        DeclaredAttribute("137", ("prod",)),
    )


@pytest.mark.parametrize(
    "document",
    [
        {"typeAttributeId": "134"},
        [{"values": [{"value": "x"}]}],
        [{"typeAttributeId": "134", "values": []}],
    ],
)
def test_parse_declared_attributes_rejects_malformed_documents(document: object) -> None:
    with pytest.raises(ValidationError):
        parse_declared_attributes(document)


@pytest.mark.parametrize(
    "raw",
    [
        {"objectAttributeValues": []},
        {"objectTypeAttributeId": "134", "objectAttributeValues": "not a list"},
    ],
)
def test_decode_attributes_rejects_malformed_wire_attributes(raw: dict[str, object]) -> None:
    with pytest.raises(ValidationError, match="Malformed object attribute"):
        decode_attributes([raw])
