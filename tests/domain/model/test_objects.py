from __future__ import annotations

import dataclasses

import pytest

from assetsync.domain.errors import ValidationError
from assetsync.domain.model import (
    AVATAR_FIELDS,
    UNKNOWN,
    Avatar,
    DeclaredAttribute,
    Group,
    is_known,
)
from tests.helpers.assets import make_attribute, make_object


def test_avatar_has_ten_fields() -> None:
    assert tuple(field.name for field in dataclasses.fields(Avatar)) == AVATAR_FIELDS
    assert len(AVATAR_FIELDS) == 10


def test_empty_group_differs_from_absent() -> None:
    assert Group(avatar_url="", name="") is not None
    assert Group(avatar_url="", name="") == Group(avatar_url="", name="")


def test_attribute_lookup_and_raw_values() -> None:
    obj = make_object(
        attributes=(
            make_attribute("134", "Server A", is_label_source=True),
            make_attribute("137", "prod", "eu"),
        )
    )

    tags = obj.attribute("137")
    assert tags is not None
    assert tags.raw_values == ("eu", "prod")
    assert obj.attribute("999") is None


def test_label_attributes_sort_numerically() -> None:
    obj = make_object(
        attributes=(
            make_attribute("100", "a", is_label_source=True),
            make_attribute("20", "b", is_label_source=True),
            make_attribute("3", "c"),
        )
    )

    assert [attribute.type_attribute_id for attribute in obj.label_attributes()] == ["20", "100"]


def test_objects_are_immutable() -> None:
    obj = make_object()

    with pytest.raises(dataclasses.FrozenInstanceError):
        obj.label = "changed"  # type: ignore[misc]


def test_declared_attribute_validation() -> None:
    DeclaredAttribute("134", ("x",)).validate()

    with pytest.raises(ValidationError):
        DeclaredAttribute("134", ()).validate()
    with pytest.raises(ValidationError):
        DeclaredAttribute("", ("x",)).validate()


def test_unknown_marker() -> None:
    assert is_known("value")
    assert is_known(None)
    assert not is_known(UNKNOWN)
    assert repr(UNKNOWN) == "UNKNOWN"
