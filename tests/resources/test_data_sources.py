from __future__ import annotations

from assetsync.adapters.assets import translate_object_type_attribute
from assetsync.resources import (
    GlobalIconsDataSource,
    IconDataSource,
    ObjectDataSource,
    ObjectSchemaDataSource,
    ObjectTypeAttributesDataSource,
    ObjectTypeDataSource,
)
from tests.helpers.assets import (
    FakeGateway,
    make_icon,
    make_object,
    make_object_schema,
    make_object_type,
    make_type_attribute,
)


def test_object_data_source_reads_object() -> None:
    lookup = ObjectDataSource(FakeGateway({"7": make_object()})).read("7")

    assert lookup.object is not None
    assert lookup.object.label == "Server A"
    assert not lookup.diagnostics


def test_object_data_source_reports_missing_object() -> None:
    lookup = ObjectDataSource(FakeGateway()).read("8")

    assert lookup.object is None
    assert lookup.diagnostics.has_error()
    assert "Object not found" in lookup.diagnostics[0].detail


def test_attributes_are_ordered_by_position(
    object_type_attributes_payload: list[dict[str, object]],
) -> None:
    definitions = tuple(
        translate_object_type_attribute(item, object_type_id="23")
        for item in object_type_attributes_payload
    )
    gateway = FakeGateway(definitions=definitions)

    lookup = ObjectTypeAttributesDataSource(gateway).read("23")

    assert [definition.name for definition in lookup.attributes] == [
        "Key",
        "Name",
        "Lifecycle",
        "Runs on",
    ]
    assert gateway.calls == [("list_object_type_attributes", "23")]


def test_attributes_failure_is_reported() -> None:
    gateway = FakeGateway(failing={"list_object_type_attributes"})

    lookup = ObjectTypeAttributesDataSource(gateway).read("23")

    assert lookup.attributes == ()
    assert lookup.diagnostics.has_error()


def test_schema_attributes_span_its_object_types() -> None:
    gateway = FakeGateway(
        definitions=(
            make_type_attribute("141", "Hostname", object_type_id="24", position=1),
            make_type_attribute("134", "Name", position=1),
            make_type_attribute("133", "Key", position=0),
            make_type_attribute("150", "Elsewhere", object_type_id="30"),
        ),
        object_types=(
            make_object_type("23"),
            make_object_type("24", name="Host"),
            make_object_type("30", object_schema_id="9"),
        ),
    )

    lookup = ObjectTypeAttributesDataSource(gateway).read(object_schema_id="3")

    assert [(item.object_type_id, item.name) for item in lookup.attributes] == [
        ("23", "Key"),
        ("23", "Name"),
        ("24", "Hostname"),
    ]
    assert lookup.object_schema_id == "3"
    assert gateway.call_names() == ["list_object_schema_attributes"]


def test_object_type_takes_precedence_over_schema() -> None:
    gateway = FakeGateway(definitions=(make_type_attribute("134", "Name"),))

    lookup = ObjectTypeAttributesDataSource(gateway).read("23", object_schema_id="3")

    assert [item.id for item in lookup.attributes] == ["134"]
    assert gateway.call_names() == ["list_object_type_attributes"]


def test_attributes_need_an_object_type_or_schema() -> None:
    gateway = FakeGateway()

    lookup = ObjectTypeAttributesDataSource(gateway).read()

    assert lookup.diagnostics[0].summary == "Error Reading attributes"
    assert gateway.calls == []


def test_schema_attributes_failure_names_the_schema() -> None:
    gateway = FakeGateway(failing={"list_object_schema_attributes"})

    lookup = ObjectTypeAttributesDataSource(gateway).read(object_schema_id="3")

    assert lookup.attributes == ()
    assert "object schema 3" in lookup.diagnostics[0].detail


def test_object_schema_and_type_lookups() -> None:
    gateway = FakeGateway(schemas=(make_object_schema(),), object_types=(make_object_type(),))

    schema = ObjectSchemaDataSource(gateway).read("3")
    object_type = ObjectTypeDataSource(gateway).read("23")
    missing = ObjectTypeDataSource(gateway).read("99")

    assert schema.object_schema is not None
    assert schema.object_schema.object_schema_key == "ITSM"
    assert object_type.object_type is not None
    assert object_type.object_type.icon_id == "12"
    assert missing.object_type is None
    assert missing.diagnostics[0].summary == "Error Reading object type"


def test_icon_lookups() -> None:
    gateway = FakeGateway(icons=(make_icon("1", "Folder"), make_icon("12")))

    icon = IconDataSource(gateway).read("12")
    icons = GlobalIconsDataSource(gateway).read()
    missing = IconDataSource(gateway).read("404")

    assert icon.icon is not None
    assert icon.icon.name == "Server"
    assert [item.id for item in icons.icons] == ["1", "12"]
    assert missing.diagnostics[0].summary == "Error Reading icon"


def test_global_icons_failure_is_reported() -> None:
    lookup = GlobalIconsDataSource(FakeGateway(failing={"list_global_icons"})).read()

    assert lookup.icons == ()
    assert lookup.diagnostics[0].summary == "Error Reading Global icons"
