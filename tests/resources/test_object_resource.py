from __future__ import annotations

import pytest

from assetsync.config import ConfigurationError, FeaturesConfig
from assetsync.domain.model import UNKNOWN, DeclaredAttribute, ObjectPlan
from assetsync.resources import ObjectResource, SoftDelete
from tests.helpers.assets import FakeGateway, make_avatar, make_object, make_state

DECLARED = (DeclaredAttribute("134", ("Server A",)), DeclaredAttribute("135", ("Running",)))


def _plan(*declared: DeclaredAttribute, avatar_uuid: object = None) -> ObjectPlan:
    return ObjectPlan(
        object_type_id="23",
        attributes_in=declared or DECLARED,
        has_avatar=avatar_uuid is not None,
        avatar_uuid=avatar_uuid,  # type: ignore[arg-type]
    )


def test_create_reads_object_back_for_attributes() -> None:
    gateway = FakeGateway()
    resource = ObjectResource(gateway, FeaturesConfig())

    result = resource.create(_plan())

    assert result.ok
    assert gateway.call_names() == ["create_object", "get_object"]
    assert result.state is not None
    assert result.state.attributes_in == DECLARED
    assert {attribute.type_attribute_id for attribute in result.state.object.attributes} == {
        "134",
        "135",
    }


def test_create_sends_known_avatar_only() -> None:
    gateway = FakeGateway()
    resource = ObjectResource(gateway, FeaturesConfig())

    resource.create(_plan(avatar_uuid=UNKNOWN))

    _, payload = gateway.calls[0]
    body = payload.to_request_body()  # type: ignore[attr-defined]
    assert "avatarUUID" not in body
    assert body["hasAvatar"] is True


def test_create_with_invalid_input_makes_no_call() -> None:
    gateway = FakeGateway()
    resource = ObjectResource(gateway, FeaturesConfig())

    result = resource.create(_plan(DeclaredAttribute("134", ())))

    assert result.state is None
    assert result.diagnostics.has_error()
    assert gateway.calls == []


def test_failed_follow_up_read_yields_no_state() -> None:
    gateway = FakeGateway(failing={"get_object"})
    resource = ObjectResource(gateway, FeaturesConfig())

    result = resource.create(_plan())

    assert result.state is None
    (diagnostic,) = result.diagnostics
    assert diagnostic.summary == "Error get attributes"
    assert "Server said no" in diagnostic.detail


def test_failed_create_reports_remote_message() -> None:
    gateway = FakeGateway(failing={"create_object"})
    resource = ObjectResource(gateway, FeaturesConfig())

    result = resource.create(_plan())

    assert result.state is None
    assert result.diagnostics[0].summary == "Error creating object"
    assert "(HTTP 500)" in result.diagnostics[0].detail
    assert gateway.call_names() == ["create_object"]


def test_read_refreshes_remote_object() -> None:
    renamed = make_object(label="Server B")
    gateway = FakeGateway({"7": renamed})
    resource = ObjectResource(gateway, FeaturesConfig())
    state = make_state()

    result = resource.read(state)

    assert result.state is not None
    assert result.state.object.label == "Server B"
    assert result.state.attributes_in == state.attributes_in


def test_read_of_missing_object_reports_error() -> None:
    resource = ObjectResource(FakeGateway(), FeaturesConfig())

    result = resource.read(make_state())

    assert result.state is None
    assert result.diagnostics[0].summary == "Error Reading object"


def test_update_returns_new_state() -> None:
    gateway = FakeGateway({"7": make_object()})
    resource = ObjectResource(gateway, FeaturesConfig())
    proposed = _plan(DeclaredAttribute("134", ("Server B",)))

    result = resource.update(make_state(), proposed)

    assert result.ok
    assert gateway.call_names() == ["update_object"]
    assert result.state is not None
    assert result.state.attributes_in == proposed.attributes_in


def test_failed_update_keeps_previous_state() -> None:
    gateway = FakeGateway({"7": make_object()}, failing={"update_object"})
    resource = ObjectResource(gateway, FeaturesConfig())
    previous = make_state()

    result = resource.update(previous, _plan(DeclaredAttribute("134", ("Server B",))))

    assert result.state is previous
    assert result.diagnostics[0].summary == "Error Updating object"


def test_plan_delegates_to_reconciler() -> None:
    avatar = make_avatar("avatar-1")
    resource = ObjectResource(FakeGateway(), FeaturesConfig())
    prior = make_state(make_object(avatar=avatar))

    resolution = resource.plan(prior, _plan(avatar_uuid="avatar-1"))

    assert resolution.planned is not None
    assert resolution.planned.label == "Server A"
    assert resolution.planned.avatar == avatar


def test_delete_uses_configured_policy() -> None:
    gateway = FakeGateway({"7": make_object()})
    resource = ObjectResource(
        gateway, FeaturesConfig(destroy_object=False, obsolete_attribute_id="99")
    )

    diagnostics = resource.delete(make_state())

    assert isinstance(resource.deletion_policy, SoftDelete)
    assert not diagnostics
    assert gateway.call_names() == ["update_object"]


def test_delete_failure_is_reported() -> None:
    gateway = FakeGateway({"7": make_object()}, failing={"delete_object"})
    resource = ObjectResource(gateway, FeaturesConfig())

    diagnostics = resource.delete(make_state())

    assert diagnostics.has_error()
    assert diagnostics[0].summary == "Error Deleting object"


def test_import_state_derives_declared_attributes() -> None:
    gateway = FakeGateway({"7": make_object()})
    resource = ObjectResource(gateway, FeaturesConfig())

    result = resource.import_state("7")

    assert result.state is not None
    assert result.state.id == "7"
    assert result.state.attributes_in == DECLARED


def test_bad_soft_delete_setup_fails_at_construction() -> None:
    gateway = FakeGateway({"7": make_object()})

    with pytest.raises(ConfigurationError):
        ObjectResource(gateway, FeaturesConfig(destroy_object=False))

    assert gateway.calls == []
