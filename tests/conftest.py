from __future__ import annotations

import json
from pathlib import Path

import pytest

from assetsync.config import AssetsConfig, FeaturesConfig, build_resilience_config
from tests.helpers.assets import FakeGateway, make_object

AssetsPayload = dict[str, object]
FIXTURES = Path(__file__).resolve().parent / "data" / "assets"


def load_fixture(name: str) -> object:
    return json.loads((FIXTURES / name).read_text(encoding="utf-8"))


@pytest.fixture
def object_payload() -> AssetsPayload:
    payload = load_fixture("object.json")
    assert isinstance(payload, dict)
    return payload


@pytest.fixture
def object_type_attributes_payload() -> list[AssetsPayload]:
    payload = load_fixture("object_type_attributes.json")
    assert isinstance(payload, list)
    return payload


@pytest.fixture
def object_schema_attributes_payload() -> list[AssetsPayload]:
    payload = load_fixture("object_schema_attributes.json")
    assert isinstance(payload, list)
    return payload


@pytest.fixture
def object_schema_payload() -> AssetsPayload:
    payload = load_fixture("object_schema.json")
    assert isinstance(payload, dict)
    return payload


@pytest.fixture
def object_type_payload() -> AssetsPayload:
    payload = load_fixture("object_type.json")
    assert isinstance(payload, dict)
    return payload


@pytest.fixture
def global_icons_payload() -> list[AssetsPayload]:
    payload = load_fixture("global_icons.json")
    assert isinstance(payload, list)
    return payload


@pytest.fixture
def assets_config() -> AssetsConfig:
    return AssetsConfig(
        host="https://api.atlassian.com",
        token="secret-token",
        mail="ops@example.com",
        workspace_id="ws-1",
        features=FeaturesConfig(),
        resilience=build_resilience_config(
            host="https://api.atlassian.com",
            workspace_id="ws-1",
            mail="ops@example.com",
            token="secret-token",
        ),
    )


@pytest.fixture
def fake_gateway() -> FakeGateway:
    return FakeGateway({"7": make_object()})


@pytest.fixture(autouse=True)
def _clean_assets_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in (
        "ATLASSIAN_HOST",
        "ATLASSIAN_TOKEN",
        "ATLASSIAN_MAIL",
        "ASSETS_WORKSPACE_ID",
        "ASSETS_DESTROY_OBJECT",
        "ASSETS_OBJECTTYPEATTRIBUTE_ID",
        "ASSETS_SCHEMA_CACHE_TTL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("ASSETSYNC_DATA_DIR", str(tmp_path / "data"))
