"""Deletion policy: remove the object, or keep it and mark it obsolete."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final, Protocol

from assetsync.adapters.assets.codec import encode_object_payload
from assetsync.config.assets import validate_features
from assetsync.domain.model import DeclaredAttribute

if TYPE_CHECKING:
    from assetsync.config.assets import FeaturesConfig
    from assetsync.domain.model import ObjectState

    from .gateway import AssetsGateway

log = getLogger(__name__)

OBSOLETE_VALUE: Final = "Obsolete"


class DeletionPolicy(Protocol):
    def delete(self, state: ObjectState) -> None: ...


@dataclass(frozen=True, slots=True)
class HardDelete:
    gateway: AssetsGateway

    def delete(self, state: ObjectState) -> None:
        log.info("Deleting object %s", state.id)
        self.gateway.delete_object(state.id)


@dataclass(frozen=True, slots=True)
class SoftDelete:
    """Keep the object and write ``Obsolete`` to the fallback attribute.

    Only the fallback attribute is sent; every other attribute of the object is
    left as it is on the server.
    """

    gateway: AssetsGateway
    fallback_attribute_id: str

    def delete(self, state: ObjectState) -> None:
        payload = encode_object_payload(
            state.object.object_type_id,
            [DeclaredAttribute(self.fallback_attribute_id, (OBSOLETE_VALUE,))],
        )
        log.info(
            "Marking object %s obsolete via attribute %s",
            state.id,
            self.fallback_attribute_id,
        )
        self.gateway.update_object(state.id, payload)


def select_deletion_policy(features: FeaturesConfig, gateway: AssetsGateway) -> DeletionPolicy:
    """Choose the deletion policy once; raises ``ConfigurationError`` on a bad soft-delete setup."""

    validate_features(features)
    if features.destroy_object:
        log.debug("Deletion policy: hard delete")
        return HardDelete(gateway)
    log.debug("Deletion policy: soft delete via attribute %s", features.obsolete_attribute_id)
    return SoftDelete(gateway, features.obsolete_attribute_id.strip())


__all__ = [
    "OBSOLETE_VALUE",
    "DeletionPolicy",
    "HardDelete",
    "SoftDelete",
    "select_deletion_policy",
]
