"""Lifecycle of one asset object resource instance.

Every operation returns its diagnostics instead of raising. A failing step
leaves the instance's state untouched: ``create``/``read`` return no state,
``update`` returns the previous state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from assetsync.adapters.assets.codec import declare_attributes, encode_object_payload
from assetsync.domain.diagnostics import Diagnostics
from assetsync.domain.errors import AssetsError
from assetsync.domain.model import UNKNOWN, ObjectState
from assetsync.domain.reconciliation import PlanReconciler

from .lifecycle import HardDelete, select_deletion_policy

if TYPE_CHECKING:
    from assetsync.adapters.assets.schema import ObjectPayload
    from assetsync.config.assets import FeaturesConfig
    from assetsync.domain.model import ObjectPlan
    from assetsync.domain.reconciliation import PlanResolution

    from .gateway import AssetsGateway
    from .lifecycle import DeletionPolicy

log = getLogger(__name__)


@dataclass(slots=True)
class ResourceResult:
    state: ObjectState | None = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    @property
    def ok(self) -> bool:
        return not self.diagnostics.has_error()


class ObjectResource:
    """Plan, create, read, update, delete and import asset objects.

    The deletion policy is chosen at construction, so an unusable soft-delete
    setup raises ``ConfigurationError`` before any remote call.
    """

    def __init__(
        self,
        gateway: AssetsGateway,
        features: FeaturesConfig,
        *,
        reconciler: PlanReconciler | None = None,
    ) -> None:
        self._gateway = gateway
        self._reconciler = reconciler or PlanReconciler()
        self._deletion: DeletionPolicy = select_deletion_policy(features, gateway)

    @property
    def deletion_policy(self) -> DeletionPolicy:
        return self._deletion

    def plan(self, prior: ObjectState | None, proposed: ObjectPlan) -> PlanResolution:
        return self._reconciler.plan(prior, proposed)

    def create(self, proposed: ObjectPlan) -> ResourceResult:
        result = ResourceResult()
        try:
            payload = self._encode(proposed)
        except AssetsError as exc:
            result.diagnostics.add_exception(exc)
            return result

        try:
            created = self._gateway.create_object(payload)
        except AssetsError as exc:
            result.diagnostics.add_error(
                "Error creating object", f"Could not create object, unexpected error: {exc}"
            )
            return result

        # the create response carries no attributes
        try:
            remote = self._gateway.get_object(created.id)
        except AssetsError as exc:
            result.diagnostics.add_error(
                "Error get attributes", f"Could not get attributes, unexpected error: {exc}"
            )
            return result

        log.info("Created object %s (%s)", remote.id, remote.object_key)
        result.state = ObjectState(object=remote, attributes_in=proposed.attributes_in)
        return result

    def read(self, state: ObjectState) -> ResourceResult:
        result = ResourceResult()
        try:
            remote = self._gateway.get_object(state.id)
        except AssetsError as exc:
            result.diagnostics.add_error(
                "Error Reading object", f"Could not read object, unexpected error: {exc}"
            )
            return result
        result.state = ObjectState(object=remote, attributes_in=state.attributes_in)
        return result

    def update(self, state: ObjectState, proposed: ObjectPlan) -> ResourceResult:
        result = ResourceResult(state=state)
        try:
            payload = self._encode(proposed)
        except AssetsError as exc:
            result.diagnostics.add_exception(exc)
            return result

        try:
            remote = self._gateway.update_object(state.id, payload)
        except AssetsError as exc:
            result.diagnostics.add_error(
                "Error Updating object", f"Could not update object, unexpected error: {exc}"
            )
            return result

        log.info("Updated object %s", remote.id)
        result.state = ObjectState(object=remote, attributes_in=proposed.attributes_in)
        return result

    def delete(self, state: ObjectState) -> Diagnostics:
        diagnostics = Diagnostics()
        try:
            self._deletion.delete(state)
        except AssetsError as exc:
            summary = "Error Deleting object" if self._destroys else "Error Updating object"
            diagnostics.add_error(summary, f"Unexpected error: {exc}")
        return diagnostics

    def import_state(self, object_id: str) -> ResourceResult:
        """Adopt an existing object, deriving the declared attributes from the remote ones."""

        result = ResourceResult()
        try:
            remote = self._gateway.get_object(object_id)
        except AssetsError as exc:
            result.diagnostics.add_error(
                "Error Reading object", f"Could not read object, unexpected error: {exc}"
            )
            return result
        result.state = ObjectState(
            object=remote, attributes_in=declare_attributes(remote.attributes)
        )
        return result

    @property
    def _destroys(self) -> bool:
        return isinstance(self._deletion, HardDelete)

    @staticmethod
    def _encode(proposed: ObjectPlan) -> ObjectPayload:
        avatar_uuid = None if proposed.avatar_uuid is UNKNOWN else proposed.avatar_uuid
        return encode_object_payload(
            proposed.object_type_id,
            proposed.attributes_in,
            has_avatar=proposed.has_avatar or None,
            avatar_uuid=avatar_uuid,
        )


__all__ = ["ObjectResource", "ResourceResult"]
