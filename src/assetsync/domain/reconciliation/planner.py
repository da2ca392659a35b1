"""Plan-time reconciliation of the derived label and avatar fields."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from assetsync.domain.diagnostics import Diagnostics
from assetsync.domain.errors import AssetsError
from assetsync.domain.model import PlannedObject

from .avatar import resolve_avatar
from .label import resolve_label
from .results import planned_value

if TYPE_CHECKING:
    from assetsync.domain.model import ObjectPlan, ObjectState

    from .results import AvatarResolution, LabelResolution

log = getLogger(__name__)


@dataclass(slots=True, kw_only=True)
class PlanResolution:
    """Outcome of one plan evaluation for a single resource instance.

    ``planned`` is only set when both derived fields resolved without a fatal
    diagnostic.
    """

    label: LabelResolution | None = None
    avatar: AvatarResolution | None = None
    planned: PlannedObject | None = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    @property
    def ok(self) -> bool:
        return self.planned is not None and not self.diagnostics.has_error()


class PlanReconciler:
    """Resolve the fields a user never sets directly but that must stay consistent."""

    def plan(self, prior: ObjectState | None, proposed: ObjectPlan) -> PlanResolution:
        resolution = PlanResolution()

        try:
            for attribute in proposed.attributes_in:
                attribute.validate()
            resolution.label = resolve_label(prior, proposed)
        except AssetsError as exc:
            resolution.diagnostics.add_exception(exc)

        resolution.avatar = resolve_avatar(prior, proposed)

        if resolution.diagnostics.has_error() or resolution.label is None:
            log.info(
                "Plan for object %s aborted: %s",
                prior.id if prior is not None else "<new>",
                "; ".join(str(diagnostic) for diagnostic in resolution.diagnostics.errors()),
            )
            return resolution

        resolution.planned = PlannedObject(
            object_type_id=proposed.object_type_id,
            attributes_in=proposed.attributes_in,
            label=planned_value(resolution.label),
            avatar=planned_value(resolution.avatar),
        )
        log.debug(
            "Planned object %s: label=%s, avatar=%s",
            prior.id if prior is not None else "<new>",
            resolution.label.kind,
            resolution.avatar.kind,
        )
        return resolution
