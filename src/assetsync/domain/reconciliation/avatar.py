"""Avatar resolution.

The avatar group is kept field-for-field when its identity does not change and
is otherwise planned unknown as one unit, so it is fetched again at apply time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from assetsync.domain.model import UNKNOWN

from .results import ForceUnknown, Unchanged

if TYPE_CHECKING:
    from assetsync.domain.model import ObjectPlan, ObjectState

    from .results import AvatarResolution


def resolve_avatar(prior: ObjectState | None, proposed: ObjectPlan) -> AvatarResolution:
    if prior is None:
        return ForceUnknown(reason="object does not exist yet")
    if proposed.avatar_uuid is UNKNOWN:
        return ForceUnknown(reason="avatar uuid is not known until apply")

    prior_avatar = prior.object.avatar
    prior_uuid = prior_avatar.avatar_uuid if prior_avatar is not None else ""
    proposed_uuid = proposed.avatar_uuid or ""

    if prior_uuid == proposed_uuid:
        return Unchanged(value=prior_avatar)
    return ForceUnknown(reason="avatar uuid changed")
