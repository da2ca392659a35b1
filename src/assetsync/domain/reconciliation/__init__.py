"""Plan-time reconciliation of derived object fields.

Both resolutions are pure functions of the prior synchronized state and the
proposed input:

- label: the single declared value of the attribute flagged as label source
- avatar: the prior avatar group when its uuid is unchanged, otherwise unknown
"""

from __future__ import annotations

from .avatar import resolve_avatar
from .label import label_source_id, resolve_label
from .planner import PlanReconciler, PlanResolution
from .results import (
    AvatarResolution,
    ForceUnknown,
    LabelResolution,
    Resolution,
    ResolutionKind,
    Resolved,
    Unchanged,
    planned_value,
)

__all__ = [
    "AvatarResolution",
    "ForceUnknown",
    "LabelResolution",
    "PlanReconciler",
    "PlanResolution",
    "Resolution",
    "ResolutionKind",
    "Resolved",
    "Unchanged",
    "label_source_id",
    "planned_value",
    "resolve_avatar",
    "resolve_label",
]
