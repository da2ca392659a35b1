"""Label resolution: the label mirrors the single value of the label attribute."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from assetsync.domain.errors import LabelAttributeNotFoundError, MultipleLabelValuesError

from .results import ForceUnknown, Resolved, Unchanged

if TYPE_CHECKING:
    from assetsync.domain.model import AssetObject, DeclaredAttribute, ObjectPlan, ObjectState

    from .results import LabelResolution

log = getLogger(__name__)


def resolve_label(prior: ObjectState | None, proposed: ObjectPlan) -> LabelResolution:
    """Resolve the planned label from the prior schema flags and the proposed input.

    Raises ``LabelAttributeNotFoundError`` when no label attribute exists in the
    prior state or the proposed input lacks it, and ``MultipleLabelValuesError``
    when the label attribute is declared with more than one value.
    """

    if prior is None:
        return ForceUnknown(reason="object does not exist yet")

    label_attribute_id = label_source_id(prior.object)
    declared = _find_declared(proposed.attributes_in, label_attribute_id)
    if declared is None:
        raise LabelAttributeNotFoundError(
            f"Object attribute for the label ({label_attribute_id}) not found."
        )

    declared.validate()
    if len(declared.values) > 1:
        raise MultipleLabelValuesError("Only one value expected for the label attribute.")

    label = declared.values[0]
    if label == prior.object.label:
        return Unchanged(value=label)
    return Resolved(value=label)


def label_source_id(obj: AssetObject) -> str:
    """Return the type attribute id flagged as label source in ``obj``."""

    flagged = obj.label_attributes()
    if not flagged:
        raise LabelAttributeNotFoundError(
            "Object attribute for the label not found in the object schema."
        )
    if len(flagged) > 1:
        log.warning(
            "Object %s has %d label attributes (%s); using %s",
            obj.id,
            len(flagged),
            ", ".join(attribute.type_attribute_id for attribute in flagged),
            flagged[0].type_attribute_id,
        )
    return flagged[0].type_attribute_id


def _find_declared(
    declared: tuple[DeclaredAttribute, ...], type_attribute_id: str
) -> DeclaredAttribute | None:
    for attribute in declared:
        if attribute.type_attribute_id == type_attribute_id:
            return attribute
    return None
