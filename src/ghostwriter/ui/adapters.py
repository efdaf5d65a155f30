"""Adapter functions for converting between UI values and business objects."""

from ghostwriter.core.models import GenerationRequest
from ghostwriter.core.styles import AXES

#: Order of the axis label inputs wired into the generate handler.
AXIS_INPUT_ORDER: tuple[str, ...] = tuple(AXES.keys())


def convert_form_values_to_request(
    concept: str, explicit: bool, axis_labels: tuple[str, ...]
) -> GenerationRequest:
    """Convert raw form values to a GenerationRequest.

    Args:
        concept: Concept text as typed (not validated here)
        explicit: Explicit-content checkbox value
        axis_labels: One selected label per axis, in AXIS_INPUT_ORDER

    Returns:
        The request built from the form

    Raises:
        ValueError: If the label count is wrong or a label is unknown
    """
    if len(axis_labels) != len(AXIS_INPUT_ORDER):
        raise ValueError(
            f"Expected {len(AXIS_INPUT_ORDER)} axis values, got {len(axis_labels)}"
        )

    values = {
        name: AXES[name].from_label(label) for name, label in zip(AXIS_INPUT_ORDER, axis_labels)
    }
    return GenerationRequest(concept=concept or "", explicit=bool(explicit), **values)
