"""Weight classification of font records."""

from gfont2ts.core.constants import MISSING_WEIGHT, WEIGHT_AXIS, WEIGHT_NAMES
from gfont2ts.core.models import FontRecord


def static_weights(record: FontRecord) -> list[int]:
    """Distinct weights of the static variants, in declaration order.

    Variants with an unusable style still contribute their weight.
    """
    weights: list[int] = []
    for variant in record.variants:
        if variant.weight != MISSING_WEIGHT and variant.weight not in weights:
            weights.append(variant.weight)
    return weights


def has_weight(record: FontRecord, weight: int) -> bool:
    """Check if a weight is a static variant or inside the weight axis."""
    if weight in static_weights(record):
        return True
    axis = record.axes.get(WEIGHT_AXIS)
    return axis is not None and axis.covers(weight)


def available_weights(record: FontRecord) -> list[tuple[int, str]]:
    """Standard weights the font provides, with their semantic names.

    Example:
        A font with a ``wght`` axis from 300 to 500 and no other static
        weights yields ``[(300, "light"), (400, "regular"), (500, "medium")]``.
    """
    return [
        (weight, name)
        for weight, name in WEIGHT_NAMES.items()
        if has_weight(record, weight)
    ]
