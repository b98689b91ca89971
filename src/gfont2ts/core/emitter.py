"""Rendering of font records into JSON data and TypeScript declarations."""

import json
import logging
import math
import re
from collections.abc import Iterable, Sequence

from gfont2ts.core.constants import AXIS_REGISTRY, WEIGHT_AXIS
from gfont2ts.core.models import AxisRange, FontRecord
from gfont2ts.core.weights import available_weights, static_weights

logger = logging.getLogger(__name__)

HEADER = "// This file is generated by gfont2ts. Do not edit.\n"

# Range<F, T> is the inclusive integer range F..T. Axis values are template
# literals of the form "<tag>-<value>", negative values are written "[<abs>]".
HELPER_TYPES = """\
type Enumerate<N extends number, Acc extends number[] = []> = Acc['length'] extends N
  ? Acc[number]
  : Enumerate<N, [...Acc, Acc['length']]>;
type Range<F extends number, T extends number> = Exclude<Enumerate<T>, Enumerate<F>> | T;
type Axis<Tag extends string, V extends number | string> = `${Tag}-${V}`;
type Negative<V extends number | string> = `[${V}]`;
type Hundreds<V extends number> = `${V}00`;
"""

# Enumerate<T> recurses T + 1 times and the compiler stops at 1000, so wider
# ranges are written as plain number.
MAX_RANGE_BOUND = 998


def render_data(records: Iterable[FontRecord]) -> str:
    """Serialize font records as a JSON array."""
    data = [record.to_dict() for record in records]
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def render_missing(names: Iterable[str]) -> str:
    """Serialize names of directories without a description file."""
    return json.dumps(list(names), indent=2, ensure_ascii=False) + "\n"


def quote(text: str) -> str:
    """Single-quoted TypeScript string literal."""
    return "'" + text.replace("\\", "\\\\").replace("'", "\\'") + "'"


def type_identifier(name: str) -> str:
    """Turn a font name into a TypeScript identifier fragment."""
    return re.sub(r"\W", "_", name, flags=re.ASCII)


def _union(members: Sequence[str]) -> str:
    return " | ".join(members) if members else "never"


def _range(lo: int, hi: int, scale: int) -> str:
    if hi > MAX_RANGE_BOUND:
        return "number"
    expression = f"Range<{lo}, {hi}>"
    if scale != 1:
        expression = f"Hundreds<{expression}>"
    return expression


def _bounds(axis: AxisRange, scale: int) -> tuple[int, int] | None:
    """Integer values inside the axis range, after division by ``scale``.

    Returns None when both bounds floor to the same value, or when no integer
    lies between them.
    """
    if math.floor(axis.min / scale) == math.floor(axis.max / scale):
        return None
    lo = math.ceil(axis.min / scale)
    hi = math.floor(axis.max / scale)
    if lo > hi:
        return None
    return lo, hi


def render_axis(tag: str, axis: AxisRange) -> list[str]:
    """Render the union members for one variation axis.

    Bounds are divided by the axis scale, then the lower bound is rounded up
    and the upper bound down. Negative values are rendered by absolute value
    inside ``Negative<...>``. Bounds above MAX_RANGE_BOUND become ``number``.

    Returns:
        Type expressions, or an empty list when the axis is unknown or its
        range collapses to a single value.
    """
    axis_format = AXIS_REGISTRY.get(tag)
    if axis_format is None:
        logger.warning(f"Unrecognized axis tag {tag!r}, skipping")
        return []

    scale = axis_format.scale
    bounds = _bounds(axis, scale)
    if bounds is None:
        logger.warning(
            f"Degenerate range for axis {tag!r} ({axis.min} to {axis.max}), skipping"
        )
        return []

    lo, hi = bounds
    if lo >= 0:
        return [f"Axis<{quote(tag)}, {_range(lo, hi, scale)}>"]
    if hi <= 0:
        return [f"Axis<{quote(tag)}, Negative<{_range(-hi, -lo, scale)}>>"]
    return [
        f"Axis<{quote(tag)}, Negative<{_range(1, -lo, scale)}>>",
        f"Axis<{quote(tag)}, {_range(0, hi, scale)}>",
    ]


def weight_members(record: FontRecord) -> list[str]:
    """Semantic weight names, static weights, then the weight axis range."""
    members = [quote(name) for _, name in available_weights(record)]
    members.extend(str(weight) for weight in static_weights(record))
    axis = record.axes.get(WEIGHT_AXIS)
    if axis is not None:
        bounds = _bounds(axis, 1)
        if bounds is None:
            logger.warning(
                f"{record.name}: degenerate weight axis ({axis.min} to {axis.max})"
            )
        else:
            members.append(_range(*bounds, 1))
    return members


def axis_members(record: FontRecord) -> list[str]:
    """Style literals, then one expression per non-weight axis."""
    members = []
    if record.has_normal:
        members.append(quote("normal"))
    if record.has_italic:
        members.append(quote("italic"))
    for tag, axis in record.axes.items():
        if tag == WEIGHT_AXIS:
            continue
        members.extend(render_axis(tag, axis))
    return members


def _unique_records(records: Iterable[FontRecord]) -> list[tuple[FontRecord, str]]:
    """Pair records with distinct identifiers, dropping repeated names."""
    names: set[str] = set()
    identifiers: set[str] = set()
    unique = []
    for record in records:
        if record.name in names:
            logger.warning(
                f"Duplicate font name {record.name!r}, "
                "leaving it out of the declarations"
            )
            continue
        names.add(record.name)
        base = type_identifier(record.name)
        identifier = base
        suffix = 2
        while identifier in identifiers:
            identifier = f"{base}_{suffix}"
            suffix += 1
        identifiers.add(identifier)
        unique.append((record, identifier))
    return unique


def render_declarations(records: Iterable[FontRecord]) -> str:
    """Render the TypeScript declaration module.

    The module exports ``GFontName`` (every font name), ``IMapForWeights``
    (font name to weight union) and ``IMapForAxes`` (font name to style and
    axis union).
    """
    unique = _unique_records(records)

    lines = [HEADER, HELPER_TYPES]
    if unique:
        lines.append("export type GFontName =")
        names = [f"  | {quote(record.name)}" for record, _ in unique]
        names[-1] += ";"
        lines.extend(names)
    else:
        lines.append("export type GFontName = never;")
    lines.append("")

    for record, identifier in unique:
        lines.append(f"type WeightOf{identifier} = {_union(weight_members(record))};")
        lines.append(f"type AxesOf{identifier} = {_union(axis_members(record))};")
    if unique:
        lines.append("")

    maps = (("IMapForWeights", "WeightOf"), ("IMapForAxes", "AxesOf"))
    for type_name, prefix in maps:
        lines.append(f"export type {type_name} = {{")
        for record, identifier in unique:
            lines.append(f"  {quote(record.name)}: {prefix}{identifier};")
        lines.append("};")
        lines.append("")

    return "\n".join(lines)
