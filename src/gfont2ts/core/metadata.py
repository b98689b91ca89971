"""Font record extraction from ``METADATA.pb`` description files."""

import logging
import os
from collections.abc import Iterable

from gfont2ts.core.constants import (
    AXIS_REGISTRY,
    MISSING_STYLE,
    MISSING_WEIGHT,
    STYLES,
)
from gfont2ts.core.exceptions import MetadataError
from gfont2ts.core.models import AxisRange, FontDir, FontRecord, ScanResult, Variant
from gfont2ts.core.textproto import TextMessage, parse

logger = logging.getLogger(__name__)

DEFAULT_METADATA_FILENAME = "METADATA.pb"


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_variant(block: object, source: str, index: int) -> Variant:
    """Read one ``fonts`` block, substituting sentinels for unusable fields."""
    if not isinstance(block, TextMessage):
        logger.warning(f"{source}: fonts entry #{index} is not a block")
        return Variant(style=MISSING_STYLE, weight=MISSING_WEIGHT)

    style = block.get("style")
    if style not in STYLES:
        logger.warning(
            f"{source}: fonts entry #{index} has unsupported style {style!r}"
        )
        style = MISSING_STYLE

    weight = block.get("weight")
    if not isinstance(weight, int) or isinstance(weight, bool):
        logger.warning(
            f"{source}: fonts entry #{index} has invalid weight {weight!r}"
        )
        weight = MISSING_WEIGHT

    return Variant(style=style, weight=weight)


def _parse_axis(block: object, source: str) -> tuple[str, AxisRange] | None:
    """Read one ``axes`` block, or return None when it has to be dropped."""
    if not isinstance(block, TextMessage):
        logger.warning(f"{source}: axes entry is not a block, skipping")
        return None

    tag = block.get("tag")
    if tag not in AXIS_REGISTRY:
        logger.warning(f"{source}: unrecognized axis tag {tag!r}, skipping")
        return None

    min_value = block.get("min_value")
    max_value = block.get("max_value")
    if not (_is_number(min_value) and _is_number(max_value)):
        logger.warning(
            f"{source}: axis {tag!r} has no numeric min_value/max_value, skipping"
        )
        return None

    return tag, AxisRange(min=float(min_value), max=float(max_value))


def parse_metadata(text: str, source: str = "<string>") -> FontRecord:
    """Build a font record from the contents of a description file.

    Args:
        text: Protobuf text format content.
        source: Label used in log and error messages, e.g. ``roboto/METADATA.pb``.

    Returns:
        Font record with name, variants and recognized axes.

    Raises:
        MetadataError: If the text is malformed, or has no ``name`` or no
            ``fonts`` block.
    """
    message = parse(text)

    name = message.get("name")
    if not isinstance(name, str) or not name.strip():
        raise MetadataError(f"{source} does not contain a name")

    blocks = message.get_all("fonts")
    if not blocks:
        raise MetadataError(f"{source} does not contain variants")
    variants = [
        _parse_variant(block, source, index) for index, block in enumerate(blocks)
    ]

    axes: dict[str, AxisRange] = {}
    for block in message.get_all("axes"):
        parsed = _parse_axis(block, source)
        if parsed is None:
            continue
        tag, axis = parsed
        if tag in axes:
            logger.warning(
                f"{source}: axis {tag!r} declared twice, keeping the last"
            )
        axes[tag] = axis

    return FontRecord(name=name, variants=tuple(variants), axes=axes)


def read_font_dir(
    font_dir: FontDir, metadata_filename: str = DEFAULT_METADATA_FILENAME
) -> FontRecord | None:
    """Parse the description file of a font package directory.

    Returns:
        Font record, or None if the directory has no description file.

    Raises:
        MetadataError: If the description file cannot produce a record.
    """
    path = os.path.join(font_dir.path, metadata_filename)
    if not os.path.isfile(path):
        return None
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    logger.debug(f"Parsing {path}")
    return parse_metadata(text, source=f"{font_dir.name}/{metadata_filename}")


def scan(
    font_dirs: Iterable[FontDir], metadata_filename: str = DEFAULT_METADATA_FILENAME
) -> ScanResult:
    """Parse every font package directory in order.

    Directories without a description file are listed in
    :attr:`ScanResult.missing` instead of producing a record.

    Raises:
        MetadataError: On the first description file that cannot produce a
            record.
    """
    result = ScanResult()
    for font_dir in font_dirs:
        record = read_font_dir(font_dir, metadata_filename)
        if record is None:
            logger.info(f"{font_dir.path} has no {metadata_filename}")
            result.missing.append(font_dir.name)
        else:
            result.records.append(record)
            result.record_dirs.append(font_dir)
    logger.info(
        f"Parsed {len(result.records)} font(s), "
        f"{len(result.missing)} director(ies) without {metadata_filename}"
    )
    return result
