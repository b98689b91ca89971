"""Cross-check of declared axes against the binary font files.

Font packages ship their font files next to the description file, e.g.
``roboto/Roboto[wdth,wght].ttf``. The ``fvar`` table of a variable font holds
the authoritative axis ranges, so a disagreement with ``METADATA.pb`` points
to a stale description file.
"""

import glob
import logging
import math
import os

from fontTools.ttLib import TTFont, TTLibError

from gfont2ts.core.models import AxisRange, FontDir, FontRecord

logger = logging.getLogger(__name__)

FONT_EXTENSIONS = (".ttf", ".otf")


def read_variable_axes(path: str) -> dict[str, AxisRange]:
    """Read the variation axes of a font file.

    Args:
        path: Path to a TrueType or OpenType font file.

    Returns:
        Axis ranges keyed by tag. Empty for static fonts.

    Raises:
        TTLibError: If the file is not a readable font.
    """
    with TTFont(path, lazy=True) as font:
        if "fvar" not in font:
            return {}
        return {
            axis.axisTag: AxisRange(min=float(axis.minValue), max=float(axis.maxValue))
            for axis in font["fvar"].axes
        }


def find_font_files(font_dir: FontDir) -> list[str]:
    """Font files in a package directory, sorted by name."""
    return sorted(
        path
        for path in glob.glob(os.path.join(glob.escape(font_dir.path), "*"))
        if path.lower().endswith(FONT_EXTENSIONS) and os.path.isfile(path)
    )


def _same_range(a: AxisRange, b: AxisRange) -> bool:
    # fvar stores 16.16 fixed point values.
    return math.isclose(a.min, b.min, abs_tol=1e-3) and math.isclose(
        a.max, b.max, abs_tol=1e-3
    )


def verify_font_dir(font_dir: FontDir, record: FontRecord) -> list[str]:
    """Compare the declared axes with those of the variable font files.

    Unreadable files are logged and skipped. Static font files are ignored.

    Args:
        font_dir: Package directory holding the font files.
        record: Record parsed from the directory's description file.

    Returns:
        One message per discrepancy, also logged as warnings.
    """
    messages = []
    for path in find_font_files(font_dir):
        filename = os.path.basename(path)
        try:
            file_axes = read_variable_axes(path)
        except (TTLibError, OSError) as e:
            logger.warning(f"Failed to read font file '{path}': {e}")
            continue
        if not file_axes:
            continue

        for tag, declared in record.axes.items():
            found = file_axes.get(tag)
            if found is None:
                messages.append(
                    f"{record.name}: axis {tag!r} is declared but missing in {filename}"
                )
            elif not _same_range(declared, found):
                messages.append(
                    f"{record.name}: axis {tag!r} is declared as "
                    f"{declared.min:g} to {declared.max:g} but {filename} has "
                    f"{found.min:g} to {found.max:g}"
                )
        for tag in file_axes:
            if tag not in record.axes:
                messages.append(
                    f"{record.name}: {filename} has axis {tag!r} that is not declared"
                )

    for message in messages:
        logger.warning(message)
    return messages
