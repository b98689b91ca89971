"""Weight names and the variation axis registry.

Weight values follow the CSS/OpenType usWeightClass convention:
- 100 = thin
- 200 = extralight
- 300 = light
- 400 = regular
- 500 = medium
- 600 = semibold
- 700 = bold
- 800 = extrabold
- 900 = black
"""

from typing import NamedTuple

WEIGHT_NAMES: dict[int, str] = {
    100: "thin",
    200: "extralight",
    300: "light",
    400: "regular",
    500: "medium",
    600: "semibold",
    700: "bold",
    800: "extrabold",
    900: "black",
}

STYLES = ("normal", "italic")

# Sentinels for variant entries whose style or weight cannot be read.
MISSING_STYLE = ""
MISSING_WEIGHT = -1

WEIGHT_AXIS = "wght"


class AxisFormat(NamedTuple):
    """Rendering rule for a variation axis.

    Attributes:
        name: Human readable axis name.
        scale: Divisor applied to the bounds before rendering. Axes whose
            values live in the hundreds use 100.
    """

    name: str
    scale: int = 1


# https://fonts.google.com/variablefonts#axis-definitions
AXIS_REGISTRY: dict[str, AxisFormat] = {
    # Registered axes.
    "ital": AxisFormat("Italic"),
    "opsz": AxisFormat("Optical size"),
    "slnt": AxisFormat("Slant"),
    "wdth": AxisFormat("Width"),
    "wght": AxisFormat("Weight"),
    # Custom axes.
    "ARRR": AxisFormat("AR Retinal Resolution"),
    "BLED": AxisFormat("Bleed"),
    "BNCE": AxisFormat("Bounce"),
    "CASL": AxisFormat("Casual"),
    "CRSV": AxisFormat("Cursive"),
    "EDPT": AxisFormat("Extrusion Depth"),
    "EHLT": AxisFormat("Edge Highlight"),
    "ELGR": AxisFormat("Element Grid"),
    "ELSH": AxisFormat("Element Shape"),
    "FILL": AxisFormat("Fill"),
    "FLAR": AxisFormat("Flare"),
    "GRAD": AxisFormat("Grade"),
    "HEXP": AxisFormat("Hyper Expansion"),
    "INFM": AxisFormat("Informality"),
    "MONO": AxisFormat("Monospace"),
    "MORF": AxisFormat("Morph"),
    "ROND": AxisFormat("Roundness"),
    "SCAN": AxisFormat("Scanlines"),
    "SHLN": AxisFormat("Shadow Length"),
    "SHRP": AxisFormat("Sharpness"),
    "SOFT": AxisFormat("Softness"),
    "SPAC": AxisFormat("Spacing"),
    "VOLM": AxisFormat("Volume"),
    "WONK": AxisFormat("Wonky"),
    "XROT": AxisFormat("Rotation in X"),
    "YELA": AxisFormat("Vertical Element Alignment"),
    "YROT": AxisFormat("Rotation in Y"),
    "ZROT": AxisFormat("Rotation in Z"),
    # Parametric axes, expressed in font units.
    "XOPQ": AxisFormat("Thick Stroke", scale=100),
    "XTRA": AxisFormat("Counter Width", scale=100),
    "YEAR": AxisFormat("Year", scale=100),
    "YOPQ": AxisFormat("Thin Stroke", scale=100),
    "YTAS": AxisFormat("Ascender Height", scale=100),
    "YTDE": AxisFormat("Descender Depth", scale=100),
    "YTFI": AxisFormat("Figure Height", scale=100),
    "YTLC": AxisFormat("Lowercase Height", scale=100),
    "YTUC": AxisFormat("Uppercase Height", scale=100),
}
