"""Generator configuration.

Defaults reproduce the layout the generator was written for: a Google Fonts
checkout next to the working directory and a ``generated`` output directory.
"""

import os
from dataclasses import dataclass, field

from gfont2ts.core.metadata import DEFAULT_METADATA_FILENAME

DEFAULT_ROOTS = ("../google-fonts/ofl",)
DEFAULT_OUTPUT_DIR = "generated"
DEFAULT_DATA_FILENAME = "FontsWithMetaData.json"
DEFAULT_MISSING_FILENAME = "FontsWithoutMetaData.json"
DEFAULT_DECLARATIONS_FILENAME = "gFontInterfaces.ts"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


@dataclass
class GeneratorConfig:
    """Input and output locations of a generator run.

    Environment variables:
        GFONT2TS_ROOTS: Root directories separated by ``os.pathsep``
            (default: ../google-fonts/ofl)
        GFONT2TS_OUTPUT_DIR: Output directory (default: generated)
        GFONT2TS_METADATA_FILENAME: Description file name (default: METADATA.pb)
        GFONT2TS_VERIFY_FONT_FILES: Check declared axes against font files
            (default: off)

    Example:
        >>> config = GeneratorConfig.default()
        >>> config = GeneratorConfig(roots=["fonts/ofl"], output_dir="out")
    """

    roots: list[str] = field(default_factory=lambda: list(DEFAULT_ROOTS))
    output_dir: str = DEFAULT_OUTPUT_DIR
    metadata_filename: str = DEFAULT_METADATA_FILENAME
    data_filename: str = DEFAULT_DATA_FILENAME
    missing_filename: str = DEFAULT_MISSING_FILENAME
    declarations_filename: str = DEFAULT_DECLARATIONS_FILENAME
    verify_font_files: bool = False

    @classmethod
    def default(cls) -> "GeneratorConfig":
        """Create a configuration from environment variables.

        Raises:
            ValueError: If GFONT2TS_VERIFY_FONT_FILES is not a boolean value.
        """

        def parse_env_bool(key: str, default: bool) -> bool:
            value_str = os.environ.get(key)
            if value_str is None:
                return default
            value = value_str.strip().lower()
            if value in _TRUE_VALUES:
                return True
            if value in _FALSE_VALUES:
                return False
            raise ValueError(
                f"Environment variable {key}={value_str!r} is not a valid boolean"
            )

        roots_str = os.environ.get("GFONT2TS_ROOTS")
        if roots_str:
            roots = [root for root in roots_str.split(os.pathsep) if root]
        else:
            roots = list(DEFAULT_ROOTS)

        return cls(
            roots=roots,
            output_dir=os.environ.get("GFONT2TS_OUTPUT_DIR", DEFAULT_OUTPUT_DIR),
            metadata_filename=os.environ.get(
                "GFONT2TS_METADATA_FILENAME", DEFAULT_METADATA_FILENAME
            ),
            verify_font_files=parse_env_bool("GFONT2TS_VERIFY_FONT_FILES", False),
        )
