"""Command line entry point.

Usage:
    gfont2ts
    gfont2ts ../google-fonts/ofl ../google-fonts/apache -o generated
    python -m gfont2ts fonts/ofl --verify-font-files --loglevel INFO
"""

import argparse
import logging
import sys

from gfont2ts.config import GeneratorConfig
from gfont2ts.core.exceptions import MetadataError
from gfont2ts.pipeline import generate


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description=(
            "Generate font metadata JSON and TypeScript declarations "
            "from a directory of font packages."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment variables GFONT2TS_ROOTS, GFONT2TS_OUTPUT_DIR,
GFONT2TS_METADATA_FILENAME and GFONT2TS_VERIFY_FONT_FILES provide the
defaults for the corresponding options.
        """,
    )
    parser.add_argument(
        "roots",
        metavar="ROOT",
        type=str,
        nargs="*",
        help="Directories holding one font package per subdirectory.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        metavar="DIR",
        type=str,
        default=None,
        help="Directory to write the generated files to.",
    )
    parser.add_argument(
        "--metadata-filename",
        metavar="NAME",
        type=str,
        default=None,
        help="Name of the description file in each package.",
    )
    parser.add_argument(
        "--data-filename",
        metavar="NAME",
        type=str,
        default=None,
        help="Output file for the font records.",
    )
    parser.add_argument(
        "--missing-filename",
        metavar="NAME",
        type=str,
        default=None,
        help="Output file for packages without a description file.",
    )
    parser.add_argument(
        "--declarations-filename",
        metavar="NAME",
        type=str,
        default=None,
        help="Output file for the TypeScript declarations.",
    )
    parser.add_argument(
        "--verify-font-files",
        dest="verify_font_files",
        action="store_true",
        default=None,
        help="Check declared axes against the fvar table of the font files.",
    )
    parser.add_argument(
        "--loglevel",
        metavar="LEVEL",
        default="WARNING",
        help="Logging level, default WARNING",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Apply command line overrides to the environment configuration."""
    config = GeneratorConfig.default()
    if args.roots:
        config.roots = list(args.roots)
    if args.output_dir is not None:
        config.output_dir = args.output_dir
    if args.metadata_filename is not None:
        config.metadata_filename = args.metadata_filename
    if args.data_filename is not None:
        config.data_filename = args.data_filename
    if args.missing_filename is not None:
        config.missing_filename = args.missing_filename
    if args.declarations_filename is not None:
        config.declarations_filename = args.declarations_filename
    if args.verify_font_files is not None:
        config.verify_font_files = args.verify_font_files
    return config


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.loglevel.upper(), "WARNING"))

    try:
        config = build_config(args)
        result = generate(config)
    except (MetadataError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.getLogger(__name__).info(
        f"Generated {len(result.records)} font(s) into {config.output_dir}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
