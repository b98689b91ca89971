"""Scan, parse and emit pipeline."""

import logging

from gfont2ts.config import GeneratorConfig
from gfont2ts.core.emitter import render_data, render_declarations, render_missing
from gfont2ts.core.font_files import verify_font_dir
from gfont2ts.core.metadata import scan
from gfont2ts.core.models import ScanResult
from gfont2ts.core.scanner import list_font_dirs
from gfont2ts.storage import write_outputs

logger = logging.getLogger(__name__)


def render_outputs(result: ScanResult, config: GeneratorConfig) -> dict[str, str]:
    """Render every artifact of a scan, keyed by output file name."""
    return {
        config.data_filename: render_data(result.records),
        config.missing_filename: render_missing(result.missing),
        config.declarations_filename: render_declarations(result.records),
    }


def generate(config: GeneratorConfig | None = None) -> ScanResult:
    """Scan the configured roots and write the generated files.

    Every artifact is rendered before anything is written, so a fatal error
    in any description file leaves existing outputs untouched.

    Args:
        config: Run configuration. Defaults to GeneratorConfig.default().

    Returns:
        The scan result the outputs were rendered from.

    Raises:
        MetadataError: If a description file lacks a name or variants, or is
            malformed.
        OSError: If a root cannot be listed or an output cannot be written.
    """
    if config is None:
        config = GeneratorConfig.default()

    font_dirs = list_font_dirs(config.roots)
    result = scan(font_dirs, config.metadata_filename)

    if config.verify_font_files:
        mismatches = 0
        for font_dir, record in zip(result.record_dirs, result.records):
            mismatches += len(verify_font_dir(font_dir, record))
        logger.info(f"Font file verification found {mismatches} mismatch(es)")

    outputs = render_outputs(result, config)
    write_outputs(config.output_dir, outputs)
    return result
