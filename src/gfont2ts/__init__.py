from gfont2ts.config import GeneratorConfig
from gfont2ts.core.exceptions import MetadataError, TextProtoError
from gfont2ts.core.models import AxisRange, FontDir, FontRecord, ScanResult, Variant
from gfont2ts.pipeline import generate
from gfont2ts.version import __version__ as __version__

__all__ = [
    "AxisRange",
    "FontDir",
    "FontRecord",
    "GeneratorConfig",
    "MetadataError",
    "ScanResult",
    "TextProtoError",
    "Variant",
    "generate",
]
