import dataclasses
import os
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

try:
    from typing import Self  # type: ignore
except ImportError:
    from typing_extensions import Self

from gfont2ts.core.constants import MISSING_STYLE, MISSING_WEIGHT


@dataclasses.dataclass(frozen=True)
class Variant:
    """Static style/weight pair declared by a ``fonts`` block.

    Attributes:
        style: "normal", "italic", or "" when the block has no usable style.
        weight: Nominal weight (100-900), or -1 when the block has no usable
            weight.
    """

    style: str
    weight: int

    @property
    def is_valid(self) -> bool:
        return self.style != MISSING_STYLE and self.weight != MISSING_WEIGHT

    def to_dict(self) -> dict[str, str | int]:
        return {"style": self.style, "weight": self.weight}


@dataclasses.dataclass(frozen=True)
class AxisRange:
    """Inclusive bounds of a variation axis."""

    min: float
    max: float

    def covers(self, value: float) -> bool:
        return self.min <= value <= self.max

    def to_dict(self) -> dict[str, float]:
        return {"min": self.min, "max": self.max}


@dataclasses.dataclass(frozen=True)
class FontRecord:
    """Metadata of one font family.

    Attributes:
        name: Family name, never empty.
        variants: Static variants in declaration order.
        axes: Variation axes keyed by tag, in declaration order.
    """

    name: str
    variants: tuple[Variant, ...]
    axes: Mapping[str, AxisRange] = dataclasses.field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        # Freeze containers handed in by callers.
        object.__setattr__(self, "variants", tuple(self.variants))
        object.__setattr__(self, "axes", MappingProxyType(dict(self.axes)))

    @property
    def has_normal(self) -> bool:
        return any(variant.style == "normal" for variant in self.variants)

    @property
    def has_italic(self) -> bool:
        return any(variant.style == "italic" for variant in self.variants)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "variants": [variant.to_dict() for variant in self.variants],
            "hasNormal": self.has_normal,
            "hasItalic": self.has_italic,
            "axes": {tag: axis.to_dict() for tag, axis in self.axes.items()},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(
            name=str(data["name"]),
            variants=tuple(
                Variant(style=str(v["style"]), weight=int(v["weight"]))
                for v in data["variants"]
            ),
            axes={
                str(tag): AxisRange(min=float(a["min"]), max=float(a["max"]))
                for tag, a in data.get("axes", {}).items()
            },
        )


@dataclasses.dataclass(frozen=True)
class FontDir:
    """Immediate child directory of a scanned root."""

    root: str
    name: str

    @property
    def path(self) -> str:
        return os.path.join(self.root, self.name)


@dataclasses.dataclass
class ScanResult:
    """Records parsed from a scan, in enumeration order.

    Attributes:
        records: One record per directory holding a description file.
        missing: Names of directories without a description file.
        record_dirs: Directory of each record, parallel to records.
    """

    records: list[FontRecord] = dataclasses.field(default_factory=list)
    missing: list[str] = dataclasses.field(default_factory=list)
    record_dirs: list[FontDir] = dataclasses.field(default_factory=list)
