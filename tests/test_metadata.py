"""Tests for font record extraction from description files."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from gfont2ts.core.exceptions import MetadataError
from gfont2ts.core.metadata import parse_metadata, read_font_dir, scan
from gfont2ts.core.models import AxisRange, FontDir, Variant
from gfont2ts.core.scanner import list_font_dirs


class TestParseMetadata:
    """Tests for parse_metadata function."""

    def test_roboto_example(self, roboto_metadata: str) -> None:
        """Test the two-variant Roboto description without axes."""
        record = parse_metadata(roboto_metadata, "roboto/METADATA.pb")

        assert record.to_dict() == {
            "name": "Roboto",
            "variants": [
                {"style": "normal", "weight": 400},
                {"style": "italic", "weight": 400},
            ],
            "hasNormal": True,
            "hasItalic": True,
            "axes": {},
        }

    def test_escaped_non_ascii_name(self) -> None:
        """Test that octal-escaped UTF-8 in the name is decoded."""
        record = parse_metadata(
            'name: "Caf\\303\\251"\nfonts { style: "normal" weight: 400 }'
        )
        assert record.name == "Café"

    def test_name_is_top_level_field(self) -> None:
        """Test that names nested in fonts blocks are not taken as the family."""
        record = parse_metadata(
            'fonts {\n  name: "Inner"\n  style: "normal"\n  weight: 400\n}\n'
            'name: "Outer"\n'
        )
        assert record.name == "Outer"

    def test_axes(self) -> None:
        """Test that recognized axes are kept in declaration order."""
        record = parse_metadata(
            'name: "Flex"\n'
            'fonts { style: "normal" weight: 400 }\n'
            'axes { tag: "wdth" min_value: 25.0 max_value: 151.0 }\n'
            'axes { tag: "wght" min_value: 100 max_value: 1000 }\n'
            'axes { tag: "slnt" min_value: -10.0 max_value: 0.0 }\n'
        )
        assert list(record.axes) == ["wdth", "wght", "slnt"]
        assert record.axes["wght"] == AxisRange(min=100.0, max=1000.0)
        assert record.axes["slnt"] == AxisRange(min=-10.0, max=0.0)

    def test_missing_name_is_fatal(self) -> None:
        """Test that a description without name raises MetadataError."""
        with pytest.raises(MetadataError, match="does not contain a name"):
            parse_metadata(
                'fonts { style: "normal" weight: 400 }', "nameless/METADATA.pb"
            )

    def test_empty_name_is_fatal(self) -> None:
        """Test that a blank name counts as missing."""
        with pytest.raises(MetadataError, match="does not contain a name"):
            parse_metadata('name: "  "\nfonts { style: "normal" weight: 400 }')

    def test_missing_variants_is_fatal(self) -> None:
        """Test that a description without fonts blocks raises MetadataError."""
        with pytest.raises(MetadataError, match="does not contain variants"):
            parse_metadata('name: "Lonely"\n', "lonely/METADATA.pb")

    def test_missing_axes_is_not_fatal(self, roboto_metadata: str) -> None:
        """Test that no axes blocks means no variable axes."""
        assert dict(parse_metadata(roboto_metadata).axes) == {}

    def test_unknown_axis_is_dropped(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that unrecognized axis tags are logged and dropped."""
        with caplog.at_level(logging.WARNING):
            record = parse_metadata(
                'name: "Odd"\n'
                'fonts { style: "normal" weight: 400 }\n'
                'axes { tag: "ZZZZ" min_value: 0 max_value: 1 }\n'
                'axes { tag: "wght" min_value: 300 max_value: 500 }\n'
            )
        assert list(record.axes) == ["wght"]
        assert "unrecognized axis tag 'ZZZZ'" in caplog.text

    def test_axis_without_bounds_is_dropped(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that an axis without numeric bounds is logged and dropped."""
        with caplog.at_level(logging.WARNING):
            record = parse_metadata(
                'name: "Odd"\n'
                'fonts { style: "normal" weight: 400 }\n'
                'axes { tag: "wdth" min_value: 75 }\n'
            )
        assert dict(record.axes) == {}
        assert "wdth" in caplog.text

    def test_unusable_variant_keeps_sentinels(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that bad style or weight yields sentinel values, not a drop."""
        with caplog.at_level(logging.WARNING):
            record = parse_metadata(
                'name: "Odd"\n'
                'fonts { style: "oblique" weight: 400 }\n'
                'fonts { style: "normal" weight: 400.5 }\n'
                'fonts { style: "italic" }\n'
            )
        assert record.variants == (
            Variant(style="", weight=400),
            Variant(style="normal", weight=-1),
            Variant(style="italic", weight=-1),
        )
        assert not any(variant.is_valid for variant in record.variants)
        assert record.has_normal
        assert record.has_italic
        assert "unsupported style 'oblique'" in caplog.text

    def test_malformed_text_is_fatal(self) -> None:
        """Test that syntax errors abort with MetadataError."""
        with pytest.raises(MetadataError):
            parse_metadata('name: "Broken"\nfonts {\n')


class TestReadFontDir:
    """Tests for read_font_dir function."""

    def test_reads_description(self, ofl_root: str) -> None:
        """Test reading a package with METADATA.pb."""
        record = read_font_dir(FontDir(root=ofl_root, name="robotoflex"))
        assert record is not None
        assert record.name == "Roboto Flex"
        assert record.variants == (Variant(style="normal", weight=400),)
        assert list(record.axes) == [
            "GRAD",
            "XOPQ",
            "XTRA",
            "YTDE",
            "opsz",
            "slnt",
            "wdth",
            "wght",
        ]

    def test_missing_description(self, ofl_root: str) -> None:
        """Test that a package without METADATA.pb yields None."""
        assert read_font_dir(FontDir(root=ofl_root, name="librebarcode39")) is None

    def test_custom_filename(
        self, make_font_tree: Callable[[dict[str, str | None]], Path]
    ) -> None:
        """Test reading a description file with another name."""
        root = make_font_tree({"roboto": None})
        (root / "roboto" / "METADATA.textproto").write_text(
            'name: "Roboto"\nfonts { style: "normal" weight: 400 }\n',
            encoding="utf-8",
        )
        font_dir = FontDir(root=str(root), name="roboto")
        assert read_font_dir(font_dir) is None
        record = read_font_dir(font_dir, "METADATA.textproto")
        assert record is not None
        assert record.name == "Roboto"

    def test_error_names_directory(
        self, make_font_tree: Callable[[dict[str, str | None]], Path]
    ) -> None:
        """Test that fatal errors mention the package directory."""
        root = make_font_tree({"broken": 'fonts { style: "normal" weight: 400 }\n'})
        with pytest.raises(MetadataError, match="broken/METADATA.pb"):
            read_font_dir(FontDir(root=str(root), name="broken"))


class TestScan:
    """Tests for scan function."""

    def test_scan_fixture_tree(self, ofl_root: str) -> None:
        """Test scanning the fixture tree."""
        result = scan(list_font_dirs([ofl_root]))

        assert sorted(record.name for record in result.records) == [
            "Inter",
            "Roboto",
            "Roboto Flex",
        ]
        assert result.missing == ["librebarcode39"]
        dirs = {r.name: d.name for r, d in zip(result.records, result.record_dirs)}
        assert dirs == {
            "Inter": "inter",
            "Roboto": "roboto",
            "Roboto Flex": "robotoflex",
        }

    def test_scan_preserves_enumeration_order(
        self, make_font_tree: Callable[[dict[str, str | None]], Path]
    ) -> None:
        """Test that records follow the order of the given directories."""
        root = make_font_tree(
            {
                "a": 'name: "A"\nfonts { style: "normal" weight: 400 }',
                "b": 'name: "B"\nfonts { style: "normal" weight: 400 }',
            }
        )
        font_dirs = [FontDir(root=str(root), name=name) for name in ("b", "a")]
        result = scan(font_dirs)

        assert [record.name for record in result.records] == ["B", "A"]

    def test_scan_aborts_on_fatal_error(
        self, make_font_tree: Callable[[dict[str, str | None]], Path]
    ) -> None:
        """Test that one bad description aborts the whole scan."""
        root = make_font_tree(
            {
                "good": 'name: "Good"\nfonts { style: "normal" weight: 400 }',
                "bad": 'name: "Bad"\n',
            }
        )
        with pytest.raises(MetadataError, match="bad/METADATA.pb"):
            scan(list_font_dirs([str(root)]))
