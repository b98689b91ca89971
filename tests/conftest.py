import os
from collections.abc import Callable
from pathlib import Path

import pytest

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


def get_fixture(name: str) -> str:
    """Get a fixture by name."""
    return os.path.join(FIXTURES_DIR, name)


@pytest.fixture
def roboto_metadata() -> str:
    """Description file of the Roboto example: two static variants, no axes."""
    return """\
name: "Roboto"
fonts {
  style: "normal"
  weight: 400
}
fonts {
  style: "italic"
  weight: 400
}
"""


@pytest.fixture
def ofl_root() -> str:
    """Fixture tree with three described packages and one bare package."""
    return get_fixture("ofl")


@pytest.fixture
def make_font_tree(tmp_path: Path) -> Callable[[dict[str, str | None]], Path]:
    """Build a root directory with one package per entry.

    Entries mapped to None get a package directory without METADATA.pb.
    """

    def make(packages: dict[str, str | None]) -> Path:
        root = tmp_path / "ofl"
        root.mkdir(exist_ok=True)
        for name, metadata in packages.items():
            package = root / name
            package.mkdir()
            if metadata is not None:
                (package / "METADATA.pb").write_text(metadata, encoding="utf-8")
        return root

    return make
