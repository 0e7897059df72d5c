"""Test version functionality."""

import re

from phpformat import __version__
from phpformat.version import (
    PHP_SYNTAX_VERSION,
    PHPFORMAT_VERSION,
    PHPFORMAT_VERSION_MAJOR,
    PHPFORMAT_VERSION_MINOR,
    PHPFORMAT_VERSION_PATCH,
    get_version_info,
    get_version_string,
)


def test_version_constants() -> None:
    """Test version constants are properly defined."""
    assert isinstance(PHPFORMAT_VERSION_MAJOR, int)
    assert isinstance(PHPFORMAT_VERSION_MINOR, int)
    assert isinstance(PHPFORMAT_VERSION_PATCH, int)

    assert (
        f"{PHPFORMAT_VERSION_MAJOR}.{PHPFORMAT_VERSION_MINOR}.{PHPFORMAT_VERSION_PATCH}"
        == PHPFORMAT_VERSION
    )
    assert __version__ == PHPFORMAT_VERSION


def test_version_functions() -> None:
    """Test version helper functions."""
    version_str = get_version_string()
    assert "phpformat" in version_str
    assert PHPFORMAT_VERSION in version_str
    assert PHP_SYNTAX_VERSION in version_str

    info = get_version_info()
    assert set(info) == {"phpformat", "php"}
    assert info["phpformat"]["major"] == PHPFORMAT_VERSION_MAJOR
    assert info["phpformat"]["minor"] == PHPFORMAT_VERSION_MINOR
    assert info["phpformat"]["patch"] == PHPFORMAT_VERSION_PATCH
    assert info["phpformat"]["version"] == PHPFORMAT_VERSION
    assert info["php"]["version"] == PHP_SYNTAX_VERSION


def test_version_format() -> None:
    """Test version string formats."""
    assert re.match(r"^\d+\.\d+\.\d+$", PHPFORMAT_VERSION)
    assert re.match(r"^\d+\.\d+$", PHP_SYNTAX_VERSION)
