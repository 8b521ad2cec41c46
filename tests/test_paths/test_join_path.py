"""
Test Suite for Single-Separator Path Composition.

Tests that joining never produces duplicate or missing separators and leaves
everything else about the inputs untouched.
"""

# Third-Party Imports
import pytest

# Internal Imports
from folderfun.core.paths import join_path


# JOIN: SEPARATOR NORMALIZATION
@pytest.mark.unit
@pytest.mark.parametrize(
    "base, fragment",
    [
        ("/a/", "b"),
        ("/a", "b"),
        ("/a", "/b"),
        ("/a/", "/b"),
        ("/a//", "//b"),
    ],
)
def test_join_collapses_separators(base, fragment):
    """Test all separator placements yield the same result."""
    assert join_path(base, fragment) == "/a/b"


@pytest.mark.unit
def test_join_keeps_fragment_interior():
    """Test nested fragments and trailing separators are preserved."""
    assert join_path("/data", "raw/2024/") == "/data/raw/2024/"
    assert join_path("/data", "raw//x") == "/data/raw//x"


@pytest.mark.unit
def test_join_relative_base():
    """Test relative roots are joined without being anchored anywhere."""
    assert join_path("data", "x.txt") == "data/x.txt"
    assert join_path("./data/", "x.txt") == "./data/x.txt"


# JOIN: EMPTY FRAGMENTS
@pytest.mark.unit
def test_join_without_fragment_returns_base_unchanged():
    """Test None and empty fragments return the base as given."""
    assert join_path("/data/raw/") == "/data/raw/"
    assert join_path("/data/raw/", None) == "/data/raw/"
    assert join_path("/data/raw/", "") == "/data/raw/"


@pytest.mark.unit
def test_join_separator_only_fragment_returns_base():
    """Test a fragment made only of separators adds nothing."""
    assert join_path("/data/raw/", "/") == "/data/raw/"


# JOIN: FILESYSTEM ROOT
@pytest.mark.unit
def test_join_onto_filesystem_root():
    """Test joining onto '/' keeps a single leading separator."""
    assert join_path("/", "etc") == "/etc"
    assert join_path("//", "/etc") == "/etc"
