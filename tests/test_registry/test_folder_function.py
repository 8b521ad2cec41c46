"""
Test Suite for the FolderFunction value object.

Tests accessor naming, effective base computation, invocation and
immutability.
"""

# Standard Imports
from pathlib import Path

# Third-Party Imports
import pytest
from pydantic import ValidationError

# Internal Imports
from folderfun.registry import FolderFunction


# CREATION
@pytest.mark.unit
def test_create_basic():
    """Test factory fields for an explicit root without postpend."""
    fn = FolderFunction.create("In", "/data/raw/")

    assert fn.name == "In"
    assert fn.accessor_name == "ffIn"
    assert fn.root == "/data/raw/"
    assert fn.postpend is None
    assert fn.effective_base == "/data/raw/"
    assert fn.source == "explicit"


@pytest.mark.unit
@pytest.mark.parametrize(
    "root, postpend",
    [("/srv/data", "proj1"), ("/srv/data/", "proj1"), ("/srv/data", "/proj1"), ("/srv/data/", "/proj1")],
)
def test_postpend_joined_once(root, postpend):
    """Test postpend is joined with a single separator regardless of input."""
    fn = FolderFunction.create("Data", root, postpend=postpend)

    assert fn.effective_base == "/srv/data/proj1"
    assert fn.root == root


@pytest.mark.unit
def test_empty_postpend_ignored():
    """Test an empty postpend leaves the root as the base."""
    fn = FolderFunction.create("Data", "/srv/data/", postpend="")

    assert fn.effective_base == "/srv/data/"
    assert fn.postpend is None


@pytest.mark.unit
def test_custom_prefix_and_source():
    """Test prefix and provenance are recorded."""
    fn = FolderFunction.create("Out", "/o", prefix="dir", source="OUT")

    assert fn.accessor_name == "dirOut"
    assert fn.source == "OUT"


@pytest.mark.unit
def test_empty_root_rejected():
    """Test a folder function needs a root."""
    with pytest.raises(ValidationError):
        FolderFunction.create("In", "")


# INVOCATION
@pytest.mark.unit
def test_call_without_fragment_returns_base():
    """Test calling with no fragment returns the base unchanged."""
    fn = FolderFunction.create("In", "/data/raw/")

    assert fn() == "/data/raw/"
    assert fn("") == "/data/raw/"


@pytest.mark.unit
def test_call_joins_fragment():
    """Test fragments are joined with a single separator."""
    fn = FolderFunction.create("In", "/data/raw/")

    assert fn("sample.txt") == "/data/raw/sample.txt"
    assert fn("/sample.txt") == "/data/raw/sample.txt"
    assert fn("sub/dir/file.csv") == "/data/raw/sub/dir/file.csv"


@pytest.mark.unit
def test_call_accepts_path_fragment(registry):
    """Test pathlib fragments give the same string as registry.invoke."""
    fn = registry.define("In", path="/data/raw/")

    assert fn(Path("x.txt")) == "/data/raw/x.txt"
    assert fn(Path("sub") / "x.txt") == registry.invoke("ffIn", Path("sub") / "x.txt")


@pytest.mark.unit
def test_call_never_touches_filesystem(tmp_path):
    """Test paths to nonexistent locations are produced without error."""
    missing = tmp_path / "does" / "not" / "exist"
    fn = FolderFunction.create("Gone", str(missing))

    assert fn("x.txt") == f"{missing}/x.txt"
    assert not Path(missing).exists()


# IMMUTABILITY
@pytest.mark.unit
def test_frozen():
    """Test the effective base cannot be changed after creation."""
    fn = FolderFunction.create("In", "/data/raw/")

    with pytest.raises(ValidationError):
        fn.effective_base = "/elsewhere"


@pytest.mark.unit
def test_repr():
    """Test repr shows accessor and base."""
    fn = FolderFunction.create("In", "/data/raw/")

    assert repr(fn) == "FolderFunction('ffIn' -> '/data/raw/')"
