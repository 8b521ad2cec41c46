"""
Test Suite for the Error Hierarchy.
"""

# Third-Party Imports
import pytest

# Internal Imports
from folderfun.core.exceptions import (
    AccessorNotFoundError,
    ConfigurationError,
    FolderFunError,
)


@pytest.mark.unit
def test_configuration_error_attributes():
    """Test the error records the folder and attempted variables."""
    err = ConfigurationError("Data", ["DATA"])

    assert err.name == "Data"
    assert err.variables == ("DATA",)
    assert "'Data'" in str(err)
    assert "'DATA'" in str(err)
    assert isinstance(err, FolderFunError)


@pytest.mark.unit
def test_accessor_not_found_is_lookup_error():
    """Test undefined accessors can be caught as LookupError."""
    err = AccessorNotFoundError("ffIn")

    assert err.accessor_name == "ffIn"
    assert isinstance(err, LookupError)
    assert isinstance(err, FolderFunError)
    assert "'ffIn'" in str(err)


@pytest.mark.unit
def test_configuration_error_is_not_lookup_error():
    """Test the two kinds stay distinguishable."""
    with pytest.raises(ConfigurationError):
        try:
            raise ConfigurationError("Foo", ["Foo"])
        except LookupError:
            pytest.fail("ConfigurationError must not be a LookupError")
