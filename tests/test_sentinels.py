#
# Scinot - Sentinels Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import copy
import pickle

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from scinot.sentinels import UNSET, UnsetType, ifunset


# Tests ----------------------------------------------------------------------------------------------------------------

class TestUnset:
    def test_singleton_identity(self):
        """Ensure UNSET is a singleton object."""
        assert UNSET is UnsetType()

    def test_repr(self):
        assert repr(UNSET) == "<UNSET>"

    def test_falsy(self):
        assert not UNSET
        assert bool(UNSET) is False

    def test_identity_equality(self):
        assert UNSET == UNSET
        assert UNSET != None  # noqa: E711
        assert UNSET != 0
        assert hash(UNSET) == hash(UnsetType())

    def test_pickle_and_copy(self):
        """Pickling and copying keep the singleton."""
        assert pickle.loads(pickle.dumps(UNSET)) is UNSET
        assert copy.copy(UNSET) is UNSET
        assert copy.deepcopy(UNSET) is UNSET


class TestIfUnset:

    @pytest.mark.parametrize('value, expected', [
        pytest.param(UNSET, "default", id='unset'),
        pytest.param(None, None, id='none'),
        pytest.param(0, 0, id='zero'),
        pytest.param("", "", id='empty'),
    ])
    def test_ifunset(self, value, expected):
        assert ifunset(value, default="default") == expected
