#
# Scinot - Utils Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from scinot.number import SciNot
from scinot.utils import class_name


# Tests ----------------------------------------------------------------------------------------------------------------

class TestClassName:

    @pytest.mark.parametrize('obj, fully_qualified, expected', [
        pytest.param(10, False, "int", id='instance'),
        pytest.param(int, False, "int", id='class'),
        pytest.param(10, True, "int", id='builtin_qualified'),
        pytest.param(SciNot.one(), False, "SciNot", id='user_instance'),
        pytest.param(SciNot, True, "scinot.number.SciNot", id='user_class_qualified'),
        pytest.param(SciNot.one(), True, "scinot.number.SciNot", id='user_instance_qualified'),
    ])
    def test_class_name(self, obj, fully_qualified, expected):
        assert class_name(obj, fully_qualified=fully_qualified) == expected
