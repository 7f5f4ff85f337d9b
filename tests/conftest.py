#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from scinot.number import SciNot, ZERO


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def sample_values() -> list[SciNot]:
    """SciNot values spanning zero, both signs, exact range, the float edge and beyond."""
    return [
        ZERO,
        SciNot.from_float(1.0),
        SciNot.from_float(-1.0),
        SciNot.from_float(0.1),
        SciNot.from_float(1234.5),
        SciNot.from_float(-98765.4321),
        SciNot.from_float(6.02214076e11),
        SciNot(3.5, -12),
        SciNot(7.25, 13),
        SciNot(-2.0, 40),
        SciNot(1.0, 100),
        SciNot(9.99, 84),
        SciNot(1.5, 308),
        SciNot(4.2, 500),
        SciNot(-8.8, 1000),
        SciNot(2.2, -400),
    ]


@pytest.fixture
def sample_pairs(sample_values) -> list[tuple[SciNot, SciNot]]:
    """All ordered pairs of sample_values."""
    return [(a, b) for a in sample_values for b in sample_values]
