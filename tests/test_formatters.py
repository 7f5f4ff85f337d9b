#
# Scinot - Formatters Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from scinot.formatters import fmt_type, fmt_value
from scinot.number import SciNot


# Local Classes & Methods ----------------------------------------------------------------------------------------------

class BrokenRepr:
    def __repr__(self):
        raise RuntimeError("boom")


class Tagged:
    def __repr__(self):
        return "<tagged>"


# Tests ----------------------------------------------------------------------------------------------------------------

class TestFmtType:

    @pytest.mark.parametrize('obj, expected', [
        pytest.param(42, "<int>", id='instance'),
        pytest.param(float, "<float>", id='class'),
        pytest.param(None, "<NoneType>", id='none'),
        pytest.param(SciNot.one(), "<SciNot>", id='scinot'),
    ])
    def test_ascii(self, obj, expected):
        assert fmt_type(obj) == expected

    @pytest.mark.parametrize('style, expected', [
        pytest.param("colon", "int", id='colon'),
        pytest.param("paren", "int", id='paren'),
        pytest.param("equal", "int", id='equal'),
        pytest.param("unicode-angle", "⟨int⟩", id='unicode'),
    ])
    def test_styles(self, style, expected):
        assert fmt_type(1, style=style) == expected

    def test_fully_qualified(self):
        assert fmt_type(SciNot.one(), fully_qualified=True) == "<scinot.number.SciNot>"
        assert fmt_type(1, fully_qualified=True) == "<int>"

    def test_truncate(self):
        assert fmt_type(SciNot, max_repr=3) == "<Sci...>"


class TestFmtValue:

    @pytest.mark.parametrize('obj, expected', [
        pytest.param(42, "42", id='int'),
        pytest.param(float("nan"), "nan", id='nan'),
        pytest.param("abc", "abc", id='str'),
        pytest.param(None, "None", id='none'),
    ])
    def test_primitives_bare(self, obj, expected):
        assert fmt_value(obj) == expected

    def test_label_primitives(self):
        assert fmt_value(42, label_primitives=True) == "<int: 42>"
        assert fmt_value("abc", label_primitives=True) == "<str: 'abc'>"

    def test_object(self):
        assert fmt_value(SciNot.one()) == "<SciNot: SciNot(mantissa=1.0, exponent=0)>"

    @pytest.mark.parametrize('style, expected', [
        pytest.param("colon", "SciNot: SciNot(mantissa=1.0, exponent=0)", id='colon'),
        pytest.param("paren", "SciNot(SciNot(mantissa=1.0, exponent=0))", id='paren'),
        pytest.param("equal", "SciNot=SciNot(mantissa=1.0, exponent=0)", id='equal'),
        pytest.param("unicode-angle", "⟨SciNot: SciNot(mantissa=1.0, exponent=0)⟩", id='unicode'),
    ])
    def test_styles(self, style, expected):
        assert fmt_value(SciNot.one(), style=style) == expected

    def test_ascii_escapes_angle(self):
        assert fmt_value(Tagged()) == "<Tagged: <tagged\\>>"

    def test_truncate(self):
        assert fmt_value("x" * 10, max_repr=3) == "xxx..."
        assert fmt_value("x" * 10, max_repr=3, style="colon") == "xxx…"
        assert fmt_value("x" * 10, max_repr=0) == ""

    def test_broken_repr(self):
        assert "repr failed: RuntimeError" in fmt_value(BrokenRepr())
