#
# MemSize - Number Format Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from decimal import Decimal
from fractions import Fraction

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from memsize.exceptions import InvalidOptionError
from memsize.number_format import NumberFormat, round_half_up


# Tests ----------------------------------------------------------------------------------------------------------------

class TestNumberFormatRender:

    @pytest.mark.parametrize('value, decimals, expected', [
        pytest.param(64, 0, "64", id='int'),
        pytest.param(1.5, 1, "1.5", id='float'),
        pytest.param(1.5, 3, "1.500", id='padded'),
        pytest.param(0.004, 2, "0.00", id='rounds_to_zero'),
        pytest.param(0.005, 2, "0.01", id='half_rounds_up'),
        pytest.param(1.005, 2, "1.01", id='float_repr_half'),
        pytest.param(0.5, 0, "1", id='half_to_one'),
        pytest.param(2.5, 0, "3", id='half_not_bankers'),
        pytest.param(9.999, 2, "10.00", id='carry'),
        pytest.param(Fraction(1, 3), 4, "0.3333", id='fraction'),
        pytest.param(Decimal("976.5625"), 2, "976.56", id='decimal'),
    ])
    def test_default_punctuation(self, value, decimals, expected):
        assert NumberFormat().render(value, decimals) == expected

    @pytest.mark.parametrize('value, decimals, expected', [
        pytest.param(123, 0, "123", id='three_digits'),
        pytest.param(1234, 0, "1,234", id='four_digits'),
        pytest.param(123456, 0, "123,456", id='six_digits'),
        pytest.param(1234567, 0, "1,234,567", id='seven_digits'),
        pytest.param(4384.0283, 2, "4,384.03", id='with_fraction'),
        pytest.param(0.1234, 4, "0.1234", id='fraction_not_grouped'),
        pytest.param(1234567.891, 3, "1,234,567.891", id='both'),
    ])
    def test_thousands_separator(self, value, decimals, expected):
        """Grouping applies only to the integer part."""
        assert NumberFormat(thousands_separator=",").render(value, decimals) == expected

    def test_custom_punctuation(self):
        nf = NumberFormat(decimal_point=",", thousands_separator=" ")
        assert nf.render(4384.0283, 2) == "4 384,03"

    def test_multichar_separator(self):
        nf = NumberFormat(thousands_separator="' ")
        assert nf.render(1234567, 0) == "1' 234' 567"

    def test_equal_punctuation_allowed(self):
        nf = NumberFormat(decimal_point=".", thousands_separator=".")
        assert nf.render(1234.5, 1) == "1.234.5"

    def test_sign_dropped(self):
        """The caller owns the sign."""
        assert NumberFormat().render(-1.25, 1) == "1.3"

    @pytest.mark.parametrize('value, exc', [
        pytest.param(float("nan"), ValueError, id='nan'),
        pytest.param(float("inf"), ValueError, id='inf'),
        pytest.param(Decimal("NaN"), ValueError, id='decimal_nan'),
        pytest.param("1.5", TypeError, id='str'),
        pytest.param(True, TypeError, id='bool'),
        pytest.param(None, TypeError, id='none'),
    ])
    def test_invalid_value(self, value, exc):
        with pytest.raises(exc):
            NumberFormat().render(value, 2)

    def test_invalid_decimals(self):
        with pytest.raises(ValueError, match="decimals must be >= 0"):
            NumberFormat().render(1.5, -1)
        with pytest.raises(TypeError, match="decimals must be int"):
            NumberFormat().render(1.5, 1.0)


class TestNumberFormatOptions:

    def test_defaults(self):
        nf = NumberFormat()
        assert nf.decimal_point == "."
        assert nf.thousands_separator == ""

    def test_update_in_place(self):
        nf = NumberFormat()
        assert nf.update({"decimal_point": ","}) is nf
        assert nf.decimal_point == ","
        assert nf.thousands_separator == ""

    def test_merge_copies(self):
        nf = NumberFormat()
        merged = nf.merge({"thousands_separator": ","})
        assert merged is not nf
        assert merged.thousands_separator == ","
        assert nf.thousands_separator == ""

    def test_unknown_key(self):
        nf = NumberFormat()
        with pytest.raises(InvalidOptionError, match='Unknown memory-size formatter option "unknownOption"') as exc:
            nf.update({"decimal_point": ",", "unknownOption": "value"})
        assert exc.value.key == "unknownOption"
        assert nf.decimal_point == "."

    @pytest.mark.parametrize('options', [
        pytest.param({"decimal_point": 1}, id='int'),
        pytest.param({"thousands_separator": None}, id='none'),
    ])
    def test_invalid_value(self, options):
        with pytest.raises(InvalidOptionError, match="expected str"):
            NumberFormat().update(options)

    def test_invalid_init(self):
        with pytest.raises(InvalidOptionError, match='"decimal_point"'):
            NumberFormat(decimal_point=None)

    def test_not_a_mapping(self):
        with pytest.raises(InvalidOptionError, match="NumberFormat or mapping"):
            NumberFormat().update([("decimal_point", ",")])


class TestRoundHalfUp:

    @pytest.mark.parametrize('value, decimals, expected', [
        pytest.param(1.205078125, 2, 121, id='down'),
        pytest.param(1.5, 0, 2, id='half'),
        pytest.param(2.5, 0, 3, id='half_even_goes_up'),
        pytest.param(Fraction(1125, 1000), 2, 113, id='fraction_half'),
        pytest.param(0, 3, 0, id='zero'),
        pytest.param(7, 2, 700, id='int'),
    ])
    def test_round(self, value, decimals, expected):
        assert round_half_up(value, decimals) == expected

    def test_negative_value(self):
        with pytest.raises(ValueError, match="non-negative"):
            round_half_up(-1.5, 0)
