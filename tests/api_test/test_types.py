# tests/api_test/test_types.py

import math

import pytest

from console_api.types import TypeCoercer, VariableType


class TestDefaults:

    @pytest.mark.parametrize("var_type, expected", [
        (VariableType.BOOLEAN, False),
        (VariableType.INTEGER, 0),
        (VariableType.FLOAT, 0.0),
        (VariableType.STRING, ""),
    ])
    def test_zero_value(self, var_type, expected):
        assert TypeCoercer.default(var_type) == expected
        assert type(TypeCoercer.default(var_type)) is type(expected)


class TestParseBoolean:

    @pytest.mark.parametrize("raw", ["0", "false"])
    def test_false_tokens(self, raw):
        assert TypeCoercer.parse(raw, VariableType.BOOLEAN) is False

    @pytest.mark.parametrize("raw", ["1", "true", "False", "FALSE", "no", "off", "", "00", " 0"])
    def test_everything_else_is_true(self, raw):
        """Only the exact tokens "0" and "false" are false."""
        assert TypeCoercer.parse(raw, VariableType.BOOLEAN) is True


class TestParseNumbers:

    @pytest.mark.parametrize("raw, expected", [
        ("42", 42),
        ("-17", -17),
        ("+8", 8),
        ("007", 7),
        ("  12", 12),
        ("12abc", 12),
        ("3.9", 3),
        ("abc", 0),
        ("", 0),
        ("-", 0),
        ("\u0663", 0),
        ("1\u0663", 1),
    ])
    def test_integer(self, raw, expected):
        assert TypeCoercer.parse(raw, VariableType.INTEGER) == expected

    @pytest.mark.parametrize("raw, expected", [
        ("1.5", 1.5),
        ("-0.25", -0.25),
        (".5", 0.5),
        ("2.", 2.0),
        ("10", 10.0),
        ("1e3", 1000.0),
        ("1.5xyz", 1.5),
        ("1e", 1.0),
        ("xyz", 0.0),
        ("", 0.0),
        ("\u0663.5", 0.0),
    ])
    def test_float(self, raw, expected):
        value = TypeCoercer.parse(raw, VariableType.FLOAT)
        assert isinstance(value, float)
        assert value == pytest.approx(expected)

    @pytest.mark.parametrize("raw, expected", [
        ("inf", math.inf),
        ("-INF", -math.inf),
        ("Infinity", math.inf),
        ("+infinity", math.inf),
        ("inferno", math.inf),
    ])
    def test_float_infinity(self, raw, expected):
        assert TypeCoercer.parse(raw, VariableType.FLOAT) == expected

    @pytest.mark.parametrize("raw", ["nan", "NaN", "-nan"])
    def test_float_nan(self, raw):
        assert math.isnan(TypeCoercer.parse(raw, VariableType.FLOAT))

    def test_string_verbatim(self):
        assert TypeCoercer.parse("  spaced out ", VariableType.STRING) == "  spaced out "


class TestWellFormed:

    @pytest.mark.parametrize("raw, var_type, expected", [
        ("12", VariableType.INTEGER, True),
        ("12abc", VariableType.INTEGER, False),
        ("", VariableType.INTEGER, False),
        ("1.25", VariableType.FLOAT, True),
        ("1.25.3", VariableType.FLOAT, False),
        ("inf", VariableType.FLOAT, True),
        ("\u0663", VariableType.INTEGER, False),
        ("anything", VariableType.BOOLEAN, True),
        ("anything", VariableType.STRING, True),
    ])
    def test_is_well_formed(self, raw, var_type, expected):
        assert TypeCoercer.is_well_formed(raw, var_type) is expected


class TestFormat:

    def test_boolean(self):
        assert TypeCoercer.format(True, VariableType.BOOLEAN) == "true"
        assert TypeCoercer.format(False, VariableType.BOOLEAN) == "false"

    def test_integer_signed_no_padding(self):
        assert TypeCoercer.format(-42, VariableType.INTEGER) == "-42"
        assert TypeCoercer.format(7, VariableType.INTEGER) == "7"

    def test_float_four_decimals(self):
        assert TypeCoercer.format(0.5, VariableType.FLOAT) == "0.5000"
        assert TypeCoercer.format(-3.14159, VariableType.FLOAT) == "-3.1416"

    def test_float_custom_precision(self):
        assert TypeCoercer.format(0.5, VariableType.FLOAT, float_precision=1) == "0.5"

    def test_string_unquoted(self):
        assert TypeCoercer.format('say "hi"', VariableType.STRING) == 'say "hi"'


class TestValidate:

    def test_int_widened_for_float(self):
        value = TypeCoercer.validate(3, VariableType.FLOAT)
        assert value == 3.0
        assert isinstance(value, float)

    @pytest.mark.parametrize("value, var_type", [
        (True, VariableType.INTEGER),
        (True, VariableType.FLOAT),
        (1, VariableType.BOOLEAN),
        (1.5, VariableType.INTEGER),
        (5, VariableType.STRING),
        ("5", VariableType.INTEGER),
    ])
    def test_mismatched_value_raises(self, value, var_type):
        with pytest.raises(TypeError):
            TypeCoercer.validate(value, var_type)


class TestFormatParseRoundTrip:

    @pytest.mark.parametrize("var_type, value", [
        (VariableType.BOOLEAN, True),
        (VariableType.BOOLEAN, False),
        (VariableType.INTEGER, -123456),
        (VariableType.FLOAT, 2.5),
        (VariableType.FLOAT, -0.0625),
        (VariableType.STRING, "hello world"),
    ])
    def test_parse_of_format_reproduces_value(self, var_type, value):
        text = TypeCoercer.format(value, var_type)
        assert TypeCoercer.parse(text, var_type) == value
