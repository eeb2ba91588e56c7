import pytest

from writ import (
    ConversionError,
    OptionSpecError,
    float32,
    int8,
    int16,
    int32,
    uint,
    uint8,
    uint16,
    uint32,
    uint64,
)
from writ.decoders import FloatDecoder, IntDecoder, UintDecoder, new_option_decoder


@pytest.mark.parametrize(
    "value_type, arg, expected",
    [
        (int8, "-128", -128),
        (int8, "127", 127),
        (int8, "+5", 5),
        (int16, "-32768", -32768),
        (int16, "255", 255),
        (int32, "2147483647", 2147483647),
        (int, "-9223372036854775808", -9223372036854775808),
        (int, "9223372036854775807", 9223372036854775807),
        (int, "007", 7),
    ],
)
def test_signed_in_range(value_type, arg, expected):
    values = {}
    new_option_decoder(values, "n", value_type).decode(arg)

    assert values["n"] == expected


@pytest.mark.parametrize(
    "value_type, arg",
    [
        (int8, "-129"),
        (int8, "128"),
        (int8, "255"),
        (int16, "32768"),
        (int32, "-2147483649"),
        (int, "9223372036854775808"),
        (int, "18446744073709551615"),
    ],
)
def test_signed_overflow(value_type, arg):
    with pytest.raises(ConversionError, match="would overflow"):
        new_option_decoder({}, "n", value_type).decode(arg)


@pytest.mark.parametrize("arg", ["1.0", "", "0x10", "1e3", " 1", "1_000", "--1"])
def test_signed_syntax(arg):
    with pytest.raises(ConversionError, match="invalid syntax"):
        IntDecoder({}, "n").decode(arg)


@pytest.mark.parametrize(
    "value_type, arg, expected",
    [
        (uint8, "255", 255),
        (uint16, "65535", 65535),
        (uint32, "4294967295", 4294967295),
        (uint64, "18446744073709551615", 18446744073709551615),
        (uint, "0", 0),
    ],
)
def test_unsigned_in_range(value_type, arg, expected):
    values = {}
    new_option_decoder(values, "n", value_type).decode(arg)

    assert values["n"] == expected


@pytest.mark.parametrize(
    "bits, arg",
    [(8, "256"), (16, "65536"), (32, "4294967296"), (64, "18446744073709551616")],
)
def test_unsigned_overflow(bits, arg):
    with pytest.raises(ConversionError, match=f"would overflow uint{bits}"):
        UintDecoder({}, "n", bits).decode(arg)


@pytest.mark.parametrize("arg", ["-1", "+1", "1.0", ""])
def test_unsigned_rejects_signs_and_fractions(arg):
    with pytest.raises(ConversionError, match="invalid syntax"):
        UintDecoder({}, "n", 8).decode(arg)


@pytest.mark.parametrize(
    "arg, expected",
    [
        ("2", 2.0),
        ("-2.5", -2.5),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("1E-2", 0.01),
        ("+inf", float("inf")),
        ("-Infinity", float("-inf")),
    ],
)
def test_float64(arg, expected):
    values = {}
    new_option_decoder(values, "x", float).decode(arg)

    assert values["x"] == expected


def test_float_nan():
    values = {}
    FloatDecoder(values, "x").decode("NaN")

    assert values["x"] != values["x"]


def test_float32_is_rounded_to_single_precision():
    values = {}
    new_option_decoder(values, "x", float32).decode("0.1")

    assert values["x"] == pytest.approx(0.1, rel=1e-7)
    assert values["x"] != 0.1


@pytest.mark.parametrize(
    "arg", ["3.4028235e38", "3.40282350e38", "-3.4028235e38", "3.40282356e38"]
)
def test_float32_largest_value_is_accepted(arg):
    values = {}
    FloatDecoder(values, "x", 32).decode(arg)

    assert abs(values["x"]) == 3.4028234663852886e38


@pytest.mark.parametrize("arg", ["3.5e38", "-1e39", "3.4028236e38"])
def test_float32_overflow(arg):
    with pytest.raises(ConversionError, match="would overflow float32"):
        FloatDecoder({}, "x", 32).decode(arg)


def test_float64_out_of_range():
    with pytest.raises(ConversionError, match="value out of range"):
        FloatDecoder({}, "x").decode("1e400")


@pytest.mark.parametrize("arg", ["", "abc", "1.2.3", "0x1p3", "1,5"])
def test_float_syntax(arg):
    with pytest.raises(ConversionError, match="invalid syntax"):
        FloatDecoder({}, "x").decode(arg)


def test_decoder_writes_attributes_of_plain_objects():
    class Target:
        level = 0

    target = Target()
    new_option_decoder(target, "level", int8).decode("-3")

    assert target.level == -3


def test_unsupported_type():
    with pytest.raises(OptionSpecError, match="no option decoder available"):
        new_option_decoder({}, "x", complex)


def test_bool_needs_a_flag_decoder():
    with pytest.raises(OptionSpecError):
        new_option_decoder({}, "x", bool)


def test_none_target_is_rejected():
    with pytest.raises(OptionSpecError):
        new_option_decoder(None, "x", int)
