import pytest

from vintfkit.kernel_config import (
    KernelConfigType,
    KernelConfigTypedValue,
    Tristate,
    parse_kernel_config_int,
    parse_kernel_config_typed_value,
    parse_kernel_config_value,
    parse_range,
    parse_tristate,
)


@pytest.mark.parametrize(
    "text, expected",
    [("y", Tristate.YES), ("n", Tristate.NO), ("m", Tristate.MODULE)],
)
def test_parse_tristate(text, expected):
    assert parse_tristate(text) is expected
    assert str(expected) == text


def test_parse_tristate_invalid():
    with pytest.raises(ValueError):
        parse_tristate("x")


def test_parse_int_bases():
    assert parse_kernel_config_int("0x10") == 16
    assert parse_kernel_config_int("010") == 8
    assert parse_kernel_config_int("10") == 10


def test_parse_int_wraps_to_signed():
    assert parse_kernel_config_int("18446744073709551615") == -1
    assert parse_kernel_config_int("-1") == -1


@pytest.mark.parametrize("number", [0, 1, 7, 4096, -5, 2**63 - 1, -(2**63)])
def test_parse_int_round_trip(number):
    assert parse_kernel_config_int(str(number)) == number


@pytest.mark.parametrize(
    "text", ["", "abc", "0x", "08", "1 ", "-", "18446744073709551616", "1.0"]
)
def test_parse_int_invalid(text):
    with pytest.raises(ValueError):
        parse_kernel_config_int(text)


def test_parse_range():
    assert parse_range("1-5") == (1, 5)


@pytest.mark.parametrize("text", ["15", "a-5", "1-", "-1-2"])
def test_parse_range_invalid(text):
    with pytest.raises(ValueError):
        parse_range(text)


def test_typed_value_string():
    value = parse_kernel_config_typed_value('"abc"')
    assert value == KernelConfigTypedValue(KernelConfigType.STRING, "abc")
    assert str(value) == "abc"


def test_typed_value_empty_string():
    value = parse_kernel_config_typed_value('""')
    assert value.type is KernelConfigType.STRING
    assert value.value == ""


def test_typed_value_integer_preferred_over_tristate():
    value = parse_kernel_config_typed_value("0")
    assert value.type is KernelConfigType.INTEGER
    assert value.value == 0


def test_typed_value_tristate():
    value = parse_kernel_config_typed_value("m")
    assert value == KernelConfigTypedValue(KernelConfigType.TRISTATE, Tristate.MODULE)


@pytest.mark.parametrize("text", ["foo", '"', "yes"])
def test_typed_value_invalid(text):
    with pytest.raises(ValueError):
        parse_kernel_config_typed_value(text)


@pytest.mark.parametrize(
    "text, config_type",
    [
        ("1-3", KernelConfigType.RANGE),
        ("42", KernelConfigType.INTEGER),
        ("y", KernelConfigType.TRISTATE),
        ('"quoted"', KernelConfigType.STRING),
    ],
)
def test_value_round_trip(text, config_type):
    value = parse_kernel_config_value(text, config_type)
    assert value.type is config_type
    assert str(value) == text


def test_value_wrong_type():
    with pytest.raises(ValueError):
        parse_kernel_config_value("y", KernelConfigType.INTEGER)