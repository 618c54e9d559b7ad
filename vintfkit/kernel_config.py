"""Kernel configuration values: types, tristates, integers and ranges."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

_UINT64_MAX = 2**64 - 1
_INT64_SIGN = 2**63

_STRTOULL_RE = re.compile(
    r"[ \t\n\v\f\r]*([+-]?)(?:0[xX]([0-9a-fA-F]+)|(0[0-7]*)|([1-9][0-9]*))"
)


class KernelConfigType(Enum):
    STRING = "string"
    INTEGER = "int"
    RANGE = "range"
    TRISTATE = "tristate"

    def __str__(self) -> str:
        return self.value


class Tristate(Enum):
    NO = "n"
    YES = "y"
    MODULE = "m"

    def __str__(self) -> str:
        return self.value


KernelConfigValue = Union[str, int, tuple[int, int], Tristate]


@dataclass(frozen=True)
class KernelConfigTypedValue:
    """A kernel config value together with its type."""

    type: KernelConfigType
    value: KernelConfigValue

    def __str__(self) -> str:
        if self.type is KernelConfigType.RANGE:
            first, second = self.value
            return f"{first}-{second}"
        return str(self.value)


def parse_tristate(text: str) -> Tristate:
    try:
        return Tristate(text)
    except ValueError:
        raise ValueError(f"invalid tristate value: {text!r}") from None


def _parse_unsigned(text: str) -> int:
    """Parse like strtoull with automatic base; negative values wrap modulo 2**64."""
    match = _STRTOULL_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid kernel config integer: {text!r}")
    sign, hex_digits, oct_digits, dec_digits = match.groups()
    if hex_digits is not None:
        value = int(hex_digits, 16)
    elif oct_digits is not None:
        value = int(oct_digits, 8)
    else:
        value = int(dec_digits)
    if value > _UINT64_MAX:
        raise ValueError(f"kernel config integer out of range: {text!r}")
    if sign == "-":
        value = -value & _UINT64_MAX
    return value


def parse_kernel_config_int(text: str) -> int:
    """Parse a kernel config integer as a signed 64-bit value."""
    value = _parse_unsigned(text)
    return value - 2**64 if value >= _INT64_SIGN else value


def parse_range(text: str) -> tuple[int, int]:
    """Parse ``first-second`` into a pair of unsigned 64-bit values."""
    first, sep, second = text.partition("-")
    if not sep:
        raise ValueError(f"invalid range: {text!r}")
    return _parse_unsigned(first), _parse_unsigned(second)


def parse_kernel_config_value(text: str, config_type: KernelConfigType) -> KernelConfigTypedValue:
    """Parse ``text`` as a value of the given type."""
    if config_type is KernelConfigType.STRING:
        value: KernelConfigValue = text
    elif config_type is KernelConfigType.INTEGER:
        value = parse_kernel_config_int(text)
    elif config_type is KernelConfigType.RANGE:
        value = parse_range(text)
    else:
        value = parse_tristate(text)
    return KernelConfigTypedValue(config_type, value)


def parse_kernel_config_typed_value(text: str) -> KernelConfigTypedValue:
    """Infer the type of a value: quoted string, integer or tristate."""
    if len(text) > 1 and text[0] == '"' and text[-1] == '"':
        return KernelConfigTypedValue(KernelConfigType.STRING, text[1:-1])
    try:
        return KernelConfigTypedValue(KernelConfigType.INTEGER, parse_kernel_config_int(text))
    except ValueError:
        pass
    try:
        return KernelConfigTypedValue(KernelConfigType.TRISTATE, parse_tristate(text))
    except ValueError:
        raise ValueError(f"cannot infer kernel config value type: {text!r}") from None