"""Version, level and kernel-version values and their string forms."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum

UINT64_MAX = 2**64 - 1

_UINT_RE = re.compile(r"[ \t\n\v\f\r]*(?:0[xX]([0-9a-fA-F]+)|\+?([0-9]+))")


def _parse_uint(text: str, maximum: int = UINT64_MAX) -> int:
    """Parse an unsigned integer (decimal or 0x-hex) no larger than ``maximum``."""
    match = _UINT_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"not an unsigned integer: {text!r}")
    hex_digits, dec_digits = match.groups()
    value = int(hex_digits, 16) if hex_digits is not None else int(dec_digits)
    if value > UINT64_MAX or value > maximum:
        raise ValueError(f"value out of range: {text!r}")
    return value


class Level(IntEnum):
    """Framework compatibility matrix (FCM) version."""

    LEGACY = 0
    O = 1  # noqa: E741
    O_MR1 = 2
    P = 3
    Q = 4
    R = 5
    UNSPECIFIED = UINT64_MAX


@dataclass(frozen=True, order=True)
class Version:
    """A major.minor version."""

    major: int
    minor: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


@dataclass(frozen=True)
class VersionRange:
    """A range of minor versions sharing a major version: ``x.y-z``."""

    major: int
    min_minor: int
    max_minor: int | None = field(default=None)

    def __post_init__(self) -> None:
        if self.max_minor is None:
            object.__setattr__(self, "max_minor", self.min_minor)

    def is_single_version(self) -> bool:
        return self.min_minor == self.max_minor

    def min_ver(self) -> Version:
        return Version(self.major, self.min_minor)

    def __str__(self) -> str:
        if self.is_single_version():
            return str(self.min_ver())
        return f"{self.min_ver()}-{self.max_minor}"


@dataclass(frozen=True, order=True)
class KernelVersion:
    """A kernel version such as ``4.19.0``."""

    version: int
    major_rev: int
    minor_rev: int

    def __str__(self) -> str:
        return f"{self.version}.{self.major_rev}.{self.minor_rev}"


@dataclass(frozen=True)
class VndkVersionRange:
    """A VNDK version range such as ``27.1.0-5``."""

    sdk: int
    vndk: int
    patch_min: int
    patch_max: int | None = field(default=None)

    def __post_init__(self) -> None:
        if self.patch_max is None:
            object.__setattr__(self, "patch_max", self.patch_min)

    def is_single_version(self) -> bool:
        return self.patch_min == self.patch_max

    def __str__(self) -> str:
        text = f"{self.sdk}.{self.vndk}.{self.patch_min}"
        if not self.is_single_version():
            text += f"-{self.patch_max}"
        return text


def split_string(text: str, sep: str) -> list[str]:
    """Split on every occurrence of ``sep``; always yields at least one item."""
    return text.split(sep)


def parse_level(text: str) -> Level | int:
    """Parse an FCM level: empty, ``legacy`` or an unsigned number."""
    if not text:
        return Level.UNSPECIFIED
    if text == "legacy":
        return Level.LEGACY
    value = _parse_uint(text)
    try:
        return Level(value)
    except ValueError:
        return value


def format_level(level: int) -> str:
    """Render a level the way it appears in XML and on the command line."""
    if level == Level.UNSPECIFIED:
        return ""
    if level == Level.LEGACY:
        return "legacy"
    return str(int(level))


def parse_version(text: str) -> Version:
    parts = split_string(text, ".")
    if len(parts) != 2:
        raise ValueError(f"invalid version: {text!r}")
    return Version(_parse_uint(parts[0]), _parse_uint(parts[1]))


def parse_version_range(text: str) -> VersionRange:
    parts = split_string(text, "-")
    if len(parts) not in (1, 2):
        raise ValueError(f"invalid version range: {text!r}")
    min_ver = parse_version(parts[0])
    if len(parts) == 1:
        return VersionRange(min_ver.major, min_ver.minor)
    return VersionRange(min_ver.major, min_ver.minor, _parse_uint(parts[1]))


def parse_kernel_version(text: str) -> KernelVersion:
    parts = split_string(text, ".")
    if len(parts) != 3:
        raise ValueError(f"invalid kernel version: {text!r}")
    version, major, minor = (_parse_uint(part) for part in parts)
    return KernelVersion(version, major, minor)


def parse_vndk_version_range(text: str) -> VndkVersionRange:
    parts = split_string(text, "-")
    if len(parts) not in (1, 2):
        raise ValueError(f"invalid VNDK version range: {text!r}")
    min_parts = split_string(parts[0], ".")
    if len(min_parts) != 3:
        raise ValueError(f"invalid VNDK version range: {text!r}")
    sdk, vndk, patch_min = (_parse_uint(part) for part in min_parts)
    if len(parts) == 1:
        return VndkVersionRange(sdk, vndk, patch_min)
    return VndkVersionRange(sdk, vndk, patch_min, _parse_uint(parts[1]))