"""Fully-qualified HAL instance names."""

from __future__ import annotations


def to_fq_name_string(package: str, version: object, interface: str = "", instance: str = "") -> str:
    """Format ``package@version::interface/instance``, omitting empty tail parts."""
    text = f"{package}@{version}"
    if interface:
        text += f"::{interface}"
        if instance:
            text += f"/{instance}"
    return text


def to_aidl_fqname_string(package: str, interface: str, instance: str = "") -> str:
    """Format ``package.interface/instance`` for AIDL HALs."""
    text = f"{package}.{interface}"
    if instance:
        text += f"/{instance}"
    return text


def instance_name_to_test_name(index: int, param: str) -> str:
    """Make a unique test name containing only ASCII letters, digits and underscores."""
    name = f"{index}/{param}"
    return "".join(c if c.isascii() and c.isalnum() else "_" for c in name)