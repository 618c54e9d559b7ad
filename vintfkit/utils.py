"""Small helpers shared by the VINTF objects."""

from __future__ import annotations

from typing import Any

from vintfkit.versions import Level


def convert_from_api_level(api_level: int) -> Level:
    """Infer an FCM level from a shipping API level."""
    if api_level < 26:
        return Level.LEGACY
    if api_level == 26:
        return Level.O
    if api_level == 27:
        return Level.O_MR1
    return Level.UNSPECIFIED


def merge_field(dst: Any, src: Any, empty: Any = None) -> Any:
    """Return the merge of two field values; ``empty`` means unset.

    Raises ValueError when both are set and differ.
    """
    if dst == src:
        return dst
    if src == empty:
        return dst
    if dst == empty:
        return src
    raise ValueError(f"conflicting values: {dst!r} and {src!r}")