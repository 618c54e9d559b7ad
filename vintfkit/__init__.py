"""Value types, parsers and helpers for Android VINTF metadata."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "fqname",
    "kernel_config",
    "properties",
    "summary",
    "utils",
    "versions",
]