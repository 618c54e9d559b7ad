"""Command-line argument handling for the VINTF compatibility checker."""

from __future__ import annotations

import getopt
from collections.abc import Iterable
from enum import IntEnum

from vintfkit.versions import KernelVersion, parse_kernel_version

EX_USAGE = 64


class CheckOption(IntEnum):
    """Modes and options understood by the checker."""

    # Modes
    HELP = 0
    DUMP_FILE_LIST = 1
    CHECK_COMPAT = 2
    CHECK_ONE = 3
    # Options
    ROOTDIR = 4
    PROPERTY = 5
    DIR_MAP = 6
    KERNEL = 7


class UsageError(ValueError):
    """The command line is not valid."""


_SHORT_OPTIONS = "hcD:"

_LONG_OPTIONS = {
    "help": CheckOption.HELP,
    "dump-file-list": CheckOption.DUMP_FILE_LIST,
    "check-compat": CheckOption.CHECK_COMPAT,
    "check-one": CheckOption.CHECK_ONE,
    "rootdir": CheckOption.ROOTDIR,
    "property": CheckOption.PROPERTY,
    "dirmap": CheckOption.DIR_MAP,
    "kernel": CheckOption.KERNEL,
}

_LONG_WITH_ARGUMENT = {"rootdir", "property", "dirmap", "kernel"}

_SHORT_MAP = {
    "h": CheckOption.HELP,
    "D": CheckOption.PROPERTY,
    "c": CheckOption.CHECK_COMPAT,
}


def parse_args(argv: Iterable[str]) -> dict[CheckOption, list[str]]:
    """Parse command-line arguments (without the program name).

    Returns the values given for each option, in command-line order, keyed by
    option in ascending order. Options without an argument get an empty string.
    An unknown option, a missing argument or a stray non-option argument
    yields ``{CheckOption.HELP: [""]}``.
    """
    longopts = [name + "=" if name in _LONG_WITH_ARGUMENT else name for name in _LONG_OPTIONS]
    try:
        opts, rest = getopt.gnu_getopt(list(argv), _SHORT_OPTIONS, longopts)
    except getopt.GetoptError:
        return {CheckOption.HELP: [""]}
    if rest:
        return {CheckOption.HELP: [""]}

    collected: dict[CheckOption, list[str]] = {}
    for name, value in opts:
        if name.startswith("--"):
            option = _LONG_OPTIONS[name[2:]]
        else:
            option = _SHORT_MAP[name[1:]]
        collected.setdefault(option, []).append(value)
    return dict(sorted(collected.items()))


def split_args(args: Iterable[str], sep: str) -> dict[str, str]:
    """Split each ``key<sep>value`` argument; later keys override earlier ones.

    An argument without ``sep`` maps to an empty value. Keys are sorted.
    """
    result: dict[str, str] = {}
    for arg in args:
        key, _, value = arg.partition(sep)
        result[key] = value
    return dict(sorted(result.items()))


def get_properties(args: Iterable[str]) -> dict[str, str]:
    """Turn ``key=value`` arguments into a property table."""
    return split_args(args, "=")


def get_dirmap(args: Iterable[str]) -> dict[str, str]:
    """Turn ``/partition:/host/dir`` arguments into a directory map."""
    return split_args(args, ":")


def parse_kernel_arg(args: Iterable[str]) -> tuple[KernelVersion, str]:
    """Parse the single ``x.y.z:path/to/config`` kernel argument."""
    values = list(args)
    if not values:
        raise UsageError("Missing --kernel")
    if len(values) > 1:
        raise UsageError("Can't have multiple --kernel options")
    parts = values[0].split(":")
    if len(parts) != 2:
        raise UsageError("Invalid --kernel")
    version_text, config_file = parts
    try:
        version = parse_kernel_version(version_text)
    except ValueError:
        raise UsageError(f"Cannot parse {version_text} as kernel version") from None
    return version, config_file


def usage(me: str) -> str:
    """Return the help text for the program named ``me``."""
    return (
        f"{me}: check VINTF metadata.\n"
        "    Modes:\n"
        "        --dump-file-list: Dump a list of directories / files on device\n"
        "                that is required to be used by --check-compat.\n"
        "        -c, --check-compat: check compatibility for files under the root\n"
        "                directory specified by --root-dir.\n"
        "        --check-one: check consistency of VINTF metadata for a single partition.\n"
        "\n"
        "    Options:\n"
        "        --rootdir=<dir>: specify root directory for all metadata. Same as \n"
        "                --dirmap /:<dir>\n"
        "        -D, --property <key>=<value>: specify sysprops.\n"
        "        --dirmap </system:/dir/to/system> [--dirmap </vendor:/dir/to/vendor>[...]]\n"
        "                Map partitions to directories. Cannot be specified with --rootdir."
        "        --kernel <x.y.z:path/to/config>\n"
        "                Use the given kernel version and config to check. If\n"
        "                unspecified, kernel requirements are skipped.\n"
        "\n"
        "        --help: show this message.\n"
        "\n"
        "    Example:\n"
        "        # Get the list of required files.\n"
        f"        {me} --dump-file-list > /tmp/files.txt\n"
        "        # Pull from ADB, or use your own command to extract files from images\n"
        "        ROOTDIR=/tmp/device/\n"
        "        cat /tmp/files.txt | xargs -I{} bash -c \"mkdir -p $ROOTDIR`dirname {}` && adb "
        "pull {} $ROOTDIR{}\"\n"
        "        # Check compatibility.\n"
        f"        {me} --check-compat --rootdir=$ROOTDIR \\\n"
        "            --property ro.product.first_api_level=`adb shell getprop "
        "ro.product.first_api_level` \\\n"
        "            --property ro.boot.product.hardware.sku=`adb shell getprop "
        "ro.boot.product.hardware.sku`"
    )