# vintfkit

Value types, parsers and helpers for Android VINTF metadata: FCM levels,
HAL and kernel versions, kernel config values, fully qualified HAL instance
names, system properties, checker command-line arguments and the HAL summary
table.

## Installation

Install the package with pip. The `test` extra adds pytest.

## Modules

- `vintfkit.versions`: `Level` (FCM version, `LEGACY` to `R` plus
  `UNSPECIFIED`), `Version`, `VersionRange`, `KernelVersion` and
  `VndkVersionRange`. Parsers: `parse_level`, `parse_version`,
  `parse_version_range`, `parse_kernel_version`, `parse_vndk_version_range`.
  `format_level` renders a level (`""` for unspecified, `"legacy"`, or the
  number) and `split_string` splits on a separator.
- `vintfkit.kernel_config`: `KernelConfigType`, `Tristate` and
  `KernelConfigTypedValue`. `parse_kernel_config_int` reads decimal, octal or
  hex integers as signed 64-bit values; `parse_range` reads `first-second`;
  `parse_tristate` reads `y`, `n` or `m`; `parse_kernel_config_value` parses
  text as a given type; `parse_kernel_config_typed_value` infers the type from
  a quoted string, an integer or a tristate.
- `vintfkit.fqname`: `to_fq_name_string` builds names such as
  `android.hardware.foo@1.0::IFoo/default`; `to_aidl_fqname_string` builds
  `android.hardware.foo.IFoo/default`; `instance_name_to_test_name` turns an
  index and instance name into an identifier of letters, digits and
  underscores.
- `vintfkit.utils`: `convert_from_api_level` gives the FCM level for a
  shipping API level; `merge_field` merges two values where one may be unset,
  raising `ValueError` when both are set and differ.
- `vintfkit.properties`: `PropertyFetcher` with `get_property`,
  `get_uint_property` and `get_bool_property`. `NoOpPropertyFetcher` has no
  properties; `PresetPropertyFetcher` serves a table given to it, where
  `set_properties` never overwrites a key that is already set.
- `vintfkit.cli`: `parse_args` turns checker arguments (`--help`/`-h`,
  `--dump-file-list`, `--check-compat`/`-c`, `--check-one`, `--rootdir`,
  `--property`/`-D`, `--dirmap`, `--kernel`) into a mapping from
  `CheckOption` to values. `get_properties` and `get_dirmap` split
  `key=value` and `/partition:/dir` arguments, `parse_kernel_arg` reads
  `x.y.z:path/to/config` and raises `UsageError`, and `usage` returns the help
  text.
- `vintfkit.summary`: `generate_hal_summary` builds a table of `TableRow`s
  from manifests (given as instance descriptions) and compatibility matrices
  (given as `MatrixEntry` items), marking each instance as present in the
  device manifest (DM), framework manifest (FM), framework matrix (FCM) or
  device matrix (DCM), and flagging required instances that are missing.
  `format_table` renders it and `exist_string` gives `GOOD` or
  `DOES NOT EXIST`.

## Example

```python
from vintfkit.versions import Level, parse_version_range
from vintfkit.utils import convert_from_api_level
from vintfkit.summary import MatrixEntry, generate_hal_summary, format_table

vr = parse_version_range("1.0-3")
assert not vr.is_single_version()
assert convert_from_api_level(26) == Level.O

table = generate_hal_summary(
    ["android.hardware.foo@1.0::IFoo/default"],
    None,
    None,
    [MatrixEntry("android.hardware.foo", parse_version_range("1.0"), "IFoo", "default")],
)
print(format_table(table), end="")
```

Parsers raise `ValueError` on malformed input.

## What it does not do

The package installs no command. `vintfkit.cli` parses and describes the
checker's arguments but nothing runs a check with them. The package does not
read manifests or compatibility matrices from disk or from a device, does not
parse their XML, and does not decide whether a device and framework are
compatible; callers supply the instance descriptions and matrix entries
themselves.