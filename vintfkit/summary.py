"""Summary table of HAL versions across manifests and compatibility matrices."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from vintfkit.fqname import to_fq_name_string
from vintfkit.versions import Version, VersionRange

COLUMN_SEPARATOR = "   "


@dataclass
class TableRow:
    """Where one HAL version appears, and whether it is required.

    ``dm``/``fm`` mark the device and framework manifests, ``dcm``/``fcm`` the
    device and framework compatibility matrices.
    """

    dm: bool = False
    fm: bool = False
    dcm: bool = False
    fcm: bool = False
    required: bool = False

    def meets_requirement(self) -> bool:
        """True unless a required version is missing from the matching manifest."""
        if not self.required:
            return True
        if self.dcm and not self.fm:
            return False
        if self.fcm and not self.dm:
            return False
        return True

    def format(self) -> str:
        """Render the row's indicator columns."""
        columns = [
            ("R" if self.required else " ") + (" " if self.meets_requirement() else "!"),
            "DM" if self.dm else "  ",
            "FM" if self.fm else "  ",
            "FCM" if self.fcm else "   ",
            "DCM" if self.dcm else "   ",
        ]
        return COLUMN_SEPARATOR.join(columns)


@dataclass(frozen=True)
class MatrixEntry:
    """One instance required by a compatibility matrix over a range of versions."""

    package: str
    version_range: VersionRange
    interface: str
    instance: str
    optional: bool = False

    def versions(self) -> list[Version]:
        """Every version the range covers, in ascending order."""
        vr = self.version_range
        return [Version(vr.major, minor) for minor in range(vr.min_minor, vr.max_minor + 1)]

    def description(self, version: Version) -> str:
        """The fully-qualified instance name at ``version``."""
        return to_fq_name_string(self.package, version, self.interface, self.instance)


Table = dict[str, TableRow]
_Mutator = Callable[[TableRow], None]


def _insert_manifest(manifest: Iterable[str] | None, table: Table, mutate: _Mutator) -> None:
    if manifest is None:
        return
    for description in manifest:
        mutate(table.setdefault(description, TableRow()))


def _insert_matrix(matrix: Iterable[MatrixEntry] | None, table: Table, mutate: _Mutator) -> None:
    if matrix is None:
        return
    for entry in matrix:
        min_minor = entry.version_range.min_minor
        for version in entry.versions():
            key = entry.description(version)
            row = table.get(key)
            if row is None:
                row = table[key] = TableRow()
                mutate(row)
            else:
                mutate(row)
                if version.minor == min_minor:
                    row.required = not entry.optional


def _set_dm(row: TableRow) -> None:
    row.dm = True


def _set_fm(row: TableRow) -> None:
    row.fm = True


def _set_dcm(row: TableRow) -> None:
    row.dcm = True


def _set_fcm(row: TableRow) -> None:
    row.fcm = True


def generate_hal_summary(
    device_manifest: Iterable[str] | None,
    framework_manifest: Iterable[str] | None,
    device_matrix: Iterable[MatrixEntry] | None,
    framework_matrix: Iterable[MatrixEntry] | None,
) -> Table:
    """Build the summary table keyed by instance description, sorted by key.

    Manifests are given as instance descriptions; any argument may be None.
    """
    table: Table = {}
    _insert_manifest(device_manifest, table, _set_dm)
    _insert_manifest(framework_manifest, table, _set_fm)
    _insert_matrix(device_matrix, table, _set_dcm)
    _insert_matrix(framework_matrix, table, _set_fcm)
    return dict(sorted(table.items()))


def format_table(table: Table) -> str:
    """Render each row followed by its instance description, one per line."""
    return "".join(
        f"{row.format()}{COLUMN_SEPARATOR}{key}\n" for key, row in sorted(table.items())
    )


def exist_string(value: bool) -> str:
    return "GOOD" if value else "DOES NOT EXIST"