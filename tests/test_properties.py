import pytest

from vintfkit.properties import NoOpPropertyFetcher, PresetPropertyFetcher
from vintfkit.versions import UINT64_MAX


@pytest.fixture
def fetcher():
    return PresetPropertyFetcher(
        {
            "ro.product.first_api_level": "27",
            "ro.boot.product.hardware.sku": "sku_a",
            "flag.on": "true",
            "flag.one": "1",
            "flag.off": "false",
            "flag.zero": "0",
            "flag.bad": "yes",
            "num.bad": "abc",
        }
    )


def test_get_property_present(fetcher):
    assert fetcher.get_property("ro.boot.product.hardware.sku", "") == "sku_a"


def test_get_property_missing_returns_default(fetcher):
    assert fetcher.get_property("ro.boot.product.vendor.sku", "fallback") == "fallback"
    assert fetcher.get_property("ro.boot.product.vendor.sku") == ""


def test_get_uint_property(fetcher):
    assert fetcher.get_uint_property("ro.product.first_api_level", 0) == 27


def test_get_uint_property_invalid_or_missing(fetcher):
    assert fetcher.get_uint_property("num.bad", 5) == 5
    assert fetcher.get_uint_property("missing", 7) == 7


def test_get_uint_property_respects_maximum(fetcher):
    assert fetcher.get_uint_property("ro.product.first_api_level", 3, 26) == 3
    assert fetcher.get_uint_property("ro.product.first_api_level", 3, 27) == 27


@pytest.mark.parametrize(
    "key, default, expected",
    [
        ("flag.on", False, True),
        ("flag.one", False, True),
        ("flag.off", True, False),
        ("flag.zero", True, False),
        ("flag.bad", True, True),
        ("flag.bad", False, False),
        ("missing", True, True),
    ],
)
def test_get_bool_property(fetcher, key, default, expected):
    assert fetcher.get_bool_property(key, default) is expected


def test_set_properties_does_not_overwrite(fetcher):
    fetcher.set_properties({"ro.boot.product.hardware.sku": "other", "new.key": "v"})
    assert fetcher.get_property("ro.boot.product.hardware.sku") == "sku_a"
    assert fetcher.get_property("new.key") == "v"


def test_empty_preset_fetcher():
    empty = PresetPropertyFetcher()
    assert empty.get_property("anything", "d") == "d"


def test_noop_fetcher_returns_defaults():
    noop = NoOpPropertyFetcher()
    assert noop.get_property("ro.product.first_api_level", "x") == "x"
    assert noop.get_uint_property("ro.product.first_api_level", 0) == 0
    assert noop.get_bool_property("flag", True) is True


def test_uint_max_boundary():
    preset = PresetPropertyFetcher({"big": str(UINT64_MAX), "bigger": str(UINT64_MAX + 1)})
    assert preset.get_uint_property("big", 0) == UINT64_MAX
    assert preset.get_uint_property("bigger", 0) == 0