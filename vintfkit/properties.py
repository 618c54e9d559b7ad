"""System property lookup."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping

from vintfkit.versions import UINT64_MAX, _parse_uint

logger = logging.getLogger(__name__)


class PropertyFetcher(ABC):
    """Looks up system properties by key."""

    @abstractmethod
    def get_property(self, key: str, default: str = "") -> str:
        """Return the value of ``key``, or ``default`` when unset."""

    def get_uint_property(self, key: str, default: int, maximum: int = UINT64_MAX) -> int:
        """Return ``key`` as an unsigned integer no larger than ``maximum``."""
        value = self.get_property(key, "")
        if value:
            try:
                return _parse_uint(value, maximum)
            except ValueError:
                pass
        return default

    def get_bool_property(self, key: str, default: bool) -> bool:
        """Return ``key`` as a boolean (``1``/``true`` or ``0``/``false``)."""
        value = self.get_property(key, "")
        if value in ("1", "true"):
            return True
        if value in ("0", "false"):
            return False
        return default


class NoOpPropertyFetcher(PropertyFetcher):
    """A fetcher for which no property is ever set."""

    def get_property(self, key: str, default: str = "") -> str:
        return default


class PresetPropertyFetcher(PropertyFetcher):
    """Serves properties from a fixed table."""

    def __init__(self, props: Mapping[str, str] | None = None) -> None:
        self._props: dict[str, str] = {}
        if props:
            self.set_properties(props)

    def get_property(self, key: str, default: str = "") -> str:
        if key not in self._props:
            logger.info("Sysprop %s is missing, default to '%s'", key, default)
            return default
        value = self._props[key]
        logger.info("Sysprop %s=%s", key, value)
        return value

    def set_properties(self, props: Mapping[str, str]) -> None:
        """Add properties; keys that are already set keep their value."""
        for key, value in props.items():
            self._props.setdefault(key, value)