"""Timezone name registry."""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping
from datetime import tzinfo
from types import MappingProxyType
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

logger = logging.getLogger(__name__)


class TimezoneRegistry:
    """Read-only mapping of zone names to zone objects with O(1) lookup."""

    def __init__(self, zones: Mapping[str, tzinfo]) -> None:
        self._zones: Mapping[str, tzinfo] = MappingProxyType(dict(zones))

    @classmethod
    def from_iana(cls) -> TimezoneRegistry:
        """Build a registry from every zone the IANA database provides."""
        zones: dict[str, tzinfo] = {}
        for name in sorted(available_timezones()):
            try:
                zones[name] = ZoneInfo(name)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                logger.debug("skipping unloadable zone %r: %s", name, exc)
        logger.debug("loaded %d IANA timezones", len(zones))
        return cls(zones)

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._zones)

    def find(self, name: str) -> tzinfo | None:
        return self._zones.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._zones

    def __len__(self) -> int:
        return len(self._zones)


@functools.lru_cache(maxsize=None)
def default_registry() -> TimezoneRegistry:
    """The process-wide IANA registry, built on first use."""
    return TimezoneRegistry.from_iana()
