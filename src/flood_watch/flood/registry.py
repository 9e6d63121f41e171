"""Static registry of monitored locations."""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from flood_watch.flood.models import Location, Province

logger = logging.getLogger(__name__)


PAKISTAN_LOCATIONS: List[Location] = [
    # Punjab
    Location(name="Lahore", province=Province.PUNJAB, latitude=31.5204, longitude=74.3587),
    Location(name="Multan", province=Province.PUNJAB, latitude=30.1575, longitude=71.5249),
    Location(name="Faisalabad", province=Province.PUNJAB, latitude=31.4504, longitude=73.1350),
    Location(name="Bahawalpur", province=Province.PUNJAB, latitude=29.3956, longitude=71.6836),
    # KPK
    Location(name="Peshawar", province=Province.KPK, latitude=34.0151, longitude=71.5249),
    Location(name="Swat", province=Province.KPK, latitude=35.2227, longitude=72.4258),
    Location(name="Abbottabad", province=Province.KPK, latitude=34.1688, longitude=73.2215),
    Location(name="Mardan", province=Province.KPK, latitude=34.1986, longitude=72.0404),
    # Balochistan
    Location(name="Quetta", province=Province.BALOCHISTAN, latitude=30.1798, longitude=66.9750),
    Location(name="Gwadar", province=Province.BALOCHISTAN, latitude=25.1264, longitude=62.3225),
    Location(name="Sibi", province=Province.BALOCHISTAN, latitude=29.5430, longitude=67.8773),
    Location(name="Turbat", province=Province.BALOCHISTAN, latitude=26.0031, longitude=63.0544),
]


class LocationRegistry:
    """Ordered, read-only collection of monitored locations."""

    def __init__(self, locations: Optional[Iterable[Location]] = None):
        """Initialize the registry.

        Args:
            locations: Locations in display order (defaults to PAKISTAN_LOCATIONS)

        Raises:
            ValueError: If two locations share a name
        """
        self._locations = tuple(PAKISTAN_LOCATIONS if locations is None else locations)

        names = [location.name for location in self._locations]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate location names: {', '.join(duplicates)}")

        logger.debug(f"Location registry loaded with {len(self._locations)} locations")

    @property
    def locations(self) -> Tuple[Location, ...]:
        """All locations in display order."""
        return self._locations

    def get(self, name: str) -> Optional[Location]:
        for location in self._locations:
            if location.name == name:
                return location
        return None

    def by_province(self, province: Province) -> List[Location]:
        return [location for location in self._locations if location.province == province]

    def __len__(self) -> int:
        return len(self._locations)

    def __iter__(self) -> Iterator[Location]:
        return iter(self._locations)
