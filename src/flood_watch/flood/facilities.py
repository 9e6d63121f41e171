"""Static registry of WASH facilities in flood-affected areas."""

import logging
from datetime import date
from typing import Iterable, Iterator, List, Optional, Tuple

from flood_watch.flood.models import Facility, FacilityStats, FacilityStatus, FacilityType

logger = logging.getLogger(__name__)


FACILITIES: List[Facility] = [
    # Punjab
    Facility(
        id="wf-001", name="Lahore Central Water Station",
        type=FacilityType.WATER_FILTRATION, status=FacilityStatus.OPERATIONAL,
        latitude=31.5204, longitude=74.3587, beneficiaries=2500, installed_date=date(2022, 10, 15),
        description="Main water filtration system serving displaced families",
    ),
    Facility(
        id="hp-001", name="Faisalabad Hand Pump",
        type=FacilityType.HAND_PUMP, status=FacilityStatus.OPERATIONAL,
        latitude=31.4504, longitude=73.135, beneficiaries=800, installed_date=date(2022, 11, 2),
    ),
    Facility(
        id="lt-001", name="Multan Camp Latrines",
        type=FacilityType.LATRINE, status=FacilityStatus.NEEDS_REPAIR,
        latitude=30.1575, longitude=71.5249, beneficiaries=1200, installed_date=date(2022, 9, 28),
        description="Sanitation block requiring maintenance",
    ),
    Facility(
        id="sh-001", name="Bahawalpur Shower Block",
        type=FacilityType.SHOWER, status=FacilityStatus.OPERATIONAL,
        latitude=29.3956, longitude=71.6836, beneficiaries=600, installed_date=date(2022, 12, 10),
    ),
    # KPK
    Facility(
        id="wf-002", name="Peshawar Water Station",
        type=FacilityType.WATER_FILTRATION, status=FacilityStatus.OPERATIONAL,
        latitude=34.0151, longitude=71.5249, beneficiaries=3000, installed_date=date(2022, 9, 15),
        description="Large-scale water treatment facility",
    ),
    Facility(
        id="hp-002", name="Mardan Community Well",
        type=FacilityType.HAND_PUMP, status=FacilityStatus.NEEDS_REPAIR,
        latitude=34.1986, longitude=72.0404, beneficiaries=500, installed_date=date(2022, 10, 20),
    ),
    Facility(
        id="lt-002", name="Swat Valley Sanitation",
        type=FacilityType.LATRINE, status=FacilityStatus.OPERATIONAL,
        latitude=35.2227, longitude=72.4258, beneficiaries=900, installed_date=date(2022, 11, 15),
    ),
    Facility(
        id="sh-002", name="Abbottabad Hygiene Center",
        type=FacilityType.SHOWER, status=FacilityStatus.REQUESTED,
        latitude=34.1688, longitude=73.2215,
        description="Proposed shower facility for IDP camp",
    ),
    # Balochistan
    Facility(
        id="wf-003", name="Quetta Water Filtration",
        type=FacilityType.WATER_FILTRATION, status=FacilityStatus.OPERATIONAL,
        latitude=30.1798, longitude=66.975, beneficiaries=1800, installed_date=date(2022, 10, 30),
    ),
    Facility(
        id="hp-003", name="Sibi Hand Pump",
        type=FacilityType.HAND_PUMP, status=FacilityStatus.REQUESTED,
        latitude=29.543, longitude=67.8773,
        description="Community request for water access point",
    ),
    Facility(
        id="lt-003", name="Turbat Camp Facilities",
        type=FacilityType.LATRINE, status=FacilityStatus.OPERATIONAL,
        latitude=26.0031, longitude=63.0544, beneficiaries=700, installed_date=date(2022, 12, 1),
    ),
    Facility(
        id="sh-003", name="Gwadar Shower Unit",
        type=FacilityType.SHOWER, status=FacilityStatus.NEEDS_REPAIR,
        latitude=25.1264, longitude=62.3225, beneficiaries=400, installed_date=date(2022, 11, 25),
        description="Requires plumbing repairs",
    ),
]


class FacilityRegistry:
    """Ordered, read-only collection of facilities with type and status filters."""

    def __init__(self, facilities: Optional[Iterable[Facility]] = None):
        """Initialize the registry.

        Args:
            facilities: Facilities in display order (defaults to FACILITIES)

        Raises:
            ValueError: If two facilities share an id
        """
        self._facilities = tuple(FACILITIES if facilities is None else facilities)

        ids = [facility.id for facility in self._facilities]
        duplicates = sorted({facility_id for facility_id in ids if ids.count(facility_id) > 1})
        if duplicates:
            raise ValueError(f"Duplicate facility ids: {', '.join(duplicates)}")

        logger.debug(f"Facility registry loaded with {len(self._facilities)} facilities")

    @property
    def facilities(self) -> Tuple[Facility, ...]:
        """All facilities in display order."""
        return self._facilities

    def get(self, facility_id: str) -> Optional[Facility]:
        for facility in self._facilities:
            if facility.id == facility_id:
                return facility
        return None

    def by_type(self, facility_type: FacilityType) -> List[Facility]:
        return [facility for facility in self._facilities if facility.type == facility_type]

    def by_status(self, status: FacilityStatus) -> List[Facility]:
        return [facility for facility in self._facilities if facility.status == status]

    def filter(
        self,
        facility_type: Optional[FacilityType] = None,
        status: Optional[FacilityStatus] = None
    ) -> List[Facility]:
        """Facilities matching every given criterion; no criteria returns all."""
        return [
            facility for facility in self._facilities
            if (facility_type is None or facility.type == facility_type)
            and (status is None or facility.status == status)
        ]

    def stats(self) -> FacilityStats:
        """Count facilities by status and sum the people they serve.

        Facilities without a beneficiary count contribute 0 to the total.
        """
        return FacilityStats(
            total=len(self._facilities),
            operational=len(self.by_status(FacilityStatus.OPERATIONAL)),
            needs_repair=len(self.by_status(FacilityStatus.NEEDS_REPAIR)),
            requested=len(self.by_status(FacilityStatus.REQUESTED)),
            total_beneficiaries=sum(facility.beneficiaries or 0 for facility in self._facilities),
        )

    def __len__(self) -> int:
        return len(self._facilities)

    def __iter__(self) -> Iterator[Facility]:
        return iter(self._facilities)
