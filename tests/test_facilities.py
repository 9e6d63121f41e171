"""
Tests for the WASH facility registry.
"""

import pytest
from pydantic import ValidationError

from flood_watch.flood.facilities import FACILITIES, FacilityRegistry
from flood_watch.flood.models import Facility, FacilityStatus, FacilityType


def make_facility(facility_id, facility_type=FacilityType.HAND_PUMP, status=FacilityStatus.OPERATIONAL,
                  beneficiaries=None):
    return Facility(
        id=facility_id, name=f"Site {facility_id}", type=facility_type, status=status,
        latitude=31.0, longitude=72.0, beneficiaries=beneficiaries,
    )


class TestFacilityRegistry:
    def test_default_facilities(self):
        registry = FacilityRegistry()
        assert len(registry) == 12
        assert registry.facilities[0].id == "wf-001"
        assert isinstance(registry.facilities, tuple)

    def test_every_type_has_three_facilities(self):
        registry = FacilityRegistry()
        for facility_type in FacilityType:
            assert len(registry.by_type(facility_type)) == 3

    def test_by_status(self):
        registry = FacilityRegistry()
        requested = registry.by_status(FacilityStatus.REQUESTED)
        assert [facility.id for facility in requested] == ["sh-002", "hp-003"]

    def test_filter_combines_criteria(self):
        registry = FacilityRegistry()
        matches = registry.filter(facility_type=FacilityType.HAND_PUMP, status=FacilityStatus.NEEDS_REPAIR)
        assert [facility.id for facility in matches] == ["hp-002"]

    def test_filter_without_criteria_returns_all(self):
        registry = FacilityRegistry()
        assert registry.filter() == list(registry)

    def test_get(self):
        registry = FacilityRegistry()
        assert registry.get("lt-002").name == "Swat Valley Sanitation"
        assert registry.get("xx-999") is None

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="hp-9"):
            FacilityRegistry([make_facility("hp-9"), make_facility("hp-9")])

    def test_default_list_has_unique_ids(self):
        ids = [facility.id for facility in FACILITIES]
        assert len(ids) == len(set(ids))


class TestFacilityStats:
    def test_default_stats(self):
        stats = FacilityRegistry().stats()
        assert stats.total == 12
        assert stats.operational == 7
        assert stats.needs_repair == 3
        assert stats.requested == 2
        assert stats.total_beneficiaries == 12400

    def test_unknown_beneficiaries_count_as_zero(self):
        registry = FacilityRegistry([
            make_facility("a", beneficiaries=150),
            make_facility("b", status=FacilityStatus.REQUESTED),
        ])
        stats = registry.stats()
        assert stats.total_beneficiaries == 150
        assert stats.requested == 1

    def test_empty_registry(self):
        stats = FacilityRegistry([]).stats()
        assert stats.total == 0
        assert stats.total_beneficiaries == 0


class TestFacilityModel:
    def test_negative_beneficiaries_rejected(self):
        with pytest.raises(ValidationError):
            make_facility("bad", beneficiaries=-1)

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            Facility(id="x", name="X", type="well", status="operational", latitude=30.0, longitude=70.0)
