"""Risk summaries derived from a published snapshot."""

from flood_watch.flood.models import (
    ElevatedLocation, Province, ProvinceSummary, RiskLevel, RiskSummary, Snapshot
)
from flood_watch.flood.risk import is_elevated, risk_weight


def summarize(snapshot: Snapshot) -> RiskSummary:
    """Count risk tiers overall and per province.

    Locations without data are counted under their tier (always low) in
    the overall counts and under `no_data` in the province summary.

    Args:
        snapshot: Snapshot to summarize

    Returns:
        RiskSummary for the snapshot
    """
    counts = {level: 0 for level in RiskLevel}
    provinces = {province: ProvinceSummary(province=province) for province in Province}
    elevated = []

    for result in snapshot.results:
        counts[result.risk_level] += 1
        province = provinces[result.location.province]

        if not result.has_data:
            province.no_data += 1
        elif is_elevated(result.risk_level):
            province.elevated += 1
        elif result.risk_level == RiskLevel.MODERATE:
            province.moderate += 1
        else:
            province.low += 1

        if is_elevated(result.risk_level):
            elevated.append(ElevatedLocation(
                name=result.location.name,
                province=result.location.province,
                risk_level=result.risk_level,
                max_discharge=result.max_discharge,
                weight=risk_weight(result.risk_level)
            ))

    return RiskSummary(
        generation=snapshot.generation,
        completed_at=snapshot.completed_at,
        counts=counts,
        provinces=list(provinces.values()),
        elevated=elevated,
        warning=bool(elevated)
    )
