# src/cloudregions/core/aggregator.py
"""
Groups regions by country and by city and computes catalog-wide counts.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Tuple

from ..models.query import CitySummary, CountrySummary, RegionStatistics
from ..models.region import Region
from .store import DatasetSnapshot


def list_countries(regions: Iterable[Region]) -> List[CountrySummary]:
    """Region counts per country code, largest first.

    The country name is taken from the first region seen for each code.
    Ties keep first-seen order (sorted() is stable).
    """
    names: Dict[str, str] = {}
    counts: Dict[str, int] = defaultdict(int)
    for region in regions:
        code = region.location.country_code
        names.setdefault(code, region.location.country)
        counts[code] += 1

    summaries = [CountrySummary(country_code=code, country=names[code], region_count=n) for code, n in counts.items()]
    return sorted(summaries, key=lambda s: s.region_count, reverse=True)


def list_cities(regions: Iterable[Region]) -> List[CitySummary]:
    """Region counts per (city, country code), largest first, with the providers present in each city."""
    groups: Dict[Tuple[str, str], List[Region]] = defaultdict(list)
    for region in regions:
        groups[(region.location.city, region.location.country_code)].append(region)

    summaries = []
    for (city, _country_code), items in groups.items():
        providers = list(dict.fromkeys(r.provider for r in items))
        summaries.append(
            CitySummary(
                city=city,
                country=items[0].location.country,
                providers=providers,
                region_count=len(items),
            )
        )
    return sorted(summaries, key=lambda s: s.region_count, reverse=True)


def compute_statistics(snapshot: DatasetSnapshot) -> RegionStatistics:
    by_provider: Dict[str, int] = defaultdict(int)
    by_country: Dict[str, int] = defaultdict(int)
    by_continent: Dict[str, int] = defaultdict(int)
    by_region_type: Dict[str, int] = defaultdict(int)
    gpu_regions = 0
    carbon_neutral_regions = 0

    for region in snapshot.regions:
        by_provider[region.provider] += 1
        by_country[region.location.country_code] += 1
        by_continent[region.location.continent] += 1
        by_region_type[region.region_type] += 1
        if region.services is not None and region.services.gpu is True:
            gpu_regions += 1
        if region.sustainability is not None and region.sustainability.carbon_neutral is True:
            carbon_neutral_regions += 1

    return RegionStatistics(
        total_regions=len(snapshot.regions),
        total_providers=len(snapshot.providers),
        by_provider=dict(by_provider),
        by_country=dict(by_country),
        by_continent=dict(by_continent),
        by_region_type=dict(by_region_type),
        gpu_regions=gpu_regions,
        carbon_neutral_regions=carbon_neutral_regions,
    )
