# src/cloudregions/core/query.py
"""
Query engine over a `DatasetSnapshot`.

Every function takes the snapshot it reads from as its first argument and
returns a newly built result; neither the snapshot nor the input sequences
are modified. Empty results are ordinary results.
"""

from typing import Callable, Dict, Iterable, List, Optional, Sequence

from ..models.provider import DatasetMetadata, Provider
from ..models.query import NearbySearch, RegionFilter, RegionWithDistance
from ..models.region import Region
from .exceptions import ProviderNotFoundError, RegionNotFoundError
from .geo import distance_km
from .store import DatasetSnapshot

Predicate = Callable[[Region], bool]


def _build_predicates(snapshot: DatasetSnapshot, criteria: RegionFilter) -> List[Predicate]:
    """
    Turns each criterion that is set into a predicate, in a fixed evaluation
    order. Unset criteria and empty lists contribute nothing.
    """
    predicates: List[Predicate] = []

    if criteria.providers:
        providers = set(criteria.providers)
        predicates.append(lambda r: r.provider in providers)

    if criteria.tiers:
        tiers = set(criteria.tiers)

        def _tier_matches(region: Region) -> bool:
            provider = snapshot.resolve_provider(region.provider)
            # A region whose provider is not in the provider table never matches a tier.
            return provider is not None and provider.tier in tiers

        predicates.append(_tier_matches)

    if criteria.country_codes:
        codes = set(criteria.country_codes)
        predicates.append(lambda r: r.location.country_code in codes)

    if criteria.continents:
        continents = set(criteria.continents)
        predicates.append(lambda r: r.location.continent in continents)

    if criteria.compliance:
        required = set(criteria.compliance)
        predicates.append(lambda r: r.compliance is not None and required.issubset(r.compliance))

    if criteria.carbon_neutral is True:
        predicates.append(lambda r: r.sustainability is not None and r.sustainability.carbon_neutral is True)

    if criteria.has_gpu is True:
        predicates.append(lambda r: r.services is not None and r.services.gpu is True)

    if criteria.status:
        statuses = set(criteria.status)
        predicates.append(lambda r: r.status in statuses)

    if criteria.region_types:
        region_types = set(criteria.region_types)
        predicates.append(lambda r: r.region_type in region_types)

    if criteria.data_residency:
        residency = criteria.data_residency
        predicates.append(lambda r: r.sovereignty is not None and r.sovereignty.data_residency == residency)

    if criteria.min_availability_zones is not None:
        minimum = criteria.min_availability_zones
        # An unpublished zone count counts as zero.
        predicates.append(lambda r: (r.availability_zones if r.availability_zones is not None else 0) >= minimum)

    return predicates


def apply_filters(
    snapshot: DatasetSnapshot, regions: Iterable[Region], criteria: Optional[RegionFilter] = None
) -> List[Region]:
    """
    Returns the regions that satisfy every criterion that is set, in input order.

    With no criteria set the input is returned unchanged (as a new list).
    """
    regions = list(regions)
    if criteria is None:
        return regions

    predicates = _build_predicates(snapshot, criteria)
    if not predicates:
        return regions

    return [region for region in regions if all(predicate(region) for predicate in predicates)]


def list_regions(snapshot: DatasetSnapshot, criteria: Optional[RegionFilter] = None) -> List[Region]:
    return apply_filters(snapshot, snapshot.regions, criteria)


def get_region(snapshot: DatasetSnapshot, region_id: str) -> Region:
    """Looks a region up by id; raises RegionNotFoundError when absent."""
    region = snapshot.region_by_id.get(region_id)
    if region is None:
        raise RegionNotFoundError(region_id)
    return region


def get_provider(snapshot: DatasetSnapshot, provider_id: str) -> Provider:
    provider = snapshot.resolve_provider(provider_id)
    if provider is None:
        raise ProviderNotFoundError(provider_id)
    return provider


def list_providers(snapshot: DatasetSnapshot, tier: Optional[str] = None) -> List[Provider]:
    if not tier:
        return list(snapshot.providers)
    return [p for p in snapshot.providers if p.tier == tier]


def get_provider_regions(snapshot: DatasetSnapshot, provider_id: str) -> List[Region]:
    """All regions of one provider in dataset order; unknown providers yield an empty list."""
    return list(snapshot.regions_by_provider.get(provider_id, ()))


def find_nearby_regions(snapshot: DatasetSnapshot, search: NearbySearch) -> List[RegionWithDistance]:
    """
    Ranks regions by great-circle distance from the search point.

    Distances are rounded to whole kilometers before sorting. The sort is
    stable, so equidistant regions keep dataset order. `max_distance_km` is
    an inclusive bound and is applied before `limit`.
    """
    candidates = apply_filters(snapshot, snapshot.regions, search.filter)

    ranked = [
        (distance_km(search.latitude, search.longitude, r.location.latitude, r.location.longitude), r)
        for r in candidates
    ]
    ranked.sort(key=lambda pair: pair[0])

    if search.max_distance_km is not None:
        ranked = [pair for pair in ranked if pair[0] <= search.max_distance_km]

    if search.limit is not None:
        ranked = ranked[: max(search.limit, 0)]

    return [RegionWithDistance(**dict(region), distance_km=distance) for distance, region in ranked]


def _text_fields(region: Region) -> Sequence[str]:
    return (
        region.display_name,
        region.region_code,
        region.location.city,
        region.location.country,
        region.provider,
    )


def search_regions(snapshot: DatasetSnapshot, query: str, criteria: Optional[RegionFilter] = None) -> List[Region]:
    """Case-insensitive substring search over name, code, city, country and provider."""
    needle = query.lower()
    candidates = apply_filters(snapshot, snapshot.regions, criteria)
    return [r for r in candidates if any(needle in field.lower() for field in _text_fields(r))]


def _pinned(criteria: Optional[RegionFilter], **overrides) -> RegionFilter:
    base = criteria if criteria is not None else RegionFilter()
    return base.model_copy(update=overrides)


def find_compliant_regions(
    snapshot: DatasetSnapshot, certifications: Sequence[str], criteria: Optional[RegionFilter] = None
) -> List[Region]:
    """Regions holding every one of `certifications`; overrides any compliance set on `criteria`."""
    return apply_filters(snapshot, snapshot.regions, _pinned(criteria, compliance=list(certifications)))


def find_sustainable_regions(snapshot: DatasetSnapshot, criteria: Optional[RegionFilter] = None) -> List[Region]:
    return apply_filters(snapshot, snapshot.regions, _pinned(criteria, carbon_neutral=True))


def find_gpu_regions(
    snapshot: DatasetSnapshot, gpu_type: Optional[str] = None, criteria: Optional[RegionFilter] = None
) -> List[Region]:
    """
    GPU-capable regions. When `gpu_type` is given, at least one of the
    region's GPU models must contain it (case-insensitive).
    """
    regions = apply_filters(snapshot, snapshot.regions, _pinned(criteria, has_gpu=True))
    if not gpu_type:
        return regions

    needle = gpu_type.lower()
    return [r for r in regions if any(needle in model.lower() for model in (r.services.gpu_types or ()))]


def compare_provider_coverage(
    snapshot: DatasetSnapshot, country_code: Optional[str] = None, continent: Optional[str] = None
) -> Dict[str, int]:
    """
    Counts regions per provider within a country and/or continent.

    Providers with no matching region are left out. Keys appear in the
    order their provider is first seen in the dataset.
    """
    coverage: Dict[str, int] = {}
    for region in snapshot.regions:
        if country_code and region.location.country_code != country_code:
            continue
        if continent and region.location.continent != continent:
            continue
        coverage[region.provider] = coverage.get(region.provider, 0) + 1
    return coverage


def get_metadata(snapshot: DatasetSnapshot) -> DatasetMetadata:
    """Dataset metadata with the totals recomputed from the snapshot contents."""
    return snapshot.metadata.model_copy(
        update={"total_regions": len(snapshot.regions), "total_providers": len(snapshot.providers)}
    )
