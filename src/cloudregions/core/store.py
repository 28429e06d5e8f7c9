# src/cloudregions/core/store.py
"""
Dataset access layer.

A `DatasetSnapshot` bundles one immutable version of the catalog with the
lookup indices derived from it. A `RegionStore` owns the snapshot currently
in effect and replaces it with a single reference swap; readers take
`store.snapshot` once and work against that object for the whole call.
"""

import asyncio
import logging
import threading
from collections import defaultdict
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Awaitable, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from ..loaders.remote import LoadResult, fetch_region_data, get_bundled_data
from ..models.provider import DatasetMetadata, Provider
from ..models.region import Region

logger = logging.getLogger(__name__)


def _group(regions: Iterable[Region], key: Callable[[Region], str]) -> Mapping[str, Tuple[Region, ...]]:
    groups: Dict[str, List[Region]] = defaultdict(list)
    for region in regions:
        groups[key(region)].append(region)
    return MappingProxyType({k: tuple(v) for k, v in groups.items()})


@dataclass(frozen=True)
class DatasetSnapshot:
    """
    One complete, immutable version of the catalog.

    The indices are rebuilt in full on construction. Group values keep
    dataset order. When two regions share an id the later one wins in
    `region_by_id`.
    """

    regions: Tuple[Region, ...]
    providers: Tuple[Provider, ...]
    metadata: DatasetMetadata
    source: str = "bundled"

    region_by_id: Mapping[str, Region] = field(init=False, repr=False, compare=False)
    provider_by_id: Mapping[str, Provider] = field(init=False, repr=False, compare=False)
    regions_by_provider: Mapping[str, Tuple[Region, ...]] = field(init=False, repr=False, compare=False)
    regions_by_country: Mapping[str, Tuple[Region, ...]] = field(init=False, repr=False, compare=False)
    regions_by_continent: Mapping[str, Tuple[Region, ...]] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Accept any sequence but always store tuples.
        object.__setattr__(self, "regions", tuple(self.regions))
        object.__setattr__(self, "providers", tuple(self.providers))

        region_by_id: Dict[str, Region] = {}
        for region in self.regions:
            if region.id in region_by_id:
                logger.warning(f"Duplicate region id '{region.id}' in dataset; keeping the last occurrence")
            region_by_id[region.id] = region

        object.__setattr__(self, "region_by_id", MappingProxyType(region_by_id))
        object.__setattr__(self, "provider_by_id", MappingProxyType({p.id: p for p in self.providers}))
        object.__setattr__(self, "regions_by_provider", _group(self.regions, lambda r: r.provider))
        object.__setattr__(self, "regions_by_country", _group(self.regions, lambda r: r.location.country_code))
        object.__setattr__(self, "regions_by_continent", _group(self.regions, lambda r: r.location.continent))

    @classmethod
    def from_load_result(cls, result: LoadResult) -> "DatasetSnapshot":
        return cls(
            regions=result.regions,
            providers=result.providers,
            metadata=result.metadata,
            source=result.source,
        )

    @classmethod
    def bundled(cls) -> "DatasetSnapshot":
        """Snapshot of the catalog shipped with the package."""
        return cls.from_load_result(get_bundled_data())

    def resolve_provider(self, provider_id: str) -> Optional[Provider]:
        """Returns the provider record, or None when the id is unresolved."""
        return self.provider_by_id.get(provider_id)


class RegionStore:
    """Holds the snapshot currently in effect."""

    def __init__(self, snapshot: Optional[DatasetSnapshot] = None):
        self._snapshot = snapshot if snapshot is not None else DatasetSnapshot.bundled()
        self._lock = threading.Lock()
        self._refresh_lock = asyncio.Lock()

    @property
    def snapshot(self) -> DatasetSnapshot:
        return self._snapshot

    def replace(self, snapshot: DatasetSnapshot) -> DatasetSnapshot:
        """Swaps in a new snapshot and returns the one it replaced."""
        with self._lock:
            previous = self._snapshot
            self._snapshot = snapshot
        logger.info(f"Dataset replaced: {len(snapshot.regions)} regions from {snapshot.source} source")
        return previous

    async def refresh(self, loader: Optional[Callable[[], Awaitable[LoadResult]]] = None) -> DatasetSnapshot:
        """
        Runs the loader (the remote loader by default) and swaps in a snapshot built from its result.

        Refreshes run one at a time, so overlapping calls land in the order they were made.
        """
        async with self._refresh_lock:
            result = await (loader or fetch_region_data)()
            snapshot = DatasetSnapshot.from_load_result(result)
            self.replace(snapshot)
        return snapshot
