# tests/core/test_query.py
"""Tests for the region query engine."""

import pytest

from cloudregions.core import query
from cloudregions.core.exceptions import ProviderNotFoundError, RegionNotFoundError
from cloudregions.models.query import NearbySearch, RegionFilter


def ids(regions):
    return [r.id for r in regions]


class TestApplyFilters:
    """Tests for apply_filters and list_regions."""

    def test_no_filter_returns_everything_in_order(self, snapshot):
        """Without a filter the dataset comes back unchanged."""
        assert query.list_regions(snapshot) == list(snapshot.regions)

    def test_empty_filter_is_identity(self, snapshot):
        """A filter with no criteria set keeps every region."""
        assert query.list_regions(snapshot, RegionFilter()) == list(snapshot.regions)

    def test_empty_lists_and_false_flags_are_unset(self, snapshot):
        """Empty lists and false boolean criteria do not constrain the result."""
        criteria = RegionFilter(providers=[], compliance=[], carbon_neutral=False, has_gpu=False)
        assert query.list_regions(snapshot, criteria) == list(snapshot.regions)

    def test_filter_by_provider(self, snapshot):
        criteria = RegionFilter(providers=["aws"])
        assert ids(query.list_regions(snapshot, criteria)) == [
            "aws-eu-central-1",
            "aws-us-east-1",
            "aws-us-gov-west-1",
        ]

    def test_filter_by_several_providers_is_any_of(self, snapshot):
        criteria = RegionFilter(providers=["gcp", "hetzner"])
        assert ids(query.list_regions(snapshot, criteria)) == ["gcp-europe-west9", "hetzner-fsn1"]

    def test_filter_by_tier(self, snapshot):
        """Tier is resolved through the provider table."""
        criteria = RegionFilter(tiers=["regional"])
        assert ids(query.list_regions(snapshot, criteria)) == ["hetzner-fsn1"]

    def test_unresolved_provider_never_matches_a_tier(self, snapshot):
        """A region whose provider is missing from the provider table is excluded by any tier filter."""
        criteria = RegionFilter(tiers=["hyperscaler", "major", "specialized", "regional"])
        assert "mystery-tyo1" not in ids(query.list_regions(snapshot, criteria))

    def test_unresolved_provider_is_still_listed_without_tier_filter(self, snapshot):
        assert "mystery-tyo1" in ids(query.list_regions(snapshot))

    def test_compliance_requires_all_certifications(self, snapshot):
        """Compliance filtering is ALL-of, not ANY-of."""
        criteria = RegionFilter(compliance=["HIPAA", "SOC2"])
        assert ids(query.list_regions(snapshot, criteria)) == ["aws-eu-central-1", "aws-us-east-1"]

    def test_compliance_single_certification(self, snapshot):
        criteria = RegionFilter(compliance=["HIPAA"])
        assert ids(query.list_regions(snapshot, criteria)) == [
            "aws-eu-central-1",
            "gcp-europe-west9",
            "aws-us-east-1",
            "aws-us-gov-west-1",
        ]

    def test_missing_compliance_list_never_matches(self, snapshot):
        criteria = RegionFilter(compliance=["HIPAA"])
        assert "hetzner-fsn1" not in ids(query.list_regions(snapshot, criteria))

    def test_carbon_neutral(self, snapshot):
        criteria = RegionFilter(carbon_neutral=True)
        assert ids(query.list_regions(snapshot, criteria)) == [
            "aws-eu-central-1",
            "gcp-europe-west9",
            "aws-us-east-1",
        ]

    def test_has_gpu(self, snapshot):
        criteria = RegionFilter(has_gpu=True)
        assert ids(query.list_regions(snapshot, criteria)) == [
            "aws-eu-central-1",
            "gcp-europe-west9",
            "hetzner-fsn1",
        ]

    def test_country_and_continent(self, snapshot):
        assert ids(query.list_regions(snapshot, RegionFilter(country_codes=["DE"]))) == [
            "aws-eu-central-1",
            "hetzner-fsn1",
        ]
        assert ids(query.list_regions(snapshot, RegionFilter(continents=["asia"]))) == ["mystery-tyo1"]

    def test_status_and_region_type(self, snapshot):
        assert ids(query.list_regions(snapshot, RegionFilter(status=["preview"]))) == ["hetzner-fsn1"]
        assert ids(query.list_regions(snapshot, RegionFilter(region_types=["government"]))) == [
            "aws-us-gov-west-1"
        ]

    def test_data_residency_exact_match(self, snapshot):
        assert ids(query.list_regions(snapshot, RegionFilter(data_residency="US"))) == ["aws-us-gov-west-1"]
        assert query.list_regions(snapshot, RegionFilter(data_residency="us")) == []

    def test_min_availability_zones_treats_unknown_as_zero(self, snapshot):
        """Regions without a published zone count are excluded by any positive minimum."""
        criteria = RegionFilter(min_availability_zones=3)
        assert ids(query.list_regions(snapshot, criteria)) == [
            "aws-eu-central-1",
            "gcp-europe-west9",
            "aws-us-east-1",
            "aws-us-gov-west-1",
        ]
        assert len(query.list_regions(snapshot, RegionFilter(min_availability_zones=0))) == len(snapshot.regions)

    def test_criteria_are_combined_with_and(self, snapshot):
        criteria = RegionFilter(providers=["aws"], continents=["europe"], has_gpu=True)
        assert ids(query.list_regions(snapshot, criteria)) == ["aws-eu-central-1"]

    def test_filter_is_idempotent(self, snapshot):
        """Applying the same filter to its own output changes nothing."""
        criteria = RegionFilter(continents=["europe"], carbon_neutral=True)
        once = query.apply_filters(snapshot, snapshot.regions, criteria)
        twice = query.apply_filters(snapshot, once, criteria)
        assert once == twice

    def test_result_is_a_subset_in_dataset_order(self, snapshot):
        criteria = RegionFilter(country_codes=["US", "DE"])
        result = query.list_regions(snapshot, criteria)
        positions = [list(snapshot.regions).index(r) for r in result]
        assert positions == sorted(positions)

    def test_input_is_not_modified(self, snapshot, sample_regions):
        before = list(sample_regions)
        query.apply_filters(snapshot, sample_regions, RegionFilter(providers=["gcp"]))
        assert sample_regions == before


class TestLookups:
    """Tests for get_region, get_provider, list_providers and get_provider_regions."""

    def test_get_region(self, snapshot):
        region = query.get_region(snapshot, "gcp-europe-west9")
        assert region.location.city == "Paris"

    def test_get_region_not_found(self, snapshot):
        with pytest.raises(RegionNotFoundError) as exc_info:
            query.get_region(snapshot, "nowhere-1")
        assert exc_info.value.identifier == "nowhere-1"
        assert str(exc_info.value) == "Region not found: nowhere-1"

    def test_get_provider(self, snapshot):
        assert query.get_provider(snapshot, "hetzner").tier == "regional"

    def test_get_provider_not_found(self, snapshot):
        """A provider id used by regions but absent from the table is still unknown."""
        with pytest.raises(ProviderNotFoundError):
            query.get_provider(snapshot, "mystery")

    def test_list_providers(self, snapshot):
        assert [p.id for p in query.list_providers(snapshot)] == ["aws", "gcp", "azure", "hetzner"]

    def test_list_providers_by_tier(self, snapshot):
        assert [p.id for p in query.list_providers(snapshot, "regional")] == ["hetzner"]
        assert query.list_providers(snapshot, "specialized") == []

    def test_get_provider_regions(self, snapshot):
        assert ids(query.get_provider_regions(snapshot, "aws")) == [
            "aws-eu-central-1",
            "aws-us-east-1",
            "aws-us-gov-west-1",
        ]

    def test_get_provider_regions_unknown_provider_is_empty(self, snapshot):
        assert query.get_provider_regions(snapshot, "nobody") == []


class TestFindNearbyRegions:
    """Tests for distance ranking."""

    def test_closest_region_to_paris(self, snapshot):
        """A region at the exact search point has distance 0 and ranks first."""
        result = query.find_nearby_regions(snapshot, NearbySearch(latitude=48.8566, longitude=2.3522, limit=1))
        assert len(result) == 1
        assert result[0].id == "gcp-europe-west9"
        assert result[0].distance_km == 0

    def test_results_are_sorted_by_distance(self, snapshot):
        result = query.find_nearby_regions(snapshot, NearbySearch(latitude=50.1109, longitude=8.6821))
        distances = [r.distance_km for r in result]
        assert distances == sorted(distances)
        assert len(result) == len(snapshot.regions)

    def test_max_distance_is_inclusive_bound(self, snapshot):
        result = query.find_nearby_regions(
            snapshot, NearbySearch(latitude=50.1109, longitude=8.6821, max_distance_km=300)
        )
        assert ids(result) == ["aws-eu-central-1", "hetzner-fsn1"]
        assert all(r.distance_km <= 300 for r in result)

        exact = result[1].distance_km
        bounded = query.find_nearby_regions(
            snapshot, NearbySearch(latitude=50.1109, longitude=8.6821, max_distance_km=exact)
        )
        assert ids(bounded) == ["aws-eu-central-1", "hetzner-fsn1"]

    def test_limit_applies_after_distance_bound(self, snapshot):
        result = query.find_nearby_regions(
            snapshot, NearbySearch(latitude=50.1109, longitude=8.6821, max_distance_km=300, limit=5)
        )
        assert len(result) == 2

    def test_limit_zero_returns_nothing(self, snapshot):
        assert query.find_nearby_regions(snapshot, NearbySearch(latitude=0, longitude=0, limit=0)) == []

    def test_filter_is_applied_before_ranking(self, snapshot):
        search = NearbySearch(latitude=48.8566, longitude=2.3522, filter=RegionFilter(providers=["aws"]))
        result = query.find_nearby_regions(snapshot, search)
        assert ids(result)[0] == "aws-eu-central-1"
        assert {r.provider for r in result} == {"aws"}

    def test_equidistant_regions_keep_dataset_order(self, make_region, sample_providers, sample_metadata):
        from cloudregions.core.store import DatasetSnapshot

        regions = [
            make_region("aws-a-1", "aws", "Frankfurt", "Germany", "DE", 50.1109, 8.6821, "europe"),
            make_region("gcp-b-1", "gcp", "Frankfurt", "Germany", "DE", 50.1109, 8.6821, "europe"),
            make_region("azure-c-1", "azure", "Frankfurt", "Germany", "DE", 50.1109, 8.6821, "europe"),
        ]
        snap = DatasetSnapshot(regions=regions, providers=sample_providers, metadata=sample_metadata)
        result = query.find_nearby_regions(snap, NearbySearch(latitude=50.1109, longitude=8.6821))
        assert ids(result) == ["aws-a-1", "gcp-b-1", "azure-c-1"]
        assert all(r.distance_km == 0 for r in result)

    def test_result_carries_region_fields(self, snapshot):
        result = query.find_nearby_regions(snapshot, NearbySearch(latitude=48.8566, longitude=2.3522, limit=1))
        assert result[0].display_name == "Paris"
        assert result[0].compliance == ("HIPAA",)


class TestSearchRegions:
    """Tests for free-text search."""

    def test_search_is_case_insensitive(self, snapshot):
        assert ids(query.search_regions(snapshot, "PARIS")) == ["gcp-europe-west9"]

    def test_search_matches_city_substring(self, snapshot):
        assert ids(query.search_regions(snapshot, "frank")) == ["aws-eu-central-1"]

    def test_search_matches_display_name_and_code(self, snapshot):
        assert ids(query.search_regions(snapshot, "east")) == ["aws-us-east-1", "azure-eastus"]

    def test_search_matches_provider(self, snapshot):
        assert ids(query.search_regions(snapshot, "hetzner")) == ["hetzner-fsn1"]

    def test_search_with_filter(self, snapshot):
        criteria = RegionFilter(providers=["azure"])
        assert ids(query.search_regions(snapshot, "east", criteria)) == ["azure-eastus"]

    def test_search_without_match_is_empty(self, snapshot):
        assert query.search_regions(snapshot, "atlantis") == []


class TestSpecializedQueries:
    """Tests for the compliant, sustainable and GPU helpers."""

    def test_find_compliant_regions(self, snapshot):
        assert ids(query.find_compliant_regions(snapshot, ["HIPAA", "SOC2", "PCI-DSS"])) == ["aws-eu-central-1"]

    def test_find_compliant_regions_overrides_filter_compliance(self, snapshot):
        criteria = RegionFilter(compliance=["FedRAMP-High"], continents=["europe"])
        assert ids(query.find_compliant_regions(snapshot, ["HIPAA"], criteria)) == [
            "aws-eu-central-1",
            "gcp-europe-west9",
        ]

    def test_find_compliant_regions_does_not_modify_filter(self, snapshot):
        criteria = RegionFilter(compliance=["FedRAMP-High"])
        query.find_compliant_regions(snapshot, ["HIPAA"], criteria)
        assert criteria.compliance == ["FedRAMP-High"]

    def test_find_sustainable_regions(self, snapshot):
        criteria = RegionFilter(continents=["north-america"])
        assert ids(query.find_sustainable_regions(snapshot, criteria)) == ["aws-us-east-1"]

    def test_find_gpu_regions(self, snapshot):
        assert ids(query.find_gpu_regions(snapshot)) == [
            "aws-eu-central-1",
            "gcp-europe-west9",
            "hetzner-fsn1",
        ]

    def test_find_gpu_regions_by_type(self, snapshot):
        """Only regions offering a model containing the requested type are returned."""
        assert ids(query.find_gpu_regions(snapshot, "H100")) == ["aws-eu-central-1"]

    def test_find_gpu_regions_type_is_case_insensitive(self, snapshot):
        assert ids(query.find_gpu_regions(snapshot, "a100")) == ["aws-eu-central-1", "gcp-europe-west9"]

    def test_find_gpu_regions_unknown_type(self, snapshot):
        assert query.find_gpu_regions(snapshot, "TPU v5") == []


class TestCoverageAndMetadata:
    """Tests for compare_provider_coverage and get_metadata."""

    def test_coverage_by_country_omits_absent_providers(self, snapshot):
        coverage = query.compare_provider_coverage(snapshot, country_code="US")
        assert coverage == {"aws": 2, "azure": 1}
        assert "gcp" not in coverage

    def test_coverage_keys_in_first_seen_order(self, snapshot):
        coverage = query.compare_provider_coverage(snapshot, continent="europe")
        assert list(coverage.items()) == [("aws", 1), ("gcp", 1), ("hetzner", 1)]

    def test_coverage_without_scope_counts_everything(self, snapshot):
        coverage = query.compare_provider_coverage(snapshot)
        assert sum(coverage.values()) == len(snapshot.regions)
        assert coverage["mystery"] == 1

    def test_coverage_with_no_match_is_empty(self, snapshot):
        assert query.compare_provider_coverage(snapshot, country_code="DE", continent="asia") == {}

    def test_metadata_totals_are_recomputed(self, snapshot):
        metadata = query.get_metadata(snapshot)
        assert metadata.total_regions == 7
        assert metadata.total_providers == 4
        assert metadata.last_updated == "2026-01-21"
        assert snapshot.metadata.total_regions == 0
