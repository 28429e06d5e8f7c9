# tests/reporters/test_console_reporter.py
"""
Unit tests for the ConsoleReporter class.
"""

from unittest.mock import MagicMock

from rich.console import Console

from cloudregions.core import query
from cloudregions.models.query import NearbySearch
from cloudregions.reporters.console_reporter import ConsoleReporter


def test_report_regions_builds_table(mocker, sample_regions):
    """
    The reporter adds one row per region and prints the table once.
    Table and Console are mocked in the reporter's namespace.
    """
    mock_console_class = mocker.patch("cloudregions.reporters.console_reporter.Console")
    mock_table_class = mocker.patch("cloudregions.reporters.console_reporter.Table")
    mock_console_instance = MagicMock()
    mock_table_instance = MagicMock()
    mock_console_class.return_value = mock_console_instance
    mock_table_class.return_value = mock_table_instance

    ConsoleReporter().report_regions(sample_regions[:2], title="Test")

    mock_table_class.assert_called_once_with(title="Test (2)", header_style="bold magenta")
    assert mock_table_instance.add_column.call_count == 8
    assert mock_table_instance.add_row.call_count == 2
    first_row = mock_table_instance.add_row.call_args_list[0].args
    assert first_row[0] == "aws-eu-central-1"
    assert first_row[3] == "Frankfurt, DE"
    mock_console_instance.print.assert_called_once_with(mock_table_instance)


def test_report_regions_adds_distance_column(mocker, snapshot):
    mock_table_class = mocker.patch("cloudregions.reporters.console_reporter.Table")
    table = MagicMock()
    mock_table_class.return_value = table
    nearby = query.find_nearby_regions(snapshot, NearbySearch(latitude=48.8566, longitude=2.3522, limit=1))

    ConsoleReporter(console=MagicMock()).report_regions(nearby)

    assert table.add_column.call_count == 9
    assert table.add_row.call_args.args[-1] == "0"


def test_report_regions_empty(mocker):
    console = MagicMock()
    mock_table_class = mocker.patch("cloudregions.reporters.console_reporter.Table")

    ConsoleReporter(console=console).report_regions([])

    console.print.assert_called_once_with("No regions match.", style="yellow")
    mock_table_class.assert_not_called()


def test_report_region_detail_renders_text(snapshot):
    console = Console(record=True, width=120)
    ConsoleReporter(console=console).report_region_detail(snapshot.region_by_id["aws-us-gov-west-1"])
    text = console.export_text()
    assert "AWS GovCloud (US-West)" in text
    assert "FedRAMP-High, HIPAA" in text
    assert "US, IL5" in text


def test_report_counts_sorted_by_count(mocker):
    table = MagicMock()
    mocker.patch("cloudregions.reporters.console_reporter.Table", return_value=table)

    ConsoleReporter(console=MagicMock()).report_counts({"gcp": 1, "aws": 3}, "Coverage", "Provider")

    rows = [c.args for c in table.add_row.call_args_list]
    assert rows == [("aws", "3"), ("gcp", "1")]


def test_report_statistics_and_lists(snapshot):
    from cloudregions.core.aggregator import compute_statistics, list_cities, list_countries

    console = Console(record=True, width=120)
    reporter = ConsoleReporter(console=console)
    reporter.report_statistics(compute_statistics(snapshot))
    reporter.report_countries(list_countries(snapshot.regions))
    reporter.report_cities(list_cities(snapshot.regions))
    reporter.report_providers(list(snapshot.providers))
    text = console.export_text()
    assert "7 regions across 4 providers" in text
    assert "Regions by Provider" in text
    assert "Falkenstein" in text
    assert "Amazon Web Services" in text
