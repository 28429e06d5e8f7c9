# src/cloudregions/reporters/console_reporter.py
"""
A reporter that displays query results as formatted tables in the console.
"""

import logging
from typing import Dict, List, Optional, Sequence

from rich.console import Console
from rich.table import Table

from ..models.provider import Provider
from ..models.query import CitySummary, CountrySummary, RegionStatistics, RegionWithDistance
from ..models.region import Region

logger = logging.getLogger(__name__)


def _yes_no(value: Optional[bool]) -> str:
    if value is None:
        return "-"
    return "yes" if value else "no"


class ConsoleReporter:
    """
    Renders catalog data to the console using the 'rich' library.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def report_regions(self, regions: Sequence[Region], title: str = "Cloud Regions"):
        """
        Displays regions in a table. A Distance column is added when the
        regions carry a distance from a search point.
        """
        if not regions:
            self.console.print("No regions match.", style="yellow")
            return

        with_distance = all(isinstance(r, RegionWithDistance) for r in regions)

        table = Table(title=f"{title} ({len(regions)})", header_style="bold magenta")
        table.add_column("ID", style="cyan")
        table.add_column("Provider", style="cyan")
        table.add_column("Name")
        table.add_column("Location")
        table.add_column("Type", style="dim")
        table.add_column("AZs", justify="right")
        table.add_column("Carbon Neutral", style="green")
        table.add_column("GPU", style="blue")
        if with_distance:
            table.add_column("Distance (km)", style="yellow", justify="right")

        for region in regions:
            row = [
                region.id,
                region.provider,
                region.display_name,
                f"{region.location.city}, {region.location.country_code}",
                region.region_type,
                str(region.availability_zones) if region.availability_zones is not None else "-",
                _yes_no(region.sustainability.carbon_neutral if region.sustainability else None),
                _yes_no(region.services.gpu if region.services else None),
            ]
            if with_distance:
                row.append(str(region.distance_km))
            table.add_row(*row)

        self.console.print(table)

    def report_region_detail(self, region: Region):
        table = Table(title=region.display_name, show_header=False, header_style="bold magenta")
        table.add_column("Field", style="bold cyan")
        table.add_column("Value")

        loc = region.location
        table.add_row("ID", region.id)
        table.add_row("Provider", region.provider)
        table.add_row("Region code", region.region_code)
        table.add_row("Type", region.region_type)
        table.add_row("Status", region.status)
        table.add_row("Location", f"{loc.city}, {loc.country} ({loc.country_code}), {loc.continent}")
        table.add_row("Coordinates", f"{loc.latitude:.4f}, {loc.longitude:.4f}")
        if region.availability_zones is not None:
            table.add_row("Availability zones", str(region.availability_zones))
        if region.launched_date:
            table.add_row("Launched", region.launched_date)
        if region.compliance:
            table.add_row("Compliance", ", ".join(region.compliance))
        if region.sustainability:
            s = region.sustainability
            parts = [f"carbon neutral: {_yes_no(s.carbon_neutral)}"]
            if s.renewable_energy_percent is not None:
                parts.append(f"renewable: {s.renewable_energy_percent:g}%")
            if s.pue_rating is not None:
                parts.append(f"PUE: {s.pue_rating:g}")
            table.add_row("Sustainability", ", ".join(parts))
        if region.services and region.services.gpu_types:
            table.add_row("GPU types", ", ".join(region.services.gpu_types))
        if region.sovereignty:
            sov = region.sovereignty
            details = [v for v in (sov.operator, sov.data_residency, sov.government_classification) if v]
            if details:
                table.add_row("Sovereignty", ", ".join(details))
        if region.notes:
            table.add_row("Notes", region.notes)

        self.console.print(table)

    def report_providers(self, providers: Sequence[Provider]):
        if not providers:
            self.console.print("No providers match.", style="yellow")
            return

        table = Table(title="Cloud Providers", header_style="bold magenta", show_lines=True)
        table.add_column("ID", style="cyan")
        table.add_column("Name")
        table.add_column("Tier", style="magenta")
        table.add_column("Website", style="dim")
        for p in providers:
            table.add_row(p.id, p.name, p.tier, p.website)
        self.console.print(table)

    def report_statistics(self, stats: RegionStatistics):
        self.console.print(
            f"[bold]{stats.total_regions}[/bold] regions across [bold]{stats.total_providers}[/bold] providers, "
            f"{stats.gpu_regions} with GPUs, {stats.carbon_neutral_regions} carbon neutral."
        )
        self.report_counts(stats.by_provider, "Regions by Provider", "Provider")
        self.report_counts(stats.by_continent, "Regions by Continent", "Continent")
        self.report_counts(stats.by_region_type, "Regions by Type", "Type")

    def report_counts(self, counts: Dict[str, int], title: str, label: str):
        """Displays a key -> count mapping, largest count first."""
        if not counts:
            self.console.print("No regions match.", style="yellow")
            return

        table = Table(title=title, header_style="bold magenta")
        table.add_column(label, style="cyan")
        table.add_column("Regions", justify="right", style="green")
        for key, count in sorted(counts.items(), key=lambda kv: kv[1], reverse=True):
            table.add_row(key, str(count))
        self.console.print(table)

    def report_countries(self, countries: List[CountrySummary]):
        table = Table(title="Countries", header_style="bold magenta")
        table.add_column("Code", style="cyan")
        table.add_column("Country")
        table.add_column("Regions", justify="right", style="green")
        for c in countries:
            table.add_row(c.country_code, c.country, str(c.region_count))
        self.console.print(table)

    def report_cities(self, cities: List[CitySummary]):
        table = Table(title="Cities", header_style="bold magenta")
        table.add_column("City", style="cyan")
        table.add_column("Country")
        table.add_column("Providers")
        table.add_column("Regions", justify="right", style="green")
        for c in cities:
            table.add_row(c.city, c.country, ", ".join(c.providers), str(c.region_count))
        self.console.print(table)
