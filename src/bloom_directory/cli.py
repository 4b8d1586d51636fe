"""Command-line interface for the Bloom company directory."""

from typing import Any, Dict, List, Optional

import polars as pl
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from .config import LOG_LEVELS, settings
from .logging_config import setup_logging, get_logger
from .cache import cache_stats, clear_cache
from .export import SUPPORTED_FORMATS, export_companies
from .filters.composer import apply_all_filters
from .filters.url_state import deserialize_filters, serialize_filters
from .generator.dataset import load_companies
from .models import CompanyFilters
from . import insights as stats

# Initialize CLI app
app = typer.Typer(
    name="bloom",
    help="Browse, filter and export the Bloom flower-industry company directory",
    add_completion=False,
)
console = Console()
logger = get_logger(__name__)


@app.callback()
def main(
    log_level: str = typer.Option(
        settings.log_level,
        "--log-level",
        help="Set logging level",
        case_sensitive=False,
    ),
    cache_dir: str = typer.Option(
        settings.cache_dir,
        "--cache-dir",
        help="Directory for disk cache",
    ),
) -> None:
    """Bloom CLI - explore a deterministic directory of flower-industry companies."""
    if log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(
            f"must be one of {', '.join(LOG_LEVELS)}", param_hint="--log-level"
        )

    # Update settings
    settings.log_level = log_level.upper()
    settings.cache_dir = cache_dir

    # Setup logging
    setup_logging()


def _counts_table(title: str, frame: pl.DataFrame, label: str = "Label") -> Table:
    """Render a label/count frame as a rich table."""
    table = Table(title=title)
    table.add_column(label, style="cyan")
    table.add_column("Companies", style="green", justify="right")
    for name, count in frame.iter_rows():
        table.add_row(str(name), str(count))
    return table


@app.command()
def generate(
    output: str = typer.Option(
        "data/companies.csv",
        "--out", "-o",
        help="Output file (.csv, .parquet or .json)",
    ),
    seed: int = typer.Option(settings.seed, "--seed", help="Dataset seed"),
) -> None:
    """Generate the company dataset and write it to a file."""
    companies = load_companies(seed, settings.company_count)

    try:
        path = export_companies(companies, output)
    except ValueError as e:
        console.print(f"[red]Error: {e}")
        console.print(f"Supported formats: {', '.join(SUPPORTED_FORMATS)}")
        raise typer.Exit(1)

    console.print(f"[green]✅ Wrote {len(companies)} companies (seed {seed}) to {path}")


@app.command()
def search(
    query: str = typer.Argument(
        "",
        help="Shareable query string, e.g. 'cat=Florist&country=Kenya'",
    ),
    text: Optional[str] = typer.Option(None, "--text", "-t", help="Match name or description"),
    category: Optional[List[str]] = typer.Option(None, "--category", help="Category (repeatable)"),
    specialty: Optional[List[str]] = typer.Option(None, "--specialty", help="Specialty (repeatable)"),
    certification: Optional[List[str]] = typer.Option(None, "--certification", help="Certification (repeatable)"),
    country: Optional[List[str]] = typer.Option(None, "--country", help="Country (repeatable)"),
    employees: Optional[List[str]] = typer.Option(None, "--employees", help="Employee range (repeatable)"),
    business_type: Optional[List[str]] = typer.Option(None, "--business-type", help="B2B, B2C or Both (repeatable)"),
    revenue: Optional[List[str]] = typer.Option(None, "--revenue", help="Revenue range (repeatable)"),
    founded_min: Optional[int] = typer.Option(None, "--founded-min", help="Earliest founding year"),
    founded_max: Optional[int] = typer.Option(None, "--founded-max", help="Latest founding year"),
    seed: int = typer.Option(settings.seed, "--seed", help="Dataset seed"),
    limit: int = typer.Option(settings.page_size, "--limit", "-n", help="Rows to display", min=1),
) -> None:
    """
    Search the directory.

    Options override the matching fields of QUERY, and the resulting
    shareable query string is printed after the results.
    """
    overrides: Dict[str, Any] = {
        "text": text,
        "categories": category,
        "specialties": specialty,
        "certifications": certification,
        "countries": country,
        "employees": employees,
        "business_types": business_type,
        "revenues": revenue,
    }
    criteria = {key: value for key, value in deserialize_filters(query) if value is not None}
    criteria.update({key: value for key, value in overrides.items() if value})
    if founded_min is not None:
        criteria["founded_min"] = founded_min
    if founded_max is not None:
        criteria["founded_max"] = founded_max

    try:
        filters = CompanyFilters.model_validate(criteria)
    except ValidationError as e:
        console.print("[red]Error: invalid filter values")
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            console.print(f"[red]  {field}: {error['msg']}")
        raise typer.Exit(1)

    companies = load_companies(seed, settings.company_count)
    results = apply_all_filters(companies, filters)

    table = Table(title=f"{len(results)} of {len(companies)} companies")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Category")
    table.add_column("Country")
    table.add_column("Founded", justify="right")
    table.add_column("Type")

    for company in results[:limit]:
        table.add_row(
            company.id,
            company.name,
            company.category,
            company.country,
            str(company.founded),
            company.business_type,
        )

    console.print(table)

    if len(results) > limit:
        console.print(f"[yellow]Showing first {limit} of {len(results)} matches (use --limit to see more)")

    if not filters.is_empty():
        console.print(f"\n[cyan]Share:[/cyan] ?{serialize_filters(filters)}", highlight=False)


@app.command()
def show(
    company_id: str = typer.Argument(..., help="Company id, e.g. fc-0001"),
    seed: int = typer.Option(settings.seed, "--seed", help="Dataset seed"),
) -> None:
    """Display a single company."""
    companies = load_companies(seed, settings.company_count)
    company = next((c for c in companies if c.id == company_id), None)

    if company is None:
        console.print(f"[red]Error: No company with id '{company_id}'")
        raise typer.Exit(1)

    table = Table(title=company.name)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    for field, value in company.model_dump(by_alias=True).items():
        if isinstance(value, tuple):
            value = ", ".join(value) or "-"
        table.add_row(field, str(value))

    console.print(table)


@app.command()
def insights(
    seed: int = typer.Option(settings.seed, "--seed", help="Dataset seed"),
    top: int = typer.Option(10, "--top", help="Number of countries to list", min=1),
) -> None:
    """Display directory statistics and distributions."""
    companies = load_companies(seed, settings.company_count)
    totals = stats.summary(companies)

    table = Table(title="Key Statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Total companies", str(totals["total_companies"]))
    table.add_row("Countries", str(totals["total_countries"]))
    table.add_row("Categories", str(totals["total_categories"]))
    table.add_row("Specialties", str(totals["total_specialties"]))
    if totals["mean_founded"] is not None:
        table.add_row("Mean founding year", f"{totals['mean_founded']:.1f}")
    table.add_row("Certified", f"{totals['certified_share']:.0%}")

    console.print(table)
    console.print(_counts_table("Categories", stats.category_distribution(companies), "Category"))
    console.print(_counts_table(f"Top {top} Countries", stats.country_distribution(companies, top), "Country"))
    console.print(_counts_table("Business Types", stats.business_type_distribution(companies), "Type"))
    console.print(_counts_table("Specialties", stats.specialty_distribution(companies), "Specialty"))
    console.print(_counts_table("Founding Years", stats.founding_year_distribution(companies), "Year"))


@app.command()
def cache(
    action: str = typer.Argument(..., help="Cache action: 'stats', 'clear'"),
) -> None:
    """Manage the application cache."""
    if action == "stats":
        cache_info = cache_stats()

        table = Table(title="Cache Statistics")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Cache entries", str(cache_info["size"]))
        table.add_row("Cache volume", f"{cache_info['volume'] / 1024 / 1024:.1f} MB")
        table.add_row("Cache directory", settings.cache_dir)

        console.print(table)

    elif action == "clear":
        if typer.confirm("Are you sure you want to clear the cache?"):
            clear_cache()
            console.print("[green]✅ Cache cleared successfully")
        else:
            console.print("Cancelled.")
    else:
        console.print(f"[red]Error: Unknown cache action '{action}'")
        console.print("Available actions: stats, clear")
        raise typer.Exit(1)


@app.command()
def config() -> None:
    """Display current configuration."""
    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Seed", str(settings.seed))
    table.add_row("Company count", str(settings.company_count))
    table.add_row("Cache Directory", settings.cache_dir)
    table.add_row("Cache TTL", f"{settings.cache_ttl_days} days")
    table.add_row("Page size", str(settings.page_size))
    table.add_row("Log Level", settings.log_level)

    console.print(table)


if __name__ == "__main__":
    app()
