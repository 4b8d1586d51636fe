"""Aggregate statistics over company records, backed by polars."""

from typing import Any, Dict, Sequence, Tuple

import polars as pl

from .models import CompanyRecord
from .vocabulary import BUSINESS_TYPES, CATEGORIES, COUNTRIES, SPECIALTIES

FRAME_SCHEMA: Dict[str, pl.DataType] = {
    "id": pl.Utf8,
    "name": pl.Utf8,
    "category": pl.Utf8,
    "specialty": pl.List(pl.Utf8),
    "founded": pl.Int64,
    "employees": pl.Utf8,
    "business_type": pl.Utf8,
    "annual_revenue": pl.Utf8,
    "headquarters": pl.Utf8,
    "country": pl.Utf8,
    "certifications": pl.List(pl.Utf8),
    "description": pl.Utf8,
    "website": pl.Utf8,
    "image_url": pl.Utf8,
}

_COUNT_SCHEMA = {"label": pl.Utf8, "count": pl.Int64}


def companies_frame(companies: Sequence[CompanyRecord]) -> pl.DataFrame:
    """Build a DataFrame with one row per company and one column per field."""
    columns: Dict[str, list] = {name: [] for name in FRAME_SCHEMA}
    for company in companies:
        row = company.model_dump()
        for name, values in columns.items():
            value = row[name]
            values.append(list(value) if isinstance(value, tuple) else value)
    return pl.DataFrame(columns, schema=FRAME_SCHEMA)


def _vocabulary_counts(frame: pl.DataFrame, column: str, vocabulary: Tuple[str, ...]) -> pl.DataFrame:
    """Count ``column`` values, one row per vocabulary entry in vocabulary order."""
    observed = dict(
        frame.drop_nulls(column)
        .group_by(column)
        .agg(pl.len().alias("count"))
        .iter_rows()
    )
    return pl.DataFrame(
        {
            "label": list(vocabulary),
            "count": [observed.get(label, 0) for label in vocabulary],
        },
        schema=_COUNT_SCHEMA,
    )


def _ranked(counts: pl.DataFrame) -> pl.DataFrame:
    """Drop zero counts and sort descending, keeping vocabulary order on ties."""
    return counts.filter(pl.col("count") > 0).sort("count", descending=True, maintain_order=True)


def category_distribution(companies: Sequence[CompanyRecord]) -> pl.DataFrame:
    """Companies per category, most common first."""
    return _ranked(_vocabulary_counts(companies_frame(companies), "category", CATEGORIES))


def country_distribution(companies: Sequence[CompanyRecord], top: int = 10) -> pl.DataFrame:
    """The ``top`` countries by number of companies."""
    return _ranked(_vocabulary_counts(companies_frame(companies), "country", COUNTRIES)).head(top)


def business_type_distribution(companies: Sequence[CompanyRecord]) -> pl.DataFrame:
    """Companies per business type, every type listed even when zero."""
    return _vocabulary_counts(companies_frame(companies), "business_type", BUSINESS_TYPES)


def specialty_distribution(companies: Sequence[CompanyRecord]) -> pl.DataFrame:
    """How many companies offer each specialty, most common first."""
    exploded = companies_frame(companies).select("specialty").explode("specialty")
    return _ranked(_vocabulary_counts(exploded, "specialty", SPECIALTIES))


def founding_year_distribution(companies: Sequence[CompanyRecord]) -> pl.DataFrame:
    """Companies founded per year, for the years that occur, in ascending order."""
    return (
        companies_frame(companies)
        .group_by("founded")
        .agg(pl.len().alias("count"))
        .select(pl.col("founded").alias("year"), pl.col("count").cast(pl.Int64))
        .sort("year")
    )


def summary(companies: Sequence[CompanyRecord]) -> Dict[str, Any]:
    """Headline totals for the directory."""
    frame = companies_frame(companies)
    total = frame.height
    
    if total == 0:
        return {
            "total_companies": 0,
            "total_countries": 0,
            "total_categories": 0,
            "total_specialties": 0,
            "mean_founded": None,
            "certified_share": 0.0,
        }
    
    certified = frame.filter(pl.col("certifications").list.len() > 0).height
    return {
        "total_companies": total,
        "total_countries": frame["country"].n_unique(),
        "total_categories": frame["category"].n_unique(),
        "total_specialties": frame["specialty"].explode().drop_nulls().n_unique(),
        "mean_founded": frame["founded"].mean(),
        "certified_share": certified / total,
    }
