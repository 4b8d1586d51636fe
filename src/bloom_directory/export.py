"""Export of company records to tabular files."""

from pathlib import Path
from typing import Sequence, Union

import polars as pl
from pydantic.alias_generators import to_camel

from .insights import companies_frame
from .logging_config import get_logger
from .models import CompanyRecord

logger = get_logger(__name__)

SUPPORTED_FORMATS = (".csv", ".parquet", ".json")

# Joins list columns for CSV, which has no list type
LIST_SEPARATOR = "; "


def export_companies(companies: Sequence[CompanyRecord], filepath: Union[str, Path]) -> Path:
    """
    Write companies to ``filepath`` using the public camelCase column names.
    
    Args:
        companies: Records to write
        filepath: Output path; the suffix selects CSV, Parquet or JSON
        
    Returns:
        The path written
    """
    path = Path(filepath)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported file format: {filepath}")
    
    frame = companies_frame(companies)
    frame = frame.rename({name: to_camel(name) for name in frame.columns})
    
    path.parent.mkdir(parents=True, exist_ok=True)
    
    if suffix == ".csv":
        frame.with_columns(
            pl.col("specialty").list.join(LIST_SEPARATOR),
            pl.col("certifications").list.join(LIST_SEPARATOR),
        ).write_csv(path)
    elif suffix == ".parquet":
        frame.write_parquet(path)
    else:
        frame.write_json(path)
    
    logger.debug(f"Exported {frame.height} companies to {path}")
    return path
