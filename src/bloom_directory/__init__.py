"""Bloom Directory - synthetic flower-industry company directory with shareable filters."""

__version__ = "0.1.0"

from .config import Settings
from .models import CompanyFilters, CompanyRecord
from .generator.dataset import generate_companies, get_companies
from .filters.composer import apply_all_filters
from .filters.url_state import deserialize_filters, serialize_filters

__all__ = [
    "Settings",
    "CompanyFilters",
    "CompanyRecord",
    "generate_companies",
    "get_companies",
    "apply_all_filters",
    "deserialize_filters",
    "serialize_filters",
]
