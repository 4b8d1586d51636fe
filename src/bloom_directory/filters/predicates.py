"""Single-field company filters.

Each filter returns a new list in input order and leaves its input untouched.
An empty criterion is a no-op. Multi-value filters match when the record's
field (or any element of it, for specialties and certifications) is one of
the accepted values.
"""

from typing import Iterable, List, Optional, Sequence

from ..models import CompanyRecord

Companies = Sequence[CompanyRecord]


def filter_by_text(companies: Companies, query: str) -> List[CompanyRecord]:
    """Case-insensitive substring match against name or description."""
    needle = query.strip().lower()
    if not needle:
        return list(companies)
    
    return [
        c for c in companies
        if needle in c.name.lower() or needle in c.description.lower()
    ]


def filter_by_category(companies: Companies, categories: Iterable[str]) -> List[CompanyRecord]:
    """Keep companies in any of the given categories."""
    accepted = set(categories)
    if not accepted:
        return list(companies)
    return [c for c in companies if c.category in accepted]


def filter_by_specialty(companies: Companies, specialties: Iterable[str]) -> List[CompanyRecord]:
    """Keep companies offering any of the given specialties."""
    accepted = set(specialties)
    if not accepted:
        return list(companies)
    return [c for c in companies if accepted.intersection(c.specialty)]


def filter_by_founded_range(
    companies: Companies,
    min_year: Optional[int] = None,
    max_year: Optional[int] = None,
) -> List[CompanyRecord]:
    """Keep companies founded within the inclusive range; a missing bound is open."""
    return [
        c for c in companies
        if (min_year is None or c.founded >= min_year)
        and (max_year is None or c.founded <= max_year)
    ]


def filter_by_employees(companies: Companies, ranges: Iterable[str]) -> List[CompanyRecord]:
    """Keep companies in any of the given employee ranges."""
    accepted = set(ranges)
    if not accepted:
        return list(companies)
    return [c for c in companies if c.employees in accepted]


def filter_by_business_type(companies: Companies, types: Iterable[str]) -> List[CompanyRecord]:
    """Keep companies with any of the given business types."""
    accepted = set(types)
    if not accepted:
        return list(companies)
    return [c for c in companies if c.business_type in accepted]


def filter_by_revenue(companies: Companies, ranges: Iterable[str]) -> List[CompanyRecord]:
    """Keep companies in any of the given revenue ranges."""
    accepted = set(ranges)
    if not accepted:
        return list(companies)
    return [c for c in companies if c.annual_revenue in accepted]


def filter_by_country(companies: Companies, countries: Iterable[str]) -> List[CompanyRecord]:
    """Keep companies headquartered in any of the given countries."""
    accepted = set(countries)
    if not accepted:
        return list(companies)
    return [c for c in companies if c.country in accepted]


def filter_by_certifications(companies: Companies, certifications: Iterable[str]) -> List[CompanyRecord]:
    """Keep companies holding any of the given certifications."""
    accepted = set(certifications)
    if not accepted:
        return list(companies)
    return [c for c in companies if accepted.intersection(c.certifications)]
