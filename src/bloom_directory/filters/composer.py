"""Combination of the single-field filters."""

from typing import Any, List, Mapping, Union

from ..models import CompanyFilters, CompanyRecord
from .predicates import (
    Companies,
    filter_by_business_type,
    filter_by_category,
    filter_by_certifications,
    filter_by_country,
    filter_by_employees,
    filter_by_founded_range,
    filter_by_revenue,
    filter_by_specialty,
    filter_by_text,
)


def apply_all_filters(
    companies: Companies,
    filters: Union[CompanyFilters, Mapping[str, Any]],
) -> List[CompanyRecord]:
    """
    Apply every present criterion in turn.
    
    Distinct fields combine with AND, values within a field with OR. Missing
    or empty fields are skipped.
    
    Args:
        companies: Records to filter
        filters: Criteria model, or a mapping validated into one
        
    Returns:
        Matching records in input order
    """
    if not isinstance(filters, CompanyFilters):
        filters = CompanyFilters.model_validate(filters)
    
    result = list(companies)
    
    if filters.text:
        result = filter_by_text(result, filters.text)
    
    if filters.categories:
        result = filter_by_category(result, filters.categories)
    
    if filters.specialties:
        result = filter_by_specialty(result, filters.specialties)
    
    if filters.founded_min is not None or filters.founded_max is not None:
        result = filter_by_founded_range(result, filters.founded_min, filters.founded_max)
    
    if filters.employees:
        result = filter_by_employees(result, filters.employees)
    
    if filters.business_types:
        result = filter_by_business_type(result, filters.business_types)
    
    if filters.revenues:
        result = filter_by_revenue(result, filters.revenues)
    
    if filters.countries:
        result = filter_by_country(result, filters.countries)
    
    if filters.certifications:
        result = filter_by_certifications(result, filters.certifications)
    
    return result
