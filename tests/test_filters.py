"""Tests for the single-field filters and their composition."""

import pytest
from pydantic import ValidationError

from bloom_directory.filters.composer import apply_all_filters
from bloom_directory.filters.predicates import (
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
from bloom_directory.models import CompanyFilters


def names(companies):
    return [c.name for c in companies]


class TestTextFilter:
    """Test free-text search."""
    
    def test_empty_query_is_noop(self, sample_companies):
        """Blank queries return every company."""
        assert filter_by_text(sample_companies, "") == sample_companies
        assert filter_by_text(sample_companies, "   ") == sample_companies
    
    def test_matches_name_case_insensitive(self, sample_companies):
        """Names match regardless of case."""
        assert names(filter_by_text(sample_companies, "BLOOM")) == ["Bloom Gardens"]
    
    def test_partial_match(self, sample_companies):
        """Substrings of names match."""
        assert names(filter_by_text(sample_companies, "gar")) == ["Bloom Gardens", "Garden Center Elite"]
    
    def test_matches_description(self, sample_companies):
        """Descriptions are searched too."""
        assert names(filter_by_text(sample_companies, "california")) == ["Garden Center Elite"]
        assert names(filter_by_text(sample_companies, "leading")) == ["Bloom Gardens"]
    
    def test_query_is_trimmed(self, sample_companies):
        """Surrounding whitespace is ignored."""
        assert names(filter_by_text(sample_companies, "  orchid  ")) == ["Orchid Masters"]
    
    def test_no_match(self, sample_companies):
        """Unmatched queries return an empty list."""
        assert filter_by_text(sample_companies, "xyznonexistent") == []


class TestMultiValueFilters:
    """Test OR semantics within a field."""
    
    def test_empty_criteria_are_noops(self, sample_companies):
        """Every multi-value filter ignores an empty criterion."""
        for predicate in (
            filter_by_category,
            filter_by_specialty,
            filter_by_employees,
            filter_by_business_type,
            filter_by_revenue,
            filter_by_country,
            filter_by_certifications,
        ):
            result = predicate(sample_companies, [])
            assert result == sample_companies
            assert result is not sample_companies
    
    def test_input_not_mutated(self, sample_companies):
        """Filtering leaves the input list intact."""
        original = list(sample_companies)
        filter_by_category(sample_companies, ["Florist"])
        assert sample_companies == original
    
    def test_category_single(self, sample_companies):
        assert names(filter_by_category(sample_companies, ["Florist"])) == ["Bloom Gardens"]
    
    def test_category_union(self, sample_companies):
        """Multiple categories return the union, in input order."""
        result = filter_by_category(sample_companies, ["Wholesale", "Florist"])
        assert names(result) == ["Bloom Gardens", "Flora Wholesale"]
    
    def test_category_no_match(self, sample_companies):
        assert filter_by_category(sample_companies, ["Event Florist"]) == []
    
    def test_specialty_any(self, sample_companies):
        """A company matches when any of its specialties is accepted."""
        assert len(filter_by_specialty(sample_companies, ["Tulips", "Orchids"])) == 4
        assert names(filter_by_specialty(sample_companies, ["Carnations"])) == ["Petal Nursery"]
    
    def test_employees(self, sample_companies):
        assert len(filter_by_employees(sample_companies, ["11-50"])) == 2
        assert len(filter_by_employees(sample_companies, ["1-10", "201-500"])) == 2
    
    def test_business_type(self, sample_companies):
        assert len(filter_by_business_type(sample_companies, ["B2B"])) == 2
        assert len(filter_by_business_type(sample_companies, ["B2C", "Both"])) == 3
    
    def test_revenue(self, sample_companies):
        assert len(filter_by_revenue(sample_companies, ["$1M-$5M"])) == 2
        assert len(filter_by_revenue(sample_companies, ["$5M-$10M", "$10M-$50M"])) == 2
    
    def test_country(self, sample_companies):
        assert len(filter_by_country(sample_companies, ["United States"])) == 2
        assert len(filter_by_country(sample_companies, ["Netherlands", "Colombia"])) == 2
        assert filter_by_country(sample_companies, ["Japan"]) == []
    
    def test_certifications(self, sample_companies):
        """Companies without certifications never match."""
        assert names(filter_by_certifications(sample_companies, ["Organic Certified"])) == ["Bloom Gardens"]
        assert len(filter_by_certifications(sample_companies, ["MPS", "USDA Organic"])) == 2
        result = filter_by_certifications(sample_companies, ["Fair Trade"])
        assert len(result) == 1
        assert "Fair Trade" in result[0].certifications


class TestFoundedRange:
    """Test the inclusive year range."""
    
    def test_inclusive_range(self, sample_companies):
        result = filter_by_founded_range(sample_companies, 2005, 2010)
        assert len(result) == 3
        assert all(2005 <= c.founded <= 2010 for c in result)
    
    def test_exact_year(self, sample_companies):
        result = filter_by_founded_range(sample_companies, 2010, 2010)
        assert [c.founded for c in result] == [2010, 2010]
    
    def test_empty_range(self, sample_companies):
        assert filter_by_founded_range(sample_companies, 2020, 2025) == []
    
    def test_covering_range(self, sample_companies):
        assert filter_by_founded_range(sample_companies, 1990, 2030) == sample_companies
    
    def test_open_bounds(self, sample_companies):
        """A missing bound leaves that side of the range open."""
        assert len(filter_by_founded_range(sample_companies, min_year=2010)) == 3
        assert len(filter_by_founded_range(sample_companies, max_year=2005)) == 2
        assert filter_by_founded_range(sample_companies) == sample_companies


class TestApplyAllFilters:
    """Test AND composition across fields."""
    
    def test_no_filters(self, sample_companies):
        assert apply_all_filters(sample_companies, CompanyFilters()) == sample_companies
        assert apply_all_filters(sample_companies, {}) == sample_companies
    
    def test_single_filter(self, sample_companies):
        assert len(apply_all_filters(sample_companies, {"categories": ["Florist"]})) == 1
    
    def test_and_across_fields(self, sample_companies):
        """Multiple fields must all match; camelCase keys are accepted."""
        result = apply_all_filters(
            sample_companies,
            {"countries": ["United States"], "businessTypes": ["B2C"]},
        )
        assert len(result) == 2
        assert all(c.country == "United States" and c.business_type == "B2C" for c in result)
    
    def test_text_with_country(self, sample_companies):
        """The documented end-to-end scenario."""
        result = apply_all_filters(
            sample_companies,
            CompanyFilters(text="garden", countries=["United States"]),
        )
        assert names(result) == ["Bloom Gardens", "Garden Center Elite"]
    
    def test_all_filters_together(self, sample_companies):
        filters = CompanyFilters(
            text="orchid",
            categories=["Grower"],
            specialties=["Orchids"],
            founded_min=2005,
            founded_max=2015,
            employees=["11-50"],
            business_types=["B2B"],
            revenues=["$1M-$5M"],
            countries=["Thailand"],
            certifications=["Rainforest Alliance"],
        )
        assert names(apply_all_filters(sample_companies, filters)) == ["Orchid Masters"]
    
    def test_no_intersection(self, sample_companies):
        result = apply_all_filters(
            sample_companies,
            {"categories": ["Florist"], "countries": ["Thailand"]},
        )
        assert result == []
    
    def test_ignores_empty_values(self, sample_companies):
        result = apply_all_filters(
            sample_companies,
            {"text": None, "categories": [], "countries": ["United States"]},
        )
        assert len(result) == 2
    
    def test_single_year_bound(self, sample_companies):
        """One year bound on its own still narrows the result."""
        assert len(apply_all_filters(sample_companies, {"founded_min": 2010})) == 3
    
    def test_order_independent(self, canonical_companies):
        """Applying fields in a different order yields the same set."""
        combined = apply_all_filters(
            canonical_companies,
            {"countries": ["United States", "Kenya"], "certifications": ["MPS"], "founded_max": 2012},
        )
        stepwise = filter_by_country(
            filter_by_founded_range(
                filter_by_certifications(canonical_companies, ["MPS"]), max_year=2012
            ),
            ["United States", "Kenya"],
        )
        assert combined == stepwise
    
    def test_invalid_mapping_rejected(self, sample_companies):
        """Unknown vocabulary values fail validation."""
        with pytest.raises(ValidationError):
            apply_all_filters(sample_companies, {"categories": ["Florists"]})
