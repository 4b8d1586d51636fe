"""Record and filter-criteria models."""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .vocabulary import (
    BusinessType,
    Category,
    Certification,
    Country,
    EmployeeRange,
    RevenueRange,
    Specialty,
)


class CompanyRecord(BaseModel):
    """A generated flower-industry company.

    Enumerated fields are validated against their vocabularies and stored as
    plain strings. Serialising with ``by_alias=True`` yields the public
    camelCase record shape (``businessType``, ``annualRevenue``, ``imageUrl``).
    """

    model_config = ConfigDict(
        frozen=True,
        use_enum_values=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(..., pattern=r"^fc-\d{4,}$")
    name: str = Field(..., min_length=1)
    category: Category
    specialty: Tuple[Specialty, ...] = Field(..., min_length=1, max_length=4)
    founded: int = Field(..., ge=1990, le=2024)
    employees: EmployeeRange
    business_type: BusinessType
    annual_revenue: RevenueRange
    headquarters: str = Field(..., min_length=1)
    country: Country
    certifications: Tuple[Certification, ...] = Field(default=(), max_length=3)
    description: str = Field(..., min_length=1)
    website: str
    image_url: str


class CompanyFilters(BaseModel):
    """Filter criteria for the company explorer.

    Every field is optional; ``None`` or an empty list means no constraint.
    Multi-value fields match with OR semantics, distinct fields combine with AND.
    """

    model_config = ConfigDict(
        use_enum_values=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    text: Optional[str] = None
    categories: Optional[List[Category]] = None
    specialties: Optional[List[Specialty]] = None
    certifications: Optional[List[Certification]] = None
    countries: Optional[List[Country]] = None
    employees: Optional[List[EmployeeRange]] = None
    business_types: Optional[List[BusinessType]] = None
    revenues: Optional[List[RevenueRange]] = None
    founded_min: Optional[int] = None
    founded_max: Optional[int] = None

    def is_empty(self) -> bool:
        """Return True when no field constrains the result."""
        return not any(value not in (None, "", []) for _, value in self)
