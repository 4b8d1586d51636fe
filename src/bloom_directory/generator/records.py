"""Synthesis of a single company record from a shared random source."""

import math
import re
from typing import Sequence

from ..models import CompanyRecord
from ..vocabulary import (
    BusinessType,
    CATEGORY_WEIGHTS,
    CITIES_BY_COUNTRY,
    COUNTRY_WEIGHTS,
    Certification,
    DESCRIPTION_TEMPLATES,
    EmployeeRange,
    FALLBACK_CITY,
    NAME_MIDDLES,
    NAME_PREFIXES,
    NAME_REGIONS,
    NAME_SUFFIXES,
    RevenueRange,
    Specialty,
)
from .picker import RandomFn, pick_many, pick_one, pick_weighted

FOUNDED_MEAN = 2010
FOUNDED_STD_DEV = 5
FOUNDED_MIN = 1990
FOUNDED_MAX = 2024

# Substituted for a zero draw so the logarithm stays defined
_LOG_EPSILON = 0.0001

MIDDLE_PROBABILITY = 0.3
CERTIFIED_PROBABILITY = 0.6

_SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


def generate_founded_year(random: RandomFn) -> int:
    """Draw a founding year from a clamped bell curve around 2010."""
    u1 = random()
    u2 = random()
    z = math.sqrt(-2 * math.log(u1 or _LOG_EPSILON)) * math.cos(2 * math.pi * u2)
    
    # Round half up, not to even
    year = math.floor(FOUNDED_MEAN + z * FOUNDED_STD_DEV + 0.5)
    return max(FOUNDED_MIN, min(FOUNDED_MAX, year))


def generate_company_name(random: RandomFn, index: int) -> str:
    """
    Build a company name from prefix, optional middle and suffix parts.
    
    Every 100th record gets a regional prefix and every other 50th record a
    numeric suffix. Names are still not guaranteed to be unique.
    """
    prefix = pick_one(NAME_PREFIXES, random)
    suffix = pick_one(NAME_SUFFIXES, random)
    middle = pick_one(NAME_MIDDLES, random) if random() < MIDDLE_PROBABILITY else ""
    
    base_name = f"{prefix} {middle} {suffix}" if middle else f"{prefix} {suffix}"
    
    if index > 0 and index % 100 == 0:
        return f"{pick_one(NAME_REGIONS, random)} {base_name}"
    
    if index > 0 and index % 50 == 0:
        return f"{base_name} {int(random() * 900) + 100}"
    
    return base_name


def generate_description(
    category: str,
    specialty: Sequence[str],
    founded: int,
    business_type: str,
    certifications: Sequence[str],
    country: str,
    random: RandomFn,
) -> str:
    """Fill a randomly chosen description template with the record's values."""
    template = pick_one(DESCRIPTION_TEMPLATES, random)
    
    replacements = [
        ("{category}", category.lower()),
        ("{specialty}", specialty[0] if specialty else "flowers"),
        ("{year}", str(founded)),
        ("{businessType}", business_type),
        ("{cert}", certifications[0] if certifications else "quality"),
        ("{product}", "flowers and plants" if len(specialty) > 1 else "flowers"),
        ("{region}", country),
    ]
    for placeholder, value in replacements:
        template = template.replace(placeholder, value, 1)
    return template


def generate_website(name: str) -> str:
    """Derive a website URL from the company name."""
    slug = _SLUG_PATTERN.sub("-", name.lower()).strip("-")
    return f"https://www.{slug}.com"


def generate_image_url(company_id: str) -> str:
    """Derive a deterministic placeholder image URL from the id."""
    return f"https://picsum.photos/seed/{company_id}/400/300"


def generate_company(random: RandomFn, index: int) -> CompanyRecord:
    """
    Generate the record at position ``index``.
    
    Draws are consumed in a fixed order, so the result depends on how many
    draws earlier records took from the same source.
    
    Args:
        random: Shared source of uniform floats in [0, 1)
        index: Zero-based position in the dataset
        
    Returns:
        A validated, immutable company record
    """
    company_id = f"fc-{index + 1:04d}"
    name = generate_company_name(random, index)
    category = pick_weighted(CATEGORY_WEIGHTS, random)
    founded = generate_founded_year(random)
    country = pick_weighted(COUNTRY_WEIGHTS, random)
    
    specialty_count = int(random() * 4) + 1
    specialty = [s.value for s in pick_many(list(Specialty), specialty_count, random)]
    
    employees = pick_one(list(EmployeeRange), random)
    business_type = pick_one(list(BusinessType), random)
    annual_revenue = pick_one(list(RevenueRange), random)
    
    headquarters = pick_one(CITIES_BY_COUNTRY.get(country, [FALLBACK_CITY]), random)
    
    certifications: list[str] = []
    if random() < CERTIFIED_PROBABILITY:
        cert_count = int(random() * 3) + 1
        certifications = [c.value for c in pick_many(list(Certification), cert_count, random)]
    
    description = generate_description(
        category.value,
        specialty,
        founded,
        business_type.value,
        certifications,
        country.value,
        random,
    )
    
    return CompanyRecord(
        id=company_id,
        name=name,
        category=category,
        specialty=specialty,
        founded=founded,
        employees=employees,
        business_type=business_type,
        annual_revenue=annual_revenue,
        headquarters=headquarters,
        country=country,
        certifications=certifications,
        description=description,
        website=generate_website(name),
        image_url=generate_image_url(company_id),
    )
