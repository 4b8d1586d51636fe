"""Shared fixtures."""

import pytest

from bloom_directory.config import settings
from bloom_directory.generator.dataset import get_companies
from bloom_directory.models import CompanyRecord


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep cache writes and CLI setting changes inside the test."""
    monkeypatch.setattr(settings, "cache_dir", str(tmp_path / "cache"))
    monkeypatch.setattr(settings, "log_level", settings.log_level)
    yield settings


@pytest.fixture(scope="session")
def canonical_companies():
    """The seed-42 dataset."""
    return get_companies()


@pytest.fixture
def sample_companies():
    """Five hand-written records covering each filterable field."""
    return [
        CompanyRecord(
            id="fc-0001",
            name="Bloom Gardens",
            category="Florist",
            specialty=["Roses", "Tulips"],
            founded=2010,
            employees="11-50",
            business_type="B2C",
            annual_revenue="$1M-$5M",
            headquarters="New York",
            country="United States",
            certifications=["Organic Certified", "Fair Trade"],
            description="A leading florist specializing in roses.",
            website="https://www.bloom-gardens.com",
            image_url="https://picsum.photos/seed/fc-0001/400/300",
        ),
        CompanyRecord(
            id="fc-0002",
            name="Flora Wholesale",
            category="Wholesale",
            specialty=["Orchids", "Lilies"],
            founded=2005,
            employees="51-200",
            business_type="B2B",
            annual_revenue="$5M-$10M",
            headquarters="Amsterdam",
            country="Netherlands",
            certifications=["MPS"],
            description="Premium wholesale flower distributor.",
            website="https://www.flora-wholesale.com",
            image_url="https://picsum.photos/seed/fc-0002/400/300",
        ),
        CompanyRecord(
            id="fc-0003",
            name="Petal Nursery",
            category="Nursery",
            specialty=["Tulips", "Carnations"],
            founded=2015,
            employees="1-10",
            business_type="Both",
            annual_revenue="$100K-$500K",
            headquarters="Bogotá",
            country="Colombia",
            certifications=[],
            description="Family-owned nursery with beautiful carnations.",
            website="https://www.petal-nursery.com",
            image_url="https://picsum.photos/seed/fc-0003/400/300",
        ),
        CompanyRecord(
            id="fc-0004",
            name="Garden Center Elite",
            category="Garden Center",
            specialty=["Succulents", "Native Plants"],
            founded=2000,
            employees="201-500",
            business_type="B2C",
            annual_revenue="$10M-$50M",
            headquarters="Los Angeles",
            country="United States",
            certifications=["USDA Organic", "Carbon Neutral"],
            description="Largest garden center in California.",
            website="https://www.garden-center-elite.com",
            image_url="https://picsum.photos/seed/fc-0004/400/300",
        ),
        CompanyRecord(
            id="fc-0005",
            name="Orchid Masters",
            category="Grower",
            specialty=["Orchids"],
            founded=2010,
            employees="11-50",
            business_type="B2B",
            annual_revenue="$1M-$5M",
            headquarters="Bangkok",
            country="Thailand",
            certifications=["Rainforest Alliance"],
            description="Expert orchid growers with rare varieties.",
            website="https://www.orchid-masters.com",
            image_url="https://picsum.photos/seed/fc-0005/400/300",
        ),
    ]
