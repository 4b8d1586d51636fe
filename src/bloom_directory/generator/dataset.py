"""Generation of the full company dataset and the canonical shared copy."""

from typing import Optional, Tuple

from ..cache import cached
from ..logging_config import get_logger
from ..models import CompanyRecord
from .random_source import SeededRandom
from .records import generate_company

logger = get_logger(__name__)

CANONICAL_SEED = 42
COMPANY_COUNT = 1000

# Canonical dataset, built on first use by get_companies()
_companies: Optional[Tuple[CompanyRecord, ...]] = None


def generate_companies(
    seed: int = CANONICAL_SEED,
    count: int = COMPANY_COUNT,
) -> Tuple[CompanyRecord, ...]:
    """
    Generate ``count`` company records from a single seeded source.
    
    Records share one random stream and are produced strictly in index
    order; changing ``count`` or the order changes every later record.
    
    Args:
        seed: Seed for the random source
        count: Number of records to generate
        
    Returns:
        Tuple of records ordered by id
    """
    random = SeededRandom(seed)
    companies = tuple(generate_company(random, index) for index in range(count))
    logger.debug(f"Generated {len(companies)} companies with seed {seed}")
    return companies


def get_companies() -> Tuple[CompanyRecord, ...]:
    """Return the canonical seed-42 dataset, generating it on first call."""
    global _companies
    if _companies is None:
        _companies = generate_companies(CANONICAL_SEED, COMPANY_COUNT)
        logger.info(f"Canonical dataset ready: {len(_companies)} companies")
    return _companies


@cached(key_prefix="companies")
def load_companies(seed: int = CANONICAL_SEED, count: int = COMPANY_COUNT) -> Tuple[CompanyRecord, ...]:
    """Generate a dataset, reusing a disk-cached copy when one exists."""
    if seed == CANONICAL_SEED and count == COMPANY_COUNT:
        return get_companies()
    return generate_companies(seed, count)
