"""Query-string encoding of filter criteria for shareable explorer URLs.

The parameter keys and the comma-joined, form-encoded values are a public
URL format and must stay stable.
"""

import math
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union
from urllib.parse import parse_qsl, quote_plus

from ..logging_config import get_logger
from ..models import CompanyFilters
from ..vocabulary import (
    BUSINESS_TYPES,
    CATEGORIES,
    CERTIFICATIONS,
    COUNTRIES,
    EMPLOYEE_RANGES,
    REVENUE_RANGES,
    SPECIALTIES,
)

logger = get_logger(__name__)

TEXT_PARAM = "q"
FOUNDED_MIN_PARAM = "fmin"
FOUNDED_MAX_PARAM = "fmax"

# (model field, query key, vocabulary), in serialisation order
LIST_PARAMS: List[Tuple[str, str, Tuple[str, ...]]] = [
    ("categories", "cat", CATEGORIES),
    ("specialties", "spec", SPECIALTIES),
    ("certifications", "cert", CERTIFICATIONS),
    ("countries", "country", COUNTRIES),
    ("employees", "emp", EMPLOYEE_RANGES),
    ("business_types", "biz", BUSINESS_TYPES),
    ("revenues", "rev", REVENUE_RANGES),
]

# (model field, query key, rounding for fractional bounds)
YEAR_PARAMS: List[Tuple[str, str, Callable[[float], int]]] = [
    ("founded_min", FOUNDED_MIN_PARAM, math.ceil),
    ("founded_max", FOUNDED_MAX_PARAM, math.floor),
]


def _encode(value: str) -> str:
    """Form-encode a value the way browsers' URLSearchParams does."""
    return quote_plus(value, safe="*").replace("~", "%7E")


def serialize_filters(filters: Union[CompanyFilters, Mapping[str, Any]]) -> str:
    """
    Serialise criteria to a query string without a leading ``?``.

    Empty and missing fields are omitted, so unconstrained criteria
    serialise to an empty string. A mapping is validated into
    ``CompanyFilters`` first and raises ``ValidationError`` on values outside
    the vocabularies; a model is written as it stands.
    """
    if not isinstance(filters, CompanyFilters):
        filters = CompanyFilters.model_validate(filters)

    pairs: List[Tuple[str, str]] = []

    if filters.text:
        pairs.append((TEXT_PARAM, filters.text))

    for field, key, _ in LIST_PARAMS:
        values = getattr(filters, field)
        if values:
            pairs.append((key, ",".join(values)))

    for field, key, _ in YEAR_PARAMS:
        year = getattr(filters, field)
        if year is not None:
            pairs.append((key, str(year)))

    return "&".join(f"{key}={_encode(value)}" for key, value in pairs)


def _first_values(source: Union[str, Mapping[str, Any]]) -> Dict[str, str]:
    """Normalise a query string or parameter mapping to first-value strings."""
    params: Dict[str, str] = {}

    if isinstance(source, str):
        query = source[1:] if source.startswith("?") else source
        for key, value in parse_qsl(query, keep_blank_values=True):
            params.setdefault(key, value)
        return params

    for key, value in source.items():
        if isinstance(value, (list, tuple)):
            value = value[0] if value else None
        if value is None:
            continue
        params[str(key)] = value if isinstance(value, str) else str(value)
    return params


def _parse_year(raw: str, rounding: Callable[[float], int]) -> Optional[int]:
    """
    Parse a year bound, returning None for anything that is not a finite number.

    Fractional bounds are rounded inwards with ``rounding`` (``math.ceil`` for
    a lower bound, ``math.floor`` for an upper one) so they select the same
    whole years.
    """
    try:
        number = float(raw.strip())
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return int(rounding(number))


def deserialize_filters(source: Union[str, Mapping[str, Any]]) -> CompanyFilters:
    """
    Parse a query string (or parsed parameter mapping) into criteria.

    Unknown keys are ignored and malformed year bounds are omitted. Values
    outside a field's vocabulary are dropped when the field has known values
    too; when none are known the raw tokens are kept unvalidated, so the
    criterion matches no company instead of vanishing. Never raises.

    Args:
        source: Query string, with or without ``?``, or a key/value mapping

    Returns:
        The decoded criteria
    """
    params = _first_values(source)
    values: Dict[str, Any] = {}
    unmatched: Dict[str, List[str]] = {}

    text = params.get(TEXT_PARAM)
    if text:
        values["text"] = text

    for field, key, vocabulary in LIST_PARAMS:
        raw = params.get(key)
        if not raw:
            continue
        tokens = [token for token in raw.split(",") if token]
        known = [token for token in tokens if token in vocabulary]
        if len(known) != len(tokens):
            logger.debug(f"Unknown values for '{key}': {sorted(set(tokens) - set(known))}")
        if known:
            values[field] = known
        elif tokens:
            unmatched[field] = tokens

    for field, key, rounding in YEAR_PARAMS:
        raw = params.get(key)
        if not raw:
            continue
        year = _parse_year(raw, rounding)
        if year is None:
            logger.debug(f"Ignoring non-numeric '{key}' value {raw!r}")
        else:
            values[field] = year

    filters = CompanyFilters(**values)
    if unmatched:
        filters = filters.model_copy(update=unmatched)
    return filters
