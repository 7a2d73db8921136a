"""
CEDA spend-based emission factor table (kg CO2e per USD), loaded once
from JSON and shared read-only by every request.
"""

import json
import logging
from collections import namedtuple
from functools import lru_cache
from types import MappingProxyType

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from utils.exceptions import NoEmissionFactor

logger = logging.getLogger(__name__)

EmissionFactor = namedtuple('EmissionFactor', ['country', 'category', 'factor'])


def _key(country, category):
    return (country.strip().lower(), category.strip().lower())


@lru_cache(maxsize=None)
def load_factor_table(path=None):
    """
    Read the factor file into an immutable mapping keyed by the lower-cased
    (country, category) pair. The first row wins for duplicate keys.
    """
    path = path or settings.CEDA_FACTORS_PATH
    try:
        with open(path, encoding='utf-8') as f:
            rows = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not load emission factors from {path}: {e}")
        raise ImproperlyConfigured(f"Invalid CEDA factor file {path}: {e}") from e

    table = {}
    for row in rows:
        key = _key(row['country'], row['category'])
        if key in table:
            logger.warning(f"Duplicate emission factor for {row['country']} / {row['category']}, keeping the first")
            continue
        table[key] = EmissionFactor(row['country'], row['category'], float(row['factor']))

    logger.info(f"Loaded {len(table)} emission factors from {path}")
    return MappingProxyType(table)


def get_emission_factor(country, category, table=None):
    """
    Case-insensitive factor lookup.

    Raises:
        NoEmissionFactor: no row for the country and category
    """
    table = table if table is not None else load_factor_table()
    factor = table.get(_key(country, category))
    if factor is None:
        raise NoEmissionFactor()
    return factor


def list_categories(country=None, table=None):
    """Distinct category names, optionally limited to one country, sorted."""
    table = table if table is not None else load_factor_table()
    country_key = country.strip().lower() if country else None
    return sorted({
        factor.category
        for (row_country, _category), factor in table.items()
        if country_key is None or row_country == country_key
    })
