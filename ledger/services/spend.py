"""
Spend emissions ledger: kg CO2e = spend (USD) x CEDA factor (kg CO2e / USD).
"""

import logging
import math

from django.db.models import Count, Sum

from profiles.services import get_profile
from utils.exceptions import EntryNotFound, ProfileNotFound, Unauthorized, ValidationError
from ..models import SpendEmissionEntry
from .factors import get_emission_factor

logger = logging.getLogger(__name__)


def _parse_spend(spend_amount):
    if spend_amount is None or isinstance(spend_amount, bool):
        raise ValidationError("Invalid spend_amount: must be a positive number")
    try:
        spend = float(spend_amount)
    except (TypeError, ValueError):
        raise ValidationError("Invalid spend_amount: must be a positive number")
    if math.isnan(spend) or math.isinf(spend) or spend < 0:
        raise ValidationError("Invalid spend_amount: must be a positive number")
    return spend


def calculate_spend_emissions(category, country, spend_amount):
    """
    Stateless calculation for one spend amount.

    Returns:
        dict: country and category in the table's casing, spend_amount_usd,
              emission_factor_kg_co2e_per_usd, total_emissions_kg_co2e

    Raises:
        ValidationError: missing or non-text field, or negative spend
        NoEmissionFactor: no factor for the country and category
    """
    if not category or not country or spend_amount is None or spend_amount == '':
        raise ValidationError("Missing required fields: category, country, spend_amount")
    if not isinstance(category, str) or not isinstance(country, str):
        raise ValidationError("Invalid category or country: must be text")

    spend = _parse_spend(spend_amount)
    factor = get_emission_factor(country, category)

    return {
        "country": factor.country,
        "category": factor.category,
        "spend_amount_usd": spend,
        "emission_factor_kg_co2e_per_usd": factor.factor,
        "total_emissions_kg_co2e": spend * factor.factor,
    }


def add_entry(user, category, spend_amount, description=None):
    """
    Calculate and store a ledger entry using the country from the user's
    business profile.

    Raises:
        ProfileNotFound: no profile, or no country on it
        ValidationError: spend is not strictly positive
        NoEmissionFactor: no factor for the profile country and category
    """
    profile = get_profile(user)
    if profile is None or not profile.country:
        raise ProfileNotFound("No country found in onboarding data. Please complete onboarding first.")

    if _parse_spend(spend_amount) <= 0:
        raise ValidationError("Invalid spend_amount: must be a positive number")

    result = calculate_spend_emissions(category, profile.country, spend_amount)
    entry = SpendEmissionEntry.objects.create(
        user=user,
        category=result['category'],
        country=result['country'],
        spend_amount=result['spend_amount_usd'],
        emission_factor=result['emission_factor_kg_co2e_per_usd'],
        total_emissions=result['total_emissions_kg_co2e'],
        description=description or None,
    )
    logger.info(f"User {user.pk} added ledger entry {entry.id}: {entry.total_emissions:.1f} kg CO2e")
    return entry


def list_entries(user):
    """The user's entries, newest first."""
    return SpendEmissionEntry.objects.filter(user=user).order_by('-created_at', '-id')


def get_totals(user):
    totals = SpendEmissionEntry.objects.filter(user=user).aggregate(
        total_emissions=Sum('total_emissions'),
        total_spend=Sum('spend_amount'),
        entry_count=Count('id'),
    )
    return {
        "totalEmissions": totals['total_emissions'] or 0,
        "totalSpend": totals['total_spend'] or 0,
        "entryCount": totals['entry_count'],
    }


def delete_entry(user, entry_id):
    """
    Delete one of the user's entries.

    Raises:
        EntryNotFound: no entry with that id
        Unauthorized: the entry belongs to another user; it is left in place
    """
    entry = SpendEmissionEntry.objects.filter(pk=entry_id).first()
    if entry is None:
        raise EntryNotFound()
    if entry.user_id != user.pk:
        logger.warning(f"User {user.pk} tried to delete ledger entry {entry_id} owned by user {entry.user_id}")
        raise Unauthorized()

    entry.delete()
    return {"success": True}
