"""
Footprint estimator: turns a business profile into an annual carbon
footprint breakdown through one schema-constrained model call.
"""

import json
import logging

from utils.exceptions import EcoPilotError, EstimationFailed, ProfileNotFound
from ..json_schemas import CARBON_FOOTPRINT_SCHEMA
from . import ai_client

logger = logging.getLogger(__name__)

PERCENT_TOLERANCE = 0.5

FOOTPRINT_SYSTEM_PROMPT = """You are an expert carbon footprint analyst specializing in small and medium-sized businesses.

Your task is to calculate an accurate annual carbon footprint (in kg CO2e) based on the business data provided.

**CALCULATION METHODOLOGY:**

1. **Electricity Emissions:**
   - If actual kWh data is provided: Use it directly
   - If only a currency amount is provided: Estimate kWh based on average electricity rates for the country/region
   - If no data: Estimate based on industry benchmarks (e.g., CBECS data for US, similar databases for other countries)
   - Apply appropriate emission factors based on the country's electricity grid mix

2. **Heating/Natural Gas Emissions:**
   - Convert heating fuel amounts to kWh or therms as needed
   - Apply appropriate emission factors (e.g., ~5.3 kg CO2e per therm for natural gas)
   - If no data: Estimate based on building size, climate zone (from postal code), and industry type

3. **Employee Commute Emissions:**
   - Use employee count and commute pattern to estimate
   - Typical patterns: "mostly_drive" (~4,800 kg CO2e/employee/year), "mixed" (~2,400 kg), "mostly_transit" (~800 kg)
   - Adjust for country-specific factors

4. **Business Travel Emissions:**
   - Flights: ~200-300 kg CO2e per domestic flight, ~1,000-2,000 kg per international flight
   - Consider business type and flight frequency

5. **Waste Emissions:**
   - Estimate based on trash bags per week
   - Typical: ~50-100 kg CO2e per bag per year (including methane from landfill)

**IMPORTANT RULES:**
- Be conservative but realistic in estimates
- Always explain your methodology in the dataSource and calculationNotes fields
- Mark each category's status as "calculated" (actual data), "estimated" (modeled), or "not_calculated"
- Provide specific, actionable recommendations based on the largest emission sources
- Consider regional factors (climate, grid mix, transportation infrastructure)

**OUTPUT REQUIREMENTS:**
- Return a complete breakdown with all major categories
- Percentages must sum to 100%
- Include detailed notes about data quality and assumptions"""


def build_footprint_prompt(business_data):
    return f"""Calculate the carbon footprint for this business:

{json.dumps(business_data, indent=2)}

Provide a detailed, accurate calculation with clear methodology notes."""


def normalize_breakdown(footprint, tolerance=PERCENT_TOLERANCE):
    """
    Make breakdown percentages sum to 100 (within tolerance).

    Model arithmetic drifts, so when the reported percentages are off by
    more than the tolerance they are re-derived from the kgCO2e values.
    """
    breakdown = footprint.get("breakdown") or []
    if not breakdown:
        return footprint

    percent_total = sum(item.get("percent", 0) for item in breakdown)
    if abs(percent_total - 100) <= tolerance:
        return footprint

    kg_total = sum(item.get("kgCO2e", 0) for item in breakdown)
    logger.warning(
        f"Footprint breakdown percentages sum to {percent_total:.2f}; re-deriving from kgCO2e values"
    )
    for item in breakdown:
        if kg_total > 0:
            item["percent"] = round(item.get("kgCO2e", 0) / kg_total * 100, 2)
        else:
            item["percent"] = round(100 / len(breakdown), 2)
    return footprint


def largest_source(footprint):
    """The breakdown entry with the most emissions, or None."""
    breakdown = footprint.get("breakdown") or []
    if not breakdown:
        return None
    return max(breakdown, key=lambda item: item.get("kgCO2e", 0))


def estimate_footprint(profile, client=None):
    """
    Estimate the annual carbon footprint for a business profile.

    Repeated calls for the same profile can return different numbers.

    Args:
        profile: BusinessProfile, possibly partially completed
        client: GenerativeModelClient (defaults to the configured one)

    Returns:
        dict: CarbonFootprint data (totalKgCO2eAnnual, dataSource, breakdown,
              calculationNotes?, recommendations?)

    Raises:
        EstimationFailed: wrapping any profile, model or validation failure
    """
    try:
        if profile is None:
            raise ProfileNotFound()

        client = client or ai_client.get_model_client()
        business_data = profile.to_business_data()
        footprint = client.generate_object(
            system=FOOTPRINT_SYSTEM_PROMPT,
            prompt=build_footprint_prompt(business_data),
            schema=CARBON_FOOTPRINT_SCHEMA,
            name="carbon_footprint",
        )
    except EstimationFailed:
        raise
    except EcoPilotError as e:
        logger.warning(f"Footprint estimation failed: {e}")
        raise EstimationFailed(f"Failed to calculate carbon footprint: {e}") from e
    except Exception as e:
        logger.exception(f"Footprint estimation failed: {str(e)}")
        raise EstimationFailed(f"Failed to calculate carbon footprint: {e}") from e

    footprint = normalize_breakdown(footprint)
    logger.info(
        f"Estimated footprint of {footprint['totalKgCO2eAnnual']:.0f} kg CO2e "
        f"across {len(footprint['breakdown'])} categories"
    )
    return footprint
