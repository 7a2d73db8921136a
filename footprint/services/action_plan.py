"""
Action plan generator.

The plan is assembled from six small, schema-constrained model calls issued
concurrently (summary, priority action, quick wins and three groups of
categorised actions) rather than one large request. Any failed call aborts
the whole generation.
"""

import json
import logging
import re
from collections import namedtuple
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait

from django.conf import settings

from utils.exceptions import EcoPilotError, GenerationFailed
from ..json_schemas import (
    ACTION_PLAN_SCHEMA,
    ENERGY_ACTIONS_SCHEMA,
    EXECUTIVE_SUMMARY_SCHEMA,
    OTHER_ACTIONS_SCHEMA,
    PRIORITY_ACTION_SCHEMA,
    QUICK_WINS_SCHEMA,
    TRANSPORT_ACTIONS_SCHEMA,
)
from . import ai_client
from .ai_client import validate_against_schema
from .estimator import largest_source

logger = logging.getLogger(__name__)

SubRequest = namedtuple('SubRequest', ['name', 'schema', 'prompt'])

BASE_SYSTEM_PROMPT = """You are "EcoPilot", a world-class sustainability consultant for small and medium-sized businesses.

You are expert, encouraging, and focused on practical, cost-effective solutions.

**CRITICAL RULES:**
- If the business RENTS their space, NEVER recommend building modifications (solar panels, insulation upgrades, HVAC replacement)
- If they OWN, building improvements are fair game
- Always consider industry context (e.g., restaurants have different needs than offices)
- Be specific with numbers from the footprint data
- Focus on the largest emission sources from the breakdown

**OUTPUT FORMAT:**
- Return ONLY valid JSON data matching the requested schema
- Do NOT return a JSON Schema definition
- Do NOT include "type", "properties", or schema metadata in your response
- Return the actual data values directly"""

# Language that implies changing the building envelope or its fixed plant
BUILDING_MODIFICATION_PATTERNS = [
    re.compile(r"\bsolar\b", re.IGNORECASE),
    re.compile(r"\bphotovoltaic", re.IGNORECASE),
    re.compile(r"\binsulat", re.IGNORECASE),
    re.compile(r"\bheat pumps?\b", re.IGNORECASE),
    re.compile(r"\b(?:double|triple)[- ]glaz", re.IGNORECASE),
    re.compile(r"\bgreen roof", re.IGNORECASE),
    re.compile(
        r"\b(?:replace|replacing|replacement of|upgrade|upgrading|install|installing)\b[^.]{0,40}?"
        r"\b(?:hvac|furnace|boiler|windows?|roof)\b",
        re.IGNORECASE,
    ),
    re.compile(r"\b(?:hvac|furnace|boiler|window|roof)\s+(?:replacement|upgrade|retrofit)", re.IGNORECASE),
]


def build_business_context(profile, footprint):
    return {
        "businessProfile": profile.business_profile_data(),
        "footprint": {
            "total_kgCO2e_annual": footprint.get("totalKgCO2eAnnual"),
            "data_source": footprint.get("dataSource"),
            "breakdown": footprint.get("breakdown"),
        },
    }


def build_sub_requests(profile, footprint):
    """The six focused generation requests, in merge order."""
    context = json.dumps(build_business_context(profile, footprint), indent=2)
    top = largest_source(footprint) or {}
    top_category = top.get("category", "unknown")
    top_percent = float(top.get("percent", 0))
    industry = profile.industry or "Unknown"
    employees = profile.number_of_employees or 0
    tenure = profile.own_or_rent or "rent"

    rent_warning = ""
    if profile.is_renting:
        rent_warning = "IMPORTANT: Do NOT recommend building modifications (solar, insulation, HVAC)."

    return [
        SubRequest('summary', EXECUTIVE_SUMMARY_SCHEMA, f"""Generate an encouraging executive summary for this business:

{context}

Be specific with numbers and realistic about opportunities."""),

        SubRequest('priority', PRIORITY_ACTION_SCHEMA, f"""Identify the single most impactful action for this business:

{context}

Target the largest emission source ({top_category}: {top_percent:.1f}% of emissions).
Consider their constraints (owns or rents: {tenure}).
Provide specific, actionable guidance."""),

        SubRequest('quick_wins', QUICK_WINS_SCHEMA, f"""Generate 3-5 quick wins for this business:

{context}

Focus on:
- Low-cost actions (< $1,000)
- Quick implementation (1-3 months)
- High impact relative to cost
- Specific to their industry ({industry})"""),

        SubRequest('energy', ENERGY_ACTIONS_SCHEMA, f"""Generate 2-4 energy-related actions for this business (prefer 4):

Business: {industry}, {employees} employees
Largest emission source: {top_category} ({top_percent:.1f}%)
Owns or rents: {tenure}

Focus on energy efficiency and renewable energy.
{rent_warning}""".rstrip()),

        SubRequest('transport', TRANSPORT_ACTIONS_SCHEMA, f"""Generate 1-3 transportation-related actions for this business (prefer 3):

Business: {industry}, {employees} employees
Employee commute pattern: {profile.employee_commute_pattern or "unknown"}
Business flights per year: {profile.business_flights_per_year or 0}

Focus on commuting, business travel, and fleet management."""),

        SubRequest('other', OTHER_ACTIONS_SCHEMA, f"""Generate 1-3 actions for waste, supply chain, or team engagement (prefer 3):

Business: {industry}, {employees} employees
Weekly trash bags: {profile.weekly_trash_bags or 0}

Focus on waste reduction, sustainable procurement, or employee engagement."""),
    ]


def run_sub_requests(client, sub_requests, max_workers=None):
    """
    Issue every sub-request concurrently and join on all of them.

    Fail-fast: the first failure raises GenerationFailed. Requests that have
    not started are cancelled; running ones are left to finish and their
    results are discarded.

    Returns:
        dict: sub-request name -> validated model output
    """
    max_workers = max_workers or settings.AI_MODEL.get('MAX_PARALLEL_CALLS', 6)
    executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix='action-plan')
    try:
        futures = {
            executor.submit(
                client.generate_object,
                system=BASE_SYSTEM_PROMPT,
                prompt=request.prompt,
                schema=request.schema,
                name=request.name,
            ): request.name
            for request in sub_requests
        }
        done, _pending = wait(futures, return_when=FIRST_EXCEPTION)

        for future in done:
            error = future.exception()
            if error is not None:
                name = futures[future]
                logger.error(f"Action plan sub-request '{name}' failed: {error}")
                raise GenerationFailed(f"Failed to generate dashboard ({name}): {error}", task=name) from error

        return {futures[future]: future.result() for future in futures}
    finally:
        executor.shutdown(wait=False, cancel_futures=True)


def merge_results(results):
    # The third group is always tagged "Waste", whatever it covers
    full_action_plan = (
        [dict(action, category="Energy") for action in results['energy']['actions']]
        + [dict(action, category="Transport") for action in results['transport']['actions']]
        + [dict(action, category="Waste") for action in results['other']['actions']]
    )
    priority = results['priority']
    return {
        "executiveSummary": results['summary']['executiveSummary'],
        "prioritizedNextStep": {
            "title": priority['title'],
            "description": priority['description'],
            "impact": priority['impact'],
            "cost": priority['cost'],
            "paybackPeriod": priority['paybackPeriod'],
        },
        "quickWins": list(results['quick_wins']['quickWins']),
        "fullActionPlan": full_action_plan,
    }


def generate_action_id(title):
    """
    Deterministic id for an action title: 32-bit string hash over UTF-16
    code units, rendered as ``action_<abs(hash)>``.
    """
    value = 0
    encoded = (title or "").encode('utf-16-le')
    for i in range(0, len(encoded), 2):
        code_unit = encoded[i] | (encoded[i + 1] << 8)
        value = ((value << 5) - value + code_unit) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return f"action_{abs(value)}"


def iter_plan_actions(plan):
    """Yield (action_type, action) for every action in a plan."""
    yield 'priority', plan['prioritizedNextStep']
    for action in plan['quickWins']:
        yield 'quickwin', action
    for action in plan['fullActionPlan']:
        yield 'actionplan', action


def assign_action_ids(plan):
    """
    Give every action an explicit id, stored with the action from now on.
    Repeated titles within one plan get a numeric suffix.
    """
    seen = set()
    for _action_type, action in iter_plan_actions(plan):
        base_id = generate_action_id(action['title'])
        action_id = base_id
        suffix = 2
        while action_id in seen:
            action_id = f"{base_id}_{suffix}"
            suffix += 1
        seen.add(action_id)
        action['id'] = action_id
    return plan


def mentions_building_modification(text):
    return any(pattern.search(text or "") for pattern in BUILDING_MODIFICATION_PATTERNS)


def find_rent_constraint_violations(plan, profile):
    """
    Ids of actions recommending building modifications to a business that
    rents its space. Empty for owners.
    """
    if not profile.is_renting:
        return []
    return [
        action['id']
        for _action_type, action in iter_plan_actions(plan)
        if mentions_building_modification(f"{action.get('title', '')} {action.get('description', '')}")
    ]


def generate_action_plan(profile, footprint, client=None, max_workers=None):
    """
    Generate the action plan (dashboard) for a profile and its footprint.

    Returns:
        dict: executiveSummary, prioritizedNextStep, quickWins (3-5),
              fullActionPlan (8-15), rentConstraintFlags; every action has an id

    Raises:
        GenerationFailed: any sub-request failed or the merged plan is invalid
    """
    try:
        client = client or ai_client.get_model_client()
        results = run_sub_requests(client, build_sub_requests(profile, footprint), max_workers=max_workers)
        plan = merge_results(results)
        validate_against_schema(plan, ACTION_PLAN_SCHEMA, name="action plan")
    except GenerationFailed:
        raise
    except EcoPilotError as e:
        logger.warning(f"Action plan generation failed: {e}")
        raise GenerationFailed(f"Failed to generate dashboard: {e}") from e
    except Exception as e:
        logger.exception(f"Action plan generation failed: {str(e)}")
        raise GenerationFailed(f"Failed to generate dashboard: {e}") from e

    assign_action_ids(plan)
    plan['rentConstraintFlags'] = find_rent_constraint_violations(plan, profile)
    if plan['rentConstraintFlags']:
        logger.warning(
            f"Action plan for a renting business recommends building modifications: {plan['rentConstraintFlags']}"
        )
    return plan
