"""
JSON Schemas the generative model output is constrained to and validated against.
"""

from .footprint import CARBON_FOOTPRINT_SCHEMA
from .action_plan import (
    IMPACT_LEVELS,
    COST_LEVELS,
    ACTION_CATEGORIES,
    EXECUTIVE_SUMMARY_SCHEMA,
    PRIORITY_ACTION_SCHEMA,
    QUICK_WINS_SCHEMA,
    ENERGY_ACTIONS_SCHEMA,
    TRANSPORT_ACTIONS_SCHEMA,
    OTHER_ACTIONS_SCHEMA,
    ACTION_PLAN_SCHEMA,
)

__all__ = [
    'CARBON_FOOTPRINT_SCHEMA',
    'IMPACT_LEVELS',
    'COST_LEVELS',
    'ACTION_CATEGORIES',
    'EXECUTIVE_SUMMARY_SCHEMA',
    'PRIORITY_ACTION_SCHEMA',
    'QUICK_WINS_SCHEMA',
    'ENERGY_ACTIONS_SCHEMA',
    'TRANSPORT_ACTIONS_SCHEMA',
    'OTHER_ACTIONS_SCHEMA',
    'ACTION_PLAN_SCHEMA',
]
