"""
Schemas for the action plan. The six narrow schemas are used for the
parallel sub-requests; ACTION_PLAN_SCHEMA validates the merged document.
"""

IMPACT_LEVELS = ["High", "Medium", "Low"]
COST_LEVELS = ["$", "$$", "$$$"]
ACTION_CATEGORIES = ["Energy", "Transport", "Waste", "Supply Chain", "Team"]

_ACTION_ITEM = {
    "type": "object",
    "properties": {
        "title": {"type": "string", "minLength": 1},
        "description": {"type": "string"},
        "impact": {"type": "string", "enum": IMPACT_LEVELS},
        "cost": {"type": "string", "enum": COST_LEVELS}
    },
    "required": ["title", "description", "impact", "cost"]
}

_QUICK_WIN_ITEM = {
    "type": "object",
    "properties": {
        "title": {"type": "string", "minLength": 1, "description": "Short, actionable title"},
        "description": {
            "type": "string",
            "description": "Brief explanation of the action and its benefit (1-2 sentences)"
        }
    },
    "required": ["title", "description"]
}


def _actions_schema(min_items, max_items):
    return {
        "type": "object",
        "properties": {
            "actions": {
                "type": "array",
                "items": _ACTION_ITEM,
                "minItems": min_items,
                "maxItems": max_items
            }
        },
        "required": ["actions"]
    }


EXECUTIVE_SUMMARY_SCHEMA = {
    "type": "object",
    "properties": {
        "executiveSummary": {
            "type": "string",
            "minLength": 1,
            "description": "A brief (2-3 sentences), encouraging summary of the business's current carbon footprint and potential for improvement. Be specific with numbers and realistic about opportunities."
        }
    },
    "required": ["executiveSummary"]
}

PRIORITY_ACTION_SCHEMA = {
    "type": "object",
    "properties": {
        "title": {"type": "string", "minLength": 1, "description": "Clear, actionable title for the #1 recommended action"},
        "description": {"type": "string", "description": "Detailed explanation (2-3 sentences)"},
        "impact": {
            "type": "string",
            "enum": IMPACT_LEVELS,
            "description": "Expected carbon reduction impact (High = >20% reduction, Medium = 5-20%, Low = <5%)"
        },
        "cost": {
            "type": "string",
            "enum": COST_LEVELS,
            "description": "Implementation cost ($ = <$1k, $$ = $1k-$10k, $$$ = >$10k)"
        },
        "paybackPeriod": {"type": "string", "description": "Estimated payback period (e.g., '1.5 years', 'Immediate')"}
    },
    "required": ["title", "description", "impact", "cost", "paybackPeriod"]
}

QUICK_WINS_SCHEMA = {
    "type": "object",
    "properties": {
        "quickWins": {
            "type": "array",
            "items": _QUICK_WIN_ITEM,
            "minItems": 3,
            "maxItems": 5,
            "description": "Low-cost, high-impact actions that can be implemented quickly (within 1-3 months)"
        }
    },
    "required": ["quickWins"]
}

ENERGY_ACTIONS_SCHEMA = _actions_schema(2, 4)
TRANSPORT_ACTIONS_SCHEMA = _actions_schema(1, 3)
OTHER_ACTIONS_SCHEMA = _actions_schema(1, 3)

ACTION_PLAN_SCHEMA = {
    "type": "object",
    "properties": {
        "executiveSummary": EXECUTIVE_SUMMARY_SCHEMA["properties"]["executiveSummary"],
        "prioritizedNextStep": PRIORITY_ACTION_SCHEMA,
        "quickWins": QUICK_WINS_SCHEMA["properties"]["quickWins"],
        "fullActionPlan": {
            "type": "array",
            "minItems": 8,
            "maxItems": 15,
            "items": {
                "type": "object",
                "properties": dict(
                    _ACTION_ITEM["properties"],
                    category={"type": "string", "enum": ACTION_CATEGORIES}
                ),
                "required": ["category", "title", "description", "impact", "cost"]
            }
        }
    },
    "required": ["executiveSummary", "prioritizedNextStep", "quickWins", "fullActionPlan"]
}
