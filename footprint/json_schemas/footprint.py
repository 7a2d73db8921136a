"""
Schema for the carbon footprint estimate.
"""

BREAKDOWN_STATUSES = ["calculated", "estimated", "not_calculated"]

CARBON_FOOTPRINT_SCHEMA = {
    "type": "object",
    "properties": {
        "totalKgCO2eAnnual": {
            "type": "number",
            "minimum": 0,
            "description": "Total annual carbon footprint in kg CO2 equivalent"
        },
        "dataSource": {
            "type": "string",
            "description": "Description of how the footprint was calculated (e.g., 'Based on actual utility bills' or 'Estimated from industry benchmarks')"
        },
        "breakdown": {
            "type": "array",
            "minItems": 1,
            "description": "Breakdown of emissions by category",
            "items": {
                "type": "object",
                "properties": {
                    "category": {
                        "type": "string",
                        "description": "Category name (e.g., 'Electricity', 'Natural Gas', 'Commutes', 'Waste', 'Business Travel')"
                    },
                    "kgCO2e": {"type": "number", "minimum": 0, "description": "Annual kg CO2e for this category"},
                    "percent": {"type": "number", "description": "Percentage of total footprint"},
                    "status": {
                        "type": "string",
                        "enum": BREAKDOWN_STATUSES,
                        "description": "Status of this calculation"
                    },
                    "notes": {"type": "string", "description": "Additional notes about this category"}
                },
                "required": ["category", "kgCO2e", "percent"]
            }
        },
        "calculationNotes": {
            "type": "string",
            "description": "Any important notes about the calculation methodology or data quality"
        },
        "recommendations": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Initial high-level recommendations based on the footprint"
        }
    },
    "required": ["totalKgCO2eAnnual", "dataSource", "breakdown"]
}
