"""
Static lookup tables for task attributes.

Categorical codes map to canonical hour estimates or display labels.
All tables are read-only views.
"""

from types import MappingProxyType

# Duration code -> canonical hour estimate
DURATION_HOURS = MappingProxyType({
    "XS": 0.5,   # < 1 hour
    "S": 2,      # 1-4 hours
    "M": 6,      # 4-8 hours
    "L": 16,     # 1-3 days
    "XL": 40,    # 3+ days
})

# Shorter tasks score higher (quick wins)
DURATION_SCORES = MappingProxyType({
    "XS": 100,
    "S": 80,
    "M": 60,
    "L": 40,
    "XL": 20,
})
DEFAULT_DURATION_SCORE = 50
DEFAULT_DURATION_HOURS = 6

DURATION_LABELS = MappingProxyType({
    "XS": "Very short (<1h)",
    "S": "Short (1-4h)",
    "M": "Medium (4-8h)",
    "L": "Long (1-3 days)",
    "XL": "Very long (3+ days)",
})

DURABILITY_LABELS = MappingProxyType({
    "SHORT": "Short term (<1 day)",
    "MEDIUM": "Medium term (1-5 days)",
    "LONG": "Long term (5+ days)",
})

URGENCY_LABELS = MappingProxyType({
    1: "Very low",
    2: "Low",
    3: "Medium",
    4: "High",
    5: "Critical",
})

IMPORTANCE_LABELS = MappingProxyType({
    1: "Minimal",
    2: "Low",
    3: "Medium",
    4: "High",
    5: "Critical",
})

COMPLEXITY_LABELS = MappingProxyType({
    1: "Trivial",
    2: "Simple",
    3: "Moderate",
    4: "Complex",
    5: "Very complex",
})

QUADRANT_LABELS = MappingProxyType({
    "DO_NOW": MappingProxyType({
        "label": "Do now",
        "description": "Urgent and important - needs immediate attention",
        "color": "red",
    }),
    "SCHEDULE": MappingProxyType({
        "label": "Schedule",
        "description": "Important but not urgent - plan for later",
        "color": "blue",
    }),
    "DELEGATE": MappingProxyType({
        "label": "Delegate",
        "description": "Urgent but less important - hand to someone else",
        "color": "amber",
    }),
    "ELIMINATE": MappingProxyType({
        "label": "Eliminate/Postpone",
        "description": "Neither urgent nor important - reconsider priority",
        "color": "gray",
    }),
})
