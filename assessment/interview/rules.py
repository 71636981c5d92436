"""
Scoring constants for the heuristic answer evaluation.
Changing any of these changes scores for identical answers.
"""

# Composite weights
WEIGHT_CONCEPT = 0.4
WEIGHT_DETAIL = 0.2
WEIGHT_STRUCTURE = 0.2
WEIGHT_EXAMPLE = 0.2

# Detail: linear length proxy
DETAIL_FULL_CREDIT_CHARS = 200

# Structure
STRUCTURE_MARKERS = (".", "?")
STRUCTURE_SCORE_PRESENT = 80
STRUCTURE_SCORE_ABSENT = 60

# Examples
EXAMPLE_MARKERS = ("example", "for instance", "such as")
EXAMPLE_SCORE_PRESENT = 90
EXAMPLE_SCORE_ABSENT = 50

# Category classification
STRENGTH_THRESHOLD = 75
IMPROVEMENT_THRESHOLD = 60

# Recommendations (inclusive lower bounds, checked in descending order)
RECOMMENDATION_STRONG_HIRE = "Strong Hire"
RECOMMENDATION_HIRE = "Hire"
RECOMMENDATION_CONSIDER = "Consider"
RECOMMENDATION_NOT_RECOMMENDED = "Not Recommended"

RECOMMENDATION_TIERS = (
    (80, RECOMMENDATION_STRONG_HIRE),
    (65, RECOMMENDATION_HIRE),
    (50, RECOMMENDATION_CONSIDER),
)
