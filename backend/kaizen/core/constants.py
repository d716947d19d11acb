"""
Application-wide constants
"""

# LLM
LLM_MODEL_DEFAULT = "gpt-4o-mini"
LLM_TEMPERATURE = 0.7
LLM_MAX_TOKENS = 500

# Life areas, in display order
LIFE_AREAS = ("Health", "Career", "Spirit", "Mindset", "Joy")
DEFAULT_CATEGORY = "Health"

# Recurrence config fallbacks
DEFAULT_WEEKLY_TARGET = 3
DEFAULT_WEEK_START_DAY = 0
ALL_WEEKDAYS = frozenset(range(7))

# Scoring
DEFAULT_SCORING_PERIOD_DAYS = 30

# Gamification
XP_PER_COMPLETION = 10
STREAK_LOOKBACK_DAYS = 365
STREAK_MILESTONE_COLOR = "#FF9500"
