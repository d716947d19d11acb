"""
Insights module - AI narrative features and their daily cache
"""
from . import cache
from . import life_report
from . import daily_insight
from . import habit_generator
from . import service

from .cache import ReportCache, report_cache
from .life_report import generate_life_report
from .daily_insight import build_daily_insight_context, generate_daily_insight
from .habit_generator import generate_habits
from .service import get_life_report, get_daily_insight

__all__ = [
    'cache',
    'life_report',
    'daily_insight',
    'habit_generator',
    'service',
    'ReportCache',
    'report_cache',
    'generate_life_report',
    'build_daily_insight_context',
    'generate_daily_insight',
    'generate_habits',
    'get_life_report',
    'get_daily_insight'
]
