"""
Business logic services
"""
from . import habits
from . import achievements
from . import insights

__all__ = [
    'habits',
    'achievements',
    'insights'
]
