"""
Custom Exceptions - Application-specific error types
"""


class KaizenException(Exception):
    """Base exception for all Kaizen errors"""
    pass


class HabitNotFoundError(KaizenException):
    """Raised when a habit cannot be found"""
    pass


class InvalidHabitDataError(KaizenException):
    """Raised when habit data validation fails"""
    pass


class InvalidWeekStartDayError(KaizenException, ValueError):
    """Raised when a week start day is outside 0 (Sunday) .. 6 (Saturday)"""
    pass


class DatabaseError(KaizenException):
    """Raised when database operations fail"""
    pass


class ExternalServiceError(KaizenException):
    """Raised when external services (OpenAI, etc.) fail"""
    pass
