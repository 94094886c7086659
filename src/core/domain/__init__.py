"""
Domain models and value objects.

Contains immutable value objects: DateDelta, ZodiacSign and calculator request models.
"""

from src.core.domain.date_delta import DateDelta
from src.core.domain.requests import (
    AgeComparisonRequest,
    AgeRequest,
    DateRangeRequest,
    DateTimeRangeRequest,
    SingleDateRequest,
)
from src.core.domain.zodiac import ZodiacSign

__all__ = [
    # DateDelta model
    "DateDelta",
    # Zodiac
    "ZodiacSign",
    # Request models
    "AgeRequest",
    "AgeComparisonRequest",
    "DateRangeRequest",
    "DateTimeRangeRequest",
    "SingleDateRequest",
]
