"""
Services layer - data access behind interfaces the controllers depend on.
"""

from app.services.person_service import (
    InMemoryPersonService,
    OutOfRangeError,
    PersonService,
    sample_people,
)
from app.services.result import Err, Ok, Result

__all__ = [
    "PersonService",
    "InMemoryPersonService",
    "OutOfRangeError",
    "sample_people",
    "Ok",
    "Err",
    "Result",
]
