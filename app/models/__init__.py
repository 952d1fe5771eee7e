"""
Models Package - The 'M' in MVC

- entities.py: the Person domain entity
- schemas.py: Pydantic schemas for request/response validation
- model_state.py: per-request validation state
- results.py: action results returned by controllers
"""

from app.models.entities import Person
from app.models.model_state import ModelError, ModelState, ModelStateEntry
from app.models.results import (
    ActionResult,
    NotFoundObjectResult,
    RedirectToActionResult,
    ViewResult,
)
from app.models.schemas import PersonInput, PersonResponse

__all__ = [
    # Entities
    "Person",
    # Schemas
    "PersonInput",
    "PersonResponse",
    # Validation state
    "ModelError",
    "ModelState",
    "ModelStateEntry",
    # Action results
    "ActionResult",
    "NotFoundObjectResult",
    "RedirectToActionResult",
    "ViewResult",
]
