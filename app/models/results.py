"""
Action results returned by controllers.

Controllers never build HTTP responses themselves. They return one of
these shapes and the view layer (app/views/responses.py) turns it into a
FastAPI response.
"""

from dataclasses import dataclass, field
from typing import Any

from app.models.model_state import ModelState


@dataclass
class ViewResult:
    """Render a named view bound to a model."""
    view_name: str
    model: Any = None
    model_state: ModelState = field(default_factory=ModelState)


@dataclass
class RedirectToActionResult:
    """Send the client on to another controller action."""
    action_name: str


@dataclass
class NotFoundObjectResult:
    """Client error carrying a message payload."""
    value: Any
    status_code: int = 404


ActionResult = ViewResult | RedirectToActionResult | NotFoundObjectResult
