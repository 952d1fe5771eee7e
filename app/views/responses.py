"""
Turns controller action results into FastAPI responses.

- ViewResult -> JSON document naming the view, its model and any errors
- RedirectToActionResult -> 303 to the URL of the named route
- NotFoundObjectResult -> plain-text body with the result's status code
"""

from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse, Response

from app.models import (
    ActionResult,
    NotFoundObjectResult,
    Person,
    PersonResponse,
    RedirectToActionResult,
)


def _serialize_model(model: Any) -> Any:
    if isinstance(model, Person):
        return PersonResponse.model_validate(model).model_dump()
    if isinstance(model, list):
        return [_serialize_model(m) for m in model]
    return model


def render(result: ActionResult, request: Request) -> Response:
    """Build the HTTP response for an action result."""
    if isinstance(result, RedirectToActionResult):
        # 303 so browsers follow a POST/DELETE with a GET
        return RedirectResponse(str(request.url_for(result.action_name)), status_code=303)

    if isinstance(result, NotFoundObjectResult):
        return PlainTextResponse(str(result.value), status_code=result.status_code)

    return JSONResponse(jsonable_encoder({
        "view": result.view_name,
        "model": _serialize_model(result.model),
        "errors": result.model_state.to_dict(),
    }))
