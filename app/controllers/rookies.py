"""
Rookies Controller

Handles CRUD operations for rookie records:
- Listing everyone
- Viewing one rookie by position
- Creating a rookie from a submitted form
- Editing a rookie
- Deleting a rookie

The RookiesController class holds the decision logic and returns action
results (view, redirect, not found). The router below binds HTTP requests
to it and hands results to the view layer for rendering.

Design Decisions:
- The person service is passed in, never constructed by the controller
- Form validation runs before the action; the controller only reads the
  resulting ModelState
- Only lookups translate a missing person into a not-found result;
  service failures on delete/update propagate to the caller
"""

import logging
from functools import lru_cache
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Request
from pydantic import ValidationError

from app.config import get_settings
from app.models import (
    ActionResult,
    ModelState,
    NotFoundObjectResult,
    Person,
    PersonInput,
    RedirectToActionResult,
    ViewResult,
)
from app.services import Err, InMemoryPersonService, PersonService, sample_people
from app.views.responses import render


class RookiesController:
    """Request handling for rookie records."""

    def __init__(self, logger: logging.Logger, person_service: PersonService):
        self._logger = logger
        self._person_service = person_service

    def index(self) -> ActionResult:
        people = self._person_service.get_all()
        self._logger.debug(f"Listing {len(people)} rookies")
        return ViewResult("index", model=people)

    def detail(self, index: int) -> ActionResult:
        return self._lookup(index, "detail")

    def create(self, person: Optional[Person], model_state: ModelState) -> ActionResult:
        """
        Store a submitted rookie.

        An invalid model state redisplays the form with its errors and
        leaves the store untouched.
        """
        if not model_state.is_valid:
            self._logger.info(f"Create rejected with {model_state.error_count} error(s)")
            return ViewResult("create", model=person, model_state=model_state)

        self._person_service.create(person)
        return RedirectToActionResult("index")

    def edit(self, index: int) -> ActionResult:
        return self._lookup(index, "edit")

    def update(self, index: int, person: Optional[Person], model_state: ModelState) -> ActionResult:
        if not model_state.is_valid:
            self._logger.info(f"Update of {index} rejected with {model_state.error_count} error(s)")
            return ViewResult("edit", model=person, model_state=model_state)

        self._person_service.update(index, person)
        return RedirectToActionResult("index")

    def delete(self, index: int) -> ActionResult:
        self._person_service.delete(index)
        return RedirectToActionResult("index")

    def _lookup(self, index: int, view_name: str) -> ActionResult:
        result = self._person_service.get_one(index)
        if isinstance(result, Err):
            self._logger.warning(f"Rookie {index} not found: {result.error.message}")
            return NotFoundObjectResult(result.error.message)
        return ViewResult(view_name, model=result.value)


# ============================================
# HTTP binding
# ============================================

router = APIRouter(prefix="/rookies", tags=["rookies"])

logger = logging.getLogger(__name__)


@lru_cache
def get_person_service() -> PersonService:
    """
    The application's in-memory store, built once per process.

    Tests override this dependency with their own instance.
    """
    seed = sample_people() if get_settings().seed_sample_data else []
    return InMemoryPersonService(seed)


def get_controller(
    person_service: PersonService = Depends(get_person_service)
) -> RookiesController:
    return RookiesController(logger, person_service)


def _bind_person(payload: dict[str, Any]) -> tuple[Optional[Person], ModelState]:
    """Validate a submitted form into a Person and its model state."""
    try:
        return PersonInput.model_validate(payload).to_entity(), ModelState()
    except ValidationError as e:
        return None, ModelState.from_validation_error(e)


@router.get("", name="index")
def list_rookies(request: Request, controller: RookiesController = Depends(get_controller)):
    """List all rookies in insertion order."""
    return render(controller.index(), request)


@router.post("", name="create")
def create_rookie(
    request: Request,
    payload: dict[str, Any] = Body(...),
    controller: RookiesController = Depends(get_controller)
):
    """
    Create a rookie from a submitted form.

    Valid submissions redirect to the list. Invalid ones return the
    create view with the submitted errors keyed by field.
    """
    person, model_state = _bind_person(payload)
    return render(controller.create(person, model_state), request)


@router.get("/{index}", name="detail")
def get_rookie(index: int, request: Request, controller: RookiesController = Depends(get_controller)):
    """Get one rookie by 1-based position, or 404 with a message."""
    return render(controller.detail(index), request)


@router.get("/{index}/edit", name="edit")
def edit_rookie(index: int, request: Request, controller: RookiesController = Depends(get_controller)):
    return render(controller.edit(index), request)


@router.put("/{index}", name="update")
def update_rookie(
    index: int,
    request: Request,
    payload: dict[str, Any] = Body(...),
    controller: RookiesController = Depends(get_controller)
):
    person, model_state = _bind_person(payload)
    return render(controller.update(index, person, model_state), request)


@router.delete("/{index}", name="delete")
@router.post("/{index}/delete", name="delete_form")
def delete_rookie(index: int, request: Request, controller: RookiesController = Depends(get_controller)):
    """
    Delete a rookie and redirect to the list.

    The POST form exists for HTML clients that cannot send DELETE.
    """
    return render(controller.delete(index), request)
