import logging

import pytest

from app.models import Person
from app.services import InMemoryPersonService
from tests.factories import make_person


@pytest.fixture
def people() -> list[Person]:
    """Fresh three-person list for each test."""
    return [make_person("Nam"), make_person("Binh"), make_person("Chi")]


@pytest.fixture
def person_service(people) -> InMemoryPersonService:
    return InMemoryPersonService(people)


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("tests.rookies")
