"""
Person Service - data access for rookie records.

The controller depends only on the PersonService interface. The
in-memory implementation backs the running application and the tests;
another backend only needs to implement the same five operations.

Positions are 1-based: get_one(1) is the first person in the list.
"""

import copy
import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import Iterable, Optional

from app.models.entities import Person
from app.services.result import Err, Ok, Result

logger = logging.getLogger(__name__)

OUT_OF_RANGE_MESSAGE = "Index out of range"


class OutOfRangeError(IndexError):
    """No person exists at the requested position."""

    def __init__(self, message: str = OUT_OF_RANGE_MESSAGE):
        super().__init__(message)
        self.message = message


class PersonService(ABC):
    """Abstract interface for rookie storage."""

    @abstractmethod
    def get_all(self) -> list[Person]:
        """Return every person in insertion order."""
        pass

    @abstractmethod
    def get_one(self, index: int) -> Result[Person, OutOfRangeError]:
        """
        Look up the person at a 1-based position.

        Returns:
            Ok(person), or Err(OutOfRangeError) when nothing is stored there
        """
        pass

    @abstractmethod
    def create(self, person: Person) -> None:
        """Append a person to the end of the list."""
        pass

    @abstractmethod
    def update(self, index: int, person: Person) -> None:
        """
        Replace the person at a 1-based position.

        Raises:
            OutOfRangeError: if nothing is stored there
        """
        pass

    @abstractmethod
    def delete(self, index: int) -> None:
        """
        Remove the person at a 1-based position.

        Raises:
            OutOfRangeError: if nothing is stored there
        """
        pass


class InMemoryPersonService(PersonService):
    """List-backed person service. Each instance owns its own list."""

    def __init__(self, people: Optional[Iterable[Person]] = None):
        self._people: list[Person] = [copy.copy(p) for p in people or []]

    def __len__(self) -> int:
        return len(self._people)

    def _position(self, index: int) -> int:
        if not 1 <= index <= len(self._people):
            raise OutOfRangeError()
        return index - 1

    def get_all(self) -> list[Person]:
        return list(self._people)

    def get_one(self, index: int) -> Result[Person, OutOfRangeError]:
        try:
            return Ok(self._people[self._position(index)])
        except OutOfRangeError as e:
            return Err(e)

    @staticmethod
    def _require_person(person: Person):
        if not isinstance(person, Person):
            raise TypeError(f"Expected a Person, got {type(person).__name__}")

    def create(self, person: Person) -> None:
        self._require_person(person)
        self._people.append(person)
        logger.info(f"Created {person.full_name} at position {len(self._people)}")

    def update(self, index: int, person: Person) -> None:
        self._require_person(person)
        self._people[self._position(index)] = person
        logger.info(f"Updated position {index}")

    def delete(self, index: int) -> None:
        removed = self._people.pop(self._position(index))
        logger.info(f"Deleted {removed.full_name} from position {index}")


def sample_people() -> list[Person]:
    """Seed data for a fresh application store."""
    return [
        Person(
            first_name="Nam",
            last_name="Nguyen Thanh",
            gender="Male",
            date_of_birth=date(2001, 1, 20),
            birth_place="Ha Noi",
        ),
        Person(
            first_name="Linh",
            last_name="Tran Thuy",
            gender="Female",
            date_of_birth=date(2000, 5, 12),
            phone_number="0912345678",
            birth_place="Hai Phong",
            is_graduated=True,
        ),
        Person(
            first_name="Duc",
            last_name="Pham Minh",
            gender="Male",
            date_of_birth=date(1999, 11, 3),
            birth_place="Da Nang",
            is_graduated=True,
        ),
    ]
