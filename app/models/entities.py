"""
Domain entities for the Rookies application.

Persistence is handled by the person service, so entities are plain
dataclasses: equality is structural and there is no identity column.
A person's identity is its position in the service's ordered list.
"""

from dataclasses import dataclass
from datetime import date


@dataclass
class Person:
    """A rookie record."""
    first_name: str
    last_name: str
    gender: str
    date_of_birth: date
    phone_number: str = ""
    birth_place: str = ""
    is_graduated: bool = False

    @property
    def full_name(self) -> str:
        """Family name first, e.g. 'Nguyen Thanh Nam'."""
        return f"{self.last_name} {self.first_name}"
