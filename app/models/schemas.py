"""
Pydantic Schemas (Data Transfer Objects)

These schemas define the structure of data flowing in and out of the API:
- PersonInput: the form a client submits when creating or editing a rookie
- PersonResponse: a rookie as returned to clients

Validation happens here, at the API boundary. Failures are not raised to
the client directly; they are collected into a ModelState and the
controller decides how to respond.
"""

from datetime import date

from pydantic import BaseModel, Field

from app.models.entities import Person


class PersonInput(BaseModel):
    """
    Rookie data submitted by a client.

    Names, gender and date of birth are required. Contact and background
    details default to empty so quick entry is possible.
    """
    first_name: str = Field(..., min_length=1, max_length=50, description="Given name")
    last_name: str = Field(..., min_length=1, max_length=50, description="Family name")
    gender: str = Field(..., min_length=1, max_length=20, description="Gender")
    date_of_birth: date = Field(..., description="Date of birth (YYYY-MM-DD)")
    phone_number: str = Field("", max_length=20, description="Contact phone number")
    birth_place: str = Field("", max_length=100, description="City of birth")
    is_graduated: bool = Field(False, description="Whether the rookie has graduated")

    def to_entity(self) -> Person:
        return Person(
            first_name=self.first_name,
            last_name=self.last_name,
            gender=self.gender,
            date_of_birth=self.date_of_birth,
            phone_number=self.phone_number,
            birth_place=self.birth_place,
            is_graduated=self.is_graduated,
        )


class PersonResponse(BaseModel):
    """A rookie in API responses, including the derived full name."""
    first_name: str
    last_name: str
    full_name: str
    gender: str
    date_of_birth: date
    phone_number: str
    birth_place: str
    is_graduated: bool

    class Config:
        from_attributes = True
