"""
Validation state attached to an incoming request.

A ModelState is filled by the validation step that runs before a
controller action (see the router) and is only inspected by the
controller; errors are never raised from it.
"""

from dataclasses import dataclass, field
from typing import Optional

from pydantic import ValidationError


@dataclass
class ModelError:
    """A single field-level validation message."""
    error_message: str


@dataclass
class ModelStateEntry:
    """All errors recorded for one key."""
    errors: list[ModelError] = field(default_factory=list)


class ModelState:
    """Field-keyed set of validation errors for a request."""

    def __init__(self):
        self._entries: dict[str, ModelStateEntry] = {}

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "ModelState":
        """Build a model state from a pydantic validation failure."""
        state = cls()
        for error in exc.errors():
            key = ".".join(str(part) for part in error["loc"])
            state.add_model_error(key, error["msg"])
        return state

    def add_model_error(self, key: str, message: str):
        """Record an error message against a key."""
        self._entries.setdefault(key, ModelStateEntry()).errors.append(
            ModelError(error_message=message)
        )

    def get(self, key: str) -> Optional[ModelStateEntry]:
        """Get the entry for a key, or None if it has no errors."""
        return self._entries.get(key)

    @property
    def is_valid(self) -> bool:
        return self.error_count == 0

    @property
    def error_count(self) -> int:
        return sum(len(entry.errors) for entry in self._entries.values())

    def to_dict(self) -> dict[str, list[str]]:
        """Error messages grouped by key, for serialization."""
        return {
            key: [e.error_message for e in entry.errors]
            for key, entry in self._entries.items()
        }

    def __contains__(self, key: str) -> bool:
        return key in self._entries
