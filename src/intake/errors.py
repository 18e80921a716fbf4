"""Exceptions raised by the intake services."""

from __future__ import annotations

from typing import Sequence


class IntakeError(Exception):
    """Base class for intake service failures."""


class CustomerValidationError(IntakeError):
    """Schema-level validation failure (required fields, status enum)."""

    def __init__(self, message: str, paths: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.paths = list(paths)


class InvalidFieldError(IntakeError):
    """Questionnaire answers rejected by the form validator."""

    def __init__(self, violations: Sequence[str], message: str = "Invalid field") -> None:
        super().__init__(message)
        self.violations = list(violations)


class InvalidAddressError(IntakeError):
    """The geocoding provider returned no candidate for the address."""

    def __init__(self, address: str, message: str = "Invalid address") -> None:
        super().__init__(message)
        self.address = address


class GeocoderError(IntakeError):
    """The geocoding provider could not be reached or answered with an error."""


class CustomerNotFoundError(IntakeError, LookupError):
    def __init__(self, customer_id: int) -> None:
        super().__init__(f"Customer {customer_id} not found")
        self.customer_id = customer_id


class QuestionnaireNotFoundError(IntakeError, LookupError):
    def __init__(self, identifier: str) -> None:
        super().__init__(f"Questionnaire '{identifier}' not found")
        self.identifier = identifier


class FoodCategoryNotFoundError(IntakeError, LookupError):
    def __init__(self, category_id: str) -> None:
        super().__init__(f"Food category '{category_id}' not found")
        self.category_id = category_id
