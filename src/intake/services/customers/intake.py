"""Customer intake pipeline: validation, address geocoding and persistence.

Saving a customer runs, in order:

1. the required scalar fields and status checks,
2. the questionnaire validator for the ``fields`` answers,
3. geocoding of the address answers (skipped when no geocoder is given),
4. the repository write.

Any failure leaves the stored document untouched.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping, Optional, Sequence

from ...errors import (
    CustomerNotFoundError,
    CustomerValidationError,
    InvalidAddressError,
    InvalidFieldError,
)
from ...models.domain import Customer, CustomerStatus, FieldAnswer, FieldType, Location
from ...persistence.customers import CustomerRepository
from ..geocoding import Geocoder
from ..questionnaire import CUSTOMER_QUESTIONNAIRE, QuestionnaireRegistry

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("first_name", "last_name", "email")


def build_address(
    fields: Sequence[FieldAnswer],
    registry: QuestionnaireRegistry,
    identifier: str = CUSTOMER_QUESTIONNAIRE,
) -> str:
    """Join the values of the address-type answers with ``", "``."""

    answers = registry.get_fields_by_type(identifier, fields, FieldType.ADDRESS)
    return ", ".join(answer.value for answer in answers if answer.value)


def resolve_location(address: str, geocoder: Geocoder) -> Location:
    """Geocode ``address`` and return the first candidate's coordinates."""

    if not address.strip():
        logger.warning("No address answers to geocode")
        raise InvalidAddressError(address)
    results = geocoder.geocode(address)
    if not results:
        logger.warning(f"No geocoding candidate for address '{address}'")
        raise InvalidAddressError(address)
    first = results[0]
    return Location(lat=first.latitude, lng=first.longitude)


def check_schema(customer: Customer) -> Customer:
    """Reject missing required names/email and unknown statuses; coerce the status to the enum."""

    missing = [name for name in REQUIRED_FIELDS if not (getattr(customer, name) or "").strip()]
    if missing:
        paths = ", ".join(f"`{name}`" for name in missing)
        raise CustomerValidationError(f"Customer validation failed: {paths} required", missing)
    try:
        status = CustomerStatus(customer.status)
    except ValueError:
        raise CustomerValidationError(
            f"Customer validation failed: `{customer.status}` is not a valid status", ["status"]
        ) from None
    return customer if status is customer.status else replace(customer, status=status)


class CustomerIntakeService:
    """Explicit composition of validation, geocoding and storage for customers.

    ``geocoder`` is ``None`` when geocoding is disabled; saved customers then
    keep whatever ``location`` they already had.
    """

    def __init__(
        self,
        repository: CustomerRepository,
        registry: QuestionnaireRegistry,
        geocoder: Optional[Geocoder] = None,
        questionnaire: str = CUSTOMER_QUESTIONNAIRE,
    ) -> None:
        self.repository = repository
        self.registry = registry
        self.geocoder = geocoder
        self.questionnaire = questionnaire

    def validate_fields(self, fields: Sequence[FieldAnswer]) -> list[str]:
        return self.registry.get_validator(self.questionnaire)(fields)

    def save(self, customer: Customer) -> Customer:
        customer = check_schema(customer)

        violations = self.validate_fields(customer.fields)
        if violations:
            raise InvalidFieldError(violations)

        if self.geocoder is not None:
            address = build_address(customer.fields, self.registry, self.questionnaire)
            customer = replace(customer, location=resolve_location(address, self.geocoder))
            logger.info(f"Geocoded customer {customer.id} via {self.geocoder.provider}")

        saved = self.repository.save(customer)
        logger.info(f"Saved customer {saved.id} ({saved.status.value})")
        return saved

    def get(self, customer_id: int) -> Customer:
        customer = self.repository.get(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return customer

    def list(self, status: CustomerStatus | None = None, assigned_to: int | None = None) -> list[Customer]:
        return self.repository.list(status=status, assigned_to=assigned_to)

    def update(self, customer_id: int, changes: Mapping[str, Any]) -> Customer:
        """Apply ``changes`` to a stored customer and run the full save pipeline again."""

        existing = self.get(customer_id)
        changes = {key: value for key, value in changes.items() if key not in ("id", "location")}
        return self.save(replace(existing, **changes))

    def set_status(self, customer_id: int, status: CustomerStatus | str) -> Customer:
        try:
            status = CustomerStatus(status)
        except ValueError:
            raise CustomerValidationError(
                f"Customer validation failed: `{status}` is not a valid status", ["status"]
            ) from None
        return self.update(customer_id, {"status": status})

    def assign(self, customer_id: int, volunteer_id: int | None) -> Customer:
        return self.update(customer_id, {"assigned_to": volunteer_id})

    def delete(self, customer_id: int) -> None:
        if not self.repository.delete(customer_id):
            raise CustomerNotFoundError(customer_id)
        logger.info(f"Deleted customer {customer_id}")
