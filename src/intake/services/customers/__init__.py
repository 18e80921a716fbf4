"""Customer service helpers."""

from functools import lru_cache

from ...persistence.customers import get_customer_repository
from ..geocoding import create_geocoder
from ..questionnaire import get_registry
from .intake import CustomerIntakeService, build_address, check_schema, resolve_location


@lru_cache(maxsize=1)
def get_intake_service() -> CustomerIntakeService:
    return CustomerIntakeService(
        repository=get_customer_repository(),
        registry=get_registry(),
        geocoder=create_geocoder(),
    )


__all__ = [
    "CustomerIntakeService",
    "build_address",
    "check_schema",
    "get_intake_service",
    "resolve_location",
]
