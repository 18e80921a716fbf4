"""Customer intake endpoints."""

from __future__ import annotations

import logging
from typing import List, NoReturn

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from ...errors import (
    CustomerNotFoundError,
    CustomerValidationError,
    GeocoderError,
    IntakeError,
    InvalidAddressError,
    InvalidFieldError,
)
from ...models.domain import CustomerStatus
from ...schemas.customers import (
    CustomerAssignRequest,
    CustomerCreateRequest,
    CustomerRequest,
    CustomerResponse,
    CustomerStatusRequest,
    StatusValue,
)
from ...services.customers import CustomerIntakeService, get_intake_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/customers", tags=["customers"])


def _raise_http(exc: IntakeError) -> NoReturn:
    if isinstance(exc, CustomerNotFoundError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    if isinstance(exc, InvalidFieldError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": str(exc), "violations": exc.violations},
        ) from exc
    if isinstance(exc, (CustomerValidationError, InvalidAddressError)):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    if isinstance(exc, GeocoderError):
        logger.error(f"Geocoding provider failure: {exc}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
def create_customer(
    payload: CustomerCreateRequest,
    service: CustomerIntakeService = Depends(get_intake_service),
) -> CustomerResponse:
    try:
        customer = service.save(payload.to_domain())
    except IntakeError as exc:
        _raise_http(exc)
    return CustomerResponse.from_domain(customer)


@router.get("", response_model=List[CustomerResponse], status_code=status.HTTP_200_OK)
def list_customers(
    status_filter: StatusValue | None = Query(default=None, alias="status", description="Optional status filter"),
    assigned_to: int | None = Query(default=None, alias="assignedTo", description="Optional volunteer filter"),
    service: CustomerIntakeService = Depends(get_intake_service),
) -> List[CustomerResponse]:
    customers = service.list(
        status=CustomerStatus(status_filter) if status_filter else None,
        assigned_to=assigned_to,
    )
    return [CustomerResponse.from_domain(customer) for customer in customers]


@router.get("/{customer_id}", response_model=CustomerResponse, status_code=status.HTTP_200_OK)
def get_customer(
    customer_id: int,
    service: CustomerIntakeService = Depends(get_intake_service),
) -> CustomerResponse:
    try:
        return CustomerResponse.from_domain(service.get(customer_id))
    except IntakeError as exc:
        _raise_http(exc)


@router.put("/{customer_id}", response_model=CustomerResponse, status_code=status.HTTP_200_OK)
def update_customer(
    customer_id: int,
    payload: CustomerRequest,
    service: CustomerIntakeService = Depends(get_intake_service),
) -> CustomerResponse:
    """Replace a customer's answers; an omitted status or assignedTo keeps the stored value."""
    try:
        return CustomerResponse.from_domain(service.update(customer_id, payload.changes()))
    except IntakeError as exc:
        _raise_http(exc)


@router.put("/{customer_id}/status", response_model=CustomerResponse, status_code=status.HTTP_200_OK)
def update_customer_status(
    customer_id: int,
    payload: CustomerStatusRequest,
    service: CustomerIntakeService = Depends(get_intake_service),
) -> CustomerResponse:
    try:
        return CustomerResponse.from_domain(service.set_status(customer_id, payload.status))
    except IntakeError as exc:
        _raise_http(exc)


@router.put("/{customer_id}/assign", response_model=CustomerResponse, status_code=status.HTTP_200_OK)
def assign_customer(
    customer_id: int,
    payload: CustomerAssignRequest,
    service: CustomerIntakeService = Depends(get_intake_service),
) -> CustomerResponse:
    try:
        return CustomerResponse.from_domain(service.assign(customer_id, payload.assignedTo))
    except IntakeError as exc:
        _raise_http(exc)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(
    customer_id: int,
    service: CustomerIntakeService = Depends(get_intake_service),
) -> Response:
    try:
        service.delete(customer_id)
    except IntakeError as exc:
        _raise_http(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
