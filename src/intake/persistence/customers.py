"""Customer document persistence."""

from __future__ import annotations

import logging
from functools import lru_cache
from datetime import date, datetime, timezone
from typing import Any, Optional, Protocol

from supabase import Client

from ..db.supabase import get_supabase_client
from ..models.domain import Customer, CustomerStatus, Dependant, FieldAnswer, Location

logger = logging.getLogger(__name__)

TABLE = "customers"


class CustomerRepository(Protocol):
    def get(self, customer_id: int) -> Optional[Customer]:
        ...

    def list(self, status: CustomerStatus | None = None, assigned_to: int | None = None) -> list[Customer]:
        ...

    def save(self, customer: Customer) -> Customer:
        ...

    def delete(self, customer_id: int) -> bool:
        ...


def _isoformat(value: date | datetime | None) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _parse_datetime(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def _parse_date(value: Any) -> Optional[date]:
    if value is None or isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def customer_to_document(customer: Customer) -> dict[str, Any]:
    """Convert a customer into the JSON document stored in the ``customers`` table."""

    return {
        "id": customer.id,
        "first_name": customer.first_name,
        "middle_name": customer.middle_name,
        "last_name": customer.last_name,
        "email": customer.email,
        "status": customer.status.value,
        "location": (
            {"lat": customer.location.lat, "lng": customer.location.lng} if customer.location else None
        ),
        "household": [
            {
                "name": dependant.name,
                "relationship": dependant.relationship,
                "date_of_birth": _isoformat(dependant.date_of_birth),
            }
            for dependant in customer.household
        ],
        "disclaimer_agree": customer.disclaimer_agree,
        "disclaimer_sign": customer.disclaimer_sign,
        "packing_list": list(customer.packing_list),
        "assigned_to": customer.assigned_to,
        "food_preferences": list(customer.food_preferences),
        "fields": [{"meta": answer.meta, "value": answer.value} for answer in customer.fields],
        "date_received": _isoformat(customer.date_received),
        "last_packed": _isoformat(customer.last_packed),
        "last_delivered": _isoformat(customer.last_delivered),
    }


def customer_from_document(document: dict[str, Any]) -> Customer:
    location = document.get("location")
    return Customer(
        id=int(document["id"]),
        first_name=document["first_name"],
        middle_name=document.get("middle_name"),
        last_name=document["last_name"],
        email=document["email"],
        status=CustomerStatus(document.get("status") or CustomerStatus.PENDING.value),
        location=Location(lat=float(location["lat"]), lng=float(location["lng"])) if location else None,
        household=[
            Dependant(
                name=entry.get("name"),
                relationship=entry.get("relationship"),
                date_of_birth=_parse_date(entry.get("date_of_birth")),
            )
            for entry in document.get("household") or []
        ],
        disclaimer_agree=document.get("disclaimer_agree"),
        disclaimer_sign=document.get("disclaimer_sign"),
        packing_list=list(document.get("packing_list") or []),
        assigned_to=document.get("assigned_to"),
        food_preferences=list(document.get("food_preferences") or []),
        fields=[FieldAnswer(meta=entry["meta"], value=entry.get("value")) for entry in document.get("fields") or []],
        date_received=_parse_datetime(document.get("date_received")) or datetime.now(timezone.utc),
        last_packed=_parse_datetime(document.get("last_packed")),
        last_delivered=_parse_datetime(document.get("last_delivered")),
    )


class InMemoryCustomerRepository:
    """Customer store kept in process memory, used when no database is configured."""

    def __init__(self) -> None:
        self._documents: dict[int, dict[str, Any]] = {}

    def get(self, customer_id: int) -> Optional[Customer]:
        document = self._documents.get(customer_id)
        return customer_from_document(document) if document else None

    def list(self, status: CustomerStatus | None = None, assigned_to: int | None = None) -> list[Customer]:
        customers = [customer_from_document(document) for _, document in sorted(self._documents.items())]
        if status is not None:
            customers = [customer for customer in customers if customer.status == status]
        if assigned_to is not None:
            customers = [customer for customer in customers if customer.assigned_to == assigned_to]
        return customers

    def save(self, customer: Customer) -> Customer:
        document = customer_to_document(customer)
        self._documents[customer.id] = document
        return customer_from_document(document)

    def delete(self, customer_id: int) -> bool:
        return self._documents.pop(customer_id, None) is not None


class SupabaseCustomerRepository:
    """Customer documents stored as rows of the Supabase ``customers`` table."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def get(self, customer_id: int) -> Optional[Customer]:
        response = self.client.table(TABLE).select("*").eq("id", customer_id).limit(1).execute()
        rows = response.data or []
        return customer_from_document(rows[0]) if rows else None

    def list(self, status: CustomerStatus | None = None, assigned_to: int | None = None) -> list[Customer]:
        query = self.client.table(TABLE).select("*")
        if status is not None:
            query = query.eq("status", status.value)
        if assigned_to is not None:
            query = query.eq("assigned_to", assigned_to)
        response = query.order("id").execute()
        return [customer_from_document(row) for row in response.data or []]

    def save(self, customer: Customer) -> Customer:
        document = customer_to_document(customer)
        response = self.client.table(TABLE).upsert(document).execute()
        rows = response.data or []
        logger.info(f"Saved customer {customer.id} to database")
        return customer_from_document(rows[0]) if rows else customer_from_document(document)

    def delete(self, customer_id: int) -> bool:
        response = self.client.table(TABLE).delete().eq("id", customer_id).execute()
        return bool(response.data)


@lru_cache(maxsize=1)
def get_customer_repository() -> CustomerRepository:
    """Return the Supabase repository when configured, else a process-local one."""

    client = get_supabase_client()
    if not client:
        logger.warning("Supabase not configured - customers are kept in memory only")
        return InMemoryCustomerRepository()
    return SupabaseCustomerRepository(client)
