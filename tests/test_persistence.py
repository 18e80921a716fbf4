from datetime import date, datetime, timezone

from intake.models.domain import Customer, CustomerStatus, Dependant, FieldAnswer, Location
from intake.persistence.customers import (
    InMemoryCustomerRepository,
    SupabaseCustomerRepository,
    customer_from_document,
    customer_to_document,
)


def _customer(cid: int = 7, **overrides) -> Customer:
    values = dict(
        id=cid,
        first_name="Grace",
        last_name="Hopper",
        email="grace@example.org",
        status=CustomerStatus.ACCEPTED,
        location=Location(lat=38.9, lng=-77.0),
        household=[Dependant(name="Walter", relationship="son", date_of_birth=date(2020, 1, 2))],
        packing_list=["grains-1"],
        assigned_to=3,
        fields=[FieldAnswer(meta="street", value="1 Navy Way")],
        date_received=datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc),
    )
    values.update(overrides)
    return Customer(**values)


def test_document_uses_plain_json_values():
    document = customer_to_document(_customer())

    assert document["status"] == "Accepted"
    assert document["location"] == {"lat": 38.9, "lng": -77.0}
    assert document["household"][0]["date_of_birth"] == "2020-01-02"
    assert document["date_received"] == "2024-01-01T12:00:00+00:00"
    assert customer_from_document(document) == _customer()


def test_in_memory_repository_returns_copies():
    repository = InMemoryCustomerRepository()
    saved = repository.save(_customer())

    saved.packing_list.append("dairy-1")

    assert repository.get(7).packing_list == ["grains-1"]
    assert repository.delete(7) is True
    assert repository.delete(7) is False


class _Result:
    def __init__(self, data):
        self.data = data


class _Query:
    def __init__(self, table: "_Table", action: str, payload=None):
        self.table = table
        self.action = action
        self.payload = payload
        self.filters: dict = {}

    def eq(self, column, value):
        self.filters[column] = value
        return self

    def limit(self, _count):
        return self

    def order(self, _column):
        return self

    def execute(self):
        rows = self.table.rows
        if self.action == "upsert":
            rows[self.payload["id"]] = dict(self.payload)
            return _Result([dict(self.payload)])
        matched = [row for row in rows.values() if all(row.get(k) == v for k, v in self.filters.items())]
        if self.action == "delete":
            for row in matched:
                rows.pop(row["id"])
        return _Result(matched)


class _Table:
    def __init__(self):
        self.rows: dict = {}

    def select(self, *_args, **_kwargs):
        return _Query(self, "select")

    def upsert(self, payload):
        return _Query(self, "upsert", payload)

    def delete(self):
        return _Query(self, "delete")


class FakeSupabase:
    def __init__(self):
        self.tables: dict[str, _Table] = {}

    def table(self, name):
        return self.tables.setdefault(name, _Table())


def test_supabase_repository_round_trip():
    client = FakeSupabase()
    repository = SupabaseCustomerRepository(client)

    repository.save(_customer(7))
    repository.save(_customer(8, status=CustomerStatus.PENDING, assigned_to=None))

    assert repository.get(7) == _customer(7)
    assert [c.id for c in repository.list(status=CustomerStatus.PENDING)] == [8]
    assert [c.id for c in repository.list(assigned_to=3)] == [7]
    assert repository.delete(8) is True
    assert repository.get(8) is None
