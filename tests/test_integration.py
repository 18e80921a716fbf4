import pytest
from fastapi.testclient import TestClient

import intake.db.supabase as supabase_db
import intake.services.geocoding as geocoding
from intake.config import Settings
from intake.main import create_app
from intake.persistence.customers import InMemoryCustomerRepository, get_customer_repository
from intake.persistence.food import InMemoryFoodRepository, sample_catalogue
from intake.services.customers import CustomerIntakeService, get_intake_service
from intake.services.food import FoodCatalogue, get_food_catalogue
from intake.services.geocoding import GeocodeResult
from intake.services.questionnaire import QuestionnaireRegistry
from intake.services.questionnaire.defaults import default_questionnaires


class DummyGeocoder:
    provider = "dummy"

    def __init__(self):
        self.results = [GeocodeResult(latitude=39.8017, longitude=-89.6437)]

    def geocode(self, address):
        return list(self.results)


def _payload(cid: int = 1, **overrides) -> dict:
    payload = {
        "id": cid,
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.org",
        "household": [{"name": "Byron", "relationship": "son", "dateOfBirth": "2021-03-01"}],
        "disclaimerAgree": True,
        "disclaimerSign": "Ada Lovelace",
        "fields": [
            {"meta": "phone", "value": "555-0100"},
            {"meta": "street", "value": "1 Main St"},
            {"meta": "city", "value": "Springfield"},
            {"meta": "state", "value": "IL"},
            {"meta": "zip", "value": "62701"},
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def geocoder() -> DummyGeocoder:
    return DummyGeocoder()


@pytest.fixture
def api_client(geocoder: DummyGeocoder) -> TestClient:
    app = create_app()
    service = CustomerIntakeService(
        repository=InMemoryCustomerRepository(),
        registry=QuestionnaireRegistry(default_questionnaires()),
        geocoder=geocoder,
    )
    catalogue = FoodCatalogue(InMemoryFoodRepository(sample_catalogue()))
    app.dependency_overrides[get_intake_service] = lambda: service
    app.dependency_overrides[get_food_catalogue] = lambda: catalogue
    return TestClient(app)


def test_health(api_client: TestClient):
    response = api_client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_create_customer_geocodes_and_derives_summary(api_client: TestClient):
    response = api_client.post("/api/customers", json=_payload())

    assert response.status_code == 201
    payload = response.json()
    assert payload["status"] == "Pending"
    assert payload["fullName"] == "Ada Lovelace"
    assert payload["location"] == {"lat": 39.8017, "lng": -89.6437}
    assert payload["householdSummary"].startswith("#1 - ")

    fetched = api_client.get("/api/customers/1")
    assert fetched.status_code == 200
    assert fetched.json()["location"] == payload["location"]


def test_create_customer_with_unknown_address(api_client: TestClient, geocoder: DummyGeocoder):
    geocoder.results = []

    response = api_client.post("/api/customers", json=_payload())

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid address"
    assert api_client.get("/api/customers/1").status_code == 404


def test_create_customer_with_unknown_field(api_client: TestClient):
    body = _payload()
    body["fields"].append({"meta": "shoeSize", "value": "9"})

    response = api_client.post("/api/customers", json=body)

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["message"] == "Invalid field"
    assert detail["violations"] == ["Unknown field 'shoeSize'"]


def test_missing_required_name_is_rejected(api_client: TestClient):
    body = _payload()
    del body["firstName"]

    assert api_client.post("/api/customers", json=body).status_code == 422
    assert api_client.post("/api/customers", json=_payload(lastName=" ")).status_code == 400


def test_status_assignment_listing_and_delete(api_client: TestClient):
    api_client.post("/api/customers", json=_payload(1))
    api_client.post("/api/customers", json=_payload(2, firstName="Grace", lastName="Hopper"))

    accepted = api_client.put("/api/customers/1/status", json={"status": "Accepted"})
    assigned = api_client.put("/api/customers/2/assign", json={"assignedTo": 12})

    assert accepted.json()["status"] == "Accepted"
    assert assigned.json()["assignedTo"] == 12
    assert [c["id"] for c in api_client.get("/api/customers", params={"status": "Accepted"}).json()] == [1]
    assert [c["id"] for c in api_client.get("/api/customers", params={"assignedTo": 12}).json()] == [2]
    assert api_client.put("/api/customers/1/status", json={"status": "Archived"}).status_code == 422

    assert api_client.delete("/api/customers/2").status_code == 204
    assert api_client.delete("/api/customers/2").status_code == 404


def test_update_customer_replaces_answers(api_client: TestClient):
    api_client.post("/api/customers", json=_payload())

    response = api_client.put("/api/customers/1", json={k: v for k, v in _payload(middleName="King").items() if k != "id"})

    assert response.status_code == 200
    assert response.json()["fullName"] == "Ada King Lovelace"
    assert api_client.put("/api/customers/5", json=_payload()).status_code == 404


def test_questionnaire_definition(api_client: TestClient):
    response = api_client.get("/api/questionnaires/qCustomers")

    assert response.status_code == 200
    metas = [field for section in response.json()["sections"] for field in section["fields"]]
    assert {field["id"] for field in metas if field["type"] == "address"} == {"street", "apartment", "city", "state", "zip"}
    assert api_client.get("/api/questionnaires/qUnknown").status_code == 404


def test_food_catalogue_and_selector(api_client: TestClient):
    categories = api_client.get("/api/food").json()
    assert [category["id"] for category in categories] == ["grains", "canned", "dairy", "produce"]

    selector = api_client.get("/api/food/dairy/selector", params={"selected": ["dairy-2"]})
    assert selector.status_code == 200
    assert selector.headers["content-type"].startswith("text/html")
    assert selector.text.count("data-item-id=") == 3
    assert selector.text.count('aria-pressed="true"') == 1

    empty = api_client.get("/api/food/bakery/selector")
    assert empty.status_code == 200
    assert "data-item-id" not in empty.text
    assert api_client.get("/api/food/bakery").status_code == 404


def test_update_without_status_keeps_stored_status_and_volunteer(api_client: TestClient):
    api_client.post("/api/customers", json=_payload())
    api_client.put("/api/customers/1/status", json={"status": "Accepted"})
    api_client.put("/api/customers/1/assign", json={"assignedTo": 12})

    body = {k: v for k, v in _payload(email="ada@lovelace.org").items() if k not in ("id", "status", "assignedTo")}
    response = api_client.put("/api/customers/1", json=body)

    assert response.status_code == 200
    assert response.json()["status"] == "Accepted"
    assert response.json()["assignedTo"] == 12
    assert response.json()["email"] == "ada@lovelace.org"

    unassigned = api_client.put("/api/customers/1", json={**body, "assignedTo": None})
    assert unassigned.json()["assignedTo"] is None


@pytest.fixture
def unconfigured_client(monkeypatch: pytest.MonkeyPatch):
    defaults = Settings(environment="development", geocoder_provider="google", geocoder_api_key=None)
    monkeypatch.setattr(geocoding, "default_settings", defaults)
    monkeypatch.setattr(supabase_db, "settings", defaults.model_copy(update={"supabase_url": None, "supabase_key": None}))
    caches = (get_intake_service, get_customer_repository, supabase_db.get_supabase_client)
    for cached in caches:
        cached.cache_clear()
    yield TestClient(create_app())
    for cached in caches:
        cached.cache_clear()


def test_default_settings_serve_reads_and_fail_geocoding_saves(unconfigured_client: TestClient):
    assert unconfigured_client.get("/api/customers").status_code == 200

    response = unconfigured_client.post("/api/customers", json=_payload())

    assert response.status_code == 502
    assert "API key" in response.json()["detail"]
    assert unconfigured_client.get("/api/customers/1").status_code == 404
