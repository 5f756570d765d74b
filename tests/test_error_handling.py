"""
Error handling tests.

- NotFoundError for every missing client, cook or dish, with the offending id
- ServiceValidationError for negative values reaching the services
- Error payload shape produced by the exception handlers
"""

import pytest
from decimal import Decimal
from types import SimpleNamespace
from sqlalchemy.orm import Session

from test_fixtures import client, db_session  # noqa: F401
from services.client_service import ClientService
from services.cook_service import CookService
from services.dish_service import DishService
from domain.schemas.dish_schemas import DishCreate
from domain.enums import DishCategory
from app.exceptions import CateringError, NotFoundError, ServiceValidationError


def test_exception_payloads():
    err = NotFoundError("Client 3 not found", details={"client_id": 3})
    assert err.http_status == 404
    assert str(err) == "Client 3 not found"
    assert err.to_dict() == {"message": "Client 3 not found", "details": {"client_id": 3}}

    assert ServiceValidationError().message == "Invalid input"
    assert ServiceValidationError.http_status == 400
    assert NotFoundError(code="GONE").to_dict() == {"message": "Not found", "code": "GONE"}
    assert issubclass(NotFoundError, CateringError)


def test_total_payable_rejects_negative_price(monkeypatch):
    bad = SimpleNamespace(
        dishes=[
            SimpleNamespace(dish_id=1, price=Decimal("4.00")),
            SimpleNamespace(dish_id=9, price=Decimal("-2.00")),
        ],
    )
    monkeypatch.setattr(ClientService, "get_client", lambda db, cid: bad)

    with pytest.raises(ServiceValidationError) as exc:
        ClientService.total_payable(None, 1)

    assert exc.value.details["dish_id"] == 9


def test_recompute_classification_rejects_negative_calories(monkeypatch):
    class FakeSession:
        rolled_back = False

        def rollback(self):
            self.rolled_back = True

    bad = SimpleNamespace(
        dishes=[SimpleNamespace(dish_id=4, calories=Decimal("-100"))],
        classification=None,
    )
    monkeypatch.setattr(ClientService, "get_client", lambda db, cid: bad)
    db = FakeSession()

    with pytest.raises(ServiceValidationError):
        ClientService.recompute_classification(db, 1)

    assert db.rolled_back
    assert bad.classification is None


def test_assign_dish_rejects_negative_values_from_callers(db_session: Session):
    ana = ClientService.create_client(db_session, "Ana", "Lee")
    sam = CookService.create_cook(db_session, "Sam", "Ortiz")
    # Bypass schema validation as an internal caller could
    dish = DishCreate.model_construct(
        label="Soup",
        price=Decimal("-5"),
        calories=Decimal("300"),
        category=DishCategory.STARTER,
    )

    with pytest.raises(ServiceValidationError):
        DishService.assign_dish(db_session, dish, ana.client_id, sam.cook_id)

    assert ClientService.total_payable(db_session, ana.client_id) == Decimal("0")


@pytest.mark.parametrize(
    "price, calories",
    [
        (Decimal("0.004"), Decimal("300")),
        (Decimal("5"), Decimal("1999.999")),
    ],
)
def test_assign_dish_rejects_amounts_beyond_cents(db_session: Session, price, calories):
    ana = ClientService.create_client(db_session, "Ana", "Lee")
    sam = CookService.create_cook(db_session, "Sam", "Ortiz")
    dish = DishCreate.model_construct(
        label="Stew", price=price, calories=calories, category=DishCategory.MAIN
    )

    with pytest.raises(ServiceValidationError):
        DishService.assign_dish(db_session, dish, ana.client_id, sam.cook_id)

    assert ClientService.get_client(db_session, ana.client_id).dishes == []


# =============================================================================
# HTTP ERROR RESPONSES (real services, empty database)
# =============================================================================


@pytest.mark.parametrize(
    "method, url, details",
    [
        ("get", "/clients/42", {"client_id": 42}),
        ("get", "/clients/42/total-payable", {"client_id": 42}),
        ("put", "/clients/42/classification", {"client_id": 42}),
        ("get", "/cooks/42", {"cook_id": 42}),
        ("post", "/dishes/42/cooks/1", {"dish_id": 42}),
    ],
)
def test_missing_records_return_structured_404(api_client, method, url, details):
    r = getattr(api_client, method)(url)

    assert r.status_code == 404
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "NOT_FOUND"
    assert body["error"]["details"] == details
    assert "timestamp" in body


def test_create_dish_for_missing_client_returns_404(api_client):
    cook = api_client.post("/cooks", json={"first_name": "Sam", "last_name": "Ortiz"})
    cook_id = cook.json()["cook_id"]

    r = api_client.post(
        f"/dishes/99/{cook_id}",
        json={"label": "Soup", "price": 5.0, "calories": 300, "category": "starter"},
    )

    assert r.status_code == 404
    assert r.json()["error"]["details"] == {"client_id": 99}


@pytest.mark.parametrize(
    "price, calories",
    [(0.004, 300), (5.0, 1999.999)],
)
def test_create_dish_with_more_than_two_decimals_returns_422(api_client, price, calories):
    client_id = api_client.post(
        "/clients", json={"first_name": "Ana", "last_name": "Lee"}
    ).json()["client_id"]
    cook_id = api_client.post(
        "/cooks", json={"first_name": "Sam", "last_name": "Ortiz"}
    ).json()["cook_id"]

    r = api_client.post(
        f"/dishes/{client_id}/{cook_id}",
        json={"label": "Stew", "price": price, "calories": calories, "category": "main"},
    )

    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"
    # Nothing stored, so the client is still LOW rather than rounded up to IDEAL
    assert api_client.get(f"/clients/{client_id}/total-payable").json() == 0
    r = api_client.put(f"/clients/{client_id}/classification")
    assert r.json()["classification"] == "low"


def test_unknown_route_uses_error_payload():
    r = client.get("/no-such-route")
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "HTTP_404"


def test_non_integer_identifier_is_validation_error():
    r = client.get("/clients/abc")
    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"
