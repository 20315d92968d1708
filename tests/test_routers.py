"""
Pruebas de punta a punta del despachador HTTP: formularios, redirecciones,
caché de la lista de facturas y manejo de errores fatales.
"""
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from app.application.use_cases.invoice_actions import InvoiceActionHandler
from app.domain.models.action_result import Navigate
from app.domain.ports.invoice_repository import InvoiceRepository
from app.infrastructure.api.dependencies import get_invoice_repository
from app.infrastructure.cache.in_memory_page_cache import InMemoryPageCache
from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.invoice_repository_adapter import PostgreSQLInvoiceRepository
from app.infrastructure.persistence.models import Factura
from main import app

VALID_FORM = {"customerId": "cust-1", "amount": "12.34", "status": "pending"}


@pytest.fixture
def client(db_session, customer):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.state.page_cache = InMemoryPageCache()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_health_check(client):
    assert client.get("/").json()["status"] == "ok"


def test_create_redirects_to_invoice_list(client, db_session):
    response = client.post("/dashboard/invoices/create", data=VALID_FORM, follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/dashboard/invoices"
    assert db_session.query(Factura).one().amount == 1234


def test_create_with_invalid_form_returns_field_errors(client, db_session):
    response = client.post("/dashboard/invoices/create", data={"amount": "0"}, follow_redirects=False)

    assert response.status_code == 422
    body = response.json()
    assert body["message"] == "Missing Fields. Failed to create invoice."
    assert set(body["errors"]) == {"customerId", "amount", "status"}
    assert db_session.query(Factura).count() == 0


def test_invoice_list_is_cached_until_an_action_revalidates_it(client, db_session):
    assert client.get("/dashboard/invoices").json() == {"invoices": []}

    # Escritura directa: la página en caché no se entera
    PostgreSQLInvoiceRepository(db_session).insert_invoice("cust-1", 100, "paid", "2026-10-01")
    assert client.get("/dashboard/invoices").json() == {"invoices": []}

    client.post("/dashboard/invoices/create", data=VALID_FORM, follow_redirects=False)

    invoices = client.get("/dashboard/invoices").json()["invoices"]
    assert len(invoices) == 2
    assert invoices[0]["customer_name"] == "Evil Rabbit"


def test_edit_redirects_on_success(client, db_session):
    invoice_id = PostgreSQLInvoiceRepository(db_session).insert_invoice("cust-1", 100, "pending", "2026-10-01")

    response = client.post(
        f"/dashboard/invoices/{invoice_id}/edit",
        data={"customerId": "cust-1", "amount": "2", "status": "paid"},
        follow_redirects=False
    )

    assert response.status_code == 303
    db_session.expire_all()
    assert db_session.query(Factura).one().status == "paid"


def test_edit_with_malformed_form_returns_generic_error(client):
    response = client.post("/dashboard/invoices/inv-1/edit", data={"amount": "abc"}, follow_redirects=False)

    assert response.status_code == 400
    assert response.json() == {"type": "Error", "message": "Fail on update invoice."}


def test_delete_returns_success_message(client, db_session):
    invoice_id = PostgreSQLInvoiceRepository(db_session).insert_invoice("cust-1", 100, "pending", "2026-10-01")

    response = client.post(f"/dashboard/invoices/{invoice_id}/delete")

    assert response.status_code == 200
    assert response.json() == {"type": "Success", "message": "Invoice deleted."}
    assert db_session.query(Factura).count() == 0


def test_delete_failure_is_a_server_error(client):
    failing_repo = Mock(spec=InvoiceRepository)
    failing_repo.delete_invoice.side_effect = RuntimeError("db down")
    app.dependency_overrides[get_invoice_repository] = lambda: failing_repo

    response = client.post("/dashboard/invoices/inv-1/delete")

    assert response.status_code == 500
    assert response.json()["error"] == "Database Error: Fail on delete invoice."


def test_login_redirects_to_dashboard(client, user):
    response = client.post(
        "/login", data={"email": "user@nextmail.com", "password": "123456"}, follow_redirects=False
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/dashboard"


def test_login_with_wrong_password(client, user):
    response = client.post(
        "/login", data={"email": "user@nextmail.com", "password": "nope-nope"}, follow_redirects=False
    )

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid credentials."}


class InterleavedCreateRepository(PostgreSQLInvoiceRepository):
    """Simula una creación que se confirma mientras la lista todavía se está leyendo."""

    def __init__(self, db, page_cache):
        super().__init__(db)
        self.page_cache = page_cache
        self.interleaved = False

    def list_invoices(self):
        snapshot = super().list_invoices()
        if not self.interleaved:
            self.interleaved = True
            handler = InvoiceActionHandler(PostgreSQLInvoiceRepository(self.db), self.page_cache)
            assert handler.create_invoice(None, VALID_FORM) == Navigate(path="/dashboard/invoices")
        return snapshot


def test_list_read_overlapping_a_create_does_not_cache_stale_page(client, db_session):
    repo = InterleavedCreateRepository(db_session, app.state.page_cache)
    app.dependency_overrides[get_invoice_repository] = lambda: repo

    # La lectura en curso devuelve su foto previa a la creación...
    assert client.get("/dashboard/invoices").json() == {"invoices": []}

    # ...pero no queda en caché: la siguiente vista ya ve la factura nueva
    invoices = client.get("/dashboard/invoices").json()["invoices"]
    assert len(invoices) == 1
    assert invoices[0]["amount"] == 1234
