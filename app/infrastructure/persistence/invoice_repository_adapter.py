# app/infrastructure/persistence/invoice_repository_adapter.py
import uuid
from typing import List
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.domain.ports.invoice_repository import InvoiceRepository
from app.domain.models.invoice import InvoiceRecord


class PostgreSQLInvoiceRepository(InvoiceRepository):
    """
    Adaptador SQL. Todas las sentencias usan parámetros enlazados (`text` + dict),
    nunca concatenación de strings. Cada escritura se confirma por separado.
    """
    def __init__(self, db: Session):
        self.db = db

    def _execute(self, statement, params: dict) -> None:
        try:
            self.db.execute(statement, params)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def insert_invoice(self, customer_id: str, amount_in_cents: int, status: str, date: str) -> str:
        invoice_id = str(uuid.uuid4())
        self._execute(
            text(
                "INSERT INTO invoices (id, customer_id, amount, status, date) "
                "VALUES (:id, :customer_id, :amount, :status, :date)"
            ),
            {"id": invoice_id, "customer_id": customer_id, "amount": amount_in_cents, "status": status, "date": date}
        )
        return invoice_id

    def update_invoice(self, invoice_id: str, customer_id: str, amount_in_cents: int, status: str) -> None:
        self._execute(
            text(
                "UPDATE invoices SET customer_id = :customer_id, amount = :amount, status = :status "
                "WHERE id = :id"
            ),
            {"id": invoice_id, "customer_id": customer_id, "amount": amount_in_cents, "status": status}
        )

    def delete_invoice(self, invoice_id: str) -> None:
        self._execute(text("DELETE FROM invoices WHERE id = :id"), {"id": invoice_id})

    def list_invoices(self) -> List[InvoiceRecord]:
        rows = self.db.execute(text(
            "SELECT invoices.id, invoices.customer_id, invoices.amount, invoices.status, "
            "invoices.date, customers.name AS customer_name "
            "FROM invoices JOIN customers ON invoices.customer_id = customers.id "
            "ORDER BY invoices.date DESC"
        )).mappings().all()
        return [InvoiceRecord(**row) for row in rows]
