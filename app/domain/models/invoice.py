# app/domain/models/invoice.py
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import date
from decimal import Decimal, ROUND_DOWN
from enum import Enum


class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


class InvoiceInput(BaseModel):
    """
    Datos de una factura ya validados desde el formulario.
    El `amount` llega en unidades (no centavos) y la fecha nunca la envía el cliente.
    """
    customer_id: str = Field(alias="customerId")
    amount: Decimal
    status: InvoiceStatus

    model_config = ConfigDict(
        populate_by_name=True,  # Permite crear el modelo con customer_id o customerId
        frozen=True
    )

    @property
    def amount_in_cents(self) -> int:
        # Truncamiento hacia cero, igual que una multiplicación entera
        return int((self.amount * 100).to_integral_value(rounding=ROUND_DOWN))


class InvoiceRecord(BaseModel):
    """Fila persistida de la tabla 'invoices'. El monto está en centavos."""
    id: str
    customer_id: str
    amount: int
    status: InvoiceStatus
    date: date
    customer_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
