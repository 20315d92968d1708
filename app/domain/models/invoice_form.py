# app/domain/models/invoice_form.py
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError, field_validator
from pydantic_core import PydanticCustomError

from app.domain.models.invoice import InvoiceInput, InvoiceStatus
from app.domain.models.action_result import ValidationResult
from app.domain.models.errors import InvoiceValidationError

# Campos que se leen del formulario. 'id' y 'date' nunca vienen del cliente.
FORM_FIELDS = ("customerId", "amount", "status")

# Los centavos se guardan en una columna INTEGER de PostgreSQL
MAX_AMOUNT = Decimal(2147483647) / 100

FIELD_MESSAGES = {
    "customerId": "Please select a customer.",
    "amount": "Please enter an amount greater than $0.",
    "status": "Please select an invoice status.",
}


class InvoiceForm(InvoiceInput):
    """
    Esquema compartido por crear y actualizar. Cada campo se valida en modo
    'before' para recibir el valor crudo del formulario (str o None).
    """

    @field_validator("customer_id", mode="before")
    @classmethod
    def _check_customer(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise PydanticCustomError("invoice_form", FIELD_MESSAGES["customerId"])
        return value

    @field_validator("amount", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> Decimal:
        try:
            amount = Decimal(str(value).strip()) if value is not None else None
        except InvalidOperation:
            amount = None
        if amount is None or not amount.is_finite() or amount <= 0 or amount > MAX_AMOUNT:
            raise PydanticCustomError("invoice_form", FIELD_MESSAGES["amount"])
        return amount

    @field_validator("status", mode="before")
    @classmethod
    def _check_status(cls, value: Any) -> InvoiceStatus:
        try:
            return InvoiceStatus(value)
        except ValueError:
            raise PydanticCustomError("invoice_form", FIELD_MESSAGES["status"])


def extract_fields(form_data: Mapping[str, Any]) -> Dict[str, Optional[Any]]:
    """Toma solo los campos del esquema; los ausentes quedan en None."""
    return {field: form_data.get(field) for field in FORM_FIELDS}


def _flatten(error: ValidationError) -> Dict[str, List[str]]:
    field_errors: Dict[str, List[str]] = {}
    for err in error.errors():
        field = str(err["loc"][0]) if err["loc"] else "form"
        message = err["msg"] if err["type"] == "invoice_form" else FIELD_MESSAGES.get(field, err["msg"])
        field_errors.setdefault(field, []).append(message)
    return field_errors


def safe_parse(form_data: Mapping[str, Any]) -> ValidationResult:
    """Modo seguro: nunca lanza, devuelve un ValidationResult."""
    try:
        data = InvoiceForm.model_validate(extract_fields(form_data))
    except ValidationError as e:
        return ValidationResult(success=False, field_errors=_flatten(e))
    return ValidationResult(success=True, data=data)


def parse(form_data: Mapping[str, Any]) -> InvoiceInput:
    """Modo estricto: lanza InvoiceValidationError si el formulario no es válido."""
    try:
        return InvoiceForm.model_validate(extract_fields(form_data))
    except ValidationError as e:
        raise InvoiceValidationError(_flatten(e)) from e
