# app/domain/models/errors.py
from typing import Dict, List


class InvoiceActionError(Exception):
    """Fallo genérico y fatal de una acción (la petición termina en error)."""


class InvoiceValidationError(ValueError):
    """El formulario no cumple el esquema. Lleva los errores por campo."""

    def __init__(self, field_errors: Dict[str, List[str]]):
        self.field_errors = field_errors
        fields = ", ".join(field_errors) or "desconocido"
        super().__init__(f"Formulario de factura inválido: {fields}")


class AuthError(Exception):
    """
    Error clasificado del proveedor de autenticación.
    `type` es el discriminador (ej. 'CredentialsSignin').
    """
    CREDENTIALS_SIGNIN = "CredentialsSignin"
    INVALID_PROVIDER = "InvalidProvider"

    def __init__(self, type: str, message: str = ""):
        self.type = type
        super().__init__(message or type)
