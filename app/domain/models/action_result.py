# app/domain/models/action_result.py
from pydantic import BaseModel, model_validator
from typing import Dict, List, Literal, Optional

from app.domain.models.invoice import InvoiceInput

FieldErrors = Dict[str, List[str]]


class ValidationResult(BaseModel):
    """
    Resultado de la validación en modo seguro.
    O bien `data` (success=True) o bien `field_errors` (success=False), nunca ambos.
    """
    success: bool
    data: Optional[InvoiceInput] = None
    field_errors: Optional[FieldErrors] = None

    @model_validator(mode="after")
    def _exactly_one_shape(self):
        if self.success and (self.data is None or self.field_errors is not None):
            raise ValueError("Un resultado exitoso debe traer 'data' y no 'field_errors'.")
        if not self.success and (self.field_errors is None or self.data is not None):
            raise ValueError("Un resultado fallido debe traer 'field_errors' y no 'data'.")
        return self


class ActionState(BaseModel):
    """Estado que vuelve al formulario para re-renderizarlo con errores en línea."""
    errors: Optional[FieldErrors] = None
    message: Optional[str] = None


class ActionMessage(BaseModel):
    type: Literal["Success", "Error"]
    message: str


class Navigate(BaseModel):
    """
    Indica al despachador que debe redirigir al cliente. La acción
    termina al devolverlo; no se ejecuta nada después.
    """
    path: str
