# app/application/use_cases/invoice_actions.py
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Union

import config
from app.domain.models.action_result import ActionMessage, ActionState, Navigate, ValidationResult
from app.domain.models.errors import InvoiceActionError
from app.domain.models.invoice import InvoiceInput
from app.domain.models import invoice_form
from app.domain.ports.invoice_repository import InvoiceRepository
from app.domain.ports.page_cache import PageCache


class ValidationPolicy(str, Enum):
    # SAFE devuelve los errores por campo; STRICT lanza InvoiceValidationError.
    # Crear usa SAFE y actualizar usa STRICT: la asimetría es intencional y la
    # decide producto, no se debe unificar aquí.
    SAFE = "safe"
    STRICT = "strict"


class InvoiceActionHandler:
    """
    Acciones de formulario sobre facturas: validar, ejecutar una sola
    sentencia, invalidar la página de facturas y redirigir.
    """
    CREATE_FAILED_MESSAGE = "Missing Fields. Failed to create invoice."

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        page_cache: PageCache,
        clock: Optional[Callable[[], datetime]] = None
    ):
        self.invoice_repo = invoice_repo
        self.page_cache = page_cache
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def _validate(self, form_data: Mapping[str, Any], policy: ValidationPolicy) -> Union[ValidationResult, InvoiceInput]:
        if policy is ValidationPolicy.SAFE:
            return invoice_form.safe_parse(form_data)
        return invoice_form.parse(form_data)

    def _today(self) -> str:
        return self.clock().astimezone(timezone.utc).date().isoformat()

    def create_invoice(self, prior_state: Optional[ActionState], form_data: Mapping[str, Any]) -> Union[ActionState, Navigate]:
        """
        Crea una factura a partir del formulario.
        Si la validación falla devuelve un ActionState con los errores por campo.
        Si falla la base de datos lanza InvoiceActionError.
        """
        validated = self._validate(form_data, ValidationPolicy.SAFE)
        if not validated.success:
            logging.info(f"[create_invoice] Formulario inválido: {sorted(validated.field_errors)}")
            return ActionState(errors=validated.field_errors, message=self.CREATE_FAILED_MESSAGE)

        invoice = validated.data
        try:
            invoice_id = self.invoice_repo.insert_invoice(
                customer_id=invoice.customer_id,
                amount_in_cents=invoice.amount_in_cents,
                status=invoice.status.value,
                date=self._today()
            )
        except Exception as e:
            logging.error("[create_invoice] Error al insertar la factura.", exc_info=True)
            raise InvoiceActionError("Fail on create invoice.") from e

        logging.info(f"[invoice:{invoice_id}] Factura creada.")
        self.page_cache.revalidate_path(config.INVOICES_PATH)
        return Navigate(path=config.INVOICES_PATH)

    def update_invoice(self, invoice_id: str, form_data: Mapping[str, Any]) -> Union[ActionMessage, Navigate]:
        """
        Actualiza cliente, monto y estado de la factura `invoice_id`.
        El ID viene de la ruta y se usa tal cual como clave.
        Cualquier error (validación o base de datos) se devuelve como mensaje genérico.
        """
        try:
            invoice = self._validate(form_data, ValidationPolicy.STRICT)
            self.invoice_repo.update_invoice(
                invoice_id=invoice_id,
                customer_id=invoice.customer_id,
                amount_in_cents=invoice.amount_in_cents,
                status=invoice.status.value
            )
            self.page_cache.revalidate_path(config.INVOICES_PATH)
        except Exception:
            logging.error(f"[invoice:{invoice_id}] Error al actualizar la factura.", exc_info=True)
            return ActionMessage(type="Error", message="Fail on update invoice.")

        logging.info(f"[invoice:{invoice_id}] Factura actualizada.")
        return Navigate(path=config.INVOICES_PATH)

    def delete_invoice(self, invoice_id: str) -> ActionMessage:
        """Elimina la factura. No redirige: devuelve un mensaje de éxito o lanza."""
        try:
            self.invoice_repo.delete_invoice(invoice_id)
            self.page_cache.revalidate_path(config.INVOICES_PATH)
        except Exception as e:
            logging.error(f"[invoice:{invoice_id}] Error al eliminar la factura.", exc_info=True)
            raise InvoiceActionError("Database Error: Fail on delete invoice.") from e

        logging.info(f"[invoice:{invoice_id}] Factura eliminada.")
        return ActionMessage(type="Success", message="Invoice deleted.")
