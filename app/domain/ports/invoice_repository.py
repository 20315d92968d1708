# app/domain/ports/invoice_repository.py
from abc import ABC, abstractmethod
from typing import List

from app.domain.models.invoice import InvoiceRecord


class InvoiceRepository(ABC):
    """
    Contrato con la base de datos. Cada método de escritura ejecuta
    exactamente una sentencia; cualquier error se propaga al caso de uso.
    """

    @abstractmethod
    def insert_invoice(self, customer_id: str, amount_in_cents: int, status: str, date: str) -> str:
        """
        Inserta una factura nueva. El ID lo asigna la capa de almacenamiento.
        Retorna el ID generado.
        """
        pass

    @abstractmethod
    def update_invoice(self, invoice_id: str, customer_id: str, amount_in_cents: int, status: str) -> None:
        """Actualiza cliente, monto y estado. El ID y la fecha no cambian."""
        pass

    @abstractmethod
    def delete_invoice(self, invoice_id: str) -> None:
        pass

    @abstractmethod
    def list_invoices(self) -> List[InvoiceRecord]:
        """Lista las facturas (con el nombre del cliente) ordenadas por fecha descendente."""
        pass
