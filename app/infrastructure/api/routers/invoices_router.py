# app/infrastructure/api/routers/invoices_router.py
from fastapi import APIRouter, Depends, Form
from typing import Optional

import config
from app.application.use_cases.invoice_actions import InvoiceActionHandler
from app.domain.ports.invoice_repository import InvoiceRepository
from app.domain.ports.page_cache import PageCache
from app.infrastructure.api.dependencies import get_invoice_action_handler, get_invoice_repository, get_page_cache
from app.infrastructure.api.responses import to_response

router = APIRouter(prefix=config.INVOICES_PATH, tags=["Facturas"])


@router.get("", summary="Lista de facturas (cacheada hasta la próxima modificación)")
def list_invoices(
    invoice_repo: InvoiceRepository = Depends(get_invoice_repository),
    page_cache: PageCache = Depends(get_page_cache)
):
    page, generation = page_cache.get(config.INVOICES_PATH)
    if page is None:
        page = {"invoices": [record.model_dump(mode="json") for record in invoice_repo.list_invoices()]}
        # Si una acción invalidó la ruta mientras leíamos, esta versión no se guarda
        page_cache.set(config.INVOICES_PATH, page, generation)
    return page


@router.post("/create", summary="Crear una factura desde el formulario")
def create_invoice(
    customerId: Optional[str] = Form(None),
    amount: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
    handler: InvoiceActionHandler = Depends(get_invoice_action_handler)
):
    form_data = {"customerId": customerId, "amount": amount, "status": status}
    return to_response(handler.create_invoice(None, form_data))


@router.post("/{invoice_id}/edit", summary="Actualizar una factura desde el formulario")
def update_invoice(
    invoice_id: str,
    customerId: Optional[str] = Form(None),
    amount: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
    handler: InvoiceActionHandler = Depends(get_invoice_action_handler)
):
    form_data = {"customerId": customerId, "amount": amount, "status": status}
    return to_response(handler.update_invoice(invoice_id, form_data))


@router.post("/{invoice_id}/delete", summary="Eliminar una factura")
def delete_invoice(invoice_id: str, handler: InvoiceActionHandler = Depends(get_invoice_action_handler)):
    return to_response(handler.delete_invoice(invoice_id))
