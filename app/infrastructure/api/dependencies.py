# app/infrastructure/api/dependencies.py
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.application.use_cases.authenticate import AuthenticationBridge
from app.application.use_cases.invoice_actions import InvoiceActionHandler
from app.domain.ports.invoice_repository import InvoiceRepository
from app.domain.ports.page_cache import PageCache
from app.infrastructure.auth.credentials_provider import CredentialsSignInProvider
from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.invoice_repository_adapter import PostgreSQLInvoiceRepository


def get_page_cache(request: Request) -> PageCache:
    return request.app.state.page_cache


def get_invoice_repository(db: Session = Depends(get_db)) -> InvoiceRepository:
    return PostgreSQLInvoiceRepository(db)


def get_invoice_action_handler(
    invoice_repo: InvoiceRepository = Depends(get_invoice_repository),
    page_cache: PageCache = Depends(get_page_cache)
) -> InvoiceActionHandler:
    return InvoiceActionHandler(invoice_repo=invoice_repo, page_cache=page_cache)


def get_authentication_bridge(db: Session = Depends(get_db)) -> AuthenticationBridge:
    return AuthenticationBridge(sign_in_provider=CredentialsSignInProvider(db))
