# main.py
import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
from app.domain.models.errors import InvoiceActionError
from app.infrastructure.api.responses import ErrorResponse
from app.infrastructure.cache.in_memory_page_cache import InMemoryPageCache
from app.infrastructure.persistence.database import engine, Base
from app.infrastructure.persistence import models  # noqa: F401 (registra las tablas)

# Importamos los routers de la capa de infraestructura
from app.infrastructure.api.routers import invoices_router, auth_router

logging.basicConfig(level=logging.INFO, format=config.LOG_FORMAT)

# Crea las tablas si no existen
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="API de Gestión de Facturas",
    description="Acciones de formulario para crear, actualizar y eliminar facturas, e inicio de sesión.",
    version="1.0.0"
)

# Caché de páginas compartida por las peticiones de este proceso
app.state.page_cache = InMemoryPageCache()

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(invoices_router.router)
app.include_router(auth_router.router)


@app.exception_handler(InvoiceActionError)
async def invoice_action_error_handler(request: Request, exc: InvoiceActionError):
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=str(exc), details=f"{request.method} {request.url.path}").model_dump()
    )


@app.get("/", tags=["Health Check"])
def read_root():
    return {"status": "ok", "message": "API de facturas en funcionamiento"}
