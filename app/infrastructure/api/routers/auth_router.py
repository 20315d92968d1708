# app/infrastructure/api/routers/auth_router.py
from fastapi import APIRouter, Depends, Form
from fastapi.responses import JSONResponse, RedirectResponse
from typing import Optional

import config
from app.application.use_cases.authenticate import AuthenticationBridge
from app.infrastructure.api.dependencies import get_authentication_bridge

router = APIRouter(tags=["Autenticación"])


@router.post("/login", summary="Iniciar sesión con email y contraseña")
def login(
    email: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    bridge: AuthenticationBridge = Depends(get_authentication_bridge)
):
    error_message = bridge.authenticate(None, {"email": email, "password": password})
    if error_message:
        return JSONResponse(status_code=401, content={"message": error_message})
    return RedirectResponse(config.DASHBOARD_PATH, status_code=303)
