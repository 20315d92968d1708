# app/application/use_cases/authenticate.py
import logging
from typing import Any, Mapping, Optional

import config
from app.domain.models.errors import AuthError
from app.domain.ports.sign_in_provider import SignInProvider


class AuthenticationBridge:
    """Envuelve el inicio de sesión por credenciales y traduce sus errores a mensajes."""

    def __init__(self, sign_in_provider: SignInProvider):
        self.sign_in_provider = sign_in_provider

    def authenticate(self, prior_state: Optional[str], form_data: Mapping[str, Any]) -> Optional[str]:
        try:
            self.sign_in_provider.sign_in(config.SIGN_IN_STRATEGY, form_data)
        except AuthError as e:
            logging.warning(f"[authenticate] Inicio de sesión rechazado: {e.type}")
            if e.type == AuthError.CREDENTIALS_SIGNIN:
                return "Invalid credentials."
            return "Something went wrong."
        # Otros errores no son del proveedor: se propagan
        return None
