# app/infrastructure/auth/credentials_provider.py
import logging
from typing import Any, Dict, Mapping, Optional

import bcrypt
from pydantic import BaseModel, Field, ValidationError, field_validator
from sqlalchemy import text
from sqlalchemy.orm import Session

import config
from app.domain.models.errors import AuthError
from app.domain.ports.sign_in_provider import SignInProvider


class Credentials(BaseModel):
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str = Field(min_length=config.PASSWORD_MIN_LENGTH)

    @field_validator("password")
    @classmethod
    def _fits_bcrypt(cls, value: str) -> str:
        _check_password_length(value)
        return value


def _check_password_length(password: str) -> None:
    if len(password.encode("utf-8")) > config.PASSWORD_MAX_BYTES:
        raise ValueError(f"La contraseña supera los {config.PASSWORD_MAX_BYTES} bytes.")


class CredentialsSignInProvider(SignInProvider):
    """
    Proveedor de inicio de sesión por email y contraseña contra la tabla 'users'.
    Solo soporta la estrategia 'credentials'.
    """
    def __init__(self, db: Session):
        self.db = db

    def _find_user(self, email: str) -> Optional[Dict[str, Any]]:
        row = self.db.execute(
            text("SELECT id, name, email, password FROM users WHERE email = :email"),
            {"email": email}
        ).mappings().first()
        return dict(row) if row else None

    def sign_in(self, strategy: str, form_data: Mapping[str, Any]) -> Dict[str, Any]:
        if strategy != config.SIGN_IN_STRATEGY:
            raise AuthError(AuthError.INVALID_PROVIDER, f"Estrategia no soportada: {strategy}")

        try:
            credentials = Credentials(email=form_data.get("email"), password=form_data.get("password"))
        except ValidationError as e:
            raise AuthError(AuthError.CREDENTIALS_SIGNIN, "Formato de credenciales inválido.") from e

        # Errores de la base de datos no se clasifican: se propagan
        user = self._find_user(credentials.email)
        if not user:
            logging.info("[sign_in] Usuario no encontrado.")
            raise AuthError(AuthError.CREDENTIALS_SIGNIN)

        if not bcrypt.checkpw(credentials.password.encode("utf-8"), user["password"].encode("utf-8")):
            logging.info(f"[user:{user['id']}] Contraseña incorrecta.")
            raise AuthError(AuthError.CREDENTIALS_SIGNIN)

        logging.info(f"[user:{user['id']}] Inicio de sesión correcto.")
        return {"id": user["id"], "name": user["name"], "email": user["email"]}


def hash_password(password: str) -> str:
    _check_password_length(password)
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")
