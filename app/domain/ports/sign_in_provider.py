# app/domain/ports/sign_in_provider.py
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping


class SignInProvider(ABC):
    """Puerto para el proveedor externo de inicio de sesión."""

    @abstractmethod
    def sign_in(self, strategy: str, form_data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Verifica las credenciales con la estrategia indicada.
        Lanza AuthError (con su `type`) si el proveedor rechaza el intento.
        Retorna los datos del usuario autenticado.
        """
        pass
