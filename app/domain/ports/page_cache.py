# app/domain/ports/page_cache.py
from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple


class PageCache(ABC):
    """
    Puerto para la caché de páginas renderizadas, indexada por ruta lógica.
    Cada ruta tiene una generación que aumenta con cada invalidación.
    """

    @abstractmethod
    def get(self, path: str) -> Tuple[Optional[Any], int]:
        """Retorna la página en caché (o None) y la generación actual de `path`."""
        pass

    @abstractmethod
    def set(self, path: str, value: Any, generation: int) -> bool:
        """
        Guarda la página solo si `generation` sigue siendo la actual.
        Retorna False si hubo una invalidación desde que se leyó.
        """
        pass

    @abstractmethod
    def revalidate_path(self, path: str) -> None:
        """
        Marca como obsoleta la versión en caché de `path`, para que la
        siguiente vista refleje los datos actuales.
        """
        pass
