# app/infrastructure/cache/in_memory_page_cache.py
import logging
import threading
from typing import Any, Dict, Optional, Tuple

from app.domain.ports.page_cache import PageCache


class InMemoryPageCache(PageCache):
    """Caché de páginas en memoria del proceso. Vive en `app.state`."""

    def __init__(self):
        self._pages: Dict[str, Any] = {}
        self._generations: Dict[str, int] = {}
        self._lock = threading.Lock()

    def get(self, path: str) -> Tuple[Optional[Any], int]:
        with self._lock:
            return self._pages.get(path), self._generations.get(path, 0)

    def set(self, path: str, value: Any, generation: int) -> bool:
        with self._lock:
            if self._generations.get(path, 0) != generation:
                stored = False
            else:
                self._pages[path] = value
                stored = True
        if not stored:
            logging.info(f"[{path}] Página descartada: se invalidó mientras se generaba.")
        return stored

    def revalidate_path(self, path: str) -> None:
        with self._lock:
            removed = self._pages.pop(path, None)
            self._generations[path] = self._generations.get(path, 0) + 1
        logging.info(f"[{path}] Caché invalidada (había versión en caché: {removed is not None}).")
