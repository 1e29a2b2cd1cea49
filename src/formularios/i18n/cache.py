# formularios/i18n/cache.py

"""
Caché en memoria para las consultas de traducción.
Vive lo que vive el proceso; se limpia explícitamente con `clear()` o `invalidate()`.
"""

import logging
import threading
import time
from typing import Any, Dict, Hashable, Optional, Tuple

logger = logging.getLogger(__name__)

CacheKey = Tuple[str, str]


class CacheEntry:
    """Entrada de caché con timestamp."""

    def __init__(self, value: Any):
        self.value = value
        self.timestamp = time.time()


class TranslationCache:
    """
    Caché simple en memoria indexado por (locale, clave de traducción).

    Guarda también los "fallos" (el sentinel MISSING del store), de modo que
    una clave ausente no vuelve a consultarse hasta que se limpie el caché.
    """

    def __init__(self):
        self._cache: Dict[Hashable, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: CacheKey) -> Optional[CacheEntry]:
        """Obtiene la entrada del caché, o None si la clave nunca se guardó."""
        with self._lock:
            entry = self._cache.get(key)
        if entry is None:
            logger.debug(f"Cache miss for key: {key}")
            return None
        logger.debug(f"Cache hit for key: {key}")
        return entry

    def set(self, key: CacheKey, value: Any) -> None:
        """Almacena un valor en el caché."""
        with self._lock:
            self._cache[key] = CacheEntry(value)
        logger.debug(f"Cache set for key: {key}")

    def invalidate(self, key: CacheKey) -> None:
        """Invalida una entrada específica del caché."""
        with self._lock:
            if key in self._cache:
                del self._cache[key]
                logger.debug(f"Cache invalidated for key: {key}")

    def invalidate_prefix(self, prefix: str) -> int:
        """
        Invalida todas las entradas cuya clave de traducción empieza por `prefix`,
        en cualquier locale. Retorna la cantidad de entradas eliminadas.
        """
        with self._lock:
            doomed = [key for key in self._cache if key[1].startswith(prefix)]
            for key in doomed:
                del self._cache[key]
        logger.debug(f"Cache invalidated {len(doomed)} entries with prefix: {prefix}")
        return len(doomed)

    def clear(self) -> None:
        """Limpia todo el caché."""
        with self._lock:
            self._cache.clear()
        logger.info("Translation cache cleared")

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def get_stats(self) -> Dict[str, Any]:
        """Obtiene estadísticas del caché."""
        with self._lock:
            items = list(self._cache.items())
        return {
            "total_entries": len(items),
            "entries": [
                {
                    "locale": key[0],
                    "key": key[1],
                    "age_seconds": time.time() - entry.timestamp,
                }
                for key, entry in items
            ],
        }
