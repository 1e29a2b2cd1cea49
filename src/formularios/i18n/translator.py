# formularios/i18n/translator.py
import logging
from typing import Any, Optional

from .cache import TranslationCache
from .translations import MISSING, TranslationStore

logger = logging.getLogger(__name__)


class Translator:
    """
    Capa de traducción con memoización sobre un TranslationStore.

    Cada consulta (locale, clave) se guarda en el caché, incluidos los fallos,
    así que tras cambiar el store hay que llamar a `reset_cache()`.
    """

    def __init__(
        self,
        store: Optional[TranslationStore] = None,
        cache: Optional[TranslationCache] = None,
        default_locale: str = "en",
    ):
        self.store = store if store is not None else TranslationStore()
        self.cache = cache if cache is not None else TranslationCache()
        self.default_locale = default_locale

    def translate(self, key: str, locale: Optional[str] = None, default: Any = MISSING) -> Any:
        """
        Traduce `key` en el locale indicado (o el locale por defecto).

        Retorna `default` si la clave no existe; por defecto eso es MISSING,
        que el llamador puede distinguir de una traducción vacía.
        """
        locale = locale or self.default_locale
        cache_key = (locale, key)

        entry = self.cache.get(cache_key)
        if entry is not None:
            value = entry.value
        else:
            value = self.store.lookup(locale, key)
            self.cache.set(cache_key, value)

        if value is MISSING:
            return default
        return value

    def exists(self, key: str, locale: Optional[str] = None) -> bool:
        return self.translate(key, locale) is not MISSING

    def reset_cache(self, prefix: Optional[str] = None) -> None:
        """
        Limpia el caché completo o solo las claves que empiezan por `prefix`.
        Las consultas hechas después de retornar ven el store actualizado.
        """
        if prefix is None:
            self.cache.clear()
        else:
            self.cache.invalidate_prefix(prefix)
