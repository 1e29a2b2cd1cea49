# formularios/i18n/translations.py
"""
Almacén de traducciones en memoria.

Las traducciones se guardan como diccionarios anidados por locale y se
consultan con claves separadas por puntos (p. ej. 'simple_form.labels.user.name').
"""

import copy
import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from formularios.common.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class _Missing:
    """Sentinel para traducciones inexistentes."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def _deep_merge(target: Dict[str, Any], data: Mapping[str, Any]) -> None:
    for key, value in data.items():
        key = str(key)
        if isinstance(value, Mapping) and isinstance(target.get(key), dict):
            _deep_merge(target[key], value)
        elif isinstance(value, Mapping):
            target[key] = {}
            _deep_merge(target[key], value)
        else:
            target[key] = value


class TranslationStore:
    """Backend de traducciones: diccionarios anidados por locale."""

    def __init__(self):
        self._translations: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def store_translations(self, locale: str, data: Mapping[str, Any]) -> None:
        """Mezcla (deep merge) las traducciones dadas en las del locale."""
        if not isinstance(data, Mapping):
            raise ConfigurationError("Las traducciones deben ser un mapping anidado", option=str(locale))
        with self._lock:
            _deep_merge(self._translations.setdefault(str(locale), {}), data)
        logger.debug(f"Traducciones almacenadas para el locale '{locale}'")

    def lookup(self, locale: str, key: str) -> Any:
        """
        Busca una clave con puntos en el locale dado.

        Retorna MISSING si algún segmento no existe o si la clave apunta a un
        nodo intermedio (un mapping) en lugar de a un texto.
        """
        node: Any = self._translations.get(str(locale), {})
        for segment in key.split("."):
            if not isinstance(node, dict) or segment not in node:
                return MISSING
            node = node[segment]
        if isinstance(node, dict) or node is None:
            return MISSING
        return node

    def load_file(self, path: Union[str, Path]) -> None:
        """Carga un archivo JSON con la forma {"<locale>": {...}}."""
        path = Path(path)
        try:
            with path.open(encoding="utf-8") as fh:
                data = json.load(fh)
        except OSError as e:
            logger.error(f"No se pudo leer el archivo de traducciones '{path}': {e}")
            raise ConfigurationError(f"No se pudo leer el archivo de traducciones '{path}'") from e
        except json.JSONDecodeError as e:
            logger.error(f"Archivo de traducciones con JSON inválido '{path}': {e}")
            raise ConfigurationError(f"JSON inválido en el archivo de traducciones '{path}'") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"El archivo de traducciones '{path}' debe contener un objeto por locale")
        for locale, translations in data.items():
            self.store_translations(locale, translations)
        logger.info(f"Traducciones cargadas desde {path} (locales: {', '.join(sorted(data))})")

    def snapshot(self) -> Dict[str, Dict[str, Any]]:
        """Copia profunda del estado actual (para restaurar tras un cambio temporal)."""
        with self._lock:
            return copy.deepcopy(self._translations)

    def restore(self, snapshot: Dict[str, Dict[str, Any]]) -> None:
        with self._lock:
            self._translations = copy.deepcopy(snapshot)

    def clear(self) -> None:
        with self._lock:
            self._translations.clear()

    @property
    def locales(self):
        return sorted(self._translations)
