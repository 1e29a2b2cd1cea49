# formularios/common/config_manager.py
import logging
import os
from typing import Any, Dict

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"true", "1", "yes", "si", "sí", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


class ConfigManager:
    """
    Gestor de Configuración Centralizado para el paquete formularios.

    Todos los métodos públicos son @classmethod para mantener la consistencia
    y centralizar la lectura de variables de entorno.
    """

    @classmethod
    def _get_env_with_warning(cls, key: str, default: Any = None, warning_msg: str = None) -> Any:
        """
        Método de ayuda interno para obtener una variable de entorno.
        Advierte si la variable no está definida y se esperaba que lo estuviera.
        """
        value = os.getenv(key, default)
        if value is None or (isinstance(value, str) and not value.strip()):
            if warning_msg:
                logger.warning(f"ADVERTENCIA ConfigManager: {warning_msg}")
            # Devuelve el valor por defecto si el valor encontrado es una cadena vacía
            return default
        return value

    @classmethod
    def _get_bool(cls, key: str, default: bool) -> bool:
        """Lee una variable booleana. Un valor no reconocido es un error de configuración."""
        raw = cls._get_env_with_warning(key, default)
        if isinstance(raw, bool):
            return raw
        normalized = str(raw).strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise ConfigurationError(f"Valor booleano inválido: '{raw}'", option=key)

    # --- CONFIGURACIONES GENERALES ---

    @classmethod
    def get_log_config(cls) -> Dict[str, Any]:
        """Obtiene la configuración de logging de forma unificada."""
        return {
            "directory": cls._get_env_with_warning("LOG_DIRECTORY", "logs"),
            "level_str": cls._get_env_with_warning("LOG_LEVEL", "INFO"),
            # Nivel propio para las líneas de hit/miss del caché de traducciones
            "i18n_cache_level_str": cls._get_env_with_warning("LOG_LEVEL_I18N_CACHE", "INFO"),
            "format": cls._get_env_with_warning(
                "LOG_FORMAT", "%(asctime)s - PID:%(process)d - %(name)s - %(levelname)s - %(funcName)s - %(message)s"
            ),
            "datefmt": cls._get_env_with_warning("LOG_DATEFMT", "%Y-%m-%d %H:%M:%S"),
            "backupCount": int(cls._get_env_with_warning("LOG_BACKUP_COUNT", 7)),
            "app_log_filename_formularios": cls._get_env_with_warning(
                "APP_LOG_FILENAME_FORMULARIOS", "formularios_app.log"
            ),
            # Parámetros fijos de rotación
            "when": "midnight",
            "interval": 1,
            "encoding": "utf-8",
        }

    # --- CONFIGURACIONES DE FORMULARIOS ---

    @classmethod
    def get_i18n_config(cls) -> Dict[str, Any]:
        """Obtiene la configuración de traducciones (locale, archivo y scope raíz)."""
        return {
            "locale": cls._get_env_with_warning("FORMULARIOS_LOCALE", "en"),
            "translations_file": cls._get_env_with_warning("FORMULARIOS_TRANSLATIONS_FILE"),
            "scope": cls._get_env_with_warning("FORMULARIOS_I18N_SCOPE", "simple_form"),
        }

    @classmethod
    def get_label_config(cls) -> Dict[str, Any]:
        """Obtiene los valores por defecto del componente de etiquetas."""
        return {
            "required_by_default": cls._get_bool("FORMULARIOS_REQUIRED_BY_DEFAULT", True),
            "required_mark": cls._get_env_with_warning("FORMULARIOS_REQUIRED_MARK", "*"),
            "required_text": cls._get_env_with_warning("FORMULARIOS_REQUIRED_TEXT", "required"),
        }
