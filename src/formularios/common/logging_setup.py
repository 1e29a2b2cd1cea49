# formularios/common/logging_setup.py
"""
Logging de los servicios que renderizan formularios.

Qué registra el paquete:
  - INFO: arranque (`bootstrap`), carga del archivo de traducciones y limpiezas
    completas del caché de traducciones.
  - DEBUG: cada hit/miss/set del caché de traducciones (una línea por consulta
    de la cascada de etiquetas), qué nivel de la cascada resolvió cada texto y
    las opciones de campo ignoradas.
  - WARNING/ERROR: variables de entorno esperadas y ausentes, opciones de campo
    inválidas y archivos de traducciones ilegibles.

Las líneas del caché son muchas (varias por etiqueta), así que su logger tiene
nivel propio (LOG_LEVEL_I18N_CACHE) y no sigue al LOG_LEVEL general.
"""

import logging
import logging.handlers
import os
from pathlib import Path

from .config_loader import ConfigLoader
from .config_manager import ConfigManager

I18N_CACHE_LOGGER = "formularios.i18n.cache"


class RelativePathFormatter(logging.Formatter):
    """
    Un formateador de logs que convierte las rutas absolutas de los archivos
    en rutas relativas a la raíz del proyecto, haciendo los logs más limpios.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.project_root = str(ConfigLoader.get_project_root())

    def format(self, record):
        if hasattr(record, "pathname") and record.pathname.startswith(self.project_root):
            record.pathname = os.path.relpath(record.pathname, self.project_root)
        return super().format(record)


def _level(level_str, default: int = logging.INFO) -> int:
    return getattr(logging, str(level_str).upper(), default)


def setup_logging(service_name: str) -> Path:
    """
    Configura el sistema de logging para un servicio específico.
    Utiliza TimedRotatingFileHandler para rotar los logs diariamente.

    Returns:
        Ruta del archivo de log configurado.
    """
    log_config = ConfigManager.get_log_config()
    log_directory = Path(log_config["directory"])
    log_directory.mkdir(parents=True, exist_ok=True)

    # Nombre del archivo de log del servicio actual
    log_filename_key = f"app_log_filename_{service_name}"
    log_filename = log_config.get(log_filename_key, f"{service_name}_app.log")
    log_file_path = log_directory / log_filename

    log_level = _level(log_config.get("level_str", "INFO"))

    formatter = RelativePathFormatter(log_config["format"], datefmt=log_config["datefmt"])

    # Rotación diaria del archivo
    file_handler = logging.handlers.TimedRotatingFileHandler(
        log_file_path,
        when=log_config["when"],
        interval=log_config["interval"],
        backupCount=log_config["backupCount"],
        encoding=log_config["encoding"],
    )
    file_handler.setFormatter(formatter)

    # Consola, para ver los logs en la terminal
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    # El logger raíz envía los logs a ambos handlers
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = [file_handler, console_handler]

    # Los hits/misses del caché de traducciones solo salen si se piden explícitamente
    cache_level = _level(log_config.get("i18n_cache_level_str", "INFO"))
    logging.getLogger(I18N_CACHE_LOGGER).setLevel(cache_level)

    logging.info(
        f"Logging configurado para el servicio '{service_name}' (nivel {logging.getLevelName(log_level)}, "
        f"caché de traducciones {logging.getLevelName(cache_level)}). Los logs se guardarán en: {log_file_path}"
    )
    return log_file_path
