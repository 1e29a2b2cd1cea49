# formularios/bootstrap.py
"""
Punto de arranque para los servicios que renderizan formularios.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from formularios.common.config_loader import ConfigLoader
from formularios.common.config_manager import ConfigManager
from formularios.common.logging_setup import setup_logging
from formularios.forms.builder import FormBuilder
from formularios.forms.settings import FormSettings
from formularios.i18n.translations import TranslationStore
from formularios.i18n.translator import Translator

logger = logging.getLogger(__name__)


@dataclass
class FormsEnvironment:
    """Dependencias compartidas por todos los formularios de un servicio."""

    translator: Translator
    settings: FormSettings = field(default_factory=FormSettings)

    def builder(self, record: Any, action: Optional[str] = None, locale: Optional[str] = None) -> FormBuilder:
        return FormBuilder(record, self.translator, action=action, locale=locale, settings=self.settings)


def init_forms(service_name: str = "formularios", configure_logging: bool = True) -> FormsEnvironment:
    """
    Inicializa configuración, logging y traducciones para un servicio.

    Raises:
        ConfigurationError: si la configuración o el archivo de traducciones son inválidos.
    """
    ConfigLoader.initialize_service(service_name)
    if configure_logging:
        setup_logging(service_name)

    i18n_config = ConfigManager.get_i18n_config()
    store = TranslationStore()
    if i18n_config["translations_file"]:
        store.load_file(i18n_config["translations_file"])
    else:
        logger.info("FORMULARIOS_TRANSLATIONS_FILE no definido; solo se usarán nombres humanizados.")

    translator = Translator(store, default_locale=i18n_config["locale"])
    settings = FormSettings.from_config()
    logger.info(f"Formularios inicializados para '{service_name}' (locale: {translator.default_locale})")
    return FormsEnvironment(translator=translator, settings=settings)
