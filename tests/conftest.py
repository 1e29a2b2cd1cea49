from contextlib import contextmanager
from typing import Any, Dict
from unittest.mock import patch

import pytest

# Esta importación es necesaria para que la fixture de configuración funcione.
from formularios.common.config_loader import ConfigLoader
from formularios.forms.builder import FormBuilder
from formularios.i18n.translations import TranslationStore
from formularios.i18n.translator import Translator
from formularios.utils.text_helpers import humanize

MOCK_SETTINGS: Dict[str, Any] = {
    "LOG_LEVEL": "DEBUG",
    "FORMULARIOS_LOCALE": "en",
}


@pytest.fixture(scope="session", autouse=True)
def setup_and_mock_config(tmp_path_factory):
    """
    Se ejecuta una sola vez por sesión para asegurar que la configuración
    esté 'mockeada' antes de que cualquier prueba se ejecute.
    Esto previene que los tests intenten leer archivos .env.
    """
    ConfigLoader.initialize_service("formularios_test")
    MOCK_SETTINGS["LOG_DIRECTORY"] = str(tmp_path_factory.mktemp("logs"))

    def mock_get(key, default=None, warning_msg=None):
        return MOCK_SETTINGS.get(key, default)

    patcher = patch(
        "formularios.common.config_manager.ConfigManager._get_env_with_warning", side_effect=mock_get
    )
    patcher.start()
    yield
    patcher.stop()


@pytest.fixture
def mock_settings() -> Dict[str, Any]:
    """Settings simulados; usar monkeypatch.setitem para cambiarlos en un test."""
    return MOCK_SETTINGS


class User:
    """Modelo de prueba con nombres legibles propios, como un modelo del host."""

    model_name = "user"

    def __init__(self, name="New in Simple Form!", description="Hello!", age=19, born_at=None, created_at=None):
        self.name = name
        self.description = description
        self.age = age
        self.born_at = born_at
        self.created_at = created_at

    @classmethod
    def human_attribute_name(cls, attribute: str) -> str:
        if attribute == "description":
            return "User Description!"
        return humanize(attribute)


@pytest.fixture
def user() -> User:
    return User()


@pytest.fixture
def store() -> TranslationStore:
    return TranslationStore()


@pytest.fixture
def translator(store: TranslationStore) -> Translator:
    return Translator(store, default_locale="en")


@pytest.fixture
def store_translations(store: TranslationStore, translator: Translator):
    """
    Context manager que agrega traducciones durante el bloque y restaura el
    estado anterior al salir. Limpia el caché en ambos extremos.
    """

    @contextmanager
    def _store_translations(locale: str, data: Dict[str, Any]):
        snapshot = store.snapshot()
        store.store_translations(locale, data)
        translator.reset_cache()
        try:
            yield
        finally:
            store.restore(snapshot)
            translator.reset_cache()

    return _store_translations


@pytest.fixture
def with_label_for(translator: Translator):
    """Renderiza la etiqueta de un campo, como `label.call` en el constructor del host."""

    def _with_label_for(record, attribute, input_type, action=None, **options):
        builder = FormBuilder(record, translator, action=action)
        return builder.label(attribute, input_type, **options)

    return _with_label_for
