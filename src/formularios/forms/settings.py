# formularios/forms/settings.py
from dataclasses import dataclass

from formularios.common.config_manager import ConfigManager


@dataclass(frozen=True)
class FormSettings:
    """Valores por defecto que comparten todos los campos de un formulario."""

    required_by_default: bool = True
    required_mark: str = "*"
    required_text: str = "required"
    i18n_scope: str = "simple_form"

    @classmethod
    def from_config(cls) -> "FormSettings":
        """Construye la configuración a partir de las variables de entorno."""
        label_config = ConfigManager.get_label_config()
        i18n_config = ConfigManager.get_i18n_config()
        return cls(
            required_by_default=label_config["required_by_default"],
            required_mark=label_config["required_mark"],
            required_text=label_config["required_text"],
            i18n_scope=i18n_config["scope"],
        )
