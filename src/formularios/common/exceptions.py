# formularios/common/exceptions.py
"""
Excepciones del paquete formularios.

Las traducciones ausentes NO son errores (la cascada sigue con el siguiente
nivel); solo los problemas de forma de la configuración llegan al llamador.
"""

from typing import Optional


class FormulariosError(Exception):
    """Excepción base para todos los errores del paquete."""

    pass


class ConfigurationError(FormulariosError):
    """
    Se lanza cuando las opciones de un campo o la configuración del servicio
    tienen una forma inválida (p. ej. `input_html` que no es un mapping).
    """

    def __init__(self, message: str, option: Optional[str] = None):
        self.message = message
        self.option = option
        super().__init__(message)

    def __str__(self) -> str:
        if self.option:
            return f"[Configuration Error] ({self.option}): {self.message}"
        return f"[Configuration Error]: {self.message}"
