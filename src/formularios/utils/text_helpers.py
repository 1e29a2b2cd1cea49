# formularios/utils/text_helpers.py
"""
Utilidades de texto para nombres de atributos, objetos e ids de inputs.
"""

import re
from typing import Any

_NON_WORD = re.compile(r"[^-\w]")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def trim_text_input(value: Any) -> str:
    """
    Hace trim de un valor de texto.

    Args:
        value: El valor (puede ser str, None, o cualquier otro tipo)

    Returns:
        str: El valor sin espacios al inicio y final, o cadena vacía si es None
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value).strip()


def humanize(attribute: Any) -> str:
    """
    Convierte un nombre de atributo en texto legible.

    'created_at' -> 'Created at', 'author_id' -> 'Author', 'name' -> 'Name'.
    """
    text = trim_text_input(attribute)
    if text.endswith("_id") and len(text) > 3:
        text = text[:-3]
    text = text.replace("_", " ").strip().lower()
    if not text:
        return ""
    return text[0].upper() + text[1:]


def underscore(name: str) -> str:
    """'BlogPost' -> 'blog_post'."""
    return _CAMEL_BOUNDARY.sub("_", trim_text_input(name)).replace("-", "_").lower()


def sanitize_id(value: Any) -> str:
    """
    Normaliza un nombre de input para usarlo como id HTML:
    'user[address][street]' -> 'user_address_street'.
    """
    return _NON_WORD.sub("_", trim_text_input(value).replace("]", ""))
