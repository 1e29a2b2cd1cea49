# formularios/forms/field.py
"""
Descriptores de campo: la tupla (objeto, atributo, tipo de input, opciones)
que describe un input del formulario.

Las opciones llegan como diccionario desde el constructor del formulario y se
validan contra modelos pydantic. Las claves no reconocidas se ignoran (son de
otros componentes: hints, colecciones, etc.) y solo se registran en DEBUG.
"""

import logging
from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from formularios.common.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class InputType(str, Enum):
    STRING = "string"
    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    PASSWORD = "password"
    EMAIL = "email"
    SELECT = "select"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"
    HIDDEN = "hidden"


class HtmlAttributes(BaseModel):
    """Atributos HTML libres; `class` y `id` tienen nombre propio."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    id: Optional[str] = None
    class_: Optional[str] = Field(default=None, alias="class")

    def extra_attributes(self) -> dict:
        return {key: value for key, value in (self.model_extra or {}).items() if value is not None}


class InputHtml(HtmlAttributes):
    """Atributos del input asociado a la etiqueta."""


class LabelHtml(HtmlAttributes):
    """Atributos adicionales para el propio tag <label>."""


class FieldOptions(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    label: Optional[str] = None
    required: Optional[bool] = None
    input_html: InputHtml = Field(default_factory=InputHtml)
    label_html: LabelHtml = Field(default_factory=LabelHtml)

    @field_validator("input_html", "label_html", mode="before")
    @classmethod
    def _require_mapping(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, (Mapping, HtmlAttributes)):
            raise ValueError(f"debe ser un mapping de atributos HTML, se recibió {type(value).__name__}")
        return value

    @property
    def label_given(self) -> bool:
        """True si la etiqueta se pasó explícitamente (incluida la cadena vacía)."""
        return self.label is not None


class FieldDescriptor(BaseModel):
    """Un input del formulario, inmutable durante el render."""

    model_config = ConfigDict(frozen=True)

    object_name: Optional[str] = None
    attribute_name: str
    input_type: str
    options: FieldOptions = Field(default_factory=FieldOptions)

    @field_validator("attribute_name", "input_type", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        return value

    @field_validator("options", mode="before")
    @classmethod
    def _validate_options(cls, value: Any) -> FieldOptions:
        # ConfigurationError no es un ValueError: pydantic la deja pasar tal cual
        return build_options(value)

    @property
    def is_hidden(self) -> bool:
        return self.input_type == InputType.HIDDEN.value


def build_options(options: Optional[Mapping[str, Any]] = None) -> FieldOptions:
    """
    Valida el diccionario de opciones de un campo.

    Raises:
        ConfigurationError: si las opciones no son un mapping o alguna opción
            reconocida tiene una forma inválida.
    """
    if options is None:
        return FieldOptions()
    if isinstance(options, FieldOptions):
        return options
    if not isinstance(options, Mapping):
        raise ConfigurationError(
            f"Las opciones del campo deben ser un mapping, se recibió {type(options).__name__}", option="options"
        )

    unknown = sorted(str(key) for key in options if key not in FieldOptions.model_fields)
    if unknown:
        logger.debug(f"Opciones no reconocidas ignoradas por la etiqueta: {unknown}")

    try:
        return FieldOptions.model_validate(dict(options))
    except ValidationError as e:
        first = e.errors()[0]
        option = ".".join(str(part) for part in first["loc"]) or None
        logger.error(f"Opciones de campo inválidas ({option}): {first['msg']}")
        raise ConfigurationError(first["msg"], option=option) from e
