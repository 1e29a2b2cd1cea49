# formularios/forms/builder.py
"""
Contexto de construcción de formularios.

Un FormBuilder envuelve el objeto del formulario (o solo su nombre cuando el
objeto no está presente) y expone lo que los componentes necesitan del host:
nombres legibles de atributos, ids por defecto de los inputs y si un atributo
es requerido.
"""

import logging
from typing import Any, Mapping, Optional

from pydantic import BaseModel

from formularios.i18n.translator import Translator
from formularios.utils.text_helpers import humanize, sanitize_id, underscore

from .field import FieldDescriptor, build_options
from .settings import FormSettings

logger = logging.getLogger(__name__)


class FormBuilder:
    def __init__(
        self,
        record: Any,
        translator: Translator,
        action: Optional[str] = None,
        locale: Optional[str] = None,
        settings: Optional[FormSettings] = None,
        object_name: Optional[str] = None,
    ):
        if isinstance(record, str):
            self.object = None
            self.object_name = object_name or record
        else:
            self.object = record
            self.object_name = object_name or self._model_name(record)
        self.translator = translator
        self.action = action
        self.locale = locale or translator.default_locale
        self.settings = settings or FormSettings()

    @staticmethod
    def _model_name(record: Any) -> Optional[str]:
        if record is None:
            return None
        model_name = getattr(type(record), "model_name", None)
        if isinstance(model_name, str) and model_name:
            return model_name
        return underscore(type(record).__name__)

    @property
    def object_class(self) -> Optional[type]:
        return type(self.object) if self.object is not None else None

    def field(self, attribute: str, input_type: Any, options: Optional[Mapping[str, Any]] = None, **kwargs) -> FieldDescriptor:
        """
        Construye el descriptor de un campo. Las opciones pueden pasarse como
        diccionario, como kwargs o ambas (los kwargs tienen prioridad).
        """
        if kwargs:
            if options is not None and not isinstance(options, Mapping):
                options = build_options(options).model_dump(by_alias=True, exclude_unset=True)
            options = {**(options or {}), **kwargs}
        return FieldDescriptor(
            object_name=self.object_name,
            attribute_name=attribute,
            input_type=input_type,
            options=build_options(options),
        )

    def label(self, attribute: str, input_type: Any, options: Optional[Mapping[str, Any]] = None, **kwargs):
        """Renderiza la etiqueta de un campo usando la cadena de componentes por defecto."""
        from formularios.components.label import LabelComponent

        return LabelComponent(self).call(self.field(attribute, input_type, options, **kwargs))

    # --- Colaboradores que consumen los componentes ---

    def human_attribute_name(self, attribute: str) -> str:
        """
        Nombre legible del atributo. Orden: hook `human_attribute_name` del
        modelo, `title` del campo pydantic y, por último, el atributo humanizado.
        """
        klass = self.object_class
        if klass is None:
            return humanize(attribute)

        hook = getattr(klass, "human_attribute_name", None)
        if callable(hook):
            return str(hook(attribute))

        if issubclass(klass, BaseModel):
            model_field = klass.model_fields.get(attribute)
            if model_field is not None and model_field.title:
                return model_field.title

        return humanize(attribute)

    def default_input_id(self, attribute: str) -> str:
        if self.object_name:
            return sanitize_id(f"{self.object_name}_{attribute}")
        return sanitize_id(attribute)

    def is_attribute_required(self, attribute: str) -> bool:
        """
        Estado requerido por defecto de un atributo. Solo los modelos pydantic
        se introspeccionan; en cualquier otro caso (incluido el objeto ausente)
        se aplica `required_by_default`.
        """
        klass = self.object_class
        if klass is not None and issubclass(klass, BaseModel):
            model_field = klass.model_fields.get(attribute)
            if model_field is not None:
                return model_field.is_required()
            logger.debug(f"'{attribute}' no es un campo de {klass.__name__}; se usa required_by_default")
        return self.settings.required_by_default
