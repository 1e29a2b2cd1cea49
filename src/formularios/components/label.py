# formularios/components/label.py
"""
Componente de etiqueta (<label>) para un campo de formulario.

Decide si hay etiqueta, resuelve su texto con una cascada de traducciones,
marca los campos requeridos y apunta el atributo `for` al input correcto,
incluidos los inputs compuestos de fecha y hora.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from markupsafe import Markup

from formularios.forms.field import FieldDescriptor, InputType
from formularios.i18n.translations import MISSING

from .base import BaseComponent

logger = logging.getLogger(__name__)

# Los inputs compuestos renderizan un <select> por segmento (año=1i, mes=2i, día=3i,
# hora=4i, minuto=5i). La etiqueta apunta al primer segmento visible.
COMPOSITE_INPUT_SUFFIXES = {
    InputType.DATE.value: "_1i",
    InputType.DATETIME.value: "_1i",
    InputType.TIME.value: "_4i",
}


@dataclass(frozen=True)
class ResolvedLabel:
    visible_text: str
    for_id: str
    css_classes: Tuple[str, ...]
    required_markup: Optional[Markup] = None
    html_attributes: Tuple[Tuple[str, str], ...] = ()

    @property
    def required(self) -> bool:
        return self.required_markup is not None


class LabelComponent(BaseComponent):
    def __init__(self, builder, next_component: Optional[BaseComponent] = None):
        super().__init__(builder, next_component)
        # Cascada de texto: de la más específica a la más general; gana el primer resultado.
        self.text_resolvers: List[Callable[[FieldDescriptor], object]] = [
            self._action_scoped_label,
            self._model_scoped_label,
            self._attribute_scoped_label,
            self._human_attribute_label,
        ]

    @property
    def scope(self) -> str:
        return self.builder.settings.i18n_scope

    def _translate(self, key: str, default=MISSING):
        return self.builder.translator.translate(f"{self.scope}.{key}", locale=self.builder.locale, default=default)

    def reset_i18n_cache(self, key: Optional[str] = None) -> None:
        """Invalida las traducciones memoizadas del scope (o solo de `key` dentro de él)."""
        prefix = f"{self.scope}.{key}" if key else f"{self.scope}."
        self.builder.translator.reset_cache(prefix)

    # --- Texto visible ---

    def _action_scoped_label(self, field: FieldDescriptor):
        if not field.object_name or not self.builder.action:
            return MISSING
        return self._translate(f"labels.{field.object_name}.{self.builder.action}.{field.attribute_name}")

    def _model_scoped_label(self, field: FieldDescriptor):
        if not field.object_name:
            return MISSING
        return self._translate(f"labels.{field.object_name}.{field.attribute_name}")

    def _attribute_scoped_label(self, field: FieldDescriptor):
        return self._translate(f"labels.{field.attribute_name}")

    def _human_attribute_label(self, field: FieldDescriptor):
        return self.builder.human_attribute_name(field.attribute_name)

    def label_text(self, field: FieldDescriptor) -> str:
        if field.options.label_given:
            return field.options.label

        for resolver in self.text_resolvers:
            text = resolver(field)
            if text is not MISSING:
                logger.debug(f"Texto de '{field.attribute_name}' resuelto por {resolver.__name__}")
                return str(text)
        return ""

    # --- Id del input ---

    def label_target(self, field: FieldDescriptor) -> str:
        input_id = field.options.input_html.id
        if input_id:
            return input_id
        return self.builder.default_input_id(field.attribute_name) + COMPOSITE_INPUT_SUFFIXES.get(field.input_type, "")

    # --- Requerido ---

    def is_required(self, field: FieldDescriptor) -> bool:
        if field.options.required is not None:
            return field.options.required
        return self.builder.is_attribute_required(field.attribute_name)

    def required_markup(self) -> Markup:
        html = self._translate("required.html")
        # Una traducción vacía no sirve como marca: se usa el <abbr> por defecto
        if html is not MISSING and str(html).strip():
            return Markup(html)

        text = self._translate("required.text", default=self.builder.settings.required_text)
        mark = self._translate("required.mark", default=self.builder.settings.required_mark)
        return Markup('<abbr title="{}">{}</abbr>').format(text, mark)

    # --- Resolución y render ---

    def valid(self, field: FieldDescriptor) -> bool:
        return not field.is_hidden

    def resolve(self, field: FieldDescriptor) -> Optional[ResolvedLabel]:
        """Resuelve la etiqueta del campo, o None si el campo no lleva etiqueta."""
        if not self.valid(field):
            return None

        required = self.is_required(field)
        css_classes = [field.input_type]
        if required:
            css_classes.append("required")

        label_html = field.options.label_html
        if label_html.class_:
            css_classes.extend(label_html.class_.split())

        html_attributes = []
        if label_html.id:
            html_attributes.append(("id", label_html.id))
        for name, value in label_html.extra_attributes().items():
            if name in ("for", "class"):
                continue
            html_attributes.append((name, str(value)))

        return ResolvedLabel(
            visible_text=self.label_text(field),
            for_id=self.label_target(field),
            css_classes=tuple(css_classes),
            required_markup=self.required_markup() if required else None,
            html_attributes=tuple(html_attributes),
        )

    def render(self, field: FieldDescriptor) -> Markup:
        resolved = self.resolve(field)
        if resolved is None:
            return Markup("")

        attributes = [("for", resolved.for_id), ("class", " ".join(resolved.css_classes))]
        attributes.extend(resolved.html_attributes)
        attribute_markup = Markup(" ").join(Markup('{}="{}"').format(name, value) for name, value in attributes)

        return Markup("<label {}>{}{}</label>").format(
            attribute_markup, resolved.visible_text, resolved.required_markup or ""
        )
