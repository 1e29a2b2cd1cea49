# formularios/components/base.py
"""
Cadena de componentes de un input: cada componente renderiza su parte y
delega en el siguiente. El Terminator cierra la cadena.
"""

from typing import Optional

from markupsafe import Markup

from formularios.forms.field import FieldDescriptor


class Terminator:
    """Último eslabón de la cadena: no renderiza nada."""

    def call(self, field: FieldDescriptor) -> Markup:
        return Markup("")


TERMINATOR = Terminator()


class BaseComponent:
    def __init__(self, builder, next_component: Optional["BaseComponent"] = None):
        self.builder = builder
        self.next_component = next_component if next_component is not None else TERMINATOR

    def valid(self, field: FieldDescriptor) -> bool:
        """Si es False el componente no produce markup para este campo."""
        return True

    def render(self, field: FieldDescriptor) -> Markup:
        raise NotImplementedError

    def call(self, field: FieldDescriptor) -> Markup:
        content = self.render(field) if self.valid(field) else Markup("")
        return content + self.next_component.call(field)
