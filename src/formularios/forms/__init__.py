from .builder import FormBuilder
from .field import FieldDescriptor, FieldOptions, InputType, build_options
from .settings import FormSettings

__all__ = ["FieldDescriptor", "FieldOptions", "FormBuilder", "FormSettings", "InputType", "build_options"]
