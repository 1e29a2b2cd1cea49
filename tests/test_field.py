# tests/test_field.py
"""
Tests para la validación de opciones y los descriptores de campo.
"""

import pytest

from formularios.common.exceptions import ConfigurationError
from formularios.forms.field import FieldDescriptor, FieldOptions, InputType, build_options


class TestBuildOptions:
    def test_empty_options(self):
        options = build_options(None)
        assert options.label is None
        assert options.required is None
        assert options.input_html.id is None
        assert not options.label_given

    def test_recognized_options(self):
        options = build_options({"label": "Nome", "required": False, "input_html": {"id": "x", "class": "big"}})
        assert options.label_given
        assert options.label == "Nome"
        assert options.required is False
        assert options.input_html.id == "x"
        assert options.input_html.class_ == "big"

    def test_input_html_keeps_extra_attributes(self):
        options = build_options({"input_html": {"maxlength": 20, "placeholder": "Nombre"}})
        assert options.input_html.extra_attributes() == {"maxlength": 20, "placeholder": "Nombre"}

    def test_unknown_options_are_ignored(self):
        options = build_options({"hint": "Ayuda", "collection": [1, 2], "label": "Nome"})
        assert options.label == "Nome"
        assert not hasattr(options, "hint")

    def test_field_options_instance_passes_through(self):
        options = FieldOptions(label="X")
        assert build_options(options) is options

    def test_options_must_be_a_mapping(self):
        with pytest.raises(ConfigurationError) as exc_info:
            build_options(["label", "Nome"])
        assert exc_info.value.option == "options"

    @pytest.mark.parametrize("key", ["input_html", "label_html"])
    def test_html_options_must_be_a_mapping(self, key):
        with pytest.raises(ConfigurationError) as exc_info:
            build_options({key: "my_new_id"})
        assert exc_info.value.option == key
        assert "mapping" in exc_info.value.message

    def test_label_must_be_text(self):
        with pytest.raises(ConfigurationError) as exc_info:
            build_options({"label": ["no"]})
        assert exc_info.value.option == "label"

    def test_required_must_be_boolean(self):
        with pytest.raises(ConfigurationError):
            build_options({"required": "quizás"})


class TestFieldDescriptor:
    def test_accepts_input_type_enum(self):
        field = FieldDescriptor(object_name="user", attribute_name="name", input_type=InputType.STRING)
        assert field.input_type == "string"

    def test_hidden_detection(self):
        assert FieldDescriptor(attribute_name="token", input_type="hidden").is_hidden
        assert not FieldDescriptor(attribute_name="token", input_type="string").is_hidden

    def test_descriptor_validates_options_directly(self):
        """Test que un descriptor construido a mano también valida la forma de las opciones."""
        with pytest.raises(ConfigurationError) as exc_info:
            FieldDescriptor(
                object_name="user", attribute_name="name", input_type="string", options={"input_html": "my_id"}
            )
        assert exc_info.value.option == "input_html"

    def test_descriptor_accepts_options_mapping(self):
        """Test que las opciones en diccionario se convierten a FieldOptions."""
        field = FieldDescriptor(attribute_name="name", input_type="string", options={"label": "Nome"})
        assert isinstance(field.options, FieldOptions)
        assert field.options.label == "Nome"

    def test_descriptor_is_immutable(self):
        field = FieldDescriptor(attribute_name="name", input_type="string")
        with pytest.raises(Exception):
            field.input_type = "text"
