"""Tests for template models and template lookup."""

import pytest
from pydantic import ValidationError

from memepen.design.template import (
    Font,
    InMemoryTemplateRepository,
    Stroke,
    TextStyle,
    load_templates,
)
from memepen.design.templates import DEFAULT_IMAGE_PATHS, DEFAULT_TEMPLATES, TWO_BUTTONS
from memepen.exceptions import TemplateNotFound

TEMPLATES_TOML = """
[[templates]]
id = "drake"
slug = "drake"
name = "Drake Hotline Bling"
image = { id = "drake", width = 1200, height = 1200 }

[[templates.text_styles]]
x = 620
y = 40
width = 560
font = { family = "Impact", size = 60, color = "#FFFFFF" }
stroke = { size = 4, color = "#000000" }

[[templates.text_styles]]
x = 620
y = 640
width = 560
font = { family = "Impact", size = 60 }
rotation = { degrees = 5.5 }
"""


class TestModels:
    """Test suite for layout model validation."""

    def test_width_must_be_positive(self):
        with pytest.raises(ValidationError):
            TextStyle(x=0, y=0, width=0, font=Font(family="Impact", size=40))

    def test_font_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            Font(family="Impact", size=0)

    def test_stroke_size_must_not_be_negative(self):
        with pytest.raises(ValidationError):
            Stroke(size=-1)

    def test_zero_stroke_is_allowed(self):
        assert Stroke(size=0).size == 0

    def test_invalid_color_rejected(self):
        with pytest.raises(ValidationError):
            Font(family="Impact", size=40, color="#GGGGGG")

    def test_models_are_frozen(self):
        font = Font(family="Impact", size=40)
        with pytest.raises(ValidationError):
            font.size = 50

    def test_field_count(self):
        assert TWO_BUTTONS.field_count == 3


class TestDefaults:
    """Test suite for the built-in templates."""

    def test_default_templates(self):
        assert list(DEFAULT_TEMPLATES) == ["yall-got-any-more-of-them", "two-buttons"]

    def test_button_labels_are_rotated(self):
        labels = TWO_BUTTONS.text_styles[:2]
        assert all(style.rotation.degrees == -10 for style in labels)
        assert TWO_BUTTONS.text_styles[2].rotation is None

    def test_default_image_paths(self):
        assert DEFAULT_IMAGE_PATHS["two-buttons"].name == "two-buttons.png"


class TestRepository:
    """Test suite for template lookup."""

    def test_get_known_template(self):
        repo = InMemoryTemplateRepository(DEFAULT_TEMPLATES)
        assert repo.get("two-buttons") is TWO_BUTTONS

    def test_unknown_template_raises(self):
        repo = InMemoryTemplateRepository(DEFAULT_TEMPLATES)
        with pytest.raises(TemplateNotFound) as exc_info:
            repo.get("not-real")
        assert exc_info.value.template_id == "not-real"

    def test_accepts_iterable_of_templates(self):
        repo = InMemoryTemplateRepository(DEFAULT_TEMPLATES.values())
        assert [t.id for t in repo.list()] == list(DEFAULT_TEMPLATES)


class TestLoadTemplates:
    """Test suite for TOML template files."""

    def test_loads_templates(self, tmp_path):
        path = tmp_path / "templates.toml"
        path.write_text(TEMPLATES_TOML)

        templates = load_templates(path)

        drake = templates["drake"]
        assert drake.field_count == 2
        assert drake.image.width == 1200
        assert drake.text_styles[0].stroke.size == 4
        assert drake.text_styles[1].font.color == "#FFFFFF"
        assert drake.text_styles[1].rotation.degrees == 5.5

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_templates(tmp_path / "missing.toml")

    def test_invalid_template_raises(self, tmp_path):
        path = tmp_path / "templates.toml"
        path.write_text(TEMPLATES_TOML.replace("width = 560", "width = -5", 1))
        with pytest.raises(ValidationError):
            load_templates(path)
