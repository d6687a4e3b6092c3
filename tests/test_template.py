from __future__ import annotations

from pathlib import Path

import pytest

from thing.template import TemplateRenderer, TemplateRenderingError


@pytest.fixture()
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


def test_render_string_substitutes_name(renderer: TemplateRenderer):
    assert renderer.render_string("Hello {{name}}", {"name": "my-app"}) == "Hello my-app"


def test_render_string_allows_whitespace_inside_braces(renderer: TemplateRenderer):
    rendered = renderer.render_string("{{ name }} and {{name  }}", {"name": "demo"})
    assert rendered == "demo and demo"


def test_render_string_is_literal(renderer: TemplateRenderer):
    rendered = renderer.render_string("pkg = '{{name}}'", {"name": "a\\b $1"})
    assert rendered == "pkg = 'a\\b $1'"


def test_render_string_without_placeholders_is_unchanged(renderer: TemplateRenderer):
    text = "def f():\n    return {'a': 1}\n"
    assert renderer.render_string(text, {"name": "demo"}) == text


def test_unknown_placeholder_fails(renderer: TemplateRenderer):
    with pytest.raises(TemplateRenderingError) as excinfo:
        renderer.render_string("{{name}} by {{ author }}", {"name": "demo"})
    assert excinfo.value.unresolved == ["author"]


def test_filters_are_not_supported(renderer: TemplateRenderer):
    with pytest.raises(TemplateRenderingError):
        renderer.render_string("{{ name|upper }}", {"name": "demo"})


def test_render_file_preserves_line_endings(tmp_path: Path, renderer: TemplateRenderer):
    template_path = tmp_path / "template.txt"
    template_path.write_bytes(b"Name: {{name}}\r\nend\r\n")
    assert renderer.render_file(template_path, {"name": "Demo"}) == "Name: Demo\r\nend\r\n"


def test_render_file_missing(tmp_path: Path, renderer: TemplateRenderer):
    with pytest.raises(FileNotFoundError):
        renderer.render_file(tmp_path / "nope.txt", {"name": "demo"})
