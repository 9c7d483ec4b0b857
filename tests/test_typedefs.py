"""
Тесты вывода структуры и генерации TypeScript определений.

Запуск: python -m pytest tests/test_typedefs.py -v
"""

import sys
import os
from pathlib import Path

import pytest

# Добавляем путь к проекту
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from langdefs import (
    ObjectShape,
    ParseError,
    StringArrayShape,
    StringShape,
    WriteError,
    generate_typescript_defs,
    infer_langs_shape,
    infer_shape,
    merge_shapes,
    render_typescript_defs,
)
from langdefs.typedefs import quote_key

FIXTURES = Path(__file__).parent / "fixtures" / "langs"

SCENARIO_DEFS = """/* eslint-disable */
export interface Lang {
    /** hello world */
    'hello': string;
    'array': string[];
}

export interface Langs {
    'e': Lang;
}

export const langs: Langs;
"""


def test_infer_shape():
    shape = infer_shape({
        "hello": "Hi, {name}",
        "array": ["a"],
        "menu": {"title": "Menu"},
    })
    assert shape == ObjectShape({
        "hello": StringShape(placeholders=("name",), doc="Hi, {name}"),
        "array": StringArrayShape(),
        "menu": ObjectShape({"title": StringShape(doc="Menu")}),
    })


def test_infer_shape_rejects_unknown_values():
    with pytest.raises(TypeError):
        infer_shape(5)


def test_placeholders_distinct_in_order():
    shape = infer_shape("{b} {a} {b}")
    assert shape.placeholders == ("b", "a")


def test_merge_unions_keys_across_languages():
    """Ключи из всех языков попадают в общую структуру"""
    merged = infer_langs_shape({
        "e": {"hello": "hi", "menu": {"title": "Menu"}},
        "ru": {"bye": "пока", "menu": {"items": ["a"]}},
    })
    assert list(merged.fields) == ["hello", "menu", "bye"]
    assert list(merged.fields["menu"].fields) == ["title", "items"]
    assert merged.fields["menu"].fields["items"] == StringArrayShape()


def test_merge_conflict_last_language_wins():
    merged = infer_langs_shape({
        "ru": {"value": ["a", "b"]},
        "e": {"value": "text"},
    })
    # языки сливаются в порядке кодов: e, затем ru
    assert merged.fields["value"] == StringArrayShape()

    assert merge_shapes(ObjectShape({"x": StringShape()}), StringShape(doc="s")) == StringShape(doc="s")


def test_infer_langs_shape_empty():
    assert infer_langs_shape({}) == ObjectShape()


def test_scenario_output(tmp_path):
    src = tmp_path / "langs"
    src.mkdir()
    (src / "e.yaml").write_text('hello: "hello world"\narray: ["key1", "key2", "key3"]\n', encoding="utf-8")
    out = tmp_path / "languages.d.ts"

    generate_typescript_defs(src, out)

    assert out.read_text(encoding="utf-8") == SCENARIO_DEFS


def test_header_only_changes_header_block():
    langs = {"e": {"hello": "hello world", "array": ["key1", "key2", "key3"]}}
    plain = render_typescript_defs(langs)
    with_header = render_typescript_defs(langs, with_header=True)

    assert plain == SCENARIO_DEFS
    assert with_header.startswith("// THIS FILE WAS GENERATED BY LANGDEFS\n")
    assert with_header.endswith(plain)
    assert "DO NOT EDIT MANUALLY" in with_header[: len(with_header) - len(plain)]


def test_generation_is_deterministic(tmp_path):
    """Два запуска на одних данных -> одинаковые байты"""
    first = tmp_path / "first.d.ts"
    second = tmp_path / "second.d.ts"
    generate_typescript_defs(FIXTURES, first, with_header=True, placeholders=True)
    generate_typescript_defs(FIXTURES, second, with_header=True, placeholders=True)
    assert first.read_bytes() == second.read_bytes()


def test_nested_objects_rendered():
    defs = render_typescript_defs({"e": {"menu": {"title": "Menu", "sub": {"deep": ["x"]}}, "empty": {}}})
    assert (
        "    'menu': {\n"
        "        /** Menu */\n"
        "        'title': string;\n"
        "        'sub': {\n"
        "            'deep': string[];\n"
        "        };\n"
        "    };\n"
        "    'empty': {};\n"
    ) in defs


def test_languages_sorted_in_langs_interface():
    defs = render_typescript_defs({"ru": {"hello": "привет"}, "e": {"hello": "hi"}})
    assert "export interface Langs {\n    'e': Lang;\n    'ru': Lang;\n}\n" in defs
    assert defs.endswith("export const langs: Langs;\n")


def test_placeholders_rendered_as_functions():
    langs = {"e": {"greeting": "Hello, {name}! Day {day}", "plain": "Hi"}}

    assert "    'greeting': string;\n" in render_typescript_defs(langs)

    defs = render_typescript_defs(langs, placeholders=True)
    assert "    'greeting': (args: { name: string, day: string }) => string;\n" in defs
    assert "    'plain': string;\n" in defs


def test_multiline_doc_comment():
    defs = render_typescript_defs({"e": {"long": "first\nsecond */ end"}})
    assert (
        "    /**\n"
        "     * first\n"
        "     * second *\\/ end\n"
        "     */\n"
        "    'long': string;\n"
    ) in defs


def test_empty_string_has_no_doc_comment():
    defs = render_typescript_defs({"e": {"empty": ""}})
    assert "export interface Lang {\n    'empty': string;\n}" in defs


def test_quote_key():
    assert quote_key("hello") == "'hello'"
    assert quote_key("it's") == "'it\\'s'"
    assert quote_key("back\\slash") == "'back\\\\slash'"
    assert quote_key("menu-title") == "'menu-title'"


def test_quote_key_line_terminators():
    """Переводы строк в ключе не ломают строковый литерал TS"""
    assert quote_key("a\nb") == "'a\\nb'"
    assert quote_key("a\rb") == "'a\\rb'"
    assert quote_key("a\u2028b\u2029c") == "'a\\u2028b\\u2029c'"

    defs = render_typescript_defs({"e": {"line\r\nbreak": ["x"]}})
    assert "    'line\\r\\nbreak': string[];\n" in defs


def test_empty_directory_output(tmp_path):
    out = tmp_path / "out.d.ts"
    generate_typescript_defs(tmp_path, out)
    assert out.read_text(encoding="utf-8") == (
        "/* eslint-disable */\n"
        "export interface Lang {\n"
        "}\n"
        "\n"
        "export interface Langs {\n"
        "}\n"
        "\n"
        "export const langs: Langs;\n"
    )


def test_output_overwritten(tmp_path):
    out = tmp_path / "out.d.ts"
    out.write_text("old content that is much longer than anything generated" * 100, encoding="utf-8")
    generate_typescript_defs(FIXTURES, out)
    assert out.read_text(encoding="utf-8").startswith("/* eslint-disable */\n")
    assert "old content" not in out.read_text(encoding="utf-8")


def test_write_error_missing_parent(tmp_path):
    out = tmp_path / "missing" / "out.d.ts"
    with pytest.raises(WriteError) as exc:
        generate_typescript_defs(FIXTURES, out)
    assert exc.value.path == out
    assert str(out) in str(exc.value)


def test_parse_errors_propagate(tmp_path):
    (tmp_path / "e.yaml").write_text("hello: [broken\n", encoding="utf-8")
    out = tmp_path / "out.d.ts"
    with pytest.raises(ParseError):
        generate_typescript_defs(tmp_path, out)
    assert not out.exists()
