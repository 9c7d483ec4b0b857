"""
Генерация TypeScript определений (.d.ts) по папке языков.

Пример результата для e.yaml = {hello: "hello world", array: [...]}:

    /* eslint-disable */
    export interface Lang {
        /** hello world */
        'hello': string;
        'array': string[];
    }

    export interface Langs {
        'e': Lang;
    }

    export const langs: Langs;

С placeholders=True строка с {name} описывается функцией:
    'greeting': (args: { name: string }) => string;
"""

from pathlib import Path
from typing import Union

from config import (
    get_logger,
    GENERATED_HEADER,
    ESLINT_DISABLE,
    ROOT_INTERFACE,
    SET_INTERFACE,
    EXPORT_CONST,
    INDENT,
)
from .errors import WriteError
from .loader import LanguageSet, load_langs
from .shape import (
    ObjectShape,
    ShapeDescriptor,
    StringArrayShape,
    StringShape,
    infer_langs_shape,
)

logger = get_logger(__name__)


# Символы, которые нельзя оставлять как есть внутри строки TS
KEY_ESCAPES = str.maketrans({
    '\\': '\\\\',
    "'": "\\'",
    '\n': '\\n',
    '\r': '\\r',
    '\u2028': '\\u2028',
    '\u2029': '\\u2029',
})


def quote_key(key: str) -> str:
    """Ключ в одинарных кавычках: it's -> 'it\\'s'"""
    return f"'{key.translate(KEY_ESCAPES)}'"


def _render_doc(text: str, indent: str) -> list[str]:
    """JSDoc комментарий с наблюдаемым значением строки."""
    lines = text.replace('*/', '*\\/').splitlines()
    if not lines:
        return []
    if len(lines) == 1:
        return [f"{indent}/** {lines[0]} */"]
    return [f"{indent}/**"] + [f"{indent} * {line}".rstrip() for line in lines] + [f"{indent} */"]


def _render_field(name: str, shape: ShapeDescriptor, depth: int, placeholders: bool) -> list[str]:
    indent = INDENT * depth
    key = quote_key(name)

    if isinstance(shape, StringShape):
        lines = _render_doc(shape.doc, indent)
        if placeholders and shape.placeholders:
            args = ", ".join(f"{p}: string" for p in shape.placeholders)
            lines.append(f"{indent}{key}: (args: {{ {args} }}) => string;")
        else:
            lines.append(f"{indent}{key}: string;")
        return lines

    if isinstance(shape, StringArrayShape):
        return [f"{indent}{key}: string[];"]

    if isinstance(shape, ObjectShape):
        if not shape.fields:
            return [f"{indent}{key}: {{}};"]
        lines = [f"{indent}{key}: {{"]
        lines.extend(_render_fields(shape, depth + 1, placeholders))
        lines.append(f"{indent}}};")
        return lines

    raise TypeError(f"Unknown shape: {shape!r}")


def _render_fields(shape: ObjectShape, depth: int, placeholders: bool) -> list[str]:
    lines = []
    for name, child in shape.fields.items():
        lines.extend(_render_field(name, child, depth, placeholders))
    return lines


def render_typescript_defs(
    langs: LanguageSet,
    with_header: bool = False,
    placeholders: bool = False,
) -> str:
    """
    Строит текст .d.ts без записи на диск.

    Args:
        langs: Загруженные языки (load_langs)
        with_header: Добавить комментарий "сгенерировано, не редактировать"
        placeholders: Строки с {name} описывать как функции от аргументов

    Returns:
        Текст определений. Одинаковый вход -> одинаковый текст.
    """
    shape = infer_langs_shape(langs)

    lines = [f"export interface {ROOT_INTERFACE} {{"]
    lines.extend(_render_fields(shape, 1, placeholders))
    lines.append("}")
    lines.append("")
    lines.append(f"export interface {SET_INTERFACE} {{")
    for lang in sorted(langs):
        lines.append(f"{INDENT}{quote_key(lang)}: {ROOT_INTERFACE};")
    lines.append("}")
    lines.append("")
    lines.append(f"export const {EXPORT_CONST}: {SET_INTERFACE};")

    defs = ESLINT_DISABLE + "\n".join(lines) + "\n"
    if with_header:
        defs = GENERATED_HEADER + defs
    return defs


def generate_typescript_defs(
    directory: Union[str, Path],
    output: Union[str, Path],
    with_header: bool = False,
    placeholders: bool = False,
) -> None:
    """
    Загружает папку языков и записывает .d.ts в output (перезаписывает).

    Raises:
        NotFoundError, ParseError: из load_langs
        WriteError: не удалось записать output
    """
    langs = load_langs(directory)
    defs = render_typescript_defs(langs, with_header=with_header, placeholders=placeholders)

    output = Path(output)
    try:
        with open(output, "w", encoding="utf-8", newline="\n") as f:
            f.write(defs)
    except OSError as e:
        raise WriteError(output, e.strerror or str(e)) from e

    logger.info(f"TypeScript definitions generated: {output} ({len(langs)} languages)")
