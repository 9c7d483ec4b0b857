"""
Форматы файлов языков.

Каждый формат превращает текст файла в обычный вложенный dict.
Нормализация значений (строки, массивы строк, вложенные объекты)
делается уже в loader.py.

Поддерживаемые расширения (см. config.LANG_EXTENSIONS):
    .yaml / .yml  YAML (yaml.safe_load)
    .json         JSON
    .lang         построчный формат key = value

Формат .lang:
    # комментарий
    hello = "hello world"
    bare = просто строка
    long = "первая строка
    вторая строка"
    array = ["key1", "key2"]
    menu.title = "Меню"        # ключ берётся как есть, с точкой
"""

import json
import re
from pathlib import Path
from typing import Any, Callable, Optional

import yaml

from config import LANG_EXTENSIONS

# Строка в кавычках внутри массива, с экранированием \" и \n
QUOTED_ITEM = re.compile(r'"((?:[^"\\]|\\.)*)"')

ESCAPE = re.compile(r'\\(.)', re.DOTALL)
ESCAPES = {'n': '\n', '"': '"', '\\': '\\'}


class LangSyntaxError(ValueError):
    """Синтаксическая ошибка в .lang файле."""

    def __init__(self, message: str, line: int):
        super().__init__(f"line {line}: {message}")
        self.line = line


def parse_yaml(text: str) -> Any:
    return yaml.safe_load(text)


def parse_json(text: str) -> Any:
    # Пустой файл даёт пустой документ, как и в YAML
    if not text.strip():
        return None
    return json.loads(text)


def _unescape(value: str) -> str:
    """\\n, \\" и \\\\ декодируются, остальные последовательности остаются как есть."""
    return ESCAPE.sub(lambda m: ESCAPES.get(m.group(1), m.group(0)), value)


def _is_closed_string(value: str) -> bool:
    """Строка в кавычках закрыта на этой строке файла."""
    if not value.endswith('"'):
        return False
    # Кавычка экранирована, если перед ней нечётное число обратных косых
    backslashes = len(value[:-1]) - len(value[:-1].rstrip('\\'))
    return backslashes % 2 == 0


def _decode_string(raw: str) -> str:
    """'"текст"' -> 'текст'"""
    raw = raw.strip()
    return _unescape(raw[1:-1])


def _decode_array(raw: str, line: int) -> list[str]:
    """Разбирает '["a", "b"]', в том числе многострочный."""
    inner = raw.strip()[1:-1]
    inner = "\n".join(
        part for part in inner.splitlines()
        if not part.strip().startswith('#')
    )

    rest = QUOTED_ITEM.sub('', inner)
    if rest.replace(',', '').strip():
        raise LangSyntaxError(f"array items must be quoted strings, got {rest.strip()!r}", line)

    return [_unescape(item) for item in QUOTED_ITEM.findall(inner)]


def parse_lang(text: str) -> dict:
    """
    Разбирает .lang файл.

    Многострочное значение начинается с незакрытой кавычки или скобки
    и продолжается до строки, которая заканчивается на " или ].
    Внутри многострочной строки пустые строки сохраняются.

    Ключи берутся как есть: 'menu.title' остаётся одним ключом,
    повторный ключ перезаписывает предыдущий.
    """
    data: dict = {}

    key: Optional[str] = None
    start = 0
    is_array = False
    buffer: list[str] = []

    for number, line in enumerate(text.splitlines(), start=1):
        line = line.rstrip()

        if key is not None:
            buffer.append(line)
            stripped = line.strip()
            closed = stripped.endswith(']') if is_array else _is_closed_string(stripped)
            if closed:
                raw = "\n".join(buffer)
                value = _decode_array(raw, start) if is_array else _decode_string(raw)
                data[key] = value
                key = None
                buffer = []
            continue

        if not line.strip() or line.lstrip().startswith('#'):
            continue

        if '=' not in line:
            continue

        name, _, value = line.partition('=')
        name = name.strip()
        value = value.strip()

        if not name:
            continue

        if value.startswith('['):
            if value.endswith(']'):
                data[name] = _decode_array(value, number)
            else:
                key, start, is_array, buffer = name, number, True, [value]
        elif value.startswith('"'):
            if len(value) > 1 and _is_closed_string(value):
                data[name] = _decode_string(value)
            else:
                key, start, is_array, buffer = name, number, False, [value]
        else:
            data[name] = value

    if key is not None:
        kind = "array" if is_array else "string"
        raise LangSyntaxError(f"unterminated {kind} for key '{key}'", start)

    return data


PARSERS: dict[str, Callable[[str], Any]] = {
    'yaml': parse_yaml,
    'json': parse_json,
    'lang': parse_lang,
}


def get_parser(path: Path) -> Optional[Callable[[str], Any]]:
    """Парсер по расширению файла или None, если расширение не поддерживается."""
    fmt = LANG_EXTENSIONS.get(path.suffix.lower())
    if fmt is None:
        return None
    return PARSERS[fmt]
