"""
Загрузчик файлов языков.

Читает плоскую папку, где каждый файл соответствует одному языку:

    langs/
    ├── e.yaml       # код языка "e"
    ├── ru.lang      # код языка "ru"
    └── notes.txt    # пропускается: расширение не поддерживается

Формат документа после загрузки:
    {
        "hello": "hello world",
        "array": ["key1", "key2", "key3"],
        "menu": {"title": "Menu"},
    }

Вложенность и порядок массивов сохраняются как есть, ключи не
склеиваются через точку. Кэша нет: каждый вызов читает диск заново
(для кэширования см. cache.LangCache).

Использование:
    from langdefs import load_langs, get_value

    langs = load_langs("langs/")
    langs["e"]["hello"]                   # -> "hello world"
    get_value(langs["e"], "menu.title")   # -> "Menu"
"""

from pathlib import Path
from typing import Any, Optional, Union

import yaml

from config import get_logger, SKIP_PREFIXES
from .errors import DuplicateLanguageError, NotFoundError, ParseError
from .formats import get_parser

logger = get_logger(__name__)

# str | list[str] | вложенный документ
Value = Union[str, list, dict]
LanguageDocument = dict
LanguageSet = dict


def _normalize_item(item: Any, path: Path, key: str) -> str:
    if isinstance(item, (dict, list)):
        raise ParseError(path, f"array '{key}' must contain only strings")
    if item is None:
        raise ParseError(path, f"array '{key}' contains an empty item")
    return str(item)


def _normalize(data: dict, path: Path, prefix: str = "", parents: tuple = ()) -> LanguageDocument:
    """
    Приводит разобранный файл к документу языка.

    Скаляры (числа, bool, даты) превращаются в строки,
    пустые значения считаются ошибкой.
    parents: id родительских dict, YAML алиас на предка даёт цикл.
    """
    parents = parents + (id(data),)
    document = {}
    for key, value in data.items():
        key = str(key)
        full_key = f"{prefix}.{key}" if prefix else key

        if isinstance(value, dict):
            if id(value) in parents:
                raise ParseError(path, f"key '{full_key}' refers to itself (recursive alias)")
            document[key] = _normalize(value, path, full_key, parents)
        elif isinstance(value, list):
            document[key] = [_normalize_item(item, path, full_key) for item in value]
        elif value is None:
            raise ParseError(path, f"key '{full_key}' has no value")
        else:
            document[key] = str(value)

    return document


def _read_document(path: Path) -> LanguageDocument:
    """Читает и разбирает один файл языка."""
    parser = get_parser(path)
    if parser is None:
        raise ParseError(path, f"unsupported file extension '{path.suffix}'")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = parser(f.read())
    except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as e:
        raise ParseError(path, str(e)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ParseError(path, f"top level must be a mapping, got {type(data).__name__}")

    return _normalize(data, path)


def load_lang(path: Union[str, Path]) -> LanguageDocument:
    """
    Загружает один файл языка.

    Args:
        path: Путь к файлу (например, "langs/e.yaml")

    Returns:
        Документ языка

    Raises:
        NotFoundError: файла нет
        ParseError: расширение не поддерживается или файл повреждён
    """
    path = Path(path)
    if not path.is_file():
        raise NotFoundError(f"Path '{path}' is not a file", path)
    return _read_document(path)


def load_langs(directory: Union[str, Path]) -> LanguageSet:
    """
    Загружает все файлы языков из папки.

    Подпапки не обходятся. Файлы с неизвестным расширением и служебные
    файлы (начинаются с "_" или ".") пропускаются.

    Args:
        directory: Путь к папке с файлами языков

    Returns:
        {код языка: документ}, отсортировано по коду языка.
        Пустая папка -> пустой dict.

    Raises:
        NotFoundError: папки нет или её нельзя прочитать
        ParseError: хотя бы один файл повреждён (частичный результат не возвращается)
        DuplicateLanguageError: два файла с одним кодом языка (e.yaml и e.json)
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise NotFoundError(f"Path '{directory}' is not a directory", directory)

    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        raise NotFoundError(f"Cannot read directory '{directory}': {e}", directory) from e

    langs: LanguageSet = {}
    sources: dict[str, Path] = {}

    for path in entries:
        if not path.is_file() or path.name.startswith(SKIP_PREFIXES):
            continue
        if get_parser(path) is None:
            continue

        lang = path.stem
        if lang in sources:
            raise DuplicateLanguageError(path, sources[lang])

        langs[lang] = _read_document(path)
        sources[lang] = path
        logger.debug(f"Loaded {len(langs[lang])} keys for language: {lang}")

    return dict(sorted(langs.items()))


def get_value(document: LanguageDocument, key: str) -> Optional[Value]:
    """
    Получить значение по ключу с точками.

    Example:
        get_value(langs["e"], "menu.title")  # "Menu"
        get_value(langs["e"], "menu.nope")   # None
    """
    data: Any = document
    for part in key.split('.'):
        if isinstance(data, dict) and part in data:
            data = data[part]
        else:
            return None
    return data
