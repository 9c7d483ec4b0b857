"""
langdefs: загрузка файлов языков и генерация TypeScript определений

Архитектура:
- formats.py: разбор YAML / JSON / .lang в обычный dict
- loader.py: папка языков -> {код языка: документ}
- shape.py: общая структура документов всех языков
- typedefs.py: структура -> .d.ts
- cache.py: явный кэш для повторных загрузок
- checker.py: CLI

Использование:
    from langdefs import load_langs, generate_typescript_defs

    langs = load_langs("langs/")
    langs["e"]["hello"]  # -> "hello world"

    generate_typescript_defs("langs/", "langs.d.ts", with_header=True)

CLI:
    python -m langdefs.checker generate --dir langs/ --out langs.d.ts --header
    python -m langdefs.checker check --dir langs/
"""

from .errors import (
    LangError,
    ParseError,
    DuplicateLanguageError,
    WriteError,
    NotFoundError,
)
from .loader import load_lang, load_langs, get_value
from .cache import LangCache
from .shape import (
    StringShape,
    StringArrayShape,
    ObjectShape,
    infer_shape,
    merge_shapes,
    infer_langs_shape,
)
from .typedefs import render_typescript_defs, generate_typescript_defs

__all__ = [
    'LangError',
    'ParseError',
    'DuplicateLanguageError',
    'WriteError',
    'NotFoundError',
    'load_lang',
    'load_langs',
    'get_value',
    'LangCache',
    'StringShape',
    'StringArrayShape',
    'ObjectShape',
    'infer_shape',
    'merge_shapes',
    'infer_langs_shape',
    'render_typescript_defs',
    'generate_typescript_defs',
]
