"""
Модуль конфигурации langdefs.

Содержит:
- settings.py: все константы и настройки
"""

from .settings import (
    # Логирование
    get_logger,
    LOG_FORMAT,

    # Файлы языков
    LANG_EXTENSIONS,
    SKIP_PREFIXES,

    # Генерация TypeScript
    GENERATED_HEADER,
    ESLINT_DISABLE,
    ROOT_INTERFACE,
    SET_INTERFACE,
    EXPORT_CONST,
    INDENT,
    PLACEHOLDER_PATTERN,
)

__all__ = [
    'get_logger',
    'LOG_FORMAT',
    'LANG_EXTENSIONS',
    'SKIP_PREFIXES',
    'GENERATED_HEADER',
    'ESLINT_DISABLE',
    'ROOT_INTERFACE',
    'SET_INTERFACE',
    'EXPORT_CONST',
    'INDENT',
    'PLACEHOLDER_PATTERN',
]
