"""
Настройки langdefs.

Все константы загрузчика и генератора типов собраны здесь.
Переменные окружения не используются: поведение задаётся только
аргументами вызова.
"""

import logging

# ============= ЛОГИРОВАНИЕ =============

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_logger(name: str) -> logging.Logger:
    """Получить логгер модуля"""
    return logging.getLogger(name)


# ============= ФАЙЛЫ ЯЗЫКОВ =============

# Расширение -> имя формата (см. langdefs.formats)
LANG_EXTENSIONS = {
    '.yaml': 'yaml',
    '.yml': 'yaml',
    '.json': 'json',
    '.lang': 'lang',
}

# Служебные файлы в папке языков
SKIP_PREFIXES = ('_', '.')

# ============= ГЕНЕРАЦИЯ TYPESCRIPT =============

GENERATED_HEADER = (
    "// THIS FILE WAS GENERATED BY LANGDEFS\n"
    "// DO NOT EDIT MANUALLY OR ELSE IT WILL BE OVERWRITTEN\n"
    "\n"
)
ESLINT_DISABLE = "/* eslint-disable */\n"

ROOT_INTERFACE = "Lang"
SET_INTERFACE = "Langs"
EXPORT_CONST = "langs"

INDENT = "    "

# Плейсхолдеры вида {name}
PLACEHOLDER_PATTERN = r'\{(\w+)\}'
