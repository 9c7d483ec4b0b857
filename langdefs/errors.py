"""
Ошибки загрузки языков и генерации определений.

Ни одна ошибка не глушится: каждая прерывает вызов и уходит
к вызывающему коду.
"""

from pathlib import Path
from typing import Optional


class LangError(Exception):
    """Базовая ошибка langdefs."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class ParseError(LangError):
    """Файл языка не удалось прочитать или разобрать."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot parse language file '{path}': {reason}", path)
        self.reason = reason


class DuplicateLanguageError(ParseError):
    """Два файла в папке дают один и тот же код языка."""

    def __init__(self, path: Path, other: Path):
        super().__init__(path, f"language code '{path.stem}' is already defined by '{other.name}'")
        self.other = other


class WriteError(LangError):
    """Не удалось записать выходной файл."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Failed to write TypeScript definitions to '{path}': {reason}", path)
        self.reason = reason


class NotFoundError(LangError):
    """Папка или файл с языками не существует."""
    pass
