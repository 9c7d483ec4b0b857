"""
Кэш загруженных языков.

Глобального кэша нет: кэш создаёт и хранит вызывающий код.

Использование:
    from langdefs import LangCache

    cache = LangCache("langs/")
    langs = cache.get()      # читает диск
    langs = cache.get()      # из памяти
    cache.reload()           # перечитать
"""

from pathlib import Path
from typing import Optional, Union

from config import get_logger
from .loader import LanguageSet, load_langs

logger = get_logger(__name__)


class LangCache:
    """Загружает папку языков один раз и отдаёт сохранённый результат."""

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)
        self._langs: Optional[LanguageSet] = None

    @property
    def loaded(self) -> bool:
        return self._langs is not None

    def get(self) -> LanguageSet:
        """Возвращает языки, загружая их при первом обращении."""
        if self._langs is None:
            self._langs = load_langs(self.directory)
            logger.debug(f"Cached {len(self._langs)} languages from {self.directory}")
        return self._langs

    def reload(self) -> LanguageSet:
        """Перечитывает папку. При ошибке прежнее содержимое кэша не меняется."""
        self._langs = load_langs(self.directory)
        return self._langs

    def clear(self) -> None:
        self._langs = None
