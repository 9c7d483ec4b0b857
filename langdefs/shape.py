"""
Вывод структуры (shape) документов языков.

Значение в документе бывает трёх видов, и shape повторяет их:

    "hello world"        -> StringShape
    ["key1", "key2"]     -> StringArrayShape
    {"title": "Menu"}    -> ObjectShape(fields={"title": StringShape})

Структуры всех языков сливаются в одну. Если у ключа в разных языках
разный вид, побеждает последний язык (по сортировке кодов). Это
упрощение, ошибки не будет. Два вложенных объекта сливаются по полям.
"""

import re
from dataclasses import dataclass, field
from typing import Union

from config import PLACEHOLDER_PATTERN
from .loader import LanguageSet, Value


@dataclass(frozen=True)
class StringShape:
    """Строка. doc: наблюдаемое значение, для комментария в .d.ts"""
    placeholders: tuple[str, ...] = ()
    doc: str = ""


@dataclass(frozen=True)
class StringArrayShape:
    """Массив строк."""


@dataclass(frozen=True)
class ObjectShape:
    """Вложенный объект. Поля идут в порядке первого появления."""
    fields: dict[str, "ShapeDescriptor"] = field(default_factory=dict)


ShapeDescriptor = Union[StringShape, StringArrayShape, ObjectShape]


def find_placeholders(text: str) -> tuple[str, ...]:
    """'Привет, {name}! {name}, {day}' -> ('name', 'day')"""
    return tuple(dict.fromkeys(re.findall(PLACEHOLDER_PATTERN, text)))


def infer_shape(value: Value) -> ShapeDescriptor:
    """Shape одного значения (рекурсивно для вложенных объектов)."""
    if isinstance(value, str):
        return StringShape(placeholders=find_placeholders(value), doc=value)
    if isinstance(value, list):
        return StringArrayShape()
    if isinstance(value, dict):
        return ObjectShape({key: infer_shape(item) for key, item in value.items()})
    raise TypeError(f"Unsupported language value: {value!r}")


def merge_shapes(base: ShapeDescriptor, new: ShapeDescriptor) -> ShapeDescriptor:
    """
    Сливает две структуры.

    Объект + объект -> объединение полей (рекурсивно).
    Во всех остальных случаях побеждает new.
    """
    if isinstance(base, ObjectShape) and isinstance(new, ObjectShape):
        fields = dict(base.fields)
        for key, shape in new.fields.items():
            fields[key] = merge_shapes(fields[key], shape) if key in fields else shape
        return ObjectShape(fields)
    return new


def infer_langs_shape(langs: LanguageSet) -> ObjectShape:
    """Общая структура документа по всем языкам."""
    merged = ObjectShape()
    for lang in sorted(langs):
        merged = merge_shapes(merged, infer_shape(langs[lang]))
    return merged
