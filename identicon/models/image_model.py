"""Модели данных идентикона.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
- Каждая стадия конвейера возвращает свою запись: поля появляются
  только тогда, когда стадия их вычислила.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Tuple

from PIL import Image

RGB = Tuple[int, int, int]
Point = Tuple[int, int]


class Cell(NamedTuple):
    """Клетка сетки: значение байта и её позиция (0..24, построчно)."""
    value: int
    index: int


class Rectangle(NamedTuple):
    top_left: Point
    bottom_right: Point


@dataclass(frozen=True)
class HashedImage:
    """Результат стадии 1: 16 байт дайджеста, старший байт первым."""
    digest: Tuple[int, ...]


@dataclass(frozen=True)
class ColoredImage:
    digest: Tuple[int, ...]
    color: RGB


@dataclass(frozen=True)
class GridImage:
    """Сетка 5×5 в виде плоского списка клеток.

    После построения содержит 25 клеток, после фильтрации не больше 25;
    фильтр возвращает новую запись, а не мутирует эту.
    """
    digest: Tuple[int, ...]
    color: RGB
    grid: Tuple[Cell, ...]


@dataclass(frozen=True)
class MappedImage:
    """Fields:
        pixel_map: Прямоугольники, по одному на каждую клетку `grid`, в том же порядке.
    """
    digest: Tuple[int, ...]
    color: RGB
    grid: Tuple[Cell, ...]
    pixel_map: Tuple[Rectangle, ...]


@dataclass(frozen=True)
class RenderedIdenticon:
    """Отрисованный идентикон.

    Fields:
        seed: Исходная строка.
        image: Растр PIL 250×250, режим "RGB".
        png: Закодированный PNG-поток, готовый к записи.
    """
    seed: str
    image: Image.Image
    png: bytes
