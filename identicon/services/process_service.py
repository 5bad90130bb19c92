from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from identicon.models.image_model import (
    Cell,
    ColoredImage,
    GridImage,
    HashedImage,
    MappedImage,
    Rectangle,
)

logger = logging.getLogger(__name__)

GRID_SIZE = 5     # клеток по каждой стороне
CHUNK_SIZE = 3    # байт дайджеста на строку до отражения
CELL_SIZE = 50    # px


class ProcessService:
    # ---------- 2) Цвет ----------
    def pick_color(self, image: HashedImage) -> ColoredImage:
        """
        Первые три байта дайджеста становятся цветом (R, G, B).
        """
        if len(image.digest) < 3:
            raise ValueError(f"Дайджест слишком короткий для цвета: {len(image.digest)} байт")
        r, g, b = image.digest[:3]
        return ColoredImage(digest=image.digest, color=(r, g, b))

    # ---------- 3) Сетка ----------
    def mirror_row(self, row: Sequence[int]) -> np.ndarray:
        """
        Отражает строку: [a, b, c] -> [a, b, c, b, a].
        Первый и второй элементы копируются в позиции 4 и 3.
        """
        arr = np.asarray(row, dtype=np.int64)
        if arr.size < 2:
            raise ValueError(f"Для отражения нужно минимум 2 элемента, получено {arr.size}")
        return np.concatenate([arr, arr[1::-1]])

    def build_grid(self, image: ColoredImage) -> GridImage:
        """
        Режет дайджест на куски по 3 байта (неполный хвост отбрасывается),
        отражает каждый кусок и нумерует клетки построчно.
        16 байт дают 5 строк и 25 клеток; строк не больше GRID_SIZE.
        """
        digest = np.asarray(image.digest, dtype=np.int64)
        n_rows = min(digest.size // CHUNK_SIZE, GRID_SIZE)
        rows = digest[: n_rows * CHUNK_SIZE].reshape(n_rows, CHUNK_SIZE)

        values = [int(v) for row in rows for v in self.mirror_row(row)]
        grid = tuple(Cell(value, index) for index, value in enumerate(values))
        logger.debug("Grid built: %d rows, %d cells", n_rows, len(grid))
        return GridImage(digest=image.digest, color=image.color, grid=grid)

    # ---------- 4) Фильтр ----------
    def filter_odd_cells(self, image: GridImage) -> GridImage:
        """
        Оставляет только клетки с чётным значением, порядок сохраняется.
        """
        kept = tuple(cell for cell in image.grid if cell.value % 2 == 0)
        logger.debug("Cells kept after parity filter: %d/%d", len(kept), len(image.grid))
        return GridImage(digest=image.digest, color=image.color, grid=kept)

    # ---------- 5) Карта пикселей ----------
    def build_pixel_map(self, image: GridImage) -> MappedImage:
        pixel_map = []
        for cell in image.grid:
            horizontal = (cell.index % GRID_SIZE) * CELL_SIZE
            vertical = (cell.index // GRID_SIZE) * CELL_SIZE
            pixel_map.append(
                Rectangle(
                    top_left=(horizontal, vertical),
                    bottom_right=(horizontal + CELL_SIZE, vertical + CELL_SIZE),
                )
            )
        return MappedImage(
            digest=image.digest,
            color=image.color,
            grid=image.grid,
            pixel_map=tuple(pixel_map),
        )
