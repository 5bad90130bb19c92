"""Отрисовка идентикона, кодирование в PNG и запись на диск.

Принципы:
- SRP: класс отвечает только за растр и файловый вывод, без расчёта сетки.
- LSP/ISP: возвращает `PIL.Image.Image`, `bytes` и `Path` с предсказуемым содержимым.
"""
from __future__ import annotations

import io
import logging
import os
from pathlib import Path

from PIL import Image, ImageDraw

from identicon.models.image_model import MappedImage

logger = logging.getLogger(__name__)

CANVAS_SIZE = 250
BACKGROUND = (255, 255, 255)


class ImageService:
    def draw_image(self, image: MappedImage) -> Image.Image:
        """Рисует залитые прямоугольники цветом `image.color` на холсте 250×250.

        Фон белый и ничем не перекрашивается; оба угла прямоугольника
        включаются в заливку.
        """
        canvas = Image.new("RGB", (CANVAS_SIZE, CANVAS_SIZE), color=BACKGROUND)
        draw = ImageDraw.Draw(canvas)
        for top_left, bottom_right in image.pixel_map:
            draw.rectangle([top_left, bottom_right], fill=image.color)
        return canvas

    def encode_png(self, image: Image.Image) -> bytes:
        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
        return buffer.getvalue()

    def save_image(self, png: bytes, seed: str, directory: str | Path = ".") -> Path:
        """Записывает PNG в `<directory>/<seed>.png`.

        Строка используется как имя файла без изменений, поэтому разделители
        пути в ней запрещены: файл всегда оказывается прямо в `directory`.

        Raises:
            ValueError: если в строке есть разделитель пути.
            OSError: если файл не удалось записать. Повторов нет.
        """
        separators = [sep for sep in (os.sep, os.altsep, "/") if sep]
        if any(sep in seed for sep in separators):
            raise ValueError(f"Строка содержит разделитель пути: {seed!r}")

        path = Path(directory) / f"{seed}.png"
        path.write_bytes(png)
        logger.debug("Wrote %d bytes to %s", len(png), path)
        return path
