"""Контроллер генерации: оркестрация сервисов конвейера.

SOLID:
- SRP: класс только связывает стадии между собой (без логики самих стадий).
- DIP: зависит от сервисов как от ролей; конкретные реализации инкапсулированы.
Clean Code:
- Каждая стадия принимает запись предыдущей и возвращает новую.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from identicon.models.image_model import MappedImage, RenderedIdenticon
from identicon.services.hash_service import HashService
from identicon.services.image_service import ImageService
from identicon.services.process_service import ProcessService

logger = logging.getLogger(__name__)


@dataclass
class IdenticonController:
    """Прогоняет строку через все стадии и отдаёт PNG.

    Ответственности:
    - Хэш → цвет → сетка → фильтр → карта пикселей через сервисы.
    - Отрисовка и кодирование через `ImageService`.
    - Запись файла `<seed>.png` по запросу.
    """
    _hash_service: HashService = HashService()
    _process_service: ProcessService = ProcessService()
    _image_service: ImageService = ImageService()

    def build(self, seed: str) -> MappedImage:
        """Стадии 1-5: от строки до карты пикселей, без растра."""
        hashed = self._hash_service.hash_input(seed)
        colored = self._process_service.pick_color(hashed)
        grid = self._process_service.build_grid(colored)
        filtered = self._process_service.filter_odd_cells(grid)
        return self._process_service.build_pixel_map(filtered)

    def generate(self, seed: str) -> RenderedIdenticon:
        mapped = self.build(seed)
        image = self._image_service.draw_image(mapped)
        png = self._image_service.encode_png(image)
        return RenderedIdenticon(seed=seed, image=image, png=png)

    def generate_to_file(self, seed: str, directory: str | Path = ".") -> Path:
        """Генерирует идентикон и сохраняет его как `<directory>/<seed>.png`.

        Ошибка записи (`OSError`) пробрасывается вызывающему как есть.
        """
        rendered = self.generate(seed)
        path = self._image_service.save_image(rendered.png, seed, directory)
        logger.info("Identicon for %r saved to %s", seed, path)
        return path
