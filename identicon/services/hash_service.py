"""Источник дайджеста: строка → 16 байт.

MD5 здесь только детерминированный источник псевдослучайных байт,
никакой криптографической защиты он не даёт.
"""
from __future__ import annotations

import hashlib
import logging

from identicon.models.image_model import HashedImage

logger = logging.getLogger(__name__)


class HashService:
    def hash_input(self, seed: str) -> HashedImage:
        """Хэширует строку и кладёт байты дайджеста в `HashedImage`.

        Args:
            seed: Любая строка, включая пустую и с байтами не из UTF-8
                (суррогаты из `os.fsdecode` кодируются обратно в исходные байты).

        Returns:
            `HashedImage` с кортежем из 16 байт в исходном порядке.
        """
        digest = tuple(hashlib.md5(seed.encode("utf-8", "surrogateescape")).digest())
        logger.debug("Digest for %r: %s", seed, digest)
        return HashedImage(digest=digest)
