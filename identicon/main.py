"""Точка входа: генерирует `<seed>.png` для каждой переданной строки."""
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from identicon.config import settings
from identicon.controllers.app_controller import IdenticonController

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="identicon", description="Generate identicon PNG files")
    parser.add_argument("seeds", nargs="+", metavar="SEED", help="строка, из которой строится идентикон")
    parser.add_argument("-o", "--output-dir", default=settings.identicon_output_dir)
    parser.add_argument(
        "--log-level",
        type=str.lower,
        choices=["debug", "info", "warning", "error"],
        default=settings.identicon_log_level,
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Создаёт файлы и возвращает код выхода (1, если хоть один не записан)."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    controller = IdenticonController()
    status = 0
    for seed in args.seeds:
        try:
            controller.generate_to_file(seed, args.output_dir)
        except (OSError, ValueError) as exc:
            logger.error("Could not write identicon for %r: %s", seed, exc)
            status = 1
    return status


if __name__ == "__main__":
    raise SystemExit(main())
