"""Shared test fixtures."""

from __future__ import annotations

import pytest

from identicon.controllers.app_controller import IdenticonController
from identicon.models.image_model import ColoredImage, HashedImage
from identicon.services.hash_service import HashService
from identicon.services.image_service import ImageService
from identicon.services.process_service import ProcessService
from tests.scenarios import MY_NAME_COLOR, MY_NAME_DIGEST


@pytest.fixture
def hash_service() -> HashService:
    return HashService()


@pytest.fixture
def process_service() -> ProcessService:
    return ProcessService()


@pytest.fixture
def image_service() -> ImageService:
    return ImageService()


@pytest.fixture
def controller() -> IdenticonController:
    return IdenticonController()


@pytest.fixture
def my_name_hashed() -> HashedImage:
    return HashedImage(digest=MY_NAME_DIGEST)


@pytest.fixture
def my_name_colored() -> ColoredImage:
    return ColoredImage(digest=MY_NAME_DIGEST, color=MY_NAME_COLOR)
