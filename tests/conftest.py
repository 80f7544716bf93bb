"""Shared fixtures for the naming pipeline tests."""

from __future__ import annotations

import pytest

from core.models import ConfigurationSnapshot, PhotoRecord


def _make_photos(*descriptions: str) -> list[PhotoRecord]:
    return [
        PhotoRecord.from_raw(
            (f"https://photos.example.com/{i}.jpg", d, "3/14/2021 10:02:11 AM")
        )
        for i, d in enumerate(descriptions)
    ]


@pytest.fixture
def make_photos():
    """Factory building one photo record per description, with throwaway URLs."""
    return _make_photos


@pytest.fixture
def config() -> ConfigurationSnapshot:
    """Default options with a generous OS budget."""
    return ConfigurationSnapshot(undescribed="Undescribed", os_max_length=200)


@pytest.fixture
def qapp():
    """A Qt core application for models and timers."""
    qtcore = pytest.importorskip("PySide6.QtCore")
    app = qtcore.QCoreApplication.instance() or qtcore.QCoreApplication([])
    yield app
