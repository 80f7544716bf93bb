"""Validation of descriptions typed in by the user for a single photo."""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from core.models import (
    MINIMUM_PATH,
    OS_MAX_PATH,
    ConfigurationSnapshot,
    OverlengthBehavior,
    PhotoRecord,
    PhotoStatus,
)
from core.services.batch_processor import BatchProcessor
from core.services.filename_sanitizer import find_invalid_characters
from core.services.interfaces import BatchResult


def has_duplicate(photos: Sequence[PhotoRecord], row: int) -> bool:
    """True if another photo's committed description equals row's, ignoring case."""
    target = photos[row].description.casefold()
    return any(i != row and p.description.casefold() == target for i, p in enumerate(photos))


class CustomEditService:
    """Applies and reverts manual per-photo description overrides."""

    def __init__(self, processor: BatchProcessor | None = None) -> None:
        self._processor = processor or BatchProcessor()

    def apply(
        self,
        photos: Sequence[PhotoRecord],
        row: int,
        text: str,
        config: ConfigurationSnapshot,
    ) -> PhotoStatus:
        """Store `text` as the description of photo `row` and validate it.

        The photo becomes customized, so later batch passes leave it alone.
        Returns the photo's new status.
        """
        photo = photos[row]
        photo.description = text
        photo.customized = True
        photo.status = self._validate(photos, row, config)
        logger.info("Custom description for row {}: {!r} -> {}", row, text, photo.status.name)
        return photo.status

    def revert(
        self, photos: Sequence[PhotoRecord], row: int, config: ConfigurationSnapshot
    ) -> BatchResult:
        """Drop the override on photo `row` and reprocess the whole batch."""
        photos[row].customized = False
        logger.info("Reverted custom description for row {}", row)
        return self._processor.process(photos, config)

    @staticmethod
    def _validate(
        photos: Sequence[PhotoRecord], row: int, config: ConfigurationSnapshot
    ) -> PhotoStatus:
        text = photos[row].description
        length = len(text)
        if length > OS_MAX_PATH or length < MINIMUM_PATH:
            return PhotoStatus.REFUSE_LENGTH
        if length > config.user_max_length:
            if config.over_length is OverlengthBehavior.REFUSE:
                return PhotoStatus.REFUSE_LENGTH
            if config.over_length is not OverlengthBehavior.DO_NOTHING:
                return PhotoStatus.WARNING_LENGTH
        if has_duplicate(photos, row):
            return PhotoStatus.REFUSE_DUPLICATE
        if find_invalid_characters(text):
            return PhotoStatus.REFUSE_SYMBOL
        return PhotoStatus.READY
