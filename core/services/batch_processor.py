"""Runs the naming pipeline over a whole album.

A pass is synchronous and self-contained: every non-customized photo is
recomputed from its original description, so running the same pass twice
yields the same descriptions and statuses.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from loguru import logger

from core.models import ConfigurationSnapshot, PhotoRecord, PhotoStatus
from core.services.description_normalizer import (
    DescriptionNormalizer,
    index_digit_width,
    treat_affixes,
)
from core.services.index_allocator import IndexAllocator
from core.services.interfaces import BatchResult, INameOptionSink


def worst_status(photos: Iterable[PhotoRecord]) -> PhotoStatus:
    """Most severe status among `photos` (READY for an empty batch)."""
    result = PhotoStatus.READY
    for photo in photos:
        result = PhotoStatus.worst(result, photo.status)
    return result


def is_execution_blocked(photos: Iterable[PhotoRecord]) -> bool:
    """True if any photo is at least as bad as ERROR_MINOR."""
    return any(p.status.is_at_least_as_bad_as(PhotoStatus.ERROR_MINOR) for p in photos)


def clear_all_statuses(photos: Iterable[PhotoRecord]) -> None:
    """Reset every photo to READY, e.g. right before a download pass."""
    for photo in photos:
        photo.status = PhotoStatus.READY


class BatchProcessor:
    """Normalizes and indexes a batch of photos.

    Args:
        sink: Optional receiver for the treated prefix/suffix/fallback, so the
            configuration UI can display them. Echoes are sent with
            `is_origin_user=False`.
    """

    def __init__(self, sink: INameOptionSink | None = None) -> None:
        self._sink = sink

    def process(self, photos: Sequence[PhotoRecord], config: ConfigurationSnapshot) -> BatchResult:
        """Recompute descriptions and statuses for `photos` under `config`."""
        affixes = treat_affixes(config)
        if self._sink is not None:
            self._sink.update_prefix(affixes.prefix, False)
            self._sink.update_suffix(affixes.suffix, False)
            self._sink.update_undescribed(affixes.undescribed, False)

        normalizer = DescriptionNormalizer(config, affixes, len(photos))
        indexer = IndexAllocator(index_digit_width(len(photos)))
        customized = 0
        for photo in photos:
            if photo.customized:
                customized += 1
                continue
            normalizer.normalize(photo)
            indexer.register_photo(photo)
        indexer.append_all_indexes(config.index_unique)

        result = BatchResult(
            worst_status=worst_status(photos),
            prefix=affixes.prefix,
            suffix=affixes.suffix,
            undescribed=affixes.undescribed,
        )
        logger.info(
            "Processed {} photos ({} customized, {} groups): worst status {}",
            len(photos),
            customized,
            indexer.group_count,
            result.worst_status.name,
        )
        return result
