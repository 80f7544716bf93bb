"""Core service interfaces and shared data structures.

This module defines simple dataclasses and protocols that connect the naming
pipeline to the configuration and UI layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from core.models import PhotoStatus


@dataclass
class BatchResult:
    """Outcome of one normalization and indexing pass.

    Attributes:
        worst_status: Most severe status found across the batch.
        prefix: Prefix after invalid-character treatment.
        suffix: Suffix after invalid-character treatment.
        undescribed: Fallback text after invalid-character treatment.
    """

    worst_status: PhotoStatus
    prefix: str
    suffix: str
    undescribed: str

    @property
    def blocks_execution(self) -> bool:
        """True if the batch must not be downloaded in its current state."""
        return self.worst_status.is_at_least_as_bad_as(PhotoStatus.ERROR_MINOR)


class INameOptionSink(Protocol):
    """Receives treated naming options echoed back from a batch pass.

    `is_origin_user` distinguishes text the user typed (which must trigger a
    new pass) from text the pipeline normalized (which must not).
    """

    def update_prefix(self, text: str, is_origin_user: bool) -> None:
        """Store a new prefix."""
        raise NotImplementedError

    def update_suffix(self, text: str, is_origin_user: bool) -> None:
        """Store a new suffix."""
        raise NotImplementedError

    def update_undescribed(self, text: str, is_origin_user: bool) -> None:
        """Store a new fallback text for photos without a description."""
        raise NotImplementedError
