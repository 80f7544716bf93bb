"""Lightweight view model wrapper around `PhotoRecord`."""

from __future__ import annotations

from dataclasses import dataclass

from core.models import PhotoRecord, PhotoStatus

STATUS_LABELS: dict[PhotoStatus, str] = {
    PhotoStatus.SAVED: "Saved",
    PhotoStatus.READY: "",
    PhotoStatus.WARNING_LENGTH: "Too long",
    PhotoStatus.ERROR_MINOR: "Warning",
    PhotoStatus.REFUSE_LENGTH: "Bad length",
    PhotoStatus.REFUSE_SYMBOL: "Invalid symbol",
    PhotoStatus.REFUSE_DUPLICATE: "Duplicate",
    PhotoStatus.ERROR_SEVERE: "Error",
}


@dataclass
class PhotoVM:
    """Expose convenient properties for bindings/templates."""

    record: PhotoRecord

    @property
    def description(self) -> str:
        """Current working file name stem."""
        return self.record.description

    @property
    def status_text(self) -> str:
        """Short human-readable status; empty when ready."""
        return STATUS_LABELS.get(self.record.status, self.record.status.name)

    @property
    def link(self) -> str:
        """Location the photo is downloaded from."""
        return self.record.source_location

    @property
    def is_customized(self) -> bool:
        """True if the user typed this description."""
        return bool(self.record.customized)

    @property
    def file_name(self) -> str:
        """On-disk name the download step will write."""
        return f"{self.record.description}.jpg"
