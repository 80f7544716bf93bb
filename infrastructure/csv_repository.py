"""CSV persistence for album photo records and naming plans.

Albums are read as `(URL, Description, DateUploaded)` rows, the same triple an
archive parser yields. The naming plan written back carries the final
description and status of every photo for the download step.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import csv
from pathlib import Path

from loguru import logger

from core.models import PhotoRecord

ALBUM_HEADERS = ["URL", "Description", "DateUploaded"]

PLAN_HEADERS = ["Description", "Status", "Customized", "URL", "DateUploaded"]


class CsvPhotoRepository:
    """Load album photos and save naming plans in CSV format."""

    def load(self, csv_path: str) -> Iterator[PhotoRecord]:
        """Yield `PhotoRecord` from the album CSV at `csv_path`."""
        path = Path(csv_path)
        with path.open("r", encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)
            missing = [h for h in ALBUM_HEADERS if h not in (reader.fieldnames or [])]
            if missing:
                raise ValueError(f"CSV missing required headers: {missing}")

            for row in reader:
                url = (row.get("URL") or "").strip()
                if not url:
                    logger.error("CSV row without URL skipped | row={} ", row)
                    continue
                yield PhotoRecord.from_raw(
                    (url, row.get("Description") or "", row.get("DateUploaded") or "")
                )

    def save(self, csv_path: str, photos: Iterable[PhotoRecord]) -> None:
        """Write the naming plan for `photos` to `csv_path`."""
        path = Path(csv_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=PLAN_HEADERS)
            writer.writeheader()
            for photo in photos:
                writer.writerow(
                    {
                        "Description": photo.description,
                        "Status": photo.status.name,
                        "Customized": 1 if photo.customized else 0,
                        "URL": photo.source_location,
                        "DateUploaded": photo.upload_date,
                    }
                )
