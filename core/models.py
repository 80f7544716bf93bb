"""Core domain models for photo records, statuses and naming configuration."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
import re

# Characters rejected by at least one major platform in a file name.
INVALID_CHARS: str = "#%&{}\\<>?/$!'\":@+`|="
INVALID_CHARS_PATTERN = re.compile("[" + re.escape(INVALID_CHARS) + "]")

# Lowest maximum path length across Windows (260), Linux (255) and macOS (1024), minus one.
OS_MAX_PATH: int = 254

# Room for an index " - 001" plus at least one character of description.
MINIMUM_PATH: int = 8

# Preferred indices above this are treated as no preference at all.
MAX_PREFERRED_INDEX: int = 299

_PAREN_INDEX = re.compile(r"\(([0-9]+)\)$")
_NAKED_INDEX = re.compile(r"([0-9]+)$")


class PhotoStatus(Enum):
    """Readiness/error state of a photo, declared from best to worst."""

    SAVED = 0
    READY = 1
    WARNING_LENGTH = 2
    ERROR_MINOR = 3
    REFUSE_LENGTH = 4
    REFUSE_SYMBOL = 5
    REFUSE_DUPLICATE = 6
    ERROR_SEVERE = 7

    def is_worse_than(self, other: PhotoStatus) -> bool:
        """True if this status is strictly more severe than `other`."""
        return self.value > other.value

    def is_at_least_as_bad_as(self, other: PhotoStatus) -> bool:
        """True if this status is as severe as `other` or more."""
        return self.value >= other.value

    @staticmethod
    def worst(a: PhotoStatus, b: PhotoStatus) -> PhotoStatus:
        """Return the more severe of two statuses; `a` on ties."""
        return b if b.is_worse_than(a) else a


class OverlengthBehavior(Enum):
    """How to respond to file names longer than the configured limit."""

    REFUSE = "REFUSE"
    WARN = "WARN"
    TRUNCATE = "TRUNCATE"
    DROP_VOWELS = "DROP_VOWELS"
    DO_NOTHING = "DO_NOTHING"


class ReplacementCharacter(Enum):
    """Character substituted for invalid file name characters."""

    HYPHEN = "HYPHEN"
    COMMA = "COMMA"
    NOTHING = "NOTHING"

    @property
    def char(self) -> str:
        """The replacement text; empty for NOTHING."""
        return {"HYPHEN": "-", "COMMA": ","}.get(self.value, "")


def parse_preferred_index(description: str) -> int:
    """Derive the preferred index from a trailing "(N)" or bare "N".

    Returns -1 when there is no trailing number or when it exceeds
    `MAX_PREFERRED_INDEX`.
    """
    match = _PAREN_INDEX.search(description) or _NAKED_INDEX.search(description)
    if match is None:
        return -1
    digits = match.group(1).lstrip("0") or "0"
    if len(digits) > len(str(MAX_PREFERRED_INDEX)):
        return -1
    value = int(digits)
    return value if value <= MAX_PREFERRED_INDEX else -1


@dataclass
class PhotoRecord:
    """A single photo extracted from an album archive.

    `original_description` and `preferred_index` never change after
    construction; `description` and `status` are rewritten by every
    normalization pass unless the photo is `customized`.
    """

    source_location: str
    original_description: str
    upload_date: str
    status: PhotoStatus = PhotoStatus.READY
    customized: bool = False
    description: str = ""
    preferred_index: int = field(init=False)
    assigned_index: int = field(default=-1, init=False)

    def __post_init__(self) -> None:
        self.preferred_index = parse_preferred_index(self.original_description)
        if not self.description:
            self.description = self.original_description

    @classmethod
    def from_raw(cls, raw: tuple[str, str, str]) -> PhotoRecord:
        """Build a record from a `(source_location, description, upload_date)` tuple."""
        source_location, description, upload_date = raw
        return cls(
            source_location=source_location,
            original_description=description,
            upload_date=upload_date,
        )


@dataclass(frozen=True)
class ConfigurationSnapshot:
    """Read-only naming options for a single processing pass."""

    prefix: str = ""
    suffix: str = ""
    undescribed: str = ""
    replacement_character: ReplacementCharacter = ReplacementCharacter.HYPHEN
    remove_trailing_numbers: bool = True
    correct_caps: bool = True
    index_unique: bool = True
    over_length: OverlengthBehavior = OverlengthBehavior.WARN
    user_max_length: int = 64
    os_max_length: int = OS_MAX_PATH

    @property
    def limit(self) -> int:
        """Effective length limit for a full file name."""
        return min(self.user_max_length, self.os_max_length)

    def with_affixes(self, prefix: str, suffix: str, undescribed: str) -> ConfigurationSnapshot:
        """Return a copy carrying the given prefix, suffix and fallback text."""
        return replace(self, prefix=prefix, suffix=suffix, undescribed=undescribed)
