"""Per-photo transformation of raw descriptions into file name candidates.

The normalizer works on one `PhotoRecord` at a time and never raises for a
bad description: every failure mode is reported through `PhotoRecord.status`.
Index suffixes are not appended here; see `core.services.index_allocator`.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from core.models import (
    MINIMUM_PATH,
    OS_MAX_PATH,
    ConfigurationSnapshot,
    OverlengthBehavior,
    PhotoRecord,
    PhotoStatus,
    ReplacementCharacter,
)
from core.services.filename_sanitizer import (
    collapse_whitespace,
    contains_vowel,
    drop_vowels,
    replace_invalid_characters,
    truncate_by,
)

_TRAILING_NAKED_NUMBER = re.compile(r"[0-9]+$")
_TRAILING_PAREN_NUMBER = re.compile(r" *\([0-9]+\)$")
_WORD_START = re.compile(r"(?<= )[a-z]")


def index_suffix_width(batch_size: int) -> int:
    """Characters taken by the index suffix: " - NN" or " - NNN"."""
    return 6 if batch_size > 99 else 5


def index_digit_width(batch_size: int) -> int:
    """Zero-padding width of the index number itself."""
    return 3 if batch_size >= 100 else 2


@dataclass(frozen=True)
class TreatedAffixes:
    """Prefix, suffix and fallback text after invalid-character treatment."""

    prefix: str
    suffix: str
    undescribed: str


def treat_affixes(config: ConfigurationSnapshot) -> TreatedAffixes:
    """Sanitize the configured prefix, suffix and fallback once per batch.

    Outer spaces are preserved: a trailing space on the prefix or a leading
    space on the suffix is usually intentional.
    """
    replacement = config.replacement_character.char

    def _treat(text: str) -> str:
        treated = replace_invalid_characters(text, replacement, strip=False)
        if config.replacement_character is ReplacementCharacter.NOTHING:
            treated = collapse_whitespace(treated)
        return treated

    return TreatedAffixes(
        prefix=_treat(config.prefix),
        suffix=_treat(config.suffix),
        undescribed=_treat(config.undescribed),
    )


def strip_trailing_numbers(text: str) -> str:
    # Bare digits first, so "Bathroom 4 (51)" keeps the "4".
    text = _TRAILING_NAKED_NUMBER.sub("", text)
    return _TRAILING_PAREN_NUMBER.sub("", text)


def correct_capitalization(text: str) -> str:
    """Lower-case `text`, then capitalize its first character and every word start."""
    if not text:
        return text
    text = text.lower()
    text = text[0].upper() + text[1:]
    return _WORD_START.sub(lambda m: m.group(0).upper(), text)


class DescriptionNormalizer:
    """Applies the configured naming rules to individual photos.

    Args:
        config: Options for this pass.
        affixes: Pre-treated prefix/suffix/fallback, shared by every photo.
        batch_size: Number of photos in the whole batch; decides index width.
    """

    def __init__(
        self, config: ConfigurationSnapshot, affixes: TreatedAffixes, batch_size: int
    ) -> None:
        self._config = config
        self._affixes = affixes
        self._index_width = index_suffix_width(batch_size)

    def clean_text(self, original: str) -> str:
        """Run trailing-number, capitalization and character rules on `original`."""
        config = self._config
        text = original
        if config.remove_trailing_numbers:
            text = strip_trailing_numbers(text)
        if config.correct_caps:
            text = correct_capitalization(text)
        text = replace_invalid_characters(text, config.replacement_character.char)
        if config.replacement_character is ReplacementCharacter.NOTHING:
            text = collapse_whitespace(text)
        if not text:
            text = self._affixes.undescribed
        return text

    def normalize(self, photo: PhotoRecord) -> None:
        """Rewrite `photo.description` and `photo.status`; customized photos are left alone."""
        if photo.customized:
            return

        prefix = self._affixes.prefix
        suffix = self._affixes.suffix
        description = self.clean_text(photo.original_description)
        limit = self._config.limit
        policy = self._config.over_length

        total = self._total_length(prefix, description, suffix)
        while total > limit:
            overflow = total - limit
            if policy is OverlengthBehavior.DROP_VOWELS and contains_vowel(description):
                description = drop_vowels(description)
            elif policy is OverlengthBehavior.DROP_VOWELS and contains_vowel(suffix):
                suffix = drop_vowels(suffix)
            elif policy is OverlengthBehavior.DROP_VOWELS and contains_vowel(prefix):
                prefix = drop_vowels(prefix)
            elif policy in (OverlengthBehavior.DROP_VOWELS, OverlengthBehavior.TRUNCATE):
                if description:
                    description = truncate_by(description, overflow)
                elif suffix:
                    suffix = truncate_by(suffix, overflow)
                elif prefix:
                    prefix = truncate_by(prefix, overflow)
                else:
                    break
            else:
                # REFUSE, WARN and DO_NOTHING leave the text for the user to fix.
                break
            total = self._total_length(prefix, description, suffix)

        photo.status = self._length_status(total)
        photo.description = prefix + description + suffix
        photo.assigned_index = -1

    def _total_length(self, prefix: str, description: str, suffix: str) -> int:
        return len(prefix) + len(description) + len(suffix) + self._index_width

    def _length_status(self, total: int) -> PhotoStatus:
        limit = self._config.limit
        policy = self._config.over_length
        if total > OS_MAX_PATH:
            return PhotoStatus.REFUSE_LENGTH
        if total > limit and policy is OverlengthBehavior.REFUSE:
            return PhotoStatus.REFUSE_LENGTH
        if total > limit and policy is not OverlengthBehavior.DO_NOTHING:
            return PhotoStatus.WARNING_LENGTH
        if total < MINIMUM_PATH:
            return PhotoStatus.REFUSE_LENGTH
        return PhotoStatus.READY
