"""Sequential index assignment for photos that share a description.

Photos are registered first and indexed afterwards; registration and
allocation must not be interleaved because a group's size and its preferred
indices are only known once every photo has been seen.
"""

from __future__ import annotations

from loguru import logger

from core.models import PhotoRecord


def format_index(index: int, width: int) -> str:
    """Render `index` as the suffix appended to a description, e.g. " - 07"."""
    return f" - {index:0{width}d}"


class _DescriptionGroup:
    """Photos sharing one description, split by whether their preference is still free."""

    def __init__(self) -> None:
        self.with_preference: dict[int, PhotoRecord] = {}
        self.no_preference: list[PhotoRecord] = []

    def __len__(self) -> int:
        return len(self.with_preference) + len(self.no_preference)

    def register(self, photo: PhotoRecord) -> None:
        # First registrant keeps a contested preference; the rest are demoted.
        index = photo.preferred_index
        if index < 0 or index in self.with_preference:
            self.no_preference.append(photo)
        else:
            self.with_preference[index] = photo

    def assign(self) -> list[tuple[PhotoRecord, int]]:
        """Return every member paired with its 1-based index."""
        total = len(self)
        assigned: list[tuple[PhotoRecord, int]] = []
        consumed: set[int] = set()
        current = 1
        next_free = 0

        # Phase 1: honor preferences, filling the gaps with non-preferential photos.
        while current <= total:
            preferred = self.with_preference.get(current)
            if preferred is not None:
                assigned.append((preferred, current))
                consumed.add(current)
            elif next_free < len(self.no_preference):
                assigned.append((self.no_preference[next_free], current))
                next_free += 1
            else:
                break
            current += 1

        # Phase 2: remaining preferential photos take the next indices in preference order.
        for key in sorted(k for k in self.with_preference if k not in consumed):
            assigned.append((self.with_preference[key], current))
            current += 1

        return assigned


class IndexAllocator:
    """Collects photos by description and appends unique sequential indices.

    Args:
        width: Digits used to zero-pad indices (2 or 3).
    """

    def __init__(self, width: int) -> None:
        self._width = width
        self._groups: dict[str, _DescriptionGroup] = {}

    def register_photo(self, photo: PhotoRecord) -> None:
        """Add `photo` to the group matching its description, case-insensitively."""
        key = photo.description.casefold()
        group = self._groups.get(key)
        if group is None:
            group = _DescriptionGroup()
            self._groups[key] = group
        group.register(photo)

    def append_all_indexes(self, index_unique: bool) -> None:
        """Append the determined index to every registered photo's description.

        Args:
            index_unique: Whether a description used by only one photo gets an index too.
        """
        for group in self._groups.values():
            if not index_unique and len(group) == 1:
                continue
            for photo, index in group.assign():
                photo.assigned_index = index
                photo.description += format_index(index, self._width)
        logger.debug(
            "Indexed {} description groups ({} photos)",
            len(self._groups),
            sum(len(g) for g in self._groups.values()),
        )

    @property
    def group_count(self) -> int:
        """Number of distinct descriptions registered."""
        return len(self._groups)
