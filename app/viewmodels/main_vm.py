"""ViewModel for an album: naming options, batch passes and manual edits."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import replace
from pathlib import Path

from loguru import logger

from core.models import (
    MINIMUM_PATH,
    ConfigurationSnapshot,
    OverlengthBehavior,
    PhotoRecord,
    PhotoStatus,
    ReplacementCharacter,
)
from core.services.batch_processor import BatchProcessor, is_execution_blocked, worst_status
from core.services.custom_edit_service import CustomEditService
from core.services.interfaces import BatchResult
from infrastructure.settings import os_max_file_length

NAME_OPTION_FIELDS = ("prefix", "suffix", "undescribed", "max_length")


class AlbumVM:
    """Main album view-model.

    Owns the photo list and the mutable option state; every batch pass runs
    against a fresh `ConfigurationSnapshot` taken from that state.
    """

    def __init__(
        self,
        repo=None,
        config: ConfigurationSnapshot | None = None,
    ) -> None:
        """Create an AlbumVM.

        Args:
            repo: Repository with `load(path)` and `save(path, photos)` methods.
            config: Initial naming options (defaults to `ConfigurationSnapshot()`).
        """
        self._repo = repo
        self._config = config or ConfigurationSnapshot()
        self._processor = BatchProcessor(sink=self)
        self._editor = CustomEditService(self._processor)
        self._changed_listeners: list[Callable[[], None]] = []
        self._echo_listeners: list[Callable[[str, str], None]] = []
        self.photos: list[PhotoRecord] = []
        self.last_result: BatchResult | None = None

    # Listeners

    def add_changed_listener(self, callback: Callable[[], None]) -> None:
        """Call `callback` whenever photo descriptions or statuses change."""
        self._changed_listeners.append(callback)

    def add_echo_listener(self, callback: Callable[[str, str], None]) -> None:
        """Call `callback(field, text)` when a pass normalizes a text option."""
        self._echo_listeners.append(callback)

    def _notify_changed(self) -> None:
        for callback in self._changed_listeners:
            callback()

    # Loading

    def load_csv(self, path: str) -> None:
        """Load album CSV `path` and run a first pass."""
        self.load_records(self._repo.load(path))

    def load_records(self, photos: Iterable[PhotoRecord]) -> None:
        """Replace the album contents and run a first pass."""
        self.photos = list(photos)
        logger.info("Loaded album with {} photos", len(self.photos))
        self.reprocess()

    def export_plan(self, path: str) -> None:
        """Save the current naming plan to `path`."""
        self._repo.save(path, self.photos)

    # Processing

    @property
    def config(self) -> ConfigurationSnapshot:
        """Snapshot of the current naming options."""
        return self._config

    def reprocess(self) -> BatchResult:
        """Run a full batch pass over the album."""
        self.last_result = self._processor.process(self.photos, self._config)
        self._notify_changed()
        return self.last_result

    @property
    def worst_status(self) -> PhotoStatus:
        """Most severe status currently shown."""
        return worst_status(self.photos)

    @property
    def is_execution_blocked(self) -> bool:
        """True if any photo status forbids downloading the album."""
        return is_execution_blocked(self.photos)

    # Text options (also the pipeline's echo sink)

    def _update_text(self, field_name: str, text: str, is_origin_user: bool) -> None:
        self._config = replace(self._config, **{field_name: text})
        if is_origin_user:
            logger.info("Option {} set to {!r}", field_name, text)
            self.reprocess()
        else:
            for callback in self._echo_listeners:
                callback(field_name, text)

    def update_prefix(self, text: str, is_origin_user: bool) -> None:
        self._update_text("prefix", text, is_origin_user)

    def update_suffix(self, text: str, is_origin_user: bool) -> None:
        self._update_text("suffix", text, is_origin_user)

    def update_undescribed(self, text: str, is_origin_user: bool) -> None:
        self._update_text("undescribed", text, is_origin_user)

    def update_max_length(self, max_length: int) -> None:
        """Set the user length limit; values below the hard floor are ignored."""
        if max_length < MINIMUM_PATH:
            logger.warning("Ignoring maximum length {} below {}", max_length, MINIMUM_PATH)
            return
        self._config = replace(self._config, user_max_length=max_length)
        self.reprocess()

    def commit_name_options(self, changes: dict[str, str]) -> None:
        """Apply several typed text options at once, then run a single pass."""
        config = self._config
        for field_name, text in changes.items():
            if field_name == "max_length":
                try:
                    value = int(text)
                except ValueError:
                    continue
                if value >= MINIMUM_PATH:
                    config = replace(config, user_max_length=value)
            elif field_name in NAME_OPTION_FIELDS:
                config = replace(config, **{field_name: text})
            else:
                raise KeyError(f"Unknown name option: {field_name}")
        self._config = config
        logger.info("Committed name options {}", sorted(changes))
        self.reprocess()

    # Other options

    def set_replacement_character(self, value: ReplacementCharacter) -> None:
        self._config = replace(self._config, replacement_character=value)
        self.reprocess()

    def set_over_length(self, value: OverlengthBehavior) -> None:
        self._config = replace(self._config, over_length=value)
        self.reprocess()

    def set_remove_trailing_numbers(self, value: bool) -> None:
        self._config = replace(self._config, remove_trailing_numbers=value)
        self.reprocess()

    def set_correct_caps(self, value: bool) -> None:
        self._config = replace(self._config, correct_caps=value)
        self.reprocess()

    def set_index_unique(self, value: bool) -> None:
        self._config = replace(self._config, index_unique=value)
        self.reprocess()

    def set_output_directory(self, output_dir: str | Path) -> None:
        """Recompute the OS-derived length budget for `output_dir`."""
        self._config = replace(self._config, os_max_length=os_max_file_length(output_dir))
        self.reprocess()

    # Manual edits

    def edit_description(self, row: int, text: str) -> PhotoStatus:
        """Override the description of photo `row` with user text."""
        status = self._editor.apply(self.photos, row, text, self._config)
        self._notify_changed()
        return status

    def revert_description(self, row: int) -> BatchResult:
        """Undo a manual override and reprocess the album."""
        self.last_result = self._editor.revert(self.photos, row, self._config)
        self._notify_changed()
        return self.last_result
