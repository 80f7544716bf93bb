"""Table model presenting an album's photos.

The model is a view over `AlbumVM.photos`; it never runs naming logic itself.
Only the description column is editable, and edits are routed to the
view-model as manual overrides.
"""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import QAbstractTableModel, QModelIndex, Qt

from app.viewmodels.main_vm import AlbumVM
from app.viewmodels.photo_vm import PhotoVM
from app.views.constants import (
    COL_CUSTOM,
    COL_DESCRIPTION,
    COL_LINK,
    COL_STATUS,
    HEADERS,
    NUM_COLUMNS,
    STATUS_ROLE,
    URL_ROLE,
)


class PhotoTableModel(QAbstractTableModel):
    """Qt adapter over the photos of an `AlbumVM`."""

    def __init__(self, vm: AlbumVM, parent=None) -> None:
        super().__init__(parent)
        self._vm = vm
        vm.add_changed_listener(self.refresh)

    def refresh(self) -> None:
        """Tell attached views that every row may have changed."""
        self.beginResetModel()
        self.endResetModel()

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:  # noqa: N802
        if parent.isValid():
            return 0
        return len(self._vm.photos)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:  # noqa: N802
        if parent.isValid():
            return 0
        return NUM_COLUMNS

    def headerData(  # noqa: N802
        self, section: int, orientation: Qt.Orientation, role: int = Qt.DisplayRole
    ) -> Any:
        if role == Qt.DisplayRole and orientation == Qt.Horizontal and 0 <= section < NUM_COLUMNS:
            return HEADERS[section]
        return None

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole) -> Any:
        if not index.isValid() or not 0 <= index.row() < len(self._vm.photos):
            return None
        photo = PhotoVM(self._vm.photos[index.row()])
        col = index.column()
        if role == STATUS_ROLE and col == COL_STATUS:
            return photo.record.status
        if role == URL_ROLE and col == COL_LINK:
            return photo.link
        if role in (Qt.DisplayRole, Qt.EditRole):
            if col == COL_STATUS:
                return photo.status_text
            if col == COL_LINK:
                return "View"
            if col == COL_CUSTOM:
                return "Undo" if photo.is_customized else ""
            if col == COL_DESCRIPTION:
                return photo.description
        if role == Qt.ToolTipRole and col == COL_LINK:
            return photo.link
        return None

    def flags(self, index: QModelIndex) -> Qt.ItemFlags:
        if not index.isValid():
            return Qt.NoItemFlags
        base = Qt.ItemIsEnabled | Qt.ItemIsSelectable
        if index.column() == COL_DESCRIPTION:
            return base | Qt.ItemIsEditable
        return base

    def setData(self, index: QModelIndex, value: Any, role: int = Qt.EditRole) -> bool:  # noqa: N802
        if not index.isValid() or role != Qt.EditRole or index.column() != COL_DESCRIPTION:
            return False
        self._vm.edit_description(index.row(), str(value))
        return True

    def revert_row(self, row: int) -> None:
        """Undo the manual override on `row`, if any."""
        if 0 <= row < len(self._vm.photos) and self._vm.photos[row].customized:
            self._vm.revert_description(row)
