"""Album window: photo table plus the text-based naming options."""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import QUrl
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import (
    QFormLayout,
    QLineEdit,
    QMainWindow,
    QTableView,
    QVBoxLayout,
    QWidget,
)
from loguru import logger

from app.viewmodels.main_vm import AlbumVM
from app.viewmodels.name_option_debouncer import NameOptionDebouncer
from app.views.constants import COL_CUSTOM, COL_LINK, URL_ROLE
from app.views.photo_table_model import PhotoTableModel


class MainWindow(QMainWindow):
    """Main application window.

    Text fields push edits through a `NameOptionDebouncer`; values normalized
    by a batch pass are echoed back into the fields with signals blocked so
    they do not count as new user edits.
    """

    def __init__(self, vm: AlbumVM, settings: Any | None = None) -> None:
        super().__init__()
        self._vm = vm
        self._settings = settings
        self._model = PhotoTableModel(vm, self)
        self._debouncer = NameOptionDebouncer(vm.commit_name_options, parent=self)
        self._fields: dict[str, QLineEdit] = {}

        self._setup_ui()
        vm.add_echo_listener(self._on_option_echoed)
        vm.add_changed_listener(self._update_status_bar)
        self.setWindowTitle("Photo Renamer")
        self.resize(900, 600)

    def _setup_ui(self) -> None:
        central = QWidget(self)
        layout = QVBoxLayout(central)

        form = QFormLayout()
        config = self._vm.config
        initial = {
            "prefix": config.prefix,
            "suffix": config.suffix,
            "undescribed": config.undescribed,
            "max_length": str(config.user_max_length),
        }
        labels = {
            "prefix": "Prefix",
            "suffix": "Suffix",
            "undescribed": "Undescribed",
            "max_length": "Maximum length",
        }
        for field_name, label in labels.items():
            edit = QLineEdit(initial[field_name])
            edit.textEdited.connect(
                lambda text, name=field_name: self._debouncer.push(name, text)
            )
            form.addRow(label, edit)
            self._fields[field_name] = edit
        layout.addLayout(form)

        self.table = QTableView()
        self.table.setModel(self._model)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.clicked.connect(self._on_clicked)
        layout.addWidget(self.table)

        self.setCentralWidget(central)

    def _on_option_echoed(self, field_name: str, text: str) -> None:
        edit = self._fields.get(field_name)
        if edit is None or edit.text() == text:
            return
        edit.blockSignals(True)
        edit.setText(text)
        edit.blockSignals(False)

    def _on_clicked(self, index) -> None:
        if index.column() == COL_CUSTOM:
            self._model.revert_row(index.row())
        elif index.column() == COL_LINK:
            url = self._model.data(index, URL_ROLE)
            if url:
                QDesktopServices.openUrl(QUrl(url))

    def _update_status_bar(self) -> None:
        status = self._vm.worst_status
        if self._vm.is_execution_blocked:
            message = f"Execution blocked: {status.name}"
        else:
            message = f"{len(self._vm.photos)} photos ready"
        logger.debug("Status bar: {}", message)
        self.statusBar().showMessage(message)
