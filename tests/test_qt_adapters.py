"""Tests for the Qt table model and the name option debouncer."""

from __future__ import annotations

import pytest

pytest.importorskip("PySide6")

from PySide6.QtCore import Qt  # noqa: E402

from app.viewmodels.main_vm import AlbumVM  # noqa: E402
from app.viewmodels.name_option_debouncer import NameOptionDebouncer  # noqa: E402
from app.views.constants import (  # noqa: E402
    COL_CUSTOM,
    COL_DESCRIPTION,
    COL_LINK,
    COL_STATUS,
    HEADERS,
    STATUS_ROLE,
    URL_ROLE,
)
from app.views.photo_table_model import PhotoTableModel  # noqa: E402
from core.models import PhotoStatus  # noqa: E402


@pytest.fixture
def vm(config, make_photos) -> AlbumVM:
    album = AlbumVM(config=config)
    album.load_records(make_photos("Porch", "Porch", "ab"))
    return album


class TestPhotoTableModel:
    def test_shape_and_headers(self, qapp, vm):
        model = PhotoTableModel(vm)
        assert model.rowCount() == 3
        assert model.columnCount() == len(HEADERS)
        assert model.headerData(COL_DESCRIPTION, Qt.Horizontal) == "Photo Descriptions"

    def test_cell_data(self, qapp, vm):
        model = PhotoTableModel(vm)
        assert model.data(model.index(0, COL_DESCRIPTION)) == "Porch - 01"
        assert model.data(model.index(0, COL_STATUS)) == ""
        assert model.data(model.index(2, COL_STATUS)) == "Bad length"
        assert model.data(model.index(2, COL_STATUS), STATUS_ROLE) is PhotoStatus.REFUSE_LENGTH
        assert model.data(model.index(1, COL_LINK), URL_ROLE) == vm.photos[1].source_location

    def test_only_description_editable(self, qapp, vm):
        model = PhotoTableModel(vm)
        assert model.flags(model.index(0, COL_DESCRIPTION)) & Qt.ItemIsEditable
        assert not model.flags(model.index(0, COL_STATUS)) & Qt.ItemIsEditable
        assert not model.setData(model.index(0, COL_STATUS), "x", Qt.EditRole)

    def test_edit_and_revert_through_model(self, qapp, vm):
        model = PhotoTableModel(vm)
        assert model.setData(model.index(2, COL_DESCRIPTION), "Back Garden", Qt.EditRole)
        assert vm.photos[2].customized
        assert model.data(model.index(2, COL_CUSTOM)) == "Undo"
        model.revert_row(2)
        assert not vm.photos[2].customized
        assert model.data(model.index(2, COL_DESCRIPTION)) == "Ab - 01"


class TestNameOptionDebouncer:
    def test_edits_accumulate_until_flush(self, qapp):
        commits = []
        debouncer = NameOptionDebouncer(commits.append, quiet_ms=60_000)
        debouncer.push("prefix", "E")
        debouncer.push("prefix", "Elm")
        debouncer.push("suffix", " old")
        assert debouncer.has_pending
        assert commits == []
        debouncer.flush()
        assert commits == [{"prefix": "Elm", "suffix": " old"}]
        assert not debouncer.has_pending

    def test_flush_without_edits(self, qapp):
        commits = []
        NameOptionDebouncer(commits.append).flush()
        assert commits == []

    def test_commits_into_album(self, qapp, vm):
        debouncer = NameOptionDebouncer(vm.commit_name_options, quiet_ms=60_000)
        debouncer.push("prefix", "Elm ")
        debouncer.flush()
        assert vm.photos[0].description == "Elm Porch - 01"
