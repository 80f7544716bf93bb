from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication
from loguru import logger

from app.viewmodels.main_vm import AlbumVM
from app.views.main_window import MainWindow
from infrastructure.csv_repository import CsvPhotoRepository
from infrastructure.logging import init_logging
from infrastructure.settings import JsonSettings, load_configuration


BASE_DIR = Path(__file__).parent


def main() -> int:
    init_logging()
    settings = JsonSettings(BASE_DIR / "settings.json")
    output_dir = settings.get("output_directory") or None
    config = load_configuration(settings, output_dir)

    app = QApplication(sys.argv)

    repo = CsvPhotoRepository()
    vm = AlbumVM(repo, config=config)

    album_csv = settings.get("album_csv") or str(BASE_DIR / "samples" / "album.csv")
    if Path(album_csv).exists():
        try:
            vm.load_csv(album_csv)
        except ValueError as ex:
            logger.error("Could not load album {}: {}", album_csv, ex)
    else:
        logger.info("No album CSV at {}", album_csv)

    win = MainWindow(vm=vm, settings=settings)
    win.statusBar().showMessage("Ready", 2000)
    win.show()

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
