import logging
import os
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
pytest.importorskip("PySide6")

from PySide6.QtWidgets import QApplication

from bulk_renamer.core import ApplyResult
from bulk_renamer.gui import gui_mainwindow
from bulk_renamer.gui.gui_mainwindow import MainWindow
from bulk_renamer.gui.gui_workers import RenameWorker


@pytest.fixture(scope="module")
def qapp():
    return QApplication.instance() or QApplication([])


@pytest.fixture
def window(qapp, tmp_path: Path):
    w = MainWindow()
    w.find_edit.setText("SM_")
    w.replace_edit.setText("Hero_")
    w.dir_edit.setText(str(tmp_path))
    yield w
    logging.getLogger("bulk_renamer").removeHandler(w.log_handler)
    w.deleteLater()


class TestPreview:
    def test_setting_change_rebuilds_preview(self, window, make_files):
        make_files(["SM_Weapon.fbx", "Hero_Run.fbx"])
        window._rebuild_preview()
        assert window.table.rowCount() == 2
        assert window.execute_btn.isEnabled()

    def test_missing_folder_clears_preview(self, window, tmp_path: Path):
        window.dir_edit.setText(str(tmp_path / "missing"))
        assert window.previews == []
        assert not window.execute_btn.isEnabled()

    def test_preview_only_blocks_apply(self, window, make_files):
        make_files(["SM_Weapon.fbx"])
        window._rebuild_preview()
        window._do_execute()
        assert window.rename_worker is None


class TestWorkerLifetime:
    def test_finished_joins_worker_thread(self, window, make_files, tmp_path: Path):
        make_files(["SM_Weapon.fbx"])
        window._rebuild_preview()
        worker = RenameWorker(list(window.previews), window.build_settings())
        window.rename_worker = worker
        worker.start()

        window._on_rename_finished(ApplyResult())

        assert window.rename_worker is None
        assert worker.isFinished()
        assert (tmp_path / "Hero_Weapon.fbx").exists()

    def test_error_joins_worker_thread(self, window, make_files, monkeypatch):
        monkeypatch.setattr(gui_mainwindow.QMessageBox, "critical", lambda *args, **kwargs: None)
        make_files(["SM_Weapon.fbx"])
        window._rebuild_preview()
        worker = RenameWorker(list(window.previews), window.build_settings())
        window.rename_worker = worker
        worker.start()

        window._on_rename_error("disk full")

        assert window.rename_worker is None
        assert worker.isFinished()
        assert window.execute_btn.isEnabled()
