"""
gui_mainwindow.py - GUI Main Window

Single window holding the rename settings and a live preview table. Every
setting change rebuilds the preview from scratch.
"""

import logging
from typing import List, Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QCheckBox, QComboBox,
    QTableWidget, QTableWidgetItem, QProgressBar,
    QFileDialog, QMessageBox, QHeaderView, QGroupBox
)
from PySide6.QtCore import Slot
from PySide6.QtGui import QColor

from ..core import (
    ApplyMode, MatchMode, ReplaceMode, RenamePreview, RenamePreviewStatus,
    RenameSettings, ApplyResult, build_preview, directory_exists, get_files,
)
from .gui_workers import RenameWorker, LogEmitter, SignalLogHandler

MATCH_ITEMS = [
    ("Contains", MatchMode.CONTAINS),
    ("Starts With", MatchMode.STARTS_WITH),
    ("Ends With", MatchMode.ENDS_WITH),
    ("Exact", MatchMode.EXACT),
]

APPLY_ITEMS = [
    ("Anywhere", ApplyMode.ANYWHERE),
    ("Prefix Only", ApplyMode.PREFIX_ONLY),
    ("Suffix Only", ApplyMode.SUFFIX_ONLY),
]

REPLACE_ITEMS = [
    ("Plain Text", ReplaceMode.PLAIN_TEXT),
    ("Regex", ReplaceMode.REGEX),
]

STATUS_STYLE = {
    RenamePreviewStatus.WILL_RENAME: ("Will Rename", QColor(0, 150, 0)),
    RenamePreviewStatus.NO_CHANGE: ("No Change", QColor(150, 150, 150)),
    RenamePreviewStatus.COLLISION: ("Collision", QColor(200, 50, 0)),
}


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Bulk Renamer")
        self.setMinimumSize(900, 650)

        self.previews: List[RenamePreview] = []
        self.rename_worker: Optional[RenameWorker] = None

        self._init_ui()
        self._init_logging()

    def _init_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        # Scope group
        scope_group = QGroupBox("Scope")
        scope_layout = QGridLayout(scope_group)

        scope_layout.addWidget(QLabel("Folder:"), 0, 0)
        self.dir_edit = QLineEdit()
        self.dir_edit.setPlaceholderText("Select root folder...")
        scope_layout.addWidget(self.dir_edit, 0, 1)
        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.clicked.connect(self._browse_directory)
        scope_layout.addWidget(self.browse_btn, 0, 2)

        scope_layout.addWidget(QLabel("Extensions:"), 1, 0)
        self.ext_edit = QLineEdit()
        self.ext_edit.setPlaceholderText("e.g. fbx, png (leave empty for all files)")
        scope_layout.addWidget(self.ext_edit, 1, 1)
        self.subfolders_check = QCheckBox("Include Subfolders")
        self.subfolders_check.setChecked(True)
        scope_layout.addWidget(self.subfolders_check, 1, 2)

        layout.addWidget(scope_group)

        # Filter group
        filter_group = QGroupBox("Filter")
        filter_layout = QHBoxLayout(filter_group)
        self.filter_check = QCheckBox("Use Filter")
        filter_layout.addWidget(self.filter_check)
        self.match_combo = QComboBox()
        for label, _mode in MATCH_ITEMS:
            self.match_combo.addItem(label)
        filter_layout.addWidget(self.match_combo)
        self.filter_edit = QLineEdit()
        self.filter_edit.setPlaceholderText("Filter text (matched against the name without extension)")
        filter_layout.addWidget(self.filter_edit, 1)

        layout.addWidget(filter_group)

        # Replace group
        replace_group = QGroupBox("Replace")
        replace_layout = QGridLayout(replace_group)

        replace_layout.addWidget(QLabel("Find:"), 0, 0)
        self.find_edit = QLineEdit()
        replace_layout.addWidget(self.find_edit, 0, 1)
        self.replace_mode_combo = QComboBox()
        for label, _mode in REPLACE_ITEMS:
            self.replace_mode_combo.addItem(label)
        replace_layout.addWidget(self.replace_mode_combo, 0, 2)

        replace_layout.addWidget(QLabel("Replace with:"), 1, 0)
        self.replace_edit = QLineEdit()
        self.replace_edit.setPlaceholderText("Leave empty to delete")
        replace_layout.addWidget(self.replace_edit, 1, 1)
        self.apply_mode_combo = QComboBox()
        for label, _mode in APPLY_ITEMS:
            self.apply_mode_combo.addItem(label)
        replace_layout.addWidget(self.apply_mode_combo, 1, 2)

        self.case_check = QCheckBox("Case Sensitive")
        self.case_check.setChecked(True)
        replace_layout.addWidget(self.case_check, 2, 0, 1, 3)

        layout.addWidget(replace_group)

        # Decoration group
        decorate_group = QGroupBox("Prefix, Suffix and Whitespace")
        decorate_layout = QHBoxLayout(decorate_group)
        decorate_layout.addWidget(QLabel("Add Prefix:"))
        self.prefix_edit = QLineEdit()
        decorate_layout.addWidget(self.prefix_edit)
        decorate_layout.addWidget(QLabel("Add Suffix:"))
        self.suffix_edit = QLineEdit()
        decorate_layout.addWidget(self.suffix_edit)
        self.whitespace_check = QCheckBox("Replace Whitespace With")
        decorate_layout.addWidget(self.whitespace_check)
        self.whitespace_edit = QLineEdit("_")
        self.whitespace_edit.setMaximumWidth(60)
        decorate_layout.addWidget(self.whitespace_edit)

        layout.addWidget(decorate_group)

        # Safety options
        safety_layout = QHBoxLayout()
        self.preview_only_check = QCheckBox("Preview Only")
        self.preview_only_check.setChecked(True)
        self.skip_no_change_check = QCheckBox("Skip If No Change")
        self.skip_no_change_check.setChecked(True)
        self.skip_collision_check = QCheckBox("Skip If Name Collision")
        self.skip_collision_check.setChecked(True)
        safety_layout.addWidget(self.preview_only_check)
        safety_layout.addWidget(self.skip_no_change_check)
        safety_layout.addWidget(self.skip_collision_check)
        safety_layout.addStretch()
        layout.addLayout(safety_layout)

        # Preview table
        self.table = QTableWidget()
        self.table.setColumnCount(4)
        self.table.setHorizontalHeaderLabels(["Original Name", "New Name", "Status", "Path"])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
        self.table.horizontalHeader().setSectionResizeMode(3, QHeaderView.ResizeMode.Stretch)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        layout.addWidget(self.table, 1)

        # Progress and execution
        bottom_layout = QHBoxLayout()

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        bottom_layout.addWidget(self.progress_bar, 1)

        self.refresh_btn = QPushButton("Refresh")
        self.refresh_btn.clicked.connect(self._rebuild_preview)
        bottom_layout.addWidget(self.refresh_btn)

        self.execute_btn = QPushButton("Apply Rename")
        self.execute_btn.clicked.connect(self._do_execute)
        self.execute_btn.setEnabled(False)
        self.execute_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; font-weight: bold; padding: 8px 16px; }")
        bottom_layout.addWidget(self.execute_btn)

        layout.addLayout(bottom_layout)

        self.statusBar().showMessage("Ready")

        # Any setting change rebuilds the preview
        for edit in (self.dir_edit, self.ext_edit, self.filter_edit, self.find_edit,
                     self.replace_edit, self.prefix_edit, self.suffix_edit, self.whitespace_edit):
            edit.textChanged.connect(self._rebuild_preview)
        for check in (self.subfolders_check, self.filter_check, self.case_check,
                      self.whitespace_check, self.skip_no_change_check, self.skip_collision_check):
            check.toggled.connect(self._rebuild_preview)
        for combo in (self.match_combo, self.replace_mode_combo, self.apply_mode_combo):
            combo.currentIndexChanged.connect(self._rebuild_preview)

    def _init_logging(self):
        """Show warnings from the core (e.g. failed moves) in the status bar"""
        self.log_emitter = LogEmitter(self)
        self.log_emitter.message.connect(self._on_log_message)
        self.log_handler = SignalLogHandler(self.log_emitter)
        self.log_handler.setFormatter(logging.Formatter("%(message)s"))
        logging.getLogger("bulk_renamer").addHandler(self.log_handler)

    def closeEvent(self, event):
        logging.getLogger("bulk_renamer").removeHandler(self.log_handler)
        super().closeEvent(event)

    @Slot(int, str)
    def _on_log_message(self, level: int, msg: str):
        self.statusBar().showMessage(msg, 5000)

    def build_settings(self) -> RenameSettings:
        """Snapshot the current controls into RenameSettings"""
        return RenameSettings(
            folder_path=self.dir_edit.text().strip(),
            include_subfolders=self.subfolders_check.isChecked(),
            extension_filter=self.ext_edit.text(),
            use_filter=self.filter_check.isChecked(),
            filter_match=MATCH_ITEMS[self.match_combo.currentIndex()][1],
            filter_text=self.filter_edit.text(),
            replace_mode=REPLACE_ITEMS[self.replace_mode_combo.currentIndex()][1],
            apply_mode=APPLY_ITEMS[self.apply_mode_combo.currentIndex()][1],
            case_sensitive=self.case_check.isChecked(),
            find_text=self.find_edit.text(),
            replace_text=self.replace_edit.text(),
            add_prefix=self.prefix_edit.text(),
            add_suffix=self.suffix_edit.text(),
            replace_whitespace=self.whitespace_check.isChecked(),
            whitespace_replacement=self.whitespace_edit.text(),
            skip_if_no_change=self.skip_no_change_check.isChecked(),
            skip_if_collision=self.skip_collision_check.isChecked(),
            preview_only=self.preview_only_check.isChecked(),
        )

    def _browse_directory(self):
        """Browse and select directory"""
        directory = QFileDialog.getExistingDirectory(self, "Select the folder to rename files in")
        if directory:
            self.dir_edit.setText(directory)

    @Slot()
    def _rebuild_preview(self):
        """Recompute the whole preview from the current settings"""
        if self.rename_worker is not None and self.rename_worker.isRunning():
            return

        self.previews = []
        self.table.setRowCount(0)
        self.execute_btn.setEnabled(False)

        settings = self.build_settings()
        if not directory_exists(settings.folder_path):
            self.statusBar().showMessage("Folder not found.")
            return

        files = get_files(settings.folder_path, settings.include_subfolders, settings.extension_filter)
        self.previews = build_preview(files, settings)
        self._update_table()

        self.execute_btn.setEnabled(bool(self.previews))
        self.statusBar().showMessage(f"{len(self.previews)} file(s) in preview.")

    def _update_table(self):
        """Update table to display preview results"""
        self.table.setRowCount(len(self.previews))
        for i, preview in enumerate(self.previews):
            label, color = STATUS_STYLE[preview.status]
            status_item = QTableWidgetItem(label)
            status_item.setForeground(color)

            self.table.setItem(i, 0, QTableWidgetItem(preview.old_name))
            self.table.setItem(i, 1, QTableWidgetItem(preview.new_name))
            self.table.setItem(i, 2, status_item)
            self.table.setItem(i, 3, QTableWidgetItem(preview.directory))

    def _do_execute(self):
        """Execute rename"""
        if not self.previews:
            return

        settings = self.build_settings()
        if settings.preview_only:
            self.statusBar().showMessage("Preview Only is ON - disable it to apply renames.")
            return

        reply = QMessageBox.question(
            self, "Confirm",
            f"Are you sure you want to apply renames to {len(self.previews)} file(s)?\n\nThis action cannot be undone!",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        self.execute_btn.setEnabled(False)
        self.execute_btn.setText("Applying...")
        self.refresh_btn.setEnabled(False)
        self.progress_bar.setVisible(True)
        self.progress_bar.setRange(0, len(self.previews))

        self.rename_worker = RenameWorker(list(self.previews), settings)
        self.rename_worker.progress.connect(self._on_rename_progress)
        self.rename_worker.finished.connect(self._on_rename_finished)
        self.rename_worker.error.connect(self._on_rename_error)
        self.rename_worker.start()

    def _release_worker(self):
        """Join the worker thread before dropping the last reference to it"""
        if self.rename_worker is not None:
            # Our finished signal is emitted from inside run(), before the thread exits
            self.rename_worker.wait()
            self.rename_worker = None

    @Slot(int, int, str)
    def _on_rename_progress(self, current: int, total: int, msg: str):
        """Execution progress update"""
        self.progress_bar.setValue(current)
        self.statusBar().showMessage(msg)

    @Slot(object)
    def _on_rename_finished(self, result: ApplyResult):
        """Execution complete"""
        self._release_worker()
        self.execute_btn.setText("Apply Rename")
        self.refresh_btn.setEnabled(True)
        self.progress_bar.setVisible(False)

        if result.failed_count > 0:
            QMessageBox.warning(self, "Complete", result.summary())

        self._rebuild_preview()
        self.statusBar().showMessage(f"Done. {result.success_count} file(s) renamed.")

    @Slot(str)
    def _on_rename_error(self, error: str):
        """Execution error"""
        self._release_worker()
        self.execute_btn.setEnabled(True)
        self.execute_btn.setText("Apply Rename")
        self.refresh_btn.setEnabled(True)
        self.progress_bar.setVisible(False)
        QMessageBox.critical(self, "Error", f"Apply failed: {error}")
