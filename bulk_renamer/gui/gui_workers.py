"""
gui_workers.py - GUI Worker Threads

Runs the apply step in the background to avoid blocking the UI. Moves are
still performed sequentially inside the worker.
"""

import logging
from typing import List, Optional

from PySide6.QtCore import QThread, Signal, QObject

from ..core import RenamePreview, RenameSettings, execute_previews


class RenameWorker(QThread):
    """Rename execution worker thread"""

    # Signals
    progress = Signal(int, int, str)    # current, total, message
    finished = Signal(object)           # ApplyResult
    error = Signal(str)                 # Error message

    def __init__(
        self,
        previews: List[RenamePreview],
        settings: RenameSettings,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.previews = previews
        self.settings = settings

    def run(self):
        try:
            def progress_callback(current: int, total: int, msg: str):
                self.progress.emit(current, total, msg)

            result = execute_previews(
                self.previews,
                self.settings,
                progress_callback=progress_callback,
            )

            self.finished.emit(result)
        except Exception as e:
            logging.getLogger(__name__).exception("Apply worker failed")
            self.error.emit(str(e))


class LogEmitter(QObject):
    """Carries log lines from any thread to the UI thread"""
    message = Signal(int, str)          # level, formatted message


class SignalLogHandler(logging.Handler):
    """Forwards log records to a LogEmitter"""

    def __init__(self, emitter: LogEmitter, level: int = logging.WARNING) -> None:
        super().__init__(level)
        self.emitter = emitter

    def emit(self, record: logging.LogRecord) -> None:
        self.emitter.message.emit(record.levelno, self.format(record))
