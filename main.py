import argparse
import sys
import traceback
from typing import List, Optional

from PyQt6.QtWidgets import (
    QApplication,
    QDialog,
    QLabel,
    QMessageBox,
    QVBoxLayout,
)

from core.errors import TrackAcquisitionError
from core.invite import SearchWorker
from core.logging import logger, set_level, LOG_PATH
from core.models import DeviceKind, TrackError
from core.settings import SettingsManager, AppSettings
from features.general.device_error_dialog import show_device_error_dialog
from features.general.inline_dialog_failure import InlineDialogFailure

_log = logger.getChild("main")


# Global exception handler: log the error and show a dialog instead of a hard crash
def _install_exception_handler():
    def _hook(exctype, value, tb):
        try:
            msg = "".join(traceback.format_exception(exctype, value, tb))
            _log.error("Unhandled exception:\n%s", msg)
            if QApplication.instance() is not None:
                box = QMessageBox()
                box.setIcon(QMessageBox.Icon.Critical)
                box.setWindowTitle("Unexpected Error")
                box.setText(f"{getattr(exctype, '__name__', str(exctype))}: {value}\n\nLog: {LOG_PATH}")
                box.setDetailedText(msg)
                box.exec()
        finally:
            sys.__excepthook__(exctype, value, tb)

    sys.excepthook = _hook


def _track_error(device: DeviceKind, name: Optional[str], opaque: bool) -> Optional[TrackError]:
    if opaque:
        return TrackError.from_exception(device, OSError(f"{device} could not be opened"))
    if name is None:
        return None
    return TrackError.from_exception(device, TrackAcquisitionError(name))


def _parse_args(argv: List[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Report camera/microphone start failures.")
    p.add_argument("--camera-error", metavar="NAME", help="symbolic camera failure, e.g. NotFound")
    p.add_argument("--mic-error", metavar="NAME", help="symbolic microphone failure, e.g. PermissionDenied")
    p.add_argument("--opaque-camera", action="store_true", help="simulate an unstructured camera exception")
    p.add_argument("--opaque-mic", action="store_true", help="simulate an unstructured microphone exception")
    p.add_argument("--search", metavar="TEXT", help="query the directory service")
    p.add_argument("--log-level", help="override the configured log level")
    return p.parse_args(argv)


class SearchWindow(QDialog):
    """Runs one directory search; on failure shows the inline retry widget."""

    def __init__(self, settings: AppSettings, text: str, parent=None):
        super().__init__(parent)
        self.settings = settings
        self.text = text
        self.setWindowTitle("Directory search")
        self.setMinimumWidth(420)
        self.lay = QVBoxLayout(self)
        self.lbl_status = QLabel("Searching...")
        self.lbl_status.setWordWrap(True)
        self.lay.addWidget(self.lbl_status)
        self.failure: Optional[InlineDialogFailure] = None
        self.worker: Optional[SearchWorker] = None
        self._start()

    def _start(self):
        if self.failure is not None:
            self.failure.setParent(None)
            self.failure = None
        svc = self.settings.services
        self.lbl_status.setText("Searching...")
        self.worker = SearchWorker(svc.search_url, svc.jwt, self.text, svc.request_timeout, self)
        self.worker.finished_ok.connect(self._on_ok)
        self.worker.finished_fail.connect(self._on_fail)
        self.worker.start()

    def _on_ok(self, result):
        count = len(result) if isinstance(result, (list, dict)) else 0
        self.lbl_status.setText(f"{count} result(s) for '{self.text}'.")

    def _on_fail(self, reason: str):
        _log.warning("Directory search for %r failed: %s", self.text, reason)
        self.lbl_status.setText(reason)
        self.failure = InlineDialogFailure(
            support_url=self.settings.services.support_url or None,
            on_retry=self._start,
        )
        self.lay.addWidget(self.failure)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    _install_exception_handler()

    settings_mgr = SettingsManager()
    settings = settings_mgr.load()
    set_level(args.log_level or settings.ui.log_level)

    app = QApplication.instance() or QApplication(sys.argv)

    if args.search:
        win = SearchWindow(settings, args.search)
        win.exec()
        return 0

    camera_error = _track_error(DeviceKind.CAMERA, args.camera_error, args.opaque_camera)
    mic_error = _track_error(DeviceKind.MICROPHONE, args.mic_error, args.opaque_mic)
    if camera_error is None and mic_error is None:
        _log.info("No device failures given; nothing to show")
        return 0

    show_device_error_dialog(camera_error, mic_error, settings_mgr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
