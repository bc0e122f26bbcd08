"""Dialog reporting camera and microphone failures."""

from typing import Callable, Optional

from PyQt6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QLabel,
    QCheckBox,
    QHBoxLayout,
    QPushButton,
    QFrame,
)

from core.device_errors import compose
from core.i18n import translate as default_translate
from core.logging import logger
from core.models import DialogPresentation, TrackError
from core.settings import SettingsManager

_log = logger.getChild("device_error_dialog")


class DeviceErrorDialog(QDialog):
    """Modal dialog rendering a composed DialogPresentation.

    Only an OK button is offered. When the presentation allows suppression a
    "don't show again" checkbox is added and, if checked on accept, the
    storage key is persisted through ``settings_mgr``.
    """

    def __init__(
        self,
        presentation: DialogPresentation,
        settings_mgr: Optional[SettingsManager] = None,
        translate: Callable[[str], str] = default_translate,
        parent=None,
    ):
        super().__init__(parent)
        self.presentation = presentation
        self.settings_mgr = settings_mgr
        self._t = translate

        self.setWindowTitle(self._t(presentation.title_key))
        self.setModal(True)
        self.setMinimumWidth(480)

        lay = QVBoxLayout(self)
        lay.setContentsMargins(20, 20, 20, 20)
        lay.setSpacing(12)

        self.section_frames = []
        for section in presentation.sections:
            frame = QFrame()
            box = QVBoxLayout(frame)
            box.setContentsMargins(0, 0, 0, 0)

            header = QLabel(self._t(section.header_key))
            header.setStyleSheet("font-size: 15px; font-weight: bold;")
            header.setWordWrap(True)
            box.addWidget(header)

            body = QLabel(self._t(section.body_key))
            body.setStyleSheet("font-weight: 600;")
            body.setWordWrap(True)
            box.addWidget(body)

            if section.raw_detail:
                detail = QLabel(section.raw_detail)
                detail.setWordWrap(True)
                box.addWidget(detail)

            lay.addWidget(frame)
            self.section_frames.append(frame)

        self.chk_skip: Optional[QCheckBox] = None
        if presentation.suppression is not None:
            self.chk_skip = QCheckBox(self._t(presentation.suppression.prompt_key))
            lay.addWidget(self.chk_skip)

        btn_row = QHBoxLayout()
        btn_row.addStretch(1)
        self.btn_ok = QPushButton(self._t("dialog.ok"))
        self.btn_ok.setDefault(True)
        btn_row.addWidget(self.btn_ok)
        lay.addLayout(btn_row)

        self.btn_ok.clicked.connect(self.accept)

    @property
    def skip_future(self) -> bool:
        return self.chk_skip is not None and self.chk_skip.isChecked()

    def accept(self):
        if self.skip_future and self.settings_mgr is not None:
            self.settings_mgr.suppress_dialog(self.presentation.suppression.storage_key)
        super().accept()


def show_device_error_dialog(
    camera_error: Optional[TrackError],
    mic_error: Optional[TrackError],
    settings_mgr: SettingsManager,
    parent=None,
) -> Optional[DeviceErrorDialog]:
    """Compose and run the dialog unless there is nothing to show.

    Returns None when no device failed or the user opted out of this exact
    combination earlier.
    """
    presentation = compose(camera_error, mic_error)
    if presentation.is_empty:
        return None
    if presentation.suppression is not None and settings_mgr.is_dialog_suppressed(
        presentation.suppression.storage_key
    ):
        _log.info("Skipping suppressed dialog %s", presentation.storage_key)
        return None
    dlg = DeviceErrorDialog(presentation, settings_mgr, parent=parent)
    dlg.exec()
    return dlg
