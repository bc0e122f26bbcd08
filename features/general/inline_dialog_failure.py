import html
from typing import Callable, Optional

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLabel, QPushButton

from core.i18n import translate as default_translate


class InlineDialogFailure(QWidget):
    """Inline error shown when a directory search or invite request fails.

    The support link row is only added when ``support_url`` is set.
    """

    def __init__(
        self,
        support_url: Optional[str] = None,
        on_retry: Optional[Callable[[], None]] = None,
        translate: Callable[[str], str] = default_translate,
        parent=None,
    ):
        super().__init__(parent)
        t = translate
        lay = QVBoxLayout(self)
        lay.setContentsMargins(8, 8, 8, 8)

        self.lbl_msg = QLabel(t("inlineDialogFailure.msg"))
        self.lbl_msg.setWordWrap(True)
        lay.addWidget(self.lbl_msg)

        self.lbl_support: Optional[QLabel] = None
        if support_url:
            self.lbl_support = QLabel(
                f'{t("inlineDialogFailure.supportMsg")} '
                f'<a href="{html.escape(support_url, quote=True)}">{t("inlineDialogFailure.support")}</a>.'
            )
            self.lbl_support.setOpenExternalLinks(True)
            self.lbl_support.setWordWrap(True)
            lay.addWidget(self.lbl_support)

        self.btn_retry = QPushButton(t("inlineDialogFailure.retry"))
        if on_retry is not None:
            self.btn_retry.clicked.connect(lambda: on_retry())
        lay.addWidget(self.btn_retry)
