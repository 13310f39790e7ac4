from __future__ import annotations

from PySide6.QtWidgets import QGroupBox, QPlainTextEdit, QVBoxLayout, QWidget

from core.logging import LogEmitter
from i18n.i18n import tr


class LogConsole(QWidget):
    _MAX_LINES = 2000

    def __init__(self, emitter: LogEmitter, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._emitter = emitter

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._group = QGroupBox()
        group_layout = QVBoxLayout(self._group)

        self._text_edit = QPlainTextEdit()
        self._text_edit.setReadOnly(True)
        self._text_edit.setMaximumBlockCount(self._MAX_LINES)
        group_layout.addWidget(self._text_edit)

        layout.addWidget(self._group)

        self._emitter.log_message.connect(self.append_log)
        self.retranslate_ui()

    def append_log(self, message: str) -> None:
        self._text_edit.appendPlainText(message)

    def retranslate_ui(self) -> None:
        self._group.setTitle(tr("log.title"))
