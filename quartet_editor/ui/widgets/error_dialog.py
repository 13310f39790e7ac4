from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget

from core.errors import EditorError
from i18n.i18n import tr


def show_editor_error(parent: QWidget | None, error: EditorError) -> None:
    box = QMessageBox(parent)
    box.setIcon(QMessageBox.Icon.Critical)
    box.setWindowTitle(tr("app.window.title"))
    box.setText(error.title)
    box.setInformativeText(error.detail)
    box.setStandardButtons(QMessageBox.StandardButton.Ok)
    box.exec()


def confirm_discard_changes(parent: QWidget | None, slot_name: str) -> bool:
    answer = QMessageBox.question(
        parent,
        tr("dialog.unsaved.title"),
        tr("dialog.unsaved.text", slot=slot_name),
        QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        QMessageBox.StandardButton.No,
    )
    return answer == QMessageBox.StandardButton.Yes
