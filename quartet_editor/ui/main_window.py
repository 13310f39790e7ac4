from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtWidgets import (
    QFileDialog,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QSplitter,
    QTabWidget,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from core.config import AppConfig
from core.editor.equipment_model import EquipmentEditorModel
from core.editor.session import EditorSession
from core.errors import EditorError
from core.logging import LogEmitter
from core.saves.constants import SAVE_FILE_NAME
from i18n.i18n import tr
from ui.views.character_equipment_tab import CharacterEquipmentTab
from ui.widgets.error_dialog import confirm_discard_changes, show_editor_error
from ui.widgets.log_console import LogConsole


class MainWindow(QMainWindow):
    _WARNING_TIMEOUT_MS = 8000

    def __init__(
        self,
        config: AppConfig,
        session: EditorSession,
        logger: logging.Logger,
        log_emitter: LogEmitter,
    ) -> None:
        super().__init__()
        self._config = config
        self._session = session
        self._logger = logger
        self._editor_model: EquipmentEditorModel | None = None

        self.resize(980, 650)

        self._toolbar = QToolBar()
        self._toolbar.setMovable(False)
        self.addToolBar(self._toolbar)

        self._open_action = QAction(self)
        self._open_action.triggered.connect(self._choose_folder)
        self._toolbar.addAction(self._open_action)

        self._default_action = QAction(self)
        self._default_action.triggered.connect(self.use_default_saves_folder)
        self._toolbar.addAction(self._default_action)

        self._toolbar.addSeparator()

        self._save_action = QAction(self)
        self._save_action.setShortcut("Ctrl+S")
        self._save_action.triggered.connect(self._save_current_slot)
        self._toolbar.addAction(self._save_action)

        self._reload_action = QAction(self)
        self._reload_action.triggered.connect(self._reload_current_slot)
        self._toolbar.addAction(self._reload_action)

        self._toolbar.addSeparator()

        self._log_action = QAction(self)
        self._log_action.setCheckable(True)
        self._toolbar.addAction(self._log_action)

        central = QWidget()
        central_layout = QVBoxLayout(central)
        central_layout.setContentsMargins(10, 10, 10, 10)
        self.setCentralWidget(central)

        vertical_splitter = QSplitter(Qt.Orientation.Vertical)
        central_layout.addWidget(vertical_splitter)

        editor_splitter = QSplitter(Qt.Orientation.Horizontal)
        vertical_splitter.addWidget(editor_splitter)

        left_panel = QWidget()
        left_layout = QVBoxLayout(left_panel)
        left_layout.setContentsMargins(0, 0, 10, 0)
        left_layout.setSpacing(8)
        self._slots_label = QLabel()
        left_layout.addWidget(self._slots_label)
        self._slot_list = QListWidget()
        self._slot_list.currentItemChanged.connect(self._on_slot_selected)
        left_layout.addWidget(self._slot_list, 1)
        left_panel.setMinimumWidth(180)
        editor_splitter.addWidget(left_panel)

        self._tab_widget = QTabWidget()
        editor_splitter.addWidget(self._tab_widget)
        editor_splitter.setStretchFactor(1, 1)

        self._log_console = LogConsole(log_emitter)
        self._log_console.setVisible(False)
        self._log_action.toggled.connect(self._log_console.setVisible)
        vertical_splitter.addWidget(self._log_console)
        vertical_splitter.setStretchFactor(0, 1)

        self._status_label = QLabel()
        self.statusBar().addWidget(self._status_label, 1)
        log_emitter.warning_logged.connect(self._show_warning)

        self.retranslate_ui()
        self._status_label.setText(tr("status.no_slot"))

        if self._config.get_open_default_on_startup():
            QTimer.singleShot(0, self.use_default_saves_folder)

    def closeEvent(self, event: QCloseEvent) -> None:
        current_slot = self._session.current_slot
        if self._session.dirty and current_slot is not None:
            if not confirm_discard_changes(self, current_slot.name):
                event.ignore()
                return
        super().closeEvent(event)

    def _choose_folder(self) -> None:
        initial_dir = self._session.saves_root or Path(self._config.get_saves_root())
        selected_dir = QFileDialog.getExistingDirectory(
            self,
            tr("dialog.choose_folder"),
            str(initial_dir) if initial_dir.is_dir() else "",
        )
        if not selected_dir:
            return

        try:
            slots = self._session.open_folder(Path(selected_dir))
        except EditorError as exc:
            show_editor_error(self, exc)
            return

        self._remember_saves_root()
        self._show_slots(slots)

    def use_default_saves_folder(self) -> None:
        try:
            slots = self._session.use_default_root()
        except EditorError as exc:
            self._logger.warning("%s: %s", exc.title, exc.detail)
            show_editor_error(self, exc)
            return

        self._remember_saves_root()
        self._show_slots(slots)

    def _remember_saves_root(self) -> None:
        saves_root = self._session.saves_root
        if saves_root is None:
            return
        self._config.set_saves_root(str(saves_root))
        self._config.remember_opened_path(str(saves_root))

    def _show_slots(self, slots: list[Path]) -> None:
        self._slot_list.blockSignals(True)
        self._slot_list.clear()
        for slot in slots:
            item = QListWidgetItem(slot.name)
            item.setData(Qt.ItemDataRole.UserRole, str(slot))
            item.setToolTip(str(slot))
            self._slot_list.addItem(item)
        self._slot_list.blockSignals(False)

        if self._slot_list.count() > 0:
            self._slot_list.setCurrentRow(0)

    def _on_slot_selected(self, current: QListWidgetItem | None, _previous: QListWidgetItem | None) -> None:
        if current is None:
            return

        slot_path = Path(str(current.data(Qt.ItemDataRole.UserRole)))
        try:
            self._session.load_slot(slot_path)
        except EditorError as exc:
            show_editor_error(self, exc)
            self._select_current_slot_row()
            return

        self._rebuild_character_tabs()
        self._set_status("status.loaded")

    def _select_current_slot_row(self) -> None:
        current_slot = self._session.current_slot
        self._slot_list.blockSignals(True)
        self._slot_list.setCurrentRow(-1)
        for row in range(self._slot_list.count()):
            item = self._slot_list.item(row)
            if current_slot is not None and item.data(Qt.ItemDataRole.UserRole) == str(current_slot):
                self._slot_list.setCurrentRow(row)
                break
        self._slot_list.blockSignals(False)

    def _rebuild_character_tabs(self) -> None:
        while self._tab_widget.count() > 0:
            widget = self._tab_widget.widget(0)
            self._tab_widget.removeTab(0)
            widget.deleteLater()

        self._editor_model = self._session.editor_model()
        for character_tab in self._editor_model.character_tabs():
            tab_widget = CharacterEquipmentTab(self._editor_model, character_tab)
            tab_widget.equipment_changed.connect(self._on_equipment_changed)
            self._tab_widget.addTab(tab_widget, character_tab.title)

        if self._tab_widget.count() == 0:
            placeholder = QLabel(tr("tabs.no_characters.text"))
            placeholder.setAlignment(Qt.AlignmentFlag.AlignCenter)
            self._tab_widget.addTab(placeholder, tr("tabs.no_characters"))

        self._update_window_title()

    def _on_equipment_changed(self, character_index: int, position_index: int, value: str) -> None:
        self._logger.info(
            "Character %s equipment %s set to %r",
            character_index + 1,
            position_index,
            value,
        )
        self._set_status("status.modified")
        self._update_window_title()

    def _save_current_slot(self) -> None:
        try:
            backup_path = self._session.save()
        except EditorError as exc:
            show_editor_error(self, exc)
            return

        self._status_label.setText(tr("status.saved", backup=backup_path.name))
        self._update_window_title()

    def _reload_current_slot(self) -> None:
        try:
            self._session.reload()
        except EditorError as exc:
            show_editor_error(self, exc)
            return

        self._rebuild_character_tabs()
        self._set_status("status.reloaded")

    def _show_warning(self, message: str) -> None:
        self.statusBar().showMessage(message, self._WARNING_TIMEOUT_MS)

    def _set_status(self, key: str) -> None:
        current_slot = self._session.current_slot
        if current_slot is None:
            self._status_label.setText(tr("status.no_slot"))
            return
        self._status_label.setText(tr(key, slot=current_slot.name, file=SAVE_FILE_NAME))

    def _update_window_title(self) -> None:
        title = tr("app.window.title")
        current_slot = self._session.current_slot
        if current_slot is not None:
            marker = "*" if self._session.dirty else ""
            title = f"{title} - {current_slot.name}{marker}"
        self.setWindowTitle(title)

    def retranslate_ui(self) -> None:
        self._open_action.setText(tr("toolbar.open_folder"))
        self._default_action.setText(tr("toolbar.use_default"))
        self._save_action.setText(tr("toolbar.save"))
        self._reload_action.setText(tr("toolbar.reload"))
        self._log_action.setText(tr("toolbar.show_log"))
        self._slots_label.setText(tr("slots.title"))
        self._update_window_title()
