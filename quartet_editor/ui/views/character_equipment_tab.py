from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QComboBox, QGridLayout, QLabel, QSizePolicy, QWidget

from core.editor.equipment_model import CharacterTab, EquipmentEditorModel, EquipmentRow, display_option


class CharacterEquipmentTab(QWidget):
    equipment_changed = Signal(int, int, str)

    def __init__(self, model: EquipmentEditorModel, tab: CharacterTab, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._model = model
        self._tab = tab
        self._combos: list[QComboBox] = []

        layout = QGridLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setHorizontalSpacing(10)
        layout.setVerticalSpacing(10)
        layout.setColumnStretch(1, 1)

        for row_number, row in enumerate(tab.rows):
            label = QLabel(f"{row.position.label}:")
            combo = self._build_combo(row)
            layout.addWidget(label, row_number, 0)
            layout.addWidget(combo, row_number, 1)
            self._combos.append(combo)

        layout.setRowStretch(len(tab.rows), 1)

    @property
    def title(self) -> str:
        return self._tab.title

    def _build_combo(self, row: EquipmentRow) -> QComboBox:
        combo = QComboBox()
        combo.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        for option in row.options:
            combo.addItem(display_option(option), option)

        selected_index = combo.findData(row.selected)
        combo.setCurrentIndex(max(selected_index, 0))

        position_index = row.position.index
        combo.currentIndexChanged.connect(
            lambda _index, box=combo, value=position_index: self._on_selection_changed(box, value)
        )
        return combo

    def _on_selection_changed(self, combo: QComboBox, position_index: int) -> None:
        option = combo.currentData()
        value = self._model.select(self._tab, position_index, option if isinstance(option, str) else "")
        self.equipment_changed.emit(self._tab.index, position_index, value)
