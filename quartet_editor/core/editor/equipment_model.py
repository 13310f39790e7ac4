from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from core.catalog.item_catalog import ItemCatalog
from core.saves.document import SaveDocument
from i18n.i18n import tr

UNKNOWN_SUFFIX = " (unknown)"


@dataclass(frozen=True, slots=True)
class EquipmentPosition:
    index: int
    label_key: str
    category: str

    @property
    def label(self) -> str:
        return tr(self.label_key)


EQUIPMENT_POSITIONS: tuple[EquipmentPosition, ...] = (
    EquipmentPosition(0, "editor.position.weapon", "Weapons"),
    EquipmentPosition(1, "editor.position.accessory_1", "Accessories"),
    EquipmentPosition(2, "editor.position.helm", "Helms"),
    EquipmentPosition(3, "editor.position.armor", "Armor"),
    EquipmentPosition(4, "editor.position.accessory_2", "Accessories"),
    EquipmentPosition(5, "editor.position.accessory_3", "Accessories"),
)


@dataclass(slots=True)
class EquipmentRow:
    position: EquipmentPosition
    options: list[str]
    selected: str


@dataclass(slots=True)
class CharacterTab:
    index: int
    title: str
    character: dict[str, Any]
    rows: list[EquipmentRow]


def build_options(base: list[str], current: str) -> list[str]:
    options = dict.fromkeys([""])
    options.update(dict.fromkeys(base))
    if current != "" and current not in base:
        options[current + UNKNOWN_SUFFIX] = None
    return list(options)


def initial_selection(base: list[str], current: str) -> str:
    if current == "" or current in base:
        return current
    return current + UNKNOWN_SUFFIX


def strip_unknown_suffix(option: str | None) -> str:
    if option is None:
        return ""
    if option.endswith(UNKNOWN_SUFFIX):
        return option[: -len(UNKNOWN_SUFFIX)]
    return option


def display_option(option: str) -> str:
    return option if option else tr("editor.option.empty")


class EquipmentEditorModel:
    """Projects the loaded document into per-character rows of equipment choices."""

    def __init__(self, document: SaveDocument, catalog: ItemCatalog) -> None:
        self._document = document
        self._catalog = catalog

    @property
    def document(self) -> SaveDocument:
        return self._document

    def character_tabs(self) -> list[CharacterTab]:
        tabs: list[CharacterTab] = []
        for index, character in enumerate(self._document.editable_characters()):
            if not isinstance(character, dict):
                continue
            tabs.append(
                CharacterTab(
                    index=index,
                    title=SaveDocument.character_name(character, index),
                    character=character,
                    rows=[self._build_row(character, position) for position in EQUIPMENT_POSITIONS],
                )
            )
        return tabs

    def _build_row(self, character: dict[str, Any], position: EquipmentPosition) -> EquipmentRow:
        base = self._catalog.items(position.category)
        current = self._document.equipped_value(character, position.index)
        return EquipmentRow(
            position=position,
            options=build_options(base, current),
            selected=initial_selection(base, current),
        )

    def select(self, tab: CharacterTab, position_index: int, option: str | None) -> str:
        value = strip_unknown_suffix(option)
        self._document.set_equipped(tab.character, position_index, value)
        return value
