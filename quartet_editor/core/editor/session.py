from __future__ import annotations

import logging
from pathlib import Path

from core.catalog.item_catalog import ItemCatalog
from core.editor.equipment_model import EquipmentEditorModel
from core.errors import EditorError, ErrorKind
from core.logging import get_logger
from core.paths import get_default_saves_root
from core.saves.document import SaveDocument
from core.saves.persistence_service import SavePersistenceService
from core.saves.scanner_service import SlotScannerService
from i18n.i18n import tr


class EditorSession:
    """State of one editor window: the saves root, its slots and the loaded slot."""

    def __init__(
        self,
        catalog: ItemCatalog,
        logger: logging.Logger | None = None,
        scanner: SlotScannerService | None = None,
        persistence: SavePersistenceService | None = None,
        default_root: Path | None = None,
    ) -> None:
        self._logger = logger or get_logger("session")
        self._catalog = catalog
        self._scanner = scanner or SlotScannerService(self._logger.getChild("scanner"))
        self._persistence = persistence or SavePersistenceService(self._logger.getChild("persistence"))
        self._default_root = default_root
        self._document = SaveDocument(self._logger.getChild("document"))
        self._saves_root: Path | None = None
        self._slots: list[Path] = []

    @property
    def catalog(self) -> ItemCatalog:
        return self._catalog

    @property
    def document(self) -> SaveDocument:
        return self._document

    @property
    def saves_root(self) -> Path | None:
        return self._saves_root

    @property
    def slots(self) -> list[Path]:
        return list(self._slots)

    @property
    def current_slot(self) -> Path | None:
        return self._document.slot_path

    @property
    def dirty(self) -> bool:
        return self._document.dirty

    @property
    def default_root(self) -> Path:
        return self._default_root or get_default_saves_root()

    def open_folder(self, path: Path) -> list[Path]:
        if not path.is_dir():
            raise EditorError(ErrorKind.INVALID_SELECTION, tr("error.invalid_selection.detail"))
        return self._apply_scan(path)

    def use_default_root(self) -> list[Path]:
        root = self.default_root
        if not root.is_dir():
            raise EditorError(ErrorKind.DEFAULT_ROOT_MISSING, tr("error.default_root_missing.detail", path=root))
        return self._apply_scan(root)

    def _apply_scan(self, directory: Path) -> list[Path]:
        result = self._scanner.scan(directory)
        if not result.slots:
            raise EditorError(ErrorKind.NO_VALID_SLOTS, tr("error.no_valid_slots.detail", root=directory))

        self._saves_root = result.root
        self._slots = list(result.slots)
        return self.slots

    def load_slot(self, slot_path: Path) -> None:
        self._document.load(slot_path)

    def save(self) -> Path:
        return self._persistence.save(self._document)

    def reload(self) -> None:
        self._persistence.reload(self._document)

    def editor_model(self) -> EquipmentEditorModel:
        return EquipmentEditorModel(self._document, self._catalog)
