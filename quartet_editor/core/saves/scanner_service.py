from __future__ import annotations

import logging
from pathlib import Path

from core.errors import EditorError, ErrorKind
from core.logging import get_logger
from core.saves.constants import SAVE_FILE_NAME, SLOT_PATTERN
from core.saves.models import SlotScanResult
from i18n.i18n import tr


def is_slot_directory(path: Path) -> bool:
    return SLOT_PATTERN.fullmatch(path.name) is not None


class SlotScannerService:
    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or get_logger("scanner")

    def scan(self, directory: Path) -> SlotScanResult:
        """Return the slots reachable from ``directory``.

        A directory whose own name looks like ``slotNN`` is taken as a single
        slot and its parent becomes the saves root. Anything else is treated
        as a saves root and its immediate ``slotNN`` children that hold a
        ``data.json`` are returned in name order.
        """
        if is_slot_directory(directory):
            self._logger.info("Single slot selected: %s", directory)
            return SlotScanResult(root=directory.parent, slots=[directory], single_slot=True)

        self._logger.info("Scanning saves root: %s", directory)
        try:
            slots = [child for child in directory.iterdir() if self._is_valid_slot(child)]
        except OSError as exc:
            self._logger.error("Failed to scan %s: %s", directory, exc)
            raise EditorError(ErrorKind.SCAN_ERROR, tr("error.scan_error.detail", root=directory, error=exc)) from exc

        slots.sort(key=lambda path: path.name)
        self._logger.info("Scan finished: slots=%s", len(slots))
        return SlotScanResult(root=directory, slots=slots)

    @staticmethod
    def _is_valid_slot(path: Path) -> bool:
        return path.is_dir() and is_slot_directory(path) and (path / SAVE_FILE_NAME).is_file()
