from __future__ import annotations

import logging
import os
from pathlib import Path
import shutil
import uuid

from core.errors import EditorError, ErrorKind
from core.logging import get_logger
from core.saves.constants import BACKUP_FILE_NAME, SAVE_FILE_NAME
from core.saves.document import SaveDocument
from i18n.i18n import tr


def write_text_atomic(target: Path, content: str) -> None:
    temp_path = target.with_name(f"{target.name}.tmp-{uuid.uuid4().hex}")
    try:
        with temp_path.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        if target.exists():
            shutil.copymode(target, temp_path)
        os.replace(temp_path, target)
    finally:
        if temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                pass


class SavePersistenceService:
    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or get_logger("persistence")

    def save(self, document: SaveDocument) -> Path:
        """Write the document back to its slot and return the backup path.

        The current ``data.json`` is copied to ``data.json.bak`` first; if
        that copy fails the original file is left alone.
        """
        slot_path = document.slot_path
        if slot_path is None or not document.is_loaded:
            raise EditorError(ErrorKind.NOTHING_LOADED, tr("error.nothing_loaded.detail"))

        target_path = slot_path / SAVE_FILE_NAME
        backup_path = slot_path / BACKUP_FILE_NAME
        content = document.to_json()

        try:
            shutil.copyfile(target_path, backup_path)
            write_text_atomic(target_path, content)
        except OSError as exc:
            self._logger.error("Save of %s failed: %s", target_path, exc)
            raise EditorError(ErrorKind.SAVE_ERROR, tr("error.save_error.detail", path=target_path, error=exc)) from exc

        document.mark_clean()
        self._logger.info("Saved %s/%s, backup at %s", slot_path.name, SAVE_FILE_NAME, backup_path.name)
        return backup_path

    def reload(self, document: SaveDocument) -> None:
        slot_path = document.slot_path
        if slot_path is None:
            raise EditorError(ErrorKind.NOTHING_LOADED, tr("error.nothing_loaded.detail"))

        document.load(slot_path)
        self._logger.info("Reloaded %s/%s", slot_path.name, SAVE_FILE_NAME)
