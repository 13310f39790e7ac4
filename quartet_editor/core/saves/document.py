from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from core.errors import EditorError, ErrorKind
from core.logging import get_logger
from core.saves.constants import EQUIPPED_SLOT_COUNT, MAX_CHARACTERS, SAVE_FILE_NAME
from i18n.i18n import tr

CHARACTER_NAME_KEY = "characterName"


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return ""


class SaveDocument:
    """Live view over the parsed ``data.json`` of the loaded slot.

    The parsed tree is kept as plain dicts and lists so unknown keys and
    their order survive a save. Only ``party.characters[i].equippedItems``
    is ever written to.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or get_logger("document")
        self._root: dict[str, Any] | None = None
        self._slot_path: Path | None = None
        self._dirty = False

    @property
    def slot_path(self) -> Path | None:
        return self._slot_path

    @property
    def root(self) -> dict[str, Any] | None:
        return self._root

    @property
    def is_loaded(self) -> bool:
        return self._root is not None and self._slot_path is not None

    @property
    def dirty(self) -> bool:
        return self._dirty

    def mark_clean(self) -> None:
        self._dirty = False

    def load(self, slot_path: Path) -> None:
        data_path = slot_path / SAVE_FILE_NAME
        if not data_path.is_file():
            raise EditorError(ErrorKind.MISSING_SAVE_FILE, tr("error.missing_save_file.detail", path=data_path))

        try:
            # bytes input lets json detect a BOM and UTF-16/32 encodings
            root = json.loads(data_path.read_bytes())
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            self._logger.error("Could not parse %s: %s", data_path, exc)
            raise EditorError(ErrorKind.PARSE_ERROR, tr("error.parse_error.detail", path=data_path, error=exc)) from exc

        if not isinstance(root, dict):
            raise EditorError(ErrorKind.INVALID_FORMAT, tr("error.invalid_format.detail"))

        self._root = root
        self._slot_path = slot_path
        self._dirty = False

        party = root.get("party")
        if "party" in root and not isinstance(party, dict):
            self._logger.warning("Save field 'party' is not an object; no characters available")
        elif isinstance(party, dict) and "characters" in party and not isinstance(party["characters"], list):
            self._logger.warning("Save field 'party.characters' is not an array; no characters available")

        for character in self.characters()[:MAX_CHARACTERS]:
            if isinstance(character, dict):
                self.equipped_items(character)

        self._logger.info("Loaded %s/%s", slot_path.name, SAVE_FILE_NAME)

    def characters(self) -> list[Any]:
        root = self._require_root()

        party = root.setdefault("party", {})
        if not isinstance(party, dict):
            return []

        characters = party.setdefault("characters", [])
        if not isinstance(characters, list):
            return []

        return characters

    def editable_characters(self) -> list[Any]:
        return self.characters()[:MAX_CHARACTERS]

    def equipped_items(self, character: dict[str, Any]) -> list[Any]:
        equipped = character.get("equippedItems")
        if not isinstance(equipped, list):
            equipped = []
            character["equippedItems"] = equipped

        while len(equipped) < EQUIPPED_SLOT_COUNT:
            equipped.append("")
        return equipped

    def equipped_value(self, character: dict[str, Any], index: int) -> str:
        return _as_text(self.equipped_items(character)[index])

    def set_equipped(self, character: dict[str, Any], index: int, value: str) -> None:
        if not 0 <= index < EQUIPPED_SLOT_COUNT:
            raise ValueError(f"equipment index must be between 0 and {EQUIPPED_SLOT_COUNT - 1}")

        self.equipped_items(character)[index] = str(value)
        self._dirty = True

    @staticmethod
    def character_name(character: dict[str, Any], index: int) -> str:
        attributes = character.get("stringAttributes")
        if isinstance(attributes, list):
            for attribute in attributes:
                if not isinstance(attribute, dict) or attribute.get("key") != CHARACTER_NAME_KEY:
                    continue
                name = _as_text(attribute.get("value"))
                if name.strip():
                    return name
        return tr("editor.character_fallback", number=index + 1)

    def to_json(self) -> str:
        return json.dumps(self._require_root(), indent=2, ensure_ascii=False) + "\n"

    def _require_root(self) -> dict[str, Any]:
        if self._root is None:
            raise EditorError(ErrorKind.NOTHING_LOADED, tr("error.nothing_loaded.detail"))
        return self._root
