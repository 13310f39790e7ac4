from __future__ import annotations

import codecs
import copy
import json
import logging
from pathlib import Path
from typing import Any

import pytest

from core.errors import EditorError, ErrorKind
from core.saves.document import SaveDocument


def _write_slot(root: Path, payload: Any, name: str = "slot00") -> Path:
    slot = root / name
    slot.mkdir(parents=True, exist_ok=True)
    (slot / "data.json").write_text(json.dumps(payload), encoding="utf-8")
    return slot


def _character(name: str | None, equipped: list[Any] | None) -> dict[str, Any]:
    character: dict[str, Any] = {"level": 7}
    if name is not None:
        character["stringAttributes"] = [
            {"key": "className", "value": "Knight"},
            {"key": "characterName", "value": name},
        ]
    if equipped is not None:
        character["equippedItems"] = equipped
    return character


def test_load_pads_short_equipment_to_six(tmp_path: Path) -> None:
    slot = _write_slot(tmp_path, {"party": {"characters": [_character("Aria", ["Sword"])]}})

    document = SaveDocument()
    document.load(slot)

    character = document.characters()[0]
    assert character["equippedItems"] == ["Sword", "", "", "", "", ""]
    assert document.dirty is False


def test_load_accepts_utf8_bom(tmp_path: Path) -> None:
    slot = tmp_path / "slot00"
    slot.mkdir()
    payload = {"party": {"characters": [_character("Aria", ["Sword"])]}}
    (slot / "data.json").write_bytes(codecs.BOM_UTF8 + json.dumps(payload).encode("utf-8"))

    document = SaveDocument()
    document.load(slot)

    assert document.character_name(document.characters()[0], 0) == "Aria"
    assert document.characters()[0]["equippedItems"] == ["Sword", "", "", "", "", ""]


def test_load_never_shortens_equipment(tmp_path: Path) -> None:
    equipped = ["a", "b", "c", "d", "e", "f", "g", "h"]
    slot = _write_slot(tmp_path, {"party": {"characters": [_character("Aria", list(equipped))]}})

    document = SaveDocument()
    document.load(slot)

    assert document.characters()[0]["equippedItems"] == equipped


def test_load_creates_missing_equipment(tmp_path: Path) -> None:
    slot = _write_slot(tmp_path, {"party": {"characters": [_character("Aria", None)]}})

    document = SaveDocument()
    document.load(slot)

    assert document.characters()[0]["equippedItems"] == [""] * 6


def test_characters_beyond_eight_are_untouched(tmp_path: Path) -> None:
    characters = [_character(f"Hero {index}", ["Sword"]) for index in range(10)]
    original = copy.deepcopy(characters)
    slot = _write_slot(tmp_path, {"party": {"characters": characters}})

    document = SaveDocument()
    document.load(slot)

    loaded = document.characters()
    assert len(loaded) == 10
    assert all(len(character["equippedItems"]) == 6 for character in loaded[:8])
    assert loaded[8:] == original[8:]
    assert len(document.editable_characters()) == 8


def test_missing_party_is_materialized(tmp_path: Path) -> None:
    slot = _write_slot(tmp_path, {"version": 3, "gold": 120})

    document = SaveDocument()
    document.load(slot)

    assert document.characters() == []
    assert document.root == {"version": 3, "gold": 120, "party": {"characters": []}}


def test_missing_characters_keep_other_party_fields(tmp_path: Path) -> None:
    slot = _write_slot(tmp_path, {"party": {"formation": "wedge"}})

    document = SaveDocument()
    document.load(slot)

    characters = document.characters()
    assert characters == []
    assert document.root == {"party": {"formation": "wedge", "characters": []}}
    assert document.characters() is characters


def test_party_of_wrong_type_is_left_alone(tmp_path: Path) -> None:
    slot = _write_slot(tmp_path, {"party": "broken"})

    document = SaveDocument()
    document.load(slot)

    assert document.characters() == []
    assert document.root == {"party": "broken"}


def test_wrong_party_type_warns_once_per_load(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    slot = _write_slot(tmp_path, {"party": "broken"})
    document = SaveDocument(logging.getLogger("save_document_test"))

    with caplog.at_level(logging.WARNING, logger="save_document_test"):
        document.load(slot)
        document.characters()
        document.editable_characters()
        document.characters()

    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "party" in warnings[0].getMessage()


def test_characters_list_is_live(tmp_path: Path) -> None:
    slot = _write_slot(tmp_path, {"party": {"characters": [_character("Aria", ["Sword"])]}})

    document = SaveDocument()
    document.load(slot)

    assert document.characters() is document.root["party"]["characters"]


def test_set_equipped_marks_dirty(tmp_path: Path) -> None:
    slot = _write_slot(tmp_path, {"party": {"characters": [_character("Aria", ["Sword"])]}})
    document = SaveDocument()
    document.load(slot)
    character = document.characters()[0]

    document.set_equipped(character, 3, "Chain Mail")

    assert character["equippedItems"] == ["Sword", "", "", "Chain Mail", "", ""]
    assert document.dirty is True


def test_set_equipped_rejects_out_of_range_index(tmp_path: Path) -> None:
    slot = _write_slot(tmp_path, {"party": {"characters": [_character("Aria", ["Sword"])]}})
    document = SaveDocument()
    document.load(slot)

    with pytest.raises(ValueError):
        document.set_equipped(document.characters()[0], 6, "Sword")
    assert document.dirty is False


def test_character_name_fallbacks() -> None:
    assert SaveDocument.character_name(_character("Aria", None), 0) == "Aria"
    assert SaveDocument.character_name(_character("   ", None), 1) == "Character 2"
    assert SaveDocument.character_name(_character(None, None), 4) == "Character 5"
    assert SaveDocument.character_name({"stringAttributes": "oops"}, 0) == "Character 1"


def test_missing_save_file(tmp_path: Path) -> None:
    slot = tmp_path / "slot00"
    slot.mkdir()

    with pytest.raises(EditorError) as error:
        SaveDocument().load(slot)

    assert error.value.kind is ErrorKind.MISSING_SAVE_FILE


def test_invalid_json(tmp_path: Path) -> None:
    slot = tmp_path / "slot00"
    slot.mkdir()
    (slot / "data.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(EditorError) as error:
        SaveDocument().load(slot)

    assert error.value.kind is ErrorKind.PARSE_ERROR
    assert "data.json" in error.value.detail


def test_non_object_root(tmp_path: Path) -> None:
    slot = _write_slot(tmp_path, [1, 2, 3])

    with pytest.raises(EditorError) as error:
        SaveDocument().load(slot)

    assert error.value.kind is ErrorKind.INVALID_FORMAT


def test_failed_load_keeps_previous_document(tmp_path: Path) -> None:
    good = _write_slot(tmp_path, {"party": {"characters": [_character("Aria", ["Sword"])]}}, name="slot00")
    bad = _write_slot(tmp_path, "just a string", name="slot01")

    document = SaveDocument()
    document.load(good)
    document.set_equipped(document.characters()[0], 0, "Axe")

    with pytest.raises(EditorError):
        document.load(bad)

    assert document.slot_path == good
    assert document.characters()[0]["equippedItems"][0] == "Axe"
    assert document.dirty is True


def test_equipped_value_renders_non_strings(tmp_path: Path) -> None:
    slot = _write_slot(tmp_path, {"party": {"characters": [_character("Aria", [None, 42, "Helm", "", "", ""])]}})
    document = SaveDocument()
    document.load(slot)
    character = document.characters()[0]

    assert document.equipped_value(character, 0) == ""
    assert document.equipped_value(character, 1) == "42"
    assert document.equipped_value(character, 2) == "Helm"


def test_operations_require_loaded_document() -> None:
    with pytest.raises(EditorError) as error:
        SaveDocument().characters()

    assert error.value.kind is ErrorKind.NOTHING_LOADED
