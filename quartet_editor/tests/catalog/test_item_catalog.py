from __future__ import annotations

import json
from pathlib import Path

import pytest

from core.catalog.item_catalog import CATEGORIES, ItemCatalog, load_item_catalog
from core.errors import EditorError, ErrorKind


def test_bundled_catalog_loads() -> None:
    catalog = load_item_catalog()

    for category in CATEGORIES:
        assert category in catalog.categories
    assert catalog.items("Weapons")
    assert catalog.items("Items")


def test_non_strings_and_missing_categories(tmp_path: Path) -> None:
    path = tmp_path / "items.json"
    path.write_text(
        json.dumps({"Weapons": ["Sword", 3, None, "Axe", {"name": "Bow"}], "Helms": "Iron Helm"}),
        encoding="utf-8",
    )

    catalog = load_item_catalog(path)

    assert catalog.items("Weapons") == ["Sword", "Axe"]
    assert catalog.items("Helms") == []
    assert catalog.items("Armor") == []
    assert catalog.items("Accessories") == []
    assert catalog.items("Items") == []


def test_items_returns_copy() -> None:
    catalog = ItemCatalog({"Weapons": ["Sword"]})

    catalog.items("Weapons").append("Axe")

    assert catalog.items("Weapons") == ["Sword"]
    assert catalog.items("Unknown") == []


def test_missing_resource(tmp_path: Path) -> None:
    with pytest.raises(EditorError) as error:
        load_item_catalog(tmp_path / "missing.json")

    assert error.value.kind is ErrorKind.MISSING_RESOURCE
    assert error.value.title == "Failed to load item list"


def test_unreadable_resource(tmp_path: Path) -> None:
    path = tmp_path / "items.json"
    path.write_text("[\"Sword\"]", encoding="utf-8")

    with pytest.raises(EditorError) as error:
        load_item_catalog(path)

    assert error.value.kind is ErrorKind.MISSING_RESOURCE


def test_invalid_json_resource_reports_translated_detail(tmp_path: Path) -> None:
    path = tmp_path / "items.json"
    path.write_text("{\"Weapons\": [", encoding="utf-8")

    with pytest.raises(EditorError) as error:
        load_item_catalog(path)

    assert error.value.kind is ErrorKind.MISSING_RESOURCE
    assert error.value.detail.startswith("Could not read bundled item list")
    assert "items.json" in error.value.detail


def test_empty_catalog_has_all_categories() -> None:
    catalog = ItemCatalog.empty()

    assert all(catalog.items(category) == [] for category in CATEGORIES)
