from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from core.errors import EditorError, ErrorKind
from core.logging import get_logger
from core.resources import get_item_catalog_path
from i18n.i18n import tr

CATEGORIES = ("Weapons", "Armor", "Helms", "Accessories", "Items")


@dataclass(slots=True)
class ItemCatalog:
    """Known item names per category, loaded once at startup."""

    categories: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> ItemCatalog:
        return cls({category: [] for category in CATEGORIES})

    def items(self, category: str) -> list[str]:
        return list(self.categories.get(category, []))


def _read_string_list(value: object) -> list[str]:
    if not isinstance(value, list):
        return []
    return [entry for entry in value if isinstance(entry, str)]


def load_item_catalog(path: Path | None = None, logger: logging.Logger | None = None) -> ItemCatalog:
    log = logger or get_logger("catalog")
    catalog_path = path or get_item_catalog_path()

    if not catalog_path.is_file():
        raise EditorError(ErrorKind.MISSING_RESOURCE, tr("error.missing_resource.detail", path=catalog_path))

    try:
        payload = json.loads(catalog_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        log.error("Could not read item catalog %s: %s", catalog_path, exc)
        raise EditorError(
            ErrorKind.MISSING_RESOURCE,
            tr("error.missing_resource.unreadable", path=catalog_path, error=exc),
        ) from exc

    if not isinstance(payload, dict):
        raise EditorError(ErrorKind.MISSING_RESOURCE, tr("error.missing_resource.detail", path=catalog_path))

    catalog = ItemCatalog({category: _read_string_list(payload.get(category)) for category in CATEGORIES})
    log.info(
        "Item catalog loaded: %s",
        ", ".join(f"{category}={len(catalog.categories[category])}" for category in CATEGORIES),
    )
    return catalog
