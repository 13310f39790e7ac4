from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.paths import get_config_path, get_default_saves_root


class AppConfig:
    _SUPPORTED_LANGUAGES = {"en", "de"}

    _DEFAULTS: dict[str, Any] = {
        "language": "en",
        "saves_root": str(get_default_saves_root()),
        "last_opened_paths": [],
        "open_default_on_startup": True,
    }

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path or get_config_path()
        self._data: dict[str, Any] = {}
        self._load_or_create()

    def _load_or_create(self) -> None:
        if not self._config_path.exists():
            self._data = dict(self._DEFAULTS)
            self.save()
            return

        try:
            content = self._config_path.read_text(encoding="utf-8")
            loaded = json.loads(content)
            if not isinstance(loaded, dict):
                loaded = {}
        except (json.JSONDecodeError, OSError, UnicodeDecodeError):
            loaded = {}

        self._data = dict(self._DEFAULTS)
        self._data.update(loaded)

        language = str(self._data.get("language", self._DEFAULTS["language"])).strip().lower()
        if language not in self._SUPPORTED_LANGUAGES:
            language = self._DEFAULTS["language"]
        self._data["language"] = language

        self.save()

    def save(self) -> None:
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        self._config_path.write_text(
            json.dumps(self._data, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )

    def get_language(self) -> str:
        return str(self._data.get("language", self._DEFAULTS["language"]))

    def get_saves_root(self) -> str:
        return str(self._data.get("saves_root", self._DEFAULTS["saves_root"]))

    def set_saves_root(self, root_path: str) -> None:
        self._data["saves_root"] = str(root_path)
        self.save()

    def get_last_opened_paths(self) -> list[str]:
        paths = self._data.get("last_opened_paths", self._DEFAULTS["last_opened_paths"])
        if isinstance(paths, list):
            return [str(item) for item in paths]
        return []

    def set_last_opened_paths(self, paths: list[str]) -> None:
        self._data["last_opened_paths"] = [str(item) for item in paths]
        self.save()

    def remember_opened_path(self, path: str) -> None:
        opened_paths = self.get_last_opened_paths()
        if path in opened_paths:
            return
        opened_paths.append(path)
        self.set_last_opened_paths(opened_paths)

    def get_open_default_on_startup(self) -> bool:
        return bool(self._data.get("open_default_on_startup", self._DEFAULTS["open_default_on_startup"]))
