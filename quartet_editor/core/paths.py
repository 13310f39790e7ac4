from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "QuartetSaveEditor"
DEFAULT_SAVES_SUFFIX = ("Documents", "Something Classic", "Quartet", "saves")


def get_app_data_dir() -> Path:
    if os.name == "nt":
        appdata = os.getenv("APPDATA")
        base_dir = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
    else:
        base_dir = Path.home() / ".config"

    app_data_dir = base_dir / APP_NAME
    app_data_dir.mkdir(parents=True, exist_ok=True)
    return app_data_dir.resolve()


def get_logs_dir() -> Path:
    logs_dir = get_app_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir.resolve()


def get_config_path() -> Path:
    return (get_app_data_dir() / "config.json").resolve()


def get_default_saves_root() -> Path:
    return Path.home().joinpath(*DEFAULT_SAVES_SUFFIX)


def ensure_runtime_directories() -> None:
    get_app_data_dir()
    get_logs_dir()
