from __future__ import annotations

from enum import Enum

from i18n.i18n import tr


class ErrorKind(str, Enum):
    MISSING_RESOURCE = "missing_resource"
    INVALID_SELECTION = "invalid_selection"
    DEFAULT_ROOT_MISSING = "default_root_missing"
    NO_VALID_SLOTS = "no_valid_slots"
    MISSING_SAVE_FILE = "missing_save_file"
    PARSE_ERROR = "parse_error"
    INVALID_FORMAT = "invalid_format"
    SCAN_ERROR = "scan_error"
    SAVE_ERROR = "save_error"
    NOTHING_LOADED = "nothing_loaded"


class EditorError(Exception):
    """A recoverable failure reported to the user as a header plus a detail message."""

    def __init__(self, kind: ErrorKind, detail: str = "") -> None:
        super().__init__(detail or kind.value)
        self.kind = kind
        self.detail = detail

    @property
    def title(self) -> str:
        return tr(f"error.{self.kind.value}.title")
