from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class SlotScanResult:
    root: Path
    slots: list[Path]
    single_slot: bool = False
