from __future__ import annotations

import re

SLOT_PATTERN = re.compile(r"slot[0-9]+")
SAVE_FILE_NAME = "data.json"
BACKUP_FILE_NAME = f"{SAVE_FILE_NAME}.bak"
MAX_CHARACTERS = 8
EQUIPPED_SLOT_COUNT = 6
