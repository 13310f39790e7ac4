from core.saves.document import SaveDocument
from core.saves.models import SlotScanResult
from core.saves.persistence_service import SavePersistenceService
from core.saves.scanner_service import SlotScannerService, is_slot_directory

__all__ = [
    "SaveDocument",
    "SavePersistenceService",
    "SlotScanResult",
    "SlotScannerService",
    "is_slot_directory",
]
