from types import MappingProxyType
from typing import Mapping

from app.constants.treatments import TREATMENTS, FALLBACK_TREATMENT
from app.schemas.detection import TreatmentEntry


class TreatmentService:
    def __init__(self, table: Mapping[str, TreatmentEntry] = TREATMENTS,
                 fallback: TreatmentEntry = FALLBACK_TREATMENT):
        self.table = MappingProxyType(dict(table))
        self.fallback = fallback

    def lookup(self, disease: str) -> TreatmentEntry:
        """Exact-name lookup; unknown diseases get the generic advice."""
        return self.table.get(disease, self.fallback)


treatment_service = TreatmentService()
