import bisect
import itertools
import logging
import random
from typing import Iterable, Optional

from app.constants.diseases import all_diseases
from app.schemas.detection import Classification, DiseaseEntry

logger = logging.getLogger(__name__)


class DiseaseClassifier:
    """
    Mock leaf classifier.

    The image is never inspected: every call draws one entry from the
    disease table, with probability proportional to the entry's weight.
    """

    def __init__(self, entries: Iterable[DiseaseEntry] = None, rng: Optional[random.Random] = None):
        self.entries = tuple(all_diseases() if entries is None else entries)
        if not self.entries:
            raise RuntimeError("Disease table is empty; classifier cannot be built")

        self.cumulative_weights = tuple(itertools.accumulate(entry.weight for entry in self.entries))
        self.total_weight = self.cumulative_weights[-1]
        if self.total_weight <= 0:
            raise RuntimeError("Disease table has no positive weight; classifier cannot be built")

        self.rng = rng or random.Random()
        logger.info(f"Classifier ready: {len(self.entries)} entries, total weight {self.total_weight}")

    def draw(self) -> DiseaseEntry:
        point = self.rng.uniform(0, self.total_weight)
        # uniform() may return the upper bound itself
        index = min(bisect.bisect_right(self.cumulative_weights, point), len(self.entries) - 1)
        return self.entries[index]

    def classify(self, image_bytes: bytes = None) -> Classification:
        entry = self.draw()
        return Classification(
            disease=entry.name,
            confidence=round(entry.base_confidence * 100),
            severity=entry.severity,
        )

    def probability(self, name: str) -> float:
        """Chance that a single draw returns `name`."""
        weight = sum(entry.weight for entry in self.entries if entry.name == name)
        return weight / self.total_weight


# Global Instance
classifier = DiseaseClassifier()
