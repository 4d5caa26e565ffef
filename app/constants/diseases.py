"""
Disease table behind the mock classifier, grouped by crop family.

Weights are explicit: healthy leaves are three times as common as any
single disease.
"""
from types import MappingProxyType

from app.schemas.detection import DiseaseEntry

HEALTHY_WEIGHT = 3
DISEASE_WEIGHT = 1


def _entry(name: str, base_confidence: float, severity: str) -> DiseaseEntry:
    weight = HEALTHY_WEIGHT if "Healthy" in name else DISEASE_WEIGHT
    return DiseaseEntry(name=name, base_confidence=base_confidence, severity=severity, weight=weight)


DISEASE_CATEGORIES = MappingProxyType({
    'Apple': (
        _entry('Apple Scab', 0.85, 'moderate'),
        _entry('Apple Black Rot', 0.78, 'high'),
        _entry('Apple Cedar Rust', 0.82, 'moderate'),
        _entry('Apple Healthy', 0.92, 'none'),
    ),
    'Tomato': (
        _entry('Tomato Late Blight', 0.88, 'high'),
        _entry('Tomato Early Blight', 0.75, 'moderate'),
        _entry('Tomato Bacterial Spot', 0.80, 'moderate'),
        _entry('Tomato Leaf Mold', 0.77, 'moderate'),
        _entry('Tomato Healthy', 0.90, 'none'),
    ),
    'Corn': (
        _entry('Corn Common Rust', 0.83, 'moderate'),
        _entry('Corn Gray Leaf Spot', 0.79, 'moderate'),
        _entry('Corn Healthy', 0.88, 'none'),
    ),
    'Potato': (
        _entry('Potato Late Blight', 0.86, 'high'),
        _entry('Potato Early Blight', 0.81, 'moderate'),
        _entry('Potato Healthy', 0.89, 'none'),
    ),
    'Grape': (
        _entry('Grape Black Rot', 0.84, 'high'),
        _entry('Grape Esca', 0.76, 'moderate'),
        _entry('Grape Leaf Blight', 0.78, 'moderate'),
        _entry('Grape Healthy', 0.91, 'none'),
    ),
})


def all_diseases() -> tuple[DiseaseEntry, ...]:
    return tuple(entry for entries in DISEASE_CATEGORIES.values() for entry in entries)
