# Static reference tables, loaded once at import and never mutated
from app.constants.diseases import DISEASE_CATEGORIES, HEALTHY_WEIGHT, all_diseases
from app.constants.treatments import TREATMENTS, FALLBACK_TREATMENT
from app.constants.weather import CITY_COORDS, FALLBACK_READINGS, DEFAULT_CITY, RISK_MESSAGES
from app.constants.languages import (
    SUPPORTED_LANGUAGES,
    DEFAULT_LANGUAGE,
    is_supported_language,
    get_language_name,
)

__all__ = [
    'DISEASE_CATEGORIES',
    'HEALTHY_WEIGHT',
    'all_diseases',
    'TREATMENTS',
    'FALLBACK_TREATMENT',
    'CITY_COORDS',
    'FALLBACK_READINGS',
    'DEFAULT_CITY',
    'RISK_MESSAGES',
    'SUPPORTED_LANGUAGES',
    'DEFAULT_LANGUAGE',
    'is_supported_language',
    'get_language_name',
]
