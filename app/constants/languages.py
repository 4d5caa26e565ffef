"""
Target languages accepted by the translation stub.
"""
from types import MappingProxyType

DEFAULT_LANGUAGE = 'en'

# ISO 639-1 code -> display name; phrasebook coverage is narrower than this list
SUPPORTED_LANGUAGES = MappingProxyType({
    DEFAULT_LANGUAGE: 'English',
    'es': 'Spanish',
    'hi': 'Hindi',
    'kn': 'Kannada',
    'ta': 'Tamil',
    'te': 'Telugu',
    'mr': 'Marathi',
    'bn': 'Bengali',
})


def normalize_language(language_code: str) -> str:
    return language_code.strip().lower()


def is_supported_language(language_code: str) -> bool:
    return normalize_language(language_code) in SUPPORTED_LANGUAGES


def get_language_name(language_code: str) -> str:
    """Display name for a code, 'Unknown' when unsupported"""
    return SUPPORTED_LANGUAGES.get(normalize_language(language_code), 'Unknown')
