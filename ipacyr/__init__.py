"""IpaCyr: IPA notation to simplified Russian Cyrillic."""

from ipacyr.exceptions import (
    ConfigurationError,
    IpaCyrError,
    NotationError,
    UnsupportedPhonemeError,
)
from ipacyr.transcriber import (
    RussianTranscriber,
    cached_ipa_to_cyrillic,
    ipa_to_cyrillic,
    sounds_to_cyrillic,
)

__version__ = "0.1.0"
__all__ = [
    "IpaCyrError",
    "NotationError",
    "UnsupportedPhonemeError",
    "ConfigurationError",
    "RussianTranscriber",
    "ipa_to_cyrillic",
    "sounds_to_cyrillic",
    "cached_ipa_to_cyrillic",
]
