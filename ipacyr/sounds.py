"""Sound descriptors produced by the IPA notation parser.

A descriptor names an articulatory quality together with the length and
palatalization modifiers attached to it. The set of qualities here is wider
than what the reducer understands: the notation can describe a sound that
has no place in the Russian inventory, and it is the reducer that rejects it.
"""

from dataclasses import dataclass
from enum import Enum


class VowelQuality(Enum):
    """IPA vowel qualities, valued by their symbol."""

    CLOSE_BACK_ROUNDED = "u"
    CLOSE_BACK_UNROUNDED = "ɯ"
    CLOSE_CENTRAL_ROUNDED = "ʉ"
    CLOSE_CENTRAL_UNROUNDED = "ɨ"
    CLOSE_FRONT_ROUNDED = "y"
    CLOSE_FRONT_UNROUNDED = "i"
    CLOSE_MID_BACK_ROUNDED = "o"
    CLOSE_MID_BACK_UNROUNDED = "ɤ"
    CLOSE_MID_CENTRAL_ROUNDED = "ɵ"
    CLOSE_MID_CENTRAL_UNROUNDED = "ɘ"
    CLOSE_MID_FRONT_ROUNDED = "ø"
    CLOSE_MID_FRONT_UNROUNDED = "e"
    MID_CENTRAL = "ə"
    NEAR_CLOSE_NEAR_BACK_ROUNDED = "ʊ"
    NEAR_CLOSE_NEAR_FRONT_ROUNDED = "ʏ"
    NEAR_CLOSE_NEAR_FRONT_UNROUNDED = "ɪ"
    NEAR_OPEN_FRONT_UNROUNDED = "æ"
    OPEN_BACK_UNROUNDED = "ɑ"
    OPEN_FRONT_UNROUNDED = "a"
    OPEN_MID_BACK_UNROUNDED = "ʌ"
    # Parseable, but outside the Russian inventory
    OPEN_MID_FRONT_UNROUNDED = "ɛ"
    OPEN_MID_BACK_ROUNDED = "ɔ"
    OPEN_BACK_ROUNDED = "ɒ"
    OPEN_MID_FRONT_ROUNDED = "œ"
    NEAR_OPEN_CENTRAL = "ɐ"
    OPEN_MID_CENTRAL_UNROUNDED = "ɜ"


class ConsonantQuality(Enum):
    """IPA pulmonic consonant qualities, valued by their symbol."""

    VOICELESS_BILABIAL_PLOSIVE = "p"
    VOICED_BILABIAL_PLOSIVE = "b"
    VOICELESS_ALVEOLAR_PLOSIVE = "t"
    VOICED_ALVEOLAR_PLOSIVE = "d"
    VOICELESS_VELAR_PLOSIVE = "k"
    VOICED_VELAR_PLOSIVE = "ɡ"
    VOICED_BILABIAL_NASAL = "m"
    VOICED_ALVEOLAR_NASAL = "n"
    VOICED_VELAR_NASAL = "ŋ"
    VOICED_PALATAL_NASAL = "ɲ"
    VOICELESS_LABIODENTAL_FRICATIVE = "f"
    VOICED_LABIODENTAL_FRICATIVE = "v"
    VOICELESS_ALVEOLAR_FRICATIVE = "s"
    VOICED_ALVEOLAR_FRICATIVE = "z"
    VOICELESS_POSTALVEOLAR_FRICATIVE = "ʃ"
    VOICED_POSTALVEOLAR_FRICATIVE = "ʒ"
    VOICELESS_VELAR_FRICATIVE = "x"
    VOICELESS_GLOTTAL_FRICATIVE = "h"
    VOICED_ALVEOLAR_LATERAL_APPROXIMANT = "l"
    VOICED_ALVEOLAR_TRILL = "r"
    VOICED_PALATAL_APPROXIMANT = "j"


@dataclass(frozen=True, slots=True)
class VowelSound:
    """A vowel with its length."""

    quality: VowelQuality
    is_long: bool = False


@dataclass(frozen=True, slots=True)
class ConsonantSound:
    """A consonant with its length and palatalization."""

    quality: ConsonantQuality
    is_long: bool = False
    is_palatalized: bool = False


@dataclass(frozen=True, slots=True)
class Space:
    """Word boundary."""


Sound = VowelSound | ConsonantSound | Space

VOWEL_SYMBOLS: dict[str, VowelQuality] = {q.value: q for q in VowelQuality}
CONSONANT_SYMBOLS: dict[str, ConsonantQuality] = {q.value: q for q in ConsonantQuality}
