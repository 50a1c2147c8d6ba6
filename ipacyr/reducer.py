"""Reduction of IPA sound descriptors to the Russian phoneme inventory.

The lookup tables below are closed: a quality missing from them is rejected
with :class:`UnsupportedPhonemeError` rather than approximated.
"""

import logging
from collections.abc import Iterable
from typing import Final

from ipacyr.exceptions import UnsupportedPhonemeError
from ipacyr.phonemes import (
    Consonant,
    ConsonantPhoneme,
    PalatalizedOnly,
    PalatalizedOnlyPhoneme,
    Phoneme,
    PhonemeSequence,
    Separator,
    Vowel,
    VowelPhoneme,
)
from ipacyr.sounds import ConsonantQuality, ConsonantSound, Sound, Space, VowelQuality, VowelSound

logger = logging.getLogger(__name__)

VOWEL_TABLE: Final[dict[VowelQuality, Vowel]] = {
    VowelQuality.CLOSE_BACK_ROUNDED: Vowel.U,
    VowelQuality.CLOSE_BACK_UNROUNDED: Vowel.U,
    VowelQuality.CLOSE_CENTRAL_ROUNDED: Vowel.U,
    VowelQuality.CLOSE_CENTRAL_UNROUNDED: Vowel.I,
    VowelQuality.CLOSE_FRONT_ROUNDED: Vowel.U,
    VowelQuality.CLOSE_FRONT_UNROUNDED: Vowel.I,
    VowelQuality.CLOSE_MID_BACK_ROUNDED: Vowel.O,
    VowelQuality.CLOSE_MID_BACK_UNROUNDED: Vowel.U,
    VowelQuality.CLOSE_MID_CENTRAL_ROUNDED: Vowel.U,
    VowelQuality.CLOSE_MID_CENTRAL_UNROUNDED: Vowel.E,
    VowelQuality.CLOSE_MID_FRONT_ROUNDED: Vowel.O,
    VowelQuality.CLOSE_MID_FRONT_UNROUNDED: Vowel.E,
    VowelQuality.MID_CENTRAL: Vowel.A,
    VowelQuality.NEAR_CLOSE_NEAR_BACK_ROUNDED: Vowel.U,
    VowelQuality.NEAR_CLOSE_NEAR_FRONT_ROUNDED: Vowel.U,
    VowelQuality.NEAR_CLOSE_NEAR_FRONT_UNROUNDED: Vowel.E,
    VowelQuality.NEAR_OPEN_FRONT_UNROUNDED: Vowel.A,
    VowelQuality.OPEN_BACK_UNROUNDED: Vowel.A,
    VowelQuality.OPEN_FRONT_UNROUNDED: Vowel.A,
    VowelQuality.OPEN_MID_BACK_UNROUNDED: Vowel.A,
}

# Consonant qualities mapped to a plain consonant keep the palatalization
# flag of the sound; the palatal approximant is always soft.
CONSONANT_TABLE: Final[dict[ConsonantQuality, Consonant | PalatalizedOnly]] = {
    ConsonantQuality.VOICED_ALVEOLAR_NASAL: Consonant.N,
    ConsonantQuality.VOICED_BILABIAL_NASAL: Consonant.M,
    ConsonantQuality.VOICED_PALATAL_APPROXIMANT: PalatalizedOnly.J,
    ConsonantQuality.VOICELESS_BILABIAL_PLOSIVE: Consonant.P,
}


def reduce_vowel(sound: VowelSound) -> VowelPhoneme:
    """Map a vowel sound to one of the five Russian vowels."""
    try:
        return VowelPhoneme(VOWEL_TABLE[sound.quality])
    except (KeyError, TypeError):
        raise UnsupportedPhonemeError(sound) from None


def reduce_consonant(sound: ConsonantSound) -> ConsonantPhoneme | PalatalizedOnlyPhoneme:
    """Map a consonant sound to a Russian consonant."""
    try:
        consonant = CONSONANT_TABLE[sound.quality]
    except (KeyError, TypeError):
        raise UnsupportedPhonemeError(sound) from None

    if isinstance(consonant, PalatalizedOnly):
        return PalatalizedOnlyPhoneme(consonant)
    return ConsonantPhoneme(consonant, is_palatalized=sound.is_palatalized)


def reduce_sound(sound: Sound) -> list[Phoneme]:
    """Reduce a single sound, doubling the phoneme when the sound is long.

    Args:
        sound: Sound descriptor.

    Returns:
        One phoneme, or two equal phonemes for a long sound.

    Raises:
        UnsupportedPhonemeError: If the sound has no Russian counterpart.
    """
    match sound:
        case VowelSound():
            phoneme: Phoneme = reduce_vowel(sound)
        case ConsonantSound():
            phoneme = reduce_consonant(sound)
        case Space():
            return [Separator()]
        case _:
            raise UnsupportedPhonemeError(sound)

    return [phoneme] * (2 if sound.is_long else 1)


def reduce_sounds(sounds: Iterable[Sound]) -> PhonemeSequence:
    """Reduce a sequence of sound descriptors to a phoneme sequence.

    Args:
        sounds: Sound descriptors in textual order.

    Returns:
        Immutable phoneme sequence in the same order.

    Raises:
        UnsupportedPhonemeError: On the first sound without a Russian counterpart.
    """
    phonemes = tuple(phoneme for sound in sounds for phoneme in reduce_sound(sound))
    logger.debug("Reduced sounds to %d phonemes", len(phonemes))
    return phonemes
