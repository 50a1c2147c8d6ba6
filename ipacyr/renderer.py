"""Cyrillic spelling of a phoneme sequence.

Every phoneme is spelled by looking at itself and at most one neighbor on
each side:

* a vowel takes its iotated letter (я, е, ...) after a soft consonant,
  except after щ and ч, which are spelled soft already;
* a soft consonant gets a soft sign only when no vowel follows to carry
  the softness;
* й is written as such before a non-vowel, disappears into the iotated
  vowel at the start of a syllable, and becomes ъ between a consonant and
  a vowel.
"""

import logging
from typing import Final, assert_never

from ipacyr.constants import HARD_SIGN, WORD_SEPARATOR
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

logger = logging.getLogger(__name__)

# (iotated, plain)
VOWEL_GLYPHS: Final[dict[Vowel, tuple[str, str]]] = {
    Vowel.A: ("я", "а"),
    Vowel.E: ("е", "э"),
    Vowel.I: ("и", "ы"),
    Vowel.O: ("ё", "о"),
    Vowel.U: ("ю", "у"),
}

# (hard, soft); W is spelled separately
CONSONANT_GLYPHS: Final[dict[Consonant, tuple[str, str]]] = {
    Consonant.P: ("п", "пь"),
    Consonant.B: ("б", "бь"),
    Consonant.F: ("ф", "фь"),
    Consonant.V: ("в", "вь"),
    Consonant.K: ("к", "кь"),
    Consonant.G: ("г", "гь"),
    Consonant.T: ("т", "ть"),
    Consonant.D: ("д", "дь"),
    Consonant.X: ("ж", "жь"),
    Consonant.S: ("с", "сь"),
    Consonant.Z: ("з", "зь"),
    Consonant.L: ("л", "ль"),
    Consonant.M: ("м", "мь"),
    Consonant.N: ("н", "нь"),
    Consonant.R: ("р", "рь"),
    Consonant.H: ("х", "хь"),
    Consonant.C: ("с", "сь"),
}

# (palatalized, plain); never followed by a soft sign
W_GLYPHS: Final[tuple[str, str]] = ("щ", "ш")

Q_GLYPH: Final[str] = "ч"
J_GLYPH: Final[str] = "й"


def _previous(phonemes: PhonemeSequence, i: int) -> Phoneme | None:
    return phonemes[i - 1] if i > 0 else None


def _next(phonemes: PhonemeSequence, i: int) -> Phoneme | None:
    return phonemes[i + 1] if i + 1 < len(phonemes) else None


def prev_palatalized(phonemes: PhonemeSequence, i: int) -> bool:
    """Whether the phoneme before ``i`` is a soft consonant."""
    match _previous(phonemes, i):
        case ConsonantPhoneme(is_palatalized=is_palatalized):
            return is_palatalized
        case PalatalizedOnlyPhoneme():
            return True
        case _:
            return False


def prev_is_consonant(phonemes: PhonemeSequence, i: int) -> bool:
    """Whether the phoneme before ``i`` is any consonant."""
    return isinstance(_previous(phonemes, i), ConsonantPhoneme | PalatalizedOnlyPhoneme)


def prev_is_hard_trigger(phonemes: PhonemeSequence, i: int) -> bool:
    """Whether the phoneme before ``i`` is щ or ч, after which vowels stay plain."""
    match _previous(phonemes, i):
        case ConsonantPhoneme(consonant=Consonant.W, is_palatalized=True):
            return True
        case PalatalizedOnlyPhoneme(consonant=PalatalizedOnly.Q):
            return True
        case _:
            return False


def next_is_vowel(phonemes: PhonemeSequence, i: int) -> bool:
    """Whether the phoneme after ``i`` is a vowel."""
    return isinstance(_next(phonemes, i), VowelPhoneme)


def render_vowel(phonemes: PhonemeSequence, i: int, phoneme: VowelPhoneme) -> str:
    iotated, plain = VOWEL_GLYPHS[phoneme.vowel]
    if prev_palatalized(phonemes, i) and not prev_is_hard_trigger(phonemes, i):
        return iotated
    return plain


def render_consonant(phonemes: PhonemeSequence, i: int, phoneme: ConsonantPhoneme) -> str:
    if phoneme.consonant is Consonant.W:
        palatalized, plain = W_GLYPHS
        return palatalized if phoneme.is_palatalized else plain

    hard, soft = CONSONANT_GLYPHS[phoneme.consonant]
    # Before a vowel the softness is carried by the iotated vowel letter.
    if phoneme.is_palatalized and not next_is_vowel(phonemes, i):
        return soft
    return hard


def render_palatalized_only(
    phonemes: PhonemeSequence, i: int, phoneme: PalatalizedOnlyPhoneme
) -> str:
    match phoneme.consonant:
        case PalatalizedOnly.Q:
            return Q_GLYPH
        case PalatalizedOnly.J:
            if not next_is_vowel(phonemes, i):
                return J_GLYPH
            if prev_is_consonant(phonemes, i):
                return HARD_SIGN
            return ""
        case _:
            assert_never(phoneme.consonant)


def render_at(phonemes: PhonemeSequence, i: int) -> str:
    """Spell the phoneme at position ``i``.

    Args:
        phonemes: Phoneme sequence.
        i: Position to spell.

    Returns:
        Zero, one or two Cyrillic characters, or a space for a separator.
    """
    phoneme = phonemes[i]
    match phoneme:
        case VowelPhoneme():
            return render_vowel(phonemes, i, phoneme)
        case ConsonantPhoneme():
            return render_consonant(phonemes, i, phoneme)
        case PalatalizedOnlyPhoneme():
            return render_palatalized_only(phonemes, i, phoneme)
        case Separator():
            return WORD_SEPARATOR
        case _:
            assert_never(phoneme)


def render_units(phonemes: PhonemeSequence) -> tuple[str, ...]:
    """Spell each phoneme of the sequence, position by position."""
    return tuple(render_at(phonemes, i) for i in range(len(phonemes)))


def render(phonemes: PhonemeSequence) -> str:
    """Render a phoneme sequence as Cyrillic text.

    Args:
        phonemes: Phoneme sequence in textual order.

    Returns:
        Cyrillic text.
    """
    text = "".join(render_units(phonemes))
    logger.debug("Rendered %d phonemes as %r", len(phonemes), text)
    return text
