"""Parser for IPA notation text.

Turns a string such as ``"mʲːæːu"`` into sound descriptors. Each base symbol
may be followed by a length mark and, for consonants, a palatalization mark,
in either order. Whitespace separates words and stress marks are skipped.
"""

import logging
import unicodedata

from ipacyr.constants import (
    IGNORED_SYMBOLS,
    LENGTH_MARK,
    PALATALIZATION_MARK,
    SYMBOL_ALIASES,
)
from ipacyr.exceptions import NotationError
from ipacyr.sounds import (
    CONSONANT_SYMBOLS,
    VOWEL_SYMBOLS,
    ConsonantSound,
    Sound,
    Space,
    VowelSound,
)

logger = logging.getLogger(__name__)

MODIFIERS = frozenset({LENGTH_MARK, PALATALIZATION_MARK})


def _normalize(text: str) -> str:
    text = unicodedata.normalize("NFC", text)
    return "".join(SYMBOL_ALIASES.get(char, char) for char in text)


def parse_ipa(text: str) -> tuple[Sound, ...]:
    """Parse IPA notation into sound descriptors.

    Args:
        text: IPA notation, e.g. ``"nʲæ nʲæn"``.

    Returns:
        Sound descriptors in textual order.

    Raises:
        NotationError: If the text contains an unknown symbol or a misplaced
            or repeated modifier.

    Examples:
        >>> [type(sound).__name__ for sound in parse_ipa("nʲæ n")]
        ['ConsonantSound', 'VowelSound', 'Space', 'ConsonantSound']
    """
    text = _normalize(text)
    sounds: list[Sound] = []
    i = 0

    while i < len(text):
        char = text[i]

        if char.isspace():
            while i < len(text) and text[i].isspace():
                i += 1
            # Leading and trailing whitespace is not a word boundary
            if sounds and i < len(text):
                sounds.append(Space())
            continue

        if char in IGNORED_SYMBOLS:
            i += 1
            continue

        if char in MODIFIERS:
            raise NotationError(f"Modifier {char!r} without a preceding sound", text, i)

        is_vowel = char in VOWEL_SYMBOLS
        if not is_vowel and char not in CONSONANT_SYMBOLS:
            raise NotationError(f"Unknown symbol {char!r}", text, i)

        # Collect modifiers attached to this symbol
        start = i
        i += 1
        seen: set[str] = set()
        while i < len(text) and text[i] in MODIFIERS:
            modifier = text[i]
            if modifier in seen:
                raise NotationError(f"Repeated modifier {modifier!r}", text, i)
            if is_vowel and modifier == PALATALIZATION_MARK:
                raise NotationError("Palatalized vowel", text, i)
            seen.add(modifier)
            i += 1

        is_long = LENGTH_MARK in seen
        if is_vowel:
            sounds.append(VowelSound(VOWEL_SYMBOLS[char], is_long=is_long))
        else:
            sounds.append(
                ConsonantSound(
                    CONSONANT_SYMBOLS[char],
                    is_long=is_long,
                    is_palatalized=PALATALIZATION_MARK in seen,
                )
            )
        logger.debug("Parsed %r as %r", text[start:i], sounds[-1])

    return tuple(sounds)
