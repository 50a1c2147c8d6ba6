"""Simplified Russian phoneme inventory."""

from dataclasses import dataclass
from enum import Enum


class Vowel(Enum):
    A = "a"
    E = "e"
    I = "i"  # noqa: E741
    O = "o"
    U = "u"


class Consonant(Enum):
    P = "p"
    B = "b"
    F = "f"
    V = "v"
    K = "k"
    G = "g"
    T = "t"
    D = "d"
    W = "w"  # ш / щ
    X = "x"  # ж
    S = "s"
    Z = "z"
    L = "l"
    M = "m"
    N = "n"
    R = "r"
    H = "h"  # х
    C = "c"


class PalatalizedOnly(Enum):
    """Consonants that are always soft."""

    J = "j"  # й
    Q = "q"  # ч


@dataclass(frozen=True, slots=True)
class VowelPhoneme:
    vowel: Vowel

    def __str__(self) -> str:
        return self.vowel.name


@dataclass(frozen=True, slots=True)
class ConsonantPhoneme:
    consonant: Consonant
    is_palatalized: bool = False

    def __str__(self) -> str:
        return self.consonant.name + ("'" if self.is_palatalized else "")


@dataclass(frozen=True, slots=True)
class PalatalizedOnlyPhoneme:
    consonant: PalatalizedOnly

    def __str__(self) -> str:
        return self.consonant.name


@dataclass(frozen=True, slots=True)
class Separator:
    def __str__(self) -> str:
        return "_"


Phoneme = VowelPhoneme | ConsonantPhoneme | PalatalizedOnlyPhoneme | Separator

# Built once per conversion and only ever read afterwards.
PhonemeSequence = tuple[Phoneme, ...]


def format_phonemes(phonemes: PhonemeSequence) -> str:
    """Format a phoneme sequence for display, e.g. ``N' A _ N' A N``."""
    return " ".join(str(phoneme) for phoneme in phonemes)
