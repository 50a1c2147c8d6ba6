"""Tests for Cyrillic rendering of phoneme sequences."""

import pytest

from builders import J, Q, SEP, c, v
from ipacyr.phonemes import Consonant, Vowel
from ipacyr.renderer import (
    CONSONANT_GLYPHS,
    VOWEL_GLYPHS,
    next_is_vowel,
    prev_is_consonant,
    prev_is_hard_trigger,
    prev_palatalized,
    render,
    render_units,
)

C = Consonant
V = Vowel


class TestWords:
    """Tests for whole-word rendering."""

    def test_na(self) -> None:
        assert render((c(C.N, True), v(V.A))) == "ня"

    def test_hard_sign(self) -> None:
        phonemes = (c(C.P), v(V.O), c(C.D), J, v(V.E), c(C.Z), c(C.D))
        assert render(phonemes) == "подъезд"

    def test_final_j(self) -> None:
        assert render((c(C.H), v(V.U), J)) == "хуй"

    def test_intervocalic_j(self) -> None:
        phonemes = (v(V.A), c(C.H), v(V.U), J, v(V.E), c(C.T, True))
        assert render(phonemes) == "ахуеть"

    def test_initial_j(self) -> None:
        phonemes = (J, v(V.E), c(C.B), v(V.A), c(C.T, True))
        assert render(phonemes) == "ебать"

    def test_w(self) -> None:
        phonemes = (c(C.W, True), v(V.U), c(C.W), v(V.A))
        assert render(phonemes) == "щуша"

    def test_q(self) -> None:
        phonemes = (Q, v(V.A), c(C.K), c(C.R), v(V.A))
        assert render(phonemes) == "чакра"

    def test_separator(self) -> None:
        phonemes = (c(C.N, True), v(V.A), SEP, c(C.N, True), v(V.A), c(C.N))
        assert render(phonemes) == "ня нян"

    def test_empty(self) -> None:
        assert render(()) == ""


class TestVowels:
    """Tests for vowel iotation."""

    @pytest.mark.parametrize("vowel", list(Vowel))
    def test_plain_at_start(self, vowel: Vowel) -> None:
        assert render((v(vowel),)) == VOWEL_GLYPHS[vowel][1]

    @pytest.mark.parametrize("vowel", list(Vowel))
    def test_iotated_after_soft_consonant(self, vowel: Vowel) -> None:
        assert render_units((c(C.L, True), v(vowel)))[1] == VOWEL_GLYPHS[vowel][0]

    @pytest.mark.parametrize("vowel", list(Vowel))
    def test_iotated_after_j(self, vowel: Vowel) -> None:
        assert render_units((J, v(vowel)))[1] == VOWEL_GLYPHS[vowel][0]

    def test_plain_after_hard_consonant(self) -> None:
        assert render((c(C.L), v(V.O))) == "ло"

    def test_plain_after_vowel(self) -> None:
        assert render((v(V.A), v(V.U))) == "ау"

    def test_plain_after_separator(self) -> None:
        assert render((c(C.N, True), SEP, v(V.A))) == "нь а"

    def test_plain_after_soft_w(self) -> None:
        assert render((c(C.W, True), v(V.A))) == "ща"

    def test_plain_after_q(self) -> None:
        assert render((Q, v(V.U))) == "чу"

    def test_plain_after_hard_w(self) -> None:
        assert render((c(C.W), v(V.I))) == "шы"


class TestConsonants:
    """Tests for consonant spelling."""

    @pytest.mark.parametrize("consonant", list(CONSONANT_GLYPHS))
    def test_soft_sign_at_end(self, consonant: Consonant) -> None:
        assert render((c(consonant, True),)) == CONSONANT_GLYPHS[consonant][1]

    @pytest.mark.parametrize("consonant", list(CONSONANT_GLYPHS))
    def test_no_soft_sign_before_vowel(self, consonant: Consonant) -> None:
        units = render_units((c(consonant, True), v(V.A)))
        assert units[0] == CONSONANT_GLYPHS[consonant][0]

    def test_soft_sign_before_consonant(self) -> None:
        assert render((c(C.T, True), c(C.K))) == "тьк"

    def test_soft_sign_before_separator(self) -> None:
        assert render((c(C.M, True), SEP)) == "мь "

    def test_hard_consonant(self) -> None:
        assert render((c(C.X),)) == "ж"

    def test_w_never_takes_soft_sign(self) -> None:
        assert render((c(C.W, True),)) == "щ"
        assert render((c(C.W, True), c(C.K))) == "щк"
        assert render((c(C.W),)) == "ш"

    def test_c_shares_s_spelling(self) -> None:
        assert CONSONANT_GLYPHS[C.C] == CONSONANT_GLYPHS[C.S]
        assert render((c(C.C),)) == "с"
        assert render((c(C.C, True),)) == "сь"

    def test_every_consonant_has_a_spelling(self) -> None:
        assert set(CONSONANT_GLYPHS) | {C.W} == set(Consonant)


class TestPalatalizedOnly:
    """Tests for й and ч."""

    def test_j_before_consonant(self) -> None:
        assert render((v(V.O), J, c(C.T))) == "ойт"

    def test_j_alone(self) -> None:
        assert render((J,)) == "й"

    def test_j_between_consonant_and_vowel(self) -> None:
        assert render_units((c(C.S), J, v(V.A)))[1] == "ъ"

    def test_j_after_soft_consonant_before_vowel(self) -> None:
        assert render_units((c(C.S, True), J, v(V.A)))[1] == "ъ"

    def test_j_after_vowel_before_vowel(self) -> None:
        assert render_units((v(V.A), J, v(V.A)))[1] == ""

    def test_j_after_separator_before_vowel(self) -> None:
        assert render((v(V.A), SEP, J, v(V.U))) == "а ю"

    def test_double_j(self) -> None:
        # The first й has no vowel after it, the second is preceded by a consonant
        assert render((J, J, v(V.A))) == "йъя"

    @pytest.mark.parametrize(
        "phonemes",
        [(Q,), (Q, v(V.A)), (c(C.T), Q), (Q, Q)],
    )
    def test_q_is_always_ch(self, phonemes: tuple) -> None:
        assert render_units(phonemes)[phonemes.index(Q)] == "ч"


class TestPredicates:
    """Tests for neighbor predicates."""

    def test_boundaries(self) -> None:
        phonemes = (c(C.N, True),)
        assert not prev_palatalized(phonemes, 0)
        assert not prev_is_consonant(phonemes, 0)
        assert not prev_is_hard_trigger(phonemes, 0)
        assert not next_is_vowel(phonemes, 0)

    def test_prev_palatalized(self) -> None:
        phonemes = (c(C.N, True), v(V.A), c(C.N), v(V.A), J, v(V.A), SEP, v(V.A))
        assert [prev_palatalized(phonemes, i) for i in range(1, len(phonemes))] == [
            True, False, False, False, True, False, False,
        ]

    def test_prev_is_consonant(self) -> None:
        phonemes = (c(C.N), Q, J, v(V.A), SEP, v(V.A))
        assert [prev_is_consonant(phonemes, i) for i in range(1, len(phonemes))] == [
            True, True, True, False, False,
        ]

    def test_prev_is_hard_trigger(self) -> None:
        assert prev_is_hard_trigger((c(C.W, True), v(V.A)), 1)
        assert prev_is_hard_trigger((Q, v(V.A)), 1)
        assert not prev_is_hard_trigger((c(C.W), v(V.A)), 1)
        assert not prev_is_hard_trigger((J, v(V.A)), 1)
        assert not prev_is_hard_trigger((c(C.N, True), v(V.A)), 1)

    def test_next_is_vowel(self) -> None:
        phonemes = (c(C.N), v(V.A), J, SEP, c(C.M))
        assert [next_is_vowel(phonemes, i) for i in range(len(phonemes))] == [
            True, False, False, False, False,
        ]


class TestLocality:
    """Changing one phoneme only changes the spelling of it and its neighbors."""

    ALTERNATIVES = [v(V.A), v(V.I), c(C.N), c(C.N, True), c(C.W, True), J, Q, SEP]

    def test_context_is_one_position_wide(self) -> None:
        base = (c(C.P), v(V.O), c(C.D), J, v(V.E), c(C.Z), c(C.D, True), v(V.U))
        base_units = render_units(base)

        for k in range(len(base)):
            for replacement in self.ALTERNATIVES:
                changed = base[:k] + (replacement,) + base[k + 1:]
                units = render_units(changed)
                assert len(units) == len(base)
                for j, unit in enumerate(units):
                    if abs(j - k) > 1:
                        assert unit == base_units[j]

    def test_render_is_concatenation_of_units(self) -> None:
        phonemes = (J, v(V.E), c(C.B), v(V.A), c(C.T, True), SEP, Q, v(V.A))
        assert render(phonemes) == "".join(render_units(phonemes))

    def test_input_is_not_modified(self) -> None:
        phonemes = (c(C.N, True), v(V.A))
        snapshot = tuple(phonemes)
        render(phonemes)
        assert phonemes == snapshot


class TestExhaustiveness:
    """Tests for values outside the phoneme union."""

    def test_unknown_phoneme_is_rejected(self) -> None:
        with pytest.raises(AssertionError):
            render(("a",))  # type: ignore[arg-type]
