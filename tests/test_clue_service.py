from collections import Counter

from wordl.models.game import Clue, CluedLetter, Difficulty
from wordl.services.clue_service import (
    best_clues, compute_clue, describe_clue, emoji_row, first_violation, ordinal, violation
)

A, P, C = Clue.ABSENT, Clue.PRESENT, Clue.CORRECT


def clues_of(guess, target):
    return [cl.clue for cl in compute_clue(guess, target)]


def test_clue_order_is_absent_present_correct():
    assert A < P < C
    assert C > P > A
    assert max([P, A, C, P]) == C
    assert sorted([C, A, P]) == [A, P, C]


def test_exact_and_present_matches():
    assert clues_of("adieu", "apple") == [C, A, A, P, A]
    assert clues_of("apple", "apple") == [C, C, C, C, C]


def test_excess_letters_are_absent():
    # Only one s in the target, and it is matched in place
    assert clues_of("sassy", "mushy") == [A, A, C, A, C]


def test_correct_takes_priority_over_present():
    assert clues_of("ppppp", "apple") == [A, C, C, A, A]
    assert clues_of("speed", "abide") == [A, A, P, A, P]


def test_non_absent_count_never_exceeds_target_count():
    pairs = [("sassy", "mushy"), ("eerie", "there"), ("lllll", "hello"), ("geese", "eagle")]
    for guess, target in pairs:
        result = compute_clue(guess, target)
        assert len(result) == len(guess)
        marked = Counter(cl.letter for cl in result if cl.clue != Clue.ABSENT)
        target_counts = Counter(target)
        for letter, count in marked.items():
            assert count <= target_counts[letter]


def test_clue_keeps_letters_in_order():
    assert [cl.letter for cl in compute_clue("crane", "apple")] == list("crane")


def test_positions_past_target_have_no_clue():
    result = compute_clue("apples", "apple")
    assert result[-1] == CluedLetter("s", None)


def test_describe_groups_letters():
    assert describe_clue(compute_clue("adieu", "apple")) == "A correct. E elsewhere. D, I, U not in word."


def test_describe_extremes():
    assert describe_clue(compute_clue("apple", "apple")) == "A, P, P, L, E correct."
    assert describe_clue(compute_clue("sound", "apple")) == "S, O, U, N, D not in word."


def test_ordinal():
    assert [ordinal(n) for n in (1, 2, 3, 4, 11, 12, 13, 21, 22)] == \
        ["1st", "2nd", "3rd", "4th", "11th", "12th", "13th", "21st", "22nd"]


def test_hard_mode_requires_correct_letter_in_place():
    clues = compute_clue("cigar", "crane")
    assert violation(Difficulty.HARD, clues, "stone") == "1st letter must be C"


def test_hard_mode_requires_present_letters():
    clues = compute_clue("cigar", "crane")
    assert violation(Difficulty.HARD, clues, "coast") == "Guess must contain R"


def test_hard_mode_accepts_consistent_guess():
    clues = compute_clue("cigar", "crane")
    assert violation(Difficulty.HARD, clues, "caret") is None
    assert violation(Difficulty.HARD, clues, "crane") is None


def test_easy_and_normal_never_constrain():
    clues = compute_clue("cigar", "crane")
    assert violation(Difficulty.NORMAL, clues, "stone") is None
    assert violation(Difficulty.EASY, clues, "stone") is None


def test_first_violation_checks_every_prior_guess():
    # "slate" reveals A and E in place; "cigar" later reveals C, A and R
    guesses = ["slate", "cigar"]
    assert first_violation(Difficulty.HARD, "crane", guesses, "caret") == "3rd letter must be A"
    assert first_violation(Difficulty.HARD, "crane", guesses, "crane") is None
    assert first_violation(Difficulty.NORMAL, "crane", guesses, "caret") is None


def test_first_violation_does_not_forget_older_clues():
    # "spine" satisfies the latest guess but drops the C from the first one
    assert violation(Difficulty.HARD, compute_clue("stone", "crane"), "spine") is None
    assert first_violation(Difficulty.HARD, "crane", ["cigar", "stone"], "spine") == "1st letter must be C"


def test_best_clues_keeps_highest_clue_per_letter():
    info = best_clues("apple", ["lapse", "apply"])
    assert info == {"l": C, "a": C, "p": C, "s": A, "e": C, "y": A}


def test_best_clues_never_downgrades():
    info = best_clues("apple", ["apply", "paper"])
    assert info["p"] == C
    assert info["a"] == C


def test_emoji_rows():
    clues = compute_clue("adieu", "apple")
    assert emoji_row(clues) == "🟩⬛⬛🟨⬛"
    assert emoji_row(clues, color_blind=True) == "🟧⬛⬛🟦⬛"
