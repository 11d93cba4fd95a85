# Area: Game Tests
"""Tests for guess scoring."""

from collections import Counter

import pytest

from wordle_server._game.hint import HintMark, HintResult, score

C, P, A = HintMark.CORRECT, HintMark.PRESENT, HintMark.ABSENT


class TestScoreBasics:
    """Exact matches, misplaced letters and absent letters."""

    def test_crane_against_trace(self):
        """r, a and e line up; c is elsewhere; n is missing."""
        result = score("crane", "trace", 5)
        assert result.marks == (P, C, C, A, C)
        assert result.render() == "cRA-E"

    def test_all_correct(self):
        result = score("trace", "trace", 5)
        assert result.solved is True
        assert result.render() == "TRACE"

    def test_no_common_letters(self):
        result = score("world", "basis", 5)
        assert result.marks == (A, A, A, A, A)
        assert result.render() == "-----"

    def test_anagram_is_all_present(self):
        result = score("caret", "trace", 5)
        assert all(mark is P for mark in result)
        assert result.solved is False

    def test_result_length_matches_word_length(self):
        for guess, answer in [("cat", "act"), ("planet", "plants")]:
            assert len(score(guess, answer, len(guess))) == len(guess)

    def test_wrong_guess_length_raises(self):
        with pytest.raises(ValueError):
            score("cat", "trace", 5)


class TestDuplicateLetters:
    """A letter is never shown more often than it occurs in the answer."""

    def test_sissy_against_basis(self):
        """Answer has two s: the exact one plus the leftmost other one."""
        result = score("sissy", "basis", 5)
        assert result.marks == (P, P, C, A, A)
        assert result.render() == "siS--"

    def test_exact_match_wins_over_earlier_occurrence(self):
        """Only one l in the answer; the exact match takes it."""
        result = score("llama", "clown", 5)
        # l at index 1 lines up with clown[1]
        assert result.marks[1] is C
        assert result.marks[0] is A

    def test_repeated_letter_once_in_answer_marks_leftmost(self):
        result = score("geese", "those", 5)
        # e at index 4 is exact; the other two e's are spent
        assert result.marks == (A, A, A, C, C)

    def test_leftmost_present_when_no_exact_match(self):
        result = score("eerie", "alert", 5)
        assert result.marks[0] is P
        assert result.marks[1] is A
        assert result.marks[4] is A

    @pytest.mark.parametrize("guess,answer", [
        ("sissy", "basis"),
        ("geese", "those"),
        ("eerie", "alert"),
        ("mamma", "maxim"),
        ("array", "rayon"),
        ("hello", "world"),
    ])
    def test_marks_never_exceed_answer_counts(self, guess, answer):
        result = score(guess, answer, 5)
        shown = Counter(
            letter for letter, mark in zip(guess, result.marks)
            if mark in (C, P)
        )
        answer_counts = Counter(answer)
        for letter, count in shown.items():
            assert count <= answer_counts[letter]


class TestHintResult:
    """HintResult container behaviour."""

    def test_iteration_and_indexing(self):
        result = HintResult(guess="cat", marks=(C, A, P))
        assert list(result) == [C, A, P]
        assert result[2] is P

    def test_str_is_render(self):
        result = score("crane", "trace", 5)
        assert str(result) == result.render()

    def test_answer_shorter_than_guess(self):
        """Pinned answers may not match the word length; score what exists."""
        result = score("hello", "hel", 5)
        assert result.marks[:3] == (C, C, C)
        assert result.marks[3:] == (A, A)

    def test_answer_longer_than_guess_counts_scored_positions_only(self):
        """Letters past the word length in a pinned answer give no hints."""
        result = score("aab", "bxxaa", 3)
        assert result.marks == (A, A, P)
        assert result.render() == "--b"
