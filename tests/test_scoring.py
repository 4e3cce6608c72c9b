"""
Test suite for the score calculator.

Covers the worked scoring examples, streak bonuses, hint deductions,
the optional zero clamp and the score breakdown.
"""

import pytest

from cascade.engine import (
    GameConfig,
    PuzzleWord,
    ScoringConfig,
    calculate_final_score,
    current_streak,
    get_score_breakdown,
    guess_word,
    letter_outcomes,
    reveal_hint,
    skip_to_words,
    streak_bonus,
    streak_bonus_total,
    submit_all_words,
    word_multiplier,
    word_score,
)
from cascade.engine.scoring import column_hint_ordinals, hint_deduction, hint_penalty, round_half_up

from conftest import MISSES, guess_all, make_puzzle, type_all_answers, type_answer


def scored_word(word: str, blanks: int, **update) -> PuzzleWord:
    """A graded-correct word with a frozen blank count."""
    return PuzzleWord.create(word).model_copy(update={
        "blanks_at_word_phase": blanks,
        "guessed": True,
        "correct": True,
        **update,
    })


class TestWordScore:
    """Test cases for word_score."""

    def test_two_blanks_column_zero(self):
        """Column 0, two blanks, no hints scores 180."""
        assert word_score(scored_word("PEAR", 2), 0) == 180

    def test_multiplier_capped(self):
        """Column 4 with five blanks is capped at 2.5x."""
        word = scored_word("TRAVEL", 5)
        assert word_multiplier(word) == 2.5
        assert word_score(word, 4) == 500

    def test_auto_completed(self):
        """Auto-completed column 1 word scores 150 x 2 + 50."""
        word = scored_word("LEMON", 0, auto_completed=True)
        assert word_score(word, 1) == 350

    def test_zero_blanks_scores_as_auto_complete(self):
        """Zero blanks at the word phase uses the auto-complete formula even without the flag."""
        assert word_score(scored_word("LEMON", 0), 1) == 350

    def test_one_blank(self):
        """One blank on a middle column: 150 x 1.4 = 210."""
        assert word_score(scored_word("AMBER", 1), 2) == 210

    def test_custom_config(self):
        """Base scores come from the config."""
        config = ScoringConfig(base_scores=[10, 10, 10, 10, 10])
        assert word_score(scored_word("PEAR", 2), 0, config) == 18

    def test_round_half_up(self):
        """Halves round up."""
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(2.49) == 2


class TestHintPenalty:
    """Test cases for hint deductions."""

    def test_first_hint_free(self):
        """The first hint of the game costs nothing."""
        word = scored_word("NORTH", 4, hints_used=1, hint_ordinals=(0,))
        assert hint_deduction(word) == 0
        assert word_score(word, 3) == 375

    def test_second_hint_costs(self):
        """The second hint deducts 0.35 from the capped multiplier."""
        word = scored_word("TRAVEL", 5, hints_used=1, hint_ordinals=(1,))
        assert word_multiplier(word) == pytest.approx(2.15)
        assert word_score(word, 4) == 430

    def test_table_extends_with_last_entry(self):
        """Hints past the table use its last entry."""
        assert hint_penalty(2) == 0.5
        assert hint_penalty(7) == 0.5

    def test_word_scope_restarts_per_word(self):
        """With word scope, a word's first hint is free regardless of game order."""
        config = ScoringConfig(hint_penalty_scope="word")
        word = scored_word("NORTH", 4, hints_used=2, hint_ordinals=(1, 2))
        assert hint_deduction(word, config) == pytest.approx(0.35)

    def test_column_ordinals_count_left_columns(self):
        """A column's hints are numbered after every hint on the columns before it."""
        words = [
            PuzzleWord.create("PEAR").model_copy(update={"hints_used": 1, "hint_ordinals": (1,)}),
            PuzzleWord.create("LEMON"),
            PuzzleWord.create("AMBER").model_copy(update={"hints_used": 2, "hint_ordinals": (0, 2)}),
        ]
        assert column_hint_ordinals(words, 0) == (0,)
        assert column_hint_ordinals(words, 1) == ()
        assert column_hint_ordinals(words, 2) == (1, 2)

    def test_multiplier_floor(self):
        """Deductions never push the multiplier below the floor."""
        config = ScoringConfig(hint_penalties=[2.0])
        word = scored_word("PEAR", 1, hints_used=1, hint_ordinals=(0,))
        assert word_multiplier(word, config) == 0.1
        assert word_score(word, 0, config) == 10


class TestStreaks:
    """Test cases for letter streak bonuses."""

    def test_bonus_table(self):
        """Streak bonuses follow the table and saturate."""
        assert [streak_bonus(n) for n in range(8)] == [0, 10, 20, 35, 50, 60, 70, 70]

    def test_example_sequence(self, puzzle):
        """Hit, hit, hit, miss, hit earns 10 + 20 + 35 + 0 + 10."""
        played = guess_all(puzzle, ["E", "R", "M", "S", "O"])
        assert letter_outcomes(played) == [True, True, True, False, True]
        assert streak_bonus_total(played) == 75
        assert played.score == 75
        assert current_streak(played) == 1

    def test_key_letter_is_not_a_hit(self, puzzle):
        """A letter found only at position 0 is a miss."""
        played = guess_all(puzzle, ["P"])
        assert letter_outcomes(played) == [False]
        assert played.score == 0


class TestFinalScore:
    """Test cases for whole-game scores."""

    def test_all_correct(self, word_phase):
        """Every word right: streak + words + cascade."""
        done = submit_all_words(type_all_answers(word_phase))
        assert done.score == 10 + 180 + 330 + 330 + 375 + 500 + 500
        assert calculate_final_score(done) == done.score

    def test_one_wrong_word(self, word_phase):
        """A wrong word costs exactly 25 and the cascade bonus."""
        typed = type_all_answers(word_phase)
        typed = type_answer(typed, 3, "NORTS")
        done = submit_all_words(typed)
        assert done.score == 10 + 180 + 330 + 330 - 25 + 500
        assert done.cascade_locked
        assert calculate_final_score(done) == done.score

    def test_negative_score_without_clamp(self):
        """With the clamp disabled, wrong guesses can push the score below zero."""
        config = GameConfig(scoring=ScoringConfig(clamp_score_at_zero=False))
        played = skip_to_words(guess_all(make_puzzle(config), MISSES[:4]))
        done = submit_all_words(played)
        assert done.score == -125
        assert calculate_final_score(done) == -125

    def test_clamped_by_default(self, word_phase):
        """Submitting empty words under the default rules stops at zero, not -115."""
        done = submit_all_words(word_phase)
        assert done.score == 0
        assert calculate_final_score(done) == 0

    def test_clamp_at_zero(self):
        """With the clamp enabled, the score never drops below zero."""
        config = GameConfig(scoring=ScoringConfig(clamp_score_at_zero=True))
        played = skip_to_words(guess_all(make_puzzle(config), MISSES[:4]))
        done = submit_all_words(played)
        assert done.score == 0
        assert calculate_final_score(done) == 0

    def test_hint_ordinals_are_game_wide(self):
        """Under the "game" scope later hints cost more, whichever word they land on."""
        config = GameConfig(scoring=ScoringConfig(hint_penalty_scope="game"))
        word_phase = skip_to_words(guess_all(make_puzzle(config), ["E", "S", "K", "J"]))
        hinted = reveal_hint(word_phase, 3, 1)  # free
        hinted = reveal_hint(hinted, 4, 1)  # 0.35
        hinted = reveal_hint(hinted, 3, 2)  # 0.5
        done = submit_all_words(type_all_answers(hinted))
        north, travel = done.words[3], done.words[4]
        assert north.hint_ordinals == (0, 2)
        assert travel.hint_ordinals == (1,)
        assert word_score(north, 3, config.scoring) == 300  # 150 x (2.5 - 0.5)
        assert word_score(travel, 4, config.scoring) == 430  # 200 x (2.5 - 0.35)
        assert calculate_final_score(done) == done.score

    def test_hint_ordinals_follow_columns_by_default(self, word_phase):
        """Hints are numbered left to right by column, whatever order they were taken in."""
        last_first = reveal_hint(reveal_hint(word_phase, 4, 1), 0, 2)
        first_first = reveal_hint(reveal_hint(word_phase, 0, 2), 4, 1)

        scores = []
        for hinted in (last_first, first_first):
            done = submit_all_words(type_all_answers(hinted))
            assert done.words[0].hint_ordinals == (0,)
            assert done.words[4].hint_ordinals == (1,)
            assert calculate_final_score(done) == done.score
            scores.append(done.score)
        # PEAR's hint is free, TRAVEL pays 200 x (2.5 - 0.35)
        assert scores == [2155, 2155]
        assert scores[0] == 10 + 180 + 330 + 330 + 375 + 430 + 500

    def test_column_ordinals_fixed_when_graded(self, word_phase):
        """Hints taken on a left column after a word is graded do not reprice it."""
        hinted = reveal_hint(word_phase, 4, 1)
        graded = guess_word(hinted, 4, "TRAVEL")
        assert graded.words[4].hint_ordinals == (0,)
        later = reveal_hint(graded, 0, 2)
        done = submit_all_words(type_all_answers(later))
        assert done.words[4].hint_ordinals == (0,)
        assert done.words[0].hint_ordinals == (0,)
        assert calculate_final_score(done) == done.score


class TestScoreBreakdown:
    """Test cases for get_score_breakdown."""

    def test_pending_rows(self, puzzle):
        """Before grading every word is 'Not graded' and the cascade is pending."""
        rows = get_score_breakdown(puzzle)
        assert len(rows) == 6
        assert all(r.detail == "Not graded" for r in rows[:5])
        assert rows[-1].label == "Cascade"
        assert rows[-1].detail == "Pending"

    def test_completed_rows(self, word_phase):
        """Completed puzzle lists the streak, every word and the cascade bonus."""
        done = submit_all_words(type_all_answers(word_phase))
        rows = get_score_breakdown(done)
        assert rows[0].label == "Letter Streak Bonus"
        assert rows[0].points == 10
        assert rows[1].label == "Word 1: PEAR"
        assert rows[1].points == 180
        assert rows[1].detail == "100 × 1.80"
        assert rows[-1].label == "Cascade Bonus: AMBRA"
        assert rows[-1].points == 500
        assert sum(r.points for r in rows) == done.score

    def test_incorrect_row(self, word_phase):
        """Wrong words show the penalty and the cascade shows no bonus."""
        done = submit_all_words(word_phase)
        rows = get_score_breakdown(done)
        assert rows[1].detail == "Incorrect (-25)"
        assert rows[1].points == -25
        assert rows[-1].detail == "Incorrect guess - no bonus"

    def test_auto_label(self, puzzle):
        """Auto-completed words carry the (auto) label."""
        played = skip_to_words(guess_all(puzzle, ["E", "M", "O", "N"]))
        done = submit_all_words(type_all_answers(played))
        rows = get_score_breakdown(done)
        assert any(r.label == "Word 2 (auto): LEMON" and r.points == 350 for r in rows)
