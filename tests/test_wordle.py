"""
Test suite for the word-guess evaluator.

Covers:
- Letter classification with repeated letters
- Typing, deleting and submitting guesses
- Win and loss conditions
- Keyboard hints and persistence
"""

import pytest
from pydantic import ValidationError

from almanac.puzzles import LetterState, WordleGame, WordleLevel, WordleStateData, classify

C, P, A = LetterState.CORRECT, LetterState.PRESENT, LetterState.ABSENT


class TestClassify:
    """Tests for per-letter feedback."""

    def test_repeated_letters(self):
        """Surplus repeats of a letter are absent once its budget is spent."""
        assert classify("LOLLY", "ALLOW") == [P, P, C, A, A]

    def test_all_correct(self):
        """The target itself is all correct."""
        assert classify("CRANE", "CRANE") == [C] * 5

    def test_all_absent(self):
        """No shared letters gives all absent."""
        assert classify("FJORD", "BATHE") == [A] * 5

    def test_exact_match_takes_priority(self):
        """An exact match consumes the letter before earlier positions see it."""
        assert classify("EERIE", "THREE") == [P, A, C, A, C]

    def test_single_target_letter_guessed_twice(self):
        """Only the first non-exact occurrence of a single letter is present."""
        assert classify("SPEED", "ABIDE") == [A, A, P, A, P]

    def test_case_insensitive(self):
        """Lowercase guesses and targets are compared uppercase."""
        assert classify("crane", "CRANE") == classify("CRANE", "crane") == [C] * 5


class TestTyping:
    """Tests for building the guess in progress."""

    def test_append_and_delete(self):
        """Letters are uppercased and removed from the end."""
        game = WordleGame(target_word="crane")
        for letter in "sla":
            game.append_letter(letter)
        assert game.current_attempt == "SLA"
        game.delete_last_letter()
        assert game.current_attempt == "SL"

    def test_append_stops_at_word_length(self):
        """Typing beyond the word length is ignored."""
        game = WordleGame(target_word="CAT")
        for letter in "DOGS":
            game.append_letter(letter)
        assert game.current_attempt == "DOG"

    def test_non_letters_ignored(self):
        """Digits, punctuation and multi-character input are ignored."""
        game = WordleGame(target_word="CRANE")
        for value in ["1", "!", "ab", ""]:
            game.append_letter(value)
        assert game.current_attempt == ""

    def test_delete_on_empty_is_noop(self):
        """Deleting with nothing typed does nothing."""
        game = WordleGame(target_word="CRANE")
        game.delete_last_letter()
        assert game.current_attempt == ""


class TestGuessing:
    """Tests for submitting guesses and terminal states."""

    def test_wrong_length_ignored(self):
        """Guesses of the wrong length are not recorded."""
        game = WordleGame(target_word="CRANE")
        game.submit_guess("CAT")
        assert game.guesses == []

    def test_win(self):
        """Guessing the target wins and completes the game."""
        game = WordleGame(target_word="CRANE")
        game.submit_guess("slate")
        game.submit_guess("crane")

        assert game.guesses == ["SLATE", "CRANE"]
        assert game.is_won is True
        assert game.is_over is False
        assert game.is_complete is True

    def test_submit_clears_current_attempt(self):
        """The typed attempt is cleared after submitting."""
        game = WordleGame(target_word="CRANE")
        for letter in "SLATE":
            game.append_letter(letter)
        game.submit_guess(game.current_attempt)
        assert game.current_attempt == ""
        assert game.remaining_attempts == 5

    def test_loss_after_max_attempts(self):
        """Running out of attempts without the word ends the game."""
        game = WordleGame(target_word="CRANE", max_attempts=2)
        game.submit_guess("SLATE")
        game.submit_guess("PIANO")

        assert game.is_won is False
        assert game.is_over is True
        assert game.remaining_attempts == 0

    def test_no_moves_after_completion(self):
        """A finished game ignores further input."""
        game = WordleGame(target_word="CRANE")
        game.submit_guess("CRANE")
        game.submit_guess("SLATE")
        game.append_letter("A")

        assert game.guesses == ["CRANE"]
        assert game.current_attempt == ""

    def test_win_on_last_attempt_is_not_over(self):
        """Winning with the final attempt is a win, not a loss."""
        game = WordleGame(target_word="CRANE", max_attempts=1)
        game.submit_guess("CRANE")
        assert game.is_won is True
        assert game.is_over is False


class TestHintsAndState:
    """Tests for evaluations, keyboard states and persistence."""

    def test_evaluations_follow_guesses(self):
        """One feedback row per guess."""
        game = WordleGame(target_word="ALLOW")
        game.submit_guess("LOLLY")
        game.submit_guess("ALLOW")
        assert game.evaluations() == [[P, P, C, A, A], [C] * 5]

    def test_keyboard_keeps_best_state(self):
        """A letter once correct stays correct on the keyboard."""
        game = WordleGame(target_word="ALLOW")
        game.submit_guess("LOLLY")
        states = game.keyboard_states()

        assert states["L"] is C
        assert states["O"] is P
        assert states["Y"] is A

    def test_from_level(self):
        """Level data sets target, attempts and id."""
        game = WordleGame.from_level(WordleLevel(id="w1", target_word="piano", max_attempts=4))
        assert game.target_word == "PIANO"
        assert game.max_attempts == 4
        assert game.level_id == "w1"

    def test_level_rejects_non_letters(self):
        """Targets with non-letter characters fail validation."""
        with pytest.raises(ValidationError):
            WordleLevel(id="bad", target_word="CR4NE")

    def test_state_round_trip(self):
        """Serialized state rebuilds the same game."""
        game = WordleGame(target_word="CRANE", level_id="w1")
        game.submit_guess("SLATE")
        game.append_letter("C")

        data = WordleStateData.model_validate_json(game.get_state_data().model_dump_json())
        restored = WordleGame.from_state_data(data)

        assert data.is_completed is False
        assert restored.guesses == ["SLATE"]
        assert restored.current_attempt == "C"
        assert restored.level_id == "w1"
        assert restored.evaluations() == game.evaluations()
