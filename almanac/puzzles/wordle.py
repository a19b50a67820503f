"""
Word-guess evaluator.

Feedback follows the usual rules: exact matches are marked correct first, then
the remaining occurrences of each letter in the target are handed out to the
other guessed positions from left to right. Once a letter's budget is used up,
further occurrences are absent.
"""

import logging
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .models import LetterState, WordleLevel, WordleStateData

logger = logging.getLogger(__name__)

_STATE_RANK = {LetterState.ABSENT: 0, LetterState.PRESENT: 1, LetterState.CORRECT: 2}


def classify(guess: str, target: str) -> List[LetterState]:
    """
    Compute per-letter feedback for a guess.

    Comparison is case-insensitive. Positions beyond the shorter of the two
    words are ignored.

    Example:
        classify("LOLLY", "ALLOW") -> present, present, correct, absent, absent
        (ALLOW has two L's: one is matched exactly, the other goes to the
        first L of the guess, the third L gets nothing)
    """
    guess = guess.upper()
    target = target.upper()
    n = min(len(guess), len(target))
    result = [LetterState.ABSENT] * n

    # Budget of unmatched target letters after exact matches
    remaining: Dict[str, int] = {}
    for i in range(n):
        if guess[i] == target[i]:
            result[i] = LetterState.CORRECT
        else:
            remaining[target[i]] = remaining.get(target[i], 0) + 1
    for ch in target[n:]:
        remaining[ch] = remaining.get(ch, 0) + 1

    for i in range(n):
        if result[i] is LetterState.CORRECT:
            continue
        ch = guess[i]
        if remaining.get(ch, 0) > 0:
            result[i] = LetterState.PRESENT
            remaining[ch] -= 1

    return result


class WordleGame(BaseModel):
    """
    A single word-guess game.

    The caller checks dictionary membership before submitting; the game only
    enforces word length and that it is not yet finished.

    Attributes:
        target_word: The word to find, stored uppercase
        max_attempts: Number of guesses allowed
        guesses: Submitted guesses, uppercase, oldest first
        current_attempt: Letters typed for the guess in progress
    """

    target_word: str = Field(..., min_length=1)
    max_attempts: int = Field(default=6, ge=1)
    guesses: List[str] = Field(default_factory=list)
    current_attempt: str = ""
    level_id: Optional[str] = None

    def model_post_init(self, __context) -> None:
        self.target_word = self.target_word.upper()
        self.guesses = [g.upper() for g in self.guesses]
        self.current_attempt = self.current_attempt.upper()

    @classmethod
    def from_level(cls, level: WordleLevel) -> "WordleGame":
        logger.debug("Loaded word level %s (%d letters)", level.id, len(level.target_word))
        return cls(
            target_word=level.target_word,
            max_attempts=level.max_attempts,
            level_id=level.id,
        )

    @property
    def word_length(self) -> int:
        return len(self.target_word)

    @property
    def attempts_used(self) -> int:
        return len(self.guesses)

    @property
    def remaining_attempts(self) -> int:
        return max(self.max_attempts - self.attempts_used, 0)

    @property
    def is_won(self) -> bool:
        return self.target_word in self.guesses

    @property
    def is_over(self) -> bool:
        return self.attempts_used >= self.max_attempts and not self.is_won

    @property
    def is_complete(self) -> bool:
        return self.is_won or self.is_over

    def append_letter(self, letter: str) -> None:
        """Type a letter into the guess in progress."""
        if self.is_complete or len(self.current_attempt) >= self.word_length:
            return
        if len(letter) != 1 or not letter.isalpha():
            return
        self.current_attempt += letter.upper()

    def delete_last_letter(self) -> None:
        if self.is_complete or not self.current_attempt:
            return
        self.current_attempt = self.current_attempt[:-1]

    def submit_guess(self, guess: str) -> None:
        """Record a full-length guess; anything else is ignored."""
        if self.is_complete or len(guess) != self.word_length:
            return
        self.guesses.append(guess.upper())
        self.current_attempt = ""

        if self.is_won:
            logger.info("Word found in %d/%d attempts", self.attempts_used, self.max_attempts)
        elif self.is_over:
            logger.info("Out of attempts, the word was %s", self.target_word)

    def evaluations(self) -> List[List[LetterState]]:
        """Feedback for every submitted guess, in order."""
        return [classify(g, self.target_word) for g in self.guesses]

    def keyboard_states(self) -> Dict[str, LetterState]:
        """
        Best known state of each letter used so far.

        A letter that was correct anywhere stays correct, otherwise present
        beats absent.
        """
        states: Dict[str, LetterState] = {}
        for guess, feedback in zip(self.guesses, self.evaluations()):
            for letter, state in zip(guess, feedback):
                known = states.get(letter)
                if known is None or _STATE_RANK[state] > _STATE_RANK[known]:
                    states[letter] = state
        return states

    def get_state_data(self) -> WordleStateData:
        return WordleStateData(
            target_word=self.target_word,
            max_attempts=self.max_attempts,
            guesses=list(self.guesses),
            current_attempt=self.current_attempt,
            is_completed=self.is_complete,
            is_won=self.is_won,
            level_id=self.level_id,
        )

    @classmethod
    def from_state_data(cls, data: WordleStateData) -> "WordleGame":
        return cls(
            target_word=data.target_word,
            max_attempts=data.max_attempts,
            guesses=list(data.guesses),
            current_attempt=data.current_attempt,
            level_id=data.level_id,
        )
