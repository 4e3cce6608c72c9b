"""
LLM-driven player.

Each letter-phase turn sends the board to the model and parses one
``<action>``; the word phase is a single turn whose ``<words>`` block names
every unsolved column. Malformed or illegal replies fall back to the
frequency ordering so a game always finishes.
"""

import random
import re
from typing import Any, Dict, List, Optional
from pydantic import ConfigDict, PrivateAttr

from ..engine.letters import check_letter_guess
from ..engine.errors import CascadeError
from ..engine.models import Puzzle, PuzzleWord
from ..engine.phases import can_skip_to_words
from .letter_analysis import count_letter_hits, letters_by_expected_value
from .llm_client import LLMClient
from .models import ParsedReply
from .prompts import build_player_prompt, get_system_prompt
from .strategies import Strategy, best_legal_letter


def parse_reply(response: str) -> ParsedReply:
    """
    Parse an LLM reply for its plan, letter action and word guesses.

    Expected format:
    <game_plan>reasoning here</game_plan>
    <action>GUESS X|SKIP</action>
    <words>
    1: WORD
    </words>

    Column numbers in ``<words>`` are 1-based; the parsed mapping is 0-based.
    """
    result = ParsedReply(raw_response=response)

    plan_match = re.search(r'<game_plan>(.*?)</game_plan>', response, re.DOTALL)
    if plan_match:
        result.thinking = plan_match.group(1).strip()

    action_match = re.search(r'<action>(.*?)</action>', response, re.DOTALL)
    if action_match:
        action_content = action_match.group(1).strip().upper()
        if action_content.startswith("SKIP"):
            result.skip = True
        else:
            guess_match = re.match(r'(?:GUESS\s+)?([A-Z])\b', action_content)
            if guess_match:
                result.letter = guess_match.group(1)

    words_match = re.search(r'<words>(.*?)</words>', response, re.DOTALL)
    if words_match:
        for line in words_match.group(1).splitlines():
            line_match = re.match(r'\s*(\d+)\s*[:.)\-]\s*([A-Za-z]+)', line)
            if line_match:
                result.words[int(line_match.group(1)) - 1] = line_match.group(2).upper()

    return result


def agrees_with_board(word: PuzzleWord, guess: str) -> bool:
    """Whether a guess has the right length and matches every revealed letter."""
    if len(guess) != len(word.word) or not guess.isalpha():
        return False
    return all(not r or g == ch for g, ch, r in zip(guess, word.word, word.revealed))


def fallback_word(word: PuzzleWord) -> str:
    """Visible letters with every blank filled by the most common letter."""
    filler = letters_by_expected_value()[0]
    return "".join(ch or filler for ch in word.visible_letters())


class LLMStrategy(Strategy):
    """
    Plays through an LLM via LiteLLM.

    Attributes:
        client: Conversation client, reset at the start of every game
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = "llm"
    client: LLMClient

    _turn: int = PrivateAttr(default=0)
    _guesses: Dict[int, str] = PrivateAttr(default_factory=dict)
    _asked_words: bool = PrivateAttr(default=False)
    _last_error: Optional[str] = PrivateAttr(default=None)
    _errors: List[str] = PrivateAttr(default_factory=list)

    @classmethod
    def create(
        cls,
        model: str,
        name: Optional[str] = None,
        temperature: float = 1.0,
        max_tokens: Optional[int] = None,
        **llm_kwargs: Any
    ) -> "LLMStrategy":
        """
        Factory method to create a strategy with an LLM client.

        Args:
            model: LLM model name (e.g., "gpt-4o", "claude-3-opus")
            name: Optional display name
            temperature: LLM temperature setting
            max_tokens: Optional max tokens for responses
            **llm_kwargs: Additional arguments for the LLM client
        """
        client = LLMClient(model=model, temperature=temperature, max_tokens=max_tokens, **llm_kwargs)
        return cls(
            name=name or f"llm ({model})",
            description=f"LLM player using {model}",
            client=client,
        )

    def new_game(self, rng: random.Random) -> None:
        self._turn = 0
        self._guesses = {}
        self._asked_words = False
        self._last_error = None

    def _ask(self, puzzle: Puzzle) -> Optional[ParsedReply]:
        if self._turn == 0:
            self.client.start_game(get_system_prompt(puzzle.config))

        self._turn += 1
        last_hits = None
        if puzzle.guessed_letters:
            last_hits = count_letter_hits(puzzle.guessed_letters[-1], [w.word for w in puzzle.words])
        prompt = build_player_prompt(puzzle, self._turn, last_hits=last_hits, action_error=self._last_error)
        self._last_error = None

        text = self.client.ask(prompt)
        self._errors.extend(self.client.consume_errors())
        if text is None:
            return None
        return parse_reply(text)

    def _record_error(self, message: str) -> None:
        self._errors.append(message)
        self._last_error = message

    def choose_letter(self, puzzle: Puzzle, rng: random.Random) -> Optional[str]:
        parsed = self._ask(puzzle)
        if parsed is None:
            return best_legal_letter(puzzle)

        if parsed.skip:
            if can_skip_to_words(puzzle):
                return None
            self._record_error(
                f"SKIP needs at least {puzzle.config.min_letters_before_skip} letters; guessed a letter instead"
            )
            return best_legal_letter(puzzle)

        if parsed.letter is None:
            self._record_error("No <action> found in reply; guessed a letter instead")
            return best_legal_letter(puzzle)

        try:
            return check_letter_guess(puzzle, parsed.letter)
        except CascadeError as e:
            self._record_error(f"{e.message}; guessed a different letter instead")
            return best_legal_letter(puzzle)

    def fill_word(self, puzzle: Puzzle, index: int, rng: random.Random) -> str:
        if not self._asked_words:
            self._asked_words = True
            parsed = self._ask(puzzle)
            if parsed is not None:
                self._guesses = dict(parsed.words)

        word = puzzle.words[index]
        guess = self._guesses.get(index)
        if guess is None:
            self._record_error(f"No guess given for word {index + 1}")
            return fallback_word(word)
        if not agrees_with_board(word, guess):
            self._record_error(f"Guess '{guess}' does not fit word {index + 1}")
            return fallback_word(word)
        return guess

    def consume_usage(self) -> Dict[str, int]:
        return self.client.consume_usage()

    def consume_errors(self) -> List[str]:
        errors, self._errors = self._errors, []
        return errors
