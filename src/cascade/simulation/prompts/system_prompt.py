from typing import Optional

from ...engine.config import GameConfig


SYSTEM_PROMPT = """You are playing a competitive round of Cascade, a daily word puzzle with five hidden column words.

## The Board
- Five vertical column words of lengths 4, 5, 5, 5 and 6
- The first letter of each column is shown; together they spell the key word
- A hidden five-letter cascade word runs across one marked row (">"), one letter per column

## Phase 1: Guessing Letters
1. Guess up to {max_letter_guesses} distinct letters, at most {max_vowels} of them vowels
2. A guessed letter is revealed everywhere it appears in the column words (except first letters)
3. A guess that reveals at least one letter is a hit and extends your streak; a miss resets it
4. Streak bonuses grow with the streak: {streak_bonuses}
5. You may SKIP to the word phase once you have guessed at least {min_letters_before_skip} letters
6. A column whose every letter is revealed by letter guesses auto-completes for a big bonus

## Phase 2: Guessing Words
1. Guess the full word for every unsolved column
2. Each correct word scores its base points ({base_scores}) times a multiplier
3. The multiplier grows with the number of blanks the word had when letter guessing ended
4. A wrong word costs {wrong_guess_penalty} points
5. If all five words are correct you earn the cascade bonus of {cascade_flat_bonus} points

## Response Format
Always respond with these tags:

<game_plan>
Your reasoning about the board
</game_plan>

During the letter phase:
<action>GUESS X|SKIP</action>

During the word phase, one line per unsolved column (column numbers start at 1):
<words>
1: WORD
2: WORD
</words>

# GOAL
Score as many points as possible. Fewer letters mean bigger multipliers,
but every wrong word costs points and loses the cascade bonus.
"""


def get_system_prompt(config: Optional[GameConfig] = None) -> str:
    """Return the system prompt filled in with the rules of ``config``."""
    config = config or GameConfig()
    scoring = config.scoring
    return SYSTEM_PROMPT.format(
        max_letter_guesses=config.max_letter_guesses,
        max_vowels=config.max_vowels,
        min_letters_before_skip=config.min_letters_before_skip,
        streak_bonuses=", ".join(str(b) for b in scoring.streak_bonuses[1:]),
        base_scores=", ".join(str(b) for b in scoring.base_scores),
        wrong_guess_penalty=scoring.wrong_guess_penalty,
        cascade_flat_bonus=scoring.cascade_flat_bonus,
    )
