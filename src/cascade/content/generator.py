"""
Procedural puzzle generation from the built-in word lists.

Column words must start with the key word's letter for their column and
carry the cascade word's letter at the cascade row.
"""

import logging
import random
from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Set, Tuple

from ..data import CASCADE_WORDS, WORDS_BY_LENGTH
from ..engine.config import GameConfig
from ..engine.models import CASCADE_ROWS, COLUMN_LENGTHS, NUM_COLUMNS, Puzzle
from .convert import content_to_puzzle
from .models import GeneratedContent, PuzzleContent


logger = logging.getLogger(__name__)

# Alternatives kept per column for swapping
MAX_ALTERNATIVES = 5


class WordIndex:
    """Lookup of words by (length, first letter, row, letter at row)."""

    def __init__(self, words_by_length: Optional[Dict[int, Sequence[str]]] = None):
        words_by_length = words_by_length or WORDS_BY_LENGTH
        self._by_slot: Dict[Tuple[int, str, int, str], List[str]] = defaultdict(list)
        self._by_start: Dict[Tuple[int, str], List[str]] = defaultdict(list)
        for length, words in words_by_length.items():
            for word in words:
                word = word.upper()
                if len(word) != length or not word.isalpha():
                    continue
                self._by_start[(length, word[0])].append(word)
                for row in CASCADE_ROWS:
                    if row < length:
                        self._by_slot[(length, word[0], row, word[row])].append(word)

    def candidates(self, length: int, first: str, row: int, letter: str) -> List[str]:
        """Words of ``length`` starting with ``first`` with ``letter`` at ``row``."""
        return list(self._by_slot.get((length, first.upper(), row, letter.upper()), ()))

    def starting_with(self, length: int, first: str) -> List[str]:
        return list(self._by_start.get((length, first.upper()), ()))

    def letters_at(self, length: int, first: str, row: int) -> Set[str]:
        """Letters that some candidate word carries at ``row``."""
        return {w[row] for w in self.starting_with(length, first)}


_DEFAULT_INDEX: Optional[WordIndex] = None


def default_index() -> WordIndex:
    """Index over the built-in word lists, built on first use."""
    global _DEFAULT_INDEX
    if _DEFAULT_INDEX is None:
        _DEFAULT_INDEX = WordIndex()
    return _DEFAULT_INDEX


def column_candidates(index: WordIndex, seed_word: str, cascade_word: str, row: int) -> List[List[str]]:
    """Candidate words for each column of a (seed, cascade, row) combination."""
    return [
        index.candidates(COLUMN_LENGTHS[col], seed_word[col], row, cascade_word[col])
        for col in range(NUM_COLUMNS)
    ]


def recommend_row(index: WordIndex, seed_word: str, cascade_word: str) -> int:
    """Row whose scarcest column has the most candidates (first row on ties)."""
    best_row = CASCADE_ROWS[0]
    best = -1
    for row in CASCADE_ROWS:
        scarcest = min(len(c) for c in column_candidates(index, seed_word, cascade_word, row))
        if scarcest > best:
            best_row, best = row, scarcest
    return best_row


def auto_generate_content(
    cascade_word: str,
    seed_word: str,
    cascade_row: Optional[int] = None,
    index: Optional[WordIndex] = None,
) -> Optional[GeneratedContent]:
    """
    Build content for a given seed/cascade pair.

    Picks the first candidate per column and keeps a few alternatives. The
    quality score counts the alternatives (more means more flexibility).

    Returns:
        The generated content, or None if some column has no candidate
    """
    if len(cascade_word) != 5 or len(seed_word) != 5:
        return None
    index = index or default_index()
    cascade_word = cascade_word.upper()
    seed_word = seed_word.upper()
    row = cascade_row or recommend_row(index, seed_word, cascade_word)

    candidates = column_candidates(index, seed_word, cascade_word, row)
    if any(not c for c in candidates):
        return None

    alternatives = [c[1:1 + MAX_ALTERNATIVES] for c in candidates]
    content = PuzzleContent(
        seed_word=seed_word,
        cascade_word=cascade_word,
        cascade_row=row,
        column_words=[c[0] for c in candidates],
    )
    return GeneratedContent(
        content=content,
        alternatives=alternatives,
        quality=sum(len(a) for a in alternatives),
    )


def generate_content_options(
    cascade_word: str,
    candidate_seed_words: Sequence[str],
    index: Optional[WordIndex] = None,
) -> List[GeneratedContent]:
    """Generate content for every workable seed word, best quality first."""
    results = []
    for seed_word in candidate_seed_words:
        if len(seed_word) != 5:
            continue
        generated = auto_generate_content(cascade_word, seed_word, index=index)
        if generated:
            results.append(generated)
    return sorted(results, key=lambda g: g.quality, reverse=True)


def _fallback_content(rng: random.Random, index: WordIndex, key_words: List[str]) -> PuzzleContent:
    row = CASCADE_ROWS[0]
    for key_word in key_words:
        options = [index.starting_with(COLUMN_LENGTHS[col], key_word[col]) for col in range(NUM_COLUMNS)]
        if all(options):
            column_words = [rng.choice(o) for o in options]
            cascade_word = "".join(w[row] for w in column_words)
            logger.warning(
                "No real cascade word fits; using key word %s with derived cascade %s",
                key_word, cascade_word,
            )
            return PuzzleContent(
                seed_word=key_word,
                cascade_word=cascade_word,
                cascade_row=row,
                column_words=column_words,
            )
    raise RuntimeError("Word lists cannot supply a word for every column of any key word")


def generate_content(seed: Optional[int] = None, index: Optional[WordIndex] = None) -> PuzzleContent:
    """
    Pick a key word, a cascade word and a row, then fill each column.

    Key words are tried in shuffled order; for each key word and row, the
    cascade words whose every letter is reachable in its column are found,
    and one is chosen at random. Deterministic for a given seed.
    """
    rng = random.Random(seed)
    index = index or default_index()
    key_words = [w.upper() for w in CASCADE_WORDS]
    rng.shuffle(key_words)
    cascade_words = [w.upper() for w in CASCADE_WORDS]

    for key_word in key_words:
        rows = list(CASCADE_ROWS)
        rng.shuffle(rows)
        for row in rows:
            reachable = [index.letters_at(COLUMN_LENGTHS[col], key_word[col], row) for col in range(NUM_COLUMNS)]
            if not all(reachable):
                continue
            matches = [
                c for c in cascade_words
                if c != key_word and all(c[col] in reachable[col] for col in range(NUM_COLUMNS))
            ]
            if not matches:
                continue
            cascade_word = rng.choice(matches)
            column_words = [
                rng.choice(index.candidates(COLUMN_LENGTHS[col], key_word[col], row, cascade_word[col]))
                for col in range(NUM_COLUMNS)
            ]
            logger.debug("Generated puzzle key=%s cascade=%s row=%d", key_word, cascade_word, row)
            return PuzzleContent(
                seed_word=key_word,
                cascade_word=cascade_word,
                cascade_row=row,
                column_words=column_words,
            )

    return _fallback_content(rng, index, key_words)


def generate_puzzle(seed: Optional[int] = None, config: Optional[GameConfig] = None) -> Puzzle:
    """Generate a fresh playable puzzle from the built-in word lists."""
    return content_to_puzzle(generate_content(seed), config)
