from __future__ import annotations

from dataclasses import dataclass, replace
from functools import partial, reduce
from typing import AbstractSet, FrozenSet, Iterable

from .vocabulary import SyllableCounter

POLYSYLLABIC_MIN_SYLLABLES = 3


@dataclass(frozen=True, slots=True)
class SentenceStatistics:
    """Lexical counts gathered over the words of one sentence."""

    words: int = 0
    syllables: int = 0
    letters: int = 0
    polysyllabic_words: int = 0
    complex_polysyllabic_words: int = 0
    familiar_words: int = 0
    easy_words: int = 0
    seen_familiar: FrozenSet[str] = frozenset()
    seen_easy: FrozenSet[str] = frozenset()


@dataclass(frozen=True, slots=True)
class FormulaInputCounts:
    """Named quantities the readability formulas take as input."""

    complex_polysyllabic_word: int
    polysyllabic_word: int
    unfamiliar_word: int
    difficult_word: int
    syllable: int
    sentence: int
    word: int
    character: int
    letter: int


def collect_statistics(
    words: Iterable[str],
    *,
    count_syllables: SyllableCounter,
    familiar: AbstractSet[str],
    easy: AbstractSet[str],
) -> SentenceStatistics:
    """Fold the rendered words of a sentence into SentenceStatistics."""
    step = partial(
        add_word, count_syllables=count_syllables, familiar=familiar, easy=easy
    )
    return reduce(step, words, SentenceStatistics())


def add_word(
    stats: SentenceStatistics,
    value: str,
    *,
    count_syllables: SyllableCounter,
    familiar: AbstractSet[str],
    easy: AbstractSet[str],
) -> SentenceStatistics:
    """Return ``stats`` updated with one more word."""
    syllables = count_syllables(value)
    caseless = value.lower()
    polysyllabic = syllables >= POLYSYLLABIC_MIN_SYLLABLES
    # Complex words for Gunning Fog: three or more syllables and not a proper
    # noun. Proper nouns are only guessed from the first character, so
    # capitalized ordinary words are not counted either.
    complex_word = polysyllabic and value[:1] == caseless[:1]
    new_familiar = caseless in familiar and caseless not in stats.seen_familiar
    new_easy = caseless in easy and caseless not in stats.seen_easy

    return replace(
        stats,
        words=stats.words + 1,
        syllables=stats.syllables + syllables,
        letters=stats.letters + len(value),
        polysyllabic_words=stats.polysyllabic_words + int(polysyllabic),
        complex_polysyllabic_words=stats.complex_polysyllabic_words
        + int(complex_word),
        familiar_words=stats.familiar_words + int(new_familiar),
        easy_words=stats.easy_words + int(new_easy),
        seen_familiar=(
            stats.seen_familiar | {caseless} if new_familiar else stats.seen_familiar
        ),
        seen_easy=(stats.seen_easy | {caseless} if new_easy else stats.seen_easy),
    )


def to_formula_counts(stats: SentenceStatistics) -> FormulaInputCounts:
    """Derive formula inputs from one sentence's statistics."""
    return FormulaInputCounts(
        complex_polysyllabic_word=stats.complex_polysyllabic_words,
        polysyllabic_word=stats.polysyllabic_words,
        unfamiliar_word=stats.words - stats.familiar_words,
        difficult_word=stats.words - stats.easy_words,
        syllable=stats.syllables,
        sentence=1,
        word=stats.words,
        character=stats.letters,
        letter=stats.letters,
    )
