"""
Published readability formulas, computed from pre-counted text statistics.

Each formula is a pure function of FormulaInputCounts. A sample without words
or sentences has no defined score, so the formulas return NaN for it instead
of dividing by zero.
"""

from __future__ import annotations

import math
from typing import Tuple

from .lexical import FormulaInputCounts

# Dale-Chall raw score (floored) to the US grade band it corresponds to.
DALE_CHALL_GRADES = {
    4: (0.0, 4.0),
    5: (5.0, 6.0),
    6: (7.0, 8.0),
    7: (9.0, 10.0),
    8: (11.0, 12.0),
    9: (13.0, 15.0),
    10: (16.0, math.inf),
}


def automated_readability(counts: FormulaInputCounts) -> float:
    """Automated Readability Index, as a US grade level."""
    if not counts.word or not counts.sentence:
        return math.nan
    return (
        4.71 * (counts.character / counts.word)
        + 0.5 * (counts.word / counts.sentence)
        - 21.43
    )


def coleman_liau(counts: FormulaInputCounts) -> float:
    """Coleman-Liau index, as a US grade level."""
    if not counts.word or not counts.sentence:
        return math.nan
    return (
        0.0588 * (100 * counts.letter / counts.word)
        - 0.296 * (100 * counts.sentence / counts.word)
        - 15.8
    )


def dale_chall(counts: FormulaInputCounts) -> float:
    """New Dale-Chall raw score."""
    if not counts.word or not counts.sentence:
        return math.nan
    percentage = 100 * counts.difficult_word / counts.word
    score = 0.1579 * percentage + 0.0496 * (counts.word / counts.sentence)
    if percentage > 5:
        score += 3.6365
    return score


def dale_chall_grade_level(score: float) -> Tuple[float, float]:
    """Map a Dale-Chall raw score to its (lowest, highest) US grade."""
    if math.isnan(score):
        return (math.nan, math.nan)
    band = min(max(math.floor(score), 4), 10) if math.isfinite(score) else 10
    return DALE_CHALL_GRADES[band]


def flesch(counts: FormulaInputCounts) -> float:
    """Flesch reading ease, 0-100 where higher is easier."""
    if not counts.word or not counts.sentence:
        return math.nan
    return (
        206.835
        - 1.015 * (counts.word / counts.sentence)
        - 84.6 * (counts.syllable / counts.word)
    )


def gunning_fog(counts: FormulaInputCounts) -> float:
    """Gunning Fog index, as a US grade level."""
    if not counts.word or not counts.sentence:
        return math.nan
    return 0.4 * (
        counts.word / counts.sentence
        + 100 * (counts.complex_polysyllabic_word / counts.word)
    )


def smog(counts: FormulaInputCounts) -> float:
    """SMOG index."""
    if not counts.sentence:
        return math.nan
    return 1.043 * math.sqrt(counts.polysyllabic_word * (30 / counts.sentence)) + 3.1291


def spache(counts: FormulaInputCounts) -> float:
    """Revised Spache formula, as a US grade level."""
    if not counts.word or not counts.sentence:
        return math.nan
    return (
        0.121 * (counts.word / counts.sentence)
        + 0.082 * (100 * counts.unfamiliar_word / counts.word)
        + 0.659
    )
