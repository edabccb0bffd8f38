from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence, Tuple

from . import formulas
from .lexical import FormulaInputCounts


@dataclass(frozen=True, slots=True)
class ReadabilityFormula:
    """A formula paired with the conversion from its output to a reader age."""

    name: str
    compute: Callable[[FormulaInputCounts], float]
    to_age: Callable[[float], float]


@dataclass(frozen=True, slots=True)
class FormulaAge:
    """Estimated reader age according to one formula."""

    formula: str
    age: float


ScoreVector = Tuple[FormulaAge, ...]


def grade_to_age(grade: float) -> float:
    """
    Typical starting age (on the higher end) of a US student joining ``grade``.

    See https://en.wikipedia.org/wiki/Educational_stage#United_States
    """
    return _round_half_up(grade + 5)


def flesch_to_age(score: float) -> float:
    """Age relating to a Flesch reading ease score."""
    if not math.isfinite(score):
        return score
    return 20 - math.floor(score / 10)


def smog_to_age(index: float) -> float:
    """
    Age relating to a SMOG index.

    See http://www.readabilityformulas.com/smog-readability-formula.php
    """
    if not math.isfinite(index):
        return index
    return math.ceil(math.sqrt(index) + 2.5)


def _dale_chall_grade(counts: FormulaInputCounts) -> float:
    return formulas.dale_chall_grade_level(formulas.dale_chall(counts))[1]


def _round_half_up(value: float) -> float:
    # Infinity and NaN have no integer value; they keep their meaning as ages.
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


FORMULAS: Tuple[ReadabilityFormula, ...] = (
    ReadabilityFormula("automated-readability", formulas.automated_readability, grade_to_age),
    ReadabilityFormula("coleman-liau", formulas.coleman_liau, grade_to_age),
    ReadabilityFormula("dale-chall", _dale_chall_grade, grade_to_age),
    ReadabilityFormula("flesch", formulas.flesch, flesch_to_age),
    ReadabilityFormula("gunning-fog", formulas.gunning_fog, grade_to_age),
    ReadabilityFormula("smog", formulas.smog, smog_to_age),
    ReadabilityFormula("spache", formulas.spache, grade_to_age),
)


def score_counts(
    counts: FormulaInputCounts,
    readability_formulas: Sequence[ReadabilityFormula] = FORMULAS,
) -> ScoreVector:
    """Estimate a reader age for the counts with every formula, in table order."""
    return tuple(
        FormulaAge(formula=formula.name, age=formula.to_age(formula.compute(counts)))
        for formula in readability_formulas
    )
