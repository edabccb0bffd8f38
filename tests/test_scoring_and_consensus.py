import math

import pytest

from readability_lint import formulas
from readability_lint.consensus import (
    Consensus,
    describe,
    evaluate_consensus,
    is_hard_to_read,
)
from readability_lint.lexical import FormulaInputCounts
from readability_lint.scoring import (
    FORMULAS,
    FormulaAge,
    flesch_to_age,
    grade_to_age,
    score_counts,
    smog_to_age,
)


def _counts(**overrides) -> FormulaInputCounts:
    values = dict(
        complex_polysyllabic_word=2,
        polysyllabic_word=6,
        unfamiliar_word=13,
        difficult_word=12,
        syllable=41,
        sentence=1,
        word=23,
        character=106,
        letter=106,
    )
    values.update(overrides)
    return FormulaInputCounts(**values)


def test_formulas_match_published_coefficients():
    counts = _counts()
    assert formulas.automated_readability(counts) == pytest.approx(11.777, abs=1e-3)
    assert formulas.coleman_liau(counts) == pytest.approx(10.012, abs=1e-3)
    assert formulas.flesch(counts) == pytest.approx(32.681, abs=1e-3)
    assert formulas.gunning_fog(counts) == pytest.approx(12.678, abs=1e-3)
    assert formulas.smog(counts) == pytest.approx(17.122, abs=1e-3)
    assert formulas.spache(counts) == pytest.approx(8.077, abs=1e-3)
    assert formulas.dale_chall(counts) == pytest.approx(13.016, abs=1e-3)


def test_dale_chall_adjustment_only_above_five_percent():
    few = formulas.dale_chall(_counts(word=100, difficult_word=5))
    many = formulas.dale_chall(_counts(word=100, difficult_word=6))
    assert few == pytest.approx(0.1579 * 5 + 0.0496 * 100)
    assert many == pytest.approx(0.1579 * 6 + 0.0496 * 100 + 3.6365)


@pytest.mark.parametrize(
    "score, grades",
    [
        (3.0, (0.0, 4.0)),
        (4.9, (0.0, 4.0)),
        (5.0, (5.0, 6.0)),
        (7.5, (9.0, 10.0)),
        (9.99, (13.0, 15.0)),
        (10.0, (16.0, math.inf)),
        (42.0, (16.0, math.inf)),
    ],
)
def test_dale_chall_grade_level(score, grades):
    assert formulas.dale_chall_grade_level(score) == grades


def test_formulas_are_undefined_without_words():
    counts = _counts(word=0, character=0, letter=0, syllable=0, difficult_word=0)
    assert math.isnan(formulas.automated_readability(counts))
    assert math.isnan(formulas.flesch(counts))
    assert math.isnan(formulas.spache(counts))
    assert all(math.isnan(v) for v in formulas.dale_chall_grade_level(math.nan))


def test_age_conversions():
    assert grade_to_age(10.012) == 15
    assert grade_to_age(10.5) == 16
    assert grade_to_age(-0.5) == 5
    assert flesch_to_age(32.68) == 17
    assert flesch_to_age(-5) == 21
    assert smog_to_age(9) == 6
    assert grade_to_age(math.inf) == math.inf
    assert math.isnan(grade_to_age(math.nan))
    assert math.isnan(flesch_to_age(math.nan))


def test_score_counts_returns_seven_ages_in_fixed_order():
    scores = score_counts(_counts())
    assert [score.formula for score in scores] == [f.name for f in FORMULAS]
    assert len(scores) == 7
    assert [score.age for score in scores] == [17, 15, math.inf, 17, 18, 7, 13]


def test_consensus_counts_strictly_greater_ages():
    scores = score_counts(_counts())
    consensus = evaluate_consensus(scores, target_age=16)
    assert consensus.label == "4/7"
    assert consensus.confidence == 4 / 7
    assert consensus.failing == ("automated-readability", "dale-chall", "flesch", "gunning-fog")
    assert evaluate_consensus(scores, target_age=14).label == "5/7"
    assert evaluate_consensus(scores, target_age=18).label == "1/7"
    # An age equal to the target does not fail.
    assert evaluate_consensus(scores, target_age=17).fail_count == 2


def test_raising_age_never_increases_failures():
    scores = score_counts(_counts())
    counts = [evaluate_consensus(scores, age).fail_count for age in range(0, 30)]
    assert counts == sorted(counts, reverse=True)


def test_nan_ages_never_fail():
    scores = tuple(FormulaAge(formula=str(i), age=math.nan) for i in range(7))
    assert evaluate_consensus(scores, 0).fail_count == 0


def test_threshold_decision():
    consensus = Consensus(fail_count=4, total=7)
    assert is_hard_to_read(consensus, 4 / 7)
    assert not is_hard_to_read(consensus, 5 / 7)
    assert not is_hard_to_read(Consensus(fail_count=0, total=0), 0)


def test_raising_threshold_never_adds_warnings():
    consensus = Consensus(fail_count=4, total=7)
    decisions = [is_hard_to_read(consensus, k / 7) for k in range(8)]
    assert decisions == [True] * 5 + [False] * 3
    assert all(a >= b for a, b in zip(decisions, decisions[1:]))


def test_describe_wording():
    assert describe(Consensus(fail_count=4, total=7)) == (
        "Unexpected hard to read sentence, according to 4 out of 7 algorithms"
    )
    assert describe(Consensus(fail_count=7, total=7)) == (
        "Unexpected hard to read sentence, according to all 7 algorithms"
    )
