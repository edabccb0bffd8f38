from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .scoring import ScoreVector


@dataclass(frozen=True, slots=True)
class Consensus:
    """How many formulas consider a sentence too hard for the target age."""

    fail_count: int
    total: int
    failing: Tuple[str, ...] = ()

    @property
    def confidence(self) -> float:
        return self.fail_count / self.total if self.total else 0.0

    @property
    def label(self) -> str:
        return f"{self.fail_count}/{self.total}"


def evaluate_consensus(scores: ScoreVector, target_age: float) -> Consensus:
    """Count the formulas whose estimated age is strictly above ``target_age``."""
    failing = tuple(score.formula for score in scores if score.age > target_age)
    return Consensus(fail_count=len(failing), total=len(scores), failing=failing)


def is_hard_to_read(consensus: Consensus, threshold: float) -> bool:
    """Return True when enough formulas agree to report the sentence."""
    return consensus.total > 0 and consensus.confidence >= threshold


def describe(consensus: Consensus) -> str:
    """Human-readable warning text for a failing consensus."""
    if consensus.fail_count < consensus.total:
        agreement = f"{consensus.fail_count} out of {consensus.total}"
    else:
        agreement = f"all {consensus.total}"
    return f"Unexpected hard to read sentence, according to {agreement} algorithms"
