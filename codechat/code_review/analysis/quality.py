from __future__ import annotations

from ..reviewers.base import QualityScore

PENALTY_PER_ISSUE = 12

# (minimum score, grade, label), best first
GRADE_BANDS = (
    (90, "A", "Excellent"),
    (75, "B", "Good"),
    (60, "C", "Fair"),
    (40, "D", "Needs work"),
    (0, "F", "Poor"),
)


def score_quality(issue_count: int) -> QualityScore:
    """
    Start from 100 and take a flat penalty per detected issue.
    The "no obvious issues" placeholder must not be counted by the caller.
    """
    score = max(0, 100 - PENALTY_PER_ISSUE * max(0, issue_count))
    for floor, grade, label in GRADE_BANDS:
        if score >= floor:
            break
    return QualityScore(score=score, grade=grade, label=label)
