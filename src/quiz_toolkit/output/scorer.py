"""
Module: output.scorer

Purpose:
    Turn final tallies into the one-line percentage report.

Key Functions:
    - score_ratio(): Percentage correct, 0.0 for an empty set
    - report(): "100.00% (2/2) of the answers were correct."
"""

from __future__ import annotations

from quiz_toolkit.core.models import QuestionSet


def score_ratio(question_set: QuestionSet) -> float:
    """Percentage of correct answers; defined as 0.0 when there are no questions."""
    if question_set.total_count == 0:
        return 0.0
    return 100 * question_set.correct_count / question_set.total_count


def report(question_set: QuestionSet) -> str:
    """
    Summary line for a (possibly partially graded) set.

    Unanswered questions count against the score.

    Example:
        >>> report(qs)
        '50.00% (1/2) of the answers were correct.'
    """
    return (
        f"{score_ratio(question_set):.2f}% "
        f"({question_set.correct_count}/{question_set.total_count}) "
        "of the answers were correct."
    )
