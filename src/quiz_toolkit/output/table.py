"""
Module: output.table

Purpose:
    Plain-text results table with aligned columns, one row per question
    in file order.

Key Functions:
    - result_box(): "[   ]" / "[ ✓ ]" / "[ X ]" for a grade
    - render_table(): Full table as a string
"""

from __future__ import annotations

from typing import List, Sequence

from quiz_toolkit.core.models import Grade, Question, QuestionSet

HEADERS = ("Question", "Answer", "User Answer", "Correct")
EMPTY_ANSWER = "<empty>"
COLUMN_GAP = 2

_BOXES = {
    Grade.UNGRADED: "[   ]",
    Grade.CORRECT: "[ ✓ ]",
    Grade.INCORRECT: "[ X ]",
}


def result_box(grade: Grade) -> str:
    return _BOXES[grade]


def _row(question: Question) -> List[str]:
    user_answer = question.user_answer or EMPTY_ANSWER
    if question.timed_out:
        user_answer = f"{EMPTY_ANSWER} (timed out)"
    return [question.text, question.answer, user_answer, result_box(question.grade)]


def _format(cells: Sequence[str], widths: Sequence[int]) -> str:
    padded = [cell.ljust(width) for cell, width in zip(cells, widths)]
    return (" " * COLUMN_GAP).join(padded).rstrip()


def render_table(question_set: QuestionSet) -> str:
    """
    Render questions, expected answers, responses and result boxes.

    Example:
        >>> print(render_table(qs))
        Question  Answer  User Answer  Correct
        2+2       4       4            [ ✓ ]
        3+3       6       <empty>      [   ]
    """
    rows = [_row(q) for q in question_set]
    widths = [len(h) for h in HEADERS]
    for row in rows:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row)]

    lines = [_format(HEADERS, widths)]
    lines.extend(_format(row, widths) for row in rows)
    return "\n".join(lines)
