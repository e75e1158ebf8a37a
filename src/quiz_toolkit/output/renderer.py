"""
Module: output.renderer

Purpose:
    Render a SessionOutcome to a printable A4 results sheet using ReportLab.
    Header block (title, status, score line) on the first page, then one
    table row per question, continuing onto new pages as needed.

Key Functions:
    - render_results_pdf(): Main rendering function

Dependencies:
    - reportlab: PDF generation
    - output.scorer: Score line

Used By:
    - quiz_toolkit.cli: --pdf option
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence, Tuple

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from quiz_toolkit.core.models import Grade, Question, SessionOutcome

from .scorer import report

logger = logging.getLogger(__name__)

# Constants
A4_WIDTH_PT, A4_HEIGHT_PT = A4
MARGIN_PT = 50
TITLE_FONT_SIZE = 16
BODY_FONT_SIZE = 10
ROW_HEIGHT_PT = 16
FOOTER_FONT_SIZE = 7

# (heading, x offset from left margin in points)
COLUMNS: Tuple[Tuple[str, float], ...] = (
    ("#", 0),
    ("Question", 25),
    ("Answer", 225),
    ("Your answer", 330),
    ("Result", 435),
)

_RESULT_TEXT = {
    Grade.UNGRADED: "not reached",
    Grade.CORRECT: "correct",
    Grade.INCORRECT: "incorrect",
}


def _get_footer_text() -> str:
    """Get footer text with current version number."""
    from quiz_toolkit import __version__
    return f"Generated with quiz-toolkit v{__version__}"


def render_results_pdf(
    outcome: SessionOutcome,
    output_path: Path,
    *,
    title: str = "Quiz results",
    show_footer: bool = True,
) -> int:
    """
    Render a results sheet to PDF.

    Args:
        outcome: Finished session
        output_path: Path to write PDF (parent directories are created)
        title: Heading on the first page
        show_footer: Draw version footer on each page

    Returns:
        Number of pages written

    Raises:
        OSError: If the PDF cannot be written

    Example:
        >>> render_results_pdf(outcome, Path("output/results.pdf"))
        1
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    question_set = outcome.question_set

    c = canvas.Canvas(str(output_path), pagesize=A4)
    c.setTitle(title)

    y = A4_HEIGHT_PT - MARGIN_PT
    y = _draw_header(c, outcome, title, y)
    y = _draw_column_headings(c, y)
    pages = 1

    for number, question in enumerate(question_set, start=1):
        if y < MARGIN_PT + ROW_HEIGHT_PT:
            if show_footer:
                _draw_footer(c)
            c.showPage()
            pages += 1
            y = _draw_column_headings(c, A4_HEIGHT_PT - MARGIN_PT)
        _draw_row(c, number, question, y)
        y -= ROW_HEIGHT_PT

    if show_footer:
        _draw_footer(c)
    c.showPage()
    c.save()

    logger.info(f"Rendered {question_set.total_count} results on {pages} page(s) to {output_path}")
    return pages


def _draw_header(c: canvas.Canvas, outcome: SessionOutcome, title: str, y: float) -> float:
    """Draw title, status and score line; return the next baseline."""
    c.setFont("Helvetica-Bold", TITLE_FONT_SIZE)
    c.drawString(MARGIN_PT, y, title)
    y -= TITLE_FONT_SIZE + 10

    status = "Timed out" if outcome.timed_out else "Completed"
    c.setFont("Helvetica", BODY_FONT_SIZE)
    c.drawString(MARGIN_PT, y, f"Status: {status} in {outcome.elapsed:.1f}s")
    y -= ROW_HEIGHT_PT
    c.drawString(MARGIN_PT, y, report(outcome.question_set))
    return y - 2 * ROW_HEIGHT_PT


def _draw_column_headings(c: canvas.Canvas, y: float) -> float:
    c.setFont("Helvetica-Bold", BODY_FONT_SIZE)
    for heading, offset in COLUMNS:
        c.drawString(MARGIN_PT + offset, y, heading)
    c.setLineWidth(0.5)
    c.line(MARGIN_PT, y - 4, A4_WIDTH_PT - MARGIN_PT, y - 4)
    return y - ROW_HEIGHT_PT


def _draw_row(c: canvas.Canvas, number: int, question: Question, y: float) -> None:
    user_answer = "(timed out)" if question.timed_out else question.user_answer
    cells: Sequence[str] = (
        str(number),
        question.text,
        question.answer,
        user_answer,
        _RESULT_TEXT[question.grade],
    )
    c.setFont("Helvetica", BODY_FONT_SIZE)
    for i, (cell, (_, offset)) in enumerate(zip(cells, COLUMNS)):
        if i + 1 < len(COLUMNS):
            width = COLUMNS[i + 1][1] - offset - 8
        else:
            width = A4_WIDTH_PT - 2 * MARGIN_PT - offset
        c.drawString(MARGIN_PT + offset, y, _fit(c, cell, width))


def _fit(c: canvas.Canvas, text: str, width_pt: float) -> str:
    """Truncate text with an ellipsis so it fits the column width."""
    if c.stringWidth(text, "Helvetica", BODY_FONT_SIZE) <= width_pt:
        return text
    while text and c.stringWidth(text + "...", "Helvetica", BODY_FONT_SIZE) > width_pt:
        text = text[:-1]
    return text + "..."


def _draw_footer(c: canvas.Canvas) -> None:
    """Draw centered footer 15pt from the bottom of the page."""
    footer_text = _get_footer_text()

    c.saveState()
    c.setFont("Helvetica", FOOTER_FONT_SIZE)
    c.setFillColorRGB(0.4, 0.4, 0.4)
    text_width = c.stringWidth(footer_text, "Helvetica", FOOTER_FONT_SIZE)
    c.drawString((A4_WIDTH_PT - text_width) / 2, 15, footer_text)
    c.restoreState()
