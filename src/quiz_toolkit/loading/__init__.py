"""
Module: loading

Purpose:
    Question bank loading. Turns CSV/JSON files into ordered records and
    QuestionSets.

Key Functions:
    - load_records(): Ordered (question, answer) pairs
    - load_question_set(): Ready-to-run QuestionSet

Dependencies:
    - quiz_toolkit.core.models: QuestionSet
    - quiz_toolkit.core.schemas.validator: Schema validation

Used By:
    - quiz_toolkit.cli
"""

from .loader import load_records, load_question_set, LoaderError

__all__ = [
    "load_records",
    "load_question_set",
    "LoaderError",
]
