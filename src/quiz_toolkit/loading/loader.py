"""
Module: loading.loader

Purpose:
    Load question banks from disk into ordered (question, answer) records
    and into a QuestionSet. Malformed records are reported here; the session
    core only ever sees a clean, ordered list.

Key Functions:
    - load_records(): Read (question, answer) pairs from a CSV or JSON bank
    - load_question_set(): load_records() + QuestionSet.load()

Key Classes:
    - LoaderError: Exception for loading failures

Dependencies:
    - csv / json (std)
    - quiz_toolkit.core.models: QuestionSet
    - quiz_toolkit.core.schemas.validator: JSON bank validation

Used By:
    - quiz_toolkit.cli: Command line entry point
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import List, Tuple

from quiz_toolkit.core.models import QuestionSet
from quiz_toolkit.core.schemas.validator import validate_question_bank, ValidationError


logger = logging.getLogger(__name__)

Record = Tuple[str, str]


class LoaderError(Exception):
    """Error loading a question bank."""
    pass


def load_records(path: Path) -> List[Record]:
    """
    Read ordered (question, answer) records from a question bank.

    Supported formats (by suffix):
    - ``.csv``: one ``question,answer`` row per question, standard quoting.
      Extra columns are ignored; blank rows are skipped.
    - ``.json``: ``{"questions": [{"question": ..., "answer": ...}]}``

    Args:
        path: Question bank file

    Returns:
        Records in file order, fields stripped of surrounding whitespace

    Raises:
        LoaderError: If the file is missing, unreadable or malformed

    Example:
        >>> load_records(Path("problems.csv"))[:2]
        [('5+5', '10'), ('7+3', '10')]
    """
    if not path.exists():
        raise LoaderError(f"Question bank does not exist: {path}")

    suffix = path.suffix.lower()
    try:
        if suffix == ".csv":
            records = _read_csv(path)
        elif suffix == ".json":
            records = _read_json(path)
        else:
            raise LoaderError(f"Unsupported question bank format {suffix!r}: {path}")
    except (OSError, UnicodeDecodeError) as e:
        raise LoaderError(f"Failed to read {path}: {e}") from e

    logger.debug(f"Read {len(records)} records from {path}")
    return records


def load_question_set(path: Path) -> QuestionSet:
    """
    Load a question bank into a fresh QuestionSet.

    Raises:
        LoaderError: If the bank cannot be read
        EmptySourceError: If the bank holds no questions
    """
    records = load_records(path)
    question_set = QuestionSet.load(records)
    logger.info(f"Loaded {question_set.total_count} questions from {path}")
    return question_set


def _read_csv(path: Path) -> List[Record]:
    records: List[Record] = []
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        reader = csv.reader(f)
        try:
            for row in reader:
                if not any(field.strip() for field in row):
                    continue
                if len(row) < 2:
                    raise LoaderError(
                        f"{path.name}:{reader.line_num}: expected 'question,answer', got {row!r}"
                    )
                if len(row) > 2:
                    logger.debug(f"{path.name}:{reader.line_num}: ignoring {len(row) - 2} extra field(s)")
                records.append((row[0].strip(), row[1].strip()))
        except csv.Error as e:
            raise LoaderError(f"{path.name}:{reader.line_num}: {e}") from e
    return records


def _read_json(path: Path) -> List[Record]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise LoaderError(f"Invalid JSON in {path.name}: {e}") from e

    try:
        validate_question_bank(data)
    except ValidationError as e:
        where = f" at {e.path}" if e.path else ""
        raise LoaderError(f"Invalid question bank {path.name}{where}: {e}") from e

    return [
        (entry["question"].strip(), entry["answer"].strip())
        for entry in data["questions"]
    ]
