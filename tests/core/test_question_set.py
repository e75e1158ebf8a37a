"""
Unit Tests for QuestionSet

Loading policy, tally bookkeeping and snapshots.
"""

import pytest

from quiz_toolkit.core.models import (
    EmptySourceError,
    Grade,
    GradingError,
    QuestionSet,
    SessionOutcome,
    SessionStatus,
)


class TestLoad:
    """Tests for QuestionSet.load()."""

    def test_load_when_records_then_keeps_file_order(self, arithmetic_records):
        """Questions keep the order of the source records."""
        qs = QuestionSet.load(arithmetic_records)
        assert [(q.text, q.answer) for q in qs] == arithmetic_records
        assert qs.total_count == 2
        assert len(qs) == 2

    def test_load_when_no_records_then_raises_empty_source(self):
        """An empty bank is rejected, not turned into a 0/0 quiz."""
        with pytest.raises(EmptySourceError):
            QuestionSet.load([])

    def test_load_when_generator_then_consumed_once(self):
        """Any iterable of pairs can be loaded."""
        qs = QuestionSet.load((f"{i}+0", str(i)) for i in range(5))
        assert qs.total_count == 5
        assert qs[4].text == "4+0"

    def test_load_when_created_then_counters_start_at_zero(self, arithmetic_set):
        """A fresh set has nothing answered."""
        assert arithmetic_set.correct_count == 0
        assert arithmetic_set.answered_count == 0


class TestRecord:
    """Tests for record() / record_timeout()."""

    def test_record_when_correct_then_increments_tally(self, arithmetic_set):
        """A correct answer bumps the tally."""
        arithmetic_set.record(0, "4", correct=True)
        assert arithmetic_set.correct_count == 1
        assert arithmetic_set.answered_count == 1
        assert arithmetic_set[0].grade is Grade.CORRECT

    def test_record_when_incorrect_then_tally_unchanged(self, arithmetic_set):
        """A wrong answer is recorded without changing the tally."""
        arithmetic_set.record(1, "7", correct=False)
        assert arithmetic_set.correct_count == 0
        assert arithmetic_set.answered_count == 1

    def test_record_when_question_graded_twice_then_tally_counts_once(self, arithmetic_set):
        """Regrading is refused and the tally is not double counted."""
        arithmetic_set.record(0, "4", correct=True)
        with pytest.raises(GradingError):
            arithmetic_set.record(0, "4", correct=True)
        assert arithmetic_set.correct_count == 1

    def test_record_timeout_when_called_then_incorrect(self, arithmetic_set):
        """A timeout counts as answered but not correct."""
        arithmetic_set.record_timeout(0)
        assert arithmetic_set[0].timed_out
        assert arithmetic_set.correct_count == 0
        assert arithmetic_set.answered_count == 1

    def test_tallies_when_fully_graded_then_within_bounds(self):
        """The correct count never exceeds the total."""
        qs = QuestionSet.load([(str(i), str(i)) for i in range(10)])
        for i in range(10):
            qs.record(i, str(i), correct=i % 3 == 0)
            assert 0 <= qs.correct_count <= qs.total_count
        assert qs.correct_count == 4


class TestSnapshot:
    """Tests for snapshot()."""

    def test_snapshot_when_original_mutated_then_snapshot_unchanged(self, arithmetic_set):
        """Later grading does not leak into a snapshot."""
        arithmetic_set.record(0, "4", correct=True)
        snap = arithmetic_set.snapshot()

        arithmetic_set.record(1, "6", correct=True)

        assert snap.correct_count == 1
        assert snap[1].grade is Grade.UNGRADED
        assert snap.total_count == 2

    def test_snapshot_when_taken_then_questions_are_copies(self, arithmetic_set):
        """Snapshot questions are equal copies, not shared objects."""
        snap = arithmetic_set.snapshot()
        assert snap[0] is not arithmetic_set[0]
        assert snap[0] == arithmetic_set[0]

    def test_repr_when_formatted_then_shows_counts(self, arithmetic_set):
        """repr() summarises total, answered and correct counts."""
        arithmetic_set.record(0, "4", correct=True)
        assert repr(arithmetic_set) == "QuestionSet(total=2, answered=1, correct=1)"


class TestSessionOutcome:
    def test_timed_out_when_status_timed_out_then_true(self, arithmetic_set):
        """timed_out reflects the TIMED_OUT status only."""
        outcome = SessionOutcome(SessionStatus.TIMED_OUT, arithmetic_set)
        assert outcome.timed_out
        assert not SessionOutcome(SessionStatus.COMPLETED, arithmetic_set).timed_out
