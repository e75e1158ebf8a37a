"""
Tests for the quiz command line entry point.
"""

import io
import json

import fitz
import pytest

from quiz_toolkit import __version__
from quiz_toolkit.cli import EXIT_ERROR, EXIT_INPUT_ERROR, EXIT_OK, build_parser, main


class TestBuildParser:

    def test_parse_when_no_args_then_defaults(self):
        """Defaults match the documented flags."""
        args = build_parser().parse_args([])
        assert args.file.name == "problems.csv"
        assert args.time == 30.0
        assert args.timer == "global"
        assert not args.random
        assert not args.no_wait

    def test_parse_when_shuffle_alias_then_random(self):
        """--shuffle and -r are aliases of --random."""
        assert build_parser().parse_args(["--shuffle"]).random
        assert build_parser().parse_args(["-r"]).random

    @pytest.mark.parametrize("value", ["0", "-5", "soon"])
    def test_parse_when_time_invalid_then_exits_2(self, value, capsys):
        """Invalid time limits are usage errors."""
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["-t", value])
        assert exc_info.value.code == 2

    def test_version_when_requested_then_prints_version(self, capsys):
        """--version prints the package version."""
        with pytest.raises(SystemExit):
            main(["--version"])
        assert __version__ in capsys.readouterr().out


class TestMain:

    def test_main_when_all_correct_then_exit_ok_and_report(self, problems_csv):
        """A completed quiz prints the intro, prompts and report."""
        out = io.StringIO()

        code = main(["-f", str(problems_csv), "--no-wait"], stdin=io.StringIO("4\n6\n"), stdout=out)

        assert code == EXIT_OK
        text = out.getvalue()
        assert "You will have 30 seconds to answer 2 questions." in text
        assert "Press [Enter]" not in text
        assert "Question 1: 2+2 = " in text
        assert "100.00% (2/2) of the answers were correct." in text
        assert "Timer has run out!" not in text

    def test_main_when_waiting_for_enter_then_first_line_not_an_answer(self, problems_csv):
        """The start line is consumed before the first question."""
        out = io.StringIO()

        code = main(["-f", str(problems_csv)], stdin=io.StringIO("\n4\n6\n"), stdout=out)

        assert code == EXIT_OK
        assert "Press [Enter] to start the quiz." in out.getvalue()
        assert "100.00% (2/2)" in out.getvalue()

    def test_main_when_global_timer_expires_then_timed_out_message(self, problems_csv, scripted_stream):
        """A timeout is announced and the partial score printed."""
        out = io.StringIO()
        stdin = scripted_stream([(0, "4\n")], stall=True)

        code = main(["-f", str(problems_csv), "-t", "0.3", "--no-wait"], stdin=stdin, stdout=out)

        assert code == EXIT_OK
        assert "\nTimer has run out!\n" in out.getvalue()
        assert "50.00% (1/2) of the answers were correct." in out.getvalue()

    def test_main_when_per_question_then_intro_mentions_each(self, problems_csv):
        """The per-question intro describes the limit per question."""
        out = io.StringIO()

        main(
            ["-f", str(problems_csv), "--timer", "per-question", "-t", "5", "--no-wait"],
            stdin=io.StringIO("4\n6\n"),
            stdout=out,
        )

        assert "You will have 5 seconds for each of 2 questions." in out.getvalue()

    def test_main_when_file_missing_then_exit_error(self, tmp_path, capsys):
        """A missing bank exits 1 with an error message."""
        code = main(["-f", str(tmp_path / "none.csv"), "--no-wait"], stdin=io.StringIO(), stdout=io.StringIO())

        assert code == EXIT_ERROR
        assert "An error was encountered" in capsys.readouterr().err

    def test_main_when_bank_empty_then_exit_error(self, tmp_path, capsys):
        """An empty bank exits 1."""
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"questions": []}), encoding="utf-8")

        code = main(["-f", str(path), "--no-wait"], stdin=io.StringIO(), stdout=io.StringIO())

        assert code == EXIT_ERROR

    def test_main_when_input_closes_then_exit_input_error(self, problems_csv, capsys):
        """Running out of input mid-quiz exits 3."""
        code = main(["-f", str(problems_csv), "--no-wait"], stdin=io.StringIO("4\n"), stdout=io.StringIO())

        assert code == EXIT_INPUT_ERROR
        assert "closed" in capsys.readouterr().err

    def test_main_when_table_requested_then_table_printed(self, problems_csv):
        """--table prints the per-question results."""
        out = io.StringIO()

        main(["-f", str(problems_csv), "--no-wait", "--table"], stdin=io.StringIO("4\n7\n"), stdout=out)

        text = out.getvalue()
        assert "Question  Answer  User Answer  Correct" in text
        assert "[ ✓ ]" in text
        assert "[ X ]" in text

    def test_main_when_pdf_requested_then_sheet_written(self, problems_csv, tmp_path):
        """--pdf writes a results sheet titled with the bank name."""
        out = io.StringIO()
        pdf_path = tmp_path / "out" / "results.pdf"

        code = main(
            ["-f", str(problems_csv), "--no-wait", "--pdf", str(pdf_path)],
            stdin=io.StringIO("4\n6\n"),
            stdout=out,
        )

        assert code == EXIT_OK
        assert f"Results sheet written to {pdf_path}" in out.getvalue()
        with fitz.open(pdf_path) as doc:
            assert "problems.csv" in doc[0].get_text()

    def test_main_when_log_file_given_then_session_logged(self, problems_csv, tmp_path):
        """--log-file records the session at debug level."""
        log_path = tmp_path / "quiz.log"

        main(
            ["-f", str(problems_csv), "--no-wait", "--log-file", str(log_path)],
            stdin=io.StringIO("4\n6\n"),
            stdout=io.StringIO(),
        )

        assert "Session completed" in log_path.read_text(encoding="utf-8")

    def test_main_when_log_file_unwritable_then_exit_error(self, problems_csv, tmp_path, capsys):
        """An unopenable log file exits 1 with an error message, not a traceback."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        out = io.StringIO()

        code = main(
            ["-f", str(problems_csv), "--no-wait", "--log-file", str(blocker / "quiz.log")],
            stdin=io.StringIO("4\n6\n"),
            stdout=out,
        )

        assert code == EXIT_ERROR
        assert "An error was encountered" in capsys.readouterr().err
        assert out.getvalue() == ""
