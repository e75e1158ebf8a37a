"""
Module: cli

Purpose:
    Command line entry point: load a question bank, run a timed session on
    stdin/stdout, print the score (and optionally a table / PDF sheet).

Key Functions:
    - build_parser(): argparse definition
    - main(): Entry point returning a process exit code

Exit codes:
    0  session completed or timed out
    1  question bank could not be loaded (or is empty), log file could not
       be opened, or PDF write failed
    2  invalid command line (argparse)
    3  answer stream closed or broken mid-session
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from quiz_toolkit import __version__
from quiz_toolkit.common.logging_utils import configure_logging, detach_handlers
from quiz_toolkit.core.models import EmptySourceError, QuestionSet
from quiz_toolkit.loading import LoaderError, load_question_set
from quiz_toolkit.output import render_results_pdf, render_table, report
from quiz_toolkit.session import (
    AnswerReader,
    AnswerReadError,
    QuestionOrder,
    SessionConfig,
    TimerPolicy,
    run_session,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INPUT_ERROR = 3


def _positive_seconds(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if seconds <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value!r}")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quiz",
        description="Run a timed quiz from a CSV or JSON question bank.",
    )
    parser.add_argument(
        "-f", "--file", type=Path, default=Path("problems.csv"),
        help="Question bank (.csv 'question,answer' rows or .json) (default problems.csv)",
    )
    parser.add_argument(
        "-t", "--time", type=_positive_seconds, default=30.0,
        help="Time limit in seconds (default 30)",
    )
    parser.add_argument(
        "--timer", choices=[p.value for p in TimerPolicy], default=TimerPolicy.GLOBAL.value,
        help="Apply the time limit to the whole quiz or to each question (default global)",
    )
    parser.add_argument(
        "-r", "--random", "--shuffle", dest="random", action="store_true",
        help="Ask the questions in random order",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for --random")
    parser.add_argument(
        "--no-wait", action="store_true",
        help="Start immediately instead of waiting for [Enter]",
    )
    parser.add_argument("--table", action="store_true", help="Print a per-question results table")
    parser.add_argument("--pdf", type=Path, default=None, help="Write a PDF results sheet to this path")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Log to stderr (-v info, -vv debug)",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Write a debug log to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(
    argv: Optional[List[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """
    Parse arguments, run the quiz and return the exit code.

    argparse exits with status 2 on invalid arguments.
    """
    args = build_parser().parse_args(argv)
    try:
        handlers = configure_logging(args.verbose, args.log_file)
    except OSError as e:
        print(f"An error was encountered: could not open log file: {e}", file=sys.stderr)
        return EXIT_ERROR
    try:
        return _run(args, stdin or sys.stdin, stdout or sys.stdout)
    finally:
        detach_handlers(handlers)


def _run(args: argparse.Namespace, stdin: TextIO, out: TextIO) -> int:
    config = SessionConfig(
        duration=args.time,
        timer_policy=TimerPolicy.from_string(args.timer),
        order=QuestionOrder.from_flag(args.random),
        seed=args.seed,
    )

    try:
        question_set = load_question_set(args.file)
    except (LoaderError, EmptySourceError) as e:
        logger.error(f"Could not load questions: {e}")
        print(f"An error was encountered: {e}", file=sys.stderr)
        return EXIT_ERROR

    reader = AnswerReader(stdin)
    _print_intro(out, config, question_set, wait=not args.no_wait)

    try:
        if not args.no_wait:
            reader.read_line()
        outcome = run_session(question_set, reader, config, out=out)
    except AnswerReadError as e:
        print(f"\nAn error was encountered: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    if outcome.timed_out:
        out.write("\nTimer has run out!\n")
    out.write("\n" + report(outcome.question_set) + "\n")

    if args.table:
        out.write("\n" + render_table(outcome.question_set) + "\n")

    if args.pdf is not None:
        try:
            render_results_pdf(outcome, args.pdf, title=f"Quiz results: {args.file.name}")
        except OSError as e:
            logger.error(f"Could not write results sheet: {e}")
            print(f"An error was encountered: {e}", file=sys.stderr)
            return EXIT_ERROR
        out.write(f"Results sheet written to {args.pdf}\n")

    out.flush()
    return EXIT_OK


def _print_intro(out: TextIO, config: SessionConfig, question_set: QuestionSet, *, wait: bool) -> None:
    count = question_set.total_count
    if config.timer_policy is TimerPolicy.PER_QUESTION:
        out.write(f"You will have {config.duration:g} seconds for each of {count} questions.\n")
    else:
        out.write(f"You will have {config.duration:g} seconds to answer {count} questions.\n")
    if wait:
        out.write("Press [Enter] to start the quiz.\n")
    out.flush()


if __name__ == "__main__":
    raise SystemExit(main())
