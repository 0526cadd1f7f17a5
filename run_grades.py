#!/usr/bin/env python3
"""CLI entrypoint for the student grade report.

Usage::

    python run_grades.py                      # prompt for students
    python run_grades.py --file grades.csv    # read name,grade rows
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from typing import TextIO

from grades.summary import GradeSummary, Student, read_students_csv, summarize


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print a summary report of student grades.",
    )
    parser.add_argument(
        "--file",
        default=None,
        type=str,
        help="CSV file with a name,grade header. Prompts interactively when omitted.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )
    return parser.parse_args(argv)


def _setup_logging(level: str) -> None:
    """Configure root logger with a clean format."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def prompt_students(input_fn: Callable[[str], str] = input) -> list[Student]:
    """Ask for a student count, then each name and grade."""
    count = _ask_int(input_fn, "Enter number of students: ")
    students: list[Student] = []
    for idx in range(count):
        name = _ask_name(input_fn, f"Enter name of student #{idx + 1}: ")
        grade = _ask_int(input_fn, f"Enter grade for {name}: ")
        students.append(Student(name=name, grade=grade))
    return students


def _ask_name(input_fn: Callable[[str], str], prompt: str) -> str:
    while True:
        name = input_fn(prompt).strip()
        if name:
            return name
        print("Name must not be empty.")


def _ask_int(input_fn: Callable[[str], str], prompt: str) -> int:
    while True:
        text = input_fn(prompt)
        try:
            return int(text.strip())
        except ValueError:
            print(f"Not a whole number: {text!r}")


def print_report(summary: GradeSummary, out: TextIO | None = None) -> None:
    out = out if out is not None else sys.stdout
    print("\n--- Student Summary Report ---", file=out)
    for student in summary.students:
        print(f"Name: {student.name}, Grade: {student.grade}", file=out)
    print(f"\nAverage Grade: {summary.average:.2f}", file=out)
    print(f"Highest Grade: {summary.highest}", file=out)
    print(f"Lowest Grade: {summary.lowest}", file=out)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    _setup_logging(args.log_level)

    if args.file is not None:
        try:
            students = read_students_csv(args.file)
        except (OSError, ValueError) as exc:
            print(f"Cannot read students: {exc}", file=sys.stderr)
            return 1
    else:
        students = prompt_students()

    try:
        summary = summarize(students)
    except ValueError as exc:
        print(f"Nothing to report: {exc}", file=sys.stderr)
        return 1
    print_report(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
