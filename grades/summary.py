"""Grade summary models and computation."""

from __future__ import annotations

import csv
import logging
from decimal import Decimal
from pathlib import Path

from pydantic import BaseModel, Field

from models.money import round2

logger = logging.getLogger(__name__)


class Student(BaseModel):
    """One student and their grade."""

    name: str = Field(min_length=1)
    grade: int


class GradeSummary(BaseModel):
    """Class-wide statistics over a non-empty list of students."""

    students: list[Student]
    average: Decimal  # rounded half-up to 2 places
    highest: int
    lowest: int


def summarize(students: list[Student]) -> GradeSummary:
    """Compute the average, highest and lowest grade.

    Raises ``ValueError`` when *students* is empty.
    """
    if not students:
        raise ValueError("Cannot summarize an empty class.")
    grades = [s.grade for s in students]
    average = round2(Decimal(sum(grades)) / len(grades))
    return GradeSummary(
        students=list(students),
        average=average,
        highest=max(grades),
        lowest=min(grades),
    )


def read_students_csv(path: str | Path) -> list[Student]:
    """Load students from a ``name,grade`` CSV file with a header row.

    Raises ``FileNotFoundError`` if the file is missing and ``ValueError``
    naming the line for any malformed row.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Student file not found: {path}")

    students: list[Student] = []
    with path.open(newline="", encoding="utf-8") as fh:
        reader = csv.reader(fh)
        header = next(reader, None)
        if header is None or [col.strip().lower() for col in header] != ["name", "grade"]:
            raise ValueError(f"{path}:1: expected header name,grade")
        for row in reader:
            if not row or all(not col.strip() for col in row):
                continue
            if len(row) != 2:
                raise ValueError(f"{path}:{reader.line_num}: expected 2 columns, got {len(row)}")
            try:
                students.append(Student(name=row[0].strip(), grade=int(row[1].strip())))
            except ValueError as exc:
                raise ValueError(f"{path}:{reader.line_num}: {exc}") from exc

    logger.info("Loaded %d student(s) from '%s'.", len(students), path)
    return students
