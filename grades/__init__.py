"""Student grade report: average, highest and lowest grade."""

from .summary import GradeSummary, Student, read_students_csv, summarize

__all__ = ["GradeSummary", "Student", "read_students_csv", "summarize"]
