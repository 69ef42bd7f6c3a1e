# services/grading_service.py
import logging
import re
from datetime import datetime
from pathlib import Path

from models.student import Student
# grading_service.py reads "id,name,score" lines into Student records and
# writes the grade report. Bad lines are logged and skipped; a missing input
# file is the caller's problem (FileNotFoundError).

logger = logging.getLogger("warehouse.grading")

# optional sign, ASCII digits only
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class MissingFieldError(Exception):
    pass


class InvalidScoreFormatError(Exception):
    pass


class StudentResultProcessor:
    def read_students_from_file(self, input_path) -> list[Student]:
        students: list[Student] = []

        # undecodable bytes become U+FFFD so one bad line cannot abort the read
        with open(input_path, "r", encoding="utf-8", errors="replace") as f:
            for line_number, line in enumerate(f, start=1):
                try:
                    students.append(self._parse_line(line.rstrip("\r\n"), line_number))
                except (MissingFieldError, InvalidScoreFormatError) as e:
                    logger.warning(f"Skipping line {line_number}: {e}")

        logger.info(f"Read {len(students)} students from {input_path}")
        return students

    def _parse_line(self, line: str, line_number: int) -> Student:
        fields = line.split(",")
        if len(fields) != 3:
            raise MissingFieldError(
                f"Line {line_number}: Expected 3 fields but found {len(fields)}")

        student_id = _parse_int(fields[0])
        if student_id is None:
            raise InvalidScoreFormatError(
                f"Line {line_number}: Invalid ID format '{fields[0]}'")

        score = _parse_int(fields[2])
        if score is None:
            raise InvalidScoreFormatError(
                f"Line {line_number}: Invalid score format '{fields[2]}'")

        if score < 0 or score > 100:
            raise InvalidScoreFormatError(
                f"Line {line_number}: Score must be between 0-100 (got {score})")

        return Student(student_id, fields[1].strip(), score)

    def write_report_to_file(self, students: list[Student], output_path, now: datetime | None = None) -> None:
        now = now or datetime.now()
        lines = [
            "=== Student Grade Report ===",
            f"Generated: {now:%Y-%m-%d %H:%M}",
            "============================",
            "",
        ]
        for s in students:
            lines.append(f"{s.full_name} (ID: {s.id}): Score = {s.score}, Grade = {s.grade()}")
        lines.append("")
        lines.append(f"Total Students Processed: {len(students)}")

        Path(output_path).write_text("\n".join(lines) + "\n", encoding="utf-8")
        logger.info(f"Report for {len(students)} students written to {output_path}")


def _parse_int(field: str) -> int | None:
    field = field.strip()
    if not _INTEGER_RE.fullmatch(field):
        return None
    return int(field)
