import re
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, StrictStr, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError

from app.infrastructure.exceptions import ValidationFailedError
from app.schemas.course import CourseId, CourseSummary
from app.schemas.validation import first_issue

STUDENT_ID_PATTERN = re.compile(r"[0-9]{9}")


def _check_student_id(value: str) -> str:
    if not STUDENT_ID_PATTERN.fullmatch(value):
        raise PydanticCustomError("student_id", "Student Id must contain 9 digits")
    return value


StudentId = Annotated[StrictStr, AfterValidator(_check_student_id)]


class Student(BaseModel):
    """
    Student record

    courses holds course ids; it may be missing on a student who never
    enrolled.
    """
    studentId: StudentId
    courses: Optional[List[CourseId]] = None


class StudentCourses(BaseModel):
    studentId: str
    courses: List[CourseSummary]


class StudentInfo(BaseModel):
    """Payload of the static GET / endpoint."""
    studentId: str
    firstName: str
    lastName: str
    program: str
    section: str


_student_id_adapter = TypeAdapter(StudentId)


def parse_student_id(raw: str) -> str:
    """
    Validate a student id taken from the URL path

    Raises:
        ValidationFailedError: the segment is not exactly 9 digits
    """
    try:
        return _student_id_adapter.validate_python(raw)
    except ValidationError as e:
        raise ValidationFailedError(first_issue(e.errors()))
