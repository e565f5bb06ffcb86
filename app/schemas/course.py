import math
import re
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, StrictInt, StrictStr, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError

from app.infrastructure.exceptions import ValidationFailedError
from app.schemas.validation import first_issue

COURSE_ID_PATTERN = re.compile(r"[0-9]{6}")


def _check_course_id(value: int) -> int:
    if not COURSE_ID_PATTERN.fullmatch(str(value)):
        raise PydanticCustomError("course_id", "Course Id must be exactly 6 digits")
    return value


def _check_course_title(value: str) -> str:
    if not value.strip():
        raise PydanticCustomError("course_title", "Course title must not be empty")
    return value


def _check_instructors(value: List[str]) -> List[str]:
    if not value or any(not name.strip() for name in value):
        raise PydanticCustomError("instructors", "Course must have at least one instructor")
    return value


CourseId = Annotated[StrictInt, AfterValidator(_check_course_id)]
CourseTitle = Annotated[StrictStr, AfterValidator(_check_course_title)]
Instructors = Annotated[List[StrictStr], AfterValidator(_check_instructors)]


class Course(BaseModel):
    """
    Course record

    Stored in the in-memory course list and returned as-is by the API.
    """
    courseId: CourseId
    courseTitle: CourseTitle
    instructors: Instructors


class CoursePostBody(Course):
    """Request body of POST /courses; every field is required."""
    pass


class CoursePutBody(BaseModel):
    """
    Request body of PUT /courses

    Only courseId is required; the other fields are merged onto the stored
    course when present.
    """
    courseId: CourseId
    courseTitle: CourseTitle = None
    instructors: Instructors = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class CourseDeleteBody(BaseModel):
    courseId: CourseId


class CourseSummary(BaseModel):
    """A course as listed under a student; both fields stay unset for a dangling id."""
    courseId: Optional[int] = None
    courseTitle: Optional[str] = None


_course_id_adapter = TypeAdapter(CourseId)

NAN_MESSAGE = "Invalid input: expected number, received NaN"


def parse_course_id(raw: str) -> int:
    """
    Validate a course id taken from the URL path

    Any numeric text is accepted ("261207.0", "2.61207e5"); digit
    separators are not.

    Raises:
        ValidationFailedError: the segment is not a number or not a 6 digit id
    """
    if "_" in raw:
        raise ValidationFailedError(NAN_MESSAGE)
    try:
        number = float(raw)
    except ValueError:
        raise ValidationFailedError(NAN_MESSAGE)
    if math.isnan(number):
        raise ValidationFailedError(NAN_MESSAGE)
    if not number.is_integer():
        raise ValidationFailedError("Course Id must be exactly 6 digits")
    try:
        return _course_id_adapter.validate_python(int(number))
    except ValidationError as e:
        raise ValidationFailedError(first_issue(e.errors()))
