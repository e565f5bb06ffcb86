import logging
from typing import Optional

from app.db.base import InMemoryStore
from app.infrastructure.exceptions import NotFoundError
from app.infrastructure.response import success_response
from app.schemas.course import Course, CourseSummary
from app.schemas.student import Student, StudentCourses, parse_student_id

logger = logging.getLogger(__name__)


class StudentService:

    @staticmethod
    def find_student(db: InMemoryStore, student_id: str) -> Optional[Student]:
        return next((s for s in db.students if s.studentId == student_id), None)

    @staticmethod
    async def list_students(db: InMemoryStore):
        return success_response(
            data=[s.model_dump(exclude_none=True) for s in db.students],
            message="Get all students successfully",
        )

    @staticmethod
    async def get_student_courses(raw_student_id: str, db: InMemoryStore):
        """
        List the courses a student is enrolled in

        Course ids with no matching course are kept as empty objects.
        """
        student_id = parse_student_id(raw_student_id)

        student = StudentService.find_student(db, student_id)
        if student is None:
            logger.warning(f"student {student_id} not found")
            raise NotFoundError("Student does not exists")

        courses = []
        for course_id in student.courses or []:
            course: Optional[Course] = next(
                (c for c in db.courses if c.courseId == course_id), None
            )
            if course is None:
                courses.append(CourseSummary())
            else:
                courses.append(CourseSummary(courseId=course.courseId, courseTitle=course.courseTitle))

        result = StudentCourses(studentId=student_id, courses=courses)
        return success_response(
            data=result.model_dump(exclude_none=True),
            message=f"Get courses detail of student {student_id}",
        )


student_service = StudentService()
