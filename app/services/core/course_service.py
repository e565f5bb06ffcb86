import logging
from typing import Optional

from app.db.base import InMemoryStore
from app.infrastructure.exceptions import ConflictError, NotFoundError
from app.infrastructure.response import success_response
from app.schemas.course import (
    Course,
    CourseDeleteBody,
    CoursePostBody,
    CoursePutBody,
    parse_course_id,
)

logger = logging.getLogger(__name__)


class CourseService:

    @staticmethod
    def find_index(db: InMemoryStore, course_id: int) -> Optional[int]:
        for index, course in enumerate(db.courses):
            if course.courseId == course_id:
                return index
        return None

    @staticmethod
    async def list_courses(db: InMemoryStore):
        return success_response(
            data=[c.model_dump() for c in db.courses],
            message="Get all courses successfully",
        )

    @staticmethod
    async def get_course(raw_course_id: str, db: InMemoryStore):
        course_id = parse_course_id(raw_course_id)

        index = CourseService.find_index(db, course_id)
        if index is None:
            logger.warning(f"course {course_id} not found")
            raise NotFoundError("Course does not exists")

        return success_response(
            data=db.courses[index].model_dump(),
            message=f"Get course {course_id} successfully",
        )

    @staticmethod
    async def create_course(body: CoursePostBody, db: InMemoryStore):
        """
        Append a new course

        Raises:
            ConflictError: a course with the same id already exists
        """
        if CourseService.find_index(db, body.courseId) is not None:
            raise ConflictError("Course Id is already exists")

        course = Course(**body.model_dump())
        db.courses.append(course)
        logger.info(f"course {course.courseId} created")

        return success_response(
            data=course.model_dump(),
            message=f"Course {course.courseId} has been added successfully",
        )

    @staticmethod
    async def update_course(body: CoursePutBody, db: InMemoryStore):
        """
        Merge the provided fields onto an existing course

        Fields missing from the body keep their stored values.
        """
        index = CourseService.find_index(db, body.courseId)
        if index is None:
            raise NotFoundError("Course Id does not exists")

        merged = {**db.courses[index].model_dump(), **body.changes()}
        db.courses[index] = Course(**merged)
        logger.info(f"course {body.courseId} updated: {sorted(body.changes())}")

        return success_response(
            data=db.courses[index].model_dump(),
            message=f"course {body.courseId} has been updated successfully",
        )

    @staticmethod
    async def delete_course(body: CourseDeleteBody, db: InMemoryStore):
        index = CourseService.find_index(db, body.courseId)
        if index is None:
            raise NotFoundError("Course Id does not exists")

        deleted = db.courses.pop(index)
        logger.info(f"course {deleted.courseId} deleted")

        return success_response(
            data=deleted.model_dump(),
            message=f"Course {deleted.courseId} has been deleted successfully",
        )


course_service = CourseService()
