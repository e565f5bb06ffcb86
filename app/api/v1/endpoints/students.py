"""
Student endpoints

Read-only access to the student list and to the courses each student is
enrolled in.
"""
import logging

from fastapi import APIRouter, Depends, Response

from app.api.errors import handle_error
from app.db.base import InMemoryStore
from app.db.session import get_db
from app.infrastructure.exceptions import AppError
from app.services.core.student_service import student_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/students")
async def get_students(db: InMemoryStore = Depends(get_db)):
    """Return every student record"""
    try:
        return await student_service.list_students(db)
    except Exception as e:
        return handle_error(e)


@router.get("/students/{student_id}/courses")
async def get_student_courses(
        student_id: str,
        response: Response,
        db: InMemoryStore = Depends(get_db),
):
    """
    Return the courses of one student

    Args:
        student_id (str): 9 digit student id from the URL path

    Returns:
        dict: {"success": true, "message": ..., "data": {"studentId": ..., "courses": [...]}}
            400 for a malformed id, 404 for an unknown student
    """
    try:
        result = await student_service.get_student_courses(student_id, db)
        response.headers["Link"] = f"/students/{student_id}/courses"
        return result
    except AppError:
        raise
    except Exception as e:
        return handle_error(e)
