"""
Course endpoints

CRUD over the in-memory course list. Mutations take the course id from the
request body rather than the path.
"""
import logging

from fastapi import APIRouter, Depends, Response

from app.api.errors import handle_error
from app.db.base import InMemoryStore
from app.db.session import get_db
from app.infrastructure.exceptions import AppError
from app.schemas.course import CourseDeleteBody, CoursePostBody, CoursePutBody
from app.services.core.course_service import course_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/courses")
async def get_courses(db: InMemoryStore = Depends(get_db)):
    """Return every course"""
    try:
        return await course_service.list_courses(db)
    except Exception as e:
        return handle_error(e)


@router.get("/courses/{course_id}")
async def get_course(
        course_id: str,
        response: Response,
        db: InMemoryStore = Depends(get_db),
):
    """
    Return a single course

    Args:
        course_id (str): 6 digit course id from the URL path

    Returns:
        dict: the course under "data"; 400 for a malformed id, 404 when missing
    """
    try:
        result = await course_service.get_course(course_id, db)
        response.headers["Link"] = f"/courses/{course_id}"
        return result
    except AppError:
        raise
    except Exception as e:
        return handle_error(e)


@router.post("/courses")
async def create_course(
        body: CoursePostBody,
        response: Response,
        db: InMemoryStore = Depends(get_db),
):
    """
    Add a course

    Returns:
        dict: the created course; 409 when the id is taken
    """
    try:
        result = await course_service.create_course(body, db)
        response.headers["Link"] = f"/courses/{body.courseId}"
        return result
    except AppError:
        raise
    except Exception as e:
        return handle_error(e)


@router.put("/courses")
async def update_course(
        body: CoursePutBody,
        response: Response,
        db: InMemoryStore = Depends(get_db),
):
    """Merge the body onto an existing course and return the result"""
    try:
        result = await course_service.update_course(body, db)
        response.headers["Link"] = f"/courses/{body.courseId}"
        return result
    except AppError:
        raise
    except Exception as e:
        return handle_error(e)


@router.delete("/courses")
async def delete_course(
        body: CourseDeleteBody,
        db: InMemoryStore = Depends(get_db),
):
    """Remove a course and return the removed record"""
    try:
        return await course_service.delete_course(body, db)
    except AppError:
        raise
    except Exception as e:
        return handle_error(e)
