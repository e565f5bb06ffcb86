from fastapi import APIRouter

from app.core.config import settings
from app.infrastructure.response import success_response
from app.schemas.student import StudentInfo

router = APIRouter()


@router.get("/")
async def get_info():
    """Static information about the author of this service"""
    info = StudentInfo(
        studentId=settings.INFO_STUDENT_ID,
        firstName=settings.INFO_FIRST_NAME,
        lastName=settings.INFO_LAST_NAME,
        program=settings.INFO_PROGRAM,
        section=settings.INFO_SECTION,
    )
    return success_response(data=info.model_dump(), message="Student Information")
