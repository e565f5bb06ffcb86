from fastapi import APIRouter

from app.api.v1.endpoints import courses, info, students


api_router = APIRouter()

# Routers of each module
api_router.include_router(info.router, tags=["info"])
api_router.include_router(students.router, tags=["students"])
api_router.include_router(courses.router, tags=["courses"])
