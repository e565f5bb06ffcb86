"""
Core Services Module

Student lookups and course CRUD.
"""

from .course_service import CourseService, course_service
from .student_service import StudentService, student_service

__all__ = ["CourseService", "course_service", "StudentService", "student_service"]
