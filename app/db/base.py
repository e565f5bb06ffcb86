import copy
import logging
from typing import List

from app.schemas.course import Course
from app.schemas.student import Student

logger = logging.getLogger(__name__)

# Seed data loaded at startup and on reset
SEED_COURSES: List[dict] = [
    {
        "courseId": 261207,
        "courseTitle": "Basic Computer Engineering Lab",
        "instructors": ["Dome Potikanond", "Passakorn Phannachitta"],
    },
    {
        "courseId": 261497,
        "courseTitle": "Full Stack Development",
        "instructors": ["Dome Potikanond", "Chinawat Isradisaikul"],
    },
    {
        "courseId": 269101,
        "courseTitle": "Introduction to Computer Engineering",
        "instructors": ["Navadon Khunlertgit"],
    },
]

SEED_STUDENTS: List[dict] = [
    {"studentId": "650610001", "courses": [261207, 261497]},
    {"studentId": "650610002", "courses": [269101]},
    {"studentId": "650610003", "courses": [261207, 999999]},
    {"studentId": "650610004"},
]


class InMemoryStore:
    """
    Process-local storage for students and courses

    Both collections are plain lists scanned linearly; nothing is persisted.
    """

    def __init__(self):
        self.students: List[Student] = []
        self.courses: List[Course] = []
        self.reset()

    def reset(self) -> None:
        """Discard every change and restore the seed data"""
        self.students = [Student(**s) for s in copy.deepcopy(SEED_STUDENTS)]
        self.courses = [Course(**c) for c in copy.deepcopy(SEED_COURSES)]
        logger.debug(
            f"store seeded with {len(self.students)} students and {len(self.courses)} courses"
        )


store = InMemoryStore()


def reset_store() -> None:
    store.reset()
