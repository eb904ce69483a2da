"""
Models package initialization
Import all models so their tables are registered on Base
"""

from .course import Course
from .enrollment import Enrollment
from .user import User

__all__ = [
    "Course",
    "Enrollment",
    "User",
]
