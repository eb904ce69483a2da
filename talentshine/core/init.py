"""
Application initialization module
Handles initial setup tasks like seeding the course catalogue
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from sqlalchemy.orm import Session

from talentshine.core.config import settings
from talentshine.schemas.course import CourseCreate
from talentshine.services.course import CourseService

logger = logging.getLogger(__name__)


def load_course_seed(path: Union[str, Path]) -> List[CourseCreate]:
    """
    Read a JSON seed file holding a list of courses.

    Entries use the API field names (``title``, ``price``, ``googleMeet``...).
    Raises ValueError when the file does not contain a list.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Course seed file {path} must contain a JSON list")

    return [CourseCreate.model_validate(item) for item in data]


def seed_courses(db: Session, path: Union[str, Path]) -> int:
    """
    Seed courses from ``path``. Courses whose title already exists are skipped.

    Args:
        db: Database session
        path: JSON seed file

    Returns:
        Number of courses created
    """
    courses = load_course_seed(path)
    created = CourseService(db).seed_courses(courses)
    logger.info(f"Seeded {len(created)} of {len(courses)} courses from {path}")
    return len(created)


def initialize_application(db: Session) -> None:
    """
    Run all application initialization tasks.

    Args:
        db: Database session
    """
    logger.info("Starting application initialization...")

    if settings.courses_seed_file:
        seed_courses(db, settings.courses_seed_file)
    else:
        logger.info("No course seed file configured, skipping course seeding")

    logger.info("Application initialization completed")
