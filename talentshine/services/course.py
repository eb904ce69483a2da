# talentshine/services/course.py
import logging
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from talentshine.core.decorator import db_exception
from talentshine.models.course import Course
from talentshine.schemas.course import CourseCreate

logger = logging.getLogger(__name__)


class CourseService:
    def __init__(self, db: Session):
        self.db = db

    def get_courses(self) -> List[Course]:
        """Every course, unpaginated"""
        return self.db.query(Course).order_by(Course.id).all()

    def get_course(self, course_id: int) -> Optional[Course]:
        return self.db.query(Course).filter(Course.id == course_id).first()

    @db_exception()
    def seed_courses(self, courses: Iterable[CourseCreate]) -> List[Course]:
        """
        Insert the given courses, skipping titles that already exist.
        Returns only the newly created rows.
        """
        existing_titles = {title for (title,) in self.db.query(Course.title).all()}

        created = []
        for course_in in courses:
            if course_in.title in existing_titles:
                logger.info(f"Course '{course_in.title}' already exists, skipping")
                continue
            course = Course(**course_in.model_dump())
            self.db.add(course)
            created.append(course)
            existing_titles.add(course_in.title)

        self.db.commit()
        for course in created:
            self.db.refresh(course)

        return created
