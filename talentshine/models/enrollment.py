# talentshine/models/enrollment.py
from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, Numeric, String, Text

from talentshine.core.database import Base


class Enrollment(Base):
    """
    Snapshot of the user and the course at enrollment time.
    Course fields are copied so later course edits do not rewrite history.
    """

    __tablename__ = "enrollments"

    id = Column(Integer, primary_key=True, index=True)

    # User snapshot
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    user_name = Column(String(255), nullable=False)
    user_phone = Column(String(20), nullable=False, default="")

    # Course snapshot
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    course_title = Column(String(255), nullable=True)
    course_price = Column(Numeric(10, 2), nullable=False, default=0)
    course_image = Column(Text, nullable=False, default="")
    course_description = Column(Text, nullable=False, default="")
    course_topics = Column(JSON, nullable=False, default=list)
    google_meet_link = Column(Text, nullable=False, default="")

    date = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<Enrollment(id={self.id}, user_id={self.user_id}, course_id={self.course_id})>"
