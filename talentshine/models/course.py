# talentshine/models/course.py
from sqlalchemy import JSON, Column, DateTime, Integer, Numeric, String, Text
from sqlalchemy.sql import func

from talentshine.core.database import Base


class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)

    # Basic Info
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    image = Column(Text, nullable=True)  # Course image URL
    topics = Column(JSON, nullable=True)  # list of topic strings

    # Pricing, missing price is treated as free
    price = Column(Numeric(10, 2), nullable=True)

    # External meeting link handed to enrolled users
    google_meet = Column(Text, nullable=True)

    created_at = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self):
        return f"<Course(id={self.id}, title='{self.title}', price={self.price})>"
