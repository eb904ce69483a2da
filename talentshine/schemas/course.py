# talentshine/schemas/course.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# ==================== Course Schemas ====================


class CourseBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    image: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    topics: List[str] = Field(default_factory=list)
    google_meet: Optional[str] = None

    @field_validator("topics", mode="before")
    @classmethod
    def default_topics(cls, value):
        return [] if value is None else value


class CourseCreate(CourseBase):
    """Course entry of a seed file"""


class CourseResponse(CourseBase):
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    id: int
