# talentshine/schemas/enrollment.py
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# ==================== Enrollment Schemas ====================


class EnrollRequest(BaseModel):
    """Ids arrive as strings or numbers; the service decides whether they are valid."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: Optional[Any] = Field(None, description="User ID")
    course_id: Optional[Any] = Field(None, description="Course ID")


class EnrollmentResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    id: int
    user_id: int
    user_name: str
    user_phone: str = ""
    course_id: int
    course_title: Optional[str] = None
    course_price: float = 0
    course_image: str = ""
    course_description: str = ""
    course_topics: List[str] = Field(default_factory=list)
    google_meet_link: str = ""
    date: datetime


class EnrollResponse(BaseModel):
    success: bool = True
    message: str
    balance: float
    enrollment: EnrollmentResponse
