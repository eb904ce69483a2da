from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UserResponse(BaseModel):
    """Public view of a user. The password hash is never part of it."""

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    id: int
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    balance: float = 0
