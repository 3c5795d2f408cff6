"""ListenerFailure value object — one listener that raised during notification."""

from pydantic import BaseModel, Field


class ListenerFailure(BaseModel, frozen=True):
    listener: str = Field(min_length=1)
    reason: str
