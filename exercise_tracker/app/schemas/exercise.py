"""
Pydantic schemas for exercise entries and user logs.

``Entry`` is the value type shared by the store and the log filter.
Its row id is a private attribute, so it is available for ordering
inside the service but never appears in a serialized log.
"""

import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, Field, PrivateAttr

from ..core.dates import format_date, parse_display


class ExerciseCreate(BaseModel):
    """Schema for appending an entry to a user's log.

    ``duration`` is accepted as a number or as text (form posts) and is
    coerced to an integer by the service.  ``date`` may be omitted.
    """

    description: str = Field(..., examples=["push-ups"])
    duration: Union[int, float, str] = Field(..., examples=[30])
    date: Optional[str] = Field(None, examples=["2024-01-01"])


class ExerciseRead(BaseModel):
    """Response for a newly appended entry, flattened with its owner."""

    username: str
    description: str
    duration: int
    date: str
    id: str


class Entry(BaseModel):
    """One exercise record as it appears in a log."""

    description: str
    duration: int
    date: str

    _id: Optional[int] = PrivateAttr(default=None)

    @property
    def day(self) -> Optional[datetime.date]:
        """Calendar day of the entry, or ``None`` if the stored text is unreadable."""
        try:
            return parse_display(self.date)
        except ValueError:
            return format_date(self.date)


class LogRead(BaseModel):
    """A user together with the filtered view of their entries."""

    username: str
    count: int
    id: str
    log: List[Entry]
