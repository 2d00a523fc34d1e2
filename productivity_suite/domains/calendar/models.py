"""Meeting records and tool arguments. All times are UTC."""
import datetime as dt
from typing import Literal

from pydantic import Field, field_validator

from productivity_suite.core.models import Record, ToolArgs, as_utc

MeetingStatus = Literal["scheduled", "cancelled", "completed"]


class Meeting(Record):
    title: str
    description: str = ""
    participants: list[str] = Field(default_factory=list)
    start_time: dt.datetime
    end_time: dt.datetime
    status: MeetingStatus = "scheduled"

    @field_validator("start_time", "end_time")
    @classmethod
    def _utc(cls, value: dt.datetime) -> dt.datetime:
        return as_utc(value)

    @property
    def duration(self) -> dt.timedelta:
        return self.end_time - self.start_time


class BookMeetingArgs(ToolArgs):
    title: str
    participants: list[str]
    start_time: dt.datetime
    duration: float = Field(gt=0, description="Minutes")
    description: str = ""


class MeetingIdArgs(ToolArgs):
    meeting_id: str


class ListMeetingsArgs(ToolArgs):
    date: dt.date | None = None
    participant: str | None = None


class RescheduleMeetingArgs(MeetingIdArgs):
    new_start_time: dt.datetime
    new_duration: float | None = Field(default=None, gt=0)


class FindAvailableTimesArgs(ToolArgs):
    participants: list[str]
    duration: float = Field(gt=0)
    date: dt.date
