"""AI tools for calendar domain."""
import logging
from datetime import date, datetime

from productivity_suite.core import config
from productivity_suite.core.registry import ToolSpec
from productivity_suite.core.results import not_found, ok
from productivity_suite.core.store import Workspace
from productivity_suite.domains.calendar.logic import end_after, find_free_slots, to_iso
from productivity_suite.domains.calendar.models import (
    BookMeetingArgs, FindAvailableTimesArgs, ListMeetingsArgs, Meeting,
    MeetingIdArgs, RescheduleMeetingArgs,
)

logger = logging.getLogger(__name__)


def find_available_times(
    ws: Workspace,
    participants: list[str],
    duration: float,
    date: date,
) -> dict:
    """
    Find free slots on a day for the given participants.

    Args:
        participants: Who needs to attend
        duration: Meeting length in minutes
        date: Day to check (UTC)

    Returns:
        availableSlots as ISO start times
    """
    slots = find_free_slots(
        day=date,
        duration_minutes=duration,
        meetings=ws.meetings.values(),
        participants=participants,
        start_hour=config.WORKDAY_START_HOUR,
        end_hour=config.WORKDAY_END_HOUR,
        interval_minutes=config.SLOT_INTERVAL_MINUTES,
    )
    return ok(availableSlots=[to_iso(s) for s in slots])


def book_meeting(
    ws: Workspace,
    title: str,
    participants: list[str],
    start_time: datetime,
    duration: float,
    description: str = "",
) -> dict:
    """
    Schedule a new meeting. Overlaps with existing meetings are allowed.

    Args:
        title: Meeting title
        participants: Attendee names or emails
        start_time: Start (ISO 8601; naive times are UTC)
        duration: Length in minutes
        description: Meeting description
    """
    meeting = Meeting(
        id=ws.new_id(),
        title=title,
        description=description,
        participants=participants,
        start_time=start_time,
        end_time=end_after(start_time, duration),
    )
    ws.meetings.add(meeting)
    logger.info("Booked meeting %s at %s", meeting.id, to_iso(meeting.start_time))
    return ok(meeting=meeting.to_json())


def get_meeting(ws: Workspace, meeting_id: str) -> dict:
    """Get full meeting details by ID."""
    meeting = ws.meetings.get(meeting_id)
    if meeting is None:
        return not_found("Meeting")
    return ok(meeting=meeting.to_json())


def send_invites(ws: Workspace, meeting_id: str) -> dict:
    """Send invitations to every participant. Delivery is not implemented; the call is logged."""
    meeting = ws.meetings.get(meeting_id)
    if meeting is None:
        return not_found("Meeting")
    logger.info("Invites for meeting %s -> %s", meeting_id, ", ".join(meeting.participants))
    return ok(invitesSent=list(meeting.participants))


def list_meetings(ws: Workspace, date: date = None, participant: str = None) -> dict:
    """
    List meetings.

    Args:
        date: Only meetings starting on this UTC day
        participant: Only meetings this person attends
    """
    result = ws.meetings.values()
    if date:
        result = [m for m in result if m.start_time.date() == date]
    if participant:
        result = [m for m in result if participant in m.participants]
    return ok(meetings=[m.to_json() for m in result])


def reschedule_meeting(
    ws: Workspace,
    meeting_id: str,
    new_start_time: datetime,
    new_duration: float = None,
) -> dict:
    """
    Move a meeting.

    Args:
        meeting_id: ID of the meeting
        new_start_time: New start (ISO 8601)
        new_duration: New length in minutes; the current length is kept if omitted
    """
    meeting = ws.meetings.get(meeting_id)
    if meeting is None:
        return not_found("Meeting")

    duration = meeting.duration
    meeting.start_time = new_start_time
    if new_duration:
        meeting.end_time = end_after(meeting.start_time, new_duration)
    else:
        meeting.end_time = meeting.start_time + duration

    logger.info("Meeting %s rescheduled to %s", meeting_id, to_iso(meeting.start_time))
    return ok(meeting=meeting.to_json())


def cancel_meeting(ws: Workspace, meeting_id: str) -> dict:
    """Cancel a meeting (sets status to 'cancelled'). Cancelled meetings free their slot."""
    meeting = ws.meetings.get(meeting_id)
    if meeting is None:
        return not_found("Meeting")
    meeting.status = "cancelled"
    logger.info("Meeting %s cancelled", meeting_id)
    return ok(meeting=meeting.to_json())


# Export tools for MCP discovery
TOOLS = [
    ToolSpec(
        name="find_available_times",
        description="Find available meeting time slots for participants",
        input_schema={
            "type": "object",
            "properties": {
                "participants": {"type": "array", "items": {"type": "string"}, "description": "List of participants"},
                "duration": {"type": "number", "description": "Meeting duration in minutes"},
                "date": {"type": "string", "description": "Date to check (YYYY-MM-DD)"}
            },
            "required": ["participants", "duration", "date"]
        },
        args_model=FindAvailableTimesArgs,
        handler=find_available_times,
        read_only=True,
        domain="calendar",
    ),
    ToolSpec(
        name="book_meeting",
        description="Schedule a new meeting with participants",
        input_schema={
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "Meeting title"},
                "description": {"type": "string", "description": "Meeting description"},
                "participants": {"type": "array", "items": {"type": "string"}},
                "startTime": {"type": "string", "description": "Start time (ISO 8601)"},
                "duration": {"type": "number", "description": "Duration in minutes"}
            },
            "required": ["title", "participants", "startTime", "duration"]
        },
        args_model=BookMeetingArgs,
        handler=book_meeting,
        domain="calendar",
    ),
    ToolSpec(
        name="get_meeting",
        description="Get full meeting details by ID",
        input_schema={
            "type": "object",
            "properties": {
                "meetingId": {"type": "string", "description": "ID of the meeting"}
            },
            "required": ["meetingId"]
        },
        args_model=MeetingIdArgs,
        handler=get_meeting,
        read_only=True,
        domain="calendar",
    ),
    ToolSpec(
        name="send_invites",
        description="Send meeting invitations to participants",
        input_schema={
            "type": "object",
            "properties": {
                "meetingId": {"type": "string", "description": "ID of the meeting"}
            },
            "required": ["meetingId"]
        },
        args_model=MeetingIdArgs,
        handler=send_invites,
        domain="calendar",
    ),
    ToolSpec(
        name="list_meetings",
        description="List scheduled meetings",
        input_schema={
            "type": "object",
            "properties": {
                "date": {"type": "string", "description": "Filter by date (YYYY-MM-DD)"},
                "participant": {"type": "string", "description": "Filter by participant"}
            }
        },
        args_model=ListMeetingsArgs,
        handler=list_meetings,
        read_only=True,
        domain="calendar",
    ),
    ToolSpec(
        name="reschedule_meeting",
        description="Reschedule an existing meeting",
        input_schema={
            "type": "object",
            "properties": {
                "meetingId": {"type": "string", "description": "ID of the meeting to reschedule"},
                "newStartTime": {"type": "string", "description": "New start time (ISO 8601)"},
                "newDuration": {"type": "number", "description": "New duration in minutes"}
            },
            "required": ["meetingId", "newStartTime"]
        },
        args_model=RescheduleMeetingArgs,
        handler=reschedule_meeting,
        domain="calendar",
    ),
    ToolSpec(
        name="cancel_meeting",
        description="Cancel a meeting (sets status to 'cancelled')",
        input_schema={
            "type": "object",
            "properties": {
                "meetingId": {"type": "string", "description": "ID of the meeting to cancel"}
            },
            "required": ["meetingId"]
        },
        args_model=MeetingIdArgs,
        handler=cancel_meeting,
        domain="calendar",
    ),
]
