"""Calendar domain - pure scheduling functions."""
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterable


def end_after(start: datetime, minutes: float) -> datetime:
    return start + timedelta(minutes=minutes)


def to_iso(value: datetime) -> str:
    """ISO 8601 in UTC with a Z suffix, same shape as serialized records."""
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def candidate_slots(day: date, start_hour: int, end_hour: int, interval_minutes: int) -> list[datetime]:
    """Slot starts on a UTC day from start_hour up to (not including) end_hour."""
    slots = []
    current = datetime.combine(day, time(hour=start_hour), tzinfo=timezone.utc)
    end = datetime.combine(day, time(), tzinfo=timezone.utc) + timedelta(hours=end_hour)
    step = timedelta(minutes=interval_minutes)
    while current < end:
        slots.append(current)
        current += step
    return slots


def overlaps(start_a: datetime, end_a: datetime, start_b: datetime, end_b: datetime) -> bool:
    """Half-open interval overlap: back-to-back meetings do not clash."""
    return start_a < end_b and start_b < end_a


def blocks(meeting, participants: list[str]) -> bool:
    """
    Does an existing meeting make its time busy for these participants?

    Cancelled meetings never block. With no participants given every meeting counts,
    otherwise only meetings sharing at least one participant.
    """
    if meeting.status == "cancelled":
        return False
    if not participants:
        return True
    return bool(set(participants) & set(meeting.participants))


def find_free_slots(
    day: date,
    duration_minutes: float,
    meetings: Iterable,
    participants: list[str],
    start_hour: int = 9,
    end_hour: int = 17,
    interval_minutes: int = 60,
) -> list[datetime]:
    """
    Slot starts on day where a meeting of duration_minutes fits.

    Args:
        day: UTC calendar day to check
        duration_minutes: Length of the meeting to place
        meetings: Existing meetings (anything with start_time, end_time, status, participants)
        participants: Who needs to attend
        start_hour: First slot hour
        end_hour: Slots start before this hour
        interval_minutes: Step between slot starts

    Returns:
        Free slot start times in chronological order
    """
    busy = [m for m in meetings if blocks(m, participants)]
    free = []
    for start in candidate_slots(day, start_hour, end_hour, interval_minutes):
        end = end_after(start, duration_minutes)
        if not any(overlaps(start, end, m.start_time, m.end_time) for m in busy):
            free.append(start)
    return free
