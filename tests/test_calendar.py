# tests/test_calendar.py

from datetime import date, datetime, timedelta, timezone

import pytest

from productivity_suite.core import config
from productivity_suite.domains.calendar.logic import candidate_slots, overlaps


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value)


def _book(dispatcher, start, duration=30, participants=("a", "b"), title="Sync"):
    return dispatcher.call("book_meeting", {
        "title": title,
        "participants": list(participants),
        "startTime": start,
        "duration": duration,
    })


def test_book_meeting_sets_end_time(dispatcher, workspace) -> None:
    result = _book(dispatcher, "2024-01-01T09:00:00Z", duration=30)

    assert result["success"] is True
    meeting = result["meeting"]
    assert meeting["status"] == "scheduled"
    assert meeting["description"] == ""
    assert _ts(meeting["endTime"]) - _ts(meeting["startTime"]) == timedelta(minutes=30)
    assert meeting["id"] in workspace.meetings
    assert dispatcher.call("get_meeting", {"meetingId": meeting["id"]}) == {"success": True, "meeting": meeting}


def test_naive_start_time_is_utc(dispatcher) -> None:
    meeting = _book(dispatcher, "2024-01-01T09:00:00")["meeting"]
    assert _ts(meeting["startTime"]) == datetime(2024, 1, 1, 9, tzinfo=timezone.utc)


def test_book_meeting_rejects_bad_input(dispatcher, workspace) -> None:
    assert _book(dispatcher, "not a time")["success"] is False
    assert _book(dispatcher, "2024-01-01T09:00:00Z", duration=0)["success"] is False
    assert len(workspace.meetings) == 0


def test_send_invites(dispatcher) -> None:
    meeting = _book(dispatcher, "2024-01-01T09:00:00Z", participants=["ana", "bo"])["meeting"]
    assert dispatcher.call("send_invites", {"meetingId": meeting["id"]}) == {
        "success": True,
        "invitesSent": ["ana", "bo"],
    }


def test_list_meetings_filters(dispatcher) -> None:
    a = _book(dispatcher, "2024-01-01T09:00:00Z", participants=["ana"])["meeting"]
    b = _book(dispatcher, "2024-01-01T15:00:00Z", participants=["bo"])["meeting"]
    c = _book(dispatcher, "2024-01-02T09:00:00Z", participants=["ana"])["meeting"]

    assert len(dispatcher.call("list_meetings", {})["meetings"]) == 3
    day = dispatcher.call("list_meetings", {"date": "2024-01-01"})["meetings"]
    assert [m["id"] for m in day] == [a["id"], b["id"]]
    ana = dispatcher.call("list_meetings", {"participant": "ana"})["meetings"]
    assert [m["id"] for m in ana] == [a["id"], c["id"]]


def test_reschedule_with_new_duration(dispatcher) -> None:
    meeting = _book(dispatcher, "2024-01-01T09:00:00Z", duration=30)["meeting"]
    result = dispatcher.call("reschedule_meeting", {
        "meetingId": meeting["id"],
        "newStartTime": "2024-01-01T13:00:00Z",
        "newDuration": 90,
    })
    moved = result["meeting"]
    assert _ts(moved["startTime"]) == datetime(2024, 1, 1, 13, tzinfo=timezone.utc)
    assert _ts(moved["endTime"]) == datetime(2024, 1, 1, 14, 30, tzinfo=timezone.utc)


def test_reschedule_keeps_duration(dispatcher) -> None:
    meeting = _book(dispatcher, "2024-01-01T09:00:00Z", duration=45)["meeting"]
    moved = dispatcher.call("reschedule_meeting", {
        "meetingId": meeting["id"],
        "newStartTime": "2024-01-03T10:00:00Z",
    })["meeting"]
    assert _ts(moved["endTime"]) - _ts(moved["startTime"]) == timedelta(minutes=45)


def test_cancel_meeting(dispatcher) -> None:
    meeting = _book(dispatcher, "2024-01-01T09:00:00Z")["meeting"]
    result = dispatcher.call("cancel_meeting", {"meetingId": meeting["id"]})
    assert result["meeting"]["status"] == "cancelled"


def test_missing_meeting(dispatcher) -> None:
    expected = {"success": False, "error": "Meeting not found"}
    assert dispatcher.call("get_meeting", {"meetingId": "x"}) == expected
    assert dispatcher.call("send_invites", {"meetingId": "x"}) == expected
    assert dispatcher.call("cancel_meeting", {"meetingId": "x"}) == expected
    assert dispatcher.call("reschedule_meeting", {"meetingId": "x", "newStartTime": "2024-01-01T09:00:00Z"}) == expected


def test_all_slots_free_on_empty_day(dispatcher) -> None:
    result = dispatcher.call("find_available_times", {"participants": ["a"], "duration": 60, "date": "2024-01-01"})
    slots = [_ts(s) for s in result["availableSlots"]]
    assert [s.hour for s in slots] == list(range(9, 17))
    assert all(s.tzinfo is not None and s.utcoffset() == timedelta(0) for s in slots)


def test_overlapping_meeting_blocks_slots(dispatcher) -> None:
    _book(dispatcher, "2024-01-01T10:30:00Z", duration=60, participants=["a"])

    result = dispatcher.call("find_available_times", {"participants": ["a"], "duration": 60, "date": "2024-01-01"})
    hours = [_ts(s).hour for s in result["availableSlots"]]
    assert 10 not in hours
    assert 11 not in hours
    assert 9 in hours and 12 in hours


def test_slots_ignore_other_participants_and_cancelled(dispatcher) -> None:
    _book(dispatcher, "2024-01-01T09:00:00Z", duration=60, participants=["zed"])
    cancelled = _book(dispatcher, "2024-01-01T10:00:00Z", duration=60, participants=["a"])["meeting"]
    dispatcher.call("cancel_meeting", {"meetingId": cancelled["id"]})

    result = dispatcher.call("find_available_times", {"participants": ["a"], "duration": 60, "date": "2024-01-01"})
    hours = [_ts(s).hour for s in result["availableSlots"]]
    assert hours == list(range(9, 17))


def test_no_participants_means_every_meeting_counts(dispatcher) -> None:
    _book(dispatcher, "2024-01-01T09:00:00Z", duration=60, participants=["zed"])
    result = dispatcher.call("find_available_times", {"participants": [], "duration": 60, "date": "2024-01-01"})
    assert 9 not in [_ts(s).hour for s in result["availableSlots"]]


def test_workday_hours_come_from_config(dispatcher, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "WORKDAY_START_HOUR", 8)
    monkeypatch.setattr(config, "WORKDAY_END_HOUR", 10)
    monkeypatch.setattr(config, "SLOT_INTERVAL_MINUTES", 30)
    result = dispatcher.call("find_available_times", {"participants": [], "duration": 30, "date": "2024-01-01"})
    assert [s[11:16] for s in result["availableSlots"]] == ["08:00", "08:30", "09:00", "09:30"]


def test_candidate_slots_and_overlap() -> None:
    slots = candidate_slots(date(2024, 1, 1), 9, 12, 60)
    assert [s.hour for s in slots] == [9, 10, 11]

    nine = datetime(2024, 1, 1, 9, tzinfo=timezone.utc)
    ten = datetime(2024, 1, 1, 10, tzinfo=timezone.utc)
    eleven = datetime(2024, 1, 1, 11, tzinfo=timezone.utc)
    assert overlaps(nine, ten + timedelta(minutes=1), ten, eleven)
    assert not overlaps(nine, ten, ten, eleven)
