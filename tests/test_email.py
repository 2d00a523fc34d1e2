# tests/test_email.py

import pytest

from productivity_suite.domains.email.logic import REPLY_TEMPLATES, is_spam, render_reply


def _receive(dispatcher, body="hello", sender="ana@example.com", subject="Hi", **extra):
    return dispatcher.call("create_email", {
        "from": sender,
        "to": "me@example.com",
        "subject": subject,
        "body": body,
        **extra,
    })["email"]


def test_create_email_defaults(dispatcher, workspace) -> None:
    email = _receive(dispatcher)

    assert email["from"] == "ana@example.com"
    assert email["folder"] == "inbox"
    assert email["isRead"] is False
    assert email["isSpam"] is False
    assert email["receivedAt"].startswith("2024-01-01T08:00:00")
    assert email["id"] in workspace.emails
    assert dispatcher.call("get_email", {"emailId": email["id"]}) == {"success": True, "email": email}


def test_filter_spam_moves_to_spam(dispatcher) -> None:
    email = _receive(dispatcher, body="Please CLICK HERE to claim")

    result = dispatcher.call("filter_spam", {"emailId": email["id"]})

    assert result["success"] is True
    assert result["isSpam"] is True
    assert result["email"]["isSpam"] is True
    assert result["email"]["folder"] == "spam"


def test_filter_spam_leaves_clean_email_in_place(dispatcher) -> None:
    email = _receive(dispatcher, body="Agenda for Monday", folder="archive")
    result = dispatcher.call("filter_spam", {"emailId": email["id"]})
    assert result["isSpam"] is False
    assert result["email"]["folder"] == "archive"


@pytest.mark.parametrize("body", ["You win!", "a PRIZE awaits", "free stuff", "urgent action needed"])
def test_spam_keywords(body) -> None:
    assert is_spam(body)


@pytest.mark.parametrize("tone", ["formal", "casual", "friendly"])
def test_draft_reply_uses_tone_template(dispatcher, tone) -> None:
    email = _receive(dispatcher, subject="Budget")
    result = dispatcher.call("draft_reply", {"emailId": email["id"], "tone": tone})

    assert result["draft"] == {
        "to": "ana@example.com",
        "subject": "Re: Budget",
        "body": REPLY_TEMPLATES[tone].format(sender="ana@example.com"),
        "originalEmail": email["id"],
    }


def test_draft_reply_defaults_to_casual(dispatcher) -> None:
    email = _receive(dispatcher)
    body = dispatcher.call("draft_reply", {"emailId": email["id"]})["draft"]["body"]
    assert body == "Hi ana@example.com,\n\nGot it, thanks! I'll follow up soon.\n\nCheers"


def test_render_reply_with_key_points() -> None:
    body = render_reply("bo", "formal", ["Budget approved", "Ship Friday"])
    assert body == (
        "Dear bo,\n\nThank you for your email. I will get back to you shortly."
        "\n\n- Budget approved\n- Ship Friday\n\nBest regards"
    )


def test_draft_reply_rejects_unknown_tone(dispatcher) -> None:
    email = _receive(dispatcher)
    result = dispatcher.call("draft_reply", {"emailId": email["id"], "tone": "angry"})
    assert result["success"] is False
    assert "tone" in result["error"]


def test_search_emails(dispatcher) -> None:
    a = _receive(dispatcher, subject="Invoice March")
    b = _receive(dispatcher, body="see the invoice attached")
    c = _receive(dispatcher, sender="invoices@vendor.com")
    _receive(dispatcher, subject="Lunch")
    dispatcher.call("organize_inbox", {"emailId": c["id"], "targetFolder": "archive"})

    results = dispatcher.call("search_emails", {"query": "INVOICE"})["results"]
    assert [e["id"] for e in results] == [a["id"], b["id"], c["id"]]

    archived = dispatcher.call("search_emails", {"query": "invoice", "folder": "archive"})["results"]
    assert [e["id"] for e in archived] == [c["id"]]


def test_organize_inbox_only_allows_triage_folders(dispatcher) -> None:
    email = _receive(dispatcher)
    moved = dispatcher.call("organize_inbox", {"emailId": email["id"], "targetFolder": "archive"})
    assert moved["email"]["folder"] == "archive"

    bad = dispatcher.call("organize_inbox", {"emailId": email["id"], "targetFolder": "drafts"})
    assert bad["success"] is False


def test_list_emails_default_inbox_and_unread(dispatcher) -> None:
    a = _receive(dispatcher)
    b = _receive(dispatcher)
    _receive(dispatcher, folder="sent")
    dispatcher.call("mark_email_read", {"emailId": a["id"]})

    inbox = dispatcher.call("list_emails", {})["emails"]
    assert [e["id"] for e in inbox] == [a["id"], b["id"]]

    unread = dispatcher.call("list_emails", {"unreadOnly": True})["emails"]
    assert [e["id"] for e in unread] == [b["id"]]

    assert len(dispatcher.call("list_emails", {"folder": "sent"})["emails"]) == 1


def test_mark_email_unread(dispatcher) -> None:
    email = _receive(dispatcher)
    dispatcher.call("mark_email_read", {"emailId": email["id"]})
    result = dispatcher.call("mark_email_read", {"emailId": email["id"], "isRead": False})
    assert result["email"]["isRead"] is False


def test_missing_email(dispatcher) -> None:
    expected = {"success": False, "error": "Email not found"}
    assert dispatcher.call("get_email", {"emailId": "x"}) == expected
    assert dispatcher.call("draft_reply", {"emailId": "x"}) == expected
    assert dispatcher.call("organize_inbox", {"emailId": "x", "targetFolder": "spam"}) == expected
    assert dispatcher.call("mark_email_read", {"emailId": "x"}) == expected
    assert dispatcher.call("filter_spam", {"emailId": "x"}) == expected
