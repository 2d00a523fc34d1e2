"""Email records and tool arguments."""
from datetime import datetime
from typing import Literal

from pydantic import Field

from productivity_suite.core.models import Record, ToolArgs

Folder = Literal["inbox", "sent", "drafts", "spam", "archive"]
OrganizeFolder = Literal["inbox", "archive", "spam"]
Tone = Literal["formal", "casual", "friendly"]


class Email(Record):
    sender: str = Field(alias="from")
    to: str
    subject: str
    body: str
    folder: Folder = "inbox"
    is_read: bool = False
    is_spam: bool = False
    received_at: datetime


class CreateEmailArgs(ToolArgs):
    sender: str = Field(alias="from")
    to: str
    subject: str
    body: str
    folder: Folder = "inbox"


class EmailIdArgs(ToolArgs):
    email_id: str


class DraftReplyArgs(EmailIdArgs):
    tone: Tone = "casual"
    key_points: list[str] = Field(default_factory=list)


class SearchEmailsArgs(ToolArgs):
    query: str
    folder: Folder | None = None


class OrganizeInboxArgs(EmailIdArgs):
    target_folder: OrganizeFolder


class ListEmailsArgs(ToolArgs):
    folder: Folder = "inbox"
    unread_only: bool = False


class MarkEmailReadArgs(EmailIdArgs):
    is_read: bool = True
