"""Note records and tool arguments."""
from datetime import datetime

from pydantic import Field

from productivity_suite.core.models import Record, ToolArgs


class Note(Record):
    title: str
    content: str
    tags: list[str] = Field(default_factory=list)
    folder: str
    created_at: datetime


class CreateNoteArgs(ToolArgs):
    title: str
    content: str
    folder: str | None = None


class NoteIdArgs(ToolArgs):
    note_id: str


class SearchNotesArgs(ToolArgs):
    query: str


class TagNotesArgs(NoteIdArgs):
    tags: list[str]


class ListNotesArgs(ToolArgs):
    folder: str | None = None
    tag: str | None = None


class OrganizeNotesArgs(NoteIdArgs):
    target_folder: str
