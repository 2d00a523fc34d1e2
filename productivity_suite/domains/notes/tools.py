"""AI tools for notes domain."""
import logging

from productivity_suite.core import config
from productivity_suite.core.registry import ToolSpec
from productivity_suite.core.results import not_found, ok
from productivity_suite.core.search import search_by_keyword
from productivity_suite.core.store import Workspace
from productivity_suite.domains.notes.logic import merge_tags, suggest_tags
from productivity_suite.domains.notes.models import (
    CreateNoteArgs, ListNotesArgs, Note, NoteIdArgs, OrganizeNotesArgs,
    SearchNotesArgs, TagNotesArgs,
)

logger = logging.getLogger(__name__)

SEARCH_FIELDS = ["title", "content", "tags"]


def create_note(ws: Workspace, title: str, content: str, folder: str = None) -> dict:
    """Create a new note, tagged from its content.

    Args:
        title: Note title
        content: Note body, scanned for urgent/meeting/idea keywords
        folder: Folder to store the note in (default from config, "General")
    """
    tags = suggest_tags(content)
    note = ws.notes.add(Note(
        id=ws.new_id(),
        title=title,
        content=content,
        tags=tags,
        folder=folder or config.DEFAULT_NOTE_FOLDER,
        created_at=ws.clock(),
    ))
    logger.info("Created note %s in %s (tags=%s)", note.id, note.folder, tags)
    return ok(note=note.to_json(), aiSuggestions={"tags": list(tags)})


def get_note(ws: Workspace, note_id: str) -> dict:
    """Get full note by ID.

    Args:
        note_id: ID of the note
    """
    note = ws.notes.get(note_id)
    if note is None:
        return not_found("Note")
    return ok(note=note.to_json())


def search_notes(ws: Workspace, query: str) -> dict:
    """Search notes by keyword in title, content or tags."""
    results = search_by_keyword(ws.notes.values(), query, SEARCH_FIELDS)
    return ok(results=[n.to_json() for n in results])


def tag_notes(ws: Workspace, note_id: str, tags: list[str]) -> dict:
    """Add tags to a note. Tags already present are not duplicated.

    Args:
        note_id: ID of the note to tag
        tags: Tags to add
    """
    note = ws.notes.get(note_id)
    if note is None:
        return not_found("Note")
    note.tags = merge_tags(note.tags, tags)
    return ok(note=note.to_json())


def list_notes(ws: Workspace, folder: str = None, tag: str = None) -> dict:
    result = ws.notes.values()
    if folder:
        result = [n for n in result if n.folder == folder]
    if tag:
        result = [n for n in result if tag in n.tags]
    return ok(notes=[n.to_json() for n in result])


def organize_notes(ws: Workspace, note_id: str, target_folder: str) -> dict:
    """Move a note into another folder."""
    note = ws.notes.get(note_id)
    if note is None:
        return not_found("Note")
    note.folder = target_folder
    logger.info("Note %s moved to %s", note_id, target_folder)
    return ok(note=note.to_json())


# Export tools for MCP discovery
TOOLS = [
    ToolSpec(
        name="create_note",
        description="Create a new note with AI-generated tags and organization",
        input_schema={
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "Note title"},
                "content": {"type": "string", "description": "Note content"},
                "folder": {"type": "string", "description": "Folder to store the note in"}
            },
            "required": ["title", "content"]
        },
        args_model=CreateNoteArgs,
        handler=create_note,
        domain="notes",
    ),
    ToolSpec(
        name="get_note",
        description="Get full note content by ID",
        input_schema={
            "type": "object",
            "properties": {
                "noteId": {"type": "string", "description": "ID of the note"}
            },
            "required": ["noteId"]
        },
        args_model=NoteIdArgs,
        handler=get_note,
        read_only=True,
        domain="notes",
    ),
    ToolSpec(
        name="search_notes",
        description="Search notes using natural language queries",
        input_schema={
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Search query"}
            },
            "required": ["query"]
        },
        args_model=SearchNotesArgs,
        handler=search_notes,
        read_only=True,
        domain="notes",
    ),
    ToolSpec(
        name="tag_notes",
        description="Auto-tag notes based on their content",
        input_schema={
            "type": "object",
            "properties": {
                "noteId": {"type": "string", "description": "ID of the note to tag"},
                "tags": {"type": "array", "items": {"type": "string"}, "description": "Tags to add"}
            },
            "required": ["noteId", "tags"]
        },
        args_model=TagNotesArgs,
        handler=tag_notes,
        domain="notes",
    ),
    ToolSpec(
        name="list_notes",
        description="List all notes, optionally filtered by folder or tags",
        input_schema={
            "type": "object",
            "properties": {
                "folder": {"type": "string", "description": "Filter by folder"},
                "tag": {"type": "string", "description": "Filter by tag"}
            }
        },
        args_model=ListNotesArgs,
        handler=list_notes,
        read_only=True,
        domain="notes",
    ),
    ToolSpec(
        name="organize_notes",
        description="Organize notes into folders based on content analysis",
        input_schema={
            "type": "object",
            "properties": {
                "noteId": {"type": "string", "description": "ID of the note to organize"},
                "targetFolder": {"type": "string", "description": "Target folder name"}
            },
            "required": ["noteId", "targetFolder"]
        },
        args_model=OrganizeNotesArgs,
        handler=organize_notes,
        domain="notes",
    ),
]
