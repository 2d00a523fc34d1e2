"""Email domain tools - triage of an in-memory mailbox.

This module provides tools for:
- Storing incoming emails
- Searching, listing and filing them into folders
- Spam detection and template-based reply drafts (nothing is sent)
"""
import logging

from productivity_suite.core.registry import ToolSpec
from productivity_suite.core.results import not_found, ok
from productivity_suite.core.search import search_by_keyword
from productivity_suite.core.store import Workspace
from productivity_suite.domains.email.logic import is_spam, render_reply, reply_subject
from productivity_suite.domains.email.models import (
    CreateEmailArgs, DraftReplyArgs, Email, EmailIdArgs, ListEmailsArgs,
    MarkEmailReadArgs, OrganizeInboxArgs, SearchEmailsArgs,
)

logger = logging.getLogger(__name__)

FOLDERS = ["inbox", "sent", "drafts", "spam", "archive"]
SEARCH_FIELDS = ["subject", "body", "sender"]


def create_email(
    ws: Workspace,
    sender: str,
    to: str,
    subject: str,
    body: str,
    folder: str = "inbox",
) -> dict:
    """
    Store an email in the mailbox.

    Args:
        sender: From address
        to: Recipient address
        subject: Email subject
        body: Plain text body
        folder: inbox, sent, drafts, spam, archive

    Returns:
        Stored email, unread and not flagged as spam
    """
    email = ws.emails.add(Email(
        id=ws.new_id(),
        sender=sender,
        to=to,
        subject=subject,
        body=body,
        folder=folder,
        received_at=ws.clock(),
    ))
    logger.info("Stored email %s from %s in %s", email.id, sender, folder)
    return ok(email=email.to_json())


def get_email(ws: Workspace, email_id: str) -> dict:
    """Get full email content by ID."""
    email = ws.emails.get(email_id)
    if email is None:
        return not_found("Email")
    return ok(email=email.to_json())


def draft_reply(
    ws: Workspace,
    email_id: str,
    tone: str = "casual",
    key_points: list[str] = None,
) -> dict:
    """
    Draft a reply to an email. The draft is returned, not stored or sent.

    Args:
        email_id: ID of the email to reply to
        tone: formal, casual, friendly
        key_points: Points to list in the reply body
    """
    email = ws.emails.get(email_id)
    if email is None:
        return not_found("Email")

    return ok(draft={
        "to": email.sender,
        "subject": reply_subject(email.subject),
        "body": render_reply(email.sender, tone, key_points),
        "originalEmail": email.id,
    })


def search_emails(ws: Workspace, query: str, folder: str = None) -> dict:
    """
    Search emails by subject, body or sender.

    Args:
        query: Text to look for (case-insensitive)
        folder: Restrict results to one folder
    """
    results = search_by_keyword(ws.emails.values(), query, SEARCH_FIELDS)
    if folder:
        results = [e for e in results if e.folder == folder]
    return ok(results=[e.to_json() for e in results])


def organize_inbox(ws: Workspace, email_id: str, target_folder: str) -> dict:
    """Move an email to inbox, archive or spam."""
    email = ws.emails.get(email_id)
    if email is None:
        return not_found("Email")
    email.folder = target_folder
    logger.info("Email %s moved to %s", email_id, target_folder)
    return ok(email=email.to_json())


def list_emails(ws: Workspace, folder: str = "inbox", unread_only: bool = False) -> dict:
    result = [e for e in ws.emails.values() if e.folder == folder]
    if unread_only:
        result = [e for e in result if not e.is_read]
    return ok(emails=[e.to_json() for e in result])


def mark_email_read(ws: Workspace, email_id: str, is_read: bool = True) -> dict:
    email = ws.emails.get(email_id)
    if email is None:
        return not_found("Email")
    email.is_read = is_read
    return ok(email=email.to_json())


def filter_spam(ws: Workspace, email_id: str) -> dict:
    """
    Check an email body against the spam keywords.

    Spam is flagged and moved to the spam folder. A clean email keeps its folder.
    """
    email = ws.emails.get(email_id)
    if email is None:
        return not_found("Email")

    spam = is_spam(email.body)
    email.is_spam = spam
    if spam:
        email.folder = "spam"
        logger.info("Email %s flagged as spam", email_id)

    return ok(isSpam=spam, email=email.to_json())


# Export tools for MCP discovery
TOOLS = [
    ToolSpec(
        name="create_email",
        description="Store an incoming email in the mailbox",
        input_schema={
            "type": "object",
            "properties": {
                "from": {"type": "string", "description": "Sender address"},
                "to": {"type": "string", "description": "Recipient address"},
                "subject": {"type": "string", "description": "Email subject"},
                "body": {"type": "string", "description": "Email body"},
                "folder": {"type": "string", "enum": FOLDERS, "default": "inbox"}
            },
            "required": ["from", "to", "subject", "body"]
        },
        args_model=CreateEmailArgs,
        handler=create_email,
        domain="email",
    ),
    ToolSpec(
        name="get_email",
        description="Get full email content by ID",
        input_schema={
            "type": "object",
            "properties": {
                "emailId": {"type": "string", "description": "ID of the email"}
            },
            "required": ["emailId"]
        },
        args_model=EmailIdArgs,
        handler=get_email,
        read_only=True,
        domain="email",
    ),
    ToolSpec(
        name="draft_reply",
        description="Generate an AI-powered reply to an email",
        input_schema={
            "type": "object",
            "properties": {
                "emailId": {"type": "string", "description": "ID of the email to reply to"},
                "tone": {"type": "string", "enum": ["formal", "casual", "friendly"], "description": "Reply tone"},
                "keyPoints": {"type": "array", "items": {"type": "string"}, "description": "Points to include in the reply"}
            },
            "required": ["emailId"]
        },
        args_model=DraftReplyArgs,
        handler=draft_reply,
        domain="email",
    ),
    ToolSpec(
        name="search_emails",
        description="Search emails by content, sender, or subject",
        input_schema={
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Search query"},
                "folder": {"type": "string", "enum": FOLDERS}
            },
            "required": ["query"]
        },
        args_model=SearchEmailsArgs,
        handler=search_emails,
        read_only=True,
        domain="email",
    ),
    ToolSpec(
        name="organize_inbox",
        description="Automatically organize emails into appropriate folders",
        input_schema={
            "type": "object",
            "properties": {
                "emailId": {"type": "string", "description": "ID of the email to organize"},
                "targetFolder": {"type": "string", "enum": ["inbox", "archive", "spam"]}
            },
            "required": ["emailId", "targetFolder"]
        },
        args_model=OrganizeInboxArgs,
        handler=organize_inbox,
        domain="email",
    ),
    ToolSpec(
        name="list_emails",
        description="List emails from a specific folder",
        input_schema={
            "type": "object",
            "properties": {
                "folder": {"type": "string", "enum": FOLDERS, "default": "inbox"},
                "unreadOnly": {"type": "boolean", "description": "Show only unread emails"}
            }
        },
        args_model=ListEmailsArgs,
        handler=list_emails,
        read_only=True,
        domain="email",
    ),
    ToolSpec(
        name="mark_email_read",
        description="Mark an email as read or unread",
        input_schema={
            "type": "object",
            "properties": {
                "emailId": {"type": "string", "description": "ID of the email"},
                "isRead": {"type": "boolean", "description": "Read state (default true)", "default": True}
            },
            "required": ["emailId"]
        },
        args_model=MarkEmailReadArgs,
        handler=mark_email_read,
        domain="email",
    ),
    ToolSpec(
        name="filter_spam",
        description="Identify and mark spam emails",
        input_schema={
            "type": "object",
            "properties": {
                "emailId": {"type": "string", "description": "ID of the email to check"}
            },
            "required": ["emailId"]
        },
        args_model=EmailIdArgs,
        handler=filter_spam,
        domain="email",
    ),
]
