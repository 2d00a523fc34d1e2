"""Uniform result envelopes returned by every tool."""
from typing import Any


def ok(**payload: Any) -> dict:
    return {"success": True, **payload}


def fail(message: str) -> dict:
    return {"success": False, "error": message}


def not_found(entity: str) -> dict:
    """Failure for an id missing from its store, e.g. "Task not found"."""
    return fail(f"{entity} not found")
