"""Notes domain business logic."""

# tag -> words that trigger it, checked in this order
TAG_KEYWORDS = {
    "urgent": ("urgent", "important"),
    "meeting": ("meeting", "call"),
    "idea": ("idea", "thought"),
}


def suggest_tags(content: str) -> list[str]:
    """Suggest tags from keywords in the note content."""
    text = content.lower()
    return [
        tag for tag, words in TAG_KEYWORDS.items()
        if any(word in text for word in words)
    ]


def merge_tags(existing: list[str], new: list[str]) -> list[str]:
    """Union of tags, keeping first-seen order."""
    return list(dict.fromkeys([*existing, *new]))
