"""Email domain - spam check and reply templates."""

SPAM_KEYWORDS = ("win", "prize", "free", "click here", "urgent action")

REPLY_TEMPLATES = {
    "formal": "Dear {sender},\n\nThank you for your email. I will get back to you shortly.\n\nBest regards",
    "casual": "Hi {sender},\n\nGot it, thanks! I'll follow up soon.\n\nCheers",
    "friendly": "Hey {sender}!\n\nThanks so much for reaching out! Talk soon :)\n\nBest",
}


def is_spam(body: str) -> bool:
    text = body.lower()
    return any(keyword in text for keyword in SPAM_KEYWORDS)


def reply_subject(subject: str) -> str:
    return f"Re: {subject}"


def render_reply(sender: str, tone: str = "casual", key_points: list[str] | None = None) -> str:
    """
    Fill the reply template for a tone.

    Key points, when given, go in as a bullet list right before the sign-off.
    """
    body = REPLY_TEMPLATES[tone].format(sender=sender)
    if not key_points:
        return body

    head, sign_off = body.rsplit("\n\n", 1)
    bullets = "\n".join(f"- {point}" for point in key_points)
    return f"{head}\n\n{bullets}\n\n{sign_off}"
