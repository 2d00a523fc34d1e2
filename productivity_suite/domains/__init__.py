"""Domain discovery."""
from pathlib import Path

DOMAINS_PATH = Path(__file__).parent

# Catalog order for list_tools
DOMAIN_ORDER = ("tasks", "notes", "calendar", "email")


def get_domains() -> list[str]:
    """List available domains, known ones first in catalog order."""
    present = {
        d.name for d in DOMAINS_PATH.iterdir()
        if d.is_dir() and not d.name.startswith("_")
    }
    ordered = [name for name in DOMAIN_ORDER if name in present]
    return ordered + sorted(present - set(DOMAIN_ORDER))
