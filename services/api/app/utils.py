import re

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
# characters that would split or end the /careers/{slug} path segment
SLUG_RESERVED = set("/\\?#%")

def normalize_slug(text: str) -> str:
    # "Acme Labs" -> "acme-labs"
    return re.sub(r"\s+", "-", text.strip().lower())

def is_valid_slug(slug: str) -> bool:
    if not slug.strip("-"):
        return False
    return not any(c in SLUG_RESERVED for c in slug)

def is_valid_email(email: str) -> bool:
    if not email:
        return False
    return EMAIL_RE.match(email.strip()) is not None
