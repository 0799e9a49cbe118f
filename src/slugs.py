"""Slug generation for categories, subcategories and articles."""
from slugify import slugify


def slugify_name(name: str | None) -> str:
    """
    Derive a URL-safe slug from a display name.

    Non-latin scripts are transliterated ("Привет мир" -> "privet-mir"),
    so the result only ever contains lowercase ascii letters, digits and '-'.
    """
    if not name or not name.strip():
        return ""
    return slugify(name, separator="-", lowercase=True)
