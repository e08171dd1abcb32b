# edgeblog/utils/slugs.py
import re

from slugify import slugify

_DISALLOWED = re.compile(r"[^a-z0-9\s-]")


def generate_slug(title):
    """
    Slug a partir del título: minúsculas, sin caracteres fuera de
    [a-z0-9 espacio -], espacios y guiones repetidos colapsados a un guion.
    """
    cleaned = _DISALLOWED.sub("", (title or "").lower().strip())
    return slugify(cleaned)
