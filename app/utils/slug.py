import re

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")


def derive_slug(value: str) -> str:
    """
    Derive a URL-safe slug from a display name.

    Lowercases, collapses every run of non-alphanumeric characters into a
    single "-" and trims leading/trailing separators. Applying it to its own
    output returns the same value.
    """
    return _NON_ALPHANUMERIC.sub("-", value.strip().lower()).strip("-")
