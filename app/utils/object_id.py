from typing import Optional

from bson import ObjectId


def parse_object_id(value: Optional[str]) -> Optional[ObjectId]:
    """Return the ObjectId for value, or None when it is not a valid id."""
    if not value or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)
