"""Identifier parsing shared by routes and services."""

from uuid import UUID

from app.errors.validation import MalformedIdError
from app.utils.helpers import is_well_formed_id


def parse_id(raw: str) -> UUID:
    """
    Parse a path identifier.

    Args:
        raw: Identifier as received in the URL path

    Returns:
        UUID: Parsed identifier

    Raises:
        MalformedIdError: If the identifier does not have the expected shape
    """
    if not is_well_formed_id(raw):
        raise MalformedIdError
    return UUID(raw)
