"""
Identifier codec between external string ids and MongoDB ObjectIds.

Parsing never raises: a malformed id is reported through ParsedObjectId
so callers can decide how to treat it.
"""

from dataclasses import dataclass
from typing import Any, Optional

from bson import ObjectId


@dataclass(frozen=True)
class ParsedObjectId:
    """
    Result of parsing an external identifier.

    Attributes:
        raw: The identifier exactly as received
        value: The parsed ObjectId, or None when malformed
    """
    raw: Any
    value: Optional[ObjectId] = None

    @property
    def malformed(self) -> bool:
        return self.value is None


def to_internal_id(external_id: Any) -> ParsedObjectId:
    """
    Convert an external string id to an ObjectId.

    Only 24-character hex strings are accepted. ObjectId.is_valid also
    accepts arbitrary 12-byte strings, which would let twelve-letter words
    through as ids.

    Args:
        external_id: Identifier received at the boundary

    Returns:
        ParsedObjectId with value set when the id is well-formed
    """
    if not isinstance(external_id, str) or len(external_id) != 24:
        return ParsedObjectId(raw=external_id)
    if not ObjectId.is_valid(external_id):
        return ParsedObjectId(raw=external_id)
    return ParsedObjectId(raw=external_id, value=ObjectId(external_id))


def to_external_id(internal_id: Any) -> str:
    """Stringify a store identifier for the boundary."""
    return str(internal_id)
