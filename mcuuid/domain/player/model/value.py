"""Value types shared by the player domain."""

from enum import StrEnum
from uuid import UUID

from mcuuid.domain.shared.error import InvalidUuidError

RANDOM_VERSION = 4
"""UUID version of online (Mojang-issued) player UUIDs."""

MD5_VERSION = 3
"""UUID version of offline (name-derived) player UUIDs."""


class Mode(StrEnum):
    """Account mode a player UUID belongs to."""

    ONLINE = "online"
    OFFLINE = "offline"


def version_nibble(uuid: UUID) -> int:
    """Return the 4-bit version field (bits 48-51) of a UUID."""
    return uuid.bytes[6] >> 4


def parse_uuid(text: str) -> UUID:
    """Parse the textual form of a UUID (hyphenated or 32 hex digits)."""
    try:
        return UUID(text)
    except (ValueError, TypeError) as e:
        raise InvalidUuidError(f"Invalid UUID: {text!r}") from e
