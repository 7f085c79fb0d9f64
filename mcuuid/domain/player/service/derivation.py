"""Offline UUID derivation."""

import hashlib
from uuid import UUID

OFFLINE_PREFIX = "OfflinePlayer:"


def offline_uuid(username: str) -> UUID:
    """Derive the offline-mode UUID of a username.

    Same as Java's ``UUID.nameUUIDFromBytes("OfflinePlayer:" + name)``: an MD5
    of the prefixed name with the version forced to 3 and the RFC 4122
    variant set. The name is used verbatim, so the result is case-sensitive.
    """
    digest = bytearray(hashlib.md5(f"{OFFLINE_PREFIX}{username}".encode()).digest())
    digest[6] = digest[6] & 0x0F | 0x30  # uuid version 3
    digest[8] = digest[8] & 0x3F | 0x80  # RFC 4122 variant
    return UUID(bytes=bytes(digest))
