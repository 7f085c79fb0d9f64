"""Classification of arbitrary UUIDs into player variants."""

import logging
from uuid import UUID

from mcuuid.domain.player import capability
from mcuuid.domain.player.model.value import MD5_VERSION, RANDOM_VERSION, Mode, version_nibble
from mcuuid.domain.player.model.variant import OfflineUuid, OnlineUuid
from mcuuid.domain.shared.error import InvalidUuidError

logger = logging.getLogger(__name__)

_MODE_BY_VERSION = {
    RANDOM_VERSION: Mode.ONLINE,
    MD5_VERSION: Mode.OFFLINE,
}


def classify(uuid: UUID) -> OnlineUuid | OfflineUuid:
    """Wrap ``uuid`` in the variant its version field names.

    Version 4 is online, version 3 is offline. Any other version, or a
    version whose mode is disabled, is rejected.

    Raises:
        InvalidUuidError: If the UUID is not a player UUID of an enabled mode
    """
    version = version_nibble(uuid)
    mode = _MODE_BY_VERSION.get(version)
    if mode is None or not capability.is_enabled(mode):
        logger.debug("Rejected UUID %s (version %d)", uuid, version)
        raise InvalidUuidError(f"Not a player UUID: {uuid} (version {version})")

    match mode:
        case Mode.ONLINE:
            return OnlineUuid(uuid=uuid)
        case Mode.OFFLINE:
            return OfflineUuid(uuid=uuid)
