"""mcuuid - Minecraft offline and online player UUIDs."""

from mcuuid.application.lookup import online_player_uuid, username_for
from mcuuid.config import Config, configure_logging
from mcuuid.domain.player.model.player_uuid import PlayerUuid
from mcuuid.domain.player.model.value import Mode, parse_uuid
from mcuuid.domain.player.model.variant import OfflineUuid, OnlineUuid
from mcuuid.domain.player.port.profile_directory import Profile, ProfileDirectory
from mcuuid.domain.player.service.classifier import classify
from mcuuid.domain.player.service.derivation import offline_uuid
from mcuuid.domain.shared.error import (
    ConfigurationError,
    InvalidUsernameError,
    InvalidUuidError,
    MCUUIDError,
    TransportError,
    UnknownResponseError,
    VariantMismatchError,
)
from mcuuid.infrastructure.mojang.directory import MojangProfileDirectory

__all__ = [
    "Config",
    "ConfigurationError",
    "InvalidUsernameError",
    "InvalidUuidError",
    "MCUUIDError",
    "Mode",
    "MojangProfileDirectory",
    "OfflineUuid",
    "OnlineUuid",
    "PlayerUuid",
    "Profile",
    "ProfileDirectory",
    "TransportError",
    "UnknownResponseError",
    "VariantMismatchError",
    "classify",
    "configure_logging",
    "offline_uuid",
    "online_player_uuid",
    "parse_uuid",
    "username_for",
]
