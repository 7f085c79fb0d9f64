"""Online and offline player UUID variants."""

from typing import Literal
from uuid import UUID

from pydantic import field_validator

from mcuuid.domain.player import capability
from mcuuid.domain.player.model.value import MD5_VERSION, RANDOM_VERSION, Mode, version_nibble
from mcuuid.domain.player.port.profile_directory import ProfileDirectory
from mcuuid.domain.shared.model.value import ValueObject


def _check(uuid: UUID, mode: Mode, version: int) -> UUID:
    if not capability.is_enabled(mode):
        raise ValueError(f"{mode} mode is not enabled")
    if version_nibble(uuid) != version:
        raise ValueError(f"{mode} player UUIDs must be version {version}, got {uuid}")
    return uuid


class OnlineUuid(ValueObject):
    """A UUID issued by Mojang to a premium account (version 4)."""

    kind: Literal[Mode.ONLINE] = Mode.ONLINE
    uuid: UUID

    @field_validator("uuid")
    @classmethod
    def validate_version(cls, v: UUID) -> UUID:
        return _check(v, Mode.ONLINE, RANDOM_VERSION)

    @classmethod
    def from_directory(cls, uuid: UUID) -> "OnlineUuid":
        """Wrap a UUID reported by the directory service.

        The directory is trusted: the version field is not re-checked.
        """
        capability.require(Mode.ONLINE)
        return cls.model_construct(uuid=uuid)

    def get_username(self, directory: ProfileDirectory) -> str:
        """Look up the current username of this player.

        Raises:
            InvalidUsernameError: If the directory knows no such player
            TransportError: If the directory could not be reached
            UnknownResponseError: If the directory's answer could not be decoded
        """
        return directory.profile_by_uuid(self.uuid).name

    def __lt__(self, other: "OnlineUuid") -> bool:
        return self.uuid < other.uuid

    def __str__(self) -> str:
        return str(self.uuid)


class OfflineUuid(ValueObject):
    """A UUID derived from a username for offline-mode servers (version 3)."""

    kind: Literal[Mode.OFFLINE] = Mode.OFFLINE
    uuid: UUID

    @field_validator("uuid")
    @classmethod
    def validate_version(cls, v: UUID) -> UUID:
        return _check(v, Mode.OFFLINE, MD5_VERSION)

    def __lt__(self, other: "OfflineUuid") -> bool:
        return self.uuid < other.uuid

    def __str__(self) -> str:
        return str(self.uuid)
