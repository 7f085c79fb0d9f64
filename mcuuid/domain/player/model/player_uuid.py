"""PlayerUuid - a UUID tagged with the account mode it belongs to."""

from typing import Annotated, assert_never
from uuid import UUID

from pydantic import Field

from mcuuid.domain.player import capability
from mcuuid.domain.player.model.value import Mode, parse_uuid
from mcuuid.domain.player.model.variant import OfflineUuid, OnlineUuid
from mcuuid.domain.player.port.profile_directory import ProfileDirectory
from mcuuid.domain.player.service.classifier import classify
from mcuuid.domain.player.service.derivation import offline_uuid
from mcuuid.domain.shared.error import VariantMismatchError
from mcuuid.domain.shared.model.value import RootValueObject

PlayerVariant = Annotated[OnlineUuid | OfflineUuid, Field(discriminator="kind")]


class PlayerUuid(RootValueObject[PlayerVariant]):
    """An online or offline player UUID.

    Build one with the ``new_with_*`` constructors or ``parse``; the variant
    always agrees with the version field of the wrapped UUID.
    """

    @classmethod
    def new_with_online_username(
        cls, username: str, directory: ProfileDirectory
    ) -> "PlayerUuid":
        """Look up the online UUID of ``username`` in the directory.

        Raises:
            ConfigurationError: If online mode is disabled
            InvalidUsernameError: If no player has this username
            TransportError: If the directory could not be reached
            UnknownResponseError: If the directory's answer could not be decoded
        """
        capability.require(Mode.ONLINE)
        profile = directory.profile_by_name(username)
        return cls(OnlineUuid.from_directory(profile.uuid))

    @classmethod
    def new_with_offline_username(cls, username: str) -> "PlayerUuid":
        """Derive the offline UUID of ``username``. Never touches the network."""
        capability.require(Mode.OFFLINE)
        return cls(OfflineUuid(uuid=offline_uuid(username)))

    @classmethod
    def new_with_uuid(cls, uuid: UUID) -> "PlayerUuid":
        """Classify ``uuid`` by its version field.

        Raises:
            InvalidUuidError: If the UUID is not a player UUID of an enabled mode
        """
        return cls(classify(uuid))

    @classmethod
    def parse(cls, text: str) -> "PlayerUuid":
        """Parse and classify the textual form of a UUID."""
        return cls.new_with_uuid(parse_uuid(text))

    @property
    def mode(self) -> Mode:
        return self.root.kind

    def is_online(self) -> bool:
        return self.mode is Mode.ONLINE

    def is_offline(self) -> bool:
        return self.mode is Mode.OFFLINE

    def as_uuid(self) -> UUID:
        match self.root:
            case OnlineUuid(uuid=uuid) | OfflineUuid(uuid=uuid):
                return uuid
            case _:
                assert_never(self.root)

    def as_bytes(self) -> bytes:
        """The 16 bytes of the UUID in network byte order."""
        return self.as_uuid().bytes

    def unwrap_online(self) -> OnlineUuid:
        match self.root:
            case OnlineUuid():
                return self.root
            case OfflineUuid():
                raise VariantMismatchError("unwrap_online called on an offline uuid")
            case _:
                assert_never(self.root)

    def unwrap_offline(self) -> OfflineUuid:
        match self.root:
            case OfflineUuid():
                return self.root
            case OnlineUuid():
                raise VariantMismatchError("unwrap_offline called on an online uuid")
            case _:
                assert_never(self.root)

    def __lt__(self, other: "PlayerUuid") -> bool:
        return self._sort_key() < other._sort_key()

    def _sort_key(self) -> tuple[int, UUID]:
        return (0 if self.is_online() else 1, self.as_uuid())

    def __str__(self) -> str:
        return str(self.as_uuid())
