"""One-call lookups against the default Mojang directory."""

from uuid import UUID

from mcuuid.config import Config
from mcuuid.domain.player.model.player_uuid import PlayerUuid
from mcuuid.domain.shared.error import InvalidUuidError
from mcuuid.infrastructure.mojang.directory import MojangProfileDirectory


def _directory(config: Config | None) -> MojangProfileDirectory:
    return MojangProfileDirectory((config or Config()).directory)


def online_player_uuid(username: str, config: Config | None = None) -> PlayerUuid:
    """Online PlayerUuid of ``username``, fetched from Mojang."""
    return PlayerUuid.new_with_online_username(username, _directory(config))


def username_for(uuid: UUID | str, config: Config | None = None) -> str:
    """Current username of the online player ``uuid``.

    The UUID is classified before any request is made, so offline and
    non-player UUIDs fail fast.

    Raises:
        InvalidUuidError: If ``uuid`` is not an online player UUID
        InvalidUsernameError: If Mojang knows no player with this UUID
    """
    player = PlayerUuid.parse(uuid) if isinstance(uuid, str) else PlayerUuid.new_with_uuid(uuid)
    if not player.is_online():
        raise InvalidUuidError(f"Not an online player UUID: {player}")
    return player.unwrap_online().get_username(_directory(config))
