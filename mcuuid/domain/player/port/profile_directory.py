"""Profile directory port for the player domain."""

from abc import abstractmethod
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID


@dataclass(frozen=True)
class Profile:
    """A player profile as reported by the directory service."""

    name: str
    uuid: UUID


class ProfileDirectory(Protocol):
    """Port for the service resolving usernames and online UUIDs.

    Implementations are adapters in infrastructure/ (e.g., MojangProfileDirectory).
    Each call is a single blocking round trip; nothing is cached or retried.
    """

    @abstractmethod
    def profile_by_name(self, username: str) -> Profile:
        """Resolve a username to its profile.

        Raises:
            InvalidUsernameError: If no player has this username
            TransportError: If the request could not complete
            UnknownResponseError: If the response body could not be decoded
        """
        ...

    @abstractmethod
    def profile_by_uuid(self, uuid: UUID) -> Profile:
        """Resolve an online UUID to its profile.

        Raises:
            InvalidUsernameError: If no player has this UUID
            TransportError: If the request could not complete
            UnknownResponseError: If the response body could not be decoded
        """
        ...
