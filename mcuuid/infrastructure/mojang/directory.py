"""Mojang profile directory adapter."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from uuid import UUID

import httpx
import logfire
from pydantic import BaseModel, ValidationError

from mcuuid.config import DirectoryConfig
from mcuuid.domain.player.port.profile_directory import Profile, ProfileDirectory
from mcuuid.domain.shared.error import (
    InvalidUsernameError,
    TransportError,
    UnknownResponseError,
)

logger = logging.getLogger(__name__)


class ProfileResponse(BaseModel):
    """Body of a successful profile lookup: ``{"name": ..., "id": ...}``."""

    name: str
    id: UUID


class MojangProfileDirectory(ProfileDirectory):
    """ProfileDirectory implementation for the Mojang APIs.

    With no injected client, every lookup opens and closes its own
    ``httpx.Client``; nothing is pooled across calls.
    """

    def __init__(
        self,
        config: DirectoryConfig | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._config = config or DirectoryConfig()
        self._http = http_client

    def profile_by_name(self, username: str) -> Profile:
        """Resolve a username via the Mojang API."""
        with logfire.span("LookupProfileByName", username=username):
            return self._lookup(self._config.profile_by_name(username))

    def profile_by_uuid(self, uuid: UUID) -> Profile:
        """Resolve an online UUID via the Mojang session server."""
        with logfire.span("LookupProfileByUuid", uuid=str(uuid)):
            return self._lookup(self._config.profile_by_uuid(str(uuid)))

    def _lookup(self, url: str) -> Profile:
        logger.debug("GET %s", url)
        try:
            with self._client() as client:
                response = client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning("Directory request failed: %s", e)
            raise TransportError(e) from e

        if not response.is_success:
            logger.info("Directory lookup rejected: status=%d, url=%s", response.status_code, url)
            raise InvalidUsernameError(f"No player found ({response.status_code})")

        try:
            body = ProfileResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.error("Undecodable directory response: body=%s", response.text)
            raise UnknownResponseError(f"Unexpected directory response from {url}") from e

        return Profile(name=body.name, uuid=body.id)

    @contextmanager
    def _client(self) -> Iterator[httpx.Client]:
        if self._http is not None:
            yield self._http
            return

        kwargs = {}
        if self._config.timeout is not None:
            kwargs["timeout"] = self._config.timeout
        with httpx.Client(
            follow_redirects=True,
            headers={"User-Agent": self._config.user_agent, "Accept": "application/json"},
            **kwargs,
        ) as client:
            yield client
