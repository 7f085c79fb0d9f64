"""Global test fixtures."""

import os

import pytest

# Capabilities are read at import; make sure a developer's shell does not
# restrict them before mcuuid is first imported.
os.environ.pop("MCUUID_MODES", None)

from mcuuid.domain.player import capability  # noqa: E402
from mcuuid.domain.player.model.value import Mode  # noqa: E402


@pytest.fixture
def only_online(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(capability, "ENABLED_MODES", frozenset({Mode.ONLINE}))


@pytest.fixture
def only_offline(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(capability, "ENABLED_MODES", frozenset({Mode.OFFLINE}))
