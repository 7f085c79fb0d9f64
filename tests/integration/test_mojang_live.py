"""Live tests against the Mojang APIs.

Run with MCUUID_LIVE_DIRECTORY=1; skipped otherwise.
"""

import os
from uuid import UUID

import pytest

from mcuuid.application.lookup import online_player_uuid, username_for
from mcuuid.domain.shared.error import InvalidUsernameError

pytestmark = pytest.mark.skipif(
    os.environ.get("MCUUID_LIVE_DIRECTORY") != "1",
    reason="MCUUID_LIVE_DIRECTORY not set",
)


@pytest.mark.parametrize(
    ("username", "expected"),
    [
        ("Notch", "069a79f4-44e9-4726-a5be-fca90e38aaf5"),
        ("dinnerbone", "61699b2e-d327-4a01-9f1e-0ea8c3f06bc6"),
        ("Dinnerbone", "61699b2e-d327-4a01-9f1e-0ea8c3f06bc6"),
    ],
)
def test_online_uuids(username: str, expected: str):
    assert online_player_uuid(username).as_uuid() == UUID(expected)


@pytest.mark.parametrize(
    ("uuid", "expected"),
    [
        ("069a79f4-44e9-4726-a5be-fca90e38aaf5", "Notch"),
        ("61699b2e-d327-4a01-9f1e-0ea8c3f06bc6", "Dinnerbone"),
    ],
)
def test_online_uuids_to_names(uuid: str, expected: str):
    assert username_for(uuid) == expected


def test_unknown_username():
    with pytest.raises(InvalidUsernameError):
        online_player_uuid("this_name_is_too_long_to_exist")
