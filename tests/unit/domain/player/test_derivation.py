"""Tests for offline UUID derivation."""

import hashlib
from uuid import UUID

import pytest

from mcuuid.domain.player.model.value import version_nibble
from mcuuid.domain.player.service.derivation import offline_uuid

KNOWN_OFFLINE_UUIDS = [
    ("boolean_coercion", "db62bdfb-eddc-3acc-a14e-c703aba52549"),
    ("BooleanCoercion", "44d050b1-46c8-37a8-b511-7023ae304192"),
    ("bool", "e9fd750e-29c2-3d85-80c9-64618059d454"),
    ("BOOL", "c5d06acf-0ef6-3a68-bf0b-b57806bcbef5"),
    ("BoOl", "e38f2cf4-72d2-3a84-8278-fed6908d2746"),
    ("booleancoercion", "072a2e03-56ce-3960-9391-c56afe17e317"),
]


class TestOfflineUuid:
    @pytest.mark.parametrize(("username", "expected"), KNOWN_OFFLINE_UUIDS)
    def test_matches_known_values(self, username: str, expected: str):
        assert offline_uuid(username) == UUID(expected)

    def test_is_deterministic(self):
        assert offline_uuid("Notch") == offline_uuid("Notch")

    def test_is_case_sensitive(self):
        assert offline_uuid("BOOL") != offline_uuid("bool")

    @pytest.mark.parametrize("username", ["", "a", "Notch", "jeb_", "名前", "x" * 64])
    def test_stamps_version_3(self, username: str):
        assert version_nibble(offline_uuid(username)) == 3

    @pytest.mark.parametrize("username", ["", "a", "Notch", "jeb_", "名前", "x" * 64])
    def test_stamps_rfc4122_variant(self, username: str):
        assert offline_uuid(username).bytes[8] >> 6 == 0b10

    def test_matches_java_name_uuid_from_bytes(self):
        # Java's UUID.nameUUIDFromBytes is the same MD5 + version 3 construction
        digest = hashlib.md5(b"OfflinePlayer:Steve").digest()
        assert offline_uuid("Steve") == UUID(bytes=digest, version=3)
