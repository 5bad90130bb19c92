"""Tests for the digest source."""

import hashlib
import os

from tests.scenarios import MY_NAME_DIGEST


def test_my_name_digest(hash_service):
    assert hash_service.hash_input("my_name").digest == MY_NAME_DIGEST


def test_digest_is_16_bytes(hash_service):
    for seed in ["", "a", "some much longer seed with spaces", "юникод"]:
        digest = hash_service.hash_input(seed).digest
        assert len(digest) == 16
        assert all(0 <= b <= 255 for b in digest)


def test_digest_is_deterministic(hash_service):
    assert hash_service.hash_input("alice") == hash_service.hash_input("alice")


def test_different_seeds_differ(hash_service):
    assert hash_service.hash_input("alice").digest != hash_service.hash_input("bob").digest


def test_non_utf8_seed_hashes_raw_bytes(hash_service):
    expected = tuple(hashlib.md5(b"caf\xe9").digest())
    assert hash_service.hash_input(os.fsdecode(b"caf\xe9")).digest == expected
