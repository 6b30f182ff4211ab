import hashlib
import random

import pytest

from CrxTool.identifier import (translate_digest_to_id, id_from_public_key,
                                id_from_crx_id_bytes, is_valid_id)


def test_translate_maps_each_hex_digit():
    digest = "0123456789abcdef0123456789abcdef" + "f" * 32
    assert translate_digest_to_id(digest) == "abcdefghijklmnopabcdefghijklmnop"


def test_translate_ignores_second_half_of_digest():
    first = "0" * 32
    assert translate_digest_to_id(first + "0" * 32) == translate_digest_to_id(
        first + "f" * 32) == "a" * 32


def test_translate_over_random_digests():
    rng = random.Random(42)
    for _ in range(200):
        digest = "".join(rng.choice("0123456789abcdef") for _ in range(64))
        extid = translate_digest_to_id(digest)
        assert len(extid) == 32
        assert is_valid_id(extid)
        assert translate_digest_to_id(digest) == extid


@pytest.mark.parametrize("digest", ["0123", "ABCDEF" * 11, "g" * 64])
def test_translate_rejects_non_digests(digest):
    with pytest.raises(ValueError):
        translate_digest_to_id(digest)


def test_id_from_public_key_uses_sha256():
    pubkey = b"not really a key"
    digest = hashlib.sha256(pubkey).hexdigest()
    assert id_from_public_key(pubkey) == translate_digest_to_id(digest)


def test_id_from_crx_id_bytes_matches_public_key_id():
    pubkey = b"\x30\x82\x01\x22"
    crx_id = hashlib.sha256(pubkey).digest()[:16]
    assert id_from_crx_id_bytes(crx_id) == id_from_public_key(pubkey)


@pytest.mark.parametrize("extid, expected", [
    ("a" * 32, True),
    ("p" * 32, True),
    ("q" * 32, False),
    ("a" * 31, False),
    ("A" * 32, False),
    (None, False),
])
def test_is_valid_id(extid, expected):
    assert is_valid_id(extid) is expected
