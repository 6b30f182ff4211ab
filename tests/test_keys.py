import pytest
from Crypto.PublicKey import RSA

from CrxTool.keys import (KeyPair, key_pair_from_private_key_bytes,
                          load_key_pair, check_signature)


def test_public_key_is_der_subject_public_key_info(key_pair):
    pubkey = key_pair.public_key_bytes()
    assert pubkey[0] == 0x30
    assert RSA.importKey(pubkey).n == key_pair.key.n


def test_private_key_round_trip(key_pair, tmp_path):
    exported = key_pair.export_private_key()
    assert key_pair_from_private_key_bytes(
        exported).public_key_bytes() == key_pair.public_key_bytes()

    keyfile = tmp_path / "key.pem"
    keyfile.write_bytes(exported)
    assert load_key_pair(str(keyfile)).public_key_bytes() == \
        key_pair.public_key_bytes()


def test_sign_and_check(key_pair):
    sig = key_pair.sign(b'data')
    assert len(sig) == 128
    assert check_signature(key_pair.public_key_bytes(), sig, b'data')


def test_public_only_key_is_rejected(key_pair):
    with pytest.raises(ValueError):
        KeyPair(key_pair.key.publickey())
