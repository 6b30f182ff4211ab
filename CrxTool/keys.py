#!/usr/bin/env python3
#
# Copyright (C) 2016,2017 The University of Sheffield, UK
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
"""RSA key pairs used to sign crx files."""

from Crypto.PublicKey import RSA
from Crypto.Hash import SHA
from Crypto.Signature import PKCS1_v1_5

from CrxTool.config import const_key_size


class KeyPair:
    def __init__(self, key):
        if not key.has_private():
            raise ValueError("signing requires a private key")
        self.key = key

    def public_key_bytes(self):
        """DER encoded SubjectPublicKeyInfo, as embedded in crx headers."""
        return self.key.publickey().exportKey(format='DER')

    def sign(self, data):
        """SHA1 with RSA (PKCS#1 v1.5) signature of data."""
        return PKCS1_v1_5.new(self.key).sign(SHA.new(data))

    def export_private_key(self):
        return self.key.exportKey(format='PEM', pkcs=8)


def generate_rsa_key_pair(bits=None):
    return KeyPair(RSA.generate(bits or const_key_size()))


def key_pair_from_private_key_bytes(data):
    return KeyPair(RSA.importKey(data))


def load_key_pair(filename):
    with open(filename, 'rb') as f:
        return key_pair_from_private_key_bytes(f.read())


def check_signature(pk, sig, data):
    key = RSA.importKey(pk)
    hash = SHA.new(data)
    return PKCS1_v1_5.new(key).verify(hash, sig)
