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
"""Derivation of extension ids from public keys."""

import hashlib
import re

from CrxTool.config import const_id_length

_HEX_DIGITS = '0123456789abcdef'
_ID_ALPHABET = 'abcdefghijklmnop'
_TRANSLATION = str.maketrans(_HEX_DIGITS, _ID_ALPHABET)

regex_extid = re.compile(r'^[a-p]{32}$')


def translate_digest_to_id(digest, start=0, length=None):
    """Map lowercase hex digits to the id alphabet: '0'-'9' become 'a'-'j'
    and 'a'-'f' become 'k'-'p'."""
    if length is None:
        length = const_id_length()
    chars = digest[start:start + length]
    if len(chars) != length:
        raise ValueError("digest too short: {}".format(digest))
    if any(c not in _HEX_DIGITS for c in chars):
        raise ValueError("not a lowercase hex digest: {}".format(digest))
    return chars.translate(_TRANSLATION)


def id_from_public_key(pubkey):
    """Extension id of a DER encoded public key."""
    digest = hashlib.sha256(pubkey).hexdigest()
    return translate_digest_to_id(digest)


def id_from_crx_id_bytes(crx_id):
    """Extension id of the 16 raw bytes stored in a crx3 signed header."""
    return translate_digest_to_id(crx_id.hex())


def is_valid_id(extid):
    return isinstance(extid, str) and regex_extid.match(extid) is not None
