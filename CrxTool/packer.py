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
"""Packing of Chrome extensions in the crx2 format."""

import io

from CrxTool.binary import uint32_to_bytes
from CrxTool.config import (const_magic_number, const_crx2_version,
                            const_packer_max_pubkey_length,
                            const_packer_max_signature_length)
from CrxTool.errors import CrxArgumentError


class Crx2Packer:
    crx_version = const_crx2_version()

    def pack_extension(self, zip_bytes, key_pair):
        """Header followed by zip_bytes."""
        out = io.BytesIO()
        self.write_extension(zip_bytes, key_pair, out)
        return out.getvalue()

    def write_extension(self, zip_bytes, key_pair, output):
        self.write_extension_header(key_pair.public_key_bytes(),
                                    self.sign(zip_bytes, key_pair), output)
        output.write(zip_bytes)

    def sign(self, zip_bytes, key_pair):
        return key_pair.sign(zip_bytes)

    def write_extension_header(self, pubkey, sig, output):
        if len(pubkey) > const_packer_max_pubkey_length():
            raise CrxArgumentError("public key length is insane: {}".format(
                len(pubkey)))
        if len(sig) > const_packer_max_signature_length():
            raise CrxArgumentError("signature length is insane: {}".format(
                len(sig)))
        output.write(const_magic_number())
        output.write(uint32_to_bytes(self.crx_version))
        output.write(uint32_to_bytes(len(pubkey)))
        output.write(uint32_to_bytes(len(sig)))
        output.write(pubkey)
        output.write(sig)


def pack_extension(zip_bytes, key_pair):
    return Crx2Packer().pack_extension(zip_bytes, key_pair)
