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
"""Version specific decoders of crx headers.

Each interpreter consumes the stream right after the version tag and stops
at the first byte of the zip payload."""

import hashlib
from collections import namedtuple

from google.protobuf.message import DecodeError

from CrxTool import crx3_pb
from CrxTool.binary import CursorReader
from CrxTool.config import (const_crx2_version, const_crx3_version,
                            const_crx2_max_pubkey_length,
                            const_crx2_max_signature_length,
                            const_crx3_max_header_length)
from CrxTool.errors import CrxFormatError
from CrxTool.header import MapFileHeader, MessageFileHeader, ProofAlgorithm
from CrxTool.identifier import translate_digest_to_id
from CrxTool.util import log_debug

# magic number and version tag
PREFIX_LENGTH = 8

CrxMetadata = namedtuple('CrxMetadata', ['magic', 'version', 'header', 'id'])


class CrxInterpreter:
    version = None

    def __init__(self, magic):
        self.magic = magic

    def parse_metadata_after_version(self, stream):
        raise NotImplementedError()

    def check_length(self, name, length, ceiling):
        if length <= 0 or length > ceiling:
            raise CrxFormatError("{} length is insane: {}".format(
                name, length))


class Crx2Interpreter(CrxInterpreter):
    version = const_crx2_version()

    def parse_metadata_after_version(self, stream):
        reader = CursorReader(stream)
        pk_len = reader.read_uint32()
        sig_len = reader.read_uint32()
        self.check_length("public key", pk_len,
                          const_crx2_max_pubkey_length())
        self.check_length("signature", sig_len,
                          const_crx2_max_signature_length())
        pk = reader.read_fully(pk_len)
        sig = reader.read_fully(sig_len)
        header_len = PREFIX_LENGTH + 8 + pk_len + sig_len
        digest = hashlib.sha256(pk).hexdigest()
        extid = translate_digest_to_id(digest)
        log_debug("crx2 header: {} bytes, public key {} bytes, "
                  "signature {} bytes".format(header_len, pk_len, sig_len),
                  1, extid)
        return CrxMetadata(self.magic, self.version,
                           MapFileHeader(pk, sig, header_len), extid)


class Crx3Interpreter(CrxInterpreter):
    """https://cs.chromium.org/chromium/src/components/crx_file/crx3.proto"""
    version = const_crx3_version()

    def parse_metadata_after_version(self, stream):
        reader = CursorReader(stream)
        header_len = reader.read_uint32()
        self.check_length("reported header", header_len,
                          const_crx3_max_header_length())
        header_bytes = reader.read_fully(header_len)
        message = crx3_pb.CrxFileHeader()
        try:
            message.ParseFromString(header_bytes)
        except DecodeError as e:
            raise CrxFormatError("malformed crx3 header: {}".format(e)) from e
        header = MessageFileHeader(message, PREFIX_LENGTH + 4 + header_len)
        rsa_proofs = header.proofs_by_algorithm(ProofAlgorithm.sha256_with_rsa)
        if not rsa_proofs:
            raise CrxFormatError(
                "header does not contain sha256_with_rsa asymmetric key proof")
        # the first proof in declaration order determines the id
        digest = hashlib.sha256(rsa_proofs[0].public_key).hexdigest()
        extid = translate_digest_to_id(digest)
        log_debug("crx3 header: {} bytes, {} proofs".format(
            header.header_byte_length(), len(header.all_proofs())), 1, extid)
        return CrxMetadata(self.magic, self.version, header, extid)


INTERPRETERS = {
    Crx2Interpreter.version: Crx2Interpreter,
    Crx3Interpreter.version: Crx3Interpreter,
}
