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
"""Header models of crx files: the proofs a header carries, by algorithm."""

import base64
from collections import namedtuple
from enum import Enum

from google.protobuf.message import DecodeError

from CrxTool import crx3_pb
from CrxTool.errors import CrxFormatError
from CrxTool.identifier import id_from_crx_id_bytes


class ProofAlgorithm(Enum):
    sha1_with_rsa = 'sha1_with_rsa'
    sha256_with_rsa = 'sha256_with_rsa'
    sha256_with_ecdsa = 'sha256_with_ecdsa'


CRX2_ALGORITHMS = (ProofAlgorithm.sha1_with_rsa, )
CRX3_ALGORITHMS = (ProofAlgorithm.sha256_with_rsa,
                   ProofAlgorithm.sha256_with_ecdsa)


class AsymmetricKeyProof(namedtuple('AsymmetricKeyProof',
                                    ['public_key', 'signature'])):
    """Public key and signature (raw bytes) embedded in a header."""
    __slots__ = ()

    @property
    def public_key_base64(self):
        return base64.b64encode(self.public_key).decode('ascii')

    @property
    def signature_base64(self):
        return base64.b64encode(self.signature).decode('ascii')

    @property
    def public_key_length(self):
        return len(self.public_key)

    @property
    def signature_length(self):
        return len(self.signature)

    @property
    def combined_length(self):
        return self.public_key_length + self.signature_length


class CrxFileHeader:
    """Common interface of the crx2 and crx3 headers."""

    def proofs_by_algorithm(self, algorithm):
        raise NotImplementedError()

    def algorithms(self):
        raise NotImplementedError()

    def all_proofs(self):
        """All (algorithm, proof) pairs, grouped by algorithm in declaration
        order."""
        return [(algorithm, proof) for algorithm in self.algorithms()
                for proof in self.proofs_by_algorithm(algorithm)]

    def header_byte_length(self):
        """Number of bytes preceding the zip payload."""
        raise NotImplementedError()


class MapFileHeader(CrxFileHeader):
    """Header of a crx2 file: a single sha1_with_rsa proof."""

    def __init__(self, pubkey, sig, header_len):
        self._proofs = {
            ProofAlgorithm.sha1_with_rsa: (AsymmetricKeyProof(pubkey, sig), )
        }
        self._header_len = header_len

    def proofs_by_algorithm(self, algorithm):
        return list(self._proofs.get(ProofAlgorithm(algorithm), ()))

    def algorithms(self):
        return list(CRX2_ALGORITHMS)

    def header_byte_length(self):
        return self._header_len

    def __repr__(self):
        return 'MapFileHeader(header_len={})'.format(self._header_len)


class MessageFileHeader(CrxFileHeader):
    """Header of a crx3 file, backed by the decoded CrxFileHeader message."""

    def __init__(self, message, header_len):
        self._message = message
        self._header_len = header_len

    def proofs_by_algorithm(self, algorithm):
        algorithm = ProofAlgorithm(algorithm)
        if algorithm not in CRX3_ALGORITHMS:
            return []
        return [
            AsymmetricKeyProof(bytes(proof.public_key), bytes(proof.signature))
            for proof in getattr(self._message, algorithm.value)
        ]

    def algorithms(self):
        return list(CRX3_ALGORITHMS)

    def header_byte_length(self):
        return self._header_len

    def signed_header_data(self):
        if not self._message.HasField('signed_header_data'):
            return None
        signed_data = crx3_pb.SignedData()
        try:
            signed_data.ParseFromString(self._message.signed_header_data)
        except DecodeError as e:
            raise CrxFormatError(
                "malformed signed header data: {}".format(e)) from e
        return signed_data

    def declared_id(self):
        """Extension id stored in the signed header data, if any."""
        signed_data = self.signed_header_data()
        if signed_data is None or not signed_data.HasField('crx_id'):
            return None
        if len(signed_data.crx_id) != 16:
            raise CrxFormatError("crx_id has {} bytes, expected 16".format(
                len(signed_data.crx_id)))
        return id_from_crx_id_bytes(signed_data.crx_id)

    def __repr__(self):
        return 'MessageFileHeader(header_len={}, proofs={})'.format(
            self._header_len, len(self.all_proofs()))
