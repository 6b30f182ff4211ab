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
"""Protocol buffer messages of the crx3 header.

Mirrors components/crx_file/crx3.proto of Chromium:

    message CrxFileHeader {
      repeated AsymmetricKeyProof sha256_with_rsa = 2;
      repeated AsymmetricKeyProof sha256_with_ecdsa = 3;
      optional bytes verified_contents = 4;
      optional bytes signed_header_data = 10000;
    }
    message AsymmetricKeyProof {
      optional bytes public_key = 1;
      optional bytes signature = 2;
    }
    message SignedData {
      optional bytes crx_id = 1;
    }
"""

from google.protobuf import descriptor_pb2
from google.protobuf import descriptor_pool
from google.protobuf import message_factory

_PACKAGE = 'crx_file'

_Field = descriptor_pb2.FieldDescriptorProto


def _add_bytes_field(message, name, number):
    message.field.add(
        name=name,
        number=number,
        type=_Field.TYPE_BYTES,
        label=_Field.LABEL_OPTIONAL)


def _add_proof_field(message, name, number):
    message.field.add(
        name=name,
        number=number,
        type=_Field.TYPE_MESSAGE,
        label=_Field.LABEL_REPEATED,
        type_name='.{}.AsymmetricKeyProof'.format(_PACKAGE))


def _file_descriptor_proto():
    proto = descriptor_pb2.FileDescriptorProto()
    proto.name = 'crx_file/crx3.proto'
    proto.package = _PACKAGE
    proto.syntax = 'proto2'

    header = proto.message_type.add(name='CrxFileHeader')
    _add_proof_field(header, 'sha256_with_rsa', 2)
    _add_proof_field(header, 'sha256_with_ecdsa', 3)
    _add_bytes_field(header, 'verified_contents', 4)
    _add_bytes_field(header, 'signed_header_data', 10000)

    proof = proto.message_type.add(name='AsymmetricKeyProof')
    _add_bytes_field(proof, 'public_key', 1)
    _add_bytes_field(proof, 'signature', 2)

    signed_data = proto.message_type.add(name='SignedData')
    _add_bytes_field(signed_data, 'crx_id', 1)
    return proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_file_descriptor_proto().SerializeToString())


def _message_class(name):
    return message_factory.GetMessageClass(
        _pool.FindMessageTypeByName('{}.{}'.format(_PACKAGE, name)))


CrxFileHeader = _message_class('CrxFileHeader')
AsymmetricKeyProof = _message_class('AsymmetricKeyProof')
SignedData = _message_class('SignedData')
