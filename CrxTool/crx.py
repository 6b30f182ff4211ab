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
"""Reading, inspecting and packing crx files
(https://developer.chrome.com/extensions/crx)."""

import binascii
import os

from Crypto.PublicKey import RSA

from CrxTool.binary import CursorReader
from CrxTool.config import (const_magic_number, const_supported_versions,
                            const_crx2_version)
from CrxTool.errors import Error, CrxFormatError, CrxVersionError
from CrxTool.header import ProofAlgorithm
from CrxTool.interpreter import INTERPRETERS, CrxMetadata
from CrxTool.keys import (check_signature, generate_rsa_key_pair,
                          load_key_pair)
from CrxTool.packer import Crx2Packer
from CrxTool.util import value_of, log_info, log_warning
from CrxTool.zipping import zip_directory, list_zip, extract_zip

__all__ = [
    'CrxMetadata', 'CrxFile', 'is_valid_magic', 'is_crxfile',
    'read_magic_number', 'parse_metadata', 'read_crx', 'chop_zip_from_crx',
    'print_crx_info', 'verify_crxfile', 'extract_crxfile', 'pack_crxfile'
]


class CrxFile:
    def __init__(self, filename, metadata, data):
        self.file = filename
        self.metadata = metadata
        self.data = data

    @property
    def magic(self):
        return self.metadata.magic

    @property
    def version(self):
        return self.metadata.version

    @property
    def header_len(self):
        return self.metadata.header.header_byte_length()


def is_valid_magic(magic):
    return const_magic_number() == magic


def is_crxfile(filename):
    "Check magic number: crx files should start with \"Cr24\"."
    with open(filename, 'rb') as file:
        magic = file.read(4)
    return is_valid_magic(magic)


def read_magic_number(stream):
    magic = CursorReader(stream).read_up_to(len(const_magic_number()))
    if not is_valid_magic(magic):
        raise CrxFormatError("invalid magic number: {}".format(
            binascii.hexlify(magic).decode('ascii')))
    return magic.decode('ascii')


def parse_metadata(stream):
    """Read the header of a crx file from stream.

    The stream is left positioned at the start of the zip payload."""
    magic = read_magic_number(stream)
    version = CursorReader(stream).read_uint32()
    if version not in const_supported_versions():
        raise CrxVersionError(version)
    return INTERPRETERS[version](magic).parse_metadata_after_version(stream)


def read_crx(filename):
    "Read header and payload of a crx file."
    with open(filename, 'rb') as file:
        metadata = parse_metadata(file)
        data = CursorReader(file).read_remaining()
    return CrxFile(filename, metadata, data)


def chop_zip_from_crx(filename):
    """Zip payload of a crx file."""
    return read_crx(filename).data


def _signature_status(crx):
    if crx.version != const_crx2_version():
        return "not checked"
    proof = crx.metadata.header.proofs_by_algorithm(
        ProofAlgorithm.sha1_with_rsa)[0]
    try:
        valid = check_signature(proof.public_key, proof.signature, crx.data)
    except ValueError:
        valid = False
    if valid:
        return "valid"
    else:
        return "invalid"


def _format_public_key(pk):
    try:
        key = RSA.importKey(pk)
    except ValueError:
        return binascii.hexlify(pk).decode("ascii")
    return key.exportKey().decode("utf-8")


def print_crx_info(verbose, crx):
    header = crx.metadata.header
    entries = list_zip(crx.data)
    print("Filename:    " + crx.file)
    print("Header size: " + str(crx.header_len))
    print("Size:        " + str(crx.header_len + len(crx.data)))
    print("Magic byte:  " + crx.magic + " (valid)")
    print("Version:     " + str(crx.version))
    print("Id:          " + crx.metadata.id)
    declared_id = getattr(header, 'declared_id', None)
    if declared_id is not None and declared_id() is not None:
        print("Declared id: " + declared_id())
    print("Signature:   " + _signature_status(crx))
    for algorithm, proof in header.all_proofs():
        print("Proof " + algorithm.value + ":")
        print("Public Key [" + str(proof.public_key_length) + "]:")
        print(_format_public_key(proof.public_key))
        if verbose:
            print("Signature [" + str(proof.signature_length) + "]: " + str(
                binascii.hexlify(proof.signature)))
    print("Zip content:")
    for info in entries:
        print('{:8d} {:8d}'.format(info.file_size, info.compress_size),
              info.filename)


def verify_crxfile(verbose, filename):
    if is_crxfile(filename):
        if verbose:
            print("Found correct magic bytes.")
        print_crx_info(verbose, read_crx(filename))
        return 0
    else:
        if verbose:
            print("No valid magic bytes found")
        return -1


def extract_crxfile(verbose, force, filename, destdir):
    if not (is_crxfile(filename) or force):
        print("Input file not valid.")
        return -1
    try:
        data = read_crx(filename).data
    except Error as e:
        if not force:
            raise
        log_warning("extracting {} despite invalid header: {}".format(
            filename, e))
        with open(filename, 'rb') as file:
            data = file.read()
    destdir = value_of(destdir, ".")
    basename = os.path.basename(filename)
    if basename.endswith(".crx"):
        dirname = basename[0:len(basename) - 4]
    else:
        dirname = basename
    outdir = os.path.join(destdir, dirname)
    for info in list_zip(data):
        if verbose:
            print('{:8d}'.format(info.file_size), info.filename)
    extract_zip(data, outdir)
    print("Content extracted into: " + outdir)
    return 0


def pack_crxfile(verbose, dirname, keyfile, filename, generate_key=False):
    """Pack the extension in dirname as crx2 into filename."""
    if keyfile is not None and os.path.exists(keyfile):
        key_pair = load_key_pair(keyfile)
    elif generate_key:
        key_pair = generate_rsa_key_pair()
        if keyfile is None:
            keyfile = os.path.splitext(filename)[0] + ".pem"
        with open(keyfile, 'wb') as f:
            f.write(key_pair.export_private_key())
        log_info("generated new key: " + keyfile)
    else:
        print("No private key available: " + str(keyfile))
        return -1
    zip_bytes = zip_directory(dirname)
    with open(filename, 'wb') as f:
        Crx2Packer().write_extension(zip_bytes, key_pair, f)
    with open(filename, 'rb') as f:
        metadata = parse_metadata(f)
    log_info("packed {} ({} bytes payload)".format(filename, len(zip_bytes)),
             0, metadata.id)
    if verbose:
        print("Id: " + metadata.id)
    return 0
