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
"""Global configuration of the crx tool."""

import os


def const_magic_number():
    """Magic bytes every crx file starts with."""
    return b'Cr24'


def const_crx2_version():
    """Version tag of the crx2 format."""
    return 2


def const_crx3_version():
    """Version tag of the crx3 format."""
    return 3


def const_supported_versions():
    """Version tags this tool can decode."""
    return [const_crx2_version(), const_crx3_version()]


def const_crx2_max_pubkey_length():
    """Largest public key length accepted when reading a crx2 header."""
    return 1024 * 32


def const_crx2_max_signature_length():
    """Largest signature length accepted when reading a crx2 header."""
    return 1024 * 64


def const_crx3_max_header_length():
    """Largest header length accepted when reading a crx3 header."""
    return 1024 * 128


def const_packer_max_pubkey_length():
    """Largest public key the packer writes."""
    return 1024 * 32


def const_packer_max_signature_length():
    """Largest signature the packer writes."""
    return 1024 * 128


def const_id_length():
    """Number of characters of an extension id."""
    return 32


def const_key_size():
    """Modulus size of generated RSA keys."""
    return 2048


def const_private_key_file():
    """Default private key used for packing."""
    if "CRX_PRIVATE_KEY" in os.environ:
        return os.environ.get("CRX_PRIVATE_KEY")
    else:
        return None


def const_verbose():
    """Default verbosity."""
    return False


def const_log_format():
    return '%(process)6s %(asctime)s %(levelname)8s %(message)s'
