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
"""Zip archives carried as crx payloads."""

import io
import os
from zipfile import ZipFile, ZIP_DEFLATED, BadZipFile

from CrxTool.binary import CursorReader
from CrxTool.errors import CrxFormatError


def zip_directory(dirname):
    """Zip the files below dirname, in sorted order, into bytes."""
    out = io.BytesIO()
    with ZipFile(out, 'w', ZIP_DEFLATED) as zf:
        for root, dirs, files in os.walk(dirname):
            dirs.sort()
            for name in sorted(files):
                path = os.path.join(root, name)
                arcname = os.path.relpath(path, dirname).replace(os.sep, '/')
                zf.write(path, arcname)
    return out.getvalue()


def _not_a_zip(e):
    return CrxFormatError("payload is not a zip archive: {}".format(e))


def unzip(stream):
    """Read the rest of stream as a zip archive; map entry names to bytes."""
    data = CursorReader(stream).read_remaining()
    try:
        with ZipFile(io.BytesIO(data), 'r') as zf:
            return {
                info.filename: zf.read(info)
                for info in zf.infolist() if not info.is_dir()
            }
    except BadZipFile as e:
        raise _not_a_zip(e) from e


def list_zip(data):
    try:
        with ZipFile(io.BytesIO(data), 'r') as zf:
            return zf.infolist()
    except BadZipFile as e:
        raise _not_a_zip(e) from e


def extract_zip(data, destdir):
    try:
        with ZipFile(io.BytesIO(data), 'r') as zf:
            zf.extractall(destdir)
    except BadZipFile as e:
        raise _not_a_zip(e) from e
