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
"""Little-endian primitives over a forward-only binary stream."""

from CrxTool.errors import CrxEndOfStreamError


class CursorReader:
    """Sequential reader that never seeks the wrapped stream.

    Only the bytes asked for are consumed, so after a header has been read
    the stream is positioned at the first byte of the payload."""

    def __init__(self, stream):
        self.stream = stream
        self.position = 0

    def read_up_to(self, length):
        """Read at most length bytes, fewer only if the stream ends."""
        chunks = []
        remaining = length
        while remaining > 0:
            chunk = self.stream.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        data = b''.join(chunks)
        self.position += len(data)
        return data

    def read_fully(self, length):
        data = self.read_up_to(length)
        if len(data) != length:
            raise CrxEndOfStreamError(length, len(data))
        return data

    def read_uint32(self):
        return int.from_bytes(self.read_fully(4), byteorder='little')

    def read_remaining(self):
        data = self.stream.read()
        self.position += len(data)
        return data


def uint32_to_bytes(value):
    return int(value).to_bytes(4, byteorder='little')
