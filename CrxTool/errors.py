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
"""Exceptions raised while reading or writing crx files."""


class Error(Exception):
    pass


class CrxFormatError(Error):
    """The input is not a well-formed crx file."""

    def __init__(self, message):
        self.message = message
        super(CrxFormatError, self).__init__(message)


class CrxVersionError(CrxFormatError):
    def __init__(self, version):
        self.version = version
        super(CrxVersionError, self).__init__(
            "unsupported crx version: {}".format(version))


class CrxEndOfStreamError(Error, EOFError):
    """Fewer bytes were available than a field declares."""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super(CrxEndOfStreamError, self).__init__(
            "premature end of stream: expected {} bytes, got {}".format(
                expected, actual))


class CrxArgumentError(Error, ValueError):
    pass
