import io

import pytest

from CrxTool.binary import CursorReader, uint32_to_bytes
from CrxTool.errors import CrxEndOfStreamError


class TrickleStream(io.RawIOBase):
    """Returns at most one byte per read call."""

    def __init__(self, data):
        self.data = data
        self.pos = 0

    def readable(self):
        return True

    def read(self, size=-1):
        if self.pos >= len(self.data):
            return b''
        chunk = self.data[self.pos:self.pos + 1]
        self.pos += 1
        return chunk


def test_read_uint32_is_little_endian():
    reader = CursorReader(io.BytesIO(b'\x01\x02\x03\x04'))
    assert reader.read_uint32() == 0x04030201
    assert reader.position == 4


def test_read_uint32_is_unsigned():
    reader = CursorReader(io.BytesIO(b'\xff\xff\xff\xff'))
    assert reader.read_uint32() == 0xffffffff


def test_read_fully_collects_short_reads():
    reader = CursorReader(TrickleStream(b'abcdef'))
    assert reader.read_fully(4) == b'abcd'
    assert reader.read_fully(2) == b'ef'


def test_read_fully_raises_on_truncation():
    reader = CursorReader(io.BytesIO(b'abc'))
    with pytest.raises(CrxEndOfStreamError) as excinfo:
        reader.read_fully(5)
    assert excinfo.value.expected == 5
    assert excinfo.value.actual == 3
    assert isinstance(excinfo.value, EOFError)


def test_reader_leaves_rest_of_stream_unread():
    stream = io.BytesIO(b'\x02\x00\x00\x00payload')
    CursorReader(stream).read_uint32()
    assert stream.read() == b'payload'


def test_uint32_to_bytes():
    assert uint32_to_bytes(2) == b'\x02\x00\x00\x00'
    assert uint32_to_bytes(32768) == b'\x00\x80\x00\x00'


def test_read_remaining_returns_rest_and_advances():
    reader = CursorReader(io.BytesIO(b'\x01\x00\x00\x00rest'))
    reader.read_uint32()
    assert reader.read_remaining() == b'rest'
    assert reader.position == 8
    assert reader.read_remaining() == b''
