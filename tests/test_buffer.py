import struct

import pytest

from c78engine.buffer import Buffer, ScopedBuffer


def test_default_buffer_is_empty():
    buf = Buffer()
    assert not buf
    assert buf.size == 0


def test_allocated_buffer_has_size():
    buf = Buffer(8)
    assert buf
    assert buf.size == 8


def test_clear_fills_every_element():
    buf = Buffer(16)
    buf.clear("<f", 1.5)
    count = buf.size // struct.calcsize("<f")
    assert [buf.at("<f", i) for i in range(count)] == [1.5] * count


def test_clear_rejects_mismatched_size():
    with pytest.raises(ValueError):
        Buffer(6).clear("<I", 1)


def test_at_out_of_bounds():
    buf = Buffer(8)
    with pytest.raises(IndexError):
        buf.at("<I", 2)
    with pytest.raises(IndexError):
        buf.at("<I", -1)


def test_at_on_released_buffer():
    buf = Buffer(4)
    buf.release()
    with pytest.raises(IndexError):
        buf.at("<I", 0)


def test_set_and_at_round_trip():
    buf = Buffer(12)
    buf.set("<i", 1, -42)
    assert buf.at("<i", 1) == -42
    assert buf.at("<i", 0) == 0


def test_set_writes_little_endian_bytes():
    buf = Buffer(4)
    buf.set("<I", 0, 0x01020304)
    assert bytes(buf.data) == b"\x04\x03\x02\x01"


def test_copy_is_independent():
    original = Buffer(4)
    original.clear("<B", 7)
    duplicate = original.copy()
    duplicate.set("<B", 0, 9)
    assert original.at("<B", 0) == 7
    assert duplicate.at("<B", 0) == 9
    assert duplicate.size == original.size


def test_release_empties():
    buf = Buffer(10)
    buf.release()
    assert not buf
    assert buf.size == 0


def test_allocate_replaces_contents():
    buf = Buffer(4)
    buf.clear("<B", 5)
    buf.allocate(2)
    assert buf.size == 2
    assert bytes(buf.data) == bytes(2)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Buffer(-1)


def test_scoped_buffer_released_on_exit():
    with ScopedBuffer(8) as buf:
        buf.clear("<H", 3)
        assert buf.at("<H", 3) == 3
        assert buf
    assert not buf
    assert buf.size == 0


def test_scoped_buffer_copy_keeps_type():
    with ScopedBuffer(2) as buf:
        duplicate = buf.copy()
    assert isinstance(duplicate, ScopedBuffer)
    assert duplicate.size == 2