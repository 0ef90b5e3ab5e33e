import pytest

from pipex.memory import (
    alloc_zeroed,
    mem_compare,
    mem_copy,
    mem_find,
    mem_move,
    mem_set,
    zero,
)


def test_find_first_occurrence():
    data = b"hello"
    assert mem_find(data, ord("l"), len(data)) == data.index(b"l")


def test_find_respects_limit():
    data = b"hello"
    assert mem_find(data, ord("o"), len(data) - 1) is None


def test_find_truncates_value_to_byte():
    data = b"\x01abc"
    assert mem_find(data, 0x101, len(data)) == data.index(b"\x01")


def test_find_rejects_limit_beyond_buffer():
    with pytest.raises(ValueError):
        mem_find(b"ab", 0, 3)


def test_compare_equal_prefix_is_zero():
    assert mem_compare(b"abcX", b"abcY", 3) == 0
    assert mem_compare(b"", b"", 0) == 0


def test_compare_sign_follows_order():
    assert mem_compare(b"abc", b"abd", 3) < 0
    assert mem_compare(b"abd", b"abc", 3) > 0
    assert mem_compare(b"abd", b"abc", 3) == -mem_compare(b"abc", b"abd", 3)


def test_compare_uses_unsigned_bytes():
    assert mem_compare(b"\xff", b"\x00", 1) == 255


def test_copy_writes_prefix():
    dst = bytearray(b"xxxxxx")
    result = mem_copy(dst, b"abc", 3)
    assert result is dst
    assert dst == bytearray(b"abcxxx")


def test_copy_rejects_short_source():
    with pytest.raises(ValueError):
        mem_copy(bytearray(5), b"ab", 3)


def test_move_forward_overlap():
    buf = bytearray(b"abcdef")
    mem_move(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_move_backward_overlap():
    buf = bytearray(b"abcdef")
    mem_move(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_move_rejects_out_of_range():
    with pytest.raises(ValueError):
        mem_move(bytearray(4), 2, 0, 3)


def test_set_fills_prefix_with_byte():
    buf = bytearray(b"abcdef")
    mem_set(buf, 0x141, 3)
    assert buf[:3] == bytes([0x41]) * 3
    assert buf[3:] == b"def"


def test_zero_clears_prefix():
    buf = bytearray(b"abcdef")
    assert zero(buf, 4) == bytearray(b"\x00\x00\x00\x00ef")


def test_alloc_zeroed_size_and_content():
    buf = alloc_zeroed(3, 4)
    assert len(buf) == 3 * 4
    assert not any(buf)


def test_alloc_zeroed_rejects_negative():
    with pytest.raises(ValueError):
        alloc_zeroed(-1, 4)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        mem_set(bytearray(2), 0, -1)