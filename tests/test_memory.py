import pytest

from solong.memory import calloc, copy, fill, move, zero


def test_zero_clears_prefix_only():
    buf = bytearray(b"abcd")
    result = zero(buf, 2)
    assert result is buf
    assert buf[:2] == bytes(2)
    assert buf[2:] == b"cd"


def test_zero_with_no_bytes_keeps_buffer():
    buf = bytearray(b"xyz")
    zero(buf, 0)
    assert buf == bytearray(b"xyz")


def test_zero_rejects_too_large_count():
    with pytest.raises(ValueError):
        zero(bytearray(2), 3)


def test_calloc_is_zero_filled_with_product_length():
    buf = calloc(4, 3)
    assert len(buf) == 4 * 3
    assert not any(buf)


def test_calloc_of_nothing_is_empty():
    assert calloc(0, 8) == bytearray()


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_fill_sets_value():
    buf = bytearray(5)
    fill(buf, ord("A"), 3)
    assert buf == bytearray(b"AAA\x00\x00")


def test_fill_wraps_value_to_a_byte():
    buf = bytearray(2)
    fill(buf, 256 + 7, 2)
    assert list(buf) == [7, 7]


def test_fill_negative_count_rejected():
    with pytest.raises(ValueError):
        fill(bytearray(2), 1, -1)


def test_copy_copies_prefix():
    dst = bytearray(b"......")
    copy(dst, b"hello!", 5)
    assert dst == bytearray(b"hello.")


def test_copy_same_buffer_is_unchanged():
    buf = bytearray(b"same")
    assert copy(buf, buf, 4) == bytearray(b"same")


def test_copy_rejects_short_source():
    with pytest.raises(ValueError):
        copy(bytearray(4), b"ab", 4)


def test_move_forward_overlap():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    result = move(view[2:], view[:4], 4)
    assert bytes(result) == b"abcd"
    assert buf == bytearray(b"ababcd")


def test_move_backward_overlap():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    result = move(view[:4], view[2:], 4)
    assert bytes(result) == b"cdef"
    assert buf == bytearray(b"cdefef")


def test_move_matches_copy_for_separate_buffers():
    source = b"0123456789"
    a = move(bytearray(10), source, 10)
    b = copy(bytearray(10), source, 10)
    assert a == b == bytearray(source)