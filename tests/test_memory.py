import pytest

from pipex.memory import compare, copy, fill, find_byte, move, zero, zeroed


def _buffer(text: bytes, size: int) -> bytearray:
    buf = bytearray(size)
    buf[: len(text)] = text
    return buf


@pytest.mark.parametrize(
    "text, size, value, length",
    [
        (b"", 20, ord("A"), 5),
        (b"Test string...", 20, ord("X"), 4),
        (b"42School", 10, ord("Z"), 9),
        (b"", 1, ord("B"), 0),
    ],
)
def test_fill_sets_prefix_and_keeps_rest(text, size, value, length):
    buf = _buffer(text, size)
    original = bytes(buf)
    result = fill(buf, value, length)
    assert result is buf
    assert bytes(buf[:length]) == bytes([value]) * length
    assert bytes(buf[length:]) == original[length:]


def test_fill_takes_value_modulo_256():
    buf = bytearray(3)
    fill(buf, 0x141, 3)
    assert buf == bytearray(b"AAA")


def test_fill_past_end_raises():
    with pytest.raises(ValueError):
        fill(bytearray(2), 1, 3)


@pytest.mark.parametrize(
    "text, size, n",
    [
        (b"Hello, World!", 20, 3),
        (b"Test string...", 20, 5),
        (b"42School", 10, 0),
        (b"", 1, 1),
    ],
)
def test_zero(text, size, n):
    buf = _buffer(text, size)
    original = bytes(buf)
    zero(buf, n)
    assert bytes(buf) == b"\x00" * n + original[n:]


def test_copy_cases():
    buffer1 = _buffer(b"Hello, World!", 20)
    buffer2 = _buffer(b"Test string...", 20)
    copy(buffer2, buffer1, 13)
    assert bytes(buffer2[:13]) == b"Hello, World!"
    assert bytes(buffer2[13:]) == b"." + b"\x00" * 6

    buffer3 = _buffer(b"42School", 10)
    copy(buffer3, b"Libft", 5)
    assert bytes(buffer3[:8]) == b"Libftool"

    buffer4 = bytearray(10)
    result = copy(buffer4, b"42", 2)
    assert result is buffer4
    assert bytes(buffer4) == b"42" + b"\x00" * 8


def test_copy_onto_itself_leaves_buffer_unchanged():
    buf = _buffer(b"Hello, World!", 20)
    before = bytes(buf)
    copy(buf, buf, 5)
    assert bytes(buf) == before


def test_copy_too_long_raises():
    with pytest.raises(ValueError):
        copy(bytearray(2), b"abc", 3)


def test_move_forward_overlap():
    buf = _buffer(b"Pedro", 20)
    original = bytes(buf)
    move(buf, 2, 0, 3)
    assert bytes(buf[:5]) == original[:2] + original[:3]
    assert bytes(buf[5:]) == original[5:]


def test_move_backward_overlap():
    buf = bytearray(b"abcdef")
    move(buf, 0, 2, 4)
    assert bytes(buf) == b"cdefef"


def test_move_same_region_is_identity():
    buf = _buffer(b"Hello, World!", 20)
    before = bytes(buf)
    assert move(buf, 0, 0, 13) is buf
    assert bytes(buf) == before


def test_move_out_of_range_raises():
    with pytest.raises(ValueError):
        move(bytearray(5), 3, 0, 3)
    with pytest.raises(ValueError):
        move(bytearray(5), -1, 0, 1)


@pytest.mark.parametrize(
    "data, c, n",
    [
        (b"Hello, World!", ord("W"), 13),
        (b"Hello, World!", ord("z"), 13),
        (b"42 Network", ord("N"), 5),
        (b"42 Network", ord("k"), 9),
        (b"42 Network", ord("4"), 1),
    ],
)
def test_find_byte_matches_first_occurrence(data, c, n):
    expected = data[:n].find(bytes([c]))
    assert find_byte(data, c, n) == (None if expected < 0 else expected)


def test_find_byte_nul_in_terminated_buffer():
    data = b"42 Network\x00"
    assert find_byte(data, 0, len(data)) == len(data) - 1


def test_find_byte_limit_exceeding_buffer_raises():
    with pytest.raises(ValueError):
        find_byte(b"abc", ord("a"), 4)


def test_compare_equal_strings():
    assert compare(b"Hello, World!", b"Hello, World!", 13) == 0


def test_compare_difference_sign_and_symmetry():
    a, b = b"Hello, World!", b"Hello, Wxrld!"
    result = compare(a, b, 13)
    assert result < 0
    assert compare(b, a, 13) == -result


def test_compare_stops_before_difference():
    assert compare(b"Hello, World!", b"Hello, Wxrld!", 8) == 0
    assert compare(b"Hello, World!", b"Hello, Wxrld!", 0) == 0


def test_compare_is_unsigned():
    assert compare(b"\x80", b"\x01", 1) > 0


def test_compare_int_arrays():
    a = b"".join(i.to_bytes(4, "little") for i in (1, 2, 3, 4, 5))
    b = b"".join(i.to_bytes(4, "little") for i in (1, 2, 3, 4, 6))
    assert compare(a, b, 20) < 0


def test_zeroed_matches_requested_size_and_is_zero():
    buf = zeroed(10, 4)
    assert len(buf) == 40
    assert not any(buf)
    buf[0] = 1
    assert buf[0] == 1


def test_zeroed_zero_count():
    assert zeroed(0, 8) == bytearray()


def test_zeroed_negative_raises():
    with pytest.raises(ValueError):
        zeroed(-1, 4)