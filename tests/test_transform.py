import pytest

from solong.transform import (
    concat_bounded,
    copy_bounded,
    for_each_indexed,
    join,
    map_indexed,
    split,
    substring,
    trim,
)


@pytest.mark.parametrize(
    "text, sep, expected",
    [
        ("a,b", ",", ["a", "b"]),
        (",,hello,,world,", ",", ["hello", "world"]),
        ("", ",", []),
        (",,,", ",", []),
        ("single", ",", ["single"]),
    ],
)
def test_split(text, sep, expected):
    assert split(text, sep) == expected


def test_split_pieces_never_contain_separator():
    pieces = split("  one two   three ", " ")
    assert all(piece and " " not in piece for piece in pieces)
    assert "".join(pieces) == "onetwothree"


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_substring_basic():
    assert substring("hello world", 6, 5) == "world"


def test_substring_length_beyond_end():
    assert substring("hello", 2, 100) == "llo"


def test_substring_start_past_end_is_empty():
    assert substring("hello", 10, 3) == ""


def test_substring_negative_raises():
    with pytest.raises(ValueError):
        substring("hello", -1, 2)


def test_trim_both_ends():
    assert trim("xxhixx", "x") == "hi"


def test_trim_keeps_inner_characters():
    assert trim("xaxbx", "x") == "axb"


def test_trim_everything():
    assert trim("abcabc", "abc") == ""


def test_trim_empty_set_leaves_text():
    assert trim("  padded  ", "") == "  padded  "


def test_join_round_trip():
    joined = join("so ", "long")
    assert joined.startswith("so ")
    assert joined[len("so "):] == "long"


def test_map_indexed_upper_on_even():
    result = map_indexed("abcd", lambda i, c: c.upper() if i % 2 == 0 else c)
    assert result == "AbCd"


def test_map_indexed_identity():
    assert map_indexed("so long", lambda i, c: c) == "so long"


def test_for_each_indexed_in_place():
    chars = list("abc")
    returned = for_each_indexed(chars, lambda i, c: c.upper() if i == 1 else None)
    assert returned is chars
    assert chars == ["a", "B", "c"]


def test_for_each_indexed_sees_indices():
    seen = []
    for_each_indexed(list("xyz"), lambda i, c: seen.append((i, c)))
    assert seen == [(0, "x"), (1, "y"), (2, "z")]


def test_copy_bounded_fits():
    assert copy_bounded("hello", 10) == ("hello", 5)


def test_copy_bounded_truncates():
    copied, length = copy_bounded("hello", 3)
    assert copied == "he"
    assert length == len("hello")


def test_copy_bounded_zero_size():
    assert copy_bounded("hello", 0) == ("", 5)


def test_concat_bounded_fits():
    assert concat_bounded("so ", "long", 20) == ("so long", 7)


def test_concat_bounded_truncates():
    result, length = concat_bounded("ab", "cdef", 4)
    assert result == "abc"
    assert length == len("ab") + len("cdef")


def test_concat_bounded_size_not_above_dst():
    assert concat_bounded("abcd", "xy", 3) == ("abcd", 5)


def test_concat_bounded_zero_size():
    assert concat_bounded("abc", "xy", 0) == ("abc", 2)


def test_bounded_negative_size_raises():
    with pytest.raises(ValueError):
        copy_bounded("a", -1)
    with pytest.raises(ValueError):
        concat_bounded("a", "b", -1)