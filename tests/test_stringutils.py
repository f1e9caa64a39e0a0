import pytest

from hwreport.stringutils import (
    count_substring,
    get_value,
    split,
    split_get_index,
    split_terminated,
    strip,
)


def test_strip_removes_spaces_tabs_newlines():
    assert strip(" \tabc def\n ") == "abc def"


def test_strip_only_whitespace_gives_empty():
    assert strip(" \t\n\n ") == ""


def test_strip_keeps_other_whitespace():
    assert strip("\rabc\r") == "\rabc\r"


def test_strip_single_character():
    assert strip("x") == "x"
    assert strip("\t") == ""


def test_count_substring_non_overlapping():
    assert count_substring("aaaa", "aa") == 2


def test_count_substring_absent():
    assert count_substring("hello", "xyz") == 0


def test_count_substring_empty_raises():
    with pytest.raises(ValueError):
        count_substring("abc", "")


def test_split_on_double_space():
    assert split("1234  Example Vendor", "  ") == ["1234", "Example Vendor"]


def test_split_without_delimiter():
    assert split("abc", "x") == ["abc"]


def test_split_keeps_trailing_piece():
    assert split("a:b:", ":") == ["a", "b", ""]


@pytest.mark.parametrize("text", ["", "a", "a::b", "::", "x::y::z::"])
def test_split_round_trip(text):
    assert "::".join(split(text, "::")) == text


def test_split_empty_delimiter_raises():
    with pytest.raises(ValueError):
        split("abc", "")


def test_split_terminated_drops_unterminated_tail():
    assert split_terminated("a\nb", "\n") == ["a"]


def test_split_terminated_all_terminated():
    assert split_terminated("a\nb\n", "\n") == ["a", "b"]


def test_split_terminated_no_delimiter():
    assert split_terminated("no delimiter", "\n") == []


@pytest.mark.parametrize(
    "index,expected",
    [(0, "a"), (1, "b"), (2, "c"), (-1, "c"), (-3, "a"), (3, ""), (-4, "")],
)
def test_split_get_index(index, expected):
    assert split_get_index("a,b,c", ",", index) == expected


def test_split_get_index_matches_split():
    text = "x--y--z"
    pieces = split(text, "--")
    assert [split_get_index(text, "--", i) for i in range(len(pieces))] == pieces


def test_get_value_in_range():
    assert get_value(["x", "y"], 1, "<unknown>") == "y"


def test_get_value_out_of_range():
    assert get_value([1, 2], 2, -1) == -1
    assert get_value([1, 2], 5, -1) == -1


def test_get_value_negative_index_is_out_of_range():
    assert get_value(["x"], -1, "<unknown>") == "<unknown>"