import pytest

from radarsim.textutil import (
    capitalize,
    compare,
    compare_casefold,
    compare_n,
    find,
    get_number,
    is_alpha,
    is_lower,
    is_num,
    is_printable,
    is_upper,
    lowcase,
    reverse,
    split_words,
    upcase,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("-42", -42),
        ("--42", 42),
        ("abc12", 12),
        ("12a34", 12),
        ("", 0),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
        ("2147483648", 0),
    ],
)
def test_get_number(text, expected):
    assert get_number(text) == expected


def test_get_number_reads_script_fields():
    assert [get_number(word) for word in split_words("A 100 200 300")] == [0, 100, 200, 300]


def test_split_words_basic():
    assert split_words("A 1 2\t3\n4") == ["A", "1", "2", "3", "4"]


def test_split_words_skips_runs_of_whitespace():
    assert split_words("  T   5\t\t6") == ["T", "5", "6"]


def test_split_words_trailing_whitespace_leaves_empty_word():
    words = split_words("A 1\n")
    assert words[:-1] == ["A", "1"]
    assert words[-1] == ""


def test_split_words_empty():
    assert split_words("") == []


def test_split_words_round_trip():
    words = ["A", "815", "-3", "xyz"]
    assert split_words(" ".join(words)) == words


@pytest.mark.parametrize("a, b", [("abc", "abd"), ("ab", "abc"), ("", "a"), ("Z", "a")])
def test_compare_orders_and_is_antisymmetric(a, b):
    assert compare(a, b) < 0
    assert compare(b, a) > 0
    assert compare(a, b) == -compare(b, a)


def test_compare_equal():
    assert compare("radar", "radar") == 0


def test_compare_n_goes_past_n_while_both_continue():
    assert compare_n("abcX", "abcY", 2) < 0


def test_compare_n_stops_after_n_when_one_ends():
    assert compare_n("ab", "abc", 2) == 0


def test_compare_n_within_n_sees_shorter_string():
    assert compare_n("ab", "abc", 5) < 0
    assert compare_n("abc", "ab", 5) > 0


def test_compare_n_equal_strings():
    assert compare_n("same", "same", 10) == 0


def test_compare_casefold_ignores_case():
    assert compare_casefold("Hello", "hELLO") == 0


def test_compare_casefold_ignores_leading_dot():
    assert compare_casefold(".bashrc", "Bashrc") == 0


def test_compare_casefold_orders():
    assert compare_casefold("apple", "Banana") < 0
    assert compare_casefold("Banana", "apple") > 0


def test_capitalize_worked_example():
    text = "hey, how are you? 42WORds forty-two; fifty+one"
    assert capitalize(text) == "Hey, How Are You? 42words Forty-Two; Fifty+One"


def test_capitalize_is_idempotent():
    once = capitalize("the QUICK brown fox")
    assert capitalize(once) == once


def test_capitalize_keeps_length():
    text = "some-words here 9lives"
    assert len(capitalize(text)) == len(text)


def test_reverse_round_trip():
    text = "my radar"
    assert reverse(reverse(text)) == text
    assert reverse(text)[0] == text[-1]


def test_find_returns_suffix():
    assert find("hello world", "world") == "world"
    assert find("abcabc", "ca") == "cabc"


def test_find_empty_needle():
    assert find("abc", "") == "abc"


@pytest.mark.parametrize("haystack, needle", [("", ""), ("ab", "abc"), ("abc", "x")])
def test_find_no_match(haystack, needle):
    assert find(haystack, needle) is None


def test_find_result_starts_with_needle():
    haystack = "one two three two"
    result = find(haystack, "two")
    assert result.startswith("two")
    assert haystack.endswith(result)


def test_character_class_predicates():
    assert is_alpha("Radar") is True
    assert is_alpha("R4dar") is False
    assert is_num("0123") is True
    assert is_num("12a") is False
    assert is_lower("abc") is True
    assert is_lower("aBc") is False
    assert is_upper("ABC") is True
    assert is_upper("ABc") is False
    assert is_printable("hello world!") is True
    assert is_printable("tab\there") is False


def test_predicates_accept_empty_string():
    assert all(check("") for check in (is_alpha, is_num, is_lower, is_upper, is_printable))


def test_upcase_and_lowcase():
    assert upcase("abc") == "ABC"
    assert lowcase(upcase("MiXeD 42")) == lowcase("MiXeD 42")
    assert upcase("é") == "é"