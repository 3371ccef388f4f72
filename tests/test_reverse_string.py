import pytest

from katas.reverse_string import reverse_string


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", ""),
        ("robot", "tobor"),
        ("Ramen", "nemaR"),
        ("I'm hungry!", "!yrgnuh m'I"),
        ("racecar", "racecar"),
    ],
)
def test_reverse(text, expected):
    assert reverse_string(text) == expected


@pytest.mark.parametrize("text", ["abc", "hello world", "x"])
def test_reversing_twice_restores(text):
    assert reverse_string(reverse_string(text)) == text