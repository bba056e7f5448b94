import pytest
from pathlib import Path
import sys

# Add repo root to path
ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from complex_stats.parser import classify_token, parse_token, split_and_parse, split_tokens


@pytest.mark.parametrize("s", ["0", "3", "-7", "1.5", ".25", "-.5", "0012", "123456.789"])
def test_pure_real_matches_float(s):
    assert parse_token(s) == complex(float(s), 0.0)


@pytest.mark.parametrize(
    "s, expected",
    [
        ("i", 1j),
        ("-i", -1j),
        ("3+i", 3 + 1j),
        ("3-i", 3 - 1j),
        ("2-3i", 2 - 3j),
        ("1+2i", 1 + 2j),
        ("1.5-0.5i", 1.5 - 0.5j),
        ("-1.5+2.25i", -1.5 + 2.25j),
        ("6i", 6j),
        ("-0.5i", -0.5j),
        ("5+0i", 5 + 0j),
        ("0", 0j),
    ],
)
def test_known_literals(s, expected):
    assert parse_token(s) == expected


@pytest.mark.parametrize("s", ["abc", "", "1+", "i2", "1e5", "2j", "1++2i", "--1", "1.2.3", "+5", "1+2i3"])
def test_rejects_non_literals(s):
    assert parse_token(s) is None


def test_whole_token_must_match():
    """Patterns are anchored: a valid literal inside junk is not accepted."""
    assert parse_token("x1+2i") is None
    assert parse_token("1+2ix") is None


def test_inner_whitespace_ignored():
    assert parse_token(" 1 + 2 i ") == 1 + 2j
    assert parse_token("- i") == -1j


def test_classify_reports_grammar():
    assert classify_token("4").kind == "real"
    assert classify_token("4i").kind == "imaginary"
    assert classify_token("i").kind == "imaginary"
    assert classify_token("4-2i").kind == "binomial"
    assert classify_token("four") == ("unrecognized", None)


def test_real_takes_priority():
    """'5' is real, never read as a binomial or imaginary."""
    token = classify_token("5")
    assert token.kind == "real"
    assert token.value == 5 + 0j


def test_trailing_dot_imaginary():
    assert parse_token("1.i") == 1j
    assert parse_token("3+2.i") == 3 + 2j


@pytest.mark.parametrize("s", [".i", "-.i", "3+.i", "3-.i"])
def test_dot_only_fragments_rejected(s):
    """A lone '.' is not a number, so these never produce NaN."""
    assert parse_token(s) is None


def test_overflow_rejected():
    assert parse_token("9" * 400) is None
    assert parse_token("1+" + "9" * 400 + "i") is None


def test_non_ascii_digits_rejected():
    # Arabic-Indic digits
    assert parse_token("١٢") is None


def test_split_and_parse_order():
    assert split_and_parse("1+2i, 3-4i\n5+0i") == [1 + 2j, 3 - 4j, 5 + 0j]


def test_split_and_parse_drops_bad_tokens():
    text = "1+2i, oops, 3\n\n  \nnope 4i,,, -i"
    assert split_and_parse(text) == [1 + 2j, 3 + 0j, 4j, -1j]


def test_split_and_parse_empty():
    assert split_and_parse("") == []
    assert split_and_parse("   \n\n\t") == []
    assert split_and_parse("a, b, c") == []


def test_spaced_operator_splits_tokens():
    """'1 + 2i' is three tokens; the lone '+' is dropped."""
    assert split_and_parse("1 + 2i") == [1 + 0j, 2j]


def test_split_tokens():
    assert split_tokens("a, b\tc\r\n\n d,") == ["a", "b", "c", "d"]


def test_split_and_parse_deterministic():
    text = "1, 2i, 3-3i\n-4+.5i, i"
    assert split_and_parse(text) == split_and_parse(text)
