"""Tests for the Reader layer."""

import pytest

from confindent.reader import LineEvent, measure_indent, parse_line, read_lines
from confindent.values import Empty, Text


# ---------------------------------------------------------------------------
# measure_indent
# ---------------------------------------------------------------------------

def test_measure_indent_none():
    assert measure_indent("Key Value") == (0, "Key Value")

def test_measure_indent_tab():
    assert measure_indent("\tKey") == (1, "Key")

def test_measure_indent_space_pair():
    assert measure_indent("  Key") == (1, "Key")

def test_measure_indent_mixed_units():
    assert measure_indent("\t  \tKey") == (3, "Key")

def test_measure_indent_odd_space_rounds_down():
    assert measure_indent("   Key") == (1, " Key")

def test_measure_indent_single_space():
    assert measure_indent(" Key") == (0, " Key")


# ---------------------------------------------------------------------------
# parse_line
# ---------------------------------------------------------------------------

def test_parse_line_empty():
    assert parse_line("") is None

def test_parse_line_only_indent():
    assert parse_line("\t") is None

def test_parse_line_whitespace():
    assert parse_line("   \t ") is None

def test_parse_line_no_indent():
    assert parse_line("Key Value") == LineEvent("Key", 0, Text("Value"))

def test_parse_line_indent():
    assert parse_line("\tKey Value") == LineEvent("Key", 1, Text("Value"))

def test_parse_line_key_only():
    event = parse_line("\t\tKey")
    assert event.key == "Key"
    assert event.depth == 2
    assert event.value is Empty

def test_parse_line_trailing_space_is_empty():
    assert parse_line("Key ").value is Empty

def test_parse_line_whitespace_runs():
    assert parse_line("Key \t  Value") == LineEvent("Key", 0, Text("Value"))

def test_parse_line_extra_tokens_dropped():
    assert parse_line("Key one two three").value == Text("one")

def test_parse_line_keep_remainder():
    event = parse_line("\tKey one  two three ", keep_remainder=True)
    assert event == LineEvent("Key", 1, Text("one  two three"))

def test_parse_line_keep_remainder_key_only():
    assert parse_line("Key   ", keep_remainder=True).value is Empty

def test_parse_line_odd_indent_space_before_key():
    event = parse_line("   Key Value")
    assert event.depth == 1
    assert event.key == "Key"


# ---------------------------------------------------------------------------
# read_lines
# ---------------------------------------------------------------------------

def test_read_lines_empty():
    assert list(read_lines("")) == []

def test_read_lines_blank_only():
    assert list(read_lines("   \n\n\t\n")) == []

def test_read_lines_order_and_depths():
    events = list(read_lines("A 1\n\tB 2\n\n\t\tC\nD 4"))
    assert [(e.key, e.depth) for e in events] == [
        ("A", 0), ("B", 1), ("C", 2), ("D", 0),
    ]
    assert events[2].value is Empty

def test_read_lines_crlf():
    events = list(read_lines("A 1\r\n\tB 2\r\n"))
    assert events == [LineEvent("A", 0, Text("1")), LineEvent("B", 1, Text("2"))]

@pytest.mark.parametrize("text", ["Key Value", "Key Value\n", "\nKey Value\n\n"])
def test_read_lines_single(text):
    assert list(read_lines(text)) == [LineEvent("Key", 0, Text("Value"))]
