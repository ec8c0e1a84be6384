"""Tests for confindent.values."""

from confindent.values import Empty, Text, _Empty, to_scalar


class TestEmpty:
    def test_singleton(self):
        assert Empty is _Empty()

    def test_falsy(self):
        assert not Empty

    def test_repr(self):
        assert repr(Empty) == "Empty"

    def test_str_is_blank(self):
        assert str(Empty) == ""


class TestText:
    def test_value(self):
        assert Text("hello").value == "hello"

    def test_str(self):
        assert str(Text("hello")) == "hello"

    def test_equality(self):
        assert Text("a") == Text("a")
        assert Text("a") != Text("b")

    def test_empty_string_is_still_text(self):
        assert Text("") != Empty


class TestToScalar:
    def test_none_is_empty(self):
        assert to_scalar(None) is Empty

    def test_string(self):
        assert to_scalar("x") == Text("x")

    def test_number_is_stringified(self):
        assert to_scalar(42) == Text("42")
