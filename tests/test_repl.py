"""Tests for ConfRepl."""

from confindent import ConfRepl, Empty, Text


# ---------------------------------------------------------------------------
# ConfRepl.feed() / lookup() basics
# ---------------------------------------------------------------------------

def test_feed_single_line():
    repl = ConfRepl()
    repl.feed("Host example.com")
    assert repl.doc.child("Host").value == Text("example.com")


def test_lookup_path():
    repl = ConfRepl()
    repl.feed("Host example.com\n\tUsername user")
    assert repl.lookup("Host Username").get() == "user"


def test_lookup_missing_returns_none():
    repl = ConfRepl()
    repl.feed("Host example.com")
    assert repl.lookup("Host Password") is None
    assert repl.lookup("") is None


def test_lookup_empty_value():
    repl = ConfRepl()
    repl.feed("Flag")
    assert repl.lookup("Flag").value is Empty


# ---------------------------------------------------------------------------
# State accumulation across multiple feed() calls
# ---------------------------------------------------------------------------

def test_indentation_carries_across_feeds():
    repl = ConfRepl()
    repl.feed("Host example.com")
    repl.feed("\tUsername user")
    repl.feed("\tPassword pass")
    assert list(repl.doc.child("Host").keys()) == ["Username", "Password"]


def test_new_top_level_closes_previous():
    repl = ConfRepl()
    repl.feed("A 1")
    repl.feed("B 2")
    repl.feed("\tC 3")
    assert repl.doc.child("A").children == {}
    assert repl.lookup("B C").get() == "3"


def test_overwrite_across_feeds():
    repl = ConfRepl()
    repl.feed("A 1\n\tB 2")
    repl.feed("A 3")
    assert repl.doc.child("A").get() == "3"
    assert repl.doc.child("A").children == {}


def test_keep_remainder_option():
    repl = ConfRepl(keep_remainder=True)
    repl.feed("Motd Hello there")
    assert repl.lookup("Motd").get() == "Hello there"


# ---------------------------------------------------------------------------
# reset()
# ---------------------------------------------------------------------------

def test_reset_clears_document():
    repl = ConfRepl()
    repl.feed("A 1\n\tB 2")
    repl.reset()
    assert len(repl.doc) == 0


def test_reset_closes_open_sections():
    repl = ConfRepl()
    repl.feed("A 1")
    repl.reset()
    repl.feed("X 1")
    repl.feed("\tY 2")
    assert "A" not in repl.doc
    assert repl.lookup("X Y").get() == "2"
