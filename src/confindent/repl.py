"""ConfRepl: incremental configuration shell.

Also provides the ``confindent-repl`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import sys
from typing import IO

from . import config
from .builder import TreeBuilder
from .document import Document
from .section import Section
from .values import _Empty


# ---------------------------------------------------------------------------
# ConfRepl class (notebook / programmatic use)
# ---------------------------------------------------------------------------

class ConfRepl:
    """Stateful shell that accumulates configuration lines across calls.

    Indentation carries over between calls, so a section can be opened in
    one call and filled in the next::

        repl = ConfRepl()
        repl.feed("Host example.com")
        repl.feed("\\tUsername user")
        repl.lookup("Host Username")   # → Section(Text("user"), 1)

        repl.doc           # the accumulated Document
        repl.reset()       # clear state
    """

    def __init__(self, *, keep_remainder: bool = False) -> None:
        self.keep_remainder = keep_remainder
        self._builder = TreeBuilder()

    @property
    def doc(self) -> Document:
        return self._builder.document

    def feed(self, text: str) -> None:
        """Parse *text* and attach it after everything fed so far."""
        self._builder.feed_text(text, keep_remainder=self.keep_remainder)

    def lookup(self, path: str) -> Section | None:
        """Resolve a whitespace-separated key path such as ``"Host Username"``."""
        return self.doc.find(*path.split())

    def reset(self) -> None:
        """Clear the accumulated document."""
        self._builder.reset()


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _fmt_section(section: Section | None) -> str:
    """Format a looked-up section for one-line display."""
    if section is None:
        return "(not found)"
    if isinstance(section.value, _Empty):
        value = "(empty)"
    else:
        value = f'"{section.value}"'
    if section.children:
        return f"{value}  [{', '.join(section.children)}]"
    return value


def _show_keys(repl: ConfRepl, dest: IO[str]) -> None:
    """Print the top-level keys with their values."""
    if not repl.doc:
        print("  (no sections defined)", file=dest)
        return
    width = max(len(k) for k in repl.doc.keys())
    for key, section in repl.doc.items():
        print(f"  {key:<{width}} : {_fmt_section(section)}", file=dest)


def _dump(repl: ConfRepl, dest: IO[str]) -> None:
    text = str(repl.doc)
    if text:
        print(text, file=dest)


def _feed_file(repl: ConfRepl, filepath: str, dest: IO[str]) -> None:
    try:
        with open(filepath, encoding=config.CONFINDENT_ENCODING) as fh:
            for file_line in fh:
                _process_line(repl, file_line.rstrip("\n"), dest)
    except OSError as exc:
        print(f"Error reading '{filepath}': {exc}", file=sys.stderr)


def _write_file(repl: ConfRepl, filepath: str) -> None:
    try:
        repl.doc.to_file(filepath)
    except OSError as exc:
        print(f"Error writing '{filepath}': {exc}", file=sys.stderr)


def _process_line(repl: ConfRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    command = line.strip()
    if not command:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if command in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if command == ":keys":
        _show_keys(repl, dest)
        return True

    if command == ":dump":
        _dump(repl, dest)
        return True

    if command == ":reset":
        repl.reset()
        return True

    # ── ? key path ────────────────────────────────────────────────────────
    if command.startswith("? "):
        print(_fmt_section(repl.lookup(command[2:])), file=dest)
        return True

    # ── Batch file / write-out ────────────────────────────────────────────
    if command.startswith("?<< "):
        _feed_file(repl, command[4:].strip(), dest)
        return True

    if command.startswith("?>> "):
        _write_file(repl, command[4:].strip())
        return True

    # ── Configuration text (indentation is significant) ──────────────────
    repl.feed(line)
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    """Interactive shell (``confindent-repl`` / ``python -m confindent.repl``)."""
    repl = ConfRepl()

    print("confindent  (:q to quit  |  :keys  :dump  :reset  |  ? <key path>  ?<< <file>  ?>> <file>)")

    for path in sys.argv[1:] if argv is None else argv:
        _feed_file(repl, path, sys.stdout)

    while True:
        try:
            line = input("conf> ")
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        if not _process_line(repl, line, sys.stdout):
            break


if __name__ == "__main__":
    main()
