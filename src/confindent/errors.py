"""Custom exceptions for confindent."""


class ConfindentError(Exception):
    """Base exception for confindent operations."""


class DuplicateKeyError(ConfindentError, KeyError):
    """Strict insert of a key that already exists."""


class IndentError(ConfindentError, ValueError):
    """Indentation unit the reader would not accept back."""
