"""Helpers for a small interactive shell: characters, strings, formatted output, line reading, here-documents and redirections."""

__version__ = "0.1.0"

__all__ = ["chars", "text", "output", "linereader", "heredoc", "redirections"]