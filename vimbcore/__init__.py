"""Core logic of a vim-like web browser: ex command parsing, autocommands, bookmarks, hints, handlers and response headers."""

__version__ = "2.10.0"

__all__ = ["arh", "autocmd", "bookmark", "command", "ex_parse", "handlers", "hints"]