"""LR(1) and LALR(1) parse table construction with JSON output."""

__version__ = "1.0.0"

__all__ = ["grammar", "items", "tables", "json_generator", "grammar_syntax"]