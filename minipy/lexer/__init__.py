"""
minipy Lexer Package

Implements the lexical analyzer (tokenizer) for minipy, a small
Python-flavored teaching language.

Key Features:
- Keywords, operators, numbers, strings and significant newlines
- Maximal-munch identifiers with Unicode letters and digits
- Non-fatal error recovery with collected diagnostics
- Source location tracking (line/column) on every token
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, SYMBOLS
from .lexer import Lexer, tokenize_string
from .errors import Diagnostic, LexerError, ERROR_CODES

__all__ = [
    "Lexer",
    "tokenize_string",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "SYMBOLS",
    "Diagnostic",
    "LexerError",
    "ERROR_CODES",
]
