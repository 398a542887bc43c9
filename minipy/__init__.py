"""
minipy Package

Front end for minipy, a small Python-flavored teaching language.

Architecture:
    minipy/
    └── lexer/           # Tokenization and lexical analysis

License: MIT
"""

import logging

__version__ = "0.1.0"
__license__ = "MIT"

# Library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .lexer import Lexer, Token, TokenType, LexerError, tokenize_string

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "LexerError",
    "tokenize_string",

    # Version info
    "__version__",
    "__license__",
]
