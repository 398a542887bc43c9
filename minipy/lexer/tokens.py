"""
Token definitions for the minipy lexer.

This module defines all token types supported by minipy, including:
- Keywords (control flow, logical operators, custom-name keywords)
- Operators (arithmetic, assignment, comparison)
- Literals (integers, floats, strings, booleans)
- Identifiers
- Punctuation, delimiters and structural markers

Author: minipy contributors
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any


class TokenType(Enum):
    """
    Enumeration of all token types in minipy.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Keywords
    # ========================================================================

    # switch/case
    SWITCH = auto()                 # switch
    CASE = auto()                   # case
    DEFAULT = auto()                # default
    BREAK = auto()                  # break

    # Control flow
    IF = auto()                     # if
    ELIF = auto()                   # elif
    ELSE = auto()                   # else
    WHILE = auto()                  # while
    FOR = auto()                    # for
    IN = auto()                     # in
    RANGE = auto()                  # range

    # Functions and classes
    DEF = auto()                    # def
    CLASS = auto()                  # class
    RETURN = auto()                 # return
    CONTINUE = auto()               # continue
    PASS = auto()                   # pass

    # ========================================================================
    # Operators
    # ========================================================================

    # Arithmetic
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /
    MODULO = auto()                 # %

    # Assignment
    ASSIGN = auto()                 # =
    PLUS_ASSIGN = auto()            # +=
    MINUS_ASSIGN = auto()           # -=
    INCREMENT = auto()              # ++
    DECREMENT = auto()              # --

    # Comparison
    EQUAL = auto()                  # ==
    NOT_EQUAL = auto()              # !=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=

    # Logical (spelled as keywords)
    AND = auto()                    # and
    OR = auto()                     # or
    NOT = auto()                    # not

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    LPAREN = auto()                 # (
    RPAREN = auto()                 # )
    LBRACE = auto()                 # {
    RBRACE = auto()                 # }
    LBRACKET = auto()               # [
    RBRACKET = auto()               # ]
    COMMA = auto()                  # ,
    COLON = auto()                  # :
    SEMICOLON = auto()              # ;
    DOT = auto()                    # .

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # x, nom, age
    INTEGER = auto()                # 10, 42
    FLOAT = auto()                  # 3.14, 0.5
    STRING = auto()                 # "hello", 'world'
    BOOLEAN = auto()                # True, False

    # ========================================================================
    # Special Tokens
    # ========================================================================
    NEWLINE = auto()                # Line break (significant)
    EOF = auto()                    # End of file
    COMMENT = auto()                # # comment (never emitted)

    # Custom-name keywords reserved by the course assignment
    CUSTOM_NAME = auto()            # BENOUADFEL
    CUSTOM_FIRSTNAME = auto()       # Yacine

    # ========================================================================
    # Error Token
    # ========================================================================
    ERROR = auto()                  # Invalid character


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and debugging information.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the minipy language.

    Contains the token type, lexeme (source text), semantic value,
    and source location of the token's first character.
    """
    type: TokenType
    lexeme: str                     # Source text (unescaped content for strings)
    value: Any                      # Parsed/semantic value (e.g., int for INTEGER)
    location: SourceLocation

    def __str__(self) -> str:
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in LITERALS

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type in KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator or delimiter."""
        return self.lexeme in SYMBOLS and self.type is SYMBOLS[self.lexeme]

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER


# Lookup tables used by the lexer for keyword and symbol recognition.
# Wrapped in MappingProxyType so they stay read-only for every Lexer.

KEYWORDS = MappingProxyType({
    # switch/case
    "switch": TokenType.SWITCH,
    "case": TokenType.CASE,
    "default": TokenType.DEFAULT,
    "break": TokenType.BREAK,

    # Control flow
    "if": TokenType.IF,
    "elif": TokenType.ELIF,
    "else": TokenType.ELSE,
    "while": TokenType.WHILE,
    "for": TokenType.FOR,
    "in": TokenType.IN,
    "range": TokenType.RANGE,

    # Functions and classes
    "def": TokenType.DEF,
    "class": TokenType.CLASS,
    "return": TokenType.RETURN,
    "continue": TokenType.CONTINUE,
    "pass": TokenType.PASS,

    # Logical operators
    "and": TokenType.AND,
    "or": TokenType.OR,
    "not": TokenType.NOT,

    # Booleans
    "True": TokenType.BOOLEAN,
    "False": TokenType.BOOLEAN,

    # Custom names
    "BENOUADFEL": TokenType.CUSTOM_NAME,
    "Yacine": TokenType.CUSTOM_FIRSTNAME,
})

SYMBOLS = MappingProxyType({
    # Arithmetic
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "%": TokenType.MODULO,

    # Assignment
    "=": TokenType.ASSIGN,
    "+=": TokenType.PLUS_ASSIGN,
    "-=": TokenType.MINUS_ASSIGN,
    "++": TokenType.INCREMENT,
    "--": TokenType.DECREMENT,

    # Comparison
    "==": TokenType.EQUAL,
    "!=": TokenType.NOT_EQUAL,
    "<": TokenType.LESS,
    "<=": TokenType.LESS_EQUAL,
    ">": TokenType.GREATER,
    ">=": TokenType.GREATER_EQUAL,

    # Punctuation
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
    ";": TokenType.SEMICOLON,
    ".": TokenType.DOT,
})

# Two-character operators keyed by their first character:
# (type when followed by '=', type when doubled, type when alone).
# None means the form does not exist; a bare '!' has no single-char form.
COMPOUND_OPERATORS = MappingProxyType({
    "+": (TokenType.PLUS_ASSIGN, TokenType.INCREMENT, TokenType.PLUS),
    "-": (TokenType.MINUS_ASSIGN, TokenType.DECREMENT, TokenType.MINUS),
    "=": (TokenType.EQUAL, None, TokenType.ASSIGN),
    "!": (TokenType.NOT_EQUAL, None, None),
    "<": (TokenType.LESS_EQUAL, None, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, None, TokenType.GREATER),
})

KEYWORD_TYPES = frozenset(
    token_type for token_type in KEYWORDS.values() if token_type != TokenType.BOOLEAN
)

LITERALS = frozenset({
    TokenType.INTEGER, TokenType.FLOAT, TokenType.STRING, TokenType.BOOLEAN,
})

# Synthetic lexeme for NEWLINE tokens (backslash + 'n', not a real line break)
NEWLINE_LEXEME = "\\n"
