"""
minipy Lexer - turns source text into a flat list of tokens

Single pass over the input with one character of lookahead. Lexical errors
(invalid characters, unterminated strings) are recorded as diagnostics and
scanning carries on, so a pass always reaches the end of the input.
"""

import logging
from typing import List

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, SYMBOLS, COMPOUND_OPERATORS,
    NEWLINE_LEXEME
)
from .errors import (
    LexerError, create_invalid_character_error, create_unterminated_string_error
)

logger = logging.getLogger(__name__)

# Returned by _peek() past the end of the input
END_OF_INPUT = '\0'

WHITESPACE = (' ', '\t', '\r')


class Lexer:
    """
    minipy lexical analyzer.

    Converts source code text into a list of tokens ending with EOF.
    Comments are dropped; newlines are kept as NEWLINE tokens.
    Create one Lexer per input.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string, already decoded
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens, without comments, ending with one EOF token
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        # Fresh lists so results from an earlier pass stay untouched
        self.tokens = []
        self.errors = []

        logger.debug("Tokenizing %s (%d characters)", self.filename, len(self.source))

        while True:
            self._skip_whitespace()

            if self._at_end():
                break

            token = self._next_token()

            if token.type == TokenType.ERROR:
                self._report(create_invalid_character_error(token.lexeme, token.location))

            if token.type != TokenType.COMMENT:
                self.tokens.append(token)

        # Add EOF token
        self.tokens.append(Token(TokenType.EOF, "", None, self._location()))

        logger.debug(
            "Tokenized %s: %d tokens, %d errors",
            self.filename, len(self.tokens), len(self.errors)
        )
        return self.tokens

    def _next_token(self) -> Token:
        """Scan one token starting at the current (non-whitespace) character."""
        start = self._location()
        current_char = self.source[self.pos]

        # Comments (# ...)
        if current_char == '#':
            return self._tokenize_comment(start)

        # Identifiers and keywords
        if self._is_identifier_start(current_char):
            return self._tokenize_identifier_or_keyword(start)

        # Numbers (10, 3.14)
        if current_char.isdecimal():
            return self._tokenize_number(start)

        # String literals ("hello", 'world')
        if current_char in ('"', "'"):
            return self._tokenize_string(current_char, start)

        # Operators, punctuation, newlines and anything unrecognized
        return self._tokenize_operator(start)

    def _tokenize_identifier_or_keyword(self, start: SourceLocation) -> Token:
        """Tokenize the longest run of identifier characters."""
        start_pos = self.pos

        while not self._at_end() and self._is_identifier_continue(self.source[self.pos]):
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        token_type = KEYWORDS.get(lexeme, TokenType.IDENTIFIER)

        if token_type == TokenType.BOOLEAN:
            value = lexeme == "True"
        elif token_type == TokenType.IDENTIFIER:
            value = lexeme
        else:
            value = None

        return Token(token_type, lexeme, value, start)

    def _tokenize_number(self, start: SourceLocation) -> Token:
        """
        Tokenize an integer or float literal.

        A single '.' makes the literal a float; a second '.' ends it.
        Signs and exponents are not part of numeric literals.
        """
        start_pos = self.pos
        is_float = False

        while not self._at_end():
            char = self.source[self.pos]
            if char.isdecimal():
                self._advance()
            elif char == '.' and not is_float:
                is_float = True
                self._advance()
            else:
                break

        lexeme = self.source[start_pos:self.pos]

        if is_float:
            return Token(TokenType.FLOAT, lexeme, float(lexeme), start)

        try:
            value = int(lexeme)
        except ValueError:
            # Past the interpreter's int/str digit limit; the lexeme is still valid
            value = None
        return Token(TokenType.INTEGER, lexeme, value, start)

    def _tokenize_string(self, quote: str, start: SourceLocation) -> Token:
        """
        Tokenize a string literal closed by the same quote that opened it.

        A backslash keeps the following character as-is ('\\n' gives 'n').
        An unterminated string is reported but still produces a STRING token.
        """
        self._advance()  # Skip opening quote

        value_parts = []

        while not self._at_end() and self.source[self.pos] != quote:
            if self.source[self.pos] == '\\' and self.pos + 1 < len(self.source):
                self._advance()  # Skip backslash
            value_parts.append(self._advance())

        if self._at_end():
            self._report(create_unterminated_string_error(quote, start))
        else:
            self._advance()  # Skip closing quote

        value = ''.join(value_parts)
        return Token(TokenType.STRING, value, value, start)

    def _tokenize_comment(self, start: SourceLocation) -> Token:
        """Tokenize from '#' up to, not including, the end of the line."""
        start_pos = self.pos

        while not self._at_end() and self.source[self.pos] != '\n':
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        return Token(TokenType.COMMENT, lexeme, None, start)

    def _tokenize_operator(self, start: SourceLocation) -> Token:
        """Tokenize an operator, delimiter or newline; anything else is an ERROR token."""
        char = self._advance()

        if char == '\n':
            return Token(TokenType.NEWLINE, NEWLINE_LEXEME, None, start)

        if char in COMPOUND_OPERATORS:
            with_equal, doubled, single = COMPOUND_OPERATORS[char]
            # The first character is consumed, so _peek() sees the one after it
            next_char = self._peek()

            if next_char == '=':
                self._advance()
                return Token(with_equal, char + '=', None, start)

            if doubled is not None and next_char == char:
                self._advance()
                return Token(doubled, char * 2, None, start)

            if single is None:
                return Token(TokenType.ERROR, char, None, start)
            return Token(single, char, None, start)

        token_type = SYMBOLS.get(char)
        if token_type is None:
            return Token(TokenType.ERROR, char, None, start)

        return Token(token_type, char, None, start)

    def _is_identifier_start(self, char: str) -> bool:
        """Check if character can start an identifier."""
        return char.isalpha() or char == '_'

    def _is_identifier_continue(self, char: str) -> bool:
        """Check if character can continue an identifier."""
        return char.isalpha() or char.isdecimal() or char == '_'

    def _skip_whitespace(self):
        """Skip spaces, tabs and carriage returns. Newlines are tokens."""
        while not self._at_end() and self.source[self.pos] in WHITESPACE:
            self._advance()

    def _advance(self) -> str:
        """Consume one character, updating line/column, and return it."""
        char = self.source[self.pos]
        self.pos += 1
        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def _peek(self, offset: int = 0) -> str:
        """Character `offset` places past the cursor, or END_OF_INPUT."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return END_OF_INPUT

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _report(self, error: LexerError):
        """Record a lexical error without interrupting the scan."""
        self.errors.append(error)
        logger.debug("%s: %s", self.filename, error)

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0

    def get_errors(self) -> List[str]:
        """Formatted error messages, in the order they were found."""
        return [str(error) for error in self.errors]

    def get_diagnostics(self) -> List[LexerError]:
        """Structured error records, in the order they were found."""
        return list(self.errors)


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If the source contains any lexical error
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        # Raise the first error encountered
        raise lexer.errors[0]

    return tokens
