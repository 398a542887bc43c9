"""
Error handling for the minipy lexer.

Lexical errors are never fatal: the lexer records each one as a structured
diagnostic and keeps scanning. The same record can be raised as an exception
by callers that want to stop on the first error.

Author: minipy contributors
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation


# Error codes for the two lexical error conditions
INVALID_CHARACTER = "L001"
UNTERMINATED_STRING = "L002"

ERROR_CODES = {
    INVALID_CHARACTER: "Invalid character",
    UNTERMINATED_STRING: "Unterminated string literal",
}

# Prefix shared by every formatted diagnostic line
MESSAGE_FORMAT = "Erreur lexicale ligne {line}, colonne {column}: {message}"


@dataclass
class Diagnostic:
    """Record of one lexical problem and where it happened."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        return MESSAGE_FORMAT.format(
            line=self.location.line,
            column=self.location.column,
            message=self.message,
        )

    def render(self) -> str:
        """Multi-line form with location, help and suggestions."""
        result = f"{self.severity.upper()}[{self.code}]: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    A lexical error.

    The lexer collects these instead of raising them; tokenize_string()
    raises the first one.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def line(self) -> int:
        return self.diagnostic.location.line

    @property
    def column(self) -> int:
        return self.diagnostic.location.column

    def __str__(self) -> str:
        return str(self.diagnostic)


# Spellings borrowed from other languages, mapped to their minipy form
_CHARACTER_ALTERNATIVES = {
    '!': ['!=', 'not'],
    '&': ['and'],
    '|': ['or'],
}


def suggest_alternatives(char: str) -> List[str]:
    """Suggest minipy spellings for a character that is not valid on its own."""
    return list(_CHARACTER_ALTERNATIVES.get(char, []))


def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for an invalid character."""
    suggestions = suggest_alternatives(char)

    if suggestions:
        help_text = f"Did you mean: {', '.join(suggestions)}?"
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in minipy source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"Caractère invalide '{char}'",
        location=location,
        code=INVALID_CHARACTER,
        help_text=help_text,
        suggestions=suggestions or None
    )


def create_unterminated_string_error(quote: str, location: SourceLocation) -> LexerError:
    """Create an error for a string literal that reaches end of input."""
    return LexerError(
        message="Chaîne non terminée",
        location=location,
        code=UNTERMINATED_STRING,
        help_text=f"String literals must be closed with a matching {quote} quote.",
        suggestions=[f"Add a closing {quote} quote", "Check for an escaped closing quote"]
    )
