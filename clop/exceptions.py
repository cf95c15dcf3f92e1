"""
Exception hierarchy for the option parser.

Registration problems raise ConfigError and abort program startup. Problems
found while parsing a command line raise a ParseError subclass; the caller
decides whether to print help, report the message, or exit.
"""

from typing import Any


class ClopError(Exception):
    """
    Base exception for all option parser errors.

    Example:
        try:
            args = parser.parse()
        except ClopError as e:
            print(f"error: {e}", file=sys.stderr)
            sys.exit(2)
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigError(ClopError):
    """
    Option declaration or parser configuration errors.

    Examples:
        - Option added without any flag
        - Illegal flag shape ("-ab", "--", "--a=b")
        - Flag already used by another option
        - Variable already bound to another option
        - Unknown key in a parser configuration mapping
    """

    pass


class ParseError(ClopError):
    """Base class for errors raised while parsing a command line."""

    pass


class UnknownOptionError(ParseError):
    """Raised when a hyphen-prefixed argument matches no flag or bundle."""

    def __init__(self, arg: str) -> None:
        self.arg = arg
        super().__init__(f'illegal option "{arg}"')


class MissingValueError(ParseError):
    """Raised when a value-requiring flag is the last argument."""

    def __init__(self, option: Any, flag: str) -> None:
        self.option = option
        self.flag = flag
        super().__init__(f"option {option}, flag {flag} requires a value")


class DoubleAssignmentError(ParseError):
    """Raised when an option is given more than once in a single parse."""

    def __init__(self, option: Any, first_flag: str, second_flag: str) -> None:
        self.option = option
        self.first_flag = first_flag
        self.second_flag = second_flag
        super().__init__(
            f"option {option} double-initialized with {first_flag} and {second_flag}"
        )


class ValueCoercionError(ParseError):
    """Raised when a value cannot be converted to the option's type."""

    pass
