"""Exception hierarchy for msgdef.

Validation of plain arguments uses the built-in exceptions (``TypeError`` for
``None`` or wrongly typed arguments, ``ValueError`` for empty keys). The types
below cover failures that are specific to this library.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "ConfigurationError",
    "MessageDefError",
    "PropertiesSyntaxError",
]


class MessageDefError(Exception):
    """Base exception for all msgdef errors."""


class ConfigurationError(MessageDefError):
    """A DirectorySource was configured or used incorrectly.

    Raised at the point of misuse:
    - loading without a naming convention or message loader
    - setting the message loader or message processor a second time
    - setting a message processor before a message loader
    """


class PropertiesSyntaxError(MessageDefError):
    """Malformed input in properties-format text.

    Attributes:
        line: 1-based line number where the offending logical line starts
    """

    def __init__(self, message: str, line: int) -> None:
        """Initialize PropertiesSyntaxError.

        Args:
            message: Human-readable description of the problem
            line: 1-based line number of the logical line
        """
        super().__init__(f"{message} (line {line})")
        self.line = line
