"""
Exception types raised by ichiran-bindings.

All of them derive from IchiranError, so callers can catch the whole family
or branch on the specific kind.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

PathItem = Union[str, int]


class IchiranError(Exception):
    """Base class for every error raised by this package."""


class InvocationFailure(IchiranError):
    """ichiran-cli could not be started or did not complete."""

    def __init__(self, message: str, command: Optional[Sequence[str]] = None):
        super().__init__(message)
        self.command = list(command) if command is not None else None


class InvalidEncoding(IchiranError):
    """Captured output is not valid UTF-8."""

    def __init__(self, stream: str, error: UnicodeDecodeError):
        super().__init__(f"ichiran-cli {stream} is not valid utf-8: {error}")
        self.stream = stream


class NonZeroExit(IchiranError):
    """ichiran-cli ran but returned a non-zero exit code."""

    def __init__(self, returncode: int, stdout: str, stderr: str):
        super().__init__(f"ichiran-cli returned exit code {returncode}")
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class UnexpectedOutput(IchiranError):
    """Output does not have the minimal expected shape."""

    def __init__(self, output: str):
        super().__init__("Unexpected output from ichiran-cli")
        self.output = output


class SchemaError(IchiranError):
    """
    Structured output does not match any known shape.

    Attributes:
        path: Location of the failure, as a tuple of object keys and array
            indices from the document root. Empty when the text is not JSON.
        message: Description of the failure at that location.
        errors: Every error record reported by the validator.
    """

    def __init__(
        self,
        path: Tuple[PathItem, ...],
        message: str,
        errors: Optional[List[Dict[str, Any]]] = None,
    ):
        self.path = tuple(path)
        self.message = message
        self.errors = errors or []
        super().__init__(f"{format_path(self.path)}: {message}")


def format_path(path: Sequence[PathItem]) -> str:
    """Render a path as ``$[0][0].words[2]``."""
    parts = ["$"]
    for item in path:
        if isinstance(item, int):
            parts.append(f"[{item}]")
        else:
            parts.append(f".{item}")
    return "".join(parts)
