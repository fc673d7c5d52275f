"""
ichiran-bindings: typed Python bindings for ichiran-cli
(https://github.com/tshatrov/ichiran)

ichiran-cli prints two kinds of output. ``-f`` prints a JSON document with
every candidate segmentation of the input; ``-i`` prints a romanization
followed by per-word glosses. This package decodes both into immutable
pydantic models.
"""

from typing import Optional

__version__ = "0.1.0"

from ichiran_bindings.errors import (
    IchiranError, InvalidEncoding, InvocationFailure, NonZeroExit,
    SchemaError, UnexpectedOutput,
)
from ichiran_bindings.models import Document, RomanizedWithInfo, normalize
from ichiran_bindings.process import IchiranCli
from ichiran_bindings.raw import RawDocument, decode_structured
from ichiran_bindings.report import decode_line_report
from ichiran_bindings.shapes import Strictness


def segment(text: str, limit: Optional[int] = None, cli: Optional[IchiranCli] = None) -> Document:
    """
    Segment Japanese text with ichiran-cli.

    This is the main high-level API.

    Args:
        text: Japanese text to analyze.
        limit: Maximum number of segmentations per segment.
        cli: Optional IchiranCli. If None, one is built from settings.

    Returns:
        The normalized document.

    Example:
        >>> import ichiran_bindings
        >>> doc = ichiran_bindings.segment("いい天気ですね。")
        >>> doc.text
        'いい天気ですね. '
    """
    if cli is None:
        cli = IchiranCli()
    return cli.segment(text, limit=limit)


def romanize(text: str, cli: Optional[IchiranCli] = None) -> str:
    """Romanize Japanese text, e.g. 一覧は最高だぞ -> 'ichiran wa saikō da zo'."""
    if cli is None:
        cli = IchiranCli()
    return cli.romanize(text)


def romanize_with_info(text: str, cli: Optional[IchiranCli] = None) -> RomanizedWithInfo:
    """Romanize Japanese text and gloss every word."""
    if cli is None:
        cli = IchiranCli()
    return cli.romanize_with_info(text)
