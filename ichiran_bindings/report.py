"""
Decoder for the line-based report printed by ``ichiran-cli -i``.

Example report::

    iitenki desu ne.
    * iitenki  いい天気 【いいてんき】
    1. [n,exp] fine weather; fair weather

    * desu  です
    1. [cop] be; is
    [ Conjugation: [cop] NIL Affirmative Formal
      だ : be; is ]

The first line is the romanization of the whole input. Every following
stanza (separated by blank lines) describes one word: a header line, then
gloss and conjugation lines.
"""

from enum import Enum
from typing import List, Optional

from ichiran_bindings.errors import UnexpectedOutput
from ichiran_bindings.models import RomanizedWithInfo, RomanizedWithInfoEntry


class _State(Enum):
    AWAITING_HEADER = "awaiting_header"
    ACCUMULATING_ALTERNATIVES = "accumulating_alternatives"


def split_lines(text: str) -> List[str]:
    """
    Split on newlines, dropping a trailing ``\\r`` from each line.

    A final newline does not start an extra empty line, and empty text has
    no lines at all.
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def decode_line_report(text: str) -> RomanizedWithInfo:
    """
    Decode the output of ``ichiran-cli -i``.

    An entry still open at the end of the text is kept, whether or not a
    blank line follows it.

    Raises:
        UnexpectedOutput: If the text has no first line.
    """
    lines = split_lines(text)
    if not lines:
        raise UnexpectedOutput(text)

    romanized = lines[0].rstrip()
    entries: List[RomanizedWithInfoEntry] = []

    state = _State.AWAITING_HEADER
    header: Optional[str] = None
    alternatives: List[str] = []

    def close_entry():
        entries.append(RomanizedWithInfoEntry(word=header, alternatives=tuple(alternatives)))

    for line in lines[1:]:
        if not line.strip():
            if state is _State.ACCUMULATING_ALTERNATIVES:
                close_entry()
                state, header, alternatives = _State.AWAITING_HEADER, None, []
        elif state is _State.AWAITING_HEADER:
            state, header = _State.ACCUMULATING_ALTERNATIVES, line
        else:
            alternatives.append(line)

    if state is _State.ACCUMULATING_ALTERNATIVES:
        close_entry()

    return RomanizedWithInfo(romanized=romanized, entries=tuple(entries))
