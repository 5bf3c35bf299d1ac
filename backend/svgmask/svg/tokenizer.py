"""Path data tokenizer — explicit state machine over the SVG path mini-language.

Splits path data into command runs: a command letter followed by the numeric
arguments up to the next command letter. Numbers follow a reduced grammar:
optional sign, digits, optional single decimal point, more digits. A sign or a
second decimal point starts a new number, as in compact SVG output
(``0.5.5`` → ``0.5 .5``, ``10-5`` → ``10 -5``). Whitespace and commas separate
numbers. Exponents are not part of the grammar.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from svgmask.errors import UnsupportedNumberFormat

COMMAND_LETTERS = frozenset("MLHVCSQTAZmlhvcsqtaz")

_SEPARATORS = frozenset(" \t\n\r\f,")
_SIGNS = frozenset("+-")
_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class NumberToken:
    """A numeric argument as written in the source."""

    text: str
    value: float
    # Offset of the first character in the path string
    position: int


@dataclass(frozen=True)
class PathCommand:
    """One command run: letter plus its ordered arguments."""

    letter: str
    args: tuple[NumberToken, ...] = ()
    position: int = 0


class _State(enum.Enum):
    IDLE = 0  # between numbers
    SIGN = 1  # read a sign, no digits yet
    INT = 2  # in integer digits
    POINT = 3  # read a decimal point, no fraction digits yet
    FRAC = 4  # in fraction digits


def tokenize(path_data: str) -> list[PathCommand]:
    """Split path data into command runs.

    Text before the first command letter must be blank. Raises
    UnsupportedNumberFormat for characters outside the number grammar and for
    a sign or point that never receives digits.
    """
    commands: list[PathCommand] = []
    letter: str | None = None
    letter_pos = 0
    args: list[NumberToken] = []

    state = _State.IDLE
    start = 0
    has_digits = False

    def flush_number(end: int) -> None:
        nonlocal state
        if state is _State.IDLE:
            return
        text = path_data[start:end]
        if not has_digits:
            raise UnsupportedNumberFormat(
                f"Incomplete number {text!r} at offset {start}",
                detail=text,
                position=start,
            )
        args.append(NumberToken(text=text, value=float(text), position=start))
        state = _State.IDLE

    def flush_command() -> None:
        if letter is not None:
            commands.append(PathCommand(letter=letter, args=tuple(args), position=letter_pos))
        args.clear()

    for i, ch in enumerate(path_data):
        if ch in COMMAND_LETTERS:
            flush_number(i)
            flush_command()
            letter, letter_pos = ch, i
            continue

        if ch in _SEPARATORS:
            flush_number(i)
            continue

        if letter is None:
            raise UnsupportedNumberFormat(
                f"Unexpected {ch!r} before first command at offset {i}",
                detail=ch,
                position=i,
            )

        if ch in _SIGNS:
            flush_number(i)
            state, start, has_digits = _State.SIGN, i, False
        elif ch in _DIGITS:
            if state is _State.IDLE:
                state, start, has_digits = _State.INT, i, True
            elif state is _State.SIGN:
                state, has_digits = _State.INT, True
            elif state is _State.POINT:
                state, has_digits = _State.FRAC, True
            else:
                has_digits = True
        elif ch == ".":
            if state in (_State.POINT, _State.FRAC):
                flush_number(i)
                state, start, has_digits = _State.POINT, i, False
            elif state is _State.IDLE:
                state, start, has_digits = _State.POINT, i, False
            else:
                state = _State.POINT
        else:
            # Report the whole malformed word, e.g. "1e5" rather than "e"
            word_start = start if state is not _State.IDLE else i
            end = i + 1
            while end < len(path_data) and not _ends_word(path_data[end]):
                end += 1
            offending = path_data[word_start:end]
            raise UnsupportedNumberFormat(
                f"Unsupported number format {offending!r} at offset {word_start}",
                detail=offending,
                position=word_start,
            )

    flush_number(len(path_data))
    flush_command()
    return commands


def _ends_word(ch: str) -> bool:
    return ch in _SEPARATORS or ch in COMMAND_LETTERS
