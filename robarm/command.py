"""G-code line parsing and the commands that act on parsed moves."""

from __future__ import annotations

import dataclasses
import math
import re
from dataclasses import dataclass
from typing import Protocol

from robarm.interpolation import Point
from robarm.logger import Logger

_SEGMENT = re.compile(r"[A-Za-z][^A-Za-z]*")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))")
_FIELDS = {"X": "x", "Y": "y", "Z": "z", "E": "e", "F": "f", "S": "s"}
_COMMAND_LETTERS = ("G", "M")


class UnrecognizedCommand(ValueError):
    """Raised when a line does not start with a G or M command letter."""


class _Delayer(Protocol):
    def delay(self, ms: float) -> None: ...


@dataclass(frozen=True)
class Cmd:
    """One parsed command; axes not given in the line are NaN."""

    letter: str = ""
    num: int = 0
    x: float = math.nan
    y: float = math.nan
    z: float = math.nan
    f: float = 0.0
    e: float = math.nan
    s: float = 0.0


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: str) -> float:
    match = _LEADING_FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def _fmt(value: float) -> str:
    return f"{value:.2f}"


class Command:
    """Collects characters into lines and parses them into commands."""

    def __init__(self, logger: Logger | None = None) -> None:
        self.logger = logger if logger is not None else Logger()
        self.relative = False
        self.new_command = Cmd()
        self._message = ""

    def handle_char(self, char: str) -> Cmd | None:
        """Feed one character; a carriage return completes and parses the line."""
        if len(char) != 1:
            raise ValueError("expected a single character")
        if char == "\n":
            return None
        if char == "\r":
            message, self._message = self._message, ""
            try:
                return self.process_message(message)
            except UnrecognizedCommand:
                self.logger.error("COMMAND NOT RECOGNIZED")
                return None
        self._message += char
        return None

    def process_message(self, msg: str) -> Cmd:
        """Parse a whole line such as ``G1 X10 Y20`` into a command."""
        text = msg.upper().replace(" ", "")
        letter = text[:1]
        self.new_command = Cmd(letter=letter, num=self.new_command.num)
        if letter not in _COMMAND_LETTERS:
            raise UnrecognizedCommand(f"command not recognized: {msg!r}")
        rest = text[1:]
        first = _SEGMENT.search(rest)
        head = rest[: first.start()] if first else rest
        self.new_command = dataclasses.replace(self.new_command, num=_leading_int(head))
        for match in _SEGMENT.finditer(rest):
            self.value_segment(match.group())
        return self.new_command

    def value_segment(self, segment: str) -> None:
        """Apply one ``<letter><value>`` parameter to the current command."""
        if not segment:
            return
        field = _FIELDS.get(segment[0])
        if field is None:
            return
        value = _leading_float(segment[1:])
        self.new_command = dataclasses.replace(self.new_command, **{field: value})

    def cmd_get_position(self, pos: Point, pos_offset: Point) -> None:
        """Log the coordinate mode and the position as the user sees it."""
        self.logger.info("RELATIVE MODE" if self.relative else "ABSOLUTE MODE")
        shown = pos - pos_offset
        self.logger.info(
            f"CURRENT POSITION: [X:{_fmt(shown.x)} Y:{_fmt(shown.y)}"
            f" Z:{_fmt(shown.z)} E:{_fmt(shown.e)}]"
        )

    def cmd_to_relative(self) -> None:
        self.relative = True
        self.logger.info("RELATIVE MODE ON")

    def cmd_to_absolute(self) -> None:
        self.relative = False
        self.logger.info("ABSOLUTE MODE ON")


def cmd_move(cmd: Cmd, pos: Point, pos_offset: Point, relative: bool) -> Cmd:
    """Return the command with every axis turned into an absolute machine target."""
    base = pos if relative else pos_offset

    def target(value: float, current: float, shift: float) -> float:
        return current if math.isnan(value) else value + shift

    return dataclasses.replace(
        cmd,
        x=target(cmd.x, pos.x, base.x),
        y=target(cmd.y, pos.y, base.y),
        z=target(cmd.z, pos.z, base.z),
        e=target(cmd.e, pos.e, base.e),
    )


def cmd_dwell(cmd: Cmd, board: _Delayer) -> None:
    """Pause for the command's ``S`` value in seconds."""
    board.delay(int(cmd.s * 1000))