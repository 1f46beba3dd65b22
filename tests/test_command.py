import io
import math

import pytest

from robarm.command import Cmd, Command, UnrecognizedCommand, cmd_dwell, cmd_move
from robarm.hal import SimulatedBoard
from robarm.interpolation import Point
from robarm.logger import Logger


def _command():
    stream = io.StringIO()
    return Command(Logger(stream=stream)), stream


def test_parse_move_line():
    command, _ = _command()
    cmd = command.process_message("G1 X10 Y20.5 Z-3 F50")
    assert cmd.letter == "G"
    assert cmd.num == 1
    assert cmd.x == 10.0
    assert cmd.y == 20.5
    assert cmd.z == -3.0
    assert cmd.f == 50.0
    assert math.isnan(cmd.e)


def test_parse_lowercase_and_m_command():
    command, _ = _command()
    cmd = command.process_message("m3 s2")
    assert (cmd.letter, cmd.num, cmd.s) == ("M", 3, 2.0)
    assert math.isnan(cmd.x)


def test_parse_resets_previous_values():
    command, _ = _command()
    command.process_message("G1 X10 E4")
    cmd = command.process_message("G0 Y7")
    assert math.isnan(cmd.x)
    assert math.isnan(cmd.e)
    assert cmd.y == 7.0


def test_parameter_without_number_reads_zero():
    command, _ = _command()
    cmd = command.process_message("G1XY5")
    assert cmd.x == 0.0
    assert cmd.y == 5.0


def test_command_number_stops_at_decimal_point():
    command, _ = _command()
    cmd = command.process_message("G1.5 X2")
    assert cmd.num == 1
    assert cmd.x == 2.0


@pytest.mark.parametrize("line", ["X10", "", "T0"])
def test_unrecognized_lines_raise(line):
    command, _ = _command()
    with pytest.raises(UnrecognizedCommand):
        command.process_message(line)


def test_handle_char_completes_on_carriage_return():
    command, _ = _command()
    results = [command.handle_char(c) for c in "G28\r\n"]
    assert results[:3] == [None, None, None]
    assert results[3].letter == "G"
    assert results[3].num == 28
    assert results[4] is None


def test_handle_char_starts_fresh_after_line():
    command, _ = _command()
    for c in "G1X1\r":
        command.handle_char(c)
    last = None
    for c in "M5\r":
        last = command.handle_char(c)
    assert (last.letter, last.num) == ("M", 5)


def test_handle_char_logs_unrecognized():
    command, stream = _command()
    results = [command.handle_char(c) for c in "Q1\r"]
    assert results == [None, None, None]
    assert stream.getvalue() == "ERROR: COMMAND NOT RECOGNIZED\n"


def test_handle_char_rejects_strings():
    command, _ = _command()
    with pytest.raises(ValueError):
        command.handle_char("G1")


def test_value_segment_ignores_unknown_letter():
    command, _ = _command()
    command.process_message("G1 X3")
    command.value_segment("Q9")
    assert command.new_command.x == 3.0


def test_mode_switching_logs():
    command, stream = _command()
    command.cmd_to_relative()
    assert command.relative is True
    command.cmd_to_absolute()
    assert command.relative is False
    assert stream.getvalue() == "INFO: RELATIVE MODE ON\nINFO: ABSOLUTE MODE ON\n"


def test_get_position_logs_offset_position():
    command, stream = _command()
    command.cmd_get_position(Point(11, 22, 33, 44), Point(1, 2, 3, 4))
    lines = stream.getvalue().splitlines()
    assert lines[0] == "INFO: ABSOLUTE MODE"
    assert lines[1] == "INFO: CURRENT POSITION: [X:10.00 Y:20.00 Z:30.00 E:40.00]"


def test_cmd_move_absolute_uses_offset():
    cmd = Cmd(letter="G", num=1, x=10.0)
    pos = Point(1.0, 2.0, 3.0, 4.0)
    moved = cmd_move(cmd, pos, Point(100.0, 0.0, 0.0, 0.0), relative=False)
    assert moved.x == 10.0 + 100.0
    assert (moved.y, moved.z, moved.e) == (2.0, 3.0, 4.0)


def test_cmd_move_relative_uses_position():
    cmd = Cmd(letter="G", num=1, z=5.0, e=1.0)
    pos = Point(1.0, 2.0, 3.0, 4.0)
    moved = cmd_move(cmd, pos, Point(100.0, 100.0, 100.0, 100.0), relative=True)
    assert moved.z == 5.0 + 3.0
    assert moved.e == 1.0 + 4.0
    assert (moved.x, moved.y) == (1.0, 2.0)
    assert math.isnan(cmd.x)


def test_cmd_dwell_waits_seconds():
    board = SimulatedBoard()
    cmd_dwell(Cmd(letter="G", num=4, s=1.5), board)
    assert board.millis() == 1500