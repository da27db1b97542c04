import pytest

from simulator.tape import InputTape, Tape


def test_new_tape_is_single_blank():
    tape = Tape("~")
    assert tape.as_string() == "~"
    assert tape.head == 0
    assert tape.read() == "~"


def test_move_right_at_end_appends_blank_and_advances():
    tape = Tape("~")
    tape.write("a")
    tape.move_right()

    assert len(tape) == 2
    assert tape.head == 1
    assert tape.as_string() == "a~"


def test_move_left_at_start_prepends_blank_without_advancing():
    tape = Tape("~")
    tape.write("a")
    tape.move_left()

    assert len(tape) == 2
    assert tape.head == 0
    assert tape.read() == "~"
    assert tape.as_string() == "~a"


def test_move_inside_tape_does_not_grow():
    tape = Tape("~", "abc")
    tape.move_right()
    tape.move_right()
    tape.move_left()

    assert len(tape) == 3
    assert tape.head == 1
    assert tape.read() == "b"


def test_write_before_move_keeps_symbol_at_previous_cell():
    tape = Tape("~")
    tape.write("x")
    tape.move_right()
    assert tape.read() == "~"
    tape.move_left()
    assert tape.read() == "x"

    tape.write("y")
    tape.move_left()
    assert tape.read() == "~"
    assert tape.as_string() == "~y~"


def test_head_stays_in_bounds_for_any_move_sequence():
    tape = Tape("~")
    moves = [-1, -1, 1, 1, 1, 1, -1, -1, -1, -1, -1, 0, 1]
    for move in moves:
        tape.move(move)
        assert 0 <= tape.head <= len(tape) - 1
        tape.read()


def test_stay_move_changes_nothing():
    tape = Tape("~", "ab")
    tape.move(0)
    assert tape.head == 0
    assert len(tape) == 2


def test_content_is_untrimmed():
    tape = Tape("~")
    tape.move_left()
    tape.move_left()
    tape.write("a")
    assert tape.as_string() == "a~~"


def test_input_tape_from_word():
    tape = InputTape("abc", "~")
    assert tape.as_string() == "abc"
    assert tape.read() == "a"


def test_empty_input_tape_is_single_blank():
    tape = InputTape("", "~")
    assert tape.as_string() == "~"
    assert tape.read() == "~"


def test_input_tape_grows_like_work_tape():
    tape = InputTape("a", "~")
    tape.move_left()
    assert tape.head == 0
    assert tape.as_string() == "~a"
    tape.move_right()
    tape.move_right()
    assert tape.head == 2
    assert tape.as_string() == "~a~"


def test_input_tape_is_read_only():
    tape = InputTape("a", "~")
    with pytest.raises(TypeError):
        tape.write("b")
    assert tape.as_string() == "a"


def test_visualize_marks_head():
    tape = Tape("~", "abc")
    tape.move_right()
    assert tape.visualize() == ("abc", " ^")
