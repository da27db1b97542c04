# tools/program_loader.py

import argparse
from pathlib import Path

from simulator.alphabet import DEFAULT_ALPHABET
from simulator.transition import Direction
from simulator.turing_machine import TuringMachine


class ProgramFormatError(ValueError):
    """Raised for malformed program text. Carries the 1-based line number."""

    def __init__(self, line_number, reason=""):
        self.line_number = line_number
        self.reason = reason
        message = f"Malformed file at line: {line_number}!"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


# === Line Reader ===
def iter_lines(text):
    """Yield (line_number, text) for every non-comment line."""
    for number, line in enumerate(text.splitlines(), start=1):
        if line.strip().startswith("#"):
            continue
        yield number, line


def next_line(lines, last_number):
    try:
        return next(lines)
    except StopIteration:
        raise ProgramFormatError(last_number + 1, "unexpected end of file") from None


# === Field Parsers ===
def parse_int(token, line_number):
    try:
        return int(token)
    except ValueError:
        raise ProgramFormatError(line_number, f"not an integer: {token!r}") from None


def parse_count(token, line_number):
    value = parse_int(token.strip(), line_number)
    if value < 0:
        raise ProgramFormatError(line_number, f"negative count: {value}")
    return value


def parse_state_id(token, num_states, line_number):
    state_id = parse_int(token, line_number)
    if not 0 <= state_id < num_states:
        raise ProgramFormatError(line_number, f"state id out of range: {state_id}")
    return state_id


def parse_state_ids(line, num_states, line_number):
    return {parse_state_id(token, num_states, line_number) for token in line.split()}


def parse_symbol(token, alphabet, line_number):
    if len(token) != 1 or not alphabet.is_valid_symbol(token):
        raise ProgramFormatError(line_number, f"invalid symbol: {token!r}")
    return token


def parse_move(token, line_number):
    try:
        return Direction.parse(token)
    except ValueError:
        raise ProgramFormatError(line_number, f"invalid head move: {token!r}") from None


def parse_transition(line, num_tapes, num_states, alphabet, line_number):
    """Split one transition record into add_transition() arguments."""
    args = line.split()
    width = num_tapes + 1
    expected = 3 * num_tapes + 7
    if len(args) != expected:
        raise ProgramFormatError(line_number, f"expected {expected} fields, got {len(args)}")

    source = parse_state_id(args[0], num_states, line_number)
    input_symbol = parse_symbol(args[1], alphabet, line_number)
    tape_symbols = [parse_symbol(args[2 + i], alphabet, line_number) for i in range(width)]
    target = parse_state_id(args[2 + width], num_states, line_number)
    input_move = parse_move(args[3 + width], line_number)

    new_symbols = []
    tape_moves = []
    for i in range(width):
        pos = 4 + width + 2 * i
        new_symbols.append(parse_symbol(args[pos], alphabet, line_number))
        tape_moves.append(parse_move(args[pos + 1], line_number))

    return source, input_symbol, tape_symbols, target, input_move, new_symbols, tape_moves


# === Program Loader ===
def parse_program(text, alphabet=DEFAULT_ALPHABET):
    """Build a TuringMachine from program text."""
    lines = iter_lines(text)

    number, line = next_line(lines, 0)
    num_states = parse_count(line, number)

    number, line = next_line(lines, number)
    num_tapes = parse_count(line, number)

    number, line = next_line(lines, number)
    start = parse_state_id(line.strip(), num_states, number)

    number, line = next_line(lines, number)
    halting = parse_state_ids(line, num_states, number)

    number, line = next_line(lines, number)
    accepting = parse_state_ids(line, num_states, number)
    if not accepting <= halting:
        raise ProgramFormatError(number, "accepting states must also be halting states")

    machine = TuringMachine(num_states, num_tapes, start, halting, accepting, alphabet=alphabet)

    seen_guards = set()
    for number, line in lines:
        if not line.strip():
            continue
        fields = parse_transition(line, num_tapes, num_states, alphabet, number)
        source, input_symbol, tape_symbols = fields[:3]
        guard = (source, input_symbol, tuple(tape_symbols))
        if guard in seen_guards:
            raise ProgramFormatError(number, "nondeterministic transition")
        seen_guards.add(guard)
        machine.add_transition(*fields)

    return machine


def load_program(path, alphabet=DEFAULT_ALPHABET):
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Program file not found at: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return parse_program(f.read(), alphabet=alphabet)


# === CLI ===
def main():
    parser = argparse.ArgumentParser(description="Load and validate a Turing machine program file")
    parser.add_argument("program", help="Path to the program file")
    args = parser.parse_args()

    machine = load_program(args.program)
    print(f"[INFO] Loaded {machine.num_states} states, {machine.num_tapes} tapes.")
    print(machine.describe_program())


if __name__ == "__main__":
    main()
