from dataclasses import dataclass
from enum import IntEnum


class Direction(IntEnum):
    LEFT = -1
    STAY = 0
    RIGHT = 1

    def render(self):
        return "+1" if self is Direction.RIGHT else str(int(self))

    @classmethod
    def parse(cls, text):
        """Accepts '-1', '0', '1' or '+1'."""
        return cls(int(text))


@dataclass(frozen=True)
class Transition:
    source: int
    input_symbol: str
    tape_symbols: tuple
    target: int
    input_move: Direction
    new_symbols: tuple
    tape_moves: tuple

    @property
    def guard(self):
        return (self.source, self.input_symbol, self.tape_symbols)

    def matches(self, state_id, input_symbol, tape_symbols):
        return self.guard == (state_id, input_symbol, tuple(tape_symbols))

    def apply(self, input_tape, work_tapes):
        """Write then move every work tape, move the input tape, return the target id."""
        for tape, symbol, move in zip(work_tapes, self.new_symbols, self.tape_moves):
            tape.write(symbol)
            tape.move(move)
        input_tape.move(self.input_move)
        return self.target

    def render(self):
        guard = ", ".join([str(self.source), self.input_symbol, *self.tape_symbols])
        effect = [str(self.target), Direction(self.input_move).render()]
        for symbol, move in zip(self.new_symbols, self.tape_moves):
            effect += [symbol, Direction(move).render()]
        return f"({guard}) -> ({', '.join(effect)})"

    @classmethod
    def create(cls, source, input_symbol, tape_symbols, target, input_move, new_symbols, tape_moves):
        return cls(
            source,
            input_symbol,
            tuple(tape_symbols),
            target,
            Direction(input_move),
            tuple(new_symbols),
            tuple(Direction(m) for m in tape_moves),
        )
