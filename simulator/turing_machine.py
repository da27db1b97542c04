from simulator.alphabet import DEFAULT_ALPHABET
from simulator.state import State, StateKind
from simulator.tape import InputTape, Tape
from simulator.transition import Transition


class TuringMachine:
    """
    Deterministic multi-tape Turing machine.

    Holds one read-only input tape and num_tapes + 1 work tapes; work tape 0
    is the output tape. States are dense ids 0..num_states-1.
    """

    def __init__(self, num_states, num_tapes, start, halting=(), accepting=(), alphabet=DEFAULT_ALPHABET):
        self.num_states = num_states
        self.num_tapes = num_tapes
        self.alphabet = alphabet
        self.start = start
        halting, accepting = set(halting), set(accepting)
        self.states = [State(i, StateKind.classify(i, halting, accepting)) for i in range(num_states)]
        self.reset()

    def is_valid_symbol(self, ch):
        return self.alphabet.is_valid_symbol(ch)

    def add_transition(self, source, input_symbol, tape_symbols, target, input_move, new_symbols, tape_moves):
        transition = Transition.create(
            source, input_symbol, tape_symbols, target, input_move, new_symbols, tape_moves
        )
        self.states[source].add_transition(transition)
        return transition

    @property
    def output_tape(self):
        return self.tapes[0]

    def reset(self, word=""):
        blank = self.alphabet.blank
        self.input_tape = InputTape(word, blank)
        self.tapes = [Tape(blank) for _ in range(self.num_tapes + 1)]
        self.current_state = self.states[self.start]
        self.halted = False

    def current_symbols(self):
        return tuple(tape.read() for tape in self.tapes)

    def step(self):
        """Fire one transition. Returns it, or None once the machine has halted."""
        if self.halted:
            return None
        if not self.current_state.is_running:
            self.halted = True
            return None
        transition = self.current_state.find_transition(self.input_tape.read(), self.current_symbols())
        if transition is None:
            self.halted = True
            return None
        target = transition.apply(self.input_tape, self.tapes)
        self.current_state = self.states[target]
        return transition

    def run(self, observer=None):
        """Step until halted. No step limit: a looping program never returns."""
        steps = 0
        while True:
            transition = self.step()
            if transition is None:
                return steps
            steps += 1
            if observer is not None:
                observer(self, transition)

    def transform(self, word, observer=None):
        self.reset(word)
        self.run(observer)
        result = self.alphabet.trim(self.output_tape.as_string())
        self.reset()
        return result

    def decide(self, word, observer=None):
        self.reset(word)
        if self.current_state.is_accepting:
            accepted = True
        else:
            self.run(observer)
            accepted = self.current_state.is_accepting
        self.reset()
        return accepted

    def describe_program(self):
        lines = []
        for state in self.states:
            lines.extend(state.describe())
        return "\n".join(lines)

    def visualize(self):
        """Lines showing the active state and every tape with its head."""
        lines = [f"State: {self.current_state.id} ({self.current_state.kind.name}), Halted: {self.halted}"]
        named = [("in", self.input_tape)] + [(str(i), tape) for i, tape in enumerate(self.tapes)]
        for name, tape in named:
            content, caret = tape.visualize()
            lines.append(f"{name:>3} {content}")
            lines.append(f"    {caret}")
        return lines

    def __str__(self):
        return self.describe_program()
