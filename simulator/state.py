from enum import Enum


class StateKind(Enum):
    RUNNING = "running"
    HALTING = "halting"
    ACCEPTING = "accepting"

    @classmethod
    def classify(cls, state_id, halting, accepting):
        # Accepting wins over halting.
        if state_id in accepting:
            return cls.ACCEPTING
        if state_id in halting:
            return cls.HALTING
        return cls.RUNNING


class State:
    def __init__(self, state_id, kind=StateKind.RUNNING):
        self.id = state_id
        self.kind = kind
        self.transitions = []

    @property
    def is_running(self):
        return self.kind is StateKind.RUNNING

    @property
    def is_accepting(self):
        return self.kind is StateKind.ACCEPTING

    def add_transition(self, transition):
        self.transitions.append(transition)

    def find_transition(self, input_symbol, tape_symbols):
        """First transition in insertion order whose guard matches, or None."""
        tape_symbols = tuple(tape_symbols)
        for transition in self.transitions:
            if transition.matches(self.id, input_symbol, tape_symbols):
                return transition
        return None

    def describe(self):
        return sorted(t.render() for t in self.transitions)

    def __repr__(self):
        return f"State({self.id}, {self.kind.name}, {len(self.transitions)} transitions)"
