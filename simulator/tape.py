class Tape:
    """
    Two-way unbounded tape backed by a growing list.

    The head always points at a real cell: running off the right end appends
    a blank and advances, running off the left end prepends a blank and keeps
    the head index where it is (the new blank is now under the head).
    """

    def __init__(self, blank="~", content=None):
        self.blank = blank
        self.cells = list(content) if content else [blank]
        self._head = 0

    @property
    def head(self):
        return self._head

    def __len__(self):
        return len(self.cells)

    def read(self):
        return self.cells[self._head]

    def write(self, symbol):
        self.cells[self._head] = symbol

    def move_right(self):
        if self._head == len(self.cells) - 1:
            self.cells.append(self.blank)
        self._head += 1

    def move_left(self):
        if self._head == 0:
            self.cells.insert(0, self.blank)
        else:
            self._head -= 1

    def move(self, direction):
        if direction > 0:
            self.move_right()
        elif direction < 0:
            self.move_left()

    def as_string(self):
        return "".join(self.cells)

    def visualize(self):
        """Return the tape and a caret line marking the head."""
        return self.as_string(), " " * self._head + "^"


class InputTape(Tape):
    """Read and move only. Built from the input word; empty word -> one blank."""

    def __init__(self, word, blank="~"):
        super().__init__(blank, word)

    def write(self, symbol):
        raise TypeError("The input tape is read-only.")
