from dataclasses import dataclass


@dataclass(frozen=True)
class Alphabet:
    """Contiguous symbol range plus a blank sentinel outside of it."""
    first: str = "a"
    last: str = "z"
    blank: str = "~"

    def __post_init__(self):
        for name in ("first", "last", "blank"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"Alphabet '{name}' must be a single character, got {value!r}.")
        if self.first > self.last:
            raise ValueError(f"Alphabet range '{self.first}'..'{self.last}' is empty.")
        if self.in_range(self.blank):
            raise ValueError(f"Blank symbol {self.blank!r} lies inside '{self.first}'..'{self.last}'.")

    def in_range(self, ch):
        return len(ch) == 1 and self.first <= ch <= self.last

    def is_valid_symbol(self, ch):
        """True for any symbol allowed on a tape or in a transition."""
        return self.in_range(ch) or ch == self.blank

    def is_valid_word(self, word):
        # Input words never contain the blank.
        return all(self.in_range(ch) for ch in word)

    def trim(self, content):
        """Strip leading and trailing blanks, keep interior ones."""
        return content.strip(self.blank)


DEFAULT_ALPHABET = Alphabet()
