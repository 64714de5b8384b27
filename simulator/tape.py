# simulator/tape.py

from dataclasses import dataclass


@dataclass(frozen=True)
class TapeSnapshot:
    """Window of one tape: `symbols[0]` sits at logical position `start`."""

    index: int
    start: int
    head: int
    symbols: str

    @property
    def positions(self):
        return range(self.start, self.start + len(self.symbols))

    def to_dict(self):
        return {"index": self.index, "start": self.start, "head": self.head, "symbols": self.symbols}


class Tape:
    """
    Unbounded tape stored as a growable buffer plus the logical position of its first cell.

    The buffer keeps blank slack on its left so that growing leftward does not
    shift every cell on each step. Logical bounds are `[start, stop)`; reads
    outside them return the blank and never grow the tape.
    """

    def __init__(self, index, blank, contents=""):
        self.index = index
        self.blank = blank
        self._cells = list(contents)
        self._offset = 0  # buffer index of logical position `start`
        self._length = len(self._cells)
        self._start = 0
        self._head = 0

    @property
    def head(self):
        return self._head

    @property
    def start(self):
        return self._start

    @property
    def stop(self):
        return self._start + self._length

    def __len__(self):
        return self._length

    @property
    def contents(self):
        return "".join(self._cells[self._offset:self._offset + self._length])

    def at(self, position):
        if position < self._start or position >= self.stop:
            return self.blank
        return self._cells[self._offset + position - self._start]

    def read(self):
        return self.at(self._head)

    def write(self, symbol, move):
        """Write at the head, then move it. Returns the new head position."""
        self._extend_to(self._head)
        self._cells[self._offset + self._head - self._start] = symbol
        self._head += int(move)
        return self._head

    def _extend_to(self, position):
        if position < self._start:
            gap = self._start - position
            if gap > self._offset:
                slack = max(gap - self._offset, self._length)
                self._cells[:0] = [self.blank] * slack
                self._offset += slack
            self._offset -= gap
            self._length += gap
            self._start = position
        elif position >= self.stop:
            gap = position - self.stop + 1
            missing = self._offset + self._length + gap - len(self._cells)
            if missing > 0:
                self._cells.extend([self.blank] * missing)
            self._length += gap

    def result(self):
        """Tape contents with the leading and trailing blank runs trimmed."""
        return self.contents.strip(self.blank)

    def snapshot(self):
        contents = self.contents
        trimmed = contents.lstrip(self.blank)
        if not trimmed:
            return TapeSnapshot(self.index, self._head, self._head, self.at(self._head))

        first = self._start + len(contents) - len(trimmed)
        last = self._start + len(contents.rstrip(self.blank)) - 1
        low = min(first, self._head)
        high = max(last, self._head)
        symbols = "".join(self.at(position) for position in range(low, high + 1))
        return TapeSnapshot(self.index, low, self._head, symbols)


class TapeBank:
    """One tape per declared tape; tape 0 holds the input, the others start as a single blank."""

    def __init__(self, tape_count, blank, input_string=""):
        if tape_count < 1:
            raise ValueError(f"tape count must be at least 1, got {tape_count}")
        self._tapes = [Tape(0, blank, input_string)]
        self._tapes.extend(Tape(index, blank, blank) for index in range(1, tape_count))

    def __len__(self):
        return len(self._tapes)

    def __getitem__(self, index):
        return self._tapes[index]

    def __iter__(self):
        return iter(self._tapes)

    def read_all(self):
        return "".join(tape.read() for tape in self._tapes)

    def write_all(self, symbols, moves):
        if len(symbols) != len(self._tapes) or len(moves) != len(self._tapes):
            raise ValueError(
                f"expected {len(self._tapes)} symbols and moves, got {len(symbols)} and {len(moves)}"
            )
        return [tape.write(symbol, move) for tape, symbol, move in zip(self._tapes, symbols, moves)]

    def result(self):
        return self._tapes[0].result()

    def snapshot(self):
        return tuple(tape.snapshot() for tape in self._tapes)
