# simulator/turing_machine.py

from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Optional, Tuple

from simulator.errors import (
    DefinitionError,
    DuplicateTransitionError,
    InvalidMoveError,
    InvalidVocabularyError,
    TransitionArityError,
    UndeclaredStateError,
    UndeclaredSymbolError,
)

BLANK = "_"
WILDCARD = "*"

# Characters no declared symbol may use; the blank is only legal on the tape alphabet.
RESERVED_SYMBOLS = " ,;{}*"
RESERVED_INPUT_SYMBOLS = RESERVED_SYMBOLS + BLANK


class Move(IntEnum):
    """Head displacement applied after a write."""

    LEFT = -1
    STAY = 0
    RIGHT = 1

    @property
    def char(self):
        return _MOVE_TO_CHAR[self]

    @classmethod
    def from_char(cls, char):
        try:
            return _CHAR_TO_MOVE[char]
        except KeyError:
            raise InvalidMoveError(char) from None


_CHAR_TO_MOVE = {"l": Move.LEFT, "r": Move.RIGHT, "*": Move.STAY}
_MOVE_TO_CHAR = {move: char for char, move in _CHAR_TO_MOVE.items()}


def parse_moves(text):
    """Turn a move string such as 'lr*' into a tuple of Move values."""
    return tuple(Move.from_char(char) for char in text)


def is_valid_symbol(symbol, reserved=RESERVED_SYMBOLS):
    return len(symbol) == 1 and 32 <= ord(symbol) <= 126 and symbol not in reserved


@dataclass(frozen=True)
class Vocabulary:
    states: frozenset
    input_symbols: frozenset
    tape_symbols: frozenset
    initial_state: str
    final_states: frozenset
    blank: str = BLANK
    tape_count: int = 1

    def validate(self):
        if self.tape_count < 1:
            raise InvalidVocabularyError(f"tape count must be at least 1, got {self.tape_count}")
        if self.blank != BLANK:
            raise InvalidVocabularyError(f"blank symbol must be '{BLANK}', got '{self.blank}'")
        if self.blank not in self.tape_symbols:
            raise InvalidVocabularyError(f"blank symbol '{self.blank}' is missing from the tape symbols")
        if self.initial_state not in self.states:
            raise UndeclaredStateError(self.initial_state, where="initial state")
        undeclared = sorted(self.final_states - self.states)
        if undeclared:
            raise UndeclaredStateError(undeclared[0], where="final states")
        for symbol in sorted(self.input_symbols):
            if not is_valid_symbol(symbol, RESERVED_INPUT_SYMBOLS):
                raise InvalidVocabularyError(f"'{symbol}' is not a valid input symbol")
            if symbol not in self.tape_symbols:
                raise InvalidVocabularyError(f"input symbol '{symbol}' is missing from the tape symbols")
        for symbol in sorted(self.tape_symbols):
            if not is_valid_symbol(symbol):
                raise InvalidVocabularyError(f"'{symbol}' is not a valid tape symbol")

    @property
    def wildcard_symbols(self):
        """Symbols a wildcard stands for: every declared tape symbol except the blank."""
        return tuple(sorted(self.tape_symbols - {self.blank}))


@dataclass(frozen=True)
class Transition:
    state: str
    read: str
    next_state: str
    write: str
    moves: Tuple[Move, ...]
    line_no: Optional[int] = field(default=None, compare=False)

    @property
    def key(self):
        return self.state, self.read

    @property
    def output(self):
        return self.next_state, self.write, self.moves

    def is_wildcard(self):
        return WILDCARD in self.read or WILDCARD in self.write

    def validate(self, vocabulary):
        for field, value in (("read symbols", self.read), ("write symbols", self.write), ("moves", self.moves)):
            if len(value) != vocabulary.tape_count:
                raise TransitionArityError(field, len(value), vocabulary.tape_count)
        for state in (self.state, self.next_state):
            if state not in vocabulary.states:
                raise UndeclaredStateError(state)
        for symbol in self.read + self.write:
            if symbol != WILDCARD and symbol not in vocabulary.tape_symbols:
                raise UndeclaredSymbolError(symbol)

    def __str__(self):
        moves = "".join(move.char for move in self.moves)
        return f"{self.state} {self.read} {self.next_state} {self.write} {moves}"


def expand_wildcards(transition, vocabulary):
    """
    Expand a wildcard transition into the concrete transitions it stands for.

    Tape positions are resolved one at a time from a FIFO worklist. A position
    whose read and write are both wildcards gets the same symbol on both sides;
    a lone wildcard on either side is substituted on that side only. The blank
    never replaces a wildcard. Identical results collapse, so the returned list
    does not depend on the order branches were explored.
    """
    symbols = vocabulary.wildcard_symbols
    resolved = {}
    worklist = deque([(list(transition.read), list(transition.write))])

    while worklist:
        read, write = worklist.popleft()
        position = _first_wildcard(read, write)

        if position is None:
            concrete = Transition(
                transition.state, "".join(read), transition.next_state, "".join(write), transition.moves, transition.line_no
            )
            resolved.setdefault(concrete, None)
            continue

        for symbol in symbols:
            branch_read, branch_write = list(read), list(write)
            if read[position] == WILDCARD:
                branch_read[position] = symbol
            if write[position] == WILDCARD:
                branch_write[position] = symbol
            worklist.append((branch_read, branch_write))

    return sorted(resolved, key=lambda t: (t.read, t.write))


def _first_wildcard(read, write):
    for position, (r, w) in enumerate(zip(read, write)):
        if r == WILDCARD or w == WILDCARD:
            return position
    return None


class TransitionTable:
    """Unique-key map from (state, read-symbols) to (next-state, write-symbols, moves)."""

    def __init__(self):
        self._transitions = {}

    def insert(self, transition):
        if transition.is_wildcard():
            raise ValueError(f"wildcard transition must be expanded before insertion: {transition}")
        existing = self._transitions.get(transition.key)
        if existing is not None and existing != transition.output:
            raise DuplicateTransitionError(transition.key, existing, transition.output)
        self._transitions[transition.key] = transition.output

    def add(self, transition, vocabulary):
        """Insert a declared transition, expanding wildcards first."""
        if transition.is_wildcard():
            for concrete in expand_wildcards(transition, vocabulary):
                self.insert(concrete)
        else:
            self.insert(transition)

    def get(self, state, symbols):
        """Return the output for a configuration, or None when the machine has no move."""
        return self._transitions.get((state, symbols))

    def __len__(self):
        return len(self._transitions)

    def __iter__(self):
        for state, read in sorted(self._transitions):
            next_state, write, moves = self._transitions[(state, read)]
            yield Transition(state, read, next_state, write, moves)


@dataclass(frozen=True)
class MachineDefinition:
    vocabulary: Vocabulary
    transitions: TransitionTable

    @classmethod
    def build(cls, vocabulary: Vocabulary, transitions: Iterable[Transition]) -> "MachineDefinition":
        """Validate everything and build the table; nothing is returned on error."""
        vocabulary.validate()
        table = TransitionTable()
        for transition in transitions:
            try:
                transition.validate(vocabulary)
                table.add(transition, vocabulary)
            except DefinitionError as exc:
                if exc.line_no is None:
                    exc.line_no = transition.line_no
                raise
        return cls(vocabulary, table)

    @property
    def initial_state(self):
        return self.vocabulary.initial_state

    @property
    def blank(self):
        return self.vocabulary.blank

    @property
    def tape_count(self):
        return self.vocabulary.tape_count

    def is_final(self, state):
        return state in self.vocabulary.final_states

    def accepts_symbol(self, symbol):
        return symbol in self.vocabulary.input_symbols

    def lookup(self, state, symbols) -> Optional[tuple]:
        return self.transitions.get(state, symbols)
