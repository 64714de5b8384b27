# simulator/definition_parser.py
"""
Reader for `.tm` machine descriptions.

A description is a sequence of declarations and transitions, one per line:

    ; unary increment
    #Q = {q0,qf}
    #S = {1}
    #G = {1,_}
    #q0 = q0
    #B = _
    #F = {qf}
    #N = 1

    q0 1 q0 1 r
    q0 _ qf 1 *

Transitions read `state read-symbols next-state write-symbols moves`.
Everything after `;` is a comment.
"""

import re
from pathlib import Path

from simulator.errors import DefinitionError, ParseError
from simulator.turing_machine import (
    RESERVED_INPUT_SYMBOLS,
    RESERVED_SYMBOLS,
    MachineDefinition,
    Transition,
    Vocabulary,
    is_valid_symbol,
    parse_moves,
)

COMMENT_FLAG = ";"

STATES_PATTERN = re.compile(r"#Q\s*=\s*\{([a-zA-Z0-9_, ]+)\}")
SYMBOLS_PATTERN = re.compile(r"#S\s*=\s*\{(.*)\}")
TAPE_SYMBOLS_PATTERN = re.compile(r"#G\s*=\s*\{(.*)\}")
INITIAL_STATE_PATTERN = re.compile(r"#q0\s*=\s*([a-zA-Z0-9_]+)")
BLANK_SYMBOL_PATTERN = re.compile(r"#B\s*=\s*([a-zA-Z0-9_]+)")
FINAL_STATES_PATTERN = re.compile(r"#F\s*=\s*\{([a-zA-Z0-9_, ]*)\}")
TAPE_COUNT_PATTERN = re.compile(r"#N\s*=\s*(\d+)")


def strip_comment(line):
    return line.split(COMMENT_FLAG, 1)[0].strip()


def _split_items(body):
    body = body.replace(" ", "")
    if not body:
        return []
    return body.split(",")


class DefinitionParser:
    """Collects declarations line by line; `build()` turns them into a MachineDefinition."""

    def __init__(self):
        self.states = set()
        self.input_symbols = set()
        self.tape_symbols = set()
        self.final_states = set()
        self.initial_state = None
        self.blank = None
        self.tape_count = None
        self.raw_transitions = []

    def feed(self, line_no, raw_line):
        line = strip_comment(raw_line)
        if not line:
            return

        if line.startswith("#Q"):
            self._parse_states(line_no, line)
        elif line.startswith("#S"):
            self._parse_symbols(line_no, line, SYMBOLS_PATTERN, self.input_symbols, RESERVED_INPUT_SYMBOLS, "input symbols")
        elif line.startswith("#G"):
            self._parse_symbols(line_no, line, TAPE_SYMBOLS_PATTERN, self.tape_symbols, RESERVED_SYMBOLS, "tape symbols")
        elif line.startswith("#q0"):
            self._parse_initial_state(line_no, line)
        elif line.startswith("#B"):
            self._parse_blank_symbol(line_no, line)
        elif line.startswith("#F"):
            self._parse_final_states(line_no, line)
        elif line.startswith("#N"):
            self._parse_tape_count(line_no, line)
        else:
            self._parse_transition(line_no, line)

    def _match(self, pattern, line_no, line, what):
        match = pattern.fullmatch(line)
        if match is None:
            raise ParseError(f"invalid {what} declaration", line_no, line)
        return match

    def _parse_states(self, line_no, line):
        match = self._match(STATES_PATTERN, line_no, line, "states")
        for state in _split_items(match.group(1)):
            if not state:
                raise ParseError("empty state name", line_no, line)
            self.states.add(state)

    def _parse_symbols(self, line_no, line, pattern, target, reserved, what):
        match = self._match(pattern, line_no, line, what)
        for symbol in _split_items(match.group(1)):
            if not is_valid_symbol(symbol, reserved):
                raise ParseError(f"'{symbol}' is not a valid member of the {what}", line_no, line)
            target.add(symbol)

    def _parse_initial_state(self, line_no, line):
        if self.initial_state is not None:
            raise ParseError("duplicate initial state declaration", line_no, line)
        match = self._match(INITIAL_STATE_PATTERN, line_no, line, "initial state")
        self.initial_state = match.group(1)

    def _parse_blank_symbol(self, line_no, line):
        if self.blank is not None:
            raise ParseError("duplicate blank symbol declaration", line_no, line)
        match = self._match(BLANK_SYMBOL_PATTERN, line_no, line, "blank symbol")
        if match.group(1) != "_":
            raise ParseError("the blank symbol must be '_'", line_no, line)
        self.blank = match.group(1)

    def _parse_final_states(self, line_no, line):
        match = self._match(FINAL_STATES_PATTERN, line_no, line, "final states")
        for state in _split_items(match.group(1)):
            if not state:
                raise ParseError("empty final state name", line_no, line)
            self.final_states.add(state)

    def _parse_tape_count(self, line_no, line):
        if self.tape_count is not None:
            raise ParseError("duplicate tape count declaration", line_no, line)
        match = self._match(TAPE_COUNT_PATTERN, line_no, line, "tape count")
        tape_count = int(match.group(1))
        if tape_count < 1:
            raise ParseError("tape count must be at least 1", line_no, line)
        self.tape_count = tape_count

    def _parse_transition(self, line_no, line):
        fields = line.split()
        if len(fields) != 5:
            raise ParseError(f"a transition needs 5 fields, got {len(fields)}", line_no, line)
        self.raw_transitions.append((line_no, fields))

    def build(self):
        for value, flag in ((self.initial_state, "#q0"), (self.blank, "#B"), (self.tape_count, "#N")):
            if value is None:
                raise ParseError(f"missing {flag} declaration")

        vocabulary = Vocabulary(
            states=frozenset(self.states),
            input_symbols=frozenset(self.input_symbols),
            tape_symbols=frozenset(self.tape_symbols),
            initial_state=self.initial_state,
            final_states=frozenset(self.final_states),
            blank=self.blank,
            tape_count=self.tape_count,
        )

        transitions = []
        for line_no, (state, read, next_state, write, moves) in self.raw_transitions:
            try:
                transitions.append(Transition(state, read, next_state, write, parse_moves(moves), line_no))
            except DefinitionError as exc:
                exc.line_no = line_no
                raise
        return MachineDefinition.build(vocabulary, transitions)


def parse_definition(text):
    parser = DefinitionParser()
    for line_no, line in enumerate(text.splitlines(), start=1):
        parser.feed(line_no, line)
    return parser.build()


def load_definition(path):
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Machine description not found at: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return parse_definition(f.read())
