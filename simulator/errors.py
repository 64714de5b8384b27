# simulator/errors.py

class TuringError(Exception):
    """Base class for every error raised or reported by the simulator."""

    message = "turing error"


# === Load-time errors ===
class ParseError(TuringError):
    message = "syntax error"

    def __init__(self, reason, line_no=None, line=None):
        self.reason = reason
        self.line_no = line_no
        self.line = line
        if line_no is None:
            super().__init__(reason)
        else:
            super().__init__(f"line {line_no}: {reason}: {line!r}")


class DefinitionError(TuringError):
    message = "invalid machine definition"
    line_no = None

    def __str__(self):
        text = super().__str__()
        if self.line_no is not None:
            return f"line {self.line_no}: {text}"
        return text


class InvalidVocabularyError(DefinitionError):
    pass


class UndeclaredStateError(DefinitionError):
    def __init__(self, state, where="transition"):
        self.state = state
        super().__init__(f"state '{state}' used in {where} was not declared")


class UndeclaredSymbolError(DefinitionError):
    def __init__(self, symbol, where="transition"):
        self.symbol = symbol
        super().__init__(f"symbol '{symbol}' used in {where} was not declared in the tape symbols")


class TransitionArityError(DefinitionError):
    def __init__(self, field, actual, expected):
        self.field = field
        self.actual = actual
        self.expected = expected
        super().__init__(f"{field} has length {actual}, expected {expected} (one per tape)")


class InvalidMoveError(DefinitionError):
    def __init__(self, char):
        self.char = char
        super().__init__(f"invalid move '{char}', expected one of 'l', 'r', '*'")


class DuplicateTransitionError(DefinitionError):
    """Two transitions share a (state, read-symbols) key but disagree on the output."""

    def __init__(self, key, existing, incoming):
        self.key = key
        self.existing = existing
        self.incoming = incoming
        state, symbols = key
        super().__init__(
            f"duplicate transition for state '{state}' reading '{symbols}': "
            f"{_describe_output(existing)} conflicts with {_describe_output(incoming)}"
        )


# === Run-time outcomes ===
class IllegalInputError(TuringError):
    message = "illegal input"

    def __init__(self, symbol, position, input_string):
        self.symbol = symbol
        self.position = position
        self.input = input_string
        super().__init__(f"'{symbol}' at position {position} was not declared in the set of input symbols")

    def caret(self):
        """Marker line that points at the offending character when printed under the input."""
        return " " * self.position + "^"


class NotAcceptedError(TuringError):
    message = "not accepted"

    def __init__(self, state, symbols, step):
        self.state = state
        self.symbols = symbols
        self.step = step
        super().__init__(f"no transition from state '{state}' reading '{symbols}' after {step} steps")


class StepLimitExceededError(TuringError):
    message = "step limit exceeded"

    def __init__(self, max_steps, state):
        self.max_steps = max_steps
        self.state = state
        super().__init__(f"machine still running in state '{state}' after {max_steps:,} steps")


def _describe_output(output):
    next_state, write, moves = output
    return f"({next_state}, {write}, {''.join(move.char for move in moves)})"
