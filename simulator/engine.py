# simulator/engine.py

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from simulator.errors import IllegalInputError, NotAcceptedError, StepLimitExceededError
from simulator.results import RunResult, Verdict
from simulator.tape import TapeBank, TapeSnapshot


class Status(Enum):
    RUNNING = "running"
    ACCEPTED = "accepted"
    STOPPED = "stopped"


@dataclass(frozen=True)
class Snapshot:
    """What a trace needs at a step boundary: step count, current state and every tape window."""

    step: int
    state: str
    tapes: Tuple[TapeSnapshot, ...]

    def to_dict(self):
        return {"step": self.step, "state": self.state, "tapes": [tape.to_dict() for tape in self.tapes]}


class Simulator:
    """
    Runs one machine definition on one input.

    Build it with `Simulator.of`, which rejects inputs holding undeclared
    symbols. The simulator owns its tapes and current state for the single
    run it performs and is not meant to be reused.
    """

    def __init__(self, definition, input_string):
        self._definition = definition
        self._input = input_string
        self._tapes = TapeBank(definition.tape_count, definition.blank, input_string)
        self._state = definition.initial_state
        self._steps = 0
        self._status = Status.RUNNING
        self._result = None

    @classmethod
    def of(cls, definition, input_string) -> "Simulator":
        for position, symbol in enumerate(input_string):
            if not definition.accepts_symbol(symbol):
                raise IllegalInputError(symbol, position, input_string)
        return cls(definition, input_string)

    @property
    def state(self):
        return self._state

    @property
    def steps(self):
        return self._steps

    @property
    def status(self):
        return self._status

    @property
    def tapes(self):
        return self._tapes

    def snapshot(self):
        return Snapshot(self._steps, self._state, self._tapes.snapshot())

    def step(self):
        """Apply the transition relation once and return the resulting status."""
        if self._status is not Status.RUNNING:
            return self._status

        # A final state accepts even when further transitions exist from it.
        if self._definition.is_final(self._state):
            self._status = Status.ACCEPTED
            return self._status

        output = self._definition.lookup(self._state, self._tapes.read_all())
        if output is None:
            self._status = Status.STOPPED
            return self._status

        next_state, write, moves = output
        self._tapes.write_all(write, moves)
        self._state = next_state
        self._steps += 1
        return self._status

    def run(self, max_steps: Optional[int] = None, observer: Optional[Callable[[Snapshot], None]] = None) -> RunResult:
        """
        Step until the machine accepts or gets stuck.

        A positive `max_steps` stops a machine that would otherwise keep moving
        once that many transitions have been applied. `observer` receives a
        Snapshot before the first step and after every applied transition.
        """
        if self._result is not None:
            return self._result

        if observer is not None:
            observer(self.snapshot())

        while self._status is Status.RUNNING:
            if max_steps and self._steps >= max_steps and self._can_move():
                return self._finish(Verdict.STEP_LIMIT_EXCEEDED, StepLimitExceededError(max_steps, self._state))
            self.step()
            if observer is not None and self._status is Status.RUNNING:
                observer(self.snapshot())

        if self._status is Status.ACCEPTED:
            return self._finish(Verdict.ACCEPTED)
        return self._finish(Verdict.NOT_ACCEPTED, NotAcceptedError(self._state, self._tapes.read_all(), self._steps))

    def _can_move(self):
        if self._definition.is_final(self._state):
            return False
        return self._definition.lookup(self._state, self._tapes.read_all()) is not None

    def _finish(self, verdict, error=None):
        self._result = RunResult(
            verdict=verdict,
            input=self._input,
            output=self._tapes.result(),
            steps=self._steps,
            final_state=self._state,
            error=error,
        )
        return self._result
