# simulator/results.py

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from simulator.errors import TuringError


class Verdict(Enum):
    ACCEPTED = "accepted"
    NOT_ACCEPTED = "not_accepted"
    ILLEGAL_INPUT = "illegal_input"
    STEP_LIMIT_EXCEEDED = "step_limit_exceeded"


@dataclass(frozen=True)
class RunResult:
    """Outcome of one run: the tape-0 output on acceptance, otherwise the error that ended it."""

    verdict: Verdict
    input: str
    output: str = ""
    steps: int = 0
    final_state: Optional[str] = None
    error: Optional[TuringError] = None

    @property
    def ok(self):
        return self.verdict is Verdict.ACCEPTED

    def to_dict(self):
        entry = {
            "input": self.input,
            "verdict": self.verdict.value,
            "output": self.output,
            "steps": self.steps,
            "final_state": self.final_state,
        }
        if self.error is not None:
            entry["error"] = str(self.error)
        return entry
