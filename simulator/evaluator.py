from simulator.engine import Simulator
from simulator.errors import IllegalInputError
from simulator.results import RunResult, Verdict


def evaluate(definition, input_string, max_steps=None, observer=None):
    """
    Run `definition` on `input_string` and fold every outcome into a RunResult.

    Illegal input, rejection and the step limit all come back as verdicts;
    only definition problems, which are caught when the machine is built,
    surface as exceptions.
    """
    try:
        simulator = Simulator.of(definition, input_string)
    except IllegalInputError as exc:
        return RunResult(verdict=Verdict.ILLEGAL_INPUT, input=input_string, error=exc)
    return simulator.run(max_steps=max_steps, observer=observer)


def evaluate_batch(definition, inputs, max_steps=None):
    """Evaluate each input on a fresh simulator; results keep the order of `inputs`."""
    return [evaluate(definition, input_string, max_steps=max_steps) for input_string in inputs]
