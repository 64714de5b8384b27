# logger/trace_format.py

from rich.console import Console
from rich.markup import escape

from simulator.results import Verdict

RULE_WIDTH = 45
TRACE_SEPARATOR = "-" * RULE_WIDTH


def banner(title):
    padding = (RULE_WIDTH - len(title) - 2) // 2
    return f"{'=' * padding} {title} {'=' * padding}"


def format_tape(tape):
    """Three aligned rows (positions, symbols, head marker) for one TapeSnapshot."""
    columns = []
    for position, symbol in zip(tape.positions, tape.symbols):
        cells = [str(position), symbol, "^" if position == tape.head else " "]
        width = max(len(cell) for cell in cells)
        columns.append([cell.ljust(width) for cell in cells])

    rows = [" ".join(column[row] for column in columns) for row in range(3)]
    return "\n".join([
        f"Index{tape.index} : {rows[0]}",
        f"Tape{tape.index}  : {rows[1]}",
        f"Head{tape.index}  : {rows[2]}",
    ])


def format_step(snapshot):
    lines = [f"Step   : {snapshot.step}", f"State  : {snapshot.state}"]
    lines.extend(format_tape(tape) for tape in snapshot.tapes)
    lines.append(TRACE_SEPARATOR)
    return "\n".join(lines)


def format_illegal_input(error):
    return "\n".join([
        f"Input: {error.input}",
        banner("ERR"),
        f"error: '{error.symbol}' was not declared in the set of input symbols",
        f"Input: {error.input}",
        f"       {error.caret()}",
        banner("END"),
    ])


class Reporter:
    """
    Console output for a run.

    In verbose mode every step is rendered in full; otherwise only the result
    goes to stdout and problems are summarised on stderr.
    """

    def __init__(self, verbose=False, console=None, error_console=None):
        self.verbose = verbose
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.error_console = error_console or Console(stderr=True, highlight=False, soft_wrap=True)

    def info(self, message):
        self.console.print(message, markup=False, emoji=False)

    def error(self, message):
        self.error_console.print(f"[red]{escape(message)}[/red]")

    def run_started(self, input_string):
        if self.verbose:
            self.info(f"Input: {input_string}\n{banner('RUN')}")

    def step(self, snapshot):
        if self.verbose:
            self.info(format_step(snapshot))

    def illegal_input(self, error):
        if self.verbose:
            self.error_console.print(format_illegal_input(error), markup=False, emoji=False)
        else:
            self.error(error.message)

    def report_error(self, error):
        if self.verbose:
            self.error(f"{error.message}: {error}")
        else:
            self.error(error.message)

    def run_finished(self, result):
        if result.verdict is Verdict.ILLEGAL_INPUT:
            self.illegal_input(result.error)
            return

        if self.verbose:
            self.info(f"Result: {result.output}\n{banner('END')}")
        else:
            self.info(result.output)

        if result.error is not None:
            self.report_error(result.error)
