# app.py

import argparse
import sys

from config.config_loader import load_config
from logger.logger import JSONLogger, TraceRecorder
from logger.trace_format import Reporter
from simulator.definition_parser import load_definition
from simulator.engine import Simulator
from simulator.errors import DefinitionError, IllegalInputError, ParseError
from simulator.results import RunResult, Verdict

EXIT_CODES = {
    Verdict.ACCEPTED: 0,
    Verdict.NOT_ACCEPTED: 1,
    Verdict.STEP_LIMIT_EXCEEDED: 1,
    Verdict.ILLEGAL_INPUT: 2,
}


def build_parser():
    parser = argparse.ArgumentParser(prog="turing", description="Simulate a (multi-tape) Turing machine described in a .tm file")
    parser.add_argument("machine", help="Path to the .tm machine description")
    parser.add_argument("input", nargs="?", default="", help="Input string placed on tape 0 (default: empty)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print every step of the run")
    parser.add_argument("--config", help="Path to a JSON runtime config")
    parser.add_argument("--max-steps", type=int, help="Stop after this many steps (0 = unlimited)")
    parser.add_argument("--log", action="store_true", help="Append the run to the JSON-lines log")
    return parser


def run_machine(args, reporter=None):
    """Load, run and report one machine; returns the process exit code."""
    try:
        config = load_config(args.config)
    except (FileNotFoundError, TypeError, ValueError) as e:
        (reporter or Reporter(verbose=args.verbose)).error(f"Invalid configuration: {e}")
        return 1

    if args.verbose:
        config["verbose"] = True
    if args.max_steps is not None:
        config["max_steps"] = args.max_steps
    if args.log:
        config["log_runs"] = True

    reporter = reporter or Reporter(verbose=config["verbose"])

    if not args.machine.endswith(".tm"):
        reporter.error(f"Expected a .tm machine description, got: {args.machine}")
        return 2

    try:
        definition = load_definition(args.machine)
    except FileNotFoundError as e:
        reporter.error(str(e))
        return 1
    except (ParseError, DefinitionError) as e:
        reporter.report_error(e)
        return 1

    recorder = TraceRecorder() if config["log_runs"] and config["log_trace"] else None

    def observe(snapshot):
        reporter.step(snapshot)
        if recorder is not None:
            recorder(snapshot)

    try:
        simulator = Simulator.of(definition, args.input)
    except IllegalInputError as e:
        result = RunResult(verdict=Verdict.ILLEGAL_INPUT, input=args.input, error=e)
    else:
        reporter.run_started(args.input)
        result = simulator.run(max_steps=config["max_steps"], observer=observe)

    reporter.run_finished(result)

    if config["log_runs"]:
        json_logger = JSONLogger(config["output_directory"], config["log_file_prefix"])
        json_logger.log_run(args.machine, result)
        if recorder is not None:
            json_logger.log_trace(args.machine, args.input, recorder.snapshots)

    return EXIT_CODES[result.verdict]


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    sys.exit(run_machine(args))


if __name__ == "__main__":
    main()
