# tools/simulate_inputs.py

import argparse
import os
from pathlib import Path

from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn, TimeElapsedColumn

from logger.logger import JSONLogger
from simulator.definition_parser import load_definition
from simulator.evaluator import evaluate_batch
from simulator.results import Verdict


# === Utility Loaders ===
def load_inputs(inputs_file):
    """One input per line; the line is taken verbatim, so an empty line is the empty input."""
    with open(inputs_file, "r", encoding="utf-8") as f:
        return [line.rstrip("\n") for line in f]


def console_message(msg):
    print(f"[{Path.cwd().name}] {msg}")


# === Main Simulation Runner ===
def simulate_inputs(machine_file, inputs_file, output_directory, batch_size=256, max_steps=1000000,
                    log_file_prefix="results_"):
    definition = load_definition(machine_file)
    inputs = load_inputs(inputs_file)
    console_message(f"Loaded {len(inputs):,} inputs for {machine_file}.")

    results_log = JSONLogger(output_directory, log_file_prefix)
    counts = {verdict: 0 for verdict in Verdict}

    with Progress(
            SpinnerColumn(),
            BarColumn(),
            "[progress.percentage]{task.percentage:>3.0f}%",
            TextColumn("{task.completed}/{task.total} Inputs"),
            TimeElapsedColumn()
    ) as progress:

        task = progress.add_task("[cyan]Simulating...", total=len(inputs))

        for batch_start in range(0, len(inputs), batch_size):
            batch = inputs[batch_start:batch_start + batch_size]
            results = evaluate_batch(definition, batch, max_steps=max_steps)

            for result in results:
                counts[result.verdict] += 1

            # === BULK WRITE once per batch ===
            results_log.log_batch([dict(result.to_dict(), machine=str(machine_file)) for result in results])
            progress.update(task, advance=len(batch))

    output_file = os.path.join(results_log.output_directory, results_log.current_log)
    summary = ", ".join(f"{verdict.value}={count:,}" for verdict, count in counts.items())
    console_message(f"[SUCCESS] All inputs simulated ({summary}). Results saved to {output_file}.")
    return counts


# === CLI ===
def main():
    parser = argparse.ArgumentParser(description="Run one Turing machine over a file of inputs.")
    parser.add_argument("--machine", required=True, help="Path to the .tm machine description")
    parser.add_argument("--inputs", required=True, help="Path to the input file (one input per line)")
    parser.add_argument("--output_directory", default="results/", help="Directory for the daily JSON-lines results")
    parser.add_argument("--log_file_prefix", default="results_", help="Results file name prefix")
    parser.add_argument("--batch_size", type=int, default=256, help="Inputs evaluated between writes")
    parser.add_argument("--max_steps", type=int, default=1000000, help="Maximum steps per input (0 = unlimited)")
    args = parser.parse_args()

    simulate_inputs(
        args.machine,
        args.inputs,
        args.output_directory,
        batch_size=args.batch_size,
        max_steps=args.max_steps,
        log_file_prefix=args.log_file_prefix
    )


if __name__ == "__main__":
    main()
