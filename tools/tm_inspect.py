# tools/tm_inspect.py

import argparse

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from simulator.definition_parser import load_definition

console = Console()


def describe_definition(definition):
    """Plain-text listing of a machine, wildcard transitions shown expanded."""
    vocabulary = definition.vocabulary
    transitions = "\n".join(f"    {transition}" for transition in definition.transitions)
    return "\n".join([
        "TuringState {",
        f"  symbols: {' '.join(sorted(vocabulary.input_symbols))}",
        f"  states: {' '.join(sorted(vocabulary.states))}",
        f"  tapeSymbols: {' '.join(sorted(vocabulary.tape_symbols))}",
        f"  initialState: {vocabulary.initial_state}",
        f"  blankSymbol: {vocabulary.blank}",
        f"  finalStates: {' '.join(sorted(vocabulary.final_states))}",
        f"  tapeCount: {vocabulary.tape_count}",
        "  transitions:",
        transitions,
        f"  totalTransitions: {len(definition.transitions)}",
        "}",
    ])


def transition_table(definition):
    """Build a rich Table with one row per concrete transition."""
    table = Table(title="Transition Table", show_header=True, header_style="bold magenta")
    table.add_column("State")
    table.add_column("Read", justify="center")
    table.add_column("Next State")
    table.add_column("Write", justify="center")
    table.add_column("Moves", justify="center")

    for transition in definition.transitions:
        state_style = "green" if definition.is_final(transition.next_state) else "white"
        table.add_row(
            transition.state,
            escape(transition.read),
            f"[{state_style}]{transition.next_state}[/{state_style}]",
            escape(transition.write),
            "".join(move.char for move in transition.moves),
        )
    return table


def main():
    parser = argparse.ArgumentParser(description="Turing Machine Definition Inspector")
    parser.add_argument("machine", help="Path to the .tm machine description")
    parser.add_argument("--plain", action="store_true", help="Print the plain listing instead of a table")
    args = parser.parse_args()

    definition = load_definition(args.machine)

    if args.plain:
        console.print(describe_definition(definition), markup=False, highlight=False)
        return

    vocabulary = definition.vocabulary
    console.print(f"[INFO] Machine {args.machine}", markup=False)
    console.print(f"  States: {', '.join(sorted(vocabulary.states))}", markup=False)
    console.print(f"  Input Symbols: {', '.join(sorted(vocabulary.input_symbols))}", markup=False)
    console.print(f"  Tape Symbols: {', '.join(sorted(vocabulary.tape_symbols))}", markup=False)
    console.print(f"  Initial State: {vocabulary.initial_state}", markup=False)
    console.print(f"  Final States: {', '.join(sorted(vocabulary.final_states))}", markup=False)
    console.print(f"  Tapes: {vocabulary.tape_count}", markup=False)
    console.print(transition_table(definition))


if __name__ == "__main__":
    main()
