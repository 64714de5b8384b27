"""Shared fixtures for the simulator test-suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from simulator.turing_machine import MachineDefinition, Transition, Vocabulary, parse_moves

MACHINES_DIR = Path(__file__).resolve().parent.parent / "machines"


def _transition(line: str) -> Transition:
    state, read, next_state, write, moves = line.split()
    return Transition(state, read, next_state, write, parse_moves(moves))


@pytest.fixture
def machines_dir() -> Path:
    return MACHINES_DIR


@pytest.fixture
def make_vocabulary():
    def factory(
        states=("q0", "qf"),
        input_symbols=("1",),
        tape_symbols=("1", "_"),
        initial_state="q0",
        final_states=("qf",),
        tape_count=1,
    ) -> Vocabulary:
        return Vocabulary(
            states=frozenset(states),
            input_symbols=frozenset(input_symbols),
            tape_symbols=frozenset(tape_symbols),
            initial_state=initial_state,
            final_states=frozenset(final_states),
            tape_count=tape_count,
        )

    return factory


@pytest.fixture
def make_definition(make_vocabulary):
    """Build a MachineDefinition from transition lines like 'q0 1 q0 1 r'."""

    def factory(lines, **vocabulary_kwargs) -> MachineDefinition:
        vocabulary = make_vocabulary(**vocabulary_kwargs)
        return MachineDefinition.build(vocabulary, [_transition(line) for line in lines])

    return factory


@pytest.fixture
def unary_increment(make_definition) -> MachineDefinition:
    return make_definition(["q0 1 q0 1 r", "q0 _ qf 1 *"])
