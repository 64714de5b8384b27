"""Tests for simulator.tape."""

from __future__ import annotations

import pytest

from simulator.tape import Tape, TapeBank, TapeSnapshot
from simulator.turing_machine import Move


class TestTapeRead:
    def test_empty_tape_reads_blank(self) -> None:
        tape = Tape(0, "_")
        assert tape.read() == "_"
        assert (tape.start, tape.stop) == (0, 0)

    def test_read_outside_bounds_does_not_grow(self) -> None:
        tape = Tape(0, "_", "ab")
        for position in (-5, -1, 2, 100):
            assert tape.at(position) == "_"
        assert (tape.start, tape.stop) == (0, 2)
        assert tape.contents == "ab"

    def test_head_past_right_edge_reads_blank(self) -> None:
        tape = Tape(0, "_", "a")
        tape.write("a", Move.RIGHT)
        assert tape.head == 1
        assert tape.read() == "_"
        assert len(tape) == 1


class TestTapeWrite:
    def test_write_returns_new_head(self) -> None:
        tape = Tape(0, "_", "ab")
        assert tape.write("x", Move.RIGHT) == 1
        assert tape.write("y", Move.STAY) == 1
        assert tape.write("z", Move.LEFT) == 0
        assert tape.contents == "xz"

    def test_grows_left_and_shifts_start(self) -> None:
        tape = Tape(0, "_", "ab")
        tape.write("x", Move.LEFT)
        tape.write("y", Move.STAY)
        assert tape.start == -1
        assert tape.stop == 2
        assert tape.contents == "yxb"
        assert tape.at(-1) == "y"
        assert tape.at(1) == "b"

    def test_grows_right_with_single_cell(self) -> None:
        tape = Tape(0, "_", "ab")
        tape.write("a", Move.RIGHT)
        tape.write("b", Move.RIGHT)
        tape.write("c", Move.STAY)
        assert tape.contents == "abc"
        assert (tape.start, tape.stop) == (0, 3)

    def test_long_leftward_walk_keeps_positions(self) -> None:
        tape = Tape(0, "_")
        for _ in range(100):
            tape.write("a", Move.LEFT)
        assert tape.start == -99
        assert tape.stop == 1
        assert tape.result() == "a" * 100
        assert tape.head == -100

    def test_bounds_grow_by_at_most_one_cell_per_write(self) -> None:
        tape = Tape(0, "_", "01")
        moves = [Move.LEFT] * 7 + [Move.RIGHT] * 20 + [Move.STAY] * 3 + [Move.LEFT] * 30
        previous = tape.stop - tape.start
        for move in moves:
            tape.write("1", move)
            size = tape.stop - tape.start
            assert 0 <= size - previous <= 1
            previous = size

    def test_existing_cells_keep_their_values_when_growing_left(self) -> None:
        tape = Tape(0, "_", "abc")
        before = {position: tape.at(position) for position in range(0, 3)}
        tape.write("a", Move.LEFT)
        for _ in range(10):
            tape.write("_", Move.LEFT)
        for position in (1, 2):
            assert tape.at(position) == before[position]


class TestTapeResult:
    def test_trims_blank_runs(self) -> None:
        assert Tape(0, "_", "__ab_c__").result() == "ab_c"

    def test_all_blank_is_empty(self) -> None:
        assert Tape(0, "_", "___").result() == ""
        assert Tape(0, "_").result() == ""


class TestTapeSnapshot:
    def test_window_covers_content(self) -> None:
        assert Tape(0, "_", "ab").snapshot() == TapeSnapshot(0, 0, 0, "ab")

    def test_window_widens_to_head(self) -> None:
        tape = Tape(2, "_", "ab")
        tape.write("a", Move.RIGHT)
        tape.write("b", Move.RIGHT)
        tape.write("_", Move.RIGHT)
        snapshot = tape.snapshot()
        assert snapshot == TapeSnapshot(2, 0, 3, "ab__")
        assert list(snapshot.positions) == [0, 1, 2, 3]

    def test_window_skips_blank_margin(self) -> None:
        snapshot = Tape(0, "_", "__a").snapshot()
        assert snapshot.start == 0
        assert snapshot.symbols == "__a"
        tape = Tape(0, "_", "__a")
        tape.write("_", Move.RIGHT)
        tape.write("_", Move.RIGHT)
        assert tape.snapshot() == TapeSnapshot(0, 2, 2, "a")

    def test_all_blank_shows_head_cell(self) -> None:
        tape = Tape(1, "_", "_")
        tape.write("_", Move.LEFT)
        assert tape.snapshot() == TapeSnapshot(1, -1, -1, "_")


class TestTapeBank:
    def test_first_tape_holds_input(self) -> None:
        bank = TapeBank(3, "_", "01")
        assert len(bank) == 3
        assert bank.read_all() == "0__"
        assert bank[0].contents == "01"
        assert bank[1].contents == "_"

    def test_write_all_moves_every_head(self) -> None:
        bank = TapeBank(3, "_", "01")
        heads = bank.write_all("xyz", (Move.RIGHT, Move.LEFT, Move.STAY))
        assert heads == [1, -1, 0]
        assert bank.read_all() == "1_z"
        assert bank.result() == "x1"

    def test_mismatched_lengths_leave_tapes_untouched(self) -> None:
        bank = TapeBank(2, "_", "a")
        with pytest.raises(ValueError):
            bank.write_all("x", (Move.RIGHT,))
        assert bank[0].contents == "a"
        assert [tape.head for tape in bank] == [0, 0]

    def test_rejects_zero_tapes(self) -> None:
        with pytest.raises(ValueError):
            TapeBank(0, "_")

    def test_snapshot_orders_tapes(self) -> None:
        snapshots = TapeBank(2, "_", "ab").snapshot()
        assert [snapshot.index for snapshot in snapshots] == [0, 1]
