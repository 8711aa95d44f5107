import numpy as np
import pytest

from schematic.consts import ScannerConfig
from schematic.errors import CapacityExceededError, MalformedInputError
from schematic.grid import Grid, is_digit, is_gear_marker, is_symbol
from schematic.typings import Coord


EXAMPLE = [
  "467..114..",
  "...*......",
  "..35..633.",
  "......#...",
  "617*......",
  ".....+.58.",
  "..592.....",
  "......755.",
  "...$.*....",
  ".664.598..",
]


def test_predicates():
  cells = np.array(list("a.1#*9"))
  assert is_digit(cells).tolist() == [False, False, True, False, False, True]
  assert is_symbol(cells).tolist() == [True, False, False, True, True, False]
  assert is_gear_marker(cells).tolist() == [False, False, False, False, True, False]


def test_grid_shape_and_ragged_rows():
  g = Grid(["..*", "1", ""])
  assert g.height == 3
  assert g.width == 3
  assert [g.row_length(r) for r in range(3)] == [3, 1, 0]
  assert list(g) == ["..*", "1", ""]
  assert g[0, 2] == "*"
  with pytest.raises(IndexError):
    g[1, 2]


def test_grid_cells_are_read_only():
  g = Grid(EXAMPLE)
  with pytest.raises(ValueError):
    g.cells[0, 0] = "#"


def test_empty_grid():
  g = Grid([])
  assert g.height == 0
  assert g.width == 0


def test_probe_finds_symbol_below():
  g = Grid(EXAMPLE)
  res = g.probe(0, 0, 3, is_symbol)
  assert res.count == 1
  assert res.last_hit == Coord(1, 3)
  assert res.hits == ((1, 3),)


def test_probe_without_match():
  g = Grid(EXAMPLE)
  res = g.probe(0, 5, 3, is_symbol)
  assert res.count == 0
  assert res.last_hit is None
  assert not res


def test_probe_reports_last_match_in_scan_order():
  g = Grid(["*.*", ".1.", "..."])
  res = g.probe(1, 1, 1, is_gear_marker)
  assert res.count == 2
  assert res.hits == (Coord(0, 0), Coord(0, 2))
  assert res.last_hit == Coord(0, 2)


def test_probe_includes_cell_right_after_token():
  # token "12" covers columns 0..1; column 2 is the right-hand border
  assert Grid(["12#"]).probe(0, 0, 2, is_symbol).count == 1
  assert Grid(["12.#"]).probe(0, 0, 2, is_symbol).count == 0


def test_probe_includes_cell_left_of_token():
  assert Grid(["#12"]).probe(0, 1, 2, is_symbol).count == 1
  assert Grid(["#.12"]).probe(0, 2, 2, is_symbol).count == 0


def test_probe_single_cell_grid():
  assert Grid(["5"]).probe(0, 0, 1, is_symbol).count == 0
  assert Grid(["*"]).probe(0, 0, 1, is_gear_marker).hits == (Coord(0, 0),)


def test_probe_clips_to_each_row_length():
  # padding cells would count as symbols if they were inspected
  assert Grid(["..*", "1", ""]).probe(1, 0, 1, is_symbol).count == 0
  assert Grid(["*", "..1"]).probe(1, 2, 1, is_gear_marker).count == 0


def test_probe_at_grid_corners():
  g = Grid(["1.#", "...", "#.2"])
  assert g.probe(0, 0, 1, is_symbol).count == 0
  assert g.probe(2, 2, 1, is_symbol).count == 0
  g = Grid(["1#", "#2"])
  assert g.probe(0, 0, 1, is_symbol).hits == (Coord(0, 1), Coord(1, 0))
  assert g.probe(1, 1, 1, is_symbol).hits == (Coord(0, 1), Coord(1, 0))


def test_from_lines_enforces_max_lines():
  with pytest.raises(CapacityExceededError) as exc:
    Grid.from_lines(["1", "2", "3"], ScannerConfig(max_lines=2))
  assert exc.value.limit == 2
  assert Grid.from_lines(["1", "2"], ScannerConfig(max_lines=2)).height == 2


def test_from_lines_strict_ascii():
  config = ScannerConfig(strict_ascii=True)
  with pytest.raises(MalformedInputError) as exc:
    Grid.from_lines(["..1", ".é."], config)
  assert (exc.value.row, exc.value.col) == (1, 1)
  with pytest.raises(MalformedInputError):
    Grid.from_lines(["1\t#"], config)
  # lenient by default
  assert Grid.from_lines([".é."]).height == 1
