"""Character grid for engine schematics and the neighborhood prober.

The grid keeps the original rows and a padded 2-D numpy character array so a
probe can test a whole window slice with one vectorized predicate. Rows may
have different lengths; padding cells are never inspected because every
probe clips columns against the scanned row's own length.
"""
import logging
from collections.abc import Callable, Iterator, Sequence

import numpy as np

from .consts import DEFAULT_CONFIG, DIGITS, GEAR_MARKER, PERIOD, ScannerConfig
from .errors import CapacityExceededError, MalformedInputError
from .typings import Coord, NDArray1D, NDArray2D, ProbeResult

logger = logging.getLogger(__name__)

# element-wise predicate over a slice of grid characters
Predicate = Callable[[np.ndarray], np.ndarray]


def is_digit(cells: np.ndarray) -> np.ndarray:
  return np.isin(cells, DIGITS)


def is_symbol(cells: np.ndarray) -> np.ndarray:
  """Anything that is neither a digit nor a period."""
  return (cells != PERIOD) & ~is_digit(cells)


def is_gear_marker(cells: np.ndarray) -> np.ndarray:
  return cells == GEAR_MARKER


class Grid:
  """Read-only view over the rows of a schematic."""

  rows: tuple[str, ...]
  cells: NDArray2D[np.str_]
  row_lengths: NDArray1D[np.int64]

  def __init__(self, lines: Sequence[str]) -> None:
    self.rows = tuple(lines)
    self.row_lengths = np.array([len(line) for line in self.rows], dtype=np.int64)
    width = int(self.row_lengths.max()) if len(self.rows) else 0
    self.cells = np.full((len(self.rows), width), '', dtype='<U1')
    for r, line in enumerate(self.rows):
      if line:
        self.cells[r, :len(line)] = list(line)
    self.cells.flags.writeable = False

  @classmethod
  def from_lines(cls, lines: Sequence[str], config: ScannerConfig = DEFAULT_CONFIG) -> 'Grid':
    """Build a grid, enforcing the line bound and character checks of `config`."""
    lines = list(lines)
    _check_lines(lines, config)
    grid = cls(lines)
    logger.debug("loaded grid with %d rows, widest row %d", grid.height, grid.width)
    return grid

  def check(self, config: ScannerConfig) -> None:
    """Raise if this grid violates the line bound or character checks of `config`."""
    _check_lines(self.rows, config)

  @property
  def height(self) -> int:
    return len(self.rows)

  @property
  def width(self) -> int:
    return self.cells.shape[1]

  def row_length(self, row: int) -> int:
    return int(self.row_lengths[row])

  def __len__(self) -> int:
    return self.height

  def __iter__(self) -> Iterator[str]:
    return iter(self.rows)

  def __getitem__(self, pos: Coord | tuple[int, int]) -> str:
    row, col = pos
    if not (0 <= row < self.height and 0 <= col < self.row_length(row)):
      raise IndexError(f"cell {row}/{col} out of range")
    return self.rows[row][col]

  def probe(self, row: int, col: int, length: int, predicate: Predicate) -> ProbeResult:
    """Return every cell matching `predicate` around a row segment.

    The window covers one row above and below and one column either side of
    columns `col .. col + length - 1`, clipped to the grid: rows to
    `0 .. height - 1` and, per scanned row, columns to that row's length.
    Hits are reported in row-major order, so `last_hit` is the last match.
    """
    hits: list[Coord] = []
    first_row = max(0, row - 1)
    last_row = min(self.height - 1, row + 1)
    for r in range(first_row, last_row + 1):
      lo = max(0, col - 1)
      hi = min(self.row_length(r) - 1, col + length)
      if hi < lo:
        continue
      matched = np.flatnonzero(predicate(self.cells[r, lo:hi + 1]))
      hits.extend(Coord(r, lo + int(j)) for j in matched)
    return ProbeResult(tuple(hits))


def _check_lines(lines: Sequence[str], config: ScannerConfig) -> None:
  if config.max_lines is not None and len(lines) > config.max_lines:
    raise CapacityExceededError(f"schematic has {len(lines)} lines", limit=config.max_lines)
  if config.strict_ascii:
    _check_ascii(lines)


def _check_ascii(lines: Sequence[str]) -> None:
  for r, line in enumerate(lines):
    if line.isascii() and line.isprintable():
      continue
    for c, ch in enumerate(line):
      if not (ch.isascii() and ch.isprintable()):
        raise MalformedInputError(r, c, ch)
