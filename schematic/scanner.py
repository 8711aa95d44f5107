"""Scan helpers: the part-1 and part-2 sums over a schematic.

`scan_part1` and `scan_part2` are the public entry points; `scan` runs both
and wraps the results in a `ScanReport`. `SchematicScanner` keeps a config
around for callers that scan many schematics with the same bounds.
"""
import logging
from collections.abc import Sequence

from pydantic import BaseModel

from .consts import DEFAULT_CONFIG, ScannerConfig
from .errors import AmbiguousAdjacencyError
from .gears import GearAggregator
from .grid import Grid, is_gear_marker, is_symbol
from .tokens import iter_tokens
from .utils import PathLike, read_schematic

logger = logging.getLogger(__name__)


class ScanReport(BaseModel):
  part1: int
  part2: int
  token_count: int
  gear_count: int
  source: str | None = None


def _as_grid(lines: Sequence[str] | Grid, config: ScannerConfig) -> Grid:
  if isinstance(lines, Grid):
    lines.check(config)
    return lines
  return Grid.from_lines(lines, config)


def sum_part_numbers(grid: Grid) -> int:
  """Sum every number that borders at least one symbol."""
  total = 0
  for token in iter_tokens(grid):
    if grid.probe(token.row, token.col, token.length, is_symbol):
      total += token.value
  return total


def collect_gears(grid: Grid, config: ScannerConfig = DEFAULT_CONFIG) -> GearAggregator:
  """Record each number against the single gear marker it borders.

  Raises `AmbiguousAdjacencyError` when a number borders several markers.
  """
  gears = GearAggregator(config)
  for token in iter_tokens(grid):
    result = grid.probe(token.row, token.col, token.length, is_gear_marker)
    if result.count > 1:
      raise AmbiguousAdjacencyError(token, result.hits)
    if result.last_hit is not None:
      gears.record(result.last_hit, token.value)
  return gears


def scan_part1(lines: Sequence[str] | Grid, config: ScannerConfig = DEFAULT_CONFIG) -> int:
  return sum_part_numbers(_as_grid(lines, config))


def scan_part2(lines: Sequence[str] | Grid, config: ScannerConfig = DEFAULT_CONFIG) -> int:
  return collect_gears(_as_grid(lines, config), config).total_gear_ratio()


def scan(lines: Sequence[str] | Grid, config: ScannerConfig = DEFAULT_CONFIG, *, source: str | None = None) -> ScanReport:
  grid = _as_grid(lines, config)
  part1 = sum_part_numbers(grid)
  gears = collect_gears(grid, config)
  report = ScanReport(
    part1=part1,
    part2=gears.total_gear_ratio(),
    token_count=sum(1 for _ in iter_tokens(grid)),
    gear_count=len(gears.gears()),
    source=source,
  )
  logger.debug("scanned %s: %d tokens, %d gears", source or "<lines>", report.token_count, report.gear_count)
  return report


class SchematicScanner:
  """A tiny wrapper binding a `ScannerConfig` to the scan functions."""

  config: ScannerConfig

  def __init__(self, config: ScannerConfig | None = None) -> None:
    self.config = config or DEFAULT_CONFIG

  def part1(self, lines: Sequence[str] | Grid) -> int:
    return scan_part1(lines, self.config)

  def part2(self, lines: Sequence[str] | Grid) -> int:
    return scan_part2(lines, self.config)

  def scan(self, lines: Sequence[str] | Grid, *, source: str | None = None) -> ScanReport:
    return scan(lines, self.config, source=source)

  def scan_file(self, path: PathLike) -> ScanReport:
    return self.scan(read_schematic(path), source=str(path))
