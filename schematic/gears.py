"""Gear bookkeeping: which numbers border each `*` cell."""
from collections.abc import Iterator
from dataclasses import dataclass, field
from math import prod

from .consts import DEFAULT_CONFIG, ScannerConfig
from .errors import CapacityExceededError
from .typings import Coord

GEAR_PART_COUNT = 2


@dataclass
class GearRecord:
  """Numbers found next to one gear marker, in scan order."""
  coord: Coord
  values: list[int] = field(default_factory=list)

  @property
  def is_gear(self) -> bool:
    """A marker is only a gear when exactly two numbers border it."""
    return len(self.values) == GEAR_PART_COUNT

  @property
  def ratio(self) -> int:
    return prod(self.values) if self.is_gear else 0


class GearAggregator:
  """Maps gear coordinates to the numbers recorded against them.

  Records are created on the first hit for a coordinate and only ever
  appended to afterwards. Bounds come from `ScannerConfig`; `None` leaves a
  dimension unbounded.
  """

  def __init__(self, config: ScannerConfig = DEFAULT_CONFIG) -> None:
    self.config = config
    self._records: dict[Coord, GearRecord] = {}

  def record(self, coord: Coord | tuple[int, int], value: int) -> GearRecord:
    coord = Coord(*coord)
    rec = self._records.get(coord)
    if rec is None:
      max_gears = self.config.max_gears
      if max_gears is not None and len(self._records) >= max_gears:
        raise CapacityExceededError("too many gears registered", limit=max_gears)
      rec = self._records[coord] = GearRecord(coord)
    max_hits = self.config.max_hits_per_gear
    if max_hits is not None and len(rec.values) >= max_hits:
      raise CapacityExceededError(f"too many numbers for gear at {coord}", limit=max_hits)
    rec.values.append(value)
    return rec

  def get(self, coord: Coord | tuple[int, int]) -> GearRecord | None:
    return self._records.get(Coord(*coord))

  def gears(self) -> list[GearRecord]:
    """Return the records that qualify as gears."""
    return [rec for rec in self._records.values() if rec.is_gear]

  def total_gear_ratio(self) -> int:
    return sum(rec.ratio for rec in self._records.values() if rec.is_gear)

  def __iter__(self) -> Iterator[GearRecord]:
    return iter(self._records.values())

  def __len__(self) -> int:
    return len(self._records)

  def __contains__(self, coord: object) -> bool:
    return coord in self._records
