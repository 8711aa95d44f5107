from dataclasses import dataclass, field
from typing import NamedTuple, TypeAlias, TypeVar

import numpy as np


_ScalarT = TypeVar('_ScalarT', bound=np.generic)
NDArray1D: TypeAlias = np.ndarray[tuple[int], np.dtype[_ScalarT]]
NDArray2D: TypeAlias = np.ndarray[tuple[int, int], np.dtype[_ScalarT]]


class Coord(NamedTuple):
  """A (row, col) cell position; hashable so it can key the gear map."""
  row: int
  col: int

  def __str__(self) -> str:
    return f"{self.row}/{self.col}"


@dataclass(frozen=True)
class Token:
  """A maximal run of digits inside one row.

  `col` is the column of the first digit and `length` the number of digits,
  so the token covers columns `col .. col + length - 1`.
  """
  row: int
  col: int
  length: int
  value: int

  @property
  def end(self) -> int:
    """Column just past the last digit."""
    return self.col + self.length

  @property
  def start(self) -> Coord:
    return Coord(self.row, self.col)


@dataclass(frozen=True)
class ProbeResult:
  """Matches found around a token, in row-major scan order."""
  hits: tuple[Coord, ...] = field(default_factory=tuple)

  @property
  def count(self) -> int:
    return len(self.hits)

  @property
  def last_hit(self) -> Coord | None:
    return self.hits[-1] if self.hits else None

  def __bool__(self) -> bool:
    return bool(self.hits)
