"""Error types raised while scanning a schematic.

All of them are `ValueError` subclasses: they describe a fault in the input
or in the configured bounds, never a transient condition.
"""
from typing import TYPE_CHECKING

from .typings import Coord

if TYPE_CHECKING:
  from .typings import Token


class SchematicError(ValueError):
  """Base class for every scan failure."""


class MalformedInputError(SchematicError):
  def __init__(self, row: int, col: int, char: str) -> None:
    self.row = row
    self.col = col
    self.char = char
    super().__init__(f"unexpected character {char!r} at {Coord(row, col)}")


class CapacityExceededError(SchematicError):
  """A configured bound on gears, hits per gear, or lines was exceeded."""

  def __init__(self, message: str, *, limit: int) -> None:
    self.limit = limit
    super().__init__(f"{message} (limit={limit})")


class AmbiguousAdjacencyError(SchematicError):
  """A single number touches more than one gear marker."""

  def __init__(self, token: "Token", coords: tuple[Coord, ...]) -> None:
    self.token = token
    self.coords = coords
    where = ", ".join(str(c) for c in coords)
    super().__init__(
      f"number {token.value} at {token.start} borders {len(coords)} gears: {where}")
