from dataclasses import asdict
from pathlib import Path
import tomllib

from pydantic.dataclasses import dataclass as pydantic_dataclass

DIGITS = tuple("0123456789")
PERIOD = "."
GEAR_MARKER = "*"

# MAX_GEARS = 1000
# MAX_HITS_PER_GEAR = 9
# MAX_LINES = 200


@pydantic_dataclass(frozen=True)
class ScannerConfig:
  """Validated immutable configuration for a schematic scan.

  Every bound defaults to `None`, meaning unbounded: gear records and their
  hit lists grow as needed. Set a bound to reject schematics that exceed it.
  """
  max_gears: int | None = None
  max_hits_per_gear: int | None = None
  max_lines: int | None = None
  strict_ascii: bool = False

  def __post_init__(self):
    # pydantic already ran basic type validation; now apply domain rules.
    for name in ("max_gears", "max_hits_per_gear", "max_lines"):
      value = getattr(self, name)
      if value is not None and value <= 0:
        raise ValueError(f'{name} must be positive, got {value}')

  @property
  def bounded(self) -> bool:
    return any(v is not None for v in (self.max_gears, self.max_hits_per_gear, self.max_lines))

  def serialize(self) -> dict:
    return asdict(self)

  @classmethod
  def deserialize(cls, data: dict) -> 'ScannerConfig':
    return cls(**data)

  @classmethod
  def load(cls, path: str | Path, table: str = "scanner") -> 'ScannerConfig':
    """Load a config from the `[scanner]` table of a TOML file.

    A missing table yields the default configuration.
    """
    with open(path, "rb") as fh:
      data = tomllib.load(fh)
    return cls.deserialize(data.get(table, {}))


DEFAULT_CONFIG = ScannerConfig()
LEGACY_LIMITS = ScannerConfig(max_gears=1000, max_hits_per_gear=9, max_lines=200)
