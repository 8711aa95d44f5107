"""Top-level package exports for the schematic scanner.

Expose a small, stable API so callers can `from schematic import scan_part1, scan_part2`.
"""

from .consts import LEGACY_LIMITS, ScannerConfig
from .errors import AmbiguousAdjacencyError, CapacityExceededError, MalformedInputError, SchematicError
from .grid import Grid
from .scanner import ScanReport, SchematicScanner, scan, scan_part1, scan_part2

__all__ = [
  "AmbiguousAdjacencyError",
  "CapacityExceededError",
  "Grid",
  "LEGACY_LIMITS",
  "MalformedInputError",
  "ScanReport",
  "ScannerConfig",
  "SchematicError",
  "SchematicScanner",
  "scan",
  "scan_part1",
  "scan_part2",
]
