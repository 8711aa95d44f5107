from pathlib import Path
from typing import TypeAlias

PathLike: TypeAlias = str | Path

# stays below the interpreter's default int/str conversion limit (4300 digits)
_CHUNK_DIGITS = 1000
_CHUNK_BASE = 10 ** _CHUNK_DIGITS


def parse_digits(digits: str) -> int:
  """Base-10 value of a digit run of any length."""
  if len(digits) <= _CHUNK_DIGITS:
    return int(digits)
  value = 0
  for i in range(0, len(digits), _CHUNK_DIGITS):
    chunk = digits[i:i + _CHUNK_DIGITS]
    value = value * 10 ** len(chunk) + int(chunk)
  return value


def format_digits(value: int) -> str:
  """Inverse of `parse_digits` for non-negative values of any size."""
  if value < _CHUNK_BASE:
    return str(value)
  chunks: list[str] = []
  while value >= _CHUNK_BASE:
    value, rest = divmod(value, _CHUNK_BASE)
    chunks.append(str(rest).zfill(_CHUNK_DIGITS))
  chunks.append(str(value))
  return "".join(reversed(chunks))


def read_schematic(path: PathLike) -> list[str]:
  """Read a schematic file into rows with line endings stripped.

  Rows are split on `\\n` only; other control characters stay in the row.
  """
  with open(path, "r", encoding="utf8", newline="\n") as fh:
    return [line.removesuffix("\n").removesuffix("\r") for line in fh]
