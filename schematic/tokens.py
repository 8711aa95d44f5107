import re
from collections.abc import Iterator

from .grid import Grid
from .typings import Token
from .utils import parse_digits

# ASCII digits only; `\d` would also accept other Unicode digits
_DIGIT_RUN = re.compile(r"[0-9]+")


def iter_tokens(grid: Grid) -> Iterator[Token]:
  """Yield every digit run in row-major, left-to-right order.

  Runs never cross a row boundary. Leading zeros are ignored by the integer
  conversion, so "007" has value 7 and length 3. Runs of any length are
  accepted.
  """
  for row, line in enumerate(grid.rows):
    for match in _DIGIT_RUN.finditer(line):
      start, end = match.span()
      yield Token(row=row, col=start, length=end - start, value=parse_digits(match.group()))
