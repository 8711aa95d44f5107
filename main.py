"""Small runner to scan a schematic file during development.

Prints the part-number sum and the gear-ratio sum, one per line, using
`schematic.cli` so the behavior matches the installed console script.
"""

import sys

from schematic.cli import main


if __name__ == "__main__":
  sys.exit(main())
