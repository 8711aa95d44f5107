"""Command line runner: scan schematic files and print both sums."""
import argparse
import logging
import sys
from collections.abc import Sequence

from tqdm import tqdm

from .consts import ScannerConfig
from .errors import SchematicError
from .scanner import ScanReport, SchematicScanner
from .utils import format_digits

logger = logging.getLogger(__name__)

EXIT_SCHEMATIC_ERROR = 1
EXIT_IO_ERROR = 2

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(prog="schematic", description="Sum part numbers and gear ratios of engine schematics.")
  parser.add_argument("files", nargs="+", help="schematic text files")
  parser.add_argument("--config", help="TOML file with a [scanner] table")
  parser.add_argument("--json", action="store_true", help="print one JSON report per file")
  parser.add_argument("--log-level", default="WARNING", type=str.upper, choices=LOG_LEVELS,
                      help="logging level (default: %(default)s)")
  return parser


def print_report(report: ScanReport, *, as_json: bool, header: bool) -> None:
  if as_json:
    print(report.model_dump_json())
    return
  if header:
    print(f"==> {report.source} <==")
  print(format_digits(report.part1))
  print(format_digits(report.part2))


def main(argv: Sequence[str] | None = None) -> int:
  args = build_parser().parse_args(argv)
  logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

  try:
    config = ScannerConfig.load(args.config) if args.config else ScannerConfig()
  except OSError as e:
    print(f"cannot read config {args.config}: {e}", file=sys.stderr)
    return EXIT_IO_ERROR
  except ValueError as e:
    print(f"invalid config {args.config}: {e}", file=sys.stderr)
    return EXIT_SCHEMATIC_ERROR

  scanner = SchematicScanner(config)
  many = len(args.files) > 1
  reports: list[ScanReport] = []
  for path in tqdm(args.files, desc="Scanning schematics", disable=not many):
    try:
      reports.append(scanner.scan_file(path))
    except OSError as e:
      print(f"cannot read {path}: {e}", file=sys.stderr)
      return EXIT_IO_ERROR
    except SchematicError as e:
      logger.debug("scan of %s failed", path, exc_info=True)
      print(f"{path}: {e}", file=sys.stderr)
      return EXIT_SCHEMATIC_ERROR

  for report in reports:
    print_report(report, as_json=args.json, header=many)
  return 0
