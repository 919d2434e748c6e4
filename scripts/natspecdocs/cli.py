"""Documentation generator for Solidity interfaces.

Generates, for every configured interface unit:
    <output_file>  - template text followed by the NatSpec method reference

Exits 1 if any function is missing documentation, so CI fails on gaps,
and 2 if an input is missing or cannot be parsed.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import CONFIG_FILE, ROOT, DocgenConfig, default_config, load_config
from .errors import DocgenError
from .pipeline import generate_unit
from .sources import write_output
from .validators import DocReport


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="natspecdocs",
        description="Generate Markdown reference docs from Solidity NatSpec comments.",
    )
    parser.add_argument(
        "--root", type=Path, default=ROOT, help="Project root (default: %(default)s)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path(CONFIG_FILE) if CONFIG_FILE else None,
        help="JSON file listing interface units (default: built-in list)",
    )
    parser.add_argument(
        "--unit",
        action="append",
        default=[],
        help="Only generate the named unit, e.g. IColony (repeatable)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print documents instead of writing output files",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def _load(args: argparse.Namespace) -> DocgenConfig:
    root = args.root.resolve()
    config = load_config(args.config, root) if args.config else default_config(root)
    if args.unit:
        wanted = set(args.unit)
        units = [u for u in config.units if u.name in wanted]
        missing = wanted - {u.name for u in units}
        if missing:
            raise DocgenError(f"Unknown unit(s): {', '.join(sorted(missing))}")
        config = DocgenConfig(flatten_command=config.flatten_command, units=units)
    return config


def run(config: DocgenConfig, to_stdout: bool = False) -> DocReport:
    """Generate every unit; returns the combined quality report.

    Nothing is written until every unit has rendered, so a fatal error in
    any unit leaves all existing outputs untouched.
    """
    report = DocReport()
    results = []

    for unit in config.units:
        result = generate_unit(unit, config.flatten_command)
        report.merge(result.report)
        results.append(result)

        documented = sum(1 for m in result.methods if m.natspec.notice)
        print(
            f"  ✓ {unit.name}: {documented}/{len(result.methods)} functions"
            f" ({result.coverage:.0%})"
        )

    for result in results:
        if to_stdout:
            print(result.markdown)
        else:
            write_output(result.unit.output_file, result.markdown)
            print(f"    {result.unit.output_file}")

    return report


def main(argv: list[str] | None = None) -> int:
    """Generate all documentation."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _load(args)
        report = run(config, to_stdout=args.stdout)
    except DocgenError as e:
        print(f"\n✗ {e}", file=sys.stderr)
        return 2

    for warning in report.warnings:
        print(f"  ⚠ {warning}", file=sys.stderr)

    if report.failed:
        print("\nDocumentation errors:", file=sys.stderr)
        for err in report.errors:
            print(f"  ✗ {err}", file=sys.stderr)
        return 1

    print("\nDone!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
