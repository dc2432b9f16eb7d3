#!/usr/bin/env python3
"""Export region metadata from the phonenumbers library.

Usage:
    python scripts/export_metadata.py GB DE          # print YAML to stdout
    python scripts/export_metadata.py GB --out phonecheck/metadata/data

Generated files are a starting point: review the patterns and the
main-region flag before committing them.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure project root is on sys.path
sys.path.insert(0, ".")

from phonecheck.metadata.export import dump_region, export_region


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("regions", nargs="+", help="region codes, e.g. GB DE")
    parser.add_argument("--out", type=Path, help="directory to write <region>.yaml files into")
    args = parser.parse_args(argv)

    for region_code in args.regions:
        try:
            text = dump_region(export_region(region_code))
        except KeyError as exc:
            print(exc, file=sys.stderr)
            return 1

        if args.out is None:
            print(f"# {region_code.upper()}")
            print(text)
            continue

        args.out.mkdir(parents=True, exist_ok=True)
        path = args.out / f"{region_code.lower()}.yaml"
        path.write_text(text, encoding="utf-8")
        print(f"Wrote {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
