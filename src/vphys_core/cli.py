"""``vphys2tri`` — convert a .vphys collision file to a flat .tri triangle dump.

Also runnable as ``python -m vphys_core``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .collision import convert
from .document import Document
from .errors import VphysCoreError


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="vphys2tri",
        description="Convert a Source 2 .vphys (KV3 text) collision shape into a .tri triangle dump.",
    )
    p.add_argument("input", help="Input .vphys file")
    p.add_argument("-o", "--output", default="", help="Output .tri path (defaults to the input with a .tri suffix)")
    p.add_argument(
        "--get",
        action="append",
        default=[],
        metavar="PATH",
        help="Print the value at a dotted path (e.g. m_parts[0].m_rnShape.m_hulls[0].m_nCollisionAttributeIndex) instead of converting. Repeatable.",
    )
    verbosity = p.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log parse and decode progress")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    return p


def _configure_logging(args: argparse.Namespace) -> None:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    input_path = Path(args.input)
    if not input_path.is_file() or input_path.suffix.lower() != ".vphys":
        print(f"[error] invalid or missing .vphys file: {input_path}", file=sys.stderr)
        return 2
    output_path = Path(args.output) if args.output else input_path.with_suffix(".tri")

    try:
        doc = Document.from_text(input_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, VphysCoreError) as exc:
        print(f"[error] {input_path}: {exc}", file=sys.stderr)
        return 1

    if args.get:
        for path in args.get:
            print(f"{path} = {doc.get(path)}")
        return 0

    report = convert(doc)
    try:
        report.triangles.save(output_path)
    except OSError as exc:
        print(f"[error] {output_path}: {exc}", file=sys.stderr)
        return 1

    for failure in report.failures:
        print(f"[warn] {failure}", file=sys.stderr)
    print(
        "[ok] tri "
        f"hulls={report.hulls_converted}/{report.hulls_total} "
        f"meshes={report.meshes_converted}/{report.meshes_total} "
        f"triangles={len(report.triangles)} "
        f"output={output_path}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
