"""Resolve namespaced PHP class names to the files that should define them.

Class files follow the WordPress naming conventions: folder and file names may
be lowercased and hyphenated, and files carry a ``class-``, ``interface-`` or
``trait-`` prefix. Candidates are printed in lookup order.
"""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from src.resolver_config import CANDIDATE_ORDERS, PREFIX_MATCH_MODES
from src.run_resolution import run_resolution

FORMAT_TARGET_CHOICES = ("file", "folders", "none")


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    ap.add_argument(
        "names",
        nargs="+",
        metavar="NAME",
        help="Qualified class name, e.g. Acme\\Sub_Module\\My_Class",
    )
    ap.add_argument("--config", help="Path to a YAML configuration file")
    ap.add_argument(
        "--directory",
        help="Base directory of the class roots (default: entry file's folder or cwd)",
    )
    ap.add_argument(
        "--namespace-prefix",
        help="Namespace prefix owned by this resolver (default: from --entry-file)",
    )
    ap.add_argument(
        "--entry-file",
        type=Path,
        help="Source file whose namespace declaration gives the default prefix",
    )
    ap.add_argument(
        "--class-root",
        action="append",
        help="Class root under the base directory (repeatable, default: . vendor)",
    )
    ap.add_argument(
        "--lowercase",
        action="append",
        choices=FORMAT_TARGET_CHOICES,
        help="Lowercase file names and/or folders (repeatable, default: file)",
    )
    ap.add_argument(
        "--hyphenate",
        action="append",
        choices=FORMAT_TARGET_CHOICES,
        help="Convert underscores to hyphens (repeatable, default: file)",
    )
    ap.add_argument(
        "--no-prepend-class",
        action="store_true",
        help="Do not look for 'class-' prefixed files",
    )
    ap.add_argument(
        "--no-prepend-interface",
        action="store_true",
        help="Do not look for 'interface-' prefixed files",
    )
    ap.add_argument(
        "--no-prepend-trait",
        action="store_true",
        help="Do not look for 'trait-' prefixed files",
    )
    ap.add_argument("--prefix-match", choices=PREFIX_MATCH_MODES)
    ap.add_argument("--candidate-order", choices=CANDIDATE_ORDERS)
    ap.add_argument(
        "--existing-only",
        action="store_true",
        help="Print only the first candidate that exists on disk",
    )
    ap.add_argument("--report", help="Write a JSON report of all lookups to a file")
    ap.add_argument(
        "--debug",
        action="store_true",
        help="Log resolution details and failed lookups",
    )
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    """Run the resolver CLI."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_resolution(args)


if __name__ == "__main__":
    raise SystemExit(main())
