"""Orchestration logic for resolving class names from the command line."""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any

from src.class_loader import ClassLoader
from src.config_error import ConfigError
from src.detect_namespace import detect_namespace
from src.load_config import load_config
from src.resolution_report import ResolutionReport
from src.resolver_config import ResolverConfig

logger = logging.getLogger(__name__)


def run_resolution(args: argparse.Namespace) -> int:
    """Resolve every requested name and print candidates or found files."""
    try:
        config = build_config(args)
    except ConfigError as exc:
        raise SystemExit(str(exc)) from exc

    loader = ClassLoader(config)
    report = ResolutionReport(config) if args.report else None
    many = len(args.names) > 1
    missing = 0

    for name in args.names:
        result = loader.autoload(name)
        if report is not None:
            report.add_result(result)

        if result.skipped:
            logger.warning(
                "Skipping %s: outside namespace prefix %r",
                name,
                config.namespace_prefix,
            )
            continue

        if args.existing_only:
            if result.found:
                print(f"{name}: {result.loaded_path}" if many else result.loaded_path)
            else:
                missing += 1
                print(f"{name}: not found", file=sys.stderr)
            continue

        if many:
            print(f"{name}:")
        for candidate in result.candidates:
            print(f"  {candidate}" if many else candidate)

    if report is not None:
        report.generate_report(args.report)
        print(f"Report written to {args.report}", file=sys.stderr)

    return 1 if args.existing_only and missing else 0


def build_config(args: argparse.Namespace) -> ResolverConfig:
    """Merge defaults, the YAML file and command-line flags into a config.

    Precedence (lowest first): defaults, values detected from ``--entry-file``
    or the working directory, the configuration file, explicit flags.
    """
    settings = load_config(args.config, _flag_overrides(args))

    entry = Path(args.entry_file) if args.entry_file else None
    if settings.get("directory") is None:
        settings["directory"] = (
            str(entry.resolve().parent) if entry is not None else os.getcwd()
        )
    if settings.get("namespace_prefix") is None and entry is not None:
        detected = detect_namespace(entry)
        if detected is None:
            logger.warning("No namespace declaration found in %s", entry)
        settings["namespace_prefix"] = detected

    return ResolverConfig.from_mapping(settings)


def _flag_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Collect the flags that were actually given; None means "not set"."""
    return {
        "directory": args.directory,
        "namespace_prefix": args.namespace_prefix,
        "class_roots": args.class_root,
        "lowercase": args.lowercase,
        "hyphenate": args.hyphenate,
        "prepend_class": False if args.no_prepend_class else None,
        "prepend_interface": False if args.no_prepend_interface else None,
        "prepend_trait": False if args.no_prepend_trait else None,
        "prefix_match": args.prefix_match,
        "candidate_order": args.candidate_order,
        "debug": True if args.debug else None,
    }
