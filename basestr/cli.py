"""
Command-line driver: classify the annotated names of a stub module.

Usage:
    # Classify every annotated name
    python -m basestr types.py

    # Classify selected names, flagging callables
    python -m basestr types.py handler label --reject-functions

    # Pass rule options as JSON and show offending constituents
    python -m basestr types.py --options '{"ignoredTypeNames": ["Money"]}' --explain
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Sequence

from .classifier import classify, offending_constituents
from .config import Configuration
from .lattice import Usefulness
from .structural import STRUCTURAL_ORACLE, canonical_name
from .stubs import StubError, StubModule, load_stub_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="basestr",
        description="Report annotated names whose values would stringify to the default placeholder.",
    )
    parser.add_argument("stub", help="stub module declaring classes and annotated names")
    parser.add_argument("names", nargs="*", help="annotated names to classify (default: all)")
    parser.add_argument("--options", help='rule options as JSON, e.g. \'{"rejectFunctions": true}\'')
    parser.add_argument("--ignore-type", action="append", default=[], metavar="NAME",
                        help="extra type name to treat as always useful (repeatable)")
    parser.add_argument("--reject-functions", action="store_true", help="report callable values")
    parser.add_argument("--explain", action="store_true", help="list offending constituents")
    return parser


def build_configuration(args: argparse.Namespace) -> Configuration:
    options = None if args.options is None else json.loads(args.options)
    if options is not None and not isinstance(options, dict):
        raise ValueError("options must be a JSON object")
    config = Configuration.from_options(options)
    if args.reject_functions:
        config = config.with_reject_functions()
    if len(args.ignore_type) > 0:
        config = config.with_ignored(*args.ignore_type)
    return config


def check_module(module: StubModule, config: Configuration, names: Sequence[str] = ()) -> dict[str, Usefulness]:
    selected = tuple(names) if len(names) > 0 else module.names()
    return dict((name, classify(module.value(name), config, STRUCTURAL_ORACLE)) for name in selected)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = build_configuration(args)
    except ValueError as exc:
        parser.error(f"bad --options: {exc}")

    try:
        module = load_stub_file(args.stub)
        verdicts = check_module(module, config, args.names)
    except (StubError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    findings = 0
    for name, verdict in verdicts.items():
        print(f"{name}: {verdict.name.lower()}")
        if not verdict.is_finding:
            continue
        findings += 1
        if args.explain:
            offenders = offending_constituents(module.value(name), config, STRUCTURAL_ORACLE)
            print(f"  offending: {', '.join(canonical_name(t) for t in offenders)}")

    return 1 if findings > 0 else 0
