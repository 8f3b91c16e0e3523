"""Render the Homebrew tap formula for a release.

Usage:
    render-tap-formula <version> <darwin_sha256> <linux_sha256> > Formula/app.rb

The template is read from ``tap-template`` or, failing that,
``./scripts/release/tap-template``; the rendered formula goes to stdout.
"""
from __future__ import annotations
import argparse
import logging
from typing import NoReturn, Sequence

from tap_formula.common.config import ConfigError, load_config
from tap_formula.common.logging_setup import setup_logging
from tap_formula.common.schema import FormulaArgs
from tap_formula.common.templates import (
    TemplateMissingError,
    load_template,
    missing_placeholders,
    render_formula,
)

LOGGER = logging.getLogger("tapformula.cli")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Render the Homebrew tap formula to stdout")
    ap.add_argument("version", nargs="?", help="Release version, e.g. 1.2.3")
    ap.add_argument("darwin_sha256", nargs="?", help="sha256 of the macOS archive")
    ap.add_argument("linux_sha256", nargs="?", help="sha256 of the Linux archive")
    ap.add_argument("extra", nargs="*", help=argparse.SUPPRESS)
    ap.add_argument("--config", help="YAML config path")
    ap.add_argument(
        "--template",
        action="append",
        dest="templates",
        metavar="PATH",
        help="Template candidate path; may be repeated, tried in order",
    )
    ap.add_argument("--strict", action="store_true", help="Fail if a placeholder is absent from the template")
    ap.add_argument("--verbose", action="store_true", help="Debug logging on stderr")
    return ap


def _fail(message: str) -> NoReturn:
    print(message)
    raise SystemExit(1)


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_intermixed_args(argv)

    formula_args = FormulaArgs(args.version, args.darwin_sha256, args.linux_sha256)
    missing = formula_args.first_missing()
    if missing is not None:
        _fail(f"{missing} is missing")

    setup_logging("DEBUG" if args.verbose else "WARNING")
    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        _fail(str(e))
    if not args.verbose:
        setup_logging(cfg.log_level)
    if args.extra:
        LOGGER.debug("Ignoring extra arguments: %s", args.extra)

    paths = args.templates or cfg.template_paths
    try:
        template = load_template(paths)
    except TemplateMissingError as e:
        LOGGER.debug("Tried template paths: %s", e.tried)
        _fail(str(e))

    if args.strict:
        absent = missing_placeholders(template)
        if absent:
            _fail(f"template did not contain {absent[0]}")

    print(render_formula(template, formula_args))

if __name__ == "__main__":
    main()
