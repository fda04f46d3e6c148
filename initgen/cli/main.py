"""
CLI entry point for initgen.

Usage
─────
  # Which fixes apply at the first reported initializer?
  initgen actions request.json

  # Fill it from local variables and print the new document
  initgen apply request.json --action locals

  # Sample values for every empty initializer, single-line layout
  initgen apply request.json --action sample --all --single-line --output Out.cs

Subcommands are implemented as standalone functions (cmd_actions,
cmd_apply) so they can be unit-tested without invoking argparse.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from initgen.exceptions import InitGenError
from initgen.fixer.orchestrator import FixOrchestrator
from initgen.resolver.models import ResolutionStrategy
from initgen.syntax.render import FormatConfig
from .request import FixRequest, load_request

__all__ = ["build_parser", "cmd_actions", "cmd_apply", "main"]

logger = logging.getLogger(__name__)

ACTION_CHOICES: dict[str, ResolutionStrategy] = {
    "locals": ResolutionStrategy.LOCALS,
    "sample": ResolutionStrategy.SCAFFOLDING,
    "lambda": ResolutionStrategy.LAMBDA_PARAMETER,
}


# ── Argument parser ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Subcommands: actions | apply
    """
    parser = argparse.ArgumentParser(
        prog="initgen",
        description="Fill empty object initializers from locals, lambda parameters or sample values",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable verbose debug logging",
    )

    sub = parser.add_subparsers(dest="subcommand")

    # ── actions ───────────────────────────────────────────────────────────
    act = sub.add_parser("actions", help="List fixes offered at a location")
    act.add_argument("request", metavar="REQUEST", help="Path to the JSON fix request")
    act.add_argument(
        "--at",
        type=int,
        default=None,
        metavar="OFFSET",
        help="Character offset inside the initializer (default: first site)",
    )

    # ── apply ─────────────────────────────────────────────────────────────
    app = sub.add_parser("apply", help="Apply a fix and print the new document")
    app.add_argument("request", metavar="REQUEST", help="Path to the JSON fix request")
    app.add_argument(
        "--action",
        required=True,
        choices=sorted(ACTION_CHOICES),
        help="locals | sample | lambda",
    )
    app.add_argument(
        "--at",
        type=int,
        default=None,
        metavar="OFFSET",
        help="Character offset inside the initializer (default: first site)",
    )
    app.add_argument(
        "--all",
        action="store_true",
        default=False,
        dest="fix_all",
        help="Apply to every empty initializer in the document",
    )
    app.add_argument(
        "--output",
        default=None,
        metavar="FILE",
        help="Write the document here instead of stdout",
    )
    app.add_argument(
        "--single-line",
        action="store_true",
        default=False,
        help="Render the initializer on one line",
    )
    app.add_argument(
        "--indent",
        type=int,
        default=None,
        metavar="N",
        help="Spaces per indentation level (default: INITGEN_INDENT_SIZE or 4)",
    )

    return parser


# ── Helpers ───────────────────────────────────────────────────────────────────


def _format_config(single_line: bool, indent: Optional[int]) -> FormatConfig:
    """Environment defaults, overridden by explicit flags."""
    config = FormatConfig.from_env()
    if single_line:
        config.multiline = False
    if indent is not None:
        config.indent = " " * indent
    return config


def _location(request: FixRequest, at: Optional[int]) -> Optional[int]:
    return at if at is not None else request.default_location()


# ── Command implementations ───────────────────────────────────────────────────


def cmd_actions(request: FixRequest, at: Optional[int]) -> list[str]:
    """Print and return the titles of the fixes offered at `at`."""
    location = _location(request, at)
    titles: list[str] = []
    if location is not None:
        orchestrator = FixOrchestrator(request.host)
        titles = [a.title for a in orchestrator.offer_fixes(request.document, location)]
    if not titles:
        print("No empty initializer at this location.")
    for title in titles:
        print(title)
    return titles


def cmd_apply(
    request: FixRequest,
    action: str,
    at: Optional[int],
    fix_all: bool,
    output: Optional[str],
    config: Optional[FormatConfig] = None,
) -> str:
    """
    Apply one fix (or fix-all) and emit the resulting document.

    Returns the new document text.  An action that is not offered at the
    location leaves the document unchanged.
    """
    strategy = ACTION_CHOICES[action]
    orchestrator = FixOrchestrator(request.host, config)
    document = request.document

    if fix_all:
        new_document = orchestrator.fix_all(document, strategy)
    else:
        location = _location(request, at)
        offered = orchestrator.offer_fixes(document, location) if location is not None else []
        chosen = next((a for a in offered if a.strategy is strategy), None)
        if chosen is None:
            logger.warning("Action %r is not available here", action)
            new_document = document
        else:
            new_document = chosen.apply()

    if output:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(new_document, encoding="utf-8")
        logger.info("Document written to %s", out_path)
    else:
        sys.stdout.write(new_document)
        if not new_document.endswith("\n"):
            sys.stdout.write("\n")
    return new_document


# ── Entry point ───────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point. Returns exit code."""
    parser = build_parser()
    ns = parser.parse_args(argv)

    level = logging.DEBUG if ns.debug else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    if ns.subcommand is None:
        parser.print_help()
        return 0

    try:
        request = load_request(ns.request)
        if ns.subcommand == "actions":
            cmd_actions(request, at=ns.at)
            return 0
        if ns.subcommand == "apply":
            cmd_apply(
                request,
                action=ns.action,
                at=ns.at,
                fix_all=ns.fix_all,
                output=ns.output,
                config=_format_config(ns.single_line, ns.indent),
            )
            return 0
    except InitGenError as exc:
        logger.debug("%s failed", ns.subcommand, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
