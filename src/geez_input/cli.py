#!/usr/bin/env python3
"""
Geez phonetic keyboard CLI.

Loads table overrides from geez_input.toml when present, or pass --config:

    python -m geez_input.cli --type "selam"
    python -m geez_input.cli --explain "kwa"
    python -m geez_input.cli --guide
    python -m geez_input.cli --check --config geez_input.toml
"""

import argparse
import logging
import sys
import tomllib
from pathlib import Path

from geez_input.log import log_with_context, setup_logging


logger = logging.getLogger("geez_input.cli")


def _find_default_config() -> Path | None:
    """Look for geez_input.toml in CWD."""
    candidate = Path("geez_input.toml")
    if candidate.exists():
        return candidate
    return None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Type Geez (Ethiopic) script with Latin phonetic keys"
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Path to TOML table overrides (default: auto-detect geez_input.toml)",
    )
    parser.add_argument(
        "--type",
        metavar="KEYS",
        dest="keys",
        help="Replay KEYS as keystrokes and print the resulting text",
    )
    parser.add_argument(
        "--explain",
        metavar="KEYS",
        help="Replay KEYS and show which rule fired on every keystroke",
    )
    parser.add_argument(
        "--guide",
        action="store_true",
        help="Print the phonetic guide (Latin sequence = glyph)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Check table integrity; exit 1 on failure",
    )
    parser.add_argument(
        "--report",
        metavar="FILE",
        help="Write table findings to a TSV file (use with --check)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-format",
        default="pretty",
        choices=["pretty", "json"],
        help="Log line format (default: pretty)",
    )
    args = parser.parse_args(argv)

    if not (args.keys or args.explain or args.guide or args.check):
        parser.print_help()
        return 2

    setup_logging(args.log_level, args.log_format)

    # ── Build engine ─────────────────────────────────────────────────────

    from geez_input.engine import GeezEngine

    config_path = Path(args.config) if args.config else _find_default_config()
    if config_path is None:
        engine = GeezEngine()
    else:
        try:
            engine = GeezEngine.from_config(config_path)
        except (OSError, ValueError, tomllib.TOMLDecodeError) as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1

    status = 0

    # ── Type ─────────────────────────────────────────────────────────────

    if args.keys:
        from geez_input.binding import type_keys

        print(type_keys(args.keys, engine).transformed_value)

    # ── Explain ──────────────────────────────────────────────────────────

    if args.explain:
        from geez_input.engine import TransformStats

        print(f"═══ Keystrokes for '{args.explain}' ═══")
        before = ""
        for key in args.explain:
            result = engine.transform(before, "", key)
            stats = TransformStats.from_result(key, before, result)
            action = "replace" if result.is_replacement else "append "
            print(
                f"  {key!r:5s} {stats.transform_type.value:16s} {action} "
                f"{stats.output_char!r:6s} → {result.transformed_value}"
            )
            log_with_context(
                logger, "debug", "keystroke",
                key=key, rule=stats.transform_type.value, output=stats.output_char,
            )
            before = result.transformed_value[:result.new_cursor_position]
        print()

    # ── Guide ────────────────────────────────────────────────────────────

    if args.guide:
        from geez_input.guide import format_guide, phonetic_guide

        entries = phonetic_guide(engine)
        print(f"═══ Phonetic guide ({len(entries)} syllables) ═══")
        print(format_guide(entries))
        print()

    # ── Check ────────────────────────────────────────────────────────────

    if args.check:
        from geez_input.coverage import check_tables

        print(engine.summary())
        print()
        report = check_tables(engine.tables)
        print(report.summary())
        if args.report:
            report.write_tsv(Path(args.report))
            print(f"\nFindings written to {args.report}")
        if not report.ok:
            status = 1

    return status


if __name__ == "__main__":
    sys.exit(main())
