"""Command-line entry point: parse, group and report on a log file."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence

from .backends import BackendError, OllamaBackend
from .embedding import EmbeddingGenerator
from .grouper import LogGrouper, get_stats
from .ingest import LogParser
from .models import LogLevel
from .output import format_json, format_text

VERSION = "0.1.0"


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text!r}")
    return value


def _format_elapsed(seconds: float) -> str:
    if seconds >= 1:
        return f"{seconds:.2f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.2f}ms"
    if seconds >= 1e-6:
        return f"{seconds * 1e6:.2f}µs"
    return f"{seconds * 1e9:.2f}ns"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``log-reasoner`` command."""
    parser = argparse.ArgumentParser(
        prog="log-reasoner", description="AI-powered log analysis tool"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    commands = parser.add_subparsers(dest="command", required=True)

    analyze = commands.add_parser(
        "analyze", help="Analyze a log file and generate insights"
    )
    analyze.add_argument("file", metavar="FILE", help="Path to the log file")
    analyze.add_argument(
        "-t", "--top", type=_non_negative_int, default=5,
        help="Number of top patterns to display",
    )
    analyze.add_argument(
        "-m", "--min-count", type=_non_negative_int, default=1,
        help="Minimum occurrences to report a pattern",
    )
    analyze.add_argument(
        "-o", "--output", default="text", help="Output format (text or json)"
    )
    analyze.add_argument(
        "--errors-only", action="store_true", help="Show only ERROR level logs"
    )
    return parser


def _try_embeddings(groups) -> None:
    backend = OllamaBackend()
    try:
        backend.check_available()
    except BackendError as exc:
        print(f"⚠ Warning: Ollama not available: {exc}", file=sys.stderr)
        print("  Continuing with pattern-based grouping only...\n", file=sys.stderr)
        return

    print("\n✓ Ollama detected, generating embeddings...")
    start = time.perf_counter()
    try:
        embeddings = EmbeddingGenerator(backend).embed_groups(groups)
    except BackendError as exc:
        print(f"⚠ Warning: Failed to generate embeddings: {exc}", file=sys.stderr)
        print("  Continuing with pattern-based grouping only...\n", file=sys.stderr)
        return
    print(f"✓ Generated embeddings ({_format_elapsed(time.perf_counter() - start)})")
    if embeddings:
        print(f"  Embedding dimension: {len(embeddings[0][1])}")


def analyze_logs(
    file_path: str,
    top_n: int,
    min_count: int,
    output_format: str,
    errors_only: bool,
) -> int:
    """Analyse the log at ``file_path`` and print a report; return an exit status."""
    print(f"Log Reasoner v{VERSION}")
    print(f"Analyzing: {file_path}\n")

    start = time.perf_counter()
    try:
        events = LogParser().parse_file(file_path)
    except OSError:
        print(f"✗ Error parsing logs: Failed to open log file: {file_path}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as exc:
        print(f"✗ Error parsing logs: {exc}", file=sys.stderr)
        return 1
    elapsed = _format_elapsed(time.perf_counter() - start)
    print(f"✓ Parsed {len(events)} log events ({elapsed})")

    if errors_only:
        events = [event for event in events if event.level is LogLevel.ERROR]
        print(f"✓ Filtered to {len(events)} ERROR events")

    start = time.perf_counter()
    groups = LogGrouper().group_events(events)
    group_time = _format_elapsed(time.perf_counter() - start)
    groups = [group for group in groups if group.count >= min_count]

    stats = get_stats(groups)
    print(f"✓ Grouped into {stats.unique_patterns} unique patterns ({group_time})")

    _try_embeddings(groups)

    if output_format == "json":
        print(format_json(groups, stats, top_n))
    else:
        print(format_text(groups, stats, top_n))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line with ``argv`` (defaults to ``sys.argv[1:]``)."""
    args = build_parser().parse_args(argv)
    if args.command == "analyze":
        return analyze_logs(
            args.file, args.top, args.min_count, args.output, args.errors_only
        )
    return 2