"""CLI entrypoint for cname-finder."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from rich.console import Console
from rich.text import Text

from .config import DEFAULT_OUTPUT, DEFAULT_WORKERS, FinderConfig
from .errors import ConfigError, InputError, OutputError, ResolverConfigError
from .logging_utils import configure_logging, get_logger
from .pipeline import run_pipeline
from .presentation import print_banner
from .validation import parse_duration

EXAMPLES = """Examples:
  cnfinder -l subdomains.txt -o results.txt
  cat subdomains.txt | cnfinder -l - -o results.txt
"""


def _duration(value: str) -> float:
    try:
        return parse_duration(value)
    except ConfigError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(
        prog="cnfinder",
        description="Resolve CNAME records for a list of subdomains concurrently.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-l",
        "--list",
        dest="input_path",
        help="Input file with one subdomain per line, or '-' for stdin.",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT,
        help="Output file (each line: domain > cname).",
    )
    parser.add_argument(
        "--timeout",
        type=_duration,
        default=5.0,
        help="DNS query timeout, e.g. 3s, 500ms.",
    )
    parser.add_argument(
        "-t",
        "--threads",
        dest="workers",
        type=int,
        default=DEFAULT_WORKERS,
        help="Number of concurrent workers (default: CPUs).",
    )
    parser.add_argument(
        "-a",
        "--append",
        action="store_true",
        help="Append to output instead of truncating.",
    )
    parser.add_argument(
        "--dedup", action="store_true", help="Resolve each distinct subdomain only once."
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar instead of one status line per subdomain.",
    )
    parser.add_argument("--no-banner", action="store_true", help="Do not print the banner.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI input."""
    return build_parser().parse_args(argv)


def namespace_to_config(args: argparse.Namespace) -> FinderConfig:
    """Convert CLI args to validated FinderConfig."""
    return FinderConfig(
        input_path=args.input_path,
        output=args.output,
        timeout=args.timeout,
        workers=args.workers,
        append=bool(args.append),
        dedup=bool(args.dedup),
        show_progress=bool(args.progress),
    )


def main(argv: Sequence[str] | None = None, *, console: Console | None = None) -> int:
    """CLI entrypoint."""
    args = parse_args(argv)
    configure_logging(args.verbose)
    logger = get_logger()
    out = console or Console(highlight=False, soft_wrap=True)
    if not args.no_banner:
        print_banner(out)

    try:
        config = namespace_to_config(args)
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    try:
        run_pipeline(config, logger=logger, console=out)
    except InputError as exc:
        out.print(Text(f"[-] {exc}", style="red"))
        if config.input_path is None:
            build_parser().print_help()
        return 1
    except (OutputError, ResolverConfigError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
