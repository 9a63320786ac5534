"""CLI command for equalizing labeled weights.

Usage:
    python -m src.cli.equalize_weights KEY=VALUE [KEY=VALUE ...] [options]

Arguments:
    KEY=VALUE: One labeled weight per argument (e.g., fortress=70)

Options:
    --target: Target sum (default: 100.0)
    --format: Output format, table or json (default: table)
    --show-trace: Include intermediate stage values in the output
    --log-level: Logging level (default: WARNING)

Example:
    python -m src.cli.equalize_weights a=1 b=2 c=-3 --target 10

Exit codes:
    0: Success
    1: Weights could not be equalized
"""

import argparse
import json
import logging
import sys
from typing import Optional

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from src.cli.logging_setup import setup_logging
from src.config.parameters import DEFAULT_PARAMETERS
from src.equalizer.engine import WeightEqualizer
from src.equalizer.errors import EqualizerError
from src.models.weights import EqualizationRequest, EqualizationResult

logger = logging.getLogger(__name__)


def parse_weight_pair(text: str) -> tuple[str, float]:
    """Parse a KEY=VALUE argument into a (key, weight) pair.

    Raises:
        argparse.ArgumentTypeError: If the text is not KEY=VALUE with a numeric value
    """
    key, sep, raw_value = text.partition("=")
    key = key.strip()
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got {text!r}")
    try:
        value = float(raw_value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Weight for {key!r} is not a number: {raw_value!r}"
        ) from exc
    return key, value


def configure_equalize_parser(parser: argparse.ArgumentParser) -> None:
    """Register equalize arguments on the given parser."""
    parser.add_argument(
        "weights",
        nargs="+",
        type=parse_weight_pair,
        metavar="KEY=VALUE",
        help="Labeled weights to equalize (e.g., alpha=3 beta=1.5)",
    )
    parser.add_argument(
        "--target",
        type=float,
        default=DEFAULT_PARAMETERS.default_target_sum,
        help=f"Target sum (default: {DEFAULT_PARAMETERS.default_target_sum})",
    )
    parser.add_argument(
        "--format",
        choices=["table", "json"],
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--show-trace",
        action="store_true",
        help="Include intermediate stage values in the output",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )


def run_equalize_command(args: argparse.Namespace) -> int:
    """Execute the equalize command.

    Args:
        args: Parsed arguments from configure_equalize_parser

    Returns:
        Exit code (0 for success, 1 for errors)
    """
    setup_logging(level=args.log_level)

    weights: dict[str, float] = {}
    for key, value in args.weights:
        if key in weights:
            logger.error("Duplicate weight key: %s", key)
            return 1
        weights[key] = value

    try:
        request = EqualizationRequest(weights=weights, target_sum=args.target)
        result = WeightEqualizer().equalize(request)
    except ValidationError as exc:
        logger.error("Invalid weights: %s", exc)
        return 1
    except EqualizerError as exc:
        logger.error("Equalization failed: %s", exc)
        return 1

    if args.format == "json":
        print(format_json(result, show_trace=args.show_trace))
    else:
        print_table(weights, result, show_trace=args.show_trace)
    return 0


def format_json(result: EqualizationResult, show_trace: bool = False) -> str:
    """Render the equalized weights (and optionally the trace) as JSON."""
    payload: dict = {"weights": result.weights, "target_sum": result.target_sum}
    if show_trace:
        payload["trace"] = result.trace.model_dump(mode="json")
    return json.dumps(payload, indent=2)


def print_table(
    original: dict[str, float],
    result: EqualizationResult,
    show_trace: bool = False,
    console: Optional[Console] = None,
) -> None:
    """Print input and equalized weights side by side."""
    console = console or Console()

    table = Table(
        title="Equalized Weights", show_header=True, header_style="bold magenta"
    )
    table.add_column("Key", style="cyan")
    table.add_column("Input", justify="right")
    table.add_column("Output", style="green", justify="right")

    for key, value in result.weights.items():
        table.add_row(str(key), f"{original[key]:g}", f"{value:.1f}")
    table.add_row("[bold]Total[/bold]", f"{sum(original.values()):g}", f"{result.total:.1f}")
    console.print(table)

    if show_trace:
        trace = result.trace
        console.print(
            f"[dim]shift={trace.floor_shift:g} ceiling_key={trace.ceiling_key} "
            f"median={trace.median} scale={trace.scale_factor} "
            f"residual={trace.residual:+g} residual_key={trace.residual_key}[/dim]"
        )


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the equalize command."""
    parser = argparse.ArgumentParser(
        description="Equalize labeled weights to a target sum.",
        prog="python -m src.cli.equalize_weights",
    )
    configure_equalize_parser(parser)
    return run_equalize_command(parser.parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
