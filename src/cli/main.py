import argparse
import sys
from typing import Optional

from .equalize_weights import configure_equalize_parser, run_equalize_command


def main(args: Optional[list[str]] = None) -> int:
    """
    Main entry point for the 'equalizer' CLI.
    """
    parser = argparse.ArgumentParser(
        description="Equalizer: outlier-damped weight renormalization"
    )
    subparsers = parser.add_subparsers(
        dest="command", required=True, help="Subcommands"
    )

    # -------------------------------------------------------------------------
    # Subcommand: equalize
    # -------------------------------------------------------------------------
    equalize_parser = subparsers.add_parser(
        "equalize",
        help="Equalize labeled weights to a target sum",
        description="Correct outliers, rescale, and reconcile weights so they sum to the target.",
    )
    configure_equalize_parser(equalize_parser)

    # -------------------------------------------------------------------------
    # Parse & Execute
    # -------------------------------------------------------------------------
    parsed_args = parser.parse_args(args)

    if parsed_args.command == "equalize":
        return run_equalize_command(parsed_args)

    return 0


if __name__ == "__main__":
    sys.exit(main())
