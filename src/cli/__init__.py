"""Command-line interface modules.

This package provides CLI commands for equalizing labeled weights.

Available Commands:
-------------------

main.py
    Entry point for the 'equalizer' console script

    Usage:
        equalizer equalize KEY=VALUE [KEY=VALUE ...] [options]

equalize_weights.py
    Equalize labeled weights to a target sum

    Usage:
        python -m src.cli.equalize_weights KEY=VALUE [KEY=VALUE ...] [options]

    Options:
        --target M: Target sum (default: 100.0)
        --format {table|json}: Output format (default: table)
        --show-trace: Include intermediate stage values
        --log-level {DEBUG|INFO|WARNING|ERROR}: Logging level (default: WARNING)

    Examples:
        # Floor and ceiling correction, then rescale to 10
        python -m src.cli.equalize_weights a=1 b=2 c=-3 --target 10

        # JSON output with the stage trace
        python -m src.cli.equalize_weights x=1 y=1 z=1 --target 10 --format json --show-trace

Configuration:
--------------

Engine parameters are loaded from `src/config/parameters.py` using Pydantic models.
"""
