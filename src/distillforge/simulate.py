import argparse
import os
import sys

from loguru import logger

from .catalog import SUBSTANCES
from .errors import InvalidParameterError
from .result import (
    generate_series_excel,
    plot_series,
    save_series_csv,
    save_series_json,
)
from .scenario import Scenario
from .thermo import boiling_point
from .validate import validate_scenario


def _load_scenario(fname):
    if not os.path.exists(fname):
        logger.error(f"Scenario file '{fname}' not found.")
        raise SystemExit(1)

    try:
        return validate_scenario(fname)
    except Exception as e:
        logger.error(f"Failed to validate scenario file '{fname}': {e}")
        raise SystemExit(1)


def _cmd_run(args):
    """Run every model of a scenario JSON file and export the series."""
    fname = args.scenario
    config = _load_scenario(fname)

    scenario = Scenario(config)
    try:
        results = scenario.run()
    except (ValueError, ArithmeticError) as e:
        logger.error(f"Scenario '{scenario.name}' failed: {e}")
        raise SystemExit(1)

    base_name = os.path.splitext(os.path.basename(fname))[0]
    output_dir = args.output_dir

    try:
        generate_series_excel(results, f"{base_name}_series.xlsx", output_dir)
    except InvalidParameterError as e:
        logger.error(f"Export of scenario '{scenario.name}' failed: {e}")
        raise SystemExit(1)
    save_series_json(results, f"{base_name}_series.json", output_dir)
    save_series_json(scenario.metrics, f"{base_name}_metrics.json", output_dir)
    for run_name, series in results.items():
        save_series_csv(series, f"{base_name}_{run_name}.csv", output_dir)
        if not args.no_plots:
            plot_series(series, run_name, f"{base_name}_{run_name}.png", output_dir)
    logger.info(f"Saved {len(results)} series to '{output_dir}'")


def _cmd_validate(args):
    """Validate a scenario JSON file."""
    _load_scenario(args.scenario)
    logger.info(f"Scenario '{args.scenario}' is valid.")


def _cmd_substances(args):
    """List the substance catalog with normal boiling points."""
    for name, params in SUBSTANCES.items():
        print(
            f"{name:<10} A={params.A:<9g} B={params.B:<9g} C={params.C:<8g} "
            f"Tb={boiling_point(params):.1f} C"
        )


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="DistillForge - Water Distillation Unit Models",
        prog="distillforge",
    )
    parser.add_argument("--log-level", default="INFO", help="Log level (default: INFO)")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # distillforge run
    run_parser = subparsers.add_parser("run", help="Run a scenario and export its series")
    run_parser.add_argument("scenario", help="Path to the scenario JSON file")
    run_parser.add_argument("--output-dir", "-o", default="outputs", help="Output directory (default: outputs)")
    run_parser.add_argument("--no-plots", action="store_true", help="Skip chart generation")

    # distillforge validate
    validate_parser = subparsers.add_parser("validate", help="Validate a scenario JSON file")
    validate_parser.add_argument("scenario", help="Path to the scenario JSON file")

    # distillforge substances
    subparsers.add_parser("substances", help="List the built-in substance catalog")

    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    if args.command is None:
        parser.print_help()
        raise SystemExit(1)

    commands = {
        "run": _cmd_run,
        "validate": _cmd_validate,
        "substances": _cmd_substances,
    }
    commands[args.command](args)


if __name__ == "__main__":
    main()
