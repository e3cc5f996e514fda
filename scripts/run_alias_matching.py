"""Script to match 311 neighborhood labels to boundary names and write aliases."""

import argparse
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.aliases.pipeline import run_pipeline, summarize_context
from src.utils.config import load_config
from src.utils.logging import setup_logging_from_config


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Attach 311 neighborhood aliases to neighborhood boundaries"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML configuration file (default: config/config.yaml)",
    )
    parser.add_argument(
        "--url",
        type=str,
        help="Boundary endpoint URL",
    )
    parser.add_argument(
        "--cache-path",
        type=str,
        help="Local cache path for the boundary GeoJSON",
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Path to write the boundaries with aliases",
    )
    parser.add_argument(
        "--source",
        action="append",
        dest="sources",
        help="Tab-delimited 311 extract to scan (repeatable, replaces configured sources)",
    )
    parser.add_argument(
        "--force-refresh",
        action="store_true",
        help="Fetch boundaries from the endpoint even if a cached copy exists",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Optional log file path",
    )
    return parser.parse_args(argv)


def apply_overrides(config, args):
    """Apply command-line overrides on top of the loaded configuration."""
    if args.url:
        config["boundaries"]["url"] = args.url
    if args.cache_path:
        config["boundaries"]["cache_path"] = args.cache_path
    if args.output:
        config["output"]["path"] = args.output
    if args.sources:
        config["sources"] = args.sources

    logging_config = config.setdefault("logging", {}) or {}
    if args.log_level:
        logging_config["level"] = args.log_level
    if args.log_file:
        logging_config["file"] = args.log_file
    config["logging"] = logging_config
    return config


def main(argv=None):
    """Main function to run the alias matching pipeline."""
    args = parse_args(argv)

    config = apply_overrides(load_config(args.config), args)
    setup_logging_from_config(config)

    context = run_pipeline(config, force_refresh=args.force_refresh)
    summary = summarize_context(context)

    print("\n" + "=" * 80)
    print("SUMMARY")
    print("=" * 80)
    print(f"Total neighborhoods: {summary['total_neighborhoods']}")
    print(f"Aliased: {summary['aliased_count']}")
    print(f"Without alias: {len(summary['unaliased_names'])}")
    for path, count in summary["unmatched_counts"].items():
        print(f"Unmatched values in {path}: {count}")
    print(f"Output: {summary['final_path']}")
    print("=" * 80)


if __name__ == "__main__":
    main()
