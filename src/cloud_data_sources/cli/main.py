"""Command-line interface."""

import argparse
import sys
from typing import Optional

import oci
from botocore.exceptions import BotoCoreError, ClientError

from cloud_data_sources import __version__
from cloud_data_sources.cli.console import print_error, print_json, print_result
from cloud_data_sources.config.manager import ConfigurationManager
from cloud_data_sources.datasource.exceptions import DataSourceError
from cloud_data_sources.helpers.logger import setup_logging
from cloud_data_sources.helpers.utils import load_json_data
from cloud_data_sources.provider import DataSourceProvider


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cloud-data-sources",
        description="Read cloud resources as declarative data sources",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="Settings file (JSON, YAML or TOML)")
    parser.add_argument("--log-level", help="Override the configured log level")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List available data sources")

    read_parser = subparsers.add_parser("read", help="Read a data source and print its state")
    read_parser.add_argument("data_source", help="Data source name, see 'list'")
    source = read_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--data", help="Arguments as a JSON string")
    source.add_argument("--file", help="Arguments from a JSON file")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "list":
        for name in DataSourceProvider.data_source_names():
            print_result(name)
        return 0

    # stdout is reserved for the state, log to stderr until config is loaded
    setup_logging(log_level=args.log_level or "WARNING")

    try:
        config_manager = ConfigurationManager(args.config)
        logging_config = config_manager.get_app_config().logging
        setup_logging(
            log_level=args.log_level or logging_config.level,
            log_destination=logging_config.destination,
            log_dir=logging_config.directory,
            log_filename=logging_config.filename,
            json_format=logging_config.json_format,
        )

        arguments = load_json_data(json_str=args.data, json_file=args.file)
        if not isinstance(arguments, dict):
            raise ValueError("Data source arguments must be a JSON object")

        state = DataSourceProvider(config_manager).read(args.data_source, arguments)
    except (DataSourceError, ValueError, OSError) as e:
        print_error(str(e))
        return 1
    except (oci.exceptions.ServiceError, ClientError, BotoCoreError) as e:
        print_error(f"{args.data_source} read failed: {e}")
        return 1

    print_json(state)
    return 0


def cli_main() -> None:
    """Entry point function for console scripts."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
