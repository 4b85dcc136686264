# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the ModelInfo command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError

from modelinfo.attributes.finder import AttributeFinder
from modelinfo.cli.render import render_json, render_table
from modelinfo.records.base import MassAssignmentError
from modelinfo.records.introspection import RecordResolutionError, resolve_record
from modelinfo.schema.snapshot import (
    SchemaSnapshotError,
    SnapshotSchemaSource,
    TableNotFoundError,
    load_schema_snapshot,
)
from modelinfo.schema.sqlalchemy_source import SqlAlchemySchemaSource
from modelinfo.settings.config import CONFIG_FILE_NAME, OUTPUT_FORMATS, ConfigError, ModelInfoConfig, load_config

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the ModelInfo CLI."""
    parser = argparse.ArgumentParser(
        prog="modelinfo",
        description="ModelInfo - inspect the attributes of record types",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # attributes subcommand
    attributes_parser = subparsers.add_parser(
        "attributes",
        help="List the attributes of a record type",
        description="Resolve the column and virtual attributes of a record type.",
    )
    attributes_parser.add_argument(
        "model",
        help="Import path of the record class, e.g. 'app.models:User'",
    )
    source_group = attributes_parser.add_mutually_exclusive_group()
    source_group.add_argument(
        "--database-url",
        help="SQLAlchemy URL of the database to reflect the table from",
    )
    source_group.add_argument(
        "--schema-file",
        help="YAML schema snapshot to read the table from instead of a database",
    )
    attributes_parser.add_argument(
        "--schema",
        help="Database schema containing the table (default: the connection's default schema)",
    )
    attributes_parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        help="Output format (default: table)",
    )
    attributes_parser.add_argument(
        "--config",
        help=f"Configuration file (default: {CONFIG_FILE_NAME} in the current directory, if present)",
    )
    attributes_parser.add_argument(
        "--app-dir",
        default=".",
        help="Directory prepended to the import path before loading the model (default: current directory)",
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

logger = logging.getLogger(__name__)

console = Console()


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "attributes":
        return _cmd_attributes(args)
    return 0


def _cmd_attributes(args: argparse.Namespace) -> int:
    """Handle the attributes subcommand."""
    try:
        config = _load_effective_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not config.database_url and not config.schema_file:
        print(
            "Error: no schema source configured. Pass --database-url or --schema-file, "
            f"or set one in {CONFIG_FILE_NAME}.",
            file=sys.stderr,
        )
        return 1

    app_dir = str(Path(args.app_dir).resolve())
    if app_dir not in sys.path:
        sys.path.insert(0, app_dir)

    try:
        record = resolve_record(args.model)
    except (RecordResolutionError, MassAssignmentError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if config.schema_file:
        try:
            snapshot = load_schema_snapshot(Path(config.schema_file))
            attributes = AttributeFinder(SnapshotSchemaSource(snapshot)).attributes(record)
        except (SchemaSnapshotError, TableNotFoundError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
    else:
        try:
            engine = create_engine(config.database_url)
        except (SQLAlchemyError, ValueError) as exc:
            print(f"Error: invalid database URL: {exc}", file=sys.stderr)
            return 1
        try:
            attributes = AttributeFinder(SqlAlchemySchemaSource(engine, schema=config.schema)).attributes(record)
        except SQLAlchemyError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        finally:
            engine.dispose()

    logger.debug("Resolved %d attributes for %s", len(attributes), args.model)
    if config.format == "json":
        print(render_json(attributes))
    else:
        console.print(render_table(attributes, title=record.get_table()))
    return 0


def _load_effective_config(args: argparse.Namespace) -> ModelInfoConfig:
    """Load the configuration file, if any, and apply command-line overrides."""
    if args.config:
        config = load_config(Path(args.config))
    elif Path(CONFIG_FILE_NAME).exists():
        config = load_config(Path(CONFIG_FILE_NAME))
    else:
        config = ModelInfoConfig()

    if args.database_url:
        config.database_url = args.database_url
        config.schema_file = None
    if args.schema_file:
        config.schema_file = args.schema_file
        config.database_url = None
    if args.schema:
        config.schema = args.schema
    if args.format:
        config.format = args.format
    return config
