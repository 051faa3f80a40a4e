"""Command line entry point: load a schema, generate definitions, write the file."""
import argparse
import logging
import sys
from typing import List, Optional, Sequence
from pocketbase_typegen import __version__
from pocketbase_typegen.core.config import Settings, load_settings
from pocketbase_typegen.core.errors import MissingSchemaSource, TypegenError
from pocketbase_typegen.core.logging import configure_logging
from pocketbase_typegen.generators.typescript_gen import generate
from pocketbase_typegen.generators.typescript_gen.writer import save_file
from pocketbase_typegen.schemas.collections import CollectionRecord
from pocketbase_typegen.sources import from_database, from_json, from_url

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pocketbase-typegen",
        description="Generate TypeScript types from a PocketBase schema",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-d", "--db", help="path to the pocketbase SQLite database")
    parser.add_argument("-j", "--json", help="path to JSON schema exported from pocketbase admin UI")
    parser.add_argument("-u", "--url", help="URL to your hosted pocketbase instance. When using this option you must also provide email and password options")
    parser.add_argument("-e", "--email", help="email for an admin pocketbase user. Use this with the --url option")
    parser.add_argument("-p", "--password", help="password for an admin pocketbase user. Use this with the --url option")
    parser.add_argument("-o", "--out", help="path to save the typescript output file (default: pocketbase-types.ts)")
    parser.add_argument(
        "--env",
        nargs="?",
        const=".env",
        default=None,
        help="flag to use environment variables for configuration. Add PB_TYPEGEN_URL, PB_TYPEGEN_EMAIL, PB_TYPEGEN_PASSWORD to your .env file. Optionally provide a path to your .env file",
    )
    return parser


def load_schema(args: argparse.Namespace, config: Settings) -> List[CollectionRecord]:
    """Pick the schema source from the arguments, falling back to env settings with --env."""
    if args.db:
        return from_database(args.db)
    if args.json:
        return from_json(args.json)
    if args.url:
        return from_url(args.url, args.email or "", args.password or "", timeout=config.request_timeout)
    if args.env is not None:
        if config.db:
            return from_database(config.db)
        if config.json_path:
            return from_json(config.json_path)
        if config.url:
            return from_url(config.url, config.email or "", config.password or "", timeout=config.request_timeout)
    raise MissingSchemaSource()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_settings(args.env)
    configure_logging(config.log_level)

    out_path = args.out or config.out
    try:
        collections = load_schema(args, config)
        type_string = generate(collections)
        save_file(out_path, type_string)
    except TypegenError as e:
        log.error("%s", e, extra={"stage": "typegen"})
        return 1
    except OSError as e:
        log.error("Could not write %s: %s", out_path, e, extra={"stage": "write"})
        return 1

    log.info("Created typescript definitions at %s", out_path, extra={"stage": "write"})
    return 0


if __name__ == "__main__":
    sys.exit(main())
