"""
PTBuilder Main Entry Point - CLI Argument Parsing and Application Bootstrap

PURPOSE:
    Entry point for the ptbuilder CLI tool. Loads the configuration and the
    catalog, then either lists catalog entries, or replays a topology draft
    file into a fresh session and validates it or prints the Builder script.

WHO READS ME:
    - Users: via CLI command `ptbuilder` or `python -m ptbuilder`

WHO I READ:
    - config.py: Configuration loading and defaults
    - catalog.py: Catalog loading
    - session.py: BuilderSession operations
    - draft.py: draft file replay
    - colorlog.py: Custom log formatting

FLOW:
    1. Parse CLI arguments (create_argparser)
    2. Load configuration from config.toml (or defaults)
    3. Load the catalog (fatal on failure)
    4. --list-catalog: print the listing and exit
    5. Replay the draft, then validate only or generate (gated by validation
       unless --no-validate) to stdout or --output
"""

import argparse
import logging
import os
import sys

import ptbuilder
from ptbuilder.catalog import Catalog, CatalogKind, MAX_LIST_LIMIT
from ptbuilder.colorlog import CustomFormatter
from ptbuilder.config import Config
from ptbuilder.draft import load_draft
from ptbuilder.models import PtBuilderError
from ptbuilder.session import BuilderSession

_LOGGER = logging.getLogger(__name__)


def valid_limit(value):
    ivalue = int(value)
    if ivalue < 1 or ivalue > MAX_LIST_LIMIT:
        raise argparse.ArgumentTypeError(
            f"invalid value {value}. Valid values are from 1-{MAX_LIST_LIMIT}."
        )
    return ivalue


def create_argparser(parser_class=argparse.ArgumentParser):
    """create the argparser for ptbuilder"""
    parser = parser_class(
        prog=ptbuilder.__name__, description=ptbuilder.__description__
    )
    config_settings = parser.add_argument_group("configuration")

    config_settings.add_argument(
        "-c",
        "--config",
        dest="configfile",
        help="Use the configuration from this file, defaults to %(default)s",
        default="config.toml",
    )
    config_settings.add_argument(
        "-w",
        "--write",
        dest="writeconfig",
        action="store_true",
        help="Write the default configuration to a file and exit",
        default=False,
    )
    config_settings.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s {ptbuilder.__version__}"
    )
    config_settings.add_argument(
        "-l",
        "--loglevel",
        type=str,
        default=os.environ.get("LOG_LEVEL", "WARN"),
        help="DEBUG, INFO, WARN, ERROR, CRITICAL, defaults to %(default)s",
    )

    catalog = parser.add_argument_group("catalog")
    catalog.add_argument(
        "--list-catalog",
        dest="list_kind",
        choices=[kind.value for kind in CatalogKind],
        help="List the known device models, module models or link types and exit",
    )
    catalog.add_argument(
        "--starts-with",
        dest="starts_with",
        type=str,
        default="",
        help="Only list entries starting with this prefix (case-insensitive)",
    )
    catalog.add_argument(
        "--limit",
        type=valid_limit,
        default=None,
        help=f"List at most this many entries (1-{MAX_LIST_LIMIT}), defaults to the configured limit",
    )

    parser.add_argument(
        "--validate-only",
        dest="validate_only",
        action="store_true",
        default=False,
        help="Only validate the draft and print the problems found",
    )
    parser.add_argument(
        "--no-validate",
        dest="with_validation",
        action="store_false",
        default=True,
        help="Generate the script even if the draft does not validate",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="output",
        metavar="FILE",
        type=str,
        help="Write the Builder script to FILE instead of stdout",
    )
    parser.add_argument(
        "--overwrite",
        dest="overwrite",
        action="store_true",
        default=False,
        help="Allow overwriting an existing output file when using --output",
    )
    parser.add_argument(
        "draft",
        nargs="?",
        help="Topology draft file (TOML) to build the script from",
    )
    return parser


def get_log_level(level_name: str) -> tuple[int, bool]:
    log_levels = {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
        "NOTSET": logging.NOTSET,
    }
    level_name = level_name.upper()
    if level_name in log_levels:
        return log_levels[level_name], False
    return logging.WARNING, True


def setup_logging(loglevel: str):
    """sets up the logging, takes the given loglevel and uses the custom,
    colorful log formatter
    """
    logging.basicConfig(level=logging.WARN)
    level, unknown_loglevel = get_log_level(loglevel)
    logging.root.setLevel(level)
    for handler in logging.root.handlers:
        handler.setFormatter(CustomFormatter.for_handler(handler))
    if unknown_loglevel:
        _LOGGER.warning("Unknown log level: %s", loglevel.upper())


def write_script(script: str, filename: str, overwrite: bool):
    if os.path.exists(filename) and not overwrite:
        raise PtBuilderError(
            f"output file {filename} exists, use --overwrite to replace it"
        )
    with open(filename, "w", encoding="utf-8") as handle:
        handle.write(script + "\n")
    _LOGGER.warning("Builder script written to %s", filename)


def run(args, cfg: Config) -> int:
    """run the requested action, returns the exit status"""
    catalog = Catalog.load(cfg.catalog or None)
    session = BuilderSession(catalog, cfg)

    if args.list_kind:
        listing = session.list_catalog(
            args.list_kind, limit=args.limit, starts_with=args.starts_with
        )
        print(f"{listing.kind}: {listing.returned} of {listing.total_known}")
        for entry in listing.entries:
            print(entry)
        return 0

    if not args.draft:
        raise PtBuilderError("need a topology draft file (or --list-catalog)")
    load_draft(session, args.draft)

    if args.validate_only:
        report = session.validate()
        for error in report.errors:
            print(error)
        print(report.text)
        return 0 if report.valid else 1

    result = session.generate(with_validation=args.with_validation)
    if not result.ok:
        print(result.text, file=sys.stderr)
        return 1
    if args.output:
        write_script(result.script, args.output, args.overwrite)
    else:
        print(result.script)
    return 0


def main(argv=None):
    """main function, returns 0 on success, 1 otherwise"""
    parser = create_argparser()
    args = parser.parse_args(argv)
    setup_logging(args.loglevel)

    cfg = Config.load(args.configfile)
    if args.writeconfig:
        cfg.save(args.configfile)
        return 0

    if args.validate_only and not args.with_validation:
        parser.error("--validate-only and --no-validate are mutually exclusive")

    try:
        retval = run(args, cfg)
    except PtBuilderError as exc:
        _LOGGER.error(exc)
        retval = 1
    return retval


if __name__ == "__main__":
    sys.exit(main())
