"""
Domain changer command‑line interface.

This module provides a small command‑line utility that reads text from a
file (or standard input), replaces links to configured domains with their
privacy‑friendly counterparts, and writes the processed text to a file (or
standard output).  The domain pairs come from a JSON configuration file
(``--config`` or the ``DOMAIN_CHANGER_CONFIG`` environment variable); without
one the built‑in default pairs are used.

---

# Quick ways to run the script

1. Using a file

>>> domain-changer examples/input.txt -o examples/output.txt

*If you omit `-o …` the result will be printed on the console.*


2. Piping data

>>> echo "Watch https://www.youtube.com/watch?v=dQw4w9WgXcQ" | domain-changer


3. Listing the domains a text refers to, without rewriting it

>>> domain-changer --extract examples/input.txt


4. Writing the active configuration as a starting point for your own

>>> domain-changer --dump-config > my-domains.json

A configuration file looks like:

    {"domains": [{"old": "https://twitter.com/", "new": "https://nitter.net/"}]}
"""

import argparse
import sys
from typing import Optional

from domain_changer_lib import Config, DomainChanger, ValidationError
from domain_changer_lib.base.constants import CONFIG_FILE, LOG_LEVEL, LOG_LEVELS
from domain_changer_lib.utils.logger import prepare_logger

EXIT_INVALID_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Change links to configured domains into other domains."
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Input file (defaults to STDIN).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=argparse.FileType("w", encoding="utf-8"),
        default=sys.stdout,
        help="Output file (defaults to STDOUT).",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=CONFIG_FILE,
        help="JSON file with domain pairs (defaults to $DOMAIN_CHANGER_CONFIG, "
        "then to the built-in pairs).",
    )
    parser.add_argument(
        "--extract",
        action="store_true",
        help="Only list the configured domains found in the input.",
    )
    parser.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the active configuration as JSON and exit.",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=LOG_LEVELS,
        help="Logging level (defaults to $DOMAIN_CHANGER_LOG_LEVEL or WARNING).",
    )
    return parser


def load_config(config_path: Optional[str]) -> Config:
    """
    Read a :class:`Config` from *config_path*, or return the default one
    when no path is given.

    Raises
    ------
    OSError
        The file cannot be read.
    ValidationError
        The file content is not a valid configuration.
    """
    if not config_path:
        return Config.default()

    with open(config_path, "rt", encoding="utf-8") as config_file:
        return Config.from_json(config_file.read())


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # argparse does not check a default against ``choices``
    if args.log_level not in LOG_LEVELS:
        parser.error(
            f"invalid log level {args.log_level!r} "
            f"(choose from {', '.join(LOG_LEVELS)})"
        )

    logger = prepare_logger("domain_changer", level=args.log_level)

    try:
        config = load_config(args.config)
    except (OSError, ValidationError) as e:
        logger.error("Cannot load config %s: %s", args.config, e)
        return EXIT_INVALID_CONFIG
    logger.info("Loaded %d domain pairs", len(config.domains))

    if args.dump_config:
        args.output.write(config.to_json() + "\n")
    elif args.extract:
        changer = DomainChanger(config=config, logger=logger)
        for domain in changer.extract_old_domains(args.input.read()):
            args.output.write(f"{domain.old} -> {domain.new}\n")
    else:
        changer = DomainChanger(config=config, logger=logger)
        args.output.write(changer.parse_string(args.input.read()))

    args.output.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
