"""
Command line front end.

Example:
    idtemplate -T "1f:l:N+" -D f=John -D l=Smith -n 5
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .config import IdTemplateConfig, check_config
from .errors import IdTemplateError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_EXHAUSTED = 1
EXIT_CONFIG_ERROR = 2


def get_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="Generate identifier candidates from a template"
    )
    parser.add_argument("-T", "--template", help="Template string, e.g. '1f:l:N+'")
    parser.add_argument(
        "-D",
        "--data",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Data field used by the template (repeatable)",
    )
    parser.add_argument(
        "-n", "--count", type=int, help="Number of candidates to print"
    )
    parser.add_argument("--prefix", help="Prefix of data keys (default: T)")
    parser.add_argument("--seed", type=int, help="Seed for random elements")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--log-level", help="Logging level (default: INFO)")
    return parser.parse_args(argv)


def build_config(args) -> IdTemplateConfig:
    """Merge command line arguments over the file or environment configuration"""
    if args.config:
        config = IdTemplateConfig.from_yaml(args.config)
    else:
        config = IdTemplateConfig.from_env()

    for option in ("template", "count", "prefix", "seed"):
        value = getattr(args, option)
        if value is not None:
            setattr(config, option, value)
    if args.log_level:
        config.log_level = args.log_level.upper()

    for item in args.data:
        key, sep, value = item.partition("=")
        if not sep:
            raise ValueError(f"Data must be given as KEY=VALUE, got {item!r}")
        config.data[key] = value

    check_config(config)
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = get_args(argv)
    try:
        config = build_config(args)
    except (ValueError, ValidationError, OSError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    template = config.create_template()
    printed = 0
    try:
        for candidate in template:
            print(candidate)
            printed += 1
            if printed >= config.count:
                break
    except IdTemplateError as e:
        logger.error(str(e))
        return getattr(e, "exit_code", EXIT_CONFIG_ERROR)

    if printed == 0:
        logger.warning("Template produced no candidates")
        return EXIT_EXHAUSTED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
