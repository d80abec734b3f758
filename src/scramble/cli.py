"""Command line driver: read a definition, write a scramble.

    python -m scramble.cli -i data/rubiks_3x3x3x3.def -o scramble.hsc
"""
import argparse
import logging
import sys
from typing import List, Optional

import scramble.config as config
from scramble.defparse import DefinitionError, parse_file
from scramble.render import generate
from scramble.settings import Settings

log = logging.getLogger(__name__)


def cli(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Command line interface"""
    parser = argparse.ArgumentParser(prog="scramble-gen",
                                     description="Generate a scramble for Hyperspeedcube")
    parser.add_argument("-i", "--input", type=str, required=True,
                        help="Path of the definition file")
    parser.add_argument("-o", "--output", type=str, default=None,
                        help="Where to put the scramble, or else simply print to stdout")
    parser.add_argument("--settings", type=str, default=None,
                        help="YAML file with settings (app_name, log_level)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log debugging detail")
    parser.add_argument("--version", action="version", version=f"%(prog)s {config.VERSION}")
    return parser.parse_args(argv)


def setup_logging(level: int):
    for handler in logging.root.handlers[:]:  # make sure all handlers are removed
        logging.root.removeHandler(handler)
    logging.root.setLevel(level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter('%(asctime)s: %(levelname)s [%(name)s:%(funcName)s:%(lineno)d] - %(message)s'))
    logging.root.addHandler(handler)


def run(args: argparse.Namespace) -> int:
    settings = Settings()
    if args.settings:
        with open(args.settings, encoding="utf-8") as f:
            settings.read_yaml(f)
    setup_logging(logging.DEBUG if args.verbose else settings.log_level())
    log.debug(f"Settings:\n{settings.dump_yaml()}")

    with open(args.input, encoding="utf-8") as f:
        defn = parse_file(f)
    log.info(f"Read {defn} from {args.input}")

    # Render fully before touching the output file
    text = generate(defn, app_name=settings["app_name"])

    if args.output:
        with open(args.output, "w", encoding="utf-8") as out:
            out.write(text)
        log.info(f"Wrote scramble to {args.output}")
    else:
        sys.stdout.write(text)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = cli(argv)
    try:
        return run(args)
    except DefinitionError as e:
        log.error(f"Invalid definition {args.input}: {e}")
    except (OSError, ValueError) as e:
        log.error(str(e))
    return 1


if __name__ == "__main__":
    sys.exit(main())
