import argparse
import logging
import sys

from .calc import run_loop, run_once
from .version import version

log = logging.getLogger(__name__)

INTERRUPTED = 130


def make_parser(description, with_loop=False):
    parser = argparse.ArgumentParser(description=description)
    if with_loop:
        parser.add_argument(
            "--loop",
            "-l",
            action="store_true",
            help="Keep asking for radii until a zero radius is entered",
        )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log unit conversions and rejected input on stderr",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version",
    )
    return parser


def execute(routine, opts):
    if opts.version:
        print(version)
        sys.exit()

    if opts.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    try:
        status = routine()
    except KeyboardInterrupt:
        log.debug("Interrupted")
        status = INTERRUPTED
    sys.exit(status)


def area_cli(argv=None):
    parser = make_parser(
        "Print the area (sq in) of a circle whose radius is given in cm."
    )
    execute(run_once, parser.parse_args(argv))


def loop_cli(argv=None):
    parser = make_parser(
        "Print the area and circumference of circles whose radii are"
        " given in cm, until a zero radius is entered."
    )
    execute(run_loop, parser.parse_args(argv))


def main(argv=None):
    parser = make_parser("Circle area calculator.", with_loop=True)
    opts = parser.parse_args(argv)
    execute(run_loop if opts.loop else run_once, opts)
