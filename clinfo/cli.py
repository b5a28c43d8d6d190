import argparse
import logging
import sys

from clinfo.config import build_config
from clinfo.errors import FatalEnumerationError
from clinfo.report import walk

logger = logging.getLogger(__name__)


class UsageParser(argparse.ArgumentParser):
    """ArgumentParser that answers every bad option with usage and status 1."""

    def error(self, message):
        self.print_help(sys.stderr)
        self.exit(1)


def build_argument_parser():
    parser = UsageParser(
        prog="clinfo",
        description="Dump every OpenCL platform and device property",
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true", default=False,
                        help="This message")
    parser.add_argument("-i", "--image-formats", action="store_true", default=False,
                        help="Print image formats for each device")
    return parser


def parse_args(argv=None):
    parser = build_argument_parser()
    args = parser.parse_args(argv)
    if args.help:
        parser.print_help(sys.stderr)
        parser.exit(1)
    return args


def configure_logging(level=logging.INFO):
    """Send diagnostics to stderr as bare messages, once per process."""
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)


def run(provider, config):
    try:
        for line in walk(provider, config):
            print(line)
    except FatalEnumerationError as exc:
        logger.error("%s", exc)
        return 1
    return 0


def main(argv=None, provider=None):
    # Force UTF-8 output for Windows console
    if sys.platform == 'win32':
        sys.stdout.reconfigure(encoding='utf-8')

    args = parse_args(argv)
    configure_logging()
    if provider is None:
        from clinfo.opencl import OpenCLProvider
        provider = OpenCLProvider()
    return run(provider, build_config(args))
