import argparse
import logging
import os
import sys
import time

from funkdigen import __version__
from funkdigen.digraph6 import encode
from funkdigen.digraphs import digraphs
from funkdigen.render import render, render_component, to_text

logger = logging.getLogger(__name__)


def size_arg(value):
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid size: {value!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"size must be nonnegative, got {n}")
    return n


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="funkdigen",
        description="Generate functional digraphs up to isomorphism.",
    )
    parser.add_argument("size", metavar="SIZE", type=size_arg, help="Number of vertices")
    parser.add_argument("-c", "--connected", action="store_true",
                        help="Only generate connected digraphs")
    parser.add_argument("-i", "--internal", action="store_true",
                        help="Print the internal isomorphism codes instead of digraph6")
    parser.add_argument("-l", "--loopless", action="store_true",
                        help="Omit self-loops from the digraph6 output")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="Count the digraphs without printing them")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log progress messages to stderr")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def format_duration(seconds):
    """Format an elapsed time with two decimals, e.g. 1.20s or 350.00µs."""
    for unit, scale in (("s", 1), ("ms", 1e-3), ("µs", 1e-6)):
        if seconds >= scale:
            return f"{seconds / scale:.2f}{unit}"
    return f"{seconds / 1e-9:.2f}ns"


def format_line(code, args):
    if args.internal:
        return to_text(code)
    f = render_component(code) if args.connected else render(code)
    return encode(f, loopless=args.loopless).decode("ascii").rstrip("\n")


def main(argv=None):
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("funkdigen").setLevel(level)

    n = args.size
    logger.debug("generating %s digraphs on %d vertices",
                 "connected" if args.connected else "all", n)
    start = time.perf_counter()
    count = 0
    out = sys.stdout
    try:
        for code in digraphs(n, connected=args.connected):
            count += 1
            if not args.quiet:
                out.write(format_line(code, args) + "\n")
        out.flush()
    except BrokenPipeError:
        # Keep the interpreter from failing again on its final flush.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, out.fileno())
        logger.debug("output closed after %d digraphs", count)
        return 1
    elapsed = time.perf_counter() - start

    print(f"{count} digraphs generated in {format_duration(elapsed)}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
