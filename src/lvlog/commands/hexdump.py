"""lvlog hexdump — trace-level hex dump of a file or stdin.

    lvlog hexdump packet.bin
    printf 'GET / HTTP/1.1\\r\\n' | lvlog hexdump --offset 128

The dump is written as a TRACE record regardless of the configured
threshold; it still needs ``log-trace`` built in.

"""

import argparse
import sys

from lvlog.lib.log_lib import gate
from lvlog.lib.log_lib.levels import Level


def register(subparsers, parents):
    """Register the 'hexdump' subcommand."""
    p = subparsers.add_parser(
        "hexdump",
        parents=parents,
        help="Print a highlighted hex dump of a file or stdin",
        description=(
            "Read bytes from PATH (or stdin when omitted) and print them\n"
            "as an index-annotated hex dump, 8 bytes per line, with CR\n"
            "and LF highlighted."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("path", metavar="PATH", nargs="?", default=None,
                   help="File to dump (default: stdin)")
    p.add_argument("--offset", type=int, default=0, metavar="N",
                   help="Index of the first byte (default: 0)")
    p.set_defaults(func=run)


def _read_input(path):
    if path is None or path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def run(args):
    """Execute the hexdump command."""
    config = args.config
    if not gate.trace_bytes.compiled:
        gate.error(config, "hexdump needs trace output, which is not built in")
        return 1

    try:
        data = _read_input(args.path)
    except OSError as e:
        gate.error(config, "Cannot read {path}: {err}", path=args.path, err=e.strerror)
        return 1

    config = config.with_level(Level.TRACE)
    label = f"{args.path or 'stdin'} ({len(data)} bytes) "
    gate.trace_bytes(config, data, index_offset=args.offset, label=label)
    print("]", file=sys.stderr)
    return 0
