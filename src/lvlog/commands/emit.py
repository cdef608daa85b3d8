"""lvlog emit — write one message through a level gate.

    lvlog emit warn "disk almost full"
    lvlog -v emit info "shown: -v lowers the threshold to INFO"

The message is subject to both gates, so it may print nothing.
"""

import argparse

from lvlog.lib.log_lib import gate
from lvlog.lib.log_lib.levels import Level


def register(subparsers, parents):
    """Register the 'emit' subcommand."""
    p = subparsers.add_parser(
        "emit",
        parents=parents,
        help="Emit a message at a given level",
        description=(
            "Emit MESSAGE at LEVEL. INFO goes to stdout, every other\n"
            "level to stderr. Nothing is written if LEVEL is below the\n"
            "configured threshold."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("level", metavar="LEVEL",
                   help="error, warn, info, verb, debug or trace (or 0-5)")
    p.add_argument("message", metavar="MESSAGE", nargs="+",
                   help="Message text (joined with spaces)")
    p.set_defaults(func=run)


def run(args):
    """Execute the emit command. Returns 2 on an unknown level."""
    config = args.config
    try:
        level = Level.parse(int(args.level) if args.level.isdigit() else args.level)
    except ValueError as e:
        gate.error(config, "{err}: '{name}'", err=e, name=args.level)
        return 2

    text = " ".join(args.message)
    gate.GATES[level](config, text)
    return 0
