"""lvlog levels — list every level, most severe first."""

import argparse

from lvlog.lib.log_lib.formatting import Alignment, apply_width
from lvlog.lib.log_lib.levels import Level


def non_negative_int(text):
    """argparse type for column counts."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{text}'")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more, got {value}")
    return value


def register(subparsers, parents):
    """Register the 'levels' subcommand."""
    p = subparsers.add_parser(
        "levels",
        parents=parents,
        help="List log levels and the active threshold",
    )
    p.add_argument("--width", type=non_negative_int, default=None, metavar="N",
                   help="Pad each level name to N columns")
    p.add_argument("--align", choices=[a.name.lower() for a in Alignment],
                   default="left", help="Alignment within --width")
    p.set_defaults(func=run)


def format_level_list(threshold, width=None, align="left"):
    """One line per level: ordinal, padded name, and a threshold marker."""
    alignment = Alignment.from_name(align) or Alignment.LEFT
    lines = []
    for level in Level.all_variants():
        name = apply_width(level, width, alignment)
        marker = "  <- threshold" if level is threshold else ""
        shown = "shown" if level >= threshold else "hidden"
        lines.append(f"  {level.ordinal}  {name}  {shown}{marker}")
    return "\n".join(lines)


def run(args):
    """Execute the levels command."""
    print(format_level_list(args.config.log_level, args.width, args.align))
    return 0
