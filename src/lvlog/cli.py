"""Main CLI entry point for lvlog.

Implements a Docker-style two-pass argument parser:
  1. First pass: extract global flags (--log-level, -v, -Q, --no-color)
  2. Second pass: dispatch to subcommand with shared parent args

Global flags can appear before OR after the subcommand:
  lvlog -vv emit debug "hello"      # works
  lvlog emit debug "hello" -vv      # also works

Subcommands self-register via register(subparsers, parents) convention.
"""

import argparse
import sys

from lvlog._version import PIP_VERSION, VERSION


# ---------------------------------------------------------------------------
# Global flags (Docker-style: can precede the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--log-level": {"aliases": ["-l"], "metavar": "LEVEL", "default": None,
                    "help": "Threshold: error, warn, info, verb, debug, trace"},
    "--verbose": {"aliases": ["-v"], "action": "count", "default": 0,
                  "help": "One level louder per -v (-v, -vv, -vvv)"},
    "--quiet": {"aliases": ["-Q"], "action": "count", "default": 0,
                "help": "One level quieter per -Q"},
    "--no-color": {"action": "store_true", "default": False,
                   "help": "Disable colored output"},
    "--force-color": {"action": "store_true", "default": False,
                      "help": "Color even when output is not a terminal"},
}


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        global_parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    global_args, remaining = global_parser.parse_known_args(argv)
    return global_args, remaining


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules.

    Each module in lvlog.commands must export:
      register(subparsers, parents) — add itself to the subparser
      run(args) — execute the command
    """
    from lvlog.commands import emit, hexdump, levels
    return [emit, hexdump, levels]


def _build_parser(commands):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="lvlog",
        description="lvlog — leveled console logging",
        epilog=(
            "Run 'lvlog <command> --help' for details on a specific command.\n"
            "\n"
            "Global flags (--log-level, -v, -Q, --no-color, --force-color)\n"
            "can appear before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"lvlog {VERSION} ({PIP_VERSION})",
    )

    # Add global flags to main parser too (for --help display)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[])

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None, environ=None):
    """Main entry point for the lvlog CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].
        environ: Environment mapping for config resolution (default os.environ)

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    from lvlog.config import resolve_config
    config = resolve_config(global_args, environ=environ)

    # Pass 2: parse subcommand args
    parser = _build_parser(_discover_commands())

    if not remaining:
        parser.print_help()
        return 0

    args = parser.parse_args(remaining)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    # Pass 1 saw the global flags; its values win over pass-2 defaults
    for key, value in vars(global_args).items():
        setattr(args, key, value)
    args.config = config

    # Dispatch
    try:
        return args.func(args) or 0
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1


if __name__ == "__main__":
    sys.exit(main())
