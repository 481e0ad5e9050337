"""Top-level Click group for the grumpy CLI."""

import sys

import click

from grumpy.add_cmd.cli import add_cmd
from grumpy.config import CARGO_ENV_VAR, DEFAULT_CARGO, GrumpyConfig
from grumpy.new_cmd.cli import new_cmd

CARGO_SUBCOMMAND = "grumpy"


@click.group()
@click.option(
    "--cargo", envvar=CARGO_ENV_VAR, default=None,
    help="Path to the cargo executable (defaults to $CARGO, then cargo on PATH).",
)
@click.pass_context
def main(ctx, cargo):
    """Automate standard cargo project creation and maintenance.

    Requires cargo-edit to be installed.
    """
    ctx.obj = GrumpyConfig(cargo=cargo or DEFAULT_CARGO)


main.add_command(new_cmd)
main.add_command(add_cmd)


def cargo_main(argv=None):
    """Entry point for ``cargo grumpy``.

    Cargo runs ``cargo-grumpy grumpy <args>``, so the repeated subcommand
    name is dropped before click parses the rest.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] == CARGO_SUBCOMMAND:
        args = args[1:]
    main(args=args, prog_name="cargo grumpy")
