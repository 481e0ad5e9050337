"""Click command for creating a new project."""

import sys

import click

from grumpy.cargo_command import Cargo
from grumpy.entry_script import create_entry_script
from grumpy.new_cmd.new_command import NewCommand
from grumpy.new_cmd.new_opts import NewOpts


@click.command("new")
@click.argument("project_name")
@click.option("-b", "--bin-only", is_flag=True, help="Create a binary-only project.")
@click.option("-l", "--lib-only", is_flag=True, help="Create a library-only project.")
@click.option(
    "-s", "--script-name", default=None,
    help="What to call the executable script, defaults to main.",
)
@click.pass_obj
def new_cmd(config, project_name, bin_only, lib_only, script_name):
    """Create a new project."""
    opts = NewOpts(
        project_name=project_name,
        bin_only=bin_only,
        lib_only=lib_only,
        script_name=script_name,
    )
    command = NewCommand(opts, Cargo(config.cargo), create_entry_script)
    sys.exit(command.execute())
