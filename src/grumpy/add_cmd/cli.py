"""Click command for adding entry scripts to an existing project."""

import sys

import click

from grumpy.add_cmd.add_command import AddCommand
from grumpy.add_cmd.add_opts import AddOpts
from grumpy.cargo_command import Cargo
from grumpy.entry_script import create_entry_script


@click.command("add")
@click.option("-p", "--project-name", default=None, help="Name of project.")
@click.argument("script_name")
@click.pass_obj
def add_cmd(config, project_name, script_name):
    """Add new binaries to an existing project."""
    opts = AddOpts(script_name=script_name, project_name=project_name)
    command = AddCommand(opts, Cargo(config.cargo), create_entry_script)
    sys.exit(command.execute())
